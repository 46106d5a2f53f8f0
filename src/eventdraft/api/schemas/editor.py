"""Editor request schemas shared by every entity kind."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from eventdraft.services.drafts import InputKind
from eventdraft.services.toggles import DetailsPanel, QuantityMode, SaleWindowMode


class FieldUpdate(BaseModel):
    """One keystroke/change on a draft field."""

    name: str = Field(min_length=1, max_length=64)
    value: Any = None
    input_kind: InputKind = InputKind.TEXT


class QuantityModeUpdate(BaseModel):
    mode: QuantityMode


class SaleWindowModeUpdate(BaseModel):
    mode: SaleWindowMode


class PanelUpdate(BaseModel):
    panel: DetailsPanel
