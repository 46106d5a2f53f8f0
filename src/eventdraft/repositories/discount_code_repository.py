"""Discount code repository — the event's discount code list."""

from __future__ import annotations

from typing import Any

from eventdraft.repositories.base import BaseRepository


class DiscountCodeRepository(BaseRepository):
    """CRUD for discount codes."""

    def __init__(self, rows: list[dict[str, Any]] | None = None) -> None:
        super().__init__(collection="discount_codes", rows=rows)
