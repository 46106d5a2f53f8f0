"""Toggle state machines for conditional field groups in the ticket editor.

Each machine is an enumerated state plus a pure transition function taking
``(state, draft, target)`` and returning ``(new_state, new_draft)``. Drafts
are never mutated in place.

Quantity mode:  limited <-> unlimited (writes/clears the "No Limit" sentinel)
Sale window:    custom <-> beforeAfter (display only, fields preserved)
Details panel:  basic <-> advance (display only)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any

from eventdraft.core.constants import NO_LIMIT

logger = logging.getLogger(__name__)


class QuantityMode(str, Enum):
    LIMITED = "limited"
    UNLIMITED = "unlimited"


class SaleWindowMode(str, Enum):
    CUSTOM = "custom"
    BEFORE_AFTER = "beforeAfter"


class DetailsPanel(str, Enum):
    BASIC = "basic"
    ADVANCE = "advance"


# ── Quantity mode ───────────────────────────────────────────────────


def initial_quantity_mode(draft: Mapping[str, Any]) -> QuantityMode:
    """``unlimited`` iff the draft's quantity is the sentinel."""
    if draft.get("quantity") == NO_LIMIT:
        return QuantityMode.UNLIMITED
    return QuantityMode.LIMITED


def transition_quantity_mode(
    state: QuantityMode,
    draft: Mapping[str, Any],
    target: QuantityMode | str,
) -> tuple[QuantityMode, dict[str, Any]]:
    """Switch quantity mode.

    Going unlimited writes the sentinel. Going limited clears the quantity
    only when it holds the sentinel; a concrete number is left alone.
    """
    target = QuantityMode(target)
    new_draft = dict(draft)
    if target is QuantityMode.UNLIMITED:
        new_draft["quantity"] = NO_LIMIT
    elif new_draft.get("quantity") == NO_LIMIT:
        new_draft["quantity"] = ""
    logger.debug("Quantity mode %s -> %s", state.value, target.value)
    return target, new_draft


# ── Sale window mode ────────────────────────────────────────────────


def initial_sale_window_mode(draft: Mapping[str, Any]) -> SaleWindowMode:
    # Every session starts on the custom date/time fields.
    return SaleWindowMode.CUSTOM


def transition_sale_window_mode(
    state: SaleWindowMode,
    draft: Mapping[str, Any],
    target: SaleWindowMode | str,
) -> tuple[SaleWindowMode, dict[str, Any]]:
    """Switch the displayed sale-window fields.

    The custom date/time fields and ``saleAfterTicket`` both stay in the
    draft whichever mode is shown.
    """
    target = SaleWindowMode(target)
    logger.debug("Sale window mode %s -> %s", state.value, target.value)
    return target, dict(draft)


# ── Details panel ───────────────────────────────────────────────────


def transition_details_panel(
    state: DetailsPanel,
    draft: Mapping[str, Any],
    target: DetailsPanel | str,
) -> tuple[DetailsPanel, dict[str, Any]]:
    target = DetailsPanel(target)
    return target, dict(draft)
