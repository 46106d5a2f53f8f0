"""Entity list service — the canonical, ordered collection behind each editor.

Owns one repository per entity kind and is the editor's commit collaborator:
``save`` routes a committed draft to ``update`` when it carries an ``id`` and
to ``create`` otherwise.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Any

from eventdraft.core.constants import ALL_TICKETS_OPTION

logger = logging.getLogger(__name__)


class EntityListError(Exception):
    """Entity list error with HTTP status hint."""

    def __init__(self, detail: str, status_code: int = 400) -> None:
        self.detail = detail
        self.status_code = status_code
        super().__init__(detail)


class EntityListService:
    """Ordered CRUD over one entity kind."""

    def __init__(self, repo: Any, kind: str) -> None:
        self.repo = repo
        self.kind = kind

    # ── Read ────────────────────────────────────────────────────────

    def list(self, filters: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        """Return entities in display order, optionally filtered by field value."""
        if not filters:
            return self.repo.find_all()
        (field, value), *rest = filters.items()
        items = self.repo.find_by_field(field, value)
        for field, value in rest:
            items = [i for i in items if i.get(field) == value]
        return items

    def get(self, entity_id: str) -> dict[str, Any]:
        entity = self.repo.find_by_id(entity_id)
        if entity is None:
            raise EntityListError(f"{self._label()} not found", status_code=404)
        return entity

    # ── Write ───────────────────────────────────────────────────────

    def create(self, draft: dict[str, Any]) -> dict[str, Any]:
        """Append a new entity with a freshly generated ID."""
        data = {k: v for k, v in draft.items() if k != "id"}
        new_id = self.repo.create(data=data)
        logger.info("Created %s %s", self.kind, new_id)
        return self.get(new_id)

    def update(self, entity_id: str, draft: dict[str, Any]) -> dict[str, Any]:
        """Replace the entity with ``entity_id`` in place."""
        if self.repo.replace(entity_id, draft) == 0:
            raise EntityListError(f"{self._label()} not found", status_code=404)
        logger.info("Updated %s %s", self.kind, entity_id)
        return self.get(entity_id)

    def save(self, draft: dict[str, Any]) -> dict[str, Any]:
        """Commit a draft: update when it has an ``id``, create otherwise."""
        entity_id = draft.get("id")
        if entity_id:
            return self.update(entity_id, draft)
        return self.create(draft)

    def delete(self, entity_id: str) -> None:
        if self.repo.delete(entity_id) == 0:
            raise EntityListError(f"{self._label()} not found", status_code=404)
        logger.info("Deleted %s %s", self.kind, entity_id)

    def _label(self) -> str:
        return self.kind.replace("_", " ").capitalize()


# ── Display helpers ─────────────────────────────────────────────────


def ticket_options(tickets: list[dict[str, Any]]) -> list[dict[str, str]]:
    """Choices for a discount code's ticket-type selector."""
    options = [dict(ALL_TICKETS_OPTION)]
    options.extend({"id": str(t["id"]), "name": str(t.get("name", ""))} for t in tickets)
    return options


def discount_label(discount_code: dict[str, Any]) -> str:
    """List display for a discount: ``"10%"``, or ``"$5.00"`` for flat amounts."""
    percentage = _as_decimal(discount_code.get("discountPercentage"))
    if percentage:
        return f"{percentage.normalize():f}%"
    amount = _as_decimal(discount_code.get("maxDiscountAmount")) or Decimal(0)
    return f"${amount:.2f}"


def _as_decimal(value: Any) -> Decimal | None:
    if value is None or value == "":
        return None
    try:
        number = Decimal(str(value))
    except InvalidOperation:
        return None
    return number if number.is_finite() else None
