"""Base repository providing ordered in-memory CRUD for one entity kind."""

from __future__ import annotations

import copy
import logging
import uuid
from typing import Any

logger = logging.getLogger(__name__)


class BaseRepository:
    """Ordered in-memory collection keyed by entity ID.

    Insertion order is display order. Entity repositories extend this class
    and configure ``collection`` for log output. Stored rows are copied on
    the way in and on the way out, so callers never share a row.
    """

    id_field = "id"

    def __init__(self, collection: str, rows: list[dict[str, Any]] | None = None) -> None:
        self.collection = collection
        self._rows: dict[str, dict[str, Any]] = {}
        for row in rows or []:
            self.create(data=row, new_id=row.get(self.id_field))

    # ── helpers ──────────────────────────────────────────────────────

    @staticmethod
    def _generate_id() -> str:
        """Generate a new UUID string."""
        return uuid.uuid4().hex

    # ── read ─────────────────────────────────────────────────────────

    def find_by_id(self, entity_id: str) -> dict[str, Any] | None:
        """Return a single row by ID, or ``None``."""
        row = self._rows.get(entity_id)
        return copy.deepcopy(row) if row is not None else None

    def find_all(self) -> list[dict[str, Any]]:
        """Return every row in insertion order."""
        return [copy.deepcopy(row) for row in self._rows.values()]

    def find_by_field(self, field: str, value: Any) -> list[dict[str, Any]]:
        """Return all rows matching a single field value."""
        return [copy.deepcopy(r) for r in self._rows.values() if r.get(field) == value]

    # ── write ────────────────────────────────────────────────────────

    def create(self, data: dict[str, Any], new_id: str | None = None) -> str:
        """Append a new row and return its ID.

        The ID is either supplied via *new_id* or auto‑generated.
        """
        if new_id is None:
            new_id = self._generate_id()
        if new_id in self._rows:
            raise ValueError(f"Duplicate {self.id_field} in {self.collection}: {new_id}")

        self._rows[new_id] = {**copy.deepcopy(data), self.id_field: new_id}
        logger.debug("Created %s row %s", self.collection, new_id)
        return new_id

    def replace(self, entity_id: str, data: dict[str, Any]) -> int:
        """Replace a row by ID, keeping its position. Returns rows affected."""
        if entity_id not in self._rows:
            return 0
        self._rows[entity_id] = {**copy.deepcopy(data), self.id_field: entity_id}
        logger.debug("Replaced %s row %s", self.collection, entity_id)
        return 1

    def delete(self, entity_id: str) -> int:
        """Delete a row by ID. Returns rows affected."""
        if self._rows.pop(entity_id, None) is None:
            return 0
        logger.debug("Deleted %s row %s", self.collection, entity_id)
        return 1
