"""Ticket repository — the event's ticket list."""

from __future__ import annotations

from typing import Any

from eventdraft.repositories.base import BaseRepository


class TicketRepository(BaseRepository):
    """CRUD for tickets."""

    def __init__(self, rows: list[dict[str, Any]] | None = None) -> None:
        super().__init__(collection="tickets", rows=rows)
