"""Ticket entity schemas."""

from __future__ import annotations

from pydantic import BaseModel


class TicketEditorOpen(BaseModel):
    """Schema for opening the ticket editor; no ``ticket_id`` means create."""

    ticket_id: str | None = None
