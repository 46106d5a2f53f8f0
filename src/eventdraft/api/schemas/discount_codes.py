"""Discount code entity schemas."""

from __future__ import annotations

from pydantic import BaseModel


class DiscountCodeEditorOpen(BaseModel):
    """Schema for opening the discount code editor; no ID means create."""

    discount_code_id: str | None = None


class TicketOption(BaseModel):
    """One choice in the ticket-type selector."""

    id: str
    name: str
