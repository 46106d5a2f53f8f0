"""Domain constants for eventdraft."""

from __future__ import annotations

from typing import Any

# ── Quantity ────────────────────────────────────────────────────────
NO_LIMIT = "No Limit"  # Sentinel stored in quantity fields for "unlimited"

# ── Draft Templates ─────────────────────────────────────────────────
# Complete shape of each entity kind. Every key is present in every draft.

TICKET_TEMPLATE: dict[str, Any] = {
    "name": "",
    "price": "",
    "quantity": "",
    "maxPurchaseAmount": NO_LIMIT,
    "enableMaxPurchase": False,
    "purchaseLimit": "",
    "salesStartDate": "",
    "salesStartTime": "",
    "salesEndDate": "",
    "salesEndTime": "",
    "isAdvance": False,
    "advanceAmount": "",
    "description": "",
    "saleAfterTicket": "",
}

DISCOUNT_CODE_TEMPLATE: dict[str, Any] = {
    "code": "",
    "ticketType": "all",
    "discountPercentage": "",
    "maxDiscountAmount": "",
    "minDiscountAmount": "",
    "quantity": "",
}

# ── Ticket-type selector ────────────────────────────────────────────
ALL_TICKETS_OPTION: dict[str, str] = {"id": "all", "name": "All Tickets"}

# ── Discount Code Statuses ──────────────────────────────────────────
DISCOUNT_CODE_STATUSES: list[str] = ["Active", "Expired"]

# ── Editor Labels ───────────────────────────────────────────────────
TICKET_TITLE_CREATE = "New Ticket"
TICKET_TITLE_EDIT = "Edit Ticket"
TICKET_SAVE_CREATE = "Create Ticket"
TICKET_SAVE_EDIT = "Update Ticket"

DISCOUNT_TITLE_CREATE = "Create Coupon Code"
DISCOUNT_TITLE_EDIT = "Edit Coupon Code"
DISCOUNT_SAVE = "Save"

# ── Discount Percentage Bounds ──────────────────────────────────────
DISCOUNT_PERCENTAGE_MIN = 0
DISCOUNT_PERCENTAGE_MAX = 100

# ── Sample Data ─────────────────────────────────────────────────────
# Loaded into a fresh workspace when settings.seed_sample_data is on.

SAMPLE_TICKETS: list[dict[str, Any]] = [
    {"id": "01", "name": "Early Bird", "quantity": 100, "sold": 46, "price": 20.0},
    {"id": "02", "name": "VIP", "quantity": 100, "sold": 46, "price": 20.0},
    {"id": "03", "name": "General Admission", "quantity": 100, "sold": 46, "price": 20.0},
]

SAMPLE_DISCOUNT_CODES: list[dict[str, Any]] = [
    {
        "id": "01",
        "code": "EARLYBIRD10",
        "status": "Active",
        "discountPercentage": 10,
        "maxDiscountAmount": 50,
        "minDiscountAmount": 0,
        "quantity": 100,
    },
    {
        "id": "02",
        "code": "SUMMER2025",
        "status": "Active",
        "discountPercentage": 0,
        "maxDiscountAmount": 5,
        "minDiscountAmount": 0,
        "quantity": 200,
    },
    {
        "id": "03",
        "code": "STUDENTPASS",
        "status": "Expired",
        "discountPercentage": 15,
        "maxDiscountAmount": 10,
        "minDiscountAmount": 0,
        "quantity": 50,
    },
]
