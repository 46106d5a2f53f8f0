"""Validation engine for discount-code drafts.

``validate_discount_code`` is pure: it maps a draft to ``{field: message}``
and an empty map means the draft may be committed. Every field is checked
on its own, so one bad field never hides another.

No rule ties ``minDiscountAmount`` to ``maxDiscountAmount``. Tickets have
no validator.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from typing import Any

from eventdraft.core.constants import DISCOUNT_PERCENTAGE_MAX, DISCOUNT_PERCENTAGE_MIN

# Pre-compiled pattern for whole numbers (optional sign, digits only)
_INTEGER_RE = re.compile(r"^[+-]?\d+$")

# Plain decimal notation with optional exponent; rejects NaN and Infinity
_NUMBER_RE = re.compile(r"^(?P<sign>[+-]?)(\d+\.?\d*|\.\d+)(?:[eE](?P<exp>[+-]?\d+))?$")


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _parse_number(text: str) -> Decimal | None:
    """Parse a decimal, or None if ``text`` is not one.

    Exponents outside the decimal context's range collapse to zero (large
    negative exponent) or to a signed infinity (large positive exponent), so
    they still land on the range checks.
    """
    match = _NUMBER_RE.match(text)
    if match is None:
        return None
    try:
        return Decimal(text)
    except InvalidOperation:
        exponent = match.group("exp") or ""
        if exponent.startswith("-"):
            return Decimal(0)
        return Decimal("-Infinity") if match.group("sign") == "-" else Decimal("Infinity")


def _check_code(draft: Mapping[str, Any]) -> str | None:
    if not _text(draft.get("code")):
        return "Discount code is required"
    return None


def _check_percentage(draft: Mapping[str, Any]) -> str | None:
    text = _text(draft.get("discountPercentage"))
    if not text:
        return "Discount percentage is required"
    number = _parse_number(text)
    if number is None:
        return "Discount percentage must be a number"
    if not DISCOUNT_PERCENTAGE_MIN <= number <= DISCOUNT_PERCENTAGE_MAX:
        return "Discount percentage must be between 0 and 100"
    return None


def _check_amount(draft: Mapping[str, Any], field: str, label: str) -> str | None:
    text = _text(draft.get(field))
    if not text:
        return f"{label} is required"
    number = _parse_number(text)
    if number is None:
        return f"{label} must be a number"
    if number < 0:
        return f"{label} cannot be negative"
    return None


def _check_quantity(draft: Mapping[str, Any]) -> str | None:
    text = _text(draft.get("quantity"))
    if not text:
        return "Quantity is required"
    if not _INTEGER_RE.match(text):
        return "Quantity must be a whole number"
    if text.startswith("-") or not text.lstrip("+").strip("0"):
        return "Quantity must be greater than 0"
    return None


def validate_discount_code(draft: Mapping[str, Any]) -> dict[str, str]:
    """Return the field error map for a discount-code draft."""
    checks = {
        "code": _check_code(draft),
        "discountPercentage": _check_percentage(draft),
        "maxDiscountAmount": _check_amount(draft, "maxDiscountAmount", "Max discount amount"),
        "minDiscountAmount": _check_amount(draft, "minDiscountAmount", "Min discount amount"),
        "quantity": _check_quantity(draft),
    }
    return {field: message for field, message in checks.items() if message is not None}
