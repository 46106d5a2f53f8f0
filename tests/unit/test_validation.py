"""Tests for discount code validation."""

from __future__ import annotations

from typing import Any

import pytest

from eventdraft.services.validation import validate_discount_code
from tests.factories.data_factories import build_discount_draft

_VALID: dict[str, Any] = {
    "code": "X10",
    "discountPercentage": "10",
    "maxDiscountAmount": "5",
    "minDiscountAmount": "0",
    "quantity": "10",
}


def _with(**overrides: Any) -> dict[str, Any]:
    return {**_VALID, **overrides}


class TestValidDrafts:
    def test_valid_draft_has_no_errors(self):
        assert validate_discount_code(_VALID) == {}

    def test_factory_drafts_are_valid(self):
        for _ in range(20):
            assert validate_discount_code(build_discount_draft()) == {}

    def test_numeric_values_accepted(self):
        draft = _with(discountPercentage=10, maxDiscountAmount=5.5, minDiscountAmount=0, quantity=3)
        assert validate_discount_code(draft) == {}

    @pytest.mark.parametrize("pct", ["0", "100", "0.5", " 42 "])
    def test_percentage_bounds_inclusive(self, pct: str):
        assert validate_discount_code(_with(discountPercentage=pct)) == {}

    def test_min_above_max_allowed(self):
        assert validate_discount_code(_with(minDiscountAmount="50", maxDiscountAmount="5")) == {}


class TestCode:
    def test_empty_code_only_error(self):
        errors = validate_discount_code(_with(code=""))
        assert list(errors) == ["code"]

    def test_whitespace_code(self):
        assert "code" in validate_discount_code(_with(code="   "))

    def test_missing_code_key(self):
        draft = dict(_VALID)
        del draft["code"]
        assert validate_discount_code(draft) == {"code": "Discount code is required"}


class TestPercentage:
    def test_out_of_range_only_error(self):
        errors = validate_discount_code(_with(discountPercentage="150"))
        assert errors == {"discountPercentage": "Discount percentage must be between 0 and 100"}

    def test_negative(self):
        errors = validate_discount_code(_with(discountPercentage="-1"))
        assert "between 0 and 100" in errors["discountPercentage"]

    def test_required(self):
        errors = validate_discount_code(_with(discountPercentage=""))
        assert errors["discountPercentage"] == "Discount percentage is required"

    @pytest.mark.parametrize("pct", ["ten", "NaN", "Infinity", "1e", "-inf"])
    def test_not_a_number(self, pct: str):
        errors = validate_discount_code(_with(discountPercentage=pct))
        assert errors["discountPercentage"] == "Discount percentage must be a number"

    @pytest.mark.parametrize("pct", ["1e999999999999999999999", "-1e999999999999999999999"])
    def test_huge_exponent_is_out_of_range(self, pct: str):
        errors = validate_discount_code(_with(discountPercentage=pct))
        assert errors == {"discountPercentage": "Discount percentage must be between 0 and 100"}

    def test_tiny_exponent_is_in_range(self):
        assert validate_discount_code(_with(discountPercentage="1e-999999999999999999999")) == {}


class TestAmounts:
    @pytest.mark.parametrize("field", ["maxDiscountAmount", "minDiscountAmount"])
    def test_negative(self, field: str):
        errors = validate_discount_code(_with(**{field: "-0.01"}))
        assert list(errors) == [field]
        assert errors[field].endswith("cannot be negative")

    @pytest.mark.parametrize("field", ["maxDiscountAmount", "minDiscountAmount"])
    def test_required(self, field: str):
        errors = validate_discount_code(_with(**{field: None}))
        assert errors[field].endswith("is required")

    def test_not_a_number(self):
        errors = validate_discount_code(_with(maxDiscountAmount="$5"))
        assert errors == {"maxDiscountAmount": "Max discount amount must be a number"}


class TestQuantity:
    @pytest.mark.parametrize("qty", ["0", "-3", "000", "+0", "-0"])
    def test_must_be_positive(self, qty: str):
        errors = validate_discount_code(_with(quantity=qty))
        assert errors == {"quantity": "Quantity must be greater than 0"}

    @pytest.mark.parametrize("qty", ["1.5", "ten", "10.0"])
    def test_must_be_integer(self, qty: str):
        errors = validate_discount_code(_with(quantity=qty))
        assert errors == {"quantity": "Quantity must be a whole number"}

    def test_required(self):
        assert validate_discount_code(_with(quantity=""))["quantity"] == "Quantity is required"

    def test_very_long_whole_number_accepted(self):
        assert validate_discount_code(_with(quantity="9" * 5000)) == {}

    def test_very_long_zero_rejected(self):
        errors = validate_discount_code(_with(quantity="0" * 5000))
        assert errors == {"quantity": "Quantity must be greater than 0"}


def test_all_fields_reported_together():
    """No short-circuit: every bad field gets its own message."""
    errors = validate_discount_code(
        {"code": "", "discountPercentage": "200", "maxDiscountAmount": "-1",
         "minDiscountAmount": "x", "quantity": "0"},
    )
    assert set(errors) == {
        "code", "discountPercentage", "maxDiscountAmount", "minDiscountAmount", "quantity",
    }


def test_blank_template_draft_fails_every_rule():
    from eventdraft.core.constants import DISCOUNT_CODE_TEMPLATE

    assert len(validate_discount_code(DISCOUNT_CODE_TEMPLATE)) == 5
