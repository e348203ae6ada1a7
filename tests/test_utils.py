"""
Tests for amount coercion.
"""

from decimal import Decimal

import pytest

from bank_ledger.errors import InvalidAmount
from bank_ledger.models.enums import TransactionKind
from bank_ledger.utils import to_decimal


class TestToDecimal:

    @pytest.mark.parametrize(
        "value, expected",
        [
            (Decimal("12.50"), Decimal("12.50")),
            ("12.50", Decimal("12.50")),
            (7, Decimal("7")),
            (0.1, Decimal("0.1")),
            (Decimal("1E+40"), Decimal("1E+40")),
        ],
    )
    def test_accepted_values(self, value, expected):
        assert to_decimal(value) == expected

    def test_too_many_digits_rejected(self):
        with pytest.raises(InvalidAmount) as exc_info:
            to_decimal(Decimal("1234567890123456789012345678.9"), TransactionKind.DEPOSIT)

        assert exc_info.value.kind == TransactionKind.DEPOSIT
        assert "stored exactly" in str(exc_info.value)

    @pytest.mark.parametrize("value", ["NaN", "Infinity", "-Infinity", float("nan")])
    def test_non_finite_rejected(self, value):
        with pytest.raises(InvalidAmount) as exc_info:
            to_decimal(value)

        assert exc_info.value.kind is None
        assert "finite" in str(exc_info.value)

    def test_error_body_is_serializable(self):
        with pytest.raises(InvalidAmount) as exc_info:
            to_decimal("0.1234567890123456789012345678901", TransactionKind.REPAYMENT)

        body = exc_info.value.to_dict()
        assert body["error"] == "InvalidAmount"
        assert body["kind"] == "REPAYMENT"
        assert body["amount"] == "0.1234567890123456789012345678901"
