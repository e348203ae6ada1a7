"""
Tests for the Outstanding (loan) balance.
"""

from decimal import Decimal

import pytest

from bank_ledger.errors import (
    ExceedsBalance,
    InsufficientPool,
    InvalidAmount,
    InvalidRate,
    ZeroBalanceInterest,
)
from bank_ledger.models.enums import TransactionKind
from bank_ledger.models.outstanding import Outstanding


def outstanding_with(balance):
    outstanding = Outstanding()
    outstanding.set_balance(balance)
    return outstanding


class TestAppend:

    def test_starts_at_zero(self):
        assert Outstanding().current_balance() == Decimal("0")

    def test_append_increases_balance(self):
        outstanding = Outstanding()
        outstanding.append(Decimal("1500"))
        outstanding.append(Decimal("500"))

        assert outstanding.current_balance() == Decimal("2000")

    @pytest.mark.parametrize("amount", [Decimal("0"), Decimal("-100")])
    def test_non_positive_rejected(self, amount):
        outstanding = Outstanding()

        with pytest.raises(InvalidAmount) as exc_info:
            outstanding.append(amount)

        assert exc_info.value.kind == TransactionKind.OUTSTANDING
        assert outstanding.current_balance() == Decimal("0")

    def test_float_amount_converted_exactly(self):
        outstanding = Outstanding()
        outstanding.append(0.1)

        assert outstanding.current_balance() == Decimal("0.1")


class TestSubtract:

    def test_subtract_reduces_balance(self):
        outstanding = outstanding_with("3000")
        outstanding.subtract(Decimal("1000"))

        assert outstanding.current_balance() == Decimal("2000")

    def test_subtract_full_balance(self):
        outstanding = outstanding_with("3000")
        outstanding.subtract(Decimal("3000"))

        assert outstanding.current_balance() == Decimal("0")

    def test_subtract_more_than_balance_rejected(self):
        outstanding = outstanding_with("3000")

        with pytest.raises(ExceedsBalance) as exc_info:
            outstanding.subtract(Decimal("3000.01"))

        assert exc_info.value.outstanding == Decimal("3000")
        assert outstanding.current_balance() == Decimal("3000")

    def test_zero_subtract_is_a_no_op(self):
        # The primitive only checks the upper bound
        outstanding = outstanding_with("3000")
        outstanding.subtract(Decimal("0"))

        assert outstanding.current_balance() == Decimal("3000")


class TestChecks:

    def test_check_within_balance_passes(self):
        outstanding_with("500").check_within_balance(Decimal("500"))

    def test_check_within_balance_does_not_mutate(self):
        outstanding = outstanding_with("500")

        with pytest.raises(ExceedsBalance):
            outstanding.check_within_balance(Decimal("600"))

        assert outstanding.current_balance() == Decimal("500")

    def test_confirm_against_pool_passes_at_exact_funds(self):
        Outstanding().confirm_against_pool(Decimal("1000"), Decimal("1000"))

    def test_confirm_against_pool_rejects_excess(self):
        with pytest.raises(InsufficientPool) as exc_info:
            Outstanding().confirm_against_pool(Decimal("1000.01"), Decimal("1000"))

        assert exc_info.value.requested == Decimal("1000.01")
        assert exc_info.value.available == Decimal("1000")


class TestApplyInterest:

    def test_positive_rate(self):
        outstanding = outstanding_with("10000")
        outstanding.apply_interest(Decimal("5.0"))

        assert outstanding.current_balance() == Decimal("10500")

    def test_negative_rate(self):
        outstanding = outstanding_with("10000")
        outstanding.apply_interest(Decimal("-5.0"))

        assert outstanding.current_balance() == Decimal("9500")

    def test_zero_rate_leaves_balance(self):
        outstanding = outstanding_with("10000")
        outstanding.apply_interest(Decimal("0"))

        assert outstanding.current_balance() == Decimal("10000")

    def test_compounds_across_calls(self):
        outstanding = outstanding_with("10000")
        outstanding.apply_interest(Decimal("10"))
        outstanding.apply_interest(Decimal("10"))

        assert outstanding.current_balance() == Decimal("12100")

    def test_returns_new_balance(self):
        outstanding = outstanding_with("200")

        assert outstanding.apply_interest(Decimal("50")) == Decimal("300")

    @pytest.mark.parametrize("rate", [Decimal("1000"), Decimal("-100")])
    def test_boundary_rates_accepted(self, rate):
        outstanding = outstanding_with("100")
        outstanding.apply_interest(rate)

        expected = Decimal("100") * (1 + rate / 100)
        assert outstanding.current_balance() == expected

    @pytest.mark.parametrize("rate", [Decimal("1500"), Decimal("1000.01"), Decimal("-150")])
    def test_out_of_range_rate_rejected(self, rate):
        outstanding = outstanding_with("10000")

        with pytest.raises(InvalidRate) as exc_info:
            outstanding.apply_interest(rate)

        assert exc_info.value.rate == rate
        assert outstanding.current_balance() == Decimal("10000")

    def test_zero_balance_rejected(self):
        with pytest.raises(ZeroBalanceInterest) as exc_info:
            Outstanding().apply_interest(Decimal("5.0"))

        assert exc_info.value.rate == Decimal("5.0")

    def test_invalid_rate_reported_before_zero_balance(self):
        with pytest.raises(InvalidRate):
            Outstanding().apply_interest(Decimal("1500"))


class TestSetBalance:

    def test_overrides_without_validation(self):
        outstanding = Outstanding()
        outstanding.set_balance(Decimal("-5"))

        assert outstanding.current_balance() == Decimal("-5")
