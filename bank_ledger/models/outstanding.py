"""
Outstanding (loan) balance for a single account.

The outstanding balance is the amount an account owes the bank.
It never exists on its own — every Account owns exactly one,
created at zero.

This class validates amounts in isolation. It knows nothing about
the bank's limits or operating funds beyond the number the caller
hands it in confirm_against_pool().
"""

from decimal import Decimal

from bank_ledger.errors import (
    ExceedsBalance,
    InsufficientPool,
    InvalidAmount,
    InvalidRate,
    ZeroBalanceInterest,
)
from bank_ledger.logging_config import get_logger
from bank_ledger.models.enums import TransactionKind
from bank_ledger.utils import to_decimal

logger = get_logger(__name__)

# Interest rate bounds, in percent
MIN_INTEREST_RATE = Decimal("-100")
MAX_INTEREST_RATE = Decimal("1000")


class Outstanding:

    def __init__(self):
        self._balance = Decimal("0")

    def current_balance(self) -> Decimal:
        return self._balance

    def append(self, amount) -> None:
        """Add a loan draw. The amount must be positive."""
        amount = to_decimal(amount, TransactionKind.OUTSTANDING)
        if amount <= 0:
            raise InvalidAmount(amount, TransactionKind.OUTSTANDING)
        self._balance += amount

    def subtract(self, amount) -> None:
        """
        Reduce the balance by a repayment.

        Only the upper bound is checked here. Rejecting zero or
        negative repayments is the Ledger's job.
        """
        amount = to_decimal(amount)
        self.check_within_balance(amount)
        self._balance -= amount

    def check_within_balance(self, amount) -> None:
        """Raise ExceedsBalance if amount is more than is owed."""
        amount = to_decimal(amount)
        if amount > self._balance:
            raise ExceedsBalance(amount, self._balance)

    def confirm_against_pool(self, amount, pool_funds) -> None:
        """Raise InsufficientPool if the bank cannot fund this loan."""
        amount = to_decimal(amount)
        pool_funds = to_decimal(pool_funds)
        if amount > pool_funds:
            raise InsufficientPool(amount, pool_funds)

    def apply_interest(self, rate_percent) -> Decimal:
        """
        Apply one round of interest to the balance.

        The rate is a percentage between -100 and 1000 inclusive.
        A negative rate reduces the balance (a write-down).
        Interest on a zero balance is rejected, whatever the rate.

        Returns the new balance.
        """
        rate = to_decimal(rate_percent)
        if rate > MAX_INTEREST_RATE or rate < MIN_INTEREST_RATE:
            raise InvalidRate(rate)
        if self._balance == 0:
            raise ZeroBalanceInterest(rate)

        self._balance *= 1 + rate / 100
        logger.debug("interest_applied", rate=str(rate), balance=str(self._balance))
        return self._balance

    def set_balance(self, value) -> None:
        # Administrative override, no validation
        self._balance = to_decimal(value)

    def __repr__(self) -> str:
        return f"<Outstanding {self._balance}>"
