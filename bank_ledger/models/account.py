"""
Customer account model.

An account holds a cash balance and owns one Outstanding (loan)
balance for its whole life. The account validates withdrawals
against its own balance; everything that involves the bank's
limits or operating funds is the Ledger's responsibility.
"""

from dataclasses import dataclass
from decimal import Decimal

from bank_ledger.errors import InsufficientFunds
from bank_ledger.models.outstanding import Outstanding
from bank_ledger.utils import to_decimal


@dataclass(frozen=True)
class AccountSnapshot:
    """Balances of one account, read at a single point in time."""
    owner: str
    balance: Decimal
    outstanding_balance: Decimal


class Account:

    def __init__(self, owner: str, balance=Decimal("0")):
        self._owner = owner
        self._balance = to_decimal(balance)
        self._outstanding = Outstanding()

    @property
    def owner(self) -> str:
        return self._owner

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def outstanding(self) -> Outstanding:
        return self._outstanding

    def check_sufficient_funds(self, amount) -> None:
        """Raise InsufficientFunds if the balance cannot cover amount."""
        amount = to_decimal(amount)
        if amount > self._balance:
            raise InsufficientFunds(amount, self._balance)

    def deposit(self, amount) -> None:
        # Amount validity is checked by the Ledger
        self._balance += to_decimal(amount)

    def withdraw(self, amount) -> None:
        amount = to_decimal(amount)
        self.check_sufficient_funds(amount)
        self._balance -= amount

    # --- Outstanding delegation ---

    def outstanding_balance(self) -> Decimal:
        return self._outstanding.current_balance()

    def draw_outstanding(self, amount) -> None:
        self._outstanding.append(amount)

    def repay_outstanding(self, amount) -> None:
        self._outstanding.subtract(amount)

    def check_outstanding_within(self, amount) -> None:
        self._outstanding.check_within_balance(amount)

    def snapshot(self) -> AccountSnapshot:
        return AccountSnapshot(
            owner=self._owner,
            balance=self._balance,
            outstanding_balance=self.outstanding_balance(),
        )

    def __repr__(self) -> str:
        return (
            f"<Account {self._owner} balance={self._balance} "
            f"outstanding={self.outstanding_balance()}>"
        )
