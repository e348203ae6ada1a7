"""
Domain errors for ledger operations.

Every error is a local validation failure raised before any state
is touched. Errors carry structured data only — constructing one
never logs or prints. Logging is done by whoever handles the error.

All errors subclass ValueError, so code that already treats bad
input as ValueError keeps working.
"""

from decimal import Decimal

from bank_ledger.models.enums import TransactionKind


class LedgerError(ValueError):
    """Base class for every ledger rule violation."""

    def __init__(self, **params):
        self.params = params
        super().__init__(self.describe())

    def describe(self) -> str:
        return self.__class__.__name__

    def to_dict(self) -> dict:
        """Serialize for API error bodies. Decimals become strings."""
        body = {"error": self.__class__.__name__, "message": str(self)}
        for key, value in self.params.items():
            if isinstance(value, Decimal):
                value = str(value)
            elif isinstance(value, TransactionKind):
                value = value.value
            body[key] = value
        return body


class InvalidAmount(LedgerError):
    """
    A transaction amount is unusable: non-positive where positivity
    is required, or not representable without rounding.
    """

    def __init__(
        self,
        amount,
        kind: TransactionKind | None = None,
        reason: str = "Amount must be positive",
    ):
        self.amount = amount
        self.kind = kind
        self.reason = reason
        super().__init__(amount=amount, kind=kind, reason=reason)

    def describe(self) -> str:
        label = f"{self.kind.value.lower()} amount" if self.kind else "amount"
        return f"Invalid {label}: {self.amount}. {self.reason}"


class LimitExceeded(LedgerError):
    """A transaction amount exceeds its configured ceiling."""

    def __init__(self, amount: Decimal, limit: Decimal, kind: TransactionKind):
        self.amount = amount
        self.limit = limit
        self.kind = kind
        super().__init__(amount=amount, limit=limit, kind=kind)

    def describe(self) -> str:
        return (
            f"{self.kind.value.capitalize()} amount {self.amount} "
            f"exceeds the limit of {self.limit}"
        )


class InsufficientFunds(LedgerError):
    """An account's cash balance cannot cover a withdrawal."""

    def __init__(self, requested: Decimal, available: Decimal):
        self.requested = requested
        self.available = available
        super().__init__(requested=requested, available=available)

    def describe(self) -> str:
        return (
            f"Insufficient funds: requested={self.requested}, "
            f"available={self.available}"
        )


class InsufficientPool(LedgerError):
    """Operating funds cannot cover a withdrawal, loan or payout."""

    def __init__(self, requested: Decimal, available: Decimal):
        self.requested = requested
        self.available = available
        super().__init__(requested=requested, available=available)

    def describe(self) -> str:
        return (
            f"Insufficient operating funds: requested={self.requested}, "
            f"available={self.available}"
        )


class ExceedsBalance(LedgerError):
    """A repayment is larger than the outstanding balance."""

    def __init__(self, amount: Decimal, outstanding: Decimal):
        self.amount = amount
        self.outstanding = outstanding
        super().__init__(amount=amount, outstanding=outstanding)

    def describe(self) -> str:
        return (
            f"Repayment of {self.amount} exceeds outstanding "
            f"balance of {self.outstanding}"
        )


class InvalidRate(LedgerError):
    """An interest rate outside -100% .. 1000%."""

    def __init__(self, rate: Decimal):
        self.rate = rate
        super().__init__(rate=rate)

    def describe(self) -> str:
        return (
            f"Invalid interest rate: {self.rate}%. "
            f"Interest rate must be between -100% and 1000%"
        )


class ZeroBalanceInterest(LedgerError):
    """Interest requested on a zero outstanding balance."""

    def __init__(self, rate: Decimal):
        self.rate = rate
        super().__init__(rate=rate)

    def describe(self) -> str:
        return f"Cannot apply interest of {self.rate}% to a zero balance"


class AccountNotFound(LedgerError):
    def __init__(self, owner: str):
        self.owner = owner
        super().__init__(owner=owner)

    def describe(self) -> str:
        return f"No account found for owner '{self.owner}'"


class DuplicateAccount(LedgerError):
    def __init__(self, owner: str):
        self.owner = owner
        super().__init__(owner=owner)

    def describe(self) -> str:
        return f"An account already exists for owner '{self.owner}'"


class NonZeroOutstanding(LedgerError):
    """Account closure requested while a loan balance remains."""

    def __init__(self, owner: str, outstanding: Decimal):
        self.owner = owner
        self.outstanding = outstanding
        super().__init__(owner=owner, outstanding=outstanding)

    def describe(self) -> str:
        return (
            f"Cannot close account '{self.owner}': outstanding balance "
            f"of {self.outstanding} must be 0"
        )
