"""
Pydantic schemas for account and loan operations.

Amounts are plain Decimals here. Whether an amount is positive
or within the limits is a ledger rule, and the Ledger reports it
with its own error types — the API does not duplicate it.
"""

from decimal import Decimal

from pydantic import BaseModel, Field

from bank_ledger.models.account import AccountSnapshot


# --- Request Schemas ---

class AccountOpen(BaseModel):
    """Request to open a new account."""
    owner: str = Field(min_length=1, max_length=100)
    starting_deposit: Decimal


class AmountRequest(BaseModel):
    """Body for deposits, withdrawals, loan grants and repayments."""
    amount: Decimal


class InterestRequest(BaseModel):
    """Interest rate in percent, e.g. 5.0 for 5%."""
    rate: Decimal


# --- Response Schemas ---

class AccountResponse(BaseModel):
    owner: str
    balance: Decimal
    outstanding_balance: Decimal

    @classmethod
    def from_snapshot(cls, snapshot: AccountSnapshot) -> "AccountResponse":
        return cls(
            owner=snapshot.owner,
            balance=snapshot.balance,
            outstanding_balance=snapshot.outstanding_balance,
        )


class AccountClosedResponse(BaseModel):
    owner: str
    payout: Decimal
