"""
Pydantic schemas for bank-wide ledger operations.
"""

from decimal import Decimal

from pydantic import BaseModel, model_validator

from bank_ledger.services.ledger_service import Ledger


class LimitsUpdate(BaseModel):
    """
    Change one or more transaction limits.

    Omitted fields keep their current value. At least one
    field must be given.
    """
    max_deposit: Decimal | None = None
    max_withdraw: Decimal | None = None
    max_outstanding: Decimal | None = None

    @model_validator(mode="after")
    def at_least_one_limit(self) -> "LimitsUpdate":
        if (
            self.max_deposit is None
            and self.max_withdraw is None
            and self.max_outstanding is None
        ):
            raise ValueError("at least one limit must be provided")
        return self


class FundsInjection(BaseModel):
    amount: Decimal


class LedgerSummaryResponse(BaseModel):
    """Operating funds, current limits and account count."""
    operating_funds: Decimal
    max_deposit: Decimal
    max_withdraw: Decimal
    max_outstanding: Decimal
    account_count: int

    @classmethod
    def from_ledger(cls, ledger: Ledger) -> "LedgerSummaryResponse":
        return cls(
            operating_funds=ledger.operating_funds,
            max_deposit=ledger.max_deposit,
            max_withdraw=ledger.max_withdraw,
            max_outstanding=ledger.max_outstanding,
            account_count=len(ledger),
        )
