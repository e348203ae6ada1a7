"""
Ledger API endpoints.

Bank-wide state: operating funds and transaction limits.
The API layer is thin — it handles HTTP concerns and delegates
all business rules to the Ledger.
"""

from fastapi import APIRouter, Depends

from bank_ledger.api.dependencies import get_ledger, to_http_exception
from bank_ledger.errors import LedgerError
from bank_ledger.services.ledger_service import Ledger
from bank_ledger.schemas.ledger import (
    FundsInjection,
    LedgerSummaryResponse,
    LimitsUpdate,
)

router = APIRouter(prefix="/ledger", tags=["Ledger"])


@router.get("", response_model=LedgerSummaryResponse)
def get_summary(ledger: Ledger = Depends(get_ledger)):
    """Current operating funds, limits and number of accounts."""
    return LedgerSummaryResponse.from_ledger(ledger)


@router.patch("/limits", response_model=LedgerSummaryResponse)
def update_limits(
    request: LimitsUpdate,
    ledger: Ledger = Depends(get_ledger),
):
    """
    Change transaction limits.

    New limits apply to every later operation. Existing
    balances are not re-checked against them.
    """
    try:
        ledger.set_limits(
            max_deposit=request.max_deposit,
            max_withdraw=request.max_withdraw,
            max_outstanding=request.max_outstanding,
        )
    except LedgerError as e:
        raise to_http_exception(e)
    return LedgerSummaryResponse.from_ledger(ledger)


@router.post("/funds", response_model=LedgerSummaryResponse)
def inject_funds(
    request: FundsInjection,
    ledger: Ledger = Depends(get_ledger),
):
    """Add capital to the operating funds."""
    try:
        ledger.inject_operating_funds(request.amount)
    except LedgerError as e:
        raise to_http_exception(e)
    return LedgerSummaryResponse.from_ledger(ledger)
