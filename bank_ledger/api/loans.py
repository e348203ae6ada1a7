"""
Loan API endpoints.

A loan is an account's outstanding balance. Granting one pays
out of the bank's operating funds; repaying puts money back.
Interest is applied on request only.
"""

from fastapi import APIRouter, Depends

from bank_ledger.api.dependencies import get_ledger, to_http_exception
from bank_ledger.errors import LedgerError
from bank_ledger.services.ledger_service import Ledger
from bank_ledger.schemas.account import (
    AccountResponse,
    AmountRequest,
    InterestRequest,
)

router = APIRouter(prefix="/accounts/{owner}/loans", tags=["Loans"])


@router.post("", response_model=AccountResponse)
def grant_loan(
    owner: str,
    request: AmountRequest,
    ledger: Ledger = Depends(get_ledger),
):
    """Grant a loan, within the outstanding limit and operating funds."""
    try:
        account = ledger.grant_outstanding(owner, request.amount)
    except LedgerError as e:
        raise to_http_exception(e)
    return AccountResponse.from_snapshot(account)


@router.post("/repay", response_model=AccountResponse)
def repay_loan(
    owner: str,
    request: AmountRequest,
    ledger: Ledger = Depends(get_ledger),
):
    """Repay part or all of the outstanding balance."""
    try:
        account = ledger.repay_outstanding(owner, request.amount)
    except LedgerError as e:
        raise to_http_exception(e)
    return AccountResponse.from_snapshot(account)


@router.post("/interest", response_model=AccountResponse)
def apply_interest(
    owner: str,
    request: InterestRequest,
    ledger: Ledger = Depends(get_ledger),
):
    """
    Apply one round of interest to the outstanding balance.

    The rate is a percentage between -100 and 1000. Interest on
    a zero balance is rejected.
    """
    try:
        account = ledger.apply_interest(owner, request.rate)
    except LedgerError as e:
        raise to_http_exception(e)
    return AccountResponse.from_snapshot(account)
