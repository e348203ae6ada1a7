"""
Account API endpoints — opening, closing, deposits and withdrawals.
"""

from fastapi import APIRouter, Depends

from bank_ledger.api.dependencies import get_ledger, to_http_exception
from bank_ledger.errors import LedgerError
from bank_ledger.services.ledger_service import Ledger
from bank_ledger.schemas.account import (
    AccountOpen,
    AccountResponse,
    AccountClosedResponse,
    AmountRequest,
)

router = APIRouter(prefix="/accounts", tags=["Accounts"])


@router.post("", response_model=AccountResponse, status_code=201)
def open_account(
    request: AccountOpen,
    ledger: Ledger = Depends(get_ledger),
):
    """
    Open a new account with a starting deposit.

    The starting deposit must be positive and within the
    deposit limit. One account per owner.
    """
    try:
        account = ledger.open_account(request.owner, request.starting_deposit)
    except LedgerError as e:
        raise to_http_exception(e)
    return AccountResponse.from_snapshot(account)


@router.get("", response_model=list[str])
def list_accounts(ledger: Ledger = Depends(get_ledger)):
    """List account owners, sorted."""
    return ledger.owners()


@router.get("/{owner}", response_model=AccountResponse)
def get_account(
    owner: str,
    ledger: Ledger = Depends(get_ledger),
):
    """Get an account's cash and outstanding balances."""
    try:
        account = ledger.get_account_snapshot(owner)
    except LedgerError as e:
        raise to_http_exception(e)
    return AccountResponse.from_snapshot(account)


@router.delete("/{owner}", response_model=AccountClosedResponse)
def close_account(
    owner: str,
    ledger: Ledger = Depends(get_ledger),
):
    """
    Close an account and pay out its balance.

    Rejected with 409 while the account still owes anything.
    """
    try:
        payout = ledger.close_account(owner)
    except LedgerError as e:
        raise to_http_exception(e)
    return AccountClosedResponse(owner=owner, payout=payout)


@router.post("/{owner}/deposit", response_model=AccountResponse)
def deposit(
    owner: str,
    request: AmountRequest,
    ledger: Ledger = Depends(get_ledger),
):
    """Deposit cash into an account."""
    try:
        account = ledger.deposit(owner, request.amount)
    except LedgerError as e:
        raise to_http_exception(e)
    return AccountResponse.from_snapshot(account)


@router.post("/{owner}/withdraw", response_model=AccountResponse)
def withdraw(
    owner: str,
    request: AmountRequest,
    ledger: Ledger = Depends(get_ledger),
):
    """Withdraw cash from an account."""
    try:
        account = ledger.withdraw(owner, request.amount)
    except LedgerError as e:
        raise to_http_exception(e)
    return AccountResponse.from_snapshot(account)
