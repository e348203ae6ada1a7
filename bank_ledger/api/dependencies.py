"""
Shared API dependencies.

The Ledger lives on app.state — one per application instance.
Endpoints get it through get_ledger(), which tests can override
with app.dependency_overrides.
"""

from fastapi import HTTPException, Request

from bank_ledger.errors import (
    AccountNotFound,
    DuplicateAccount,
    LedgerError,
    NonZeroOutstanding,
)
from bank_ledger.services.ledger_service import Ledger


# Anything not listed is a 400
STATUS_BY_ERROR: dict[type[LedgerError], int] = {
    AccountNotFound: 404,
    DuplicateAccount: 409,
    NonZeroOutstanding: 409,
}


def get_ledger(request: Request) -> Ledger:
    return request.app.state.ledger


def to_http_exception(error: LedgerError) -> HTTPException:
    """Map a ledger error to an HTTP error with a structured body."""
    status_code = STATUS_BY_ERROR.get(type(error), 400)
    return HTTPException(status_code=status_code, detail=error.to_dict())
