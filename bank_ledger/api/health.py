"""
Health check endpoint.

Used by load balancers, monitoring systems, and humans
to verify the application is running and responsive.
"""

from fastapi import APIRouter, Depends

from bank_ledger.api.dependencies import get_ledger
from bank_ledger.services.ledger_service import Ledger

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check(ledger: Ledger = Depends(get_ledger)):
    """
    Return application health status.

    The ledger is in memory, so it is healthy whenever the
    process is — the account count is reported for a quick
    sanity check.
    """
    return {
        "status": "healthy",
        "service": "bank-ledger-simulator",
        "accounts": len(ledger),
    }
