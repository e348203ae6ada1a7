"""Business logic services."""

from bank_ledger.services.ledger_service import Ledger

__all__ = ["Ledger"]
