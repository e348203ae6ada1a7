"""
Domain models package.

Outstanding and Account are imported from their own modules
(bank_ledger.models.outstanding, bank_ledger.models.account).
Only the enums are re-exported here because bank_ledger.errors
depends on them and the models depend on bank_ledger.errors.
"""

from bank_ledger.models.enums import TransactionKind

__all__ = [
    "TransactionKind",
]
