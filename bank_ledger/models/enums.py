"""
Shared enumerations.

TransactionKind names the kind of money movement an amount belongs
to. Errors carry it so a caller can tell a rejected deposit from a
rejected withdrawal without parsing messages.
"""

import enum


class TransactionKind(str, enum.Enum):
    """The kinds of amount the ledger validates."""
    DEPOSIT = "DEPOSIT"
    WITHDRAW = "WITHDRAW"
    OUTSTANDING = "OUTSTANDING"
    REPAYMENT = "REPAYMENT"
    CAPITAL = "CAPITAL"
