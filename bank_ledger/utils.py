"""Small helpers shared by the models and services."""

from decimal import Decimal

from bank_ledger.errors import InvalidAmount
from bank_ledger.models.enums import TransactionKind


def to_decimal(value, kind: TransactionKind | None = None) -> Decimal:
    """
    Coerce an amount to Decimal.

    Floats go through str() so that 0.1 becomes Decimal("0.1")
    rather than its binary approximation.

    Amounts must survive the decimal context's rounding unchanged.
    An amount with more significant digits than the context keeps
    would be stored exactly on one side of a transaction and rounded
    on the other, so it is rejected with InvalidAmount.
    """
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, float):
        result = Decimal(str(value))
    else:
        result = Decimal(value)

    if not result.is_finite():
        raise InvalidAmount(result, kind, reason="Amount must be a finite number")
    if +result != result:
        raise InvalidAmount(
            result, kind, reason="Amount has more digits than can be stored exactly"
        )
    return result
