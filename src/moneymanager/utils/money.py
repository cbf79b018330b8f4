"""Fixed-point money helpers.

Amounts travel as Decimal and are stored as integer cents.
"""

from decimal import Decimal, InvalidOperation

from moneymanager.domain.errors import ValidationError

CENT = Decimal("0.01")

# Cents are stored in a signed 64-bit integer column
MAX_CENTS = 2**63 - 1
MAX_AMOUNT = Decimal(MAX_CENTS) / 100


def to_decimal(value: Decimal | int | str) -> Decimal:
    """Coerce a value to a Decimal with at most two decimal places.

    Floats are rejected because they cannot represent most cent values
    exactly.

    Raises:
        ValidationError: If the value is not a finite number with at most
            two decimal places, or is too large to store
    """
    if isinstance(value, float):
        raise ValidationError(f"Amount {value!r} must be a Decimal, int or str, not float")
    try:
        amount = Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError(f"Invalid amount: {value!r}")
    if not amount.is_finite():
        raise ValidationError(f"Invalid amount: {value!r}")
    if abs(amount) > MAX_AMOUNT:
        raise ValidationError(f"Amount {value!r} is out of range (at most {MAX_AMOUNT:,})")
    try:
        quantized = amount.quantize(CENT)
    except InvalidOperation:
        raise ValidationError(f"Invalid amount: {value!r}")
    if amount != quantized:
        raise ValidationError(f"Amount {amount} has more than two decimal places")
    return quantized


def require_positive(value: Decimal | int | str) -> Decimal:
    """Return the amount as a Decimal, rejecting zero and negative values."""
    amount = to_decimal(value)
    if amount <= 0:
        raise ValidationError(f"Amount must be positive, got {amount}")
    return amount


def to_cents(amount: Decimal) -> int:
    """Convert a Decimal amount to integer cents."""
    return int(to_decimal(amount) * 100)


def from_cents(cents: int) -> Decimal:
    """Convert integer cents back to a Decimal amount."""
    return (Decimal(cents) / 100).quantize(CENT)
