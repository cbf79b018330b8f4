"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re

from moneymanager.utils.money import to_decimal


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal with at most two decimal places.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "1,234.56"
    - "₹ 2,500"

    The sign of a ledger entry comes from its type, so signs are left in
    place for the caller to reject.

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    # Remove currency symbols
    amount_str = re.sub(r"[$€£¥₹]", "", amount_str.strip())

    # Remove commas
    amount_str = amount_str.replace(",", "").strip()

    try:
        Decimal(amount_str)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")
    return to_decimal(amount_str)
