"""Amount parsing and formatting utilities."""

from decimal import Decimal, InvalidOperation, ROUND_HALF_EVEN
import re

CENT = Decimal("0.01")
# Largest amount or balance a Numeric(14, 2) column holds
MAX_AMOUNT = Decimal("999999999999.99")


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "1,234.56"
    - "1e+06"

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed or is not finite
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    # Remove currency symbols, commas and whitespace
    cleaned = re.sub(r"[$€£¥,]", "", amount_str.strip()).strip()

    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")

    if not amount.is_finite():
        raise ValueError(f"Amount '{amount_str}' is not a finite number")
    return amount


def exceeds_max(amount: Decimal) -> bool:
    """Return True if the amount is larger in magnitude than MAX_AMOUNT."""
    return abs(amount) > MAX_AMOUNT


def quantize_amount(amount: Decimal) -> Decimal:
    """Round an amount to whole cents using banker's rounding.

    Raises:
        ValueError: If the amount has too many digits to round to cents
    """
    try:
        return amount.quantize(CENT, rounding=ROUND_HALF_EVEN)
    except InvalidOperation:
        raise ValueError(f"Amount {amount} is out of range")


def has_sub_cent_digits(amount: Decimal) -> bool:
    """Return True if the amount carries digits below one cent.

    Raises:
        ValueError: If the amount has too many digits to round to cents
    """
    return amount != quantize_amount(amount)


def format_amount(amount: Decimal) -> str:
    """Render an amount with exactly two decimal places."""
    return f"{quantize_amount(amount):.2f}"
