"""Amount parsing and formatting utilities."""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
import re

_CENTS = Decimal("0.01")


def parse_amount(value: str | int | float | Decimal) -> Decimal:
    """Parse an amount into a Decimal.

    Handles numbers as well as strings such as:
    - "123.45"
    - "$123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

    Floats go through their shortest repr so 125.5 becomes Decimal("125.5").

    Args:
        value: Amount as a number or string

    Returns:
        Decimal amount

    Raises:
        ValueError: If the amount cannot be parsed or is NaN or infinite
    """
    if isinstance(value, bool):
        raise ValueError(f"Could not parse amount '{value}'")
    if isinstance(value, (Decimal, int, float)):
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
        if not amount.is_finite():
            raise ValueError(f"Could not parse amount '{value}'")
        return amount

    if not value or not value.strip():
        raise ValueError("Empty amount string")

    amount_str = value.strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    amount_str = re.sub(r"[$€£¥]", "", amount_str)
    amount_str = amount_str.replace(",", "").strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{value}': {e}") from e
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{value}'")
    return -amount if is_negative else amount


def format_amount(amount: Decimal) -> str:
    """Render an amount with exactly two decimal digits.

    Rounds half up, and a zero result is always rendered unsigned.

    Examples:
        Decimal("125.5") -> "125.50"
        Decimal("-125.5") -> "-125.50"

    Raises:
        decimal.InvalidOperation: If the two-decimal form exceeds the
            context precision
    """
    quantized = amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
    if quantized == 0:
        quantized = abs(quantized)
    return f"{quantized:.2f}"
