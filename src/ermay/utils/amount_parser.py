"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re

THOUSANDS_ONLY = re.compile(r"[+-]?[1-9]\d{0,2}\.\d{3}")


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles Turkish and English notations:
    - "123.45", "123,45"
    - "1.234,56" (Turkish grouping), "1,234.56"
    - "₺1.234,56", "1.234,56 TL", "$123.45"
    - "(123.45)" (negative in parentheses)

    When both separators appear, the last one is the decimal separator. A
    single separator is decimal unless it occurs more than once, or it is
    a lone "." followed by exactly three digits ("1.500" is 1500, as Turkish
    users write it; "0.500" stays 0.5).

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    # Remove currency symbols and codes
    amount_str = re.sub(r"[₺$€£¥]|\b(TL|TRY|USD|EUR)\b", "", amount_str, flags=re.IGNORECASE)
    amount_str = re.sub(r"\s+", "", amount_str)

    if "," in amount_str and "." in amount_str:
        if amount_str.rfind(",") > amount_str.rfind("."):
            amount_str = amount_str.replace(".", "").replace(",", ".")
        else:
            amount_str = amount_str.replace(",", "")
    elif "," in amount_str:
        if amount_str.count(",") > 1:
            amount_str = amount_str.replace(",", "")
        else:
            amount_str = amount_str.replace(",", ".")
    elif amount_str.count(".") > 1 or THOUSANDS_ONLY.fullmatch(amount_str):
        amount_str = amount_str.replace(".", "")

    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}")
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}': not a finite number")
    return -amount if is_negative else amount
