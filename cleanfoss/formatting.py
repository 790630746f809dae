"""
Danish number and currency formatting.

    format_dkk(1377)   -> "1.377 kr."
    format_dkk(275.4)  -> "275,4 kr."
"""

import re
from decimal import ROUND_HALF_UP, Decimal


def _group_thousands(digits: str) -> str:
    groups = []
    while len(digits) > 3:
        groups.insert(0, digits[-3:])
        digits = digits[:-3]
    groups.insert(0, digits)
    return ".".join(groups)


def format_number(number, max_decimals: int = 1, min_decimals: int = 0) -> str:
    """Format with "." thousands separator and "," decimal comma."""
    value = Decimal(str(number)).quantize(Decimal(1).scaleb(-max_decimals), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    integer, _, fraction = f"{abs(value):f}".partition(".")
    fraction = fraction.rstrip("0").ljust(min_decimals, "0")
    formatted = sign + _group_thousands(integer)
    if fraction:
        formatted += "," + fraction
    return formatted


def format_dkk(amount) -> str:
    """Format an amount as Danish kroner (at most one decimal)."""
    return f"{format_number(amount, max_decimals=1)} kr."


def format_decimal(number, decimals: int = 1) -> str:
    """Format with a fixed number of decimals."""
    return format_number(number, max_decimals=decimals, min_decimals=decimals)


def parse_dkk_amount(text: str) -> float:
    """Parse "1.377,5 kr." back to 1377.5; unparseable input gives 0."""
    cleaned = re.sub(r"\s*kr\.?", "", text, flags=re.IGNORECASE)
    cleaned = cleaned.replace(".", "").replace(",", ".").strip()
    try:
        return float(cleaned)
    except ValueError:
        return 0.0
