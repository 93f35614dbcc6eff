"""
Formatting utilities for currency, numbers and dates.

Pure functions shared by states, services and exports.
"""
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP

from motoparts.constants import CURRENCY_SYMBOL


def round_currency(value: float) -> float:
    """
    Round a value to 2 decimal places using ROUND_HALF_UP.

    Args:
        value: The value to round

    Returns:
        The rounded value as a float with 2 decimal precision
    """
    return float(
        Decimal(str(value or 0)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    )


def format_currency(value: float, symbol: str = CURRENCY_SYMBOL, decimals: int = 2) -> str:
    """
    Format a value as currency with thousands separators.

    Args:
        value: The numeric value
        symbol: The currency prefix (e.g. "Rs. ")
        decimals: Digits after the decimal point (0 for ledger views)

    Returns:
        Formatted string like "Rs. 1,250.00"
    """
    quant = Decimal(1).scaleb(-decimals) if decimals > 0 else Decimal(1)
    rounded = Decimal(str(value or 0)).quantize(quant, rounding=ROUND_HALF_UP)
    return f"{symbol}{rounded:,.{decimals}f}"


def parse_float_safe(value: str, default: float = 0.0) -> float:
    """
    Safely parse a string to float, returning default on error.
    """
    try:
        return float(value) if value not in (None, "") else default
    except (ValueError, TypeError):
        return default


def parse_int_safe(value: str, default: int = 0) -> int:
    """Safely parse a string to int; decimals are truncated."""
    try:
        return int(float(value)) if value not in (None, "") else default
    except (ValueError, TypeError):
        return default


def format_datetime(value: str | None, with_time: bool = True) -> str:
    """
    Format an ISO-8601 timestamp from the API for display.

    Unparseable values are returned unchanged.
    """
    if not value:
        return ""
    text = str(value)
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return text
    return parsed.strftime("%Y-%m-%d %H:%M" if with_time else "%Y-%m-%d")
