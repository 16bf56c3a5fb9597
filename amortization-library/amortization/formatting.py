"""Display helpers for the calculator form: parsing typed numbers and formatting results."""

from __future__ import annotations

import math

from amortization.config import DEFAULT_CURRENCY_SYMBOL
from amortization.results import TimeSavings

GROUPING_SEPARATOR = ","


def clean_number(text: str) -> str:
    """Strip grouping separators and surrounding whitespace ("300,000" -> "300000")."""
    return text.replace(GROUPING_SEPARATOR, "").strip()


def parse_numeric_input(text: str) -> float:
    """
    Parse a typed amount into a non-negative finite float.

    Raises ValueError for empty, non-numeric, negative, or non-finite text.
    """
    cleaned = clean_number(text)
    try:
        value = float(cleaned)
    except ValueError:
        raise ValueError(f"Not a number: {text!r}") from None
    if not math.isfinite(value):
        raise ValueError(f"Not a finite number: {text!r}")
    if value < 0:
        raise ValueError(f"Must not be negative: {text!r}")
    return value


def validate_numeric_input(text: str) -> bool:
    """True iff `text` parses as a non-negative finite number after removing separators."""
    try:
        parse_numeric_input(text)
    except ValueError:
        return False
    return True


def format_currency(amount: float, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Two decimals with grouping: 1896.2 -> "$1,896.20", -5 -> "-$5.00"."""
    sign = "-" if round(amount, 2) < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


def format_time_savings(time_savings: TimeSavings) -> str:
    return f"{time_savings.years}y {time_savings.months}m"
