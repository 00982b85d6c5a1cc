"""Money rounding and display helpers."""

from __future__ import annotations

import math
from typing import Union

Number = Union[float, int]


def round_money(amount: Number) -> float:
    """Round to cents. Used only at output boundaries.

    Example:
        >>> round_money(460.2991)
        460.3
    """
    return round(float(amount), 2)


def to_cents(amount: Number) -> int:
    """Convert a dollar amount to integer cents.

    Example:
        >>> to_cents(55.2359)
        5524
    """
    return int(round(float(amount) * 100))


def format_currency(amount: Number, include_sign: bool = True, decimals: int = 2) -> str:
    """Format a currency amount with thousands separators.

    Args:
        amount: The amount to format
        include_sign: Whether to include the dollar sign
        decimals: Digits after the decimal point

    Example:
        >>> format_currency(1234.56)
        '$1,234.56'
        >>> format_currency(20, decimals=0)
        '$20'
    """
    formatted = f"{amount:,.{decimals}f}"
    return f"${formatted}" if include_sign else formatted


def format_percent(value: Number, decimals: int = 1) -> str:
    """Format a percentage that is already scaled to 0-100.

    Example:
        >>> format_percent(12.345)
        '12.3%'
    """
    return f"{value:.{decimals}f}%"


def category_label(key: str) -> str:
    """Display name for a category key.

    Example:
        >>> category_label('eating_out')
        'Eating Out'
    """
    return ' '.join(part.capitalize() for part in key.replace('_', ' ').split())


def round_half_up(value: Number) -> int:
    """Round to the nearest whole unit, halves away from zero for positives.

    Example:
        >>> round_half_up(2.5)
        3
    """
    return int(math.floor(float(value) + 0.5))
