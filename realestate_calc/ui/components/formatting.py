"""
Utility helpers for formatting numeric values and currency strings.
"""

from __future__ import annotations

from typing import Optional, Union


def format_number(value: Optional[float], decimals: int = 0) -> str:
    if value is None:
        return "–"
    try:
        return f"{value:,.{decimals}f}"
    except (TypeError, ValueError):
        return "–"


def format_currency(
    value: Optional[Union[float, str]],
    symbol: str = "$",
    decimals: int = 2,
) -> str:
    """Prefix a currency symbol; pre-formatted strings are kept verbatim."""
    if value is None:
        return "–"
    if isinstance(value, str):
        return f"{symbol}{value}" if value else "–"
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return "–"
    return f"{symbol}{numeric:.{decimals}f}"
