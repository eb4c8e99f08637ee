"""
Lenient coercion helpers for CSV cell values.

Cells arrive as raw strings (or None when missing). Numbers are read from the
leading numeric prefix of the cell, so "3.5 baths" yields 3.5 and "2,100"
yields 2. Anything that does not start with a number falls back to the
caller-supplied default; no helper here raises.
"""

from __future__ import annotations

import math
import re
from typing import Optional, TypeVar

T = TypeVar("T")

_FLOAT_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def is_blank(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return isinstance(value, str) and not value.strip()


def parse_number(value: object, default: T = 0.0) -> float | T:
    """Parse the leading float of `value`, returning `default` on failure.

    Non-finite results (overflowing exponents) are treated as failures so a
    NaN or infinity never reaches a Property.
    """
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) else default
    if not isinstance(value, str):
        return default
    match = _FLOAT_PREFIX.match(value)
    if not match:
        return default
    number = float(match.group(1))
    if not math.isfinite(number):
        return default
    return number


def _in_int64(number: int) -> bool:
    return INT64_MIN <= number <= INT64_MAX


def parse_int(value: object, default: T = 0) -> int | T:
    """Parse the leading integer of `value`, returning `default` on failure.

    Values outside the int64 range count as failures; pandas cannot hold them
    in an integer column.
    """
    if isinstance(value, bool):
        return default
    if isinstance(value, float):
        if not math.isfinite(value):
            return default
        value = int(value)
    if isinstance(value, int):
        return value if _in_int64(value) else default
    if not isinstance(value, str):
        return default
    match = _INT_PREFIX.match(value)
    if not match:
        return default
    digits = match.group(1)
    # Longer than any int64; also keeps int() clear of its digit limit.
    if len(digits.lstrip("+-").lstrip("0")) > 19:
        return default
    number = int(digits)
    return number if _in_int64(number) else default


def parse_optional_int(value: object) -> Optional[int]:
    # Blank and unparsable cells both mean "absent".
    if is_blank(value):
        return None
    return parse_int(value, default=None)


def to_fixed(value: float, decimals: int = 2) -> str:
    return f"{value:.{decimals}f}"
