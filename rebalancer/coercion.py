"""
rebalancer/coercion.py
----------------------
Lenient number parsing shared by the calculator modules.

Values typed into a form arrive as text, may be blank, or may be missing
altogether. Each helper maps such input onto a float without raising so the
calculator stays defined for every input.
"""

from __future__ import annotations

import math
from typing import Any


def to_number(value: Any) -> float:
    """
    Convert *value* to a float, returning ``nan`` when it is not numeric.

    Blank strings count as ``0.0``; ``None`` and unparseable text become
    ``nan`` so callers can apply their own fallback. Digit-grouping
    underscores (``"1_000"``) are not accepted.
    """
    if value is None:
        return math.nan
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        if "_" in text:
            return math.nan
        try:
            return float(text)
        except ValueError:
            return math.nan
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError):
        return math.nan


def finite_or(value: Any, default: float = 0.0) -> float:
    """Return *value* as a finite float, or *default* when it is not one."""
    number = to_number(value)
    return number if math.isfinite(number) else default


def is_list(value: Any) -> bool:
    """True for list or tuple inputs, the only shapes accepted as category lists."""
    return isinstance(value, (list, tuple))
