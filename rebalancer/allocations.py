"""
rebalancer/allocations.py
-------------------------
Percentage share of each category in the total current value.
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from rebalancer.coercion import to_number
from rebalancer.config import PERCENT_SCALE
from rebalancer.models import Allocation, Category


def sanitized_values(categories: Sequence[Category]) -> np.ndarray:
    """
    Current values as a float array with unusable entries zeroed.

    Non-numeric, non-finite, zero and negative values all map to ``0`` so they
    drop out of the pool instead of shrinking it.
    """
    values = np.array(
        [to_number(c.current_value) for c in categories], dtype=float
    )
    return np.where(np.isfinite(values) & (values > 0), values, 0.0)


def calculate_allocations(categories: Sequence[Category]) -> List[Allocation]:
    """
    Return one :class:`Allocation` per category, in input order.

    Percentages sum to 100 (up to float rounding) when at least one category
    holds a positive value, and are all exactly ``0`` otherwise.
    """
    if not categories:
        return []

    values = sanitized_values(categories)
    total = float(values.sum())

    if total <= 0:
        return [Allocation(category=c, percentage=0.0) for c in categories]

    return [
        Allocation(category=c, percentage=float(v / total * PERCENT_SCALE))
        for c, v in zip(categories, values)
    ]
