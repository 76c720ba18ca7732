"""
rebalancer/deficit_finder.py
----------------------------
Locates the most underweight category of a portfolio.

The deficit of a category is its target percentage minus its current share
of the total value, in percentage points. A negative deficit means the
category is already above target.
"""

from __future__ import annotations

import math
from typing import Any, Optional, Sequence

from rebalancer.allocations import calculate_allocations
from rebalancer.coercion import is_list, to_number
from rebalancer.config import TARGET_MAX, TARGET_MIN
from rebalancer.models import Category


def safe_target(value: Any) -> float:
    """Coerce a target allocation into ``[TARGET_MIN, TARGET_MAX]``."""
    target = to_number(value)
    if not math.isfinite(target) or target < TARGET_MIN:
        return TARGET_MIN
    return min(target, TARGET_MAX)


def _name_key(name: Any) -> tuple:
    text = str(name)
    return (text.casefold(), text)


def find_biggest_deficit(categories: Optional[Sequence[Category]]) -> Optional[Category]:
    """
    Return the category furthest below its target, or ``None`` for no input.

    Ties on the deficit go to the larger (clamped) target; remaining ties go
    to the alphabetically first name (compared as ``str(name)``, case-folded
    first), so the winner never depends on list order.
    """
    if not is_list(categories) or not categories:
        return None

    allocations = calculate_allocations(categories)

    best: Optional[Category] = None
    best_deficit = -math.inf
    best_target = -math.inf

    for allocation in allocations:
        category = allocation.category
        target = safe_target(category.target_allocation)
        deficit = target - allocation.percentage

        if deficit > best_deficit:
            better = True
        elif deficit == best_deficit:
            better = target > best_target or (
                target == best_target
                and _name_key(category.name) < _name_key(best.name)
            )
        else:
            better = False

        if better:
            best = category
            best_deficit = deficit
            best_target = target

    return best
