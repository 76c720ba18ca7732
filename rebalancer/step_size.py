"""
rebalancer/step_size.py
-----------------------
Chooses the quantum of money handed out per iteration of the investment loop.

The step is sized so that the whole amount is covered in at most
``MAX_STEPS`` iterations while staying a whole number (rounded mode) or a
multiple of one cent.
"""

from __future__ import annotations

import math
from typing import Any

from rebalancer.coercion import finite_or
from rebalancer.config import (
    CENT_DECIMALS,
    MAX_STEPS,
    MIN_STEP_CENTS,
    MIN_STEP_ROUNDED,
)


def determine_step_size(amount_to_invest: Any, round_invested_amount: bool) -> float:
    """
    Return the step size for distributing *amount_to_invest*.

    Parameters
    ----------
    amount_to_invest:
        Total amount of money to invest. Missing or non-finite values are
        treated as ``0``.
    round_invested_amount:
        When truthy the step is a whole number ``>= 1``; otherwise it is a
        multiple of ``0.01`` normalised to two decimals.

    Returns
    -------
    int | float
        The minimum step for the mode when the amount is not positive.
    """
    amount = finite_or(amount_to_invest, 0.0)
    min_step = MIN_STEP_ROUNDED if round_invested_amount else MIN_STEP_CENTS

    if amount <= 0:
        return min_step

    base = amount / MAX_STEPS

    if round_invested_amount:
        return max(math.ceil(base), MIN_STEP_ROUNDED)

    scale = 10 ** CENT_DECIMALS
    step = math.ceil(base * scale) / scale
    if step < MIN_STEP_CENTS:
        step = MIN_STEP_CENTS
    # Strip binary noise such as 0.30000000000000004
    return round(step, CENT_DECIMALS)
