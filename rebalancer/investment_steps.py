"""
rebalancer/investment_steps.py
------------------------------
Greedy distribution of new money across categories.

Each iteration hands one step of money to the category with the biggest
deficit, then feeds the updated value back into the next deficit lookup by
writing it onto the category itself. The caller's ``Category`` objects are
therefore mutated: their ``current_value`` ends up holding the post-investment
value that the result table reports.
"""

from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Sequence

from rebalancer.coercion import finite_or, is_list, to_number
from rebalancer.config import ITERATION_SAFETY_MARGIN, MAX_STEP_DECIMALS
from rebalancer.deficit_finder import find_biggest_deficit
from rebalancer.logging_setup import get_logger
from rebalancer.models import Category, Investment

logger = get_logger(__name__)


def step_decimals(step_size: float) -> int:
    """
    Number of digits after the decimal point of *step_size*.

    ``0.25`` → 2, ``0.5`` → 1, ``1`` and ``1.0`` → 0.

    The count comes from the plain decimal value, so steps whose ``repr``
    uses exponent notation still count their fractional digits
    (``1e-07`` → 7) instead of reading as whole numbers. The result is capped
    at ``MAX_STEP_DECIMALS`` so ``10 ** n`` stays a finite float.
    """
    try:
        exponent = Decimal(repr(float(step_size))).normalize().as_tuple().exponent
    except (InvalidOperation, ValueError, OverflowError):
        return 0
    if not isinstance(exponent, int):
        return 0
    return min(max(0, -exponent), MAX_STEP_DECIMALS)


def _round_half_up(value: float, factor: float) -> float:
    scaled = value * factor + 0.5
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled) / factor


def _add_rounded(a: float, b: float, factor: float) -> float:
    scaled = a * factor + b * factor + 0.5
    if not math.isfinite(scaled):
        return a + b
    return math.floor(scaled) / factor


def run_investment_steps(
    amount_to_invest: Any,
    step_size: Any,
    categories: Sequence[Category],
) -> List[Investment]:
    """
    Distribute *amount_to_invest* across *categories* in chunks of *step_size*.

    Parameters
    ----------
    amount_to_invest:
        Money to hand out. Non-finite or non-positive → nothing is invested.
    step_size:
        Size of each chunk. Non-finite or non-positive → nothing is invested.
    categories:
        Categories to invest into. Their ``current_value`` is increased in
        place by every chunk they receive.

    Returns
    -------
    List[Investment]
        One entry per category that received money, in the order the
        categories were first chosen. Any remainder smaller than one step is
        left uninvested, so the amounts can sum to less than
        *amount_to_invest*.
    """
    amount = to_number(amount_to_invest)
    step = to_number(step_size)
    cats = list(categories) if is_list(categories) else []

    if not math.isfinite(amount) or amount <= 0:
        return []
    if not math.isfinite(step) or step <= 0:
        return []
    if not cats:
        return []

    steps_needed = amount / step
    if not math.isfinite(steps_needed):
        logger.warning(
            "Step %r is too small to distribute %r; nothing invested", step, amount
        )
        return []

    factor = float(10 ** step_decimals(step))

    by_category: Dict[int, Investment] = {}
    investments: List[Investment] = []

    remaining = amount
    max_iterations = math.ceil(steps_needed) + ITERATION_SAFETY_MARGIN
    iterations = 0

    while remaining >= step and iterations < max_iterations:
        iterations += 1
        chunk = _round_half_up(min(remaining, step), factor)
        if not chunk > 0:
            break
        if remaining - chunk == remaining:
            logger.warning(
                "Step %r is lost in rounding against %r; stopping", chunk, remaining
            )
            break

        category = find_biggest_deficit(cats)
        if category is None:
            break

        investment = by_category.get(id(category))
        if investment is None:
            investment = Investment(category=category, amount=0)
            by_category[id(category)] = investment
            investments.append(investment)
        investment.amount = _add_rounded(investment.amount, chunk, factor)

        # current_value keeps full precision; only investment amounts are rounded
        category.current_value = finite_or(category.current_value, 0.0) + chunk

        remaining -= chunk

    if iterations >= max_iterations and remaining >= step:
        logger.warning(
            "Investment loop hit its iteration cap (%d) with %.10g left",
            max_iterations, remaining,
        )
    logger.debug(
        "Invested %d steps of %s into %d categories; %.10g left over",
        iterations, step_size, len(investments), remaining,
    )

    return investments
