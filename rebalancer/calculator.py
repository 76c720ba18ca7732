"""
rebalancer/calculator.py
------------------------
Entry point of the rebalancing calculator.

Design contract:
  - Plain data in, plain data out (see :mod:`rebalancer.models`)
  - No rendering, no persistence, no I/O
  - Never raises for malformed numbers; degenerate input produces empty
    investments and all-zero allocations
  - Mutates ``current_value`` of the supplied categories
"""

from __future__ import annotations

from typing import Any, Sequence

from rebalancer.allocations import calculate_allocations
from rebalancer.coercion import is_list
from rebalancer.investment_steps import run_investment_steps
from rebalancer.logging_setup import get_logger
from rebalancer.models import Allocation, CalculationResult, Category
from rebalancer.step_size import determine_step_size

logger = get_logger(__name__)


def calculate(
    amount_to_invest: Any,
    round_invested_amount: bool,
    categories: Sequence[Category],
) -> CalculationResult:
    """
    Work out how to spread *amount_to_invest* over *categories*.

    Parameters
    ----------
    amount_to_invest:
        Money to invest.
    round_invested_amount:
        Invest whole currency units only.
    categories:
        Categories to rebalance, in display order. Their ``current_value``
        is increased in place by the money they receive.

    Returns
    -------
    CalculationResult
        Target, initial and achieved allocations (one entry per category,
        input order), the investments made, and the updated categories.
    """
    if isinstance(categories, list):
        cats = categories
    else:
        cats = list(categories) if is_list(categories) else []

    step_size = determine_step_size(amount_to_invest, round_invested_amount)
    logger.debug("Step size %s for amount %r", step_size, amount_to_invest)

    target_allocations = [
        Allocation(category=c, percentage=c.target_allocation) for c in cats
    ]
    initial_allocations = calculate_allocations(cats)
    investments = run_investment_steps(amount_to_invest, step_size, cats)
    achieved_allocations = calculate_allocations(cats)

    return CalculationResult(
        target_allocations=target_allocations,
        initial_allocations=initial_allocations,
        achieved_allocations=achieved_allocations,
        investments=investments,
        categories=cats,
    )
