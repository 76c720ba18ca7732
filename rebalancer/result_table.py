"""
rebalancer/result_table.py
--------------------------
Before/after summary of a :class:`CalculationResult`.

**Formatting-only**: every number shown here was computed by
:func:`rebalancer.calculator.calculate`. Rows follow the order of
``result.categories``; per-category values are joined back by category
identity, falling back to the name for results built from copies.
"""

from __future__ import annotations

import math
from typing import Iterable, Optional

import pandas as pd

from rebalancer.coercion import finite_or, to_number
from rebalancer.models import CalculationResult, Category

COLUMNS = ["Asset", "Target", "Before", "Added", "New Value", "Achieved"]
PERCENT_COLUMNS = ["Target", "Before", "Achieved"]
VALUE_COLUMNS = ["Added", "New Value"]

NO_RESULTS = "No results to display."


def _find(entries: Optional[Iterable], category: Category):
    if not entries:
        return None
    entries = list(entries)
    for entry in entries:
        if entry.category is category:
            return entry
    for entry in entries:
        if entry.category.name == category.name:
            return entry
    return None


def _percentage(entries, category: Category) -> float:
    entry = _find(entries, category)
    return finite_or(entry.percentage, 0.0) if entry is not None else 0.0


def _amount(entries, category: Category) -> float:
    entry = _find(entries, category)
    return finite_or(entry.amount, 0.0) if entry is not None else 0.0


def fmt_percent(value) -> str:
    number = to_number(value)
    if not math.isfinite(number):
        return "0.0%"
    return f"{number:.1f}%"


def fmt_value(value) -> str:
    number = to_number(value)
    if not math.isfinite(number):
        return "0.00"
    return f"{number:,.2f}"


def build_result_frame(result: Optional[CalculationResult]) -> pd.DataFrame:
    """
    One row per category with raw (unformatted) numbers.

    Columns: ``Asset``, ``Target``, ``Before``, ``Added``, ``New Value``,
    ``Achieved``. Percentages are in [0, 100].
    """
    if result is None or not result.categories:
        return pd.DataFrame(columns=COLUMNS)

    rows = []
    for category in result.categories:
        rows.append({
            "Asset":     "" if category.name is None else str(category.name),
            "Target":    _percentage(result.target_allocations, category),
            "Before":    _percentage(result.initial_allocations, category),
            "Added":     _amount(result.investments, category),
            "New Value": finite_or(category.current_value, 0.0),
            "Achieved":  _percentage(result.achieved_allocations, category),
        })
    return pd.DataFrame(rows, columns=COLUMNS)


def format_result_table(result: Optional[CalculationResult]) -> str:
    """
    Render *result* as a plain-text table with a ``Total`` footer.

    Rows that received money are prefixed with ``*``.
    """
    frame = build_result_frame(result)
    if frame.empty:
        return NO_RESULTS

    total_added = float(frame["Added"].sum())
    total_value = float(frame["New Value"].sum())

    display = pd.DataFrame({
        "Asset": [
            f"* {name}" if added > 0 else f"  {name}"
            for name, added in zip(frame["Asset"], frame["Added"])
        ],
    })
    for column in COLUMNS[1:]:
        formatter = fmt_percent if column in PERCENT_COLUMNS else fmt_value
        display[column] = frame[column].map(formatter)

    footer = {column: "" for column in COLUMNS}
    footer.update({
        "Asset":     "  Total",
        "Added":     fmt_value(total_added),
        "New Value": fmt_value(total_value),
    })
    display = pd.concat([display, pd.DataFrame([footer])], ignore_index=True)

    return display.to_string(index=False, justify="right")
