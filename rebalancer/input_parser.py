"""
rebalancer/input_parser.py
--------------------------
Turns loosely typed user input into normalised :class:`Category` objects.

Accepted sources:
  - dicts as produced by a web form or JSON file (camelCase or snake_case
    keys, numbers possibly given as text)
  - one-line text entries ``"name, target, current[, isin]"`` typed at the
    interactive prompt

Invalid numbers become ``0.0`` here, so everything past this module can
assume plain floats.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Sequence

from rebalancer.coercion import finite_or
from rebalancer.config import PERCENT_SCALE, TARGET_TOTAL_TOLERANCE
from rebalancer.models import Category

_TRUE_WORDS = {"true", "yes", "y", "1", "on"}

# Field name → accepted keys, first match wins
_KEYS: Dict[str, tuple] = {
    "name":                  ("name",),
    "target_allocation":     ("targetAllocation", "target_allocation", "target"),
    "current_value":         ("currentValue", "current_value", "current"),
    "isin":                  ("isin",),
    "amount_to_invest":      ("amountToInvest", "amount_to_invest", "amount"),
    "round_invested_amount": ("roundInvestedAmount", "round_invested_amount", "round"),
    "categories":            ("categories",),
}


@dataclass
class RebalanceRequest:
    """A complete, normalised calculator input."""
    amount_to_invest: float = 0.0
    round_invested_amount: bool = False
    categories: List[Category] = field(default_factory=list)


def _lookup(raw: Mapping[str, Any], name: str, default: Any = None) -> Any:
    for key in _KEYS[name]:
        if key in raw:
            return raw[key]
    return default


def parse_flag(value: Any) -> bool:
    """Interpret checkbox-style values (``True``, ``"yes"``, ``"on"`` …)."""
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_WORDS
    return bool(value)


def parse_category(raw: Mapping[str, Any]) -> Category:
    """
    Build a :class:`Category` from a form/JSON record.

    Raises
    ------
    ValueError
        If *raw* is not a mapping.
    """
    if not isinstance(raw, Mapping):
        raise ValueError(f"Category entry must be an object, got {raw!r}.")

    name = _lookup(raw, "name", "")
    isin = _lookup(raw, "isin")
    isin = str(isin).strip() if isin is not None else ""

    return Category(
        name="" if name is None else str(name).strip(),
        target_allocation=finite_or(_lookup(raw, "target_allocation"), 0.0),
        current_value=finite_or(_lookup(raw, "current_value"), 0.0),
        isin=isin or None,
    )


def parse_category_line(text: str) -> Category:
    """
    Parse ``"name, target, current[, isin]"``.

    >>> c = parse_category_line("World ETF, 70, 1200.50, IE00B4L5Y983")
    >>> (c.name, c.target_allocation, c.current_value, c.isin)
    ('World ETF', 70.0, 1200.5, 'IE00B4L5Y983')
    """
    parts = [p.strip() for p in text.split(",")]
    if len(parts) < 3:
        raise ValueError(
            f"Expected 'name, target, current[, isin]', got {text!r}."
        )
    return parse_category({
        "name":             parts[0],
        "targetAllocation": parts[1],
        "currentValue":     parts[2],
        "isin":             parts[3] if len(parts) > 3 else None,
    })


def parse_request(payload: Mapping[str, Any]) -> RebalanceRequest:
    """
    Build a :class:`RebalanceRequest` from a form/JSON payload.

    Raises
    ------
    ValueError
        If *payload* is not a mapping or ``categories`` is not a list.
    """
    if not isinstance(payload, Mapping):
        raise ValueError("Request must be a JSON object.")

    raw_categories = _lookup(payload, "categories", [])
    if raw_categories is None:
        raw_categories = []
    if not isinstance(raw_categories, (list, tuple)):
        raise ValueError("'categories' must be a list.")

    return RebalanceRequest(
        amount_to_invest=finite_or(_lookup(payload, "amount_to_invest"), 0.0),
        round_invested_amount=parse_flag(_lookup(payload, "round_invested_amount", False)),
        categories=[parse_category(c) for c in raw_categories],
    )


def load_request(path: str | Path) -> RebalanceRequest:
    """
    Read a request from a JSON file.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    ValueError
        If the file is not valid JSON or has the wrong shape.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Request file not found: {path}")

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"{path} is not valid JSON: {exc}") from exc

    return parse_request(payload)


def total_target_allocation(categories: Sequence[Category]) -> float:
    """Sum of all target allocations; unusable entries count as 0."""
    return sum(finite_or(c.target_allocation, 0.0) for c in categories)


def is_fully_allocated(categories: Sequence[Category]) -> bool:
    """True when the targets add up to 100 % within the configured tolerance."""
    total = total_target_allocation(categories)
    return abs(total - PERCENT_SCALE) < TARGET_TOTAL_TOLERANCE
