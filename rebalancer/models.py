from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass(eq=False)
class Category:
    """
    One investable asset of the rebalancing plan.

    Compared by identity, not by value: two categories may share a name, and
    results are joined back to the category object that produced them.
    ``current_value`` is updated in place while new money is distributed.
    """
    name: Any = ""
    target_allocation: Any = 0.0
    current_value: Any = 0.0
    isin: Optional[str] = None


@dataclass
class Allocation:
    """A category paired with a percentage in [0, 100]."""
    category: Category
    percentage: float


@dataclass
class Investment:
    """Cumulative amount added to one category during a single run."""
    category: Category
    amount: float = 0.0


@dataclass
class CalculationResult:
    """Everything a renderer needs to show the before/after picture."""
    target_allocations: List[Allocation] = field(default_factory=list)
    initial_allocations: List[Allocation] = field(default_factory=list)
    achieved_allocations: List[Allocation] = field(default_factory=list)
    investments: List[Investment] = field(default_factory=list)
    categories: List[Category] = field(default_factory=list)
