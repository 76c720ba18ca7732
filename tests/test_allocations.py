"""
tests/test_allocations.py
-------------------------
Unit tests for calculate_allocations().

Coverage:
    Percentages sum to 100 when any value is positive
    All-zero result when nothing is held
    Sanitising of negative / NaN / text current values
    Order and identity preservation
"""

import math
import unittest

from rebalancer.allocations import calculate_allocations, sanitized_values
from rebalancer.models import Category


def _cats(*values) -> list:
    return [
        Category(name=f"C{i}", target_allocation=0, current_value=v)
        for i, v in enumerate(values)
    ]


def _percentages(categories: list) -> list:
    return [a.percentage for a in calculate_allocations(categories)]


# ===========================================================================
# 1. Normal portfolios
# ===========================================================================

class TestPercentages(unittest.TestCase):

    def test_simple_split(self):
        self.assertEqual(_percentages(_cats(25, 75)), [25.0, 75.0])

    def test_sum_to_hundred(self):
        result = _percentages(_cats(10, 20, 30.5, 0.01, 12345.67))
        self.assertAlmostEqual(sum(result), 100.0, places=9)

    def test_single_holding_is_hundred(self):
        self.assertEqual(_percentages(_cats(0, 42, 0)), [0.0, 100.0, 0.0])

    def test_numeric_text_values(self):
        result = _percentages(_cats("100", "300"))
        self.assertEqual(result, [25.0, 75.0])

    def test_returns_plain_floats(self):
        for p in _percentages(_cats(1, 2, 3)):
            self.assertIs(type(p), float)


# ===========================================================================
# 2. Degenerate portfolios
# ===========================================================================

class TestDegenerate(unittest.TestCase):

    def test_empty_list(self):
        self.assertEqual(calculate_allocations([]), [])

    def test_all_zero_values(self):
        self.assertEqual(_percentages(_cats(0, 0, 0)), [0, 0, 0])

    def test_only_negative_values(self):
        self.assertEqual(_percentages(_cats(-10, -5)), [0, 0])

    def test_negative_and_invalid_values_excluded_from_pool(self):
        result = _percentages(_cats(100, -50, "abc", "50", None, math.nan, math.inf))
        self.assertAlmostEqual(result[0], 100 * 100 / 150)
        self.assertAlmostEqual(result[3], 100 * 50 / 150)
        for idx in (1, 2, 4, 5, 6):
            self.assertEqual(result[idx], 0.0)

    def test_sanitized_values(self):
        values = sanitized_values(_cats(5, -1, "x", "2.5"))
        self.assertEqual(values.tolist(), [5.0, 0.0, 0.0, 2.5])


# ===========================================================================
# 3. Order & identity
# ===========================================================================

class TestOrderAndIdentity(unittest.TestCase):

    def test_same_order_and_same_objects(self):
        cats = _cats(3, 1, 2)
        result = calculate_allocations(cats)
        self.assertEqual(len(result), 3)
        for category, allocation in zip(cats, result):
            self.assertIs(allocation.category, category)

    def test_duplicate_names_kept_apart(self):
        cats = [Category(name="Same", current_value=1),
                Category(name="Same", current_value=3)]
        result = calculate_allocations(cats)
        self.assertIs(result[0].category, cats[0])
        self.assertEqual(result[0].percentage, 25.0)
        self.assertEqual(result[1].percentage, 75.0)

    def test_does_not_mutate_input(self):
        cats = _cats("10", -5)
        calculate_allocations(cats)
        self.assertEqual(cats[0].current_value, "10")
        self.assertEqual(cats[1].current_value, -5)


if __name__ == "__main__":
    unittest.main()
