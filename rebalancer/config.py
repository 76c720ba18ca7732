"""
rebalancer/config.py
--------------------
Shared numeric configuration for the rebalancing calculator.

Every tunable that the step-size, allocation and investment modules rely on
lives here so the algorithms never carry magic numbers of their own.
"""

# ---------------------------------------------------------------------------
# Step size
# ---------------------------------------------------------------------------
# The amount to invest is split into at most MAX_STEPS chunks. A larger step
# means fewer deficit lookups but a coarser final allocation.

MAX_STEPS: int = 100

# Smallest step allowed in each mode: whole currency units when the invested
# amounts must be rounded, cents otherwise.
MIN_STEP_ROUNDED: int = 1
MIN_STEP_CENTS: float = 0.01

# Number of decimals a cent-mode step is normalised to.
CENT_DECIMALS: int = 2

# ---------------------------------------------------------------------------
# Allocations
# ---------------------------------------------------------------------------

PERCENT_SCALE: float = 100.0

# Target allocations are clamped into [TARGET_MIN, TARGET_MAX] before the
# deficit comparison.
TARGET_MIN: float = 0.0
TARGET_MAX: float = 100.0

# Targets summing to within this many percentage points of 100 count as a
# complete allocation plan.
TARGET_TOTAL_TOLERANCE: float = 0.1

# ---------------------------------------------------------------------------
# Investment loop
# ---------------------------------------------------------------------------
# Extra iterations allowed on top of ceil(amount / step) before the loop is
# cut off. Only reachable through floating-point drift.

ITERATION_SAFETY_MARGIN: int = 5

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOG_LEVEL_ENV_VAR: str = "REBALANCER_LOG_LEVEL"

# ---------------------------------------------------------------------------
# Float limits
# ---------------------------------------------------------------------------
# Largest power of ten a float can hold. Rounding factors derived from a step
# size never exceed 10 ** MAX_STEP_DECIMALS.

MAX_STEP_DECIMALS: int = 308
