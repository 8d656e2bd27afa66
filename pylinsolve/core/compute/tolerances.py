"""
Tolerances and numeric thresholds for pylinsolve.

This module is the single source of truth for numeric cut-offs. Import
from here, never use raw literals.

- PIVOT_TOLERANCE: a pivot candidate whose magnitude is below this value
  is treated as zero (determinant 0, or a singular system).
- ILL_CONDITIONED_THRESHOLD: condition number above which a solvable
  system gets a RuntimeWarning.
- Tolerance tiers: comparison tolerances used by the test suite.
"""

from dataclasses import dataclass


# Pivot magnitudes strictly below this are numerically zero.
PIVOT_TOLERANCE = 1e-12

# At cond(A) = 1e10 a float64 solution keeps roughly 6 correct digits.
ILL_CONDITIONED_THRESHOLD = 1e10


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Elimination result vs LAPACK reference on well-conditioned systems
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, well-conditioned',
)

# Gauss-Jordan vs Cramer on the same system
SOLUTION_AGREEMENT = ToleranceTier(
    rtol=1e-6,
    atol=1e-6,
    name='solution_agreement',
    description='Two independent methods on the same system',
)

# Either method vs reference when cond(A) > 1e4
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned (cond > 1e4)',
)


def select_tolerance(is_ill_conditioned: bool = False) -> ToleranceTier:
    """Select appropriate tolerance tier for comparing against a reference."""
    if is_ill_conditioned:
        return CPU_FP64_ILL_CONDITIONED
    return CPU_FP64
