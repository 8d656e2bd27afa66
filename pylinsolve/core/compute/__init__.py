"""
Shared compute infrastructure for pylinsolve.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Pivot tolerance and comparison tiers
    linalg: Elimination kernels
"""

from pylinsolve.core.compute.timing import Timer, timed
from pylinsolve.core.compute.tolerances import (
    PIVOT_TOLERANCE,
    ILL_CONDITIONED_THRESHOLD,
    ToleranceTier,
)

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "PIVOT_TOLERANCE",
    "ILL_CONDITIONED_THRESHOLD",
    "ToleranceTier",
]
