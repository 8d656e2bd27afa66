"""
Linear algebra kernels for pylinsolve.

All kernels follow these conventions:
    - Work on private float64 copies; caller arrays are never mutated
    - Each operation returns a structured result dataclass
    - Optional ``trace`` list receives step records as the kernel runs
    - Errors are raised immediately with clear messages

Submodules:
    elimination: Pivoted triangular determinant and Gauss-Jordan reduction
"""

from pylinsolve.core.compute.linalg.elimination import (
    DeterminantResult,
    ReductionResult,
    select_pivot,
    triangular_determinant,
    gauss_jordan_reduce,
)

__all__ = [
    "DeterminantResult",
    "ReductionResult",
    "select_pivot",
    "triangular_determinant",
    "gauss_jordan_reduce",
]
