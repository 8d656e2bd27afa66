"""
Determinant engine.

Pivoted elimination to upper-triangular form, optionally recording every
row swap and elimination step.

Public API:
    det(A, trace=False)        - Full DeterminantSolution
    determinant(A)             - Value only
    determinant_with_trace(A)  - (value, trace)
"""

from pylinsolve.determinant.design import DeterminantDesign
from pylinsolve.determinant.solution import DeterminantParams, DeterminantSolution
from pylinsolve.determinant.solvers import det, determinant, determinant_with_trace

__all__ = [
    "det",
    "determinant",
    "determinant_with_trace",
    "DeterminantDesign",
    "DeterminantParams",
    "DeterminantSolution",
]
