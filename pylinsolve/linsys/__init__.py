"""
Square linear systems A x = b.

Two independent algorithms, each available with or without a full
step trace:

    Gauss-Jordan elimination with partial pivoting
    Cramer's Rule over pivoted-elimination determinants

Public API:
    solve(A, b, method=..., trace=...) -> LinearSystemSolution
    gauss_jordan(A, b) / gauss_jordan_with_trace(A, b)
    cramer(A, b) / cramer_with_trace(A, b)

Example:
    >>> from pylinsolve.linsys import solve
    >>> sol = solve(A, b, method='cramer', trace=True)
    >>> print(sol.summary())
"""

from pylinsolve.linsys.design import LinearSystemDesign
from pylinsolve.linsys.solution import LinearSystemSolution, LinearSystemParams
from pylinsolve.linsys.solvers import (
    solve,
    gauss_jordan,
    gauss_jordan_with_trace,
    cramer,
    cramer_with_trace,
)

__all__ = [
    "solve",
    "gauss_jordan",
    "gauss_jordan_with_trace",
    "cramer",
    "cramer_with_trace",
    "LinearSystemDesign",
    "LinearSystemSolution",
    "LinearSystemParams",
]
