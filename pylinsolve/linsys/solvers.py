"""
Solver dispatch for linear systems.

This module provides solve() (public API), the per-method convenience
functions, and backend selection.
"""

import warnings
from typing import Any, Literal
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinsolve.core.exceptions import ValidationError
from pylinsolve.core.trace import Trace
from pylinsolve.core.validation import check_tolerance
from pylinsolve.core.compute.tolerances import PIVOT_TOLERANCE
from pylinsolve.linsys.design import LinearSystemDesign
from pylinsolve.linsys.solution import LinearSystemSolution
from pylinsolve.linsys.backends.gauss_jordan import GaussJordanBackend
from pylinsolve.linsys.backends.cramer import CramerBackend


# Type alias for method selection
MethodChoice = Literal['gauss_jordan', 'cramer']


def solve(
    A: ArrayLike | LinearSystemDesign,
    b: ArrayLike | None = None,
    *,
    method: MethodChoice = 'gauss_jordan',
    trace: bool = False,
    tol: float = PIVOT_TOLERANCE,
) -> LinearSystemSolution:
    """
    Solve the square linear system A x = b.

    This is the primary public API. Input validation, backend selection
    and result wrapping all happen here.

    Args:
        A: Coefficient matrix (n x n), or a prebuilt LinearSystemDesign
        b: Right-hand side (n,). Required unless A is a design.
        method: Algorithm to use:
            - 'gauss_jordan': reduce [A|b] to reduced row-echelon form
            - 'cramer': x_i = det(A_i) / det(A), n + 1 determinants
        trace: If True, record every intermediate step
        tol: Pivot tolerance (default PIVOT_TOLERANCE = 1e-12)

    Returns:
        LinearSystemSolution with x, residuals, optional trace and summary()

    Raises:
        ValidationError: If inputs are non-numeric/non-finite or options invalid
        DimensionError: If A is not square or len(b) != n
        SingularMatrixError: If the system has no unique solution

    Warns:
        RuntimeWarning: If A is ill-conditioned but still solvable

    Example:
        >>> from pylinsolve.linsys import solve
        >>> sol = solve([[2, 1, -1], [-3, -1, 2], [-2, 1, 2]], [8, -11, -3])
        >>> sol.x
        array([ 2.,  3., -1.])
    """
    return _solve(A, b, method=method, trace=trace, tol=tol)


def _solve(
    A: ArrayLike | LinearSystemDesign,
    b: ArrayLike | None,
    *,
    method: MethodChoice,
    trace: bool,
    tol: float,
) -> LinearSystemSolution:
    """
    Shared body of solve() and the per-method functions.

    Public entry points must call this directly: warnings use stacklevel=3
    so they are attributed to the caller of the entry point.
    """
    # === Input Validation ===
    # This is the boundary - validate here, trust everywhere else
    tol = check_tolerance(tol)

    if isinstance(A, LinearSystemDesign):
        if b is not None:
            raise ValidationError("b must be None when A is a LinearSystemDesign")
        design = A
    else:
        if b is None:
            raise ValidationError("b required when A is an array")
        design = LinearSystemDesign.from_arrays(A, b)

    # === Select Backend ===
    backend = _get_backend(method, tol=tol, record_trace=trace)

    # === Solve ===
    result = backend.solve(design)

    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=3)

    # === Wrap and Return ===
    return LinearSystemSolution(_result=result, _design=design)


def gauss_jordan(
    A: ArrayLike,
    b: ArrayLike,
    *,
    tol: float = PIVOT_TOLERANCE,
) -> NDArray[np.floating[Any]]:
    """Solution vector of A x = b by Gauss-Jordan elimination."""
    return _solve(A, b, method='gauss_jordan', trace=False, tol=tol).x


def gauss_jordan_with_trace(
    A: ArrayLike,
    b: ArrayLike,
    *,
    tol: float = PIVOT_TOLERANCE,
) -> tuple[NDArray[np.floating[Any]], Trace]:
    """Gauss-Jordan solution vector together with its step trace."""
    solution = _solve(A, b, method='gauss_jordan', trace=True, tol=tol)
    return solution.x, solution.trace


def cramer(
    A: ArrayLike,
    b: ArrayLike,
    *,
    tol: float = PIVOT_TOLERANCE,
) -> NDArray[np.floating[Any]]:
    """Solution vector of A x = b by Cramer's Rule."""
    return _solve(A, b, method='cramer', trace=False, tol=tol).x


def cramer_with_trace(
    A: ArrayLike,
    b: ArrayLike,
    *,
    tol: float = PIVOT_TOLERANCE,
) -> tuple[NDArray[np.floating[Any]], Trace]:
    """Cramer's Rule solution vector together with its step trace."""
    solution = _solve(A, b, method='cramer', trace=True, tol=tol)
    return solution.x, solution.trace


def _get_backend(choice: MethodChoice, *, tol: float, record_trace: bool):
    """
    Select and instantiate the backend for a method.

    Raises:
        ValidationError: If the method is unknown
    """
    if choice == 'gauss_jordan':
        return GaussJordanBackend(tol=tol, record_trace=record_trace)

    elif choice == 'cramer':
        return CramerBackend(tol=tol, record_trace=record_trace)

    else:
        raise ValidationError(f"Unknown method: {choice!r}")
