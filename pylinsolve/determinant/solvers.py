"""
Solver dispatch for the determinant engine.

Public API:
    det(A, trace=False)           -> DeterminantSolution
    determinant(A)                -> float
    determinant_with_trace(A)     -> (float, Trace)
"""

from numpy.typing import ArrayLike

from pylinsolve.core.trace import Trace
from pylinsolve.core.validation import check_tolerance
from pylinsolve.core.compute.tolerances import PIVOT_TOLERANCE
from pylinsolve.determinant.design import DeterminantDesign
from pylinsolve.determinant.solution import DeterminantSolution
from pylinsolve.determinant.backends.cpu import CPUEliminationBackend


def det(
    A: ArrayLike | DeterminantDesign,
    *,
    trace: bool = False,
    tol: float = PIVOT_TOLERANCE,
) -> DeterminantSolution:
    """
    Compute the determinant of a square matrix.

    The matrix is reduced to upper-triangular form with partial pivoting;
    the determinant is the product of the diagonal times the sign of the
    row permutation. If some column has no pivot with magnitude >= tol
    the determinant is exactly 0.0. A zero determinant is a legitimate
    value here, never an error.

    Args:
        A: Square matrix (n x n), any numeric array-like, or a prebuilt design
        trace: If True, record every swap and elimination step
        tol: Pivot tolerance (default PIVOT_TOLERANCE = 1e-12)

    Returns:
        DeterminantSolution

    Raises:
        ValidationError: If A is non-numeric or non-finite, or tol is invalid
        DimensionError: If A is not a non-empty square matrix

    Example:
        >>> from pylinsolve.determinant import det
        >>> det([[0, 1], [1, 0]]).value
        -1.0
    """
    tol = check_tolerance(tol)
    design = A if isinstance(A, DeterminantDesign) else DeterminantDesign.from_array(A)
    backend = CPUEliminationBackend(tol=tol, record_trace=trace)
    result = backend.solve(design)
    return DeterminantSolution(_result=result, _design=design)


def determinant(A: ArrayLike, *, tol: float = PIVOT_TOLERANCE) -> float:
    """Determinant of ``A`` as a float. See det()."""
    return det(A, tol=tol).value


def determinant_with_trace(
    A: ArrayLike,
    *,
    tol: float = PIVOT_TOLERANCE,
) -> tuple[float, Trace]:
    """Determinant of ``A`` together with the step trace. See det()."""
    solution = det(A, trace=True, tol=tol)
    return solution.value, solution.trace
