"""
Shared helpers for the linear system backends.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pylinsolve.core.compute.tolerances import ILL_CONDITIONED_THRESHOLD


def compute_residuals(
    A: NDArray[np.floating[Any]],
    x: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """Residual vector A x - b."""
    return A @ x - b


def condition_number(A: NDArray[np.floating[Any]]) -> float:
    """2-norm condition number of A (inf when numerically singular)."""
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.linalg.cond(A))


def conditioning_warnings(cond: float) -> tuple[str, ...]:
    """Warning messages for a solvable but ill-conditioned system."""
    if cond > ILL_CONDITIONED_THRESHOLD:
        return (
            f"Coefficient matrix is ill-conditioned (cond={cond:.3g} > "
            f"{ILL_CONDITIONED_THRESHOLD:.0e}); the solution may be inaccurate.",
        )
    return ()
