"""
Row-reduction kernels with partial pivoting.

Two kernels share one pivoting convention:

    triangular_determinant: reduce a square matrix to upper-triangular
        form and return sign * prod(diag). A column without a usable
        pivot gives determinant 0.0; this is a value, not an error.
    gauss_jordan_reduce: reduce the augmented matrix [A|b] to reduced
        row-echelon form and read the solution off the last column. A
        column without a usable pivot raises SingularMatrixError.

Both kernels work on private float64 copies and never touch their
inputs. When a ``trace`` list is passed, steps are appended to it as the
reduction proceeds; traced and untraced runs perform the same
arithmetic in the same order, so their numeric results are identical.

Inputs are assumed validated (square, finite, matching lengths); the
public solvers do that at the boundary.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pylinsolve.core.exceptions import SingularMatrixError
from pylinsolve.core.trace import (
    Step,
    InitialStep,
    SwapStep,
    NormalizeStep,
    EliminateStep,
    SingularPivotStep,
    TriangularStep,
    DeterminantValueStep,
    FinalStep,
    snapshot,
)


@dataclass(frozen=True)
class DeterminantResult:
    """
    Result of the triangular determinant reduction.

    Attributes:
        value: The determinant (exactly 0.0 when singular)
        sign: +1 or -1, parity of the row swaps performed
        n_swaps: Number of row swaps performed
        triangular: Working matrix when the reduction ended (upper
            triangular unless the run stopped at a singular column)
        pivots: Pivot values used, one per completed column
        singular_column: Column where no pivot passed the tolerance, or None
    """
    value: float
    sign: int
    n_swaps: int
    triangular: NDArray[np.floating[Any]]
    pivots: tuple[float, ...]
    singular_column: int | None

    @property
    def is_singular(self) -> bool:
        return self.singular_column is not None


@dataclass(frozen=True)
class ReductionResult:
    """
    Result of Gauss-Jordan reduction of [A|b].

    Attributes:
        solution: Last column of the reduced matrix (n,)
        reduced: The reduced augmented matrix (n x n+1)
        n_swaps: Number of row swaps performed
        pivots: Pivot values used, one per column, before normalization
    """
    solution: NDArray[np.floating[Any]]
    reduced: NDArray[np.floating[Any]]
    n_swaps: int
    pivots: tuple[float, ...]


def select_pivot(M: NDArray[np.floating[Any]], column: int) -> int:
    """
    Row index of the largest |M[r, column]| for r >= column.

    Ties go to the first (topmost) candidate.
    """
    return column + int(np.argmax(np.abs(M[column:, column])))


def _swap_rows(M: NDArray[np.floating[Any]], i: int, j: int) -> None:
    M[[i, j]] = M[[j, i]]


def triangular_determinant(
    matrix: NDArray[np.floating[Any]],
    tol: float,
    trace: list[Step] | None = None,
) -> DeterminantResult:
    """
    Determinant by elimination to upper-triangular form.

    Algorithm, for each pivot column i:
        1. Pick the row in [i, n) with the largest |M[r, i]|.
        2. If that magnitude is below ``tol``, stop: determinant is 0.0.
        3. Swap it into row i if needed, flipping the sign.
        4. For each row r > i with a nonzero factor M[r, i] / M[i, i],
           subtract factor * row i over columns >= i. Rows whose factor
           is exactly zero are left alone and not traced.
    Determinant = sign * product of the diagonal.

    Args:
        matrix: Square matrix (n x n)
        tol: Pivot tolerance
        trace: If given, steps are appended to it

    Returns:
        DeterminantResult
    """
    M = np.array(matrix, dtype=np.float64, copy=True)
    n = M.shape[0]
    sign = 1
    n_swaps = 0
    pivots: list[float] = []

    for i in range(n):
        p = select_pivot(M, i)

        if abs(M[p, i]) < tol:
            if trace is not None:
                trace.append(SingularPivotStep(
                    column=i,
                    pivot=float(abs(M[p, i])),
                    tolerance=tol,
                    matrix=snapshot(M),
                ))
            return DeterminantResult(
                value=0.0,
                sign=sign,
                n_swaps=n_swaps,
                triangular=snapshot(M),
                pivots=tuple(pivots),
                singular_column=i,
            )

        if p != i:
            _swap_rows(M, i, p)
            sign = -sign
            n_swaps += 1
            if trace is not None:
                trace.append(SwapStep(row=i, pivot_row=p, matrix=snapshot(M)))

        pivot = M[i, i]
        pivots.append(float(pivot))

        for r in range(i + 1, n):
            factor = M[r, i] / pivot
            if factor == 0.0:
                continue
            M[r, i:] -= factor * M[i, i:]
            if trace is not None:
                trace.append(EliminateStep(
                    source_row=i,
                    target_row=r,
                    factor=float(factor),
                    matrix=snapshot(M),
                ))

    value = float(sign * np.prod(np.diag(M)))

    if trace is not None:
        trace.append(TriangularStep(matrix=snapshot(M), sign=sign))
        trace.append(DeterminantValueStep(value=value))

    return DeterminantResult(
        value=value,
        sign=sign,
        n_swaps=n_swaps,
        triangular=snapshot(M),
        pivots=tuple(pivots),
        singular_column=None,
    )


def gauss_jordan_reduce(
    A: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    tol: float,
    trace: list[Step] | None = None,
) -> ReductionResult:
    """
    Solve A x = b by Gauss-Jordan elimination with partial pivoting.

    Algorithm, on the augmented matrix M = [A|b], for each column i:
        1. Pick the row in [i, n) with the largest |M[r, i]|.
        2. If that magnitude is below ``tol``, raise SingularMatrixError.
        3. Swap it into row i if needed.
        4. Divide row i (columns i..n) by the pivot.
        5. For every other row r, subtract M[r, i] * row i (columns i..n).
           Every such row is traced, including those with a zero factor.
    The solution is column n of the reduced matrix.

    Args:
        A: Coefficient matrix (n x n)
        b: Right-hand side (n,)
        tol: Pivot tolerance
        trace: If given, steps are appended to it

    Returns:
        ReductionResult

    Raises:
        SingularMatrixError: If a column has no pivot above ``tol``
    """
    n = A.shape[0]
    M = np.empty((n, n + 1), dtype=np.float64)
    M[:, :n] = A
    M[:, n] = b
    n_swaps = 0
    pivots: list[float] = []

    if trace is not None:
        trace.append(InitialStep(matrix=snapshot(M)))

    for i in range(n):
        p = select_pivot(M, i)

        if abs(M[p, i]) < tol:
            raise SingularMatrixError(
                f"Matrix is singular or nearly singular: largest pivot candidate "
                f"in column {i + 1} is {abs(M[p, i]):.3g} (tolerance {tol:.3g})",
                matrix_name='A',
                column=i,
                pivot=float(abs(M[p, i])),
            )

        if p != i:
            _swap_rows(M, i, p)
            n_swaps += 1
            if trace is not None:
                trace.append(SwapStep(row=i, pivot_row=p, matrix=snapshot(M)))

        pivot = M[i, i]
        pivots.append(float(pivot))
        M[i, i:] /= pivot
        if trace is not None:
            trace.append(NormalizeStep(row=i, pivot=float(pivot), matrix=snapshot(M)))

        for r in range(n):
            if r == i:
                continue
            factor = M[r, i]
            M[r, i:] -= factor * M[i, i:]
            if trace is not None:
                trace.append(EliminateStep(
                    source_row=i,
                    target_row=r,
                    factor=float(factor),
                    matrix=snapshot(M),
                ))

    solution = M[:, n].copy()

    if trace is not None:
        trace.append(FinalStep(solution=snapshot(solution), matrix=snapshot(M)))

    return ReductionResult(
        solution=solution,
        reduced=snapshot(M),
        n_swaps=n_swaps,
        pivots=tuple(pivots),
    )
