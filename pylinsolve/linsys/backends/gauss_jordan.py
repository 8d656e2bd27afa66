"""
Gauss-Jordan backend.

Reduces [A|b] to reduced row-echelon form with partial pivoting in a
single O(n^3) pass and reads the solution off the augmented column.
"""

from typing import Any

from pylinsolve.core.result import Result
from pylinsolve.core.trace import Step
from pylinsolve.core.compute.timing import Timer
from pylinsolve.core.compute.tolerances import PIVOT_TOLERANCE
from pylinsolve.core.compute.linalg.elimination import gauss_jordan_reduce
from pylinsolve.linsys.design import LinearSystemDesign
from pylinsolve.linsys.solution import LinearSystemParams
from pylinsolve.linsys._common import (
    compute_residuals, condition_number, conditioning_warnings,
)


class GaussJordanBackend:
    """
    CPU backend using Gauss-Jordan elimination.

    Implements the Backend protocol for LinearSystemDesign -> LinearSystemParams.
    """

    def __init__(self, *, tol: float = PIVOT_TOLERANCE, record_trace: bool = False):
        self._tol = tol
        self._record_trace = record_trace

    @property
    def name(self) -> str:
        return 'cpu_gauss_jordan'

    def solve(self, design: LinearSystemDesign) -> Result[LinearSystemParams]:
        """
        Solve A x = b.

        Algorithm:
            1. Build [A|b]
            2. For each column: pivot, swap, normalize, eliminate all other rows
            3. x = last column of the reduced matrix

        Args:
            design: Validated linear system design

        Returns:
            Result containing LinearSystemParams

        Raises:
            SingularMatrixError: If some column has no pivot above tolerance
        """
        timer = Timer()
        timer.start()

        steps: list[Step] | None = [] if self._record_trace else None

        with timer.section('reduction'):
            reduction = gauss_jordan_reduce(design.A, design.b, self._tol, steps)

        with timer.section('residuals'):
            residuals = compute_residuals(design.A, reduction.solution, design.b)
            cond = condition_number(design.A)

        timer.stop()

        params = LinearSystemParams(
            x=reduction.solution,
            residuals=residuals,
            trace=tuple(steps) if steps is not None else None,
        )

        info: dict[str, Any] = {
            'method': 'gauss_jordan',
            'n': design.n,
            'tol': self._tol,
            'n_swaps': reduction.n_swaps,
            'pivots': reduction.pivots,
            'condition_number': cond,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=conditioning_warnings(cond),
        )
