"""
Cramer's Rule backend.

x_i = det(A_i) / det(A), where A_i is A with column i replaced by b.
Every determinant goes through the pivoted triangular kernel, so a solve
costs n + 1 determinant evaluations against Gauss-Jordan's single pass.
"""

from typing import Any
import numpy as np

from pylinsolve.core.exceptions import NumericalError, SingularMatrixError
from pylinsolve.core.result import Result
from pylinsolve.core.trace import (
    Step, DeterminantValueStep, UnknownResultStep, FinalStep, snapshot,
)
from pylinsolve.core.compute.timing import Timer
from pylinsolve.core.compute.tolerances import PIVOT_TOLERANCE
from pylinsolve.core.compute.linalg.elimination import triangular_determinant
from pylinsolve.linsys.design import LinearSystemDesign
from pylinsolve.linsys.solution import LinearSystemParams
from pylinsolve.linsys._common import (
    compute_residuals, condition_number, conditioning_warnings,
)


class CramerBackend:
    """
    CPU backend using Cramer's Rule.

    Implements the Backend protocol for LinearSystemDesign -> LinearSystemParams.
    """

    def __init__(self, *, tol: float = PIVOT_TOLERANCE, record_trace: bool = False):
        self._tol = tol
        self._record_trace = record_trace

    @property
    def name(self) -> str:
        return 'cpu_cramer'

    def solve(self, design: LinearSystemDesign) -> Result[LinearSystemParams]:
        """
        Solve A x = b by Cramer's Rule.

        Args:
            design: Validated linear system design

        Returns:
            Result containing LinearSystemParams (with det(A))

        Raises:
            SingularMatrixError: If |det(A)| < tol
            NumericalError: If a determinant overflows to inf
        """
        timer = Timer()
        timer.start()

        A, b, n = design.A, design.b, design.n
        tracing = self._record_trace
        steps: list[Step] = []

        with timer.section('determinants'):
            main_steps: list[Step] | None = [] if tracing else None
            main = triangular_determinant(A, self._tol, main_steps)
            if tracing:
                steps.append(DeterminantValueStep(
                    value=main.value,
                    matrix=snapshot(A),
                    trace=tuple(main_steps),
                ))

            if abs(main.value) < self._tol:
                raise SingularMatrixError(
                    f"Determinant is zero (det(A)={main.value:.3g}, tolerance "
                    f"{self._tol:.3g}): the system has no unique solution",
                    matrix_name='A',
                    column=main.singular_column,
                    determinant=main.value,
                )
            _check_finite_determinant(main.value, 'A')

            x = np.empty(n, dtype=np.float64)
            for i in range(n):
                A_i = np.array(A, copy=True)
                A_i[:, i] = b
                sub_steps: list[Step] | None = [] if tracing else None
                d_i = triangular_determinant(A_i, self._tol, sub_steps)
                _check_finite_determinant(d_i.value, f'A{i + 1}')
                x[i] = d_i.value / main.value
                if tracing:
                    steps.append(UnknownResultStep(
                        index=i,
                        determinant=d_i.value,
                        divisor=main.value,
                        matrix=snapshot(A_i),
                        trace=tuple(sub_steps),
                        value=float(x[i]),
                    ))

            if tracing:
                steps.append(FinalStep(solution=snapshot(x)))

        with timer.section('residuals'):
            residuals = compute_residuals(A, x, b)
            cond = condition_number(A)

        timer.stop()

        params = LinearSystemParams(
            x=x,
            residuals=residuals,
            trace=tuple(steps) if tracing else None,
            determinant=main.value,
        )

        info: dict[str, Any] = {
            'method': 'cramer',
            'n': n,
            'tol': self._tol,
            'n_determinants': n + 1,
            'condition_number': cond,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=conditioning_warnings(cond),
        )


def _check_finite_determinant(value: float, matrix_name: str) -> None:
    """Raise when a determinant overflowed the float64 range."""
    if not np.isfinite(value):
        raise NumericalError(
            f"det({matrix_name}) = {value} is outside the float64 range; "
            f"Cramer's Rule cannot form the ratio. Rescale the system or "
            f"use method='gauss_jordan'."
        )
