"""
CPU backend for the determinant engine.

Reduces the matrix to upper-triangular form with partial pivoting and
multiplies the diagonal. A column without a usable pivot yields 0.0.
"""

from typing import Any

from pylinsolve.core.result import Result
from pylinsolve.core.trace import Step
from pylinsolve.core.compute.timing import Timer
from pylinsolve.core.compute.tolerances import PIVOT_TOLERANCE
from pylinsolve.core.compute.linalg.elimination import triangular_determinant
from pylinsolve.determinant.design import DeterminantDesign
from pylinsolve.determinant.solution import DeterminantParams


class CPUEliminationBackend:
    """
    CPU backend using pivoted triangular elimination.

    Implements the Backend protocol for DeterminantDesign -> DeterminantParams.
    """

    def __init__(self, *, tol: float = PIVOT_TOLERANCE, record_trace: bool = False):
        self._tol = tol
        self._record_trace = record_trace

    @property
    def name(self) -> str:
        return 'cpu_elimination'

    def solve(self, design: DeterminantDesign) -> Result[DeterminantParams]:
        """
        Compute det(A).

        Args:
            design: Validated determinant design

        Returns:
            Result containing DeterminantParams
        """
        timer = Timer()
        timer.start()

        steps: list[Step] | None = [] if self._record_trace else None

        with timer.section('reduction'):
            det = triangular_determinant(design.A, self._tol, steps)

        timer.stop()

        params = DeterminantParams(
            value=det.value,
            sign=det.sign,
            n_swaps=det.n_swaps,
            triangular=det.triangular,
            singular_column=det.singular_column,
            trace=tuple(steps) if steps is not None else None,
        )

        info: dict[str, Any] = {
            'method': 'triangular_elimination',
            'n': design.n,
            'tol': self._tol,
            'n_swaps': det.n_swaps,
            'pivots': det.pivots,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )
