"""
Determinant solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pylinsolve.core.result import Result
from pylinsolve.core.trace import Trace

if TYPE_CHECKING:
    from pylinsolve.determinant.design import DeterminantDesign


@dataclass(frozen=True)
class DeterminantParams:
    """
    Parameter payload for the determinant engine.

    trace is None unless the backend was asked to record one.
    """
    value: float
    sign: int
    n_swaps: int
    triangular: NDArray[np.floating[Any]]
    singular_column: int | None
    trace: Trace | None = None


@dataclass
class DeterminantSolution:
    """
    User-facing determinant results.

    Wraps Result[DeterminantParams] and provides convenient accessors.
    """
    _result: Result[DeterminantParams]
    _design: 'DeterminantDesign'

    @property
    def value(self) -> float:
        """The determinant. Exactly 0.0 for a singular matrix."""
        return self._result.params.value

    @property
    def sign(self) -> int:
        """Parity of the row swaps, +1 or -1."""
        return self._result.params.sign

    @property
    def n_swaps(self) -> int:
        return self._result.params.n_swaps

    @property
    def triangular(self) -> NDArray[np.floating[Any]]:
        """Working matrix at the end of the reduction."""
        return self._result.params.triangular

    @property
    def is_singular(self) -> bool:
        """True when some column had no pivot above tolerance."""
        return self._result.params.singular_column is not None

    @property
    def singular_column(self) -> int | None:
        return self._result.params.singular_column

    @property
    def trace(self) -> Trace | None:
        return self._result.params.trace

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Plain-text summary of the computation."""
        lines = [
            "Determinant",
            "=" * 40,
            f"Dimension: {self._design.n} x {self._design.n}",
            f"Row swaps: {self.n_swaps} (sign {self.sign:+d})",
        ]
        if self.is_singular:
            lines.append(
                f"Singular: no pivot above tolerance in column "
                f"{self.singular_column + 1}"
            )
        lines.append(f"det(A) = {self.value:.10g}")
        if self.trace is not None:
            lines.append(f"Trace steps: {len(self.trace)}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"DeterminantSolution(value={self.value!r}, n={self._design.n})"
