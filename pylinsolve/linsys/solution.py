"""
Linear system solution types.

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
    from pylinsolve.linsys.design import LinearSystemDesign


@dataclass(frozen=True)
class LinearSystemParams:
    """
    Parameter payload for a solved linear system.

    This is the immutable data computed by backends. determinant is only
    filled in by Cramer's Rule, which needs det(A) anyway.
    """
    x: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    trace: Trace | None = None
    determinant: float | None = None


@dataclass
class LinearSystemSolution:
    """
    User-facing linear system results.

    Wraps the backend Result and provides convenient accessors.
    """
    _result: Result[LinearSystemParams]
    _design: 'LinearSystemDesign'

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Solution vector (n,)."""
        return self._result.params.x

    @property
    def trace(self) -> Trace | None:
        """Step trace, or None when tracing was not requested."""
        return self._result.params.trace

    @property
    def determinant(self) -> float | None:
        """det(A) when computed (Cramer's Rule), else None."""
        return self._result.params.determinant

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        """A x - b."""
        return self._result.params.residuals

    @property
    def max_abs_residual(self) -> float:
        return float(np.max(np.abs(self.residuals)))

    @property
    def method(self) -> str:
        return self._result.info['method']

    @property
    def condition_number(self) -> float:
        return self._result.info['condition_number']

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
        """Plain-text summary of the solve."""
        lines = [
            "Linear System Solution",
            "=" * 50,
            f"Method: {self.method}",
            f"Equations: {self._design.n}",
            f"Condition number: {self.condition_number:.4g}",
        ]
        if self.determinant is not None:
            lines.append(f"det(A): {self.determinant:.10g}")
        lines.append("")
        lines.append(f"{'':>6} {'Value':>16}")
        lines.append("-" * 24)
        for i, value in enumerate(self.x):
            lines.append(f"{'x' + str(i + 1):>6} {value:>16.10g}")
        lines.append("")
        lines.append(f"Max |A x - b|: {self.max_abs_residual:.3e}")
        if self.trace is not None:
            lines.append(f"Trace steps: {len(self.trace)}")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LinearSystemSolution(method={self.method!r}, "
            f"x={np.array2string(self.x, precision=6)})"
        )
