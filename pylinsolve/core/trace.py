"""
Step-by-step trace records.

A trace is the ordered log of intermediate states recorded during one
traced solver run. Each entry is one of a closed set of step types, so a
renderer can dispatch on the type and handle every kind explicitly:

    InitialStep           augmented matrix before any row operation
    SwapStep              partial-pivoting row exchange
    NormalizeStep         pivot row divided by its pivot (Gauss-Jordan)
    EliminateStep         row_target -= factor * row_source
    SingularPivotStep     determinant stopped at a near-zero pivot
    TriangularStep        upper-triangular form reached (determinant)
    DeterminantValueStep  a determinant value, optionally with its own trace
    UnknownResultStep     one Cramer unknown: D_i, A_i and x_i = D_i / D
    FinalStep             solution vector (and reduced matrix, Gauss-Jordan)

Row and column indices stored on steps are 0-based; descriptions use the
1-based R1, R2, ... labels a reader expects.

Matrix snapshots are taken with snapshot(): a copy made at recording time
with its writeable flag cleared, so neither later elimination steps nor
the caller can change what an earlier step shows.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Union
import numpy as np
from numpy.typing import NDArray


def snapshot(array: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """Return a read-only copy of ``array``."""
    copy = np.array(array, dtype=np.float64, copy=True)
    copy.flags.writeable = False
    return copy


def _row(index: int) -> str:
    return f"R{index + 1}"


def _num(value: float) -> str:
    return f"{value:.6g}"


@dataclass(frozen=True)
class InitialStep:
    """Augmented matrix [A|b] as built, before any row operation."""
    kind: ClassVar[str] = 'initial'
    matrix: NDArray[np.floating[Any]]

    @property
    def description(self) -> str:
        return "Initial augmented matrix [A|b]"


@dataclass(frozen=True)
class SwapStep:
    """Rows ``row`` and ``pivot_row`` exchanged to bring the pivot up."""
    kind: ClassVar[str] = 'swap'
    row: int
    pivot_row: int
    matrix: NDArray[np.floating[Any]]

    @property
    def description(self) -> str:
        return (
            f"Swap {_row(self.row)} <-> {_row(self.pivot_row)} "
            f"(largest |pivot| in column {self.row + 1})"
        )


@dataclass(frozen=True)
class NormalizeStep:
    """Pivot row divided by ``pivot`` so the pivot entry becomes 1."""
    kind: ClassVar[str] = 'normalize'
    row: int
    pivot: float
    matrix: NDArray[np.floating[Any]]

    @property
    def description(self) -> str:
        return f"{_row(self.row)} = {_row(self.row)} / {_num(self.pivot)}"


@dataclass(frozen=True)
class EliminateStep:
    """``target_row -= factor * source_row``."""
    kind: ClassVar[str] = 'eliminate'
    source_row: int
    target_row: int
    factor: float
    matrix: NDArray[np.floating[Any]]

    @property
    def description(self) -> str:
        target = _row(self.target_row)
        return (
            f"{target} = {target} - ({_num(self.factor)}) * {_row(self.source_row)}"
        )


@dataclass(frozen=True)
class SingularPivotStep:
    """No pivot above tolerance in ``column``; the determinant is 0."""
    kind: ClassVar[str] = 'singular_pivot'
    column: int
    pivot: float
    tolerance: float
    matrix: NDArray[np.floating[Any]]

    @property
    def value(self) -> float:
        return 0.0

    @property
    def description(self) -> str:
        return (
            f"Largest |pivot| in column {self.column + 1} is {_num(self.pivot)} "
            f"(< {_num(self.tolerance)}): determinant = 0"
        )


@dataclass(frozen=True)
class TriangularStep:
    """Upper-triangular form reached; ``sign`` accounts for row swaps."""
    kind: ClassVar[str] = 'triangular'
    matrix: NDArray[np.floating[Any]]
    sign: int

    @property
    def description(self) -> str:
        return f"Upper triangular form (row swap sign {self.sign:+d})"


@dataclass(frozen=True)
class DeterminantValueStep:
    """
    A determinant value.

    Inside a determinant trace this closes the run and carries only the
    value. In a Cramer trace it records det(A) together with A and the
    nested determinant trace that produced it.
    """
    kind: ClassVar[str] = 'determinant_value'
    value: float
    matrix: NDArray[np.floating[Any]] | None = None
    trace: tuple[Step, ...] = ()

    @property
    def description(self) -> str:
        return f"det = {_num(self.value)}"


@dataclass(frozen=True)
class UnknownResultStep:
    """One Cramer unknown: ``value = determinant / divisor``."""
    kind: ClassVar[str] = 'unknown_result'
    index: int
    determinant: float
    divisor: float
    matrix: NDArray[np.floating[Any]]
    trace: tuple[Step, ...]
    value: float

    @property
    def description(self) -> str:
        i = self.index + 1
        return (
            f"x{i} = det(A{i}) / det(A) = {_num(self.determinant)} / "
            f"{_num(self.divisor)} = {_num(self.value)}"
        )


@dataclass(frozen=True)
class FinalStep:
    """Solution vector, plus the reduced matrix for Gauss-Jordan runs."""
    kind: ClassVar[str] = 'final'
    solution: NDArray[np.floating[Any]]
    matrix: NDArray[np.floating[Any]] | None = None

    @property
    def description(self) -> str:
        values = ", ".join(
            f"x{i + 1} = {_num(v)}" for i, v in enumerate(self.solution)
        )
        return f"Solution: {values}"


Step = Union[
    InitialStep,
    SwapStep,
    NormalizeStep,
    EliminateStep,
    SingularPivotStep,
    TriangularStep,
    DeterminantValueStep,
    UnknownResultStep,
    FinalStep,
]

Trace = tuple[Step, ...]

STEP_TYPES: tuple[type, ...] = (
    InitialStep,
    SwapStep,
    NormalizeStep,
    EliminateStep,
    SingularPivotStep,
    TriangularStep,
    DeterminantValueStep,
    UnknownResultStep,
    FinalStep,
)
