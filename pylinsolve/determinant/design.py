"""
Determinant Design.

Wraps a validated square matrix for the determinant engine. Construction
is the only place validation happens; backends trust the design.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinsolve.core.validation import (
    check_array, check_2d, check_nonempty, check_square, check_finite,
)


@dataclass(frozen=True)
class DeterminantDesign:
    """
    Square matrix specification for determinant computation.

    Holds a private float64 copy of the caller's matrix, so later changes
    to the caller's data cannot affect a computation in progress.

    Construction:
        DeterminantDesign.from_array(A)
    """
    _A: NDArray[np.floating[Any]]
    _n: int

    @classmethod
    def from_array(cls, A: ArrayLike) -> DeterminantDesign:
        """
        Build design from an array-like matrix.

        Raises:
            ValidationError: Non-numeric or non-finite entries
            DimensionError: Not 2D, empty, or not square
        """
        A_arr = check_array(A, 'A')
        check_2d(A_arr, 'A')
        check_nonempty(A_arr, 'A')
        check_square(A_arr, 'A')
        check_finite(A_arr, 'A')
        A_arr.flags.writeable = False
        return cls(_A=A_arr, _n=A_arr.shape[0])

    @property
    def A(self) -> NDArray[np.floating[Any]]:
        """Matrix (n x n), read-only."""
        return self._A

    @property
    def n(self) -> int:
        """Matrix dimension."""
        return self._n
