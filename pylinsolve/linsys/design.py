"""
Linear System Design.

Design holds the validated coefficient matrix A and right-hand side b of
a square system A x = b. All boundary checks happen here, before any
elimination work: a non-square A or a b of the wrong length is rejected
with DimensionError rather than solved into a silently wrong answer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinsolve.core.validation import (
    check_array,
    check_finite,
    check_1d,
    check_2d,
    check_nonempty,
    check_square,
    check_consistent_length,
)


@dataclass(frozen=True)
class LinearSystemDesign:
    """
    Square linear system specification.

    Holds private, read-only float64 copies of A and b. Immutable after
    construction.

    Construction:
        LinearSystemDesign.from_arrays(A, b)
    """
    _A: NDArray[np.floating[Any]]
    _b: NDArray[np.floating[Any]]
    _n: int

    @classmethod
    def from_arrays(cls, A: ArrayLike, b: ArrayLike) -> LinearSystemDesign:
        """
        Build design from array-likes.

        A column vector b of shape (n, 1) is accepted and flattened.

        Raises:
            ValidationError: Non-numeric or non-finite entries
            DimensionError: A not square, empty, or len(b) != n
        """
        A_arr = check_array(A, 'A')
        b_arr = check_array(b, 'b')

        if b_arr.ndim == 2 and b_arr.shape[1] == 1:
            b_arr = b_arr.ravel()

        check_2d(A_arr, 'A')
        check_nonempty(A_arr, 'A')
        check_square(A_arr, 'A')
        check_1d(b_arr, 'b')
        check_consistent_length(A_arr, b_arr, names=('A', 'b'))
        check_finite(A_arr, 'A')
        check_finite(b_arr, 'b')

        A_arr.flags.writeable = False
        b_arr.flags.writeable = False
        return cls(_A=A_arr, _b=b_arr, _n=A_arr.shape[0])

    @property
    def A(self) -> NDArray[np.floating[Any]]:
        """Coefficient matrix (n x n), read-only."""
        return self._A

    @property
    def b(self) -> NDArray[np.floating[Any]]:
        """Right-hand side (n,), read-only."""
        return self._b

    @property
    def n(self) -> int:
        """Number of equations (and unknowns)."""
        return self._n
