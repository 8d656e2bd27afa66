"""
Input validation utilities for pylinsolve.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pylinsolve.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Ragged rows are
    a shape problem and raise DimensionError. Inputs that result in
    object dtype (mixed types) and non-numeric dtypes are rejected.
    Complex input is rejected: only real systems are supported.

    The returned array never aliases the caller's data.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to a real numeric array
        DimensionError: If rows have inconsistent lengths
    """
    try:
        result = np.array(array)
    except ValueError as e:
        # numpy raises ValueError for an inhomogeneous nested sequence
        raise DimensionError(
            f"{name}: ragged or inconsistent shape, cannot form an array: {e}"
        ) from e
    except TypeError as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types "
            f"or non-numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, only real systems are supported"
        )

    if not np.issubdtype(result.dtype, np.number) and result.dtype != np.bool_:
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result.astype(np.float64, copy=False)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_nonempty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array has at least one element.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has a zero-length axis
    """
    if array.size == 0:
        raise DimensionError(f"{name}: empty array with shape {array.shape}")


def check_square(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify a 2D array is square.

    Args:
        array: 2D array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If the number of rows differs from the number of columns
    """
    rows, cols = array.shape
    if rows != cols:
        raise DimensionError(
            f"{name}: expected a square matrix, got {rows} rows x {cols} columns"
        )


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_tolerance(tol: float, name: str = 'tol') -> float:
    """
    Verify a tolerance is a finite, strictly positive real number.

    Args:
        tol: Tolerance value to check
        name: Parameter name for error messages

    Returns:
        The tolerance as a Python float

    Raises:
        ValidationError: If tol is not a positive finite number
    """
    try:
        value = float(tol)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{name}: expected a real number, got {tol!r}") from e

    if not math.isfinite(value) or value <= 0.0:
        raise ValidationError(f"{name}: must be positive and finite, got {value}")

    return value
