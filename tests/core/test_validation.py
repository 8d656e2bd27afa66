"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, rejection of non-real data
    - check_finite: NaN/Inf detection
    - check_ndim / check_1d / check_2d: dimensionality checks
    - check_nonempty / check_square: shape checks for square systems
    - check_consistent_length: multi-array length matching
    - check_tolerance: positive finite tolerance
"""

import numpy as np
import pytest

from pylinsolve.core.exceptions import DimensionError, ValidationError
from pylinsolve.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_consistent_length,
    check_finite,
    check_ndim,
    check_nonempty,
    check_square,
    check_tolerance,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to a float64 ndarray and rejects non-real data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "b")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_nested_list_to_2d(self):
        result = check_array([[1, 2], [3, 4]], "A")
        assert result.shape == (2, 2)
        assert result.dtype == np.float64

    def test_does_not_alias_input(self):
        arr = np.array([[1.0, 2.0], [3.0, 4.0]])
        result = check_array(arr, "A")
        result[0, 0] = 99.0
        assert arr[0, 0] == 1.0

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "b")

    def test_rejects_ragged_rows(self):
        with pytest.raises(DimensionError, match="ragged"):
            check_array([[1, 2], [3]], "A")

    def test_ragged_is_still_a_validation_error(self):
        with pytest.raises(ValidationError):
            check_array([[1.0], [2.0, 3.0], []], "b")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array([["1", "2"], ["3", "4"]], "A")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([1 + 2j, 3.0], "b")


# ═══════════════════════════════════════════════════════════════════════
# check_finite
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([1.0, -2.0]), "b")

    def test_nan_and_inf_counted(self):
        with pytest.raises(ValidationError, match=r"1 NaN, 1 Inf"):
            check_finite(np.array([np.nan, np.inf, 1.0]), "b")


# ═══════════════════════════════════════════════════════════════════════
# Shape checks
# ═══════════════════════════════════════════════════════════════════════


class TestShapeChecks:

    def test_check_ndim_message(self):
        with pytest.raises(DimensionError, match="expected 2D array, got 1D"):
            check_ndim(np.zeros(3), 2, "A")

    def test_check_1d(self):
        check_1d(np.zeros(3), "b")
        with pytest.raises(DimensionError):
            check_1d(np.zeros((3, 2)), "b")

    def test_check_2d(self):
        check_2d(np.zeros((3, 3)), "A")
        with pytest.raises(DimensionError):
            check_2d(np.zeros(3), "A")

    def test_check_nonempty(self):
        with pytest.raises(DimensionError, match="empty"):
            check_nonempty(np.zeros((0, 0)), "A")

    def test_check_square_rejects_rectangular(self):
        with pytest.raises(DimensionError, match="2 rows x 3 columns"):
            check_square(np.zeros((2, 3)), "A")

    def test_check_square_accepts_square(self):
        check_square(np.zeros((4, 4)), "A")

    def test_consistent_length_mismatch(self):
        with pytest.raises(DimensionError, match="A=3, b=2"):
            check_consistent_length(np.zeros((3, 3)), np.zeros(2), names=("A", "b"))

    def test_consistent_length_names_mismatch(self):
        with pytest.raises(ValueError):
            check_consistent_length(np.zeros(3), np.zeros(3), names=("A",))


# ═══════════════════════════════════════════════════════════════════════
# check_tolerance
# ═══════════════════════════════════════════════════════════════════════


class TestCheckTolerance:

    def test_returns_float(self):
        assert check_tolerance(1e-12) == 1e-12

    @pytest.mark.parametrize("bad", [0.0, -1e-12, float("inf"), float("nan")])
    def test_rejects_non_positive_or_non_finite(self, bad):
        with pytest.raises(ValidationError, match="positive and finite"):
            check_tolerance(bad)

    def test_rejects_non_number(self):
        with pytest.raises(ValidationError, match="real number"):
            check_tolerance("small")
