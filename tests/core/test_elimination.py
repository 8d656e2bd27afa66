"""
Tests for the elimination kernels.

Exercises triangular_determinant and gauss_jordan_reduce directly,
including the exact step sequence they record.
"""

import numpy as np
import pytest

from pylinsolve.core.exceptions import SingularMatrixError
from pylinsolve.core.compute.tolerances import PIVOT_TOLERANCE
from pylinsolve.core.compute.linalg.elimination import (
    gauss_jordan_reduce,
    select_pivot,
    triangular_determinant,
)
from pylinsolve.core.trace import (
    DeterminantValueStep,
    EliminateStep,
    FinalStep,
    InitialStep,
    NormalizeStep,
    SingularPivotStep,
    SwapStep,
    TriangularStep,
)


# ═══════════════════════════════════════════════════════════════════════
# Pivot selection
# ═══════════════════════════════════════════════════════════════════════


class TestSelectPivot:

    def test_largest_magnitude(self):
        M = np.array([[1.0, 0.0], [-5.0, 0.0], [3.0, 0.0]])
        assert select_pivot(M, 0) == 1

    def test_ties_go_to_first(self):
        M = np.array([[2.0, 0.0], [-2.0, 0.0]])
        assert select_pivot(M, 0) == 0

    def test_only_rows_at_or_below_column(self):
        M = np.array([[9.0, 9.0], [0.0, 1.0]])
        assert select_pivot(M, 1) == 1


# ═══════════════════════════════════════════════════════════════════════
# triangular_determinant
# ═══════════════════════════════════════════════════════════════════════


class TestTriangularDeterminant:

    def test_permutation_matrix(self):
        result = triangular_determinant(np.array([[0.0, 1.0], [1.0, 0.0]]), PIVOT_TOLERANCE)
        assert result.value == -1.0
        assert result.sign == -1
        assert result.n_swaps == 1
        assert not result.is_singular

    def test_does_not_mutate_input(self, classic_system):
        A, _, _ = classic_system
        original = A.copy()
        triangular_determinant(A, PIVOT_TOLERANCE)
        np.testing.assert_array_equal(A, original)

    def test_triangular_is_upper(self, classic_system):
        A, _, _ = classic_system
        result = triangular_determinant(A, PIVOT_TOLERANCE)
        np.testing.assert_allclose(np.tril(result.triangular, -1), 0.0, atol=1e-14)
        np.testing.assert_allclose(result.value, -1.0, rtol=1e-12)

    def test_singular_stops_early(self):
        A = np.array([[1.0, 2.0], [2.0, 4.0]])
        result = triangular_determinant(A, PIVOT_TOLERANCE)
        assert result.value == 0.0
        assert result.is_singular
        assert result.singular_column == 1
        assert len(result.pivots) == 1

    def test_trace_sequence_with_swap(self):
        steps = []
        triangular_determinant(np.array([[0.0, 1.0], [1.0, 0.0]]), PIVOT_TOLERANCE, steps)
        # factor 0 / 1 is exactly zero, so no elimination step is recorded
        assert [type(s) for s in steps] == [SwapStep, TriangularStep, DeterminantValueStep]
        assert steps[0].row == 0 and steps[0].pivot_row == 1
        np.testing.assert_array_equal(steps[0].matrix, [[1.0, 0.0], [0.0, 1.0]])
        assert steps[1].sign == -1
        assert steps[2].value == -1.0

    def test_trace_skips_zero_factors(self):
        steps = []
        triangular_determinant(np.diag([2.0, 3.0, 4.0]), PIVOT_TOLERANCE, steps)
        assert not any(isinstance(s, EliminateStep) for s in steps)
        assert steps[-1].value == 24.0

    def test_trace_eliminate_records_factor(self):
        steps = []
        triangular_determinant(np.array([[2.0, 1.0], [1.0, 3.0]]), PIVOT_TOLERANCE, steps)
        elim = [s for s in steps if isinstance(s, EliminateStep)]
        assert len(elim) == 1
        assert elim[0].factor == 0.5
        assert (elim[0].source_row, elim[0].target_row) == (0, 1)
        np.testing.assert_array_equal(elim[0].matrix, [[2.0, 1.0], [0.0, 2.5]])

    def test_trace_singular_pivot_step(self):
        steps = []
        triangular_determinant(np.array([[1.0, 2.0], [2.0, 4.0]]), PIVOT_TOLERANCE, steps)
        assert isinstance(steps[-1], SingularPivotStep)
        assert steps[-1].column == 1
        assert steps[-1].pivot == 0.0
        assert steps[-1].tolerance == PIVOT_TOLERANCE
        assert not any(isinstance(s, TriangularStep) for s in steps)

    def test_zero_first_column(self):
        steps = []
        result = triangular_determinant(np.array([[0.0, 1.0], [0.0, 2.0]]), PIVOT_TOLERANCE, steps)
        assert result.value == 0.0
        assert result.singular_column == 0
        assert len(steps) == 1


# ═══════════════════════════════════════════════════════════════════════
# gauss_jordan_reduce
# ═══════════════════════════════════════════════════════════════════════


class TestGaussJordanReduce:

    def test_classic(self, classic_system):
        A, b, x = classic_system
        result = gauss_jordan_reduce(A, b, PIVOT_TOLERANCE)
        np.testing.assert_allclose(result.solution, x, atol=1e-12)
        np.testing.assert_allclose(result.reduced[:, :3], np.eye(3), atol=1e-12)
        assert result.n_swaps == 2

    def test_does_not_mutate_inputs(self, classic_system):
        A, b, _ = classic_system
        A0, b0 = A.copy(), b.copy()
        gauss_jordan_reduce(A, b, PIVOT_TOLERANCE)
        np.testing.assert_array_equal(A, A0)
        np.testing.assert_array_equal(b, b0)

    def test_singular_raises_with_column(self):
        A = np.array([[1.0, 2.0], [2.0, 4.0]])
        with pytest.raises(SingularMatrixError) as excinfo:
            gauss_jordan_reduce(A, np.array([3.0, 6.0]), PIVOT_TOLERANCE)
        assert excinfo.value.column == 1
        assert excinfo.value.pivot == 0.0
        assert excinfo.value.matrix_name == 'A'

    def test_trace_sequence_with_swap(self, permutation_system):
        A, b, x = permutation_system
        steps = []
        result = gauss_jordan_reduce(A, b, PIVOT_TOLERANCE, steps)
        assert [type(s) for s in steps] == [
            InitialStep,
            SwapStep,
            NormalizeStep,
            EliminateStep,
            NormalizeStep,
            EliminateStep,
            FinalStep,
        ]
        np.testing.assert_array_equal(steps[0].matrix, [[0.0, 1.0, 1.0], [1.0, 0.0, 2.0]])
        np.testing.assert_array_equal(steps[1].matrix, [[1.0, 0.0, 2.0], [0.0, 1.0, 1.0]])
        # zero factors are still recorded in the Gauss-Jordan trace
        assert steps[3].factor == 0.0
        assert (steps[3].source_row, steps[3].target_row) == (0, 1)
        assert (steps[5].source_row, steps[5].target_row) == (1, 0)
        np.testing.assert_array_equal(steps[-1].solution, x)
        np.testing.assert_array_equal(steps[-1].solution, result.solution)

    def test_trace_length(self, classic_system):
        A, b, _ = classic_system
        n = A.shape[0]
        steps = []
        result = gauss_jordan_reduce(A, b, PIVOT_TOLERANCE, steps)
        assert len(steps) == 1 + result.n_swaps + n + n * (n - 1) + 1

    def test_normalize_records_pivot(self, classic_system):
        A, b, _ = classic_system
        steps = []
        result = gauss_jordan_reduce(A, b, PIVOT_TOLERANCE, steps)
        normalize = [s for s in steps if isinstance(s, NormalizeStep)]
        assert [s.pivot for s in normalize] == list(result.pivots)
        assert normalize[0].pivot == -3.0
        for s in normalize:
            assert s.matrix[s.row, s.row] == 1.0

    def test_snapshots_not_aliased(self, classic_system):
        A, b, _ = classic_system
        steps = []
        gauss_jordan_reduce(A, b, PIVOT_TOLERANCE, steps)
        np.testing.assert_array_equal(steps[0].matrix, np.column_stack([A, b]))
        assert all(not s.matrix.flags.writeable for s in steps)
