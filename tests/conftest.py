"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def classic_system():
    """3x3 system with integer solution x = [2, 3, -1], det(A) = -1."""
    A = np.array([[2.0, 1.0, -1.0], [-3.0, -1.0, 2.0], [-2.0, 1.0, 2.0]])
    b = np.array([8.0, -11.0, -3.0])
    x = np.array([2.0, 3.0, -1.0])
    return A, b, x


@pytest.fixture
def permutation_system():
    """System whose first column needs a row swap: x = [2, 1]."""
    A = np.array([[0.0, 1.0], [1.0, 0.0]])
    b = np.array([1.0, 2.0])
    x = np.array([2.0, 1.0])
    return A, b, x


@pytest.fixture
def singular_system():
    """Rank-1 system, det(A) = 0 (should fail in both solvers)."""
    A = np.array([[1.0, 2.0], [2.0, 4.0]])
    b = np.array([3.0, 6.0])
    return A, b


@pytest.fixture
def random_system(rng):
    """Well-conditioned random 5x5 system (diagonally shifted)."""
    n = 5
    A = rng.standard_normal((n, n)) + n * np.eye(n)
    x_true = rng.standard_normal(n)
    b = A @ x_true
    return A, b, x_true
