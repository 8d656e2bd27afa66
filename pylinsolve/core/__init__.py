"""
Core infrastructure for pylinsolve.

This module provides shared abstractions and utilities used by the
domain-specific submodules (determinant, linsys).

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    trace: Step records for traced runs
    compute: Timing, tolerances, elimination kernels
"""

from pylinsolve.core.protocols import Backend
from pylinsolve.core.result import Result
from pylinsolve.core.exceptions import (
    PyLinsolveError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyLinsolveError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
]
