"""
Exception hierarchy for pylinsolve.

All exceptions inherit from PyLinsolveError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyLinsolveError(Exception):
    """Base exception for all pylinsolve errors."""
    pass


class ValidationError(PyLinsolveError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when a matrix is not square, or when the right-hand side
    length does not match the matrix dimension. Always raised before
    any elimination work begins.
    """
    pass


class NumericalError(PyLinsolveError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when a solver needs a unique solution but a pivot column has
    no candidate above the pivot tolerance, or the coefficient matrix
    has a (numerically) zero determinant.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        column: Pivot column where elimination broke down, if known
        pivot: Largest candidate magnitude found in that column, if known
        determinant: Determinant value that triggered the failure, if computed
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        column: int | None = None,
        pivot: float | None = None,
        determinant: float | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.column = column
        self.pivot = pivot
        self.determinant = determinant
