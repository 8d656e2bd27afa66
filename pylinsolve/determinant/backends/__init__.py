"""
Determinant backends.

Available backends:
    CPUEliminationBackend: pivoted triangular elimination
"""

from pylinsolve.determinant.backends.cpu import CPUEliminationBackend

__all__ = [
    "CPUEliminationBackend",
]
