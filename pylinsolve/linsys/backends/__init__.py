"""
Linear system backends.

Available backends:
    GaussJordanBackend: Gauss-Jordan elimination with partial pivoting
    CramerBackend: Cramer's Rule over pivoted-elimination determinants
"""

from pylinsolve.linsys.backends.gauss_jordan import GaussJordanBackend
from pylinsolve.linsys.backends.cramer import CramerBackend

__all__ = [
    "GaussJordanBackend",
    "CramerBackend",
]
