"""
pylinsolve: dense linear-system solvers with step-by-step traces.

Gauss-Jordan elimination and Cramer's Rule for small square systems,
each able to return either the bare solution or an itemized trace of
every pivot choice, row operation and intermediate matrix.

Submodules:
    linsys: Gauss-Jordan and Cramer solvers
    determinant: Pivoted-elimination determinant
    core: Exceptions, result envelope, trace records, kernels
"""

__version__ = "0.1.0"

from pylinsolve import linsys
from pylinsolve import determinant

__all__ = [
    "__version__",
    "linsys",
    "determinant",
]
