"""
Core protocols for pylinsolve.

We use Protocol (structural typing) rather than ABC (nominal typing) so
that any object with the right shape can serve as a backend.

Design Principles:
    - Minimal contracts: prescribe only what's truly universal
    - Type-safe: use generics to preserve type information through pipelines
"""

from typing import Protocol, TypeVar, runtime_checkable, TYPE_CHECKING

if TYPE_CHECKING:
    from pylinsolve.core.result import Result

# Type variables for generic payloads
P = TypeVar('P', covariant=True)  # Parameter payload type
D = TypeVar('D', contravariant=True)  # Design type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend knows how to take a domain-specific design and produce
    a domain-specific parameter payload.

    Backends are stateless between calls. Configuration (pivot tolerance,
    whether to record a trace) is passed at construction time. Every call
    to solve() works on its own private copies of the design arrays.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_elimination', 'cpu_gauss_jordan', 'cpu_cramer'
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the computation.

        Args:
            design: Validated domain-specific design

        Returns:
            Result envelope containing parameter payload and metadata

        Raises:
            NumericalError: If numerical issues prevent solution (singularity)
        """
        ...
