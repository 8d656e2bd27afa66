"""
Generic result container for all pylinsolve computations.

The Result class provides a standardized envelope that every backend
returns. Domains define their own parameter payloads; the envelope carries
the shared metadata (method info, timing, warnings).

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, pivots, swap counts)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) so a returned trace cannot be re-pointed
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for solver computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (solution vector, determinant, trace)
        info: Structured metadata (method, swap count, determinant count)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=LinearSystemParams(x=x, trace=None, determinant=None),
        ...     info={'method': 'gauss_jordan', 'n_swaps': 1},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_gauss_jordan'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
