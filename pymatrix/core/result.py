"""
Generic result container for PyMatrix computations.

The Result class is the envelope returned (wrapped in a solution object)
by the functional API in pymatrix.linalg. It keeps the computed payload
together with timing and the non-fatal warnings raised while computing it.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, pivoting, rank)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for matrix computations.

    Attributes:
        params: Operation-specific payload (determinant, reduced matrix, ...)
        info: Structured metadata (method, pivoting, rank)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the algorithm that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=LinalgParams(determinant=-2.0),
        ...     info={'method': 'laplace', 'expansion': 'fixed'},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_laplace'
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
