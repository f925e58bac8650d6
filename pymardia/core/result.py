"""
Generic result container for PyMardia computations.

Result is the envelope every backend returns. The domain payload lives in
`params`; timing, backend identity and non-fatal warnings travel alongside
it so the reporter and the CLI can show them without knowing how the
numbers were produced.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, simulated, rank)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (statistics, moments)
        info: Structured metadata (method, simulation flag, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=MardiaParams(...),
        ...     info={'method': 'gram', 'simulated': False},
        ...     timing={'total_seconds': 0.01, 'statistics': 0.008},
        ...     backend_name='cpu_gram'
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
