"""
Generic result container for pylap solvers.

The Result class provides a standardized envelope for iterative and direct
solvers. Each solver defines its own parameter payload; the envelope adds
solver metadata, timing and non-fatal warnings.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (converged, sweeps, rotations)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for solver output.

    Type Parameters:
        P: The solver-specific parameter payload type

    Attributes:
        params: Solver-specific payload (singular values, accumulators, ...)
        info: Structured metadata (method, convergence, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        solver_name: Identifier of the solver that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=JacobiParams(singular_values=sigma, v=None),
        ...     info={'method': 'one_sided_jacobi', 'converged': True, 'sweeps': 4},
        ...     timing={'total_seconds': 0.01, 'sweeps': 0.009},
        ...     solver_name='jacobi_svd'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    solver_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
