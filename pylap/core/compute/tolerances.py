"""
Solver tolerance configuration.

Defines the numerical thresholds used by the Jacobi singular-value solver
and the Gauss-Jordan inverter. Callers needing different behavior pass
their own SolverTolerances instance per call; there is no global state.
"""

from dataclasses import dataclass

from pylap.core.exceptions import ValidationError


@dataclass(frozen=True)
class SolverTolerances:
    """
    Tolerance specification for pylap solvers.

    Attributes:
        jacobi_rtol: Relative orthogonality tolerance for column pairs; the
            absolute rotation threshold is jacobi_rtol * ||A||_F
        max_sweeps: Sweep cap after which Jacobi raises ConvergenceError
        singular_pivot: Pivot magnitude below which a matrix is singular
        name: Identifier recorded in solver metadata
    """
    jacobi_rtol: float = 1e-14
    max_sweeps: int = 100
    singular_pivot: float = 1e-16
    name: str = 'fp64'

    def __post_init__(self):
        if self.jacobi_rtol <= 0:
            raise ValidationError(f"jacobi_rtol: must be positive, got {self.jacobi_rtol}")
        if self.max_sweeps < 1:
            raise ValidationError(f"max_sweeps: must be >= 1, got {self.max_sweeps}")
        if self.singular_pivot < 0:
            raise ValidationError(
                f"singular_pivot: must be non-negative, got {self.singular_pivot}"
            )


# Double precision reference settings
DEFAULT_TOLERANCES = SolverTolerances()
