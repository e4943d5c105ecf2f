"""
Shared compute infrastructure for pylap.

Submodules:
    timing: Execution timing utilities
    tolerances: Solver tolerance configuration
"""

from pylap.core.compute.timing import Timer, timed
from pylap.core.compute.tolerances import DEFAULT_TOLERANCES, SolverTolerances

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "SolverTolerances",
    "DEFAULT_TOLERANCES",
]
