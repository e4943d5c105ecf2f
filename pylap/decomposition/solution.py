"""
Jacobi singular-value solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylap.core.result import Result
from pylap.matrix.dense import Dense
from pylap.matrix.vector import DenseVector


@dataclass(frozen=True)
class JacobiParams:
    """
    Parameter payload for the one-sided Jacobi solver.

    singular_values is sorted ascending. When requested, v holds the
    accumulated column rotations with columns permuted to the same order.
    """
    singular_values: DenseVector
    v: Dense | None = None


@dataclass
class JacobiSolution:
    """
    User-facing Jacobi results.

    Wraps Result[JacobiParams] and provides convenient accessors.
    """
    _result: Result[JacobiParams]

    @property
    def singular_values(self) -> DenseVector:
        """Singular values, ascending."""
        return self._result.params.singular_values

    @property
    def v(self) -> Dense | None:
        """Right rotation accumulator (cols x cols), or None."""
        return self._result.params.v

    @property
    def converged(self) -> bool:
        return self._result.info['converged']

    @property
    def sweeps(self) -> int:
        """Sweeps performed, including the final rotation-free sweep."""
        return self._result.info['sweeps']

    @property
    def rotations(self) -> int:
        """Total rotations applied across all sweeps."""
        return self._result.info['rotations']

    @property
    def threshold(self) -> float:
        return self._result.info['threshold']

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """Singular values as a 1-D array, ascending."""
        return self.singular_values.to_numpy()

    def summary(self) -> str:
        n = self.singular_values.len()
        lines = [
            "One-sided Jacobi singular values",
            f"  columns:    {n}",
            f"  sweeps:     {self.sweeps}",
            f"  rotations:  {self.rotations}",
            f"  threshold:  {self.threshold:.3e}",
        ]
        if n:
            lines.append(f"  sigma_min:  {self.singular_values.at_vec(0):.6g}")
            lines.append(f"  sigma_max:  {self.singular_values.at_vec(n - 1):.6g}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"JacobiSolution(n={self.singular_values.len()}, "
            f"sweeps={self.sweeps}, rotations={self.rotations})"
        )
