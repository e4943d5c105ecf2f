"""
Singular values by one-sided Jacobi rotations.

Public API:
    jacobi_svd(A)               - JacobiSolution (values, optional V, diagnostics)
    jacobi_singular_values(A)   - singular values only, ascending
"""

from pylap.decomposition.solution import JacobiParams, JacobiSolution
from pylap.decomposition.solvers import jacobi_singular_values, jacobi_svd

__all__ = [
    "jacobi_svd",
    "jacobi_singular_values",
    "JacobiParams",
    "JacobiSolution",
]
