"""
Matrix inversion.

Public API:
    invert_square(A)    - Gauss-Jordan inverse of a square matrix
"""

from pylap.inversion.solvers import invert_square

__all__ = [
    "invert_square",
]
