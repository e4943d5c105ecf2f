"""
Scalar reductions over matrix values.
"""

from __future__ import annotations

import math

import numpy as np

from pylap.core.exceptions import DimensionError, ValidationError
from pylap.core.protocols import MatrixLike, VectorLike
from pylap.matrix._materialize import as_array, vector_values


def dot(a: VectorLike, b: VectorLike) -> float:
    """
    Sum of the element-wise product of two vectors.

    Raises:
        DimensionError: If the vector lengths differ
    """
    x = vector_values(a, 'a')
    y = vector_values(b, 'b')
    if x.size != y.size:
        raise DimensionError(f"dot: lengths differ, a={x.size}, b={y.size}")
    if x.size == 0:
        return 0.0
    return float(np.dot(x, y))


def norm(a: MatrixLike, kind: float) -> float:
    """
    Matrix norm.

    Valid kinds:
        1        - maximum absolute column sum
        2        - Frobenius norm, sqrt of the sum of squared elements
        math.inf - maximum absolute row sum

    Raises:
        ValidationError: For any other kind
    """
    if kind not in (1, 2, math.inf):
        raise ValidationError(f"norm: bad norm kind {kind!r}, accept 1, 2, inf")
    arr = as_array(a)
    if arr.size == 0:
        return 0.0
    if kind == 2:
        return float(np.sqrt(np.sum(arr * arr)))
    axis = 0 if kind == 1 else 1
    return float(np.max(np.sum(np.abs(arr), axis=axis)))


def sum_elements(a: MatrixLike) -> float:
    """Sum of all elements."""
    return float(np.sum(as_array(a)))


def max_element(a: MatrixLike) -> float:
    """Largest element; -inf for an empty matrix."""
    arr = as_array(a)
    if arr.size == 0:
        return -math.inf
    return float(np.max(arr))


def min_element(a: MatrixLike) -> float:
    """Smallest element; +inf for an empty matrix."""
    arr = as_array(a)
    if arr.size == 0:
        return math.inf
    return float(np.min(arr))


def argmax(a: MatrixLike) -> tuple[int, int]:
    """
    (row, col) of the largest element.

    Ties resolve to the first occurrence in row-major order.

    Raises:
        DimensionError: If the matrix is empty
    """
    arr = as_array(a)
    if arr.size == 0:
        raise DimensionError(f"argmax: empty matrix with shape {arr.shape}")
    i, j = np.unravel_index(int(np.argmax(arr)), arr.shape)
    return int(i), int(j)
