"""
Input validation utilities for pylap.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import operator
from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylap.core.exceptions import (
    ColumnAccessError,
    DimensionError,
    RowAccessError,
    ValidationError,
)


def check_buffer(
    data: ArrayLike,
    size: int,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert caller-supplied storage to a backing buffer.

    A contiguous 1-D float64 ndarray is used as-is, so the result shares
    memory with the caller's array. Any other array-like is converted,
    which copies it.

    Args:
        data: Storage to validate
        size: Required number of elements
        name: Parameter name for error messages

    Returns:
        1-D contiguous float64 ndarray with exactly `size` elements

    Raises:
        ValidationError: If the input is non-numeric, multi-dimensional
            or not contiguous
        DimensionError: If the element count is not `size`
    """
    try:
        buffer = np.asarray(data, dtype=np.float64)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to float64 buffer: {e}") from e

    if buffer.ndim != 1:
        raise ValidationError(
            f"{name}: expected 1D buffer, got {buffer.ndim}D with shape {buffer.shape}"
        )
    if not buffer.flags.c_contiguous:
        raise ValidationError(f"{name}: buffer must be contiguous")
    if buffer.size != size:
        raise DimensionError(
            f"{name}: buffer has {buffer.size} elements, expected {size}"
        )
    return buffer


def check_nonnegative_dims(rows: int, cols: int, name: str) -> None:
    """
    Verify requested dimensions are non-negative integers.

    Raises:
        DimensionError: If either dimension is negative
    """
    if rows < 0 or cols < 0:
        raise DimensionError(f"{name}: negative dimensions ({rows}, {cols})")


def check_row(i: int, rows: int, name: str) -> None:
    """
    Verify a row index is in range [0, rows).

    Raises:
        RowAccessError: If the index is out of range
    """
    if i < 0 or i >= rows:
        raise RowAccessError(
            f"{name}: row index {i} out of range for {rows} rows",
            index=i,
            bound=rows,
        )


def check_col(j: int, cols: int, name: str) -> None:
    """
    Verify a column index is in range [0, cols).

    Raises:
        ColumnAccessError: If the index is out of range
    """
    if j < 0 or j >= cols:
        raise ColumnAccessError(
            f"{name}: column index {j} out of range for {cols} columns",
            index=j,
            bound=cols,
        )


def check_index_list(
    indices: Sequence[int],
    bound: int,
    axis: str,
    name: str,
) -> tuple[int, ...]:
    """
    Verify every index of a view mapping lies in [0, bound).

    Args:
        indices: Row or column indices
        bound: Size of the wrapped axis
        axis: 'row' or 'column'
        name: Parameter name for error messages

    Returns:
        The indices as an immutable tuple of ints

    Raises:
        ValidationError: If an index is not an integer
    """
    try:
        checked = tuple(operator.index(ix) for ix in indices)
    except TypeError as e:
        raise ValidationError(f"{name}: {axis} indices must be integers ({e})") from e
    check = check_row if axis == 'row' else check_col
    for ix in checked:
        check(ix, bound, name)
    return checked


def check_strictly_increasing(
    indices: Sequence[int],
    bound: int,
    axis: str,
    name: str,
) -> tuple[int, ...]:
    """
    Verify exclusion indices are in range, sorted and non-repeating.

    Raises:
        RowAccessError / ColumnAccessError: If an index is out of range
        ValidationError: If indices are not strictly increasing
    """
    checked = check_index_list(indices, bound, axis, name)
    for prev, cur in zip(checked, checked[1:]):
        if cur <= prev:
            raise ValidationError(
                f"{name}: {axis} indices must be sorted and non-repeating, "
                f"got {prev} followed by {cur}"
            )
    return checked


def check_same_dims(
    a: tuple[int, int],
    b: tuple[int, int],
    names: tuple[str, str],
) -> None:
    """
    Verify two matrices have identical dimensions.

    Raises:
        DimensionError: If the shapes differ
    """
    if a != b:
        raise DimensionError(
            f"Inconsistent shapes: {names[0]}={a}, {names[1]}={b}"
        )


def check_square(dims: tuple[int, int], name: str) -> int:
    """
    Verify a matrix is square.

    Returns:
        The order n of the matrix

    Raises:
        DimensionError: If rows != cols
    """
    r, c = dims
    if r != c:
        raise DimensionError(f"{name}: expected square matrix, got shape ({r}, {c})")
    return r


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )
