"""
Gauss-Jordan inversion of square matrices.

The working buffer is the augmented n x 2n matrix [A | I]. Rows are
pre-ordered by a single bottom-up pass of adjacent swaps on the first
column, then every column is eliminated from all other rows. This is not
full partial pivoting: a zero pivot that a different row order would
avoid is still reported as singular.
"""

from __future__ import annotations

import warnings

import numpy as np
from numpy.typing import NDArray

from pylap.core.compute.tolerances import DEFAULT_TOLERANCES, SolverTolerances
from pylap.core.exceptions import (
    AliasingError,
    DimensionError,
    SingularMatrixError,
    ValidationError,
)
from pylap.core.protocols import MatrixLike
from pylap.core.validation import check_square
from pylap.matrix._materialize import as_array
from pylap.matrix.aliasing import aliased
from pylap.matrix.dense import Dense


def _scratch_matrix(scratch: NDArray[np.float64] | None, n: int) -> Dense:
    size = 2 * n * n
    if scratch is None:
        return Dense(n, 2 * n)
    if not isinstance(scratch, np.ndarray) or scratch.dtype != np.float64 \
            or scratch.ndim != 1 or not scratch.flags.c_contiguous:
        raise ValidationError(
            "scratch: expected a contiguous 1D float64 ndarray"
        )
    if scratch.size < size:
        warnings.warn(
            f"scratch has {scratch.size} elements, {size} needed; "
            f"allocating a temporary buffer",
            RuntimeWarning,
            stacklevel=3,
        )
        return Dense(n, 2 * n)
    return Dense(n, 2 * n, scratch[:size])


def invert_square(
    a: MatrixLike,
    out: Dense | None = None,
    scratch: NDArray[np.float64] | None = None,
    *,
    tolerances: SolverTolerances = DEFAULT_TOLERANCES,
) -> Dense:
    """
    Inverse of a square matrix by Gauss-Jordan elimination.

    Parameters
    ----------
    a : MatrixLike
        n x n matrix. Never modified.
    out : Dense, optional
        n x n destination. Allocated when omitted. Written only on success.
    scratch : ndarray, optional
        1-D float64 buffer of at least 2*n*n elements to hold [A | I].
        Reused across calls to avoid allocation; a smaller buffer is
        replaced by a temporary one with a RuntimeWarning. Its contents
        are undefined after the call.
    tolerances : SolverTolerances
        singular_pivot is the smallest acceptable pivot magnitude.

    Returns
    -------
    Dense inverse (out, if given).

    Raises
    ------
    DimensionError
        If a is not square, or out is not n x n.
    AliasingError
        If out or scratch share storage with a, or with each other.
    SingularMatrixError
        If a pivot magnitude falls below tolerances.singular_pivot.
    """
    n = check_square(a.dims(), 'a')
    if out is not None:
        if not isinstance(out, Dense):
            raise ValidationError(f"out: expected Dense, got {type(out).__name__}")
        if out.dims() != (n, n):
            raise DimensionError(f"out: has shape {out.dims()}, expected ({n}, {n})")
        if aliased(out, a):
            raise AliasingError("invert_square: out shares storage with a", operation='invert_square')

    work = _scratch_matrix(scratch, n)
    if scratch is not None:
        if aliased(work, a) or (out is not None and aliased(work, out)):
            raise AliasingError(
                "invert_square: scratch shares storage with an operand",
                operation='invert_square',
            )

    grid = work.as_array()
    grid[:, :n] = as_array(a)
    grid[:, n:] = 0.0
    diag = np.arange(n)
    grid[diag, n + diag] = 1.0

    for i in range(n - 1, 0, -1):
        if abs(grid[i - 1, 0]) < abs(grid[i, 0]):
            work.swap_rows(i, i - 1)

    # later steps leave column i of row i unchanged, so pivots are final when reached
    for i in range(n):
        pivot = grid[i, i]
        if abs(pivot) < tolerances.singular_pivot:
            raise SingularMatrixError(
                f"matrix is singular to working precision: pivot {pivot:.3e} in row {i}",
                matrix_name='a',
                pivot_row=i,
                pivot_value=float(pivot),
            )
        others = diag != i
        factors = grid[others, i] / pivot
        grid[others] -= np.outer(factors, grid[i])

    grid /= grid[diag, diag][:, np.newaxis]

    if out is None:
        out = Dense(n, n)
    out.as_array()[...] = grid[:, n:]
    return out
