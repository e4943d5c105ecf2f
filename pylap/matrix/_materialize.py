"""
ndarray materialization of matrix values.

Arithmetic and reductions operate on numpy arrays. Dense storage is exposed
as a strided view without copying; index-remapping views and foreign
MatrixLike implementations are gathered into a fresh array.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylap.core.exceptions import UnsupportedOperationError, ValidationError
from pylap.core.protocols import MatrixLike
from pylap.matrix.dense import Dense
from pylap.matrix.vector import DenseVector
from pylap.matrix.views import Identity, Slice, Transpose


def as_array(m: Any) -> NDArray[np.float64]:
    """
    2-D float64 array with the values of m.

    For Dense, DenseVector and Transpose chains over them the result is a
    view; writing to it writes the matrix.
    """
    from pylap.sparse.accum import Sparse

    if isinstance(m, Dense):
        return m.as_array()
    if isinstance(m, DenseVector):
        return m.values()[:, np.newaxis]
    if isinstance(m, Transpose):
        return as_array(m.wrapped).T
    if isinstance(m, Slice):
        arr = as_array(m.wrapped)
        if m.row_indices is not None:
            arr = arr[np.asarray(m.row_indices, dtype=np.intp), :]
        if m.col_indices is not None:
            arr = arr[:, np.asarray(m.col_indices, dtype=np.intp)]
        return arr
    if isinstance(m, Identity):
        return np.eye(m.dims()[0])
    if isinstance(m, Sparse):
        return m.to_numpy()
    if isinstance(m, MatrixLike):
        r, c = m.dims()
        return np.array(
            [[m.at(i, j) for j in range(c)] for i in range(r)],
            dtype=np.float64,
        ).reshape(r, c)
    raise ValidationError(f"expected a matrix value, got {type(m).__name__}")


def writable_array(out: Any) -> NDArray[np.float64]:
    """Writable 2-D view over an output operand's storage."""
    if isinstance(out, (Dense, DenseVector)):
        return as_array(out)
    raise UnsupportedOperationError(
        f"output must be Dense or DenseVector, got {type(out).__name__}"
    )


def vector_values(v: Any, name: str) -> NDArray[np.float64]:
    """1-D array with the elements of a column vector."""
    if isinstance(v, DenseVector):
        return v.values()
    if not (hasattr(v, 'len') and hasattr(v, 'at_vec')):
        raise ValidationError(f"{name}: expected a vector, got {type(v).__name__}")
    return as_array(v)[:, 0]
