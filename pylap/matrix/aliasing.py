"""
Backing-buffer aliasing detector.

Resolves any built-in matrix or vector through its chain of views to the
storage it ultimately reads, and reports whether two values overlap. The
test is deliberately conservative: buffers are compared as whole
allocations, so two disjoint rows of the same matrix ARE reported as
aliased.

The detector only knows the built-in family. A foreign matrix
implementation cannot be resolved and raises UnsupportedOperationError.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from pylap.core.exceptions import UnsupportedOperationError
from pylap.matrix.dense import Dense
from pylap.matrix.vector import DenseVector
from pylap.matrix.views import Identity, Slice, Transpose


def _root(array: np.ndarray) -> np.ndarray:
    """The ndarray that owns the memory an array view reads."""
    while isinstance(array.base, np.ndarray):
        array = array.base
    return array


def backing_buffer(m: Any) -> Any:
    """
    Ultimate storage behind a matrix value.

    Returns:
        The owning ndarray for dense storage, the element store of a Sparse
        matrix, or None for storage-free values such as Identity

    Raises:
        UnsupportedOperationError: If m is not a built-in matrix value
    """
    from pylap.sparse.accum import Sparse

    while True:
        if isinstance(m, (Dense, DenseVector)):
            return _root(m.buffer)
        if isinstance(m, Transpose):
            m = m.wrapped
        elif isinstance(m, Slice):
            # Exclude and SliceVector are Slice subclasses
            m = m.wrapped
        elif isinstance(m, Identity):
            return None
        elif isinstance(m, Sparse):
            return m.store
        else:
            raise UnsupportedOperationError(
                f"cannot determine backing data of {type(m).__name__}"
            )


def buffers_overlap(a: Any, b: Any) -> bool:
    """Whole-buffer overlap test on two resolved backing buffers."""
    if a is None or b is None:
        return False
    if isinstance(a, np.ndarray) and isinstance(b, np.ndarray):
        if a.size == 0 or b.size == 0:
            return False
        return bool(np.may_share_memory(a, b))
    return a is b


def aliased(a: Any, b: Any) -> bool:
    """
    Report whether two matrix values share backing storage.

    Raises:
        UnsupportedOperationError: If either value is not a built-in matrix
    """
    return buffers_overlap(backing_buffer(a), backing_buffer(b))
