"""
Strided dense vector storage.

A DenseVector reads every inc-th element of its backing buffer starting at
offset 0. Contiguous vectors have inc == 1; column views of a Dense matrix
use the matrix stride as increment and share its buffer.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylap.core.exceptions import DimensionError
from pylap.core.validation import check_buffer, check_col, check_row
from pylap.matrix.base import Vector


class DenseVector(Vector):
    """
    Dense column vector over a (possibly shared) float64 buffer.

    Construction:
        DenseVector(n)                  - owned, zero-filled
        DenseVector(n, data)            - over caller storage; a contiguous
                                          float64 ndarray is not copied
    """

    __slots__ = ('_data', '_inc')

    def __init__(self, n: int, data: ArrayLike | None = None):
        if n < 0:
            raise DimensionError(f"n: negative vector length {n}")
        if data is None:
            self._data = np.zeros(n, dtype=np.float64)
        else:
            self._data = check_buffer(data, n, 'data')
        self._inc = 1

    @classmethod
    def _strided(cls, data: NDArray[np.float64], inc: int) -> DenseVector:
        """View over every inc-th element of an existing buffer."""
        v = cls.__new__(cls)
        v._data = data
        v._inc = inc
        return v

    @property
    def buffer(self) -> NDArray[np.float64]:
        """Backing buffer, including elements skipped by the increment."""
        return self._data

    @property
    def inc(self) -> int:
        return self._inc

    def len(self) -> int:
        # ceil division: the last element need not be followed by a full stride
        return -(-self._data.size // self._inc)

    @property
    def is_mutable(self) -> bool:
        return True

    def values(self) -> NDArray[np.float64]:
        """Writable 1-D ndarray view of the elements."""
        return self._data[::self._inc]

    def at_vec(self, i: int) -> float:
        check_row(i, self.len(), 'DenseVector')
        return float(self._data[i * self._inc])

    def set_vec(self, i: int, v: float) -> None:
        check_row(i, self.len(), 'DenseVector')
        self._data[i * self._inc] = v

    def set(self, i: int, j: int, v: float) -> None:
        if j != 0:
            check_col(j, 1, 'DenseVector')
        self.set_vec(i, v)

    def for_each(self, fn: Callable[[int, float], float]) -> None:
        """Replace every element by fn(i, value), in index order."""
        values = self.values()
        for i in range(values.size):
            values[i] = fn(i, float(values[i]))

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """Copy of the elements as a 1-D array."""
        return self.values().copy()
