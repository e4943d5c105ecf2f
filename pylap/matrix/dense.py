"""
Row-major dense matrix storage.

Element (i, j) of a Dense matrix lives at buffer[i*stride + j]. Freshly
constructed matrices own a zero-filled buffer with stride == cols; blocks
cut from an existing matrix share its buffer and keep its stride.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np
from numpy.lib.stride_tricks import as_strided
from numpy.typing import ArrayLike, NDArray

from pylap.core.exceptions import DimensionError
from pylap.core.validation import (
    check_buffer,
    check_col,
    check_nonnegative_dims,
    check_row,
)
from pylap.matrix.base import Matrix
from pylap.matrix.vector import DenseVector


class Dense(Matrix):
    """
    Dense row-major matrix.

    Construction:
        Dense(rows, cols)           - owned, zero-filled
        Dense(rows, cols, data)     - over caller storage of exactly
                                      rows*cols elements; a contiguous
                                      float64 ndarray is used without copying
                                      and the caller keeps it alive

    The dimensions never change after construction. Row and column views
    alias the buffer and remain valid for the lifetime of the matrix.
    """

    __slots__ = ('_data', '_rows', '_cols', '_stride')

    def __init__(self, rows: int, cols: int, data: ArrayLike | None = None):
        check_nonnegative_dims(rows, cols, 'Dense')
        if data is None:
            self._data = np.zeros(rows * cols, dtype=np.float64)
        else:
            self._data = check_buffer(data, rows * cols, 'data')
        self._rows = rows
        self._cols = cols
        self._stride = cols

    @classmethod
    def _strided(
        cls,
        data: NDArray[np.float64],
        rows: int,
        cols: int,
        stride: int,
    ) -> Dense:
        d = cls.__new__(cls)
        d._data = data
        d._rows = rows
        d._cols = cols
        d._stride = stride
        return d

    @classmethod
    def from_rows(cls, rows: ArrayLike) -> Dense:
        """Build an owned matrix from a nested sequence or 2-D array."""
        arr = np.array(rows, dtype=np.float64, ndmin=2)
        if arr.ndim != 2:
            raise DimensionError(f"rows: expected 2D data, got {arr.ndim}D")
        r, c = arr.shape
        return cls(r, c, arr.reshape(-1))

    # --- capability ---

    def dims(self) -> tuple[int, int]:
        return self._rows, self._cols

    @property
    def stride(self) -> int:
        return self._stride

    @property
    def buffer(self) -> NDArray[np.float64]:
        """Backing buffer. Shared with any view or block of this matrix."""
        return self._data

    @property
    def is_mutable(self) -> bool:
        return True

    def at(self, i: int, j: int) -> float:
        check_row(i, self._rows, 'Dense')
        check_col(j, self._cols, 'Dense')
        return float(self._data[i * self._stride + j])

    def set(self, i: int, j: int, v: float) -> None:
        check_row(i, self._rows, 'Dense')
        check_col(j, self._cols, 'Dense')
        self._data[i * self._stride + j] = v

    def as_array(self) -> NDArray[np.float64]:
        """Writable 2-D ndarray view over the buffer (no copy)."""
        itemsize = self._data.itemsize
        return as_strided(
            self._data,
            shape=(self._rows, self._cols),
            strides=(self._stride * itemsize, itemsize),
        )

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """Independent 2-D copy of the matrix."""
        return self.as_array().copy()

    # --- views ---

    def row_view(self, i: int) -> DenseVector:
        """Contiguous vector aliasing row i."""
        check_row(i, self._rows, 'row_view')
        start = i * self._stride
        return DenseVector._strided(self._data[start:start + self._cols], 1)

    def col_view(self, j: int) -> DenseVector:
        """Strided vector aliasing column j."""
        check_col(j, self._cols, 'col_view')
        return DenseVector._strided(self._data[j:], self._stride)

    def block(self, i: int, k: int, j: int, l: int) -> Dense:
        """
        Sub-matrix of rows i..k-1 and columns j..l-1 sharing this buffer.

        Raises:
            DimensionError: If the block is empty or outside the matrix
        """
        if k <= i or l <= j:
            raise DimensionError(
                f"block: empty range rows [{i}, {k}), cols [{j}, {l})"
            )
        if i < 0 or j < 0 or k > self._rows or l > self._cols:
            raise DimensionError(
                f"block: rows [{i}, {k}), cols [{j}, {l}) outside "
                f"({self._rows}, {self._cols}) matrix"
            )
        start = i * self._stride + j
        end = (k - 1) * self._stride + l
        return Dense._strided(self._data[start:end], k - i, l - j, self._stride)

    # --- in-place mutation ---

    def swap_rows(self, i: int, j: int) -> None:
        check_row(i, self._rows, 'swap_rows')
        check_row(j, self._rows, 'swap_rows')
        grid = self.as_array()
        grid[[i, j]] = grid[[j, i]]

    def swap_cols(self, i: int, j: int) -> None:
        check_col(i, self._cols, 'swap_cols')
        check_col(j, self._cols, 'swap_cols')
        grid = self.as_array()
        grid[:, [i, j]] = grid[:, [j, i]]

    def for_each(self, fn: Callable[[int, int, float], float]) -> None:
        """
        Replace every element by fn(i, j, value).

        Elements are visited in row-major order: row 0 left to right, then
        row 1, and so on.
        """
        for i in range(self._rows):
            offset = i * self._stride
            for j in range(self._cols):
                self._data[offset + j] = fn(i, j, float(self._data[offset + j]))


def new_dense(rows: int, cols: int, data: ArrayLike | None = None) -> Dense:
    """Allocate (or wrap) a dense matrix. See Dense."""
    return Dense(rows, cols, data)


def new_vector(n: int, data: ArrayLike | None = None) -> DenseVector:
    """Allocate (or wrap) a dense vector. See DenseVector."""
    return DenseVector(n, data)
