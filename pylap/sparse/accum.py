"""
Coordinate-format ingestion and a dictionary-backed sparse matrix.

SparseAccum collects (row, col, value) triples in parallel arrays; Sparse
sums them into a coordinate map. Duplicate coordinates accumulate rather
than overwrite.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylap.core.exceptions import DimensionError, ValidationError
from pylap.core.validation import check_col, check_nonnegative_dims, check_row
from pylap.matrix.base import Matrix


class SparseAccum:
    """
    Fixed-size accumulator of coordinate triples.

    Attributes:
        rows: Row indices, shape (n,)
        cols: Column indices, shape (n,)
        values: Element values, shape (n,)
    """

    def __init__(self, n: int):
        if n < 1:
            raise ValidationError(
                f"SparseAccum: number of elements must be greater than 0, got {n}"
            )
        self.rows = np.zeros(n, dtype=np.intp)
        self.cols = np.zeros(n, dtype=np.intp)
        self.values = np.zeros(n, dtype=np.float64)

    @classmethod
    def from_coo(
        cls,
        rows: Sequence[int] | ArrayLike,
        cols: Sequence[int] | ArrayLike,
        values: Sequence[float] | ArrayLike,
    ) -> SparseAccum:
        """
        Build an accumulator from parallel coordinate lists.

        Raises:
            DimensionError: If the lists have different lengths
        """
        r = np.asarray(rows, dtype=np.intp)
        c = np.asarray(cols, dtype=np.intp)
        v = np.asarray(values, dtype=np.float64)
        if not (r.shape == c.shape == v.shape) or r.ndim != 1:
            raise DimensionError(
                f"from_coo: lengths must be equal, got rows={r.shape}, "
                f"cols={c.shape}, values={v.shape}"
            )
        acc = cls(r.size)
        acc.rows[:] = r
        acc.cols[:] = c
        acc.values[:] = v
        return acc

    def __len__(self) -> int:
        return self.values.size

    def set(self, offset: int, i: int, j: int, v: float) -> None:
        """Record element (i, j) = v at position offset of the accumulator."""
        self.rows[offset] = i
        self.cols[offset] = j
        self.values[offset] = v

    def zero(self) -> None:
        """Reset all indices and values to zero."""
        self.rows[:] = 0
        self.cols[:] = 0
        self.values[:] = 0.0


class Sparse(Matrix):
    """
    Sparse matrix storing only non-zero elements in a coordinate map.

    Setting an element to zero removes it from the map.
    """

    __slots__ = ('_store', '_rows', '_cols')

    def __init__(self, rows: int, cols: int):
        check_nonnegative_dims(rows, cols, 'Sparse')
        self._store: dict[tuple[int, int], float] = {}
        self._rows = rows
        self._cols = cols

    @property
    def store(self) -> dict[tuple[int, int], float]:
        """The coordinate map backing this matrix."""
        return self._store

    def dims(self) -> tuple[int, int]:
        return self._rows, self._cols

    @property
    def is_mutable(self) -> bool:
        return True

    def at(self, i: int, j: int) -> float:
        check_row(i, self._rows, 'Sparse')
        check_col(j, self._cols, 'Sparse')
        return self._store.get((i, j), 0.0)

    def set(self, i: int, j: int, v: float) -> None:
        check_row(i, self._rows, 'Sparse')
        check_col(j, self._cols, 'Sparse')
        if v != 0:
            self._store[(i, j)] = float(v)
        else:
            self._store.pop((i, j), None)

    def accumulate(
        self,
        data: SparseAccum,
        *,
        transpose: bool = False,
        row_offset: int = 0,
        col_offset: int = 0,
    ) -> None:
        """
        Add the accumulator's triples into this matrix.

        Args:
            data: Coordinate triples; duplicates are summed
            transpose: Swap each triple's row and column first
            row_offset: Added to every row index
            col_offset: Added to every column index

        Raises:
            DimensionError: If the accumulator arrays differ in length
            RowAccessError / ColumnAccessError: If a shifted index is out
                of range; no element is added in that case
        """
        if not (data.rows.size == data.cols.size == data.values.size):
            raise DimensionError("accumulate: length of arguments must be equal")
        ii, jj = (data.cols, data.rows) if transpose else (data.rows, data.cols)
        ii = ii + row_offset
        jj = jj + col_offset
        for k in range(data.values.size):
            check_row(int(ii[k]), self._rows, 'accumulate')
            check_col(int(jj[k]), self._cols, 'accumulate')
        for i, j, v in zip(ii.tolist(), jj.tolist(), data.values.tolist()):
            if v == 0:
                continue
            total = self._store.get((i, j), 0.0) + v
            if total != 0:
                self._store[(i, j)] = total
            else:
                self._store.pop((i, j), None)

    def do_nonzero(self, fn: Callable[[int, int, float], Any]) -> None:
        """Call fn(i, j, v) for every stored element. Order is unspecified."""
        for (i, j), v in list(self._store.items()):
            fn(i, j, v)

    def count_nonzero(self) -> int:
        return len(self._store)

    def zero(self) -> None:
        """Remove every element."""
        self._store.clear()

    def to_numpy(self) -> NDArray[np.float64]:
        """Dense 2-D copy."""
        out = np.zeros((self._rows, self._cols), dtype=np.float64)
        for (i, j), v in self._store.items():
            out[i, j] = v
        return out

    def to_scipy(self):
        """Export as a scipy.sparse COO array."""
        from scipy.sparse import coo_array

        if self._store:
            ij = np.array(list(self._store.keys()), dtype=np.intp)
            vals = np.fromiter(self._store.values(), dtype=np.float64, count=len(self._store))
            return coo_array((vals, (ij[:, 0], ij[:, 1])), shape=(self._rows, self._cols))
        return coo_array((self._rows, self._cols), dtype=np.float64)


def from_coo(
    rows: Sequence[int] | ArrayLike,
    cols: Sequence[int] | ArrayLike,
    values: Sequence[float] | ArrayLike,
    shape: tuple[int, int],
) -> Sparse:
    """
    Sparse matrix from parallel coordinate lists; duplicates are summed.
    """
    s = Sparse(*shape)
    if len(values) == 0 and len(rows) == 0 and len(cols) == 0:
        return s
    s.accumulate(SparseAccum.from_coo(rows, cols, values))
    return s
