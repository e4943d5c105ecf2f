"""
Zero-copy view combinators.

Views hold a reference to the wrapped matrix plus index metadata and read
through it on every access. They remain valid only while the wrapped value
keeps its shape, which for built-in storage is always.
"""

from __future__ import annotations

from collections.abc import Sequence

from pylap.core.exceptions import (
    AliasingError,
    UnsupportedOperationError,
    ValidationError,
)
from pylap.core.protocols import MatrixLike, VectorLike
from pylap.core.validation import (
    check_col,
    check_index_list,
    check_row,
    check_same_dims,
    check_strictly_increasing,
)
from pylap.matrix.base import Matrix, Vector


def _as_list(indices: Sequence[int] | None) -> Sequence[int]:
    return () if indices is None else indices


def _mapping(
    indices: Sequence[int] | None,
    bound: int,
    axis: str,
    name: str,
) -> tuple[int, ...] | None:
    """Validated index tuple, or None for the identity mapping."""
    if indices is None or len(indices) == 0:
        return None
    return check_index_list(indices, bound, axis, name)


class Transpose(Matrix):
    """Implicit transpose: at(i, j) reads wrapped.at(j, i)."""

    __slots__ = ('_m',)

    def __init__(self, m: MatrixLike):
        self._m = m

    @property
    def wrapped(self) -> MatrixLike:
        return self._m

    def dims(self) -> tuple[int, int]:
        c, r = self._m.dims()
        return r, c

    def at(self, i: int, j: int) -> float:
        return self._m.at(j, i)

    @property
    def is_mutable(self) -> bool:
        return getattr(self._m, 'is_mutable', False)

    def set(self, i: int, j: int, v: float) -> None:
        if not self.is_mutable:
            raise UnsupportedOperationError(
                f"Transpose: wrapped {type(self._m).__name__} is not mutable"
            )
        self._m.set(j, i, v)


def transpose(m: MatrixLike) -> MatrixLike:
    """
    Transpose without copying.

    Transposing a Transpose unwraps it, returning the original object.
    """
    if isinstance(m, Transpose):
        return m.wrapped
    return Transpose(m)


class Slice(Matrix):
    """
    Index-remapping view.

    Row i of the view is row rows[i] of the wrapped matrix (likewise for
    columns). A mapping of None is the identity mapping of that axis.
    """

    __slots__ = ('_m', '_ridx', '_cidx')

    def __init__(
        self,
        m: MatrixLike,
        rows: Sequence[int] | None = None,
        cols: Sequence[int] | None = None,
    ):
        r, c = m.dims()
        self._m = m
        self._ridx = _mapping(rows, r, 'row', 'slice rows')
        self._cidx = _mapping(cols, c, 'column', 'slice cols')

    @classmethod
    def _mapped(
        cls,
        m: MatrixLike,
        ridx: tuple[int, ...] | None,
        cidx: tuple[int, ...] | None,
    ) -> Slice:
        # ridx/cidx are trusted; an empty tuple selects nothing
        s = cls.__new__(cls)
        s._m = m
        s._ridx = ridx
        s._cidx = cidx
        return s

    @property
    def wrapped(self) -> MatrixLike:
        return self._m

    @property
    def row_indices(self) -> tuple[int, ...] | None:
        return self._ridx

    @property
    def col_indices(self) -> tuple[int, ...] | None:
        return self._cidx

    def dims(self) -> tuple[int, int]:
        r, c = self._m.dims()
        if self._ridx is not None:
            r = len(self._ridx)
        if self._cidx is not None:
            c = len(self._cidx)
        return r, c

    def _map(self, i: int, j: int) -> tuple[int, int]:
        r, c = self.dims()
        check_row(i, r, type(self).__name__)
        check_col(j, c, type(self).__name__)
        if self._ridx is not None:
            i = self._ridx[i]
        if self._cidx is not None:
            j = self._cidx[j]
        return i, j

    def at(self, i: int, j: int) -> float:
        return self._m.at(*self._map(i, j))

    @property
    def is_mutable(self) -> bool:
        return getattr(self._m, 'is_mutable', False)

    def _require_mutable(self) -> None:
        if not self.is_mutable:
            raise UnsupportedOperationError(
                f"{type(self).__name__}: wrapped {type(self._m).__name__} "
                f"is not mutable"
            )

    def set(self, i: int, j: int, v: float) -> None:
        self._require_mutable()
        self._m.set(*self._map(i, j), v)

    def copy_from(self, src: MatrixLike) -> tuple[int, int]:
        """
        Write src element-wise through the view into the wrapped matrix.

        Returns:
            (rows, cols) copied

        Raises:
            UnsupportedOperationError: If the wrapped matrix is immutable
            DimensionError: If src does not match the view's shape
            AliasingError: If src shares storage with the wrapped matrix
        """
        from pylap.matrix.aliasing import aliased
        from pylap.matrix._materialize import as_array

        self._require_mutable()
        r, c = self.dims()
        check_same_dims(src.dims(), (r, c), ('src', type(self).__name__))
        if src is not self and aliased(self, src):
            raise AliasingError(
                "copy_from: source shares storage with the destination view",
                operation='copy_from',
            )
        values = as_array(src)
        for i in range(r):
            ii = i if self._ridx is None else self._ridx[i]
            for j in range(c):
                jj = j if self._cidx is None else self._cidx[j]
                self._m.set(ii, jj, float(values[i, j]))
        return r, c


class Exclude(Slice):
    """
    Set-complement counterpart of Slice.

    Keeps every row/column of the wrapped matrix except the excluded ones,
    in their original order. Excluding every row yields a 0-row view.
    """

    __slots__ = ('_excluded_rows', '_excluded_cols')

    def __init__(
        self,
        m: MatrixLike,
        exclude_rows: Sequence[int] | None = None,
        exclude_cols: Sequence[int] | None = None,
    ):
        r, c = m.dims()
        ex_rows = check_strictly_increasing(_as_list(exclude_rows), r, 'row', 'exclude rows')
        ex_cols = check_strictly_increasing(_as_list(exclude_cols), c, 'column', 'exclude cols')
        self._m = m
        self._excluded_rows = ex_rows
        self._excluded_cols = ex_cols
        dropped_rows = set(ex_rows)
        dropped_cols = set(ex_cols)
        self._ridx = tuple(i for i in range(r) if i not in dropped_rows)
        self._cidx = tuple(j for j in range(c) if j not in dropped_cols)

    @property
    def excluded_rows(self) -> tuple[int, ...]:
        return self._excluded_rows

    @property
    def excluded_cols(self) -> tuple[int, ...]:
        return self._excluded_cols


def slice_matrix(
    m: MatrixLike,
    rows: Sequence[int] | None = None,
    cols: Sequence[int] | None = None,
) -> Slice:
    """
    View of m restricted to the given rows and columns.

    An empty or omitted index list keeps the whole axis. Indices may repeat
    and appear in any order.

    Raises:
        RowAccessError / ColumnAccessError: If an index is out of range
    """
    return Slice(m, rows, cols)


def slice_exclude(
    m: MatrixLike,
    exclude_rows: Sequence[int] | None = None,
    exclude_cols: Sequence[int] | None = None,
) -> Exclude:
    """
    View of m without the given rows and columns.

    Raises:
        RowAccessError / ColumnAccessError: If an index is out of range
        ValidationError: If an exclusion list is not strictly increasing
    """
    return Exclude(m, exclude_rows, exclude_cols)


class SliceVector(Slice, Vector):
    """Slice of a column vector; itself a vector."""

    __slots__ = ()

    def len(self) -> int:
        return self.dims()[0]

    def at_vec(self, i: int) -> float:
        return self.at(i, 0)


def _check_column_vector(v: VectorLike) -> None:
    r, c = v.dims()
    if c != 1 or r != v.len():
        raise ValidationError(
            f"cannot slice a non-column vector with dims ({r}, {c})"
        )


def slice_vec(v: VectorLike, indices: Sequence[int] | None = None) -> SliceVector:
    """Vector of v's elements at the given positions (all if empty)."""
    _check_column_vector(v)
    ridx = _mapping(indices, v.len(), 'row', 'slice indices')
    return SliceVector._mapped(v, ridx, None)


def slice_exclude_vec(v: VectorLike, exclude: Sequence[int] | None = None) -> SliceVector:
    """Vector of v's elements without the excluded positions."""
    _check_column_vector(v)
    n = v.len()
    dropped = set(check_strictly_increasing(_as_list(exclude), n, 'row', 'exclude indices'))
    return SliceVector._mapped(v, tuple(i for i in range(n) if i not in dropped), None)


class Identity(Matrix):
    """Stateless n x n identity. Never allocates."""

    __slots__ = ('_n',)

    def __init__(self, n: int):
        if n < 0:
            raise ValidationError(f"identity: negative size {n}")
        self._n = n

    def dims(self) -> tuple[int, int]:
        return self._n, self._n

    def at(self, i: int, j: int) -> float:
        check_row(i, self._n, 'Identity')
        check_col(j, self._n, 'Identity')
        return 1.0 if i == j else 0.0


def identity(n: int) -> Identity:
    """Square identity matrix of size n."""
    return Identity(n)
