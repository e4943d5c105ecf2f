"""
Base classes of the built-in matrix family.

The family is closed: Dense, DenseVector, Transpose, Slice, Exclude,
SliceVector, Identity and Sparse. The aliasing detector and the array
materializer dispatch over exactly these classes, so new storage-backed
variants must be registered in both places.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pylap.core.exceptions import UnsupportedOperationError
from pylap.core.validation import check_col


class Matrix(ABC):
    """Read capability shared by every built-in matrix value."""

    __slots__ = ()

    @abstractmethod
    def at(self, i: int, j: int) -> float:
        """Element at row i, column j (bounds-checked)."""

    @abstractmethod
    def dims(self) -> tuple[int, int]:
        """(rows, cols)."""

    @property
    def shape(self) -> tuple[int, int]:
        return self.dims()

    @property
    def is_mutable(self) -> bool:
        """True if set() writes through to storage."""
        return False

    def set(self, i: int, j: int, v: float) -> None:
        raise UnsupportedOperationError(
            f"{type(self).__name__} does not support element assignment"
        )

    def __repr__(self) -> str:
        r, c = self.dims()
        return f"{type(self).__name__}({r}x{c})"


class Vector(Matrix):
    """A column matrix additionally indexable by a single position."""

    __slots__ = ()

    @abstractmethod
    def at_vec(self, i: int) -> float:
        """Element at position i (bounds-checked)."""

    @abstractmethod
    def len(self) -> int:
        """Number of elements."""

    def dims(self) -> tuple[int, int]:
        return self.len(), 1

    def at(self, i: int, j: int) -> float:
        if j != 0:
            check_col(j, 1, type(self).__name__)
        return self.at_vec(i)

    def set_vec(self, i: int, v: float) -> None:
        self.set(i, 0, v)
