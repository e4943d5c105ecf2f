"""
Core protocols for pylap.

These define the structural matrix interface. We use Protocol (structural
typing) rather than ABC (nominal typing) so any object exposing element
access and dimensions can be read by the arithmetic and reduction layers.

Only the built-in variants in pylap.matrix can be *written* or resolved to
a backing buffer; see pylap.matrix.aliasing.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class MatrixLike(Protocol):
    """
    Minimal read capability of a matrix value.

    Any object implementing at() and dims() is a matrix. Identity is not
    required: two distinct objects may describe the same matrix.
    """

    def at(self, i: int, j: int) -> float:
        """Element at row i, column j."""
        ...

    def dims(self) -> tuple[int, int]:
        """(rows, cols) of the matrix. Never changes after construction."""
        ...


@runtime_checkable
class VectorLike(MatrixLike, Protocol):
    """
    A matrix value that is also indexable as a column vector.

    dims() must report (len(), 1).
    """

    def at_vec(self, i: int) -> float:
        """Element at position i."""
        ...

    def len(self) -> int:
        """Number of elements."""
        ...
