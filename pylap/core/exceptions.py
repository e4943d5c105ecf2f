"""
Exception hierarchy for pylap.

All exceptions inherit from PylapError to allow catching any
library-specific error. Every class is tagged with an ErrorKind so callers
can branch on the failure category without matching class names.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Failures are raised at the offending call and never retried
"""

from enum import Enum


class ErrorKind(Enum):
    """Enumerated failure categories."""
    VALIDATION = 'validation'
    DIMENSION = 'dimension'
    ROW_ACCESS = 'row_access'
    COLUMN_ACCESS = 'column_access'
    ALIASED = 'aliased'
    UNSUPPORTED = 'unsupported'
    NUMERICAL = 'numerical'
    SINGULAR = 'singular'


class PylapError(Exception):
    """Base exception for all pylap errors."""
    kind: ErrorKind = ErrorKind.VALIDATION


class ValidationError(PylapError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    kind = ErrorKind.VALIDATION


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised when operand shapes are incompatible with an operation, or when
    a supplied buffer has the wrong number of elements.
    """
    kind = ErrorKind.DIMENSION


class IndexAccessError(ValidationError, IndexError):
    """
    Element or view index is out of range.

    Attributes:
        index: The offending index
        bound: The exclusive upper bound of the axis
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        bound: int | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound


class RowAccessError(IndexAccessError):
    """Row index out of range."""
    kind = ErrorKind.ROW_ACCESS


class ColumnAccessError(IndexAccessError):
    """Column index out of range."""
    kind = ErrorKind.COLUMN_ACCESS


class AliasingError(PylapError):
    """
    Output storage overlaps an input operand.

    Raised before any element is written, so the output is left untouched.

    Attributes:
        operation: Name of the rejected operation
    """
    kind = ErrorKind.ALIASED

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message)
        self.operation = operation


class UnsupportedOperationError(PylapError, TypeError):
    """
    Operation is not available for this matrix value.

    Raised on mutation through a read-only view, or when the backing
    storage of a foreign matrix implementation cannot be determined.
    """
    kind = ErrorKind.UNSUPPORTED


class NumericalError(PylapError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    kind = ErrorKind.NUMERICAL


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when a matrix operation requires invertibility but a pivot falls
    below working precision.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_row: Row whose pivot vanished, if known
        pivot_value: The offending pivot value, if known
    """
    kind = ErrorKind.SINGULAR

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_row: int | None = None,
        pivot_value: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_row = pivot_row
        self.pivot_value = pivot_value


class ConvergenceError(NumericalError):
    """
    Iterative algorithm failed to converge.

    Raised when the Jacobi sweep cap is exhausted while rotations are
    still being applied.

    Attributes:
        iterations: Number of sweeps completed
        rotations: Rotations applied in the final sweep
        reason: Why convergence failed (e.g., 'max_sweeps')
        threshold: The convergence threshold that was not met
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        rotations: int | None = None,
        reason: str | None = None,
        threshold: float | None = None,
    ):
        super().__init__(message)
        self.iterations = iterations
        self.rotations = rotations
        self.reason = reason
        self.threshold = threshold
