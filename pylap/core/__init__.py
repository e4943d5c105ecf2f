"""
Core infrastructure for pylap.

This module provides shared abstractions and utilities used by the matrix
layer and the solvers.

Key components:
    protocols: MatrixLike, VectorLike structural protocols
    result: Generic Result[P] envelope
    exceptions: Error-kind enum and exception hierarchy
    validation: Input validators
    compute: Timing and solver tolerances
"""

from pylap.core.protocols import MatrixLike, VectorLike
from pylap.core.result import Result
from pylap.core.exceptions import (
    ErrorKind,
    PylapError,
    ValidationError,
    DimensionError,
    IndexAccessError,
    RowAccessError,
    ColumnAccessError,
    AliasingError,
    UnsupportedOperationError,
    NumericalError,
    SingularMatrixError,
    ConvergenceError,
)

__all__ = [
    # Protocols
    "MatrixLike",
    "VectorLike",
    # Result
    "Result",
    # Exceptions
    "ErrorKind",
    "PylapError",
    "ValidationError",
    "DimensionError",
    "IndexAccessError",
    "RowAccessError",
    "ColumnAccessError",
    "AliasingError",
    "UnsupportedOperationError",
    "NumericalError",
    "SingularMatrixError",
    "ConvergenceError",
]
