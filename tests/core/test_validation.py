"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_buffer: conversion, zero-copy passthrough, size and shape checks
    - check_row / check_col: range checks with typed access errors
    - check_index_list / check_strictly_increasing: view index validation
    - check_same_dims / check_square: shape checks
    - check_finite: NaN/Inf detection
"""

import numpy as np
import pytest

from pylap.core.exceptions import (
    ColumnAccessError,
    DimensionError,
    RowAccessError,
    ValidationError,
)
from pylap.core.validation import (
    check_buffer,
    check_col,
    check_finite,
    check_index_list,
    check_nonnegative_dims,
    check_row,
    check_same_dims,
    check_square,
    check_strictly_increasing,
)


# ═══════════════════════════════════════════════════════════════════════
# check_buffer
# ═══════════════════════════════════════════════════════════════════════


class TestCheckBuffer:

    def test_list_converted_to_float64(self):
        result = check_buffer([1, 2, 3], 3, "data")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_float64_array_not_copied(self):
        arr = np.arange(4, dtype=np.float64)
        assert check_buffer(arr, 4, "data") is arr

    def test_int_array_copied(self):
        arr = np.arange(4)
        result = check_buffer(arr, 4, "data")
        assert result.dtype == np.float64
        assert not np.shares_memory(result, arr)

    def test_wrong_size(self):
        with pytest.raises(DimensionError, match="3 elements, expected 4"):
            check_buffer([1.0, 2.0, 3.0], 4, "data")

    def test_rejects_2d(self):
        with pytest.raises(ValidationError, match="expected 1D"):
            check_buffer(np.zeros((2, 2)), 4, "data")

    def test_rejects_noncontiguous(self):
        arr = np.zeros(8)[::2]
        with pytest.raises(ValidationError, match="contiguous"):
            check_buffer(arr, 4, "data")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="data"):
            check_buffer(["a", "b"], 2, "data")


class TestCheckNonnegativeDims:

    def test_zero_ok(self):
        check_nonnegative_dims(0, 0, "m")

    def test_negative(self):
        with pytest.raises(DimensionError):
            check_nonnegative_dims(-1, 2, "m")


# ═══════════════════════════════════════════════════════════════════════
# Index checks
# ═══════════════════════════════════════════════════════════════════════


class TestIndexChecks:

    def test_row_in_range(self):
        check_row(0, 3, "m")
        check_row(2, 3, "m")

    @pytest.mark.parametrize("i", [-1, 3, 10])
    def test_row_out_of_range(self, i):
        with pytest.raises(RowAccessError) as exc_info:
            check_row(i, 3, "m")
        assert exc_info.value.index == i
        assert exc_info.value.bound == 3

    @pytest.mark.parametrize("j", [-1, 4])
    def test_col_out_of_range(self, j):
        with pytest.raises(ColumnAccessError):
            check_col(j, 4, "m")

    def test_index_list_returns_tuple(self):
        assert check_index_list([2, 0, 2], 3, 'row', "rows") == (2, 0, 2)

    def test_index_list_column_error(self):
        with pytest.raises(ColumnAccessError):
            check_index_list([0, 5], 3, 'column', "cols")

    @pytest.mark.parametrize("indices", [[0, 1.5], [np.float64(1.0)], ["1"]])
    def test_index_list_rejects_non_integers(self, indices):
        with pytest.raises(ValidationError, match="must be integers"):
            check_index_list(indices, 3, 'row', "rows")

    def test_index_list_accepts_numpy_ints(self):
        assert check_index_list(np.array([2, 0]), 3, 'row', "rows") == (2, 0)

    def test_strictly_increasing_ok(self):
        assert check_strictly_increasing([0, 2, 4], 5, 'row', "ex") == (0, 2, 4)

    def test_strictly_increasing_empty(self):
        assert check_strictly_increasing([], 5, 'row', "ex") == ()

    @pytest.mark.parametrize("indices", [[2, 1], [1, 1]])
    def test_not_increasing(self, indices):
        with pytest.raises(ValidationError, match="sorted and non-repeating"):
            check_strictly_increasing(indices, 5, 'row', "ex")

    def test_increasing_out_of_range(self):
        with pytest.raises(RowAccessError):
            check_strictly_increasing([1, 5], 5, 'row', "ex")


# ═══════════════════════════════════════════════════════════════════════
# Shape checks
# ═══════════════════════════════════════════════════════════════════════


class TestShapeChecks:

    def test_same_dims_ok(self):
        check_same_dims((2, 3), (2, 3), ("a", "b"))

    def test_same_dims_mismatch(self):
        with pytest.raises(DimensionError, match="a=\\(2, 3\\), b=\\(3, 2\\)"):
            check_same_dims((2, 3), (3, 2), ("a", "b"))

    def test_square(self):
        assert check_square((4, 4), "a") == 4

    def test_not_square(self):
        with pytest.raises(DimensionError, match="square"):
            check_square((2, 3), "a")


class TestCheckFinite:

    def test_finite_ok(self):
        check_finite(np.array([1.0, 2.0]), "x")

    def test_nan_and_inf_counted(self):
        with pytest.raises(ValidationError, match="1 NaN, 1 Inf"):
            check_finite(np.array([np.nan, np.inf, 1.0]), "x")
