"""
Tests for Gauss-Jordan inversion.

Validates:
    - Known 2x2 inverse and A @ inv(A) = I on random input
    - Singular input raises SingularMatrixError with diagnostics
    - Non-square input, bad out, and aliasing are rejected up front
    - Scratch reuse, and the warning path for a too-small scratch
    - The input matrix is never modified
"""

import warnings

import numpy as np
import pytest

from pylap.core.compute import SolverTolerances
from pylap.core.exceptions import (
    AliasingError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
    ValidationError,
)
from pylap.inversion import invert_square
from pylap.matrix import Dense, identity, mul, transpose


# ═══════════════════════════════════════════════════════════════════════
# Correctness
# ═══════════════════════════════════════════════════════════════════════


class TestInverse:

    def test_two_by_two(self):
        a = Dense.from_rows([[1.0, 2.0], [3.0, 4.0]])
        inv = invert_square(a)
        np.testing.assert_allclose(inv.to_numpy(), [[-2.0, 1.0], [1.5, -0.5]], atol=1e-12)

    def test_product_is_identity(self, rng):
        arr = rng.standard_normal((5, 5)) + 5.0 * np.eye(5)
        a = Dense.from_rows(arr)
        inv = invert_square(a)
        np.testing.assert_allclose(mul(a, inv).to_numpy(), np.eye(5), atol=1e-10)
        np.testing.assert_allclose(inv.to_numpy(), np.linalg.inv(arr), rtol=1e-10)

    def test_magic_square(self, magic3):
        inv = invert_square(magic3)
        np.testing.assert_allclose(inv.to_numpy(), np.linalg.inv(magic3.to_numpy()), rtol=1e-10)

    def test_needs_row_swap(self):
        a = Dense.from_rows([[0.0, 1.0], [1.0, 0.0]])
        np.testing.assert_allclose(invert_square(a).to_numpy(), [[0.0, 1.0], [1.0, 0.0]])

    def test_identity(self):
        np.testing.assert_array_equal(invert_square(identity(3)).to_numpy(), np.eye(3))

    def test_one_by_one(self):
        assert invert_square(Dense.from_rows([[4.0]])).at(0, 0) == 0.25

    def test_view_input(self, magic3):
        inv = invert_square(transpose(magic3))
        np.testing.assert_allclose(
            inv.to_numpy(), np.linalg.inv(magic3.to_numpy().T), rtol=1e-10
        )

    def test_input_untouched(self, magic3):
        before = magic3.to_numpy()
        invert_square(magic3)
        np.testing.assert_array_equal(magic3.to_numpy(), before)


# ═══════════════════════════════════════════════════════════════════════
# Failure modes
# ═══════════════════════════════════════════════════════════════════════


class TestFailures:

    def test_singular(self):
        a = Dense.from_rows([[1.0, 2.0], [2.0, 4.0]])
        with pytest.raises(SingularMatrixError) as exc_info:
            invert_square(a)
        err = exc_info.value
        assert isinstance(err, NumericalError)
        assert err.matrix_name == 'a'
        assert err.pivot_row == 1
        assert abs(err.pivot_value) < 1e-16

    def test_zero_matrix(self):
        with pytest.raises(SingularMatrixError):
            invert_square(Dense(3, 3))

    def test_custom_pivot_threshold(self):
        a = Dense.from_rows([[1e-10, 0.0], [0.0, 1.0]])
        invert_square(a)
        with pytest.raises(SingularMatrixError):
            invert_square(a, tolerances=SolverTolerances(singular_pivot=1e-8))

    def test_out_untouched_on_failure(self):
        out = Dense.from_rows([[7.0, 7.0], [7.0, 7.0]])
        with pytest.raises(SingularMatrixError):
            invert_square(Dense.from_rows([[1.0, 2.0], [2.0, 4.0]]), out=out)
        np.testing.assert_array_equal(out.to_numpy(), np.full((2, 2), 7.0))

    def test_not_square(self):
        with pytest.raises(DimensionError, match="square"):
            invert_square(Dense(2, 3))

    def test_out_wrong_shape(self, magic3):
        with pytest.raises(DimensionError):
            invert_square(magic3, out=Dense(2, 2))

    def test_out_not_dense(self, magic3):
        with pytest.raises(ValidationError):
            invert_square(magic3, out=identity(3))

    def test_out_aliases_input(self, magic3):
        with pytest.raises(AliasingError):
            invert_square(magic3, out=magic3)

    def test_out_aliases_input_view(self, magic3):
        with pytest.raises(AliasingError):
            invert_square(transpose(magic3), out=magic3)


# ═══════════════════════════════════════════════════════════════════════
# Output and scratch buffers
# ═══════════════════════════════════════════════════════════════════════


class TestBuffers:

    def test_out_parameter(self):
        out = Dense(2, 2)
        returned = invert_square(Dense.from_rows([[1.0, 2.0], [3.0, 4.0]]), out=out)
        assert returned is out
        np.testing.assert_allclose(out.to_numpy(), [[-2.0, 1.0], [1.5, -0.5]], atol=1e-12)

    def test_scratch_reused(self, magic3):
        scratch = np.full(2 * 3 * 3 + 4, np.nan)
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            inv = invert_square(magic3, scratch=scratch)
        np.testing.assert_allclose(inv.to_numpy(), np.linalg.inv(magic3.to_numpy()), rtol=1e-10)
        assert not np.isnan(scratch[:18]).any()

    def test_scratch_reused_across_calls(self, rng):
        scratch = np.empty(2 * 4 * 4)
        for _ in range(3):
            arr = rng.standard_normal((4, 4)) + 4.0 * np.eye(4)
            inv = invert_square(Dense.from_rows(arr), scratch=scratch)
            np.testing.assert_allclose(inv.to_numpy(), np.linalg.inv(arr), rtol=1e-9)

    def test_small_scratch_warns(self, magic3):
        scratch = np.zeros(4)
        with pytest.warns(RuntimeWarning, match="allocating a temporary buffer"):
            inv = invert_square(magic3, scratch=scratch)
        np.testing.assert_allclose(inv.to_numpy(), np.linalg.inv(magic3.to_numpy()), rtol=1e-10)
        np.testing.assert_array_equal(scratch, np.zeros(4))

    def test_scratch_wrong_type(self, magic3):
        with pytest.raises(ValidationError):
            invert_square(magic3, scratch=[0.0] * 18)

    def test_scratch_aliases_out(self, magic3):
        storage = np.zeros(18)
        out = Dense(3, 3, storage[:9])
        with pytest.raises(AliasingError):
            invert_square(magic3, out=out, scratch=storage)

    def test_scratch_aliases_input(self):
        storage = np.zeros(8)
        a = Dense(2, 2, storage[:4])
        a.set(0, 0, 1.0)
        a.set(1, 1, 1.0)
        with pytest.raises(AliasingError):
            invert_square(a, scratch=storage)
