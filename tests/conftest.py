"""
pytest configuration and shared fixtures.
"""

import numpy as np
import pytest

from pylap.matrix import Dense


MAGIC3 = [
    [8.0, 1.0, 6.0],
    [3.0, 5.0, 7.0],
    [4.0, 9.0, 2.0],
]


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def magic3():
    """3x3 magic square as a fresh Dense matrix."""
    return Dense.from_rows(MAGIC3)


@pytest.fixture
def integer_pair(rng):
    """Two 4x5 integer-valued matrices; sums and differences are exact."""
    a = rng.integers(-50, 50, size=(4, 5)).astype(np.float64)
    b = rng.integers(-50, 50, size=(4, 5)).astype(np.float64)
    return Dense.from_rows(a), Dense.from_rows(b)
