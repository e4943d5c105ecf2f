"""
Tests for timing utilities and solver tolerances.
"""

from dataclasses import FrozenInstanceError

import pytest

from pylap.core.compute import DEFAULT_TOLERANCES, SolverTolerances, Timer, timed
from pylap.core.exceptions import ValidationError


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section('a'):
            pass
        with timer.section('a'):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'a'}
        assert result['a'] >= 0.0
        assert result['total_seconds'] >= 0.0

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError):
            timer.result()

    def test_timed_context(self):
        with timed() as timer:
            pass
        assert 'total_seconds' in timer.result()


class TestSolverTolerances:

    def test_defaults(self):
        assert DEFAULT_TOLERANCES.jacobi_rtol == 1e-14
        assert DEFAULT_TOLERANCES.singular_pivot == 1e-16
        assert DEFAULT_TOLERANCES.max_sweeps >= 1

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            DEFAULT_TOLERANCES.max_sweeps = 5

    def test_custom(self):
        tol = SolverTolerances(max_sweeps=3, name='short')
        assert tol.max_sweeps == 3
        assert tol.jacobi_rtol == DEFAULT_TOLERANCES.jacobi_rtol

    @pytest.mark.parametrize("kwargs", [
        {'jacobi_rtol': 0.0},
        {'max_sweeps': 0},
        {'singular_pivot': -1.0},
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(ValidationError):
            SolverTolerances(**kwargs)
