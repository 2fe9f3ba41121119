"""Tests for the alternating minimax search."""

import math
from dataclasses import replace

import numpy as np
import pytest

from sinapprox import (
    ApproximationResult,
    ConstraintUnsatisfiable,
    OddPolynomial,
    approximate,
    minimize_errors,
)
from sinapprox import minimax
from sinapprox.constrain import HALF_PI
from sinapprox.extremum import max_absolute_error, max_relative_error
from sinapprox.minimax import _minimize, absolute_objective, free_coefficient_count, relative_objective

OPTIMIZED_DEGREES = [7, 9, 11, 13]


class TestDegrees:

    @pytest.mark.parametrize('degree, count', [(5, 0), (7, 1), (9, 2), (11, 3), (13, 4)])
    def test_free_coefficients(self, degree, count):
        assert free_coefficient_count(degree) == count

    @pytest.mark.parametrize('degree', [1, 3, 6, 15])
    def test_unsupported(self, degree):
        with pytest.raises(ValueError):
            approximate(degree)

    def test_needs_free_coefficients(self):
        with pytest.raises(ValueError):
            minimize_errors(0)


class TestDegree5:

    def test_single_polynomial(self):
        poly = approximate(5)
        assert isinstance(poly, OddPolynomial)
        assert poly.degree == 5

    def test_boundary(self):
        assert abs(approximate(5).eval(HALF_PI) - 1.0) <= math.ulp(1.0)

    def test_error_bound(self):
        assert max_absolute_error(0.0, HALF_PI, approximate(5)) < 0.01


class TestObjectives:

    def test_unsatisfiable_point_raises(self, fast_config):
        with pytest.raises(ConstraintUnsatisfiable):
            absolute_objective(fast_config)([100.0])
        with pytest.raises(ConstraintUnsatisfiable):
            relative_objective(fast_config)([100.0])

    def test_unsatisfiable_search_raises(self, fast_config):
        # No dependent coefficient in [0.5, 1] reaches p(pi/2) = 1.
        config = replace(fast_config, boundary_bracket=(0.5, 1.0))
        with pytest.raises(ConstraintUnsatisfiable):
            minimize_errors(1, config)
        with pytest.raises(ConstraintUnsatisfiable):
            approximate(9, config)

    def test_scores_match_error_search(self, fast_config):
        from sinapprox.constrain import solve
        poly = solve([0.01], fast_config)
        assert absolute_objective(fast_config)([0.01]) == max_absolute_error(0.0, HALF_PI, poly, fast_config)
        assert relative_objective(fast_config)([0.01]) == max_relative_error(
            fast_config.relative_min, HALF_PI, poly, fast_config)


@pytest.mark.parametrize('degree', OPTIMIZED_DEGREES)
class TestOptimized:

    def test_result_shape(self, approximations, degree):
        result = approximations(degree)
        assert isinstance(result, ApproximationResult)
        assert result.minimized_absolute_polynomial.degree == degree
        assert result.minimized_relative_polynomial.degree == degree

    def test_boundaries(self, approximations, degree):
        result = approximations(degree)
        for poly in [result.minimized_absolute_polynomial, result.minimized_relative_polynomial]:
            assert abs(poly.eval(HALF_PI) - 1.0) <= math.ulp(1.0)

    def test_reported_errors(self, approximations, fast_config, degree):
        result = approximations(degree)
        assert result.minimized_absolute_error == max_absolute_error(
            0.0, HALF_PI, result.minimized_absolute_polynomial, fast_config)
        assert result.minimized_relative_error == max_relative_error(
            fast_config.relative_min, HALF_PI, result.minimized_relative_polynomial, fast_config)

    def test_relative_optimum_wins_on_relative_error(self, approximations, fast_config, degree):
        result = approximations(degree)
        other = max_relative_error(fast_config.relative_min, HALF_PI, result.minimized_absolute_polynomial, fast_config)
        assert result.minimized_relative_error < other

    def test_absolute_optimum_wins_on_absolute_error(self, approximations, fast_config, degree):
        result = approximations(degree)
        other = max_absolute_error(0.0, HALF_PI, result.minimized_relative_polynomial, fast_config)
        assert result.minimized_absolute_error < other

    def test_better_than_lower_degree(self, approximations, fast_config, degree):
        result = approximations(degree)
        if degree == 7:
            lower = approximate(5, fast_config)
            lower_absolute = max_absolute_error(0.0, HALF_PI, lower, fast_config)
            lower_relative = max_relative_error(fast_config.relative_min, HALF_PI, lower, fast_config)
        else:
            lower_absolute = approximations(degree - 2).minimized_absolute_error
            lower_relative = approximations(degree - 2).minimized_relative_error
        # Two more coefficients buy well over an order of magnitude.
        assert result.minimized_absolute_error < lower_absolute / 10
        assert result.minimized_relative_error < lower_relative / 10


def test_errors_shrink_with_degree(approximations):
    errors = [approximations(degree).minimized_absolute_error for degree in OPTIMIZED_DEGREES]
    assert errors == sorted(errors, reverse=True)
    errors = [approximations(degree).minimized_relative_error for degree in OPTIMIZED_DEGREES]
    assert errors == sorted(errors, reverse=True)


def test_deterministic(approximations, fast_config):
    again = approximate(7, fast_config)
    first = approximations(7)
    assert again.minimized_absolute_polynomial == first.minimized_absolute_polynomial
    assert again.minimized_relative_polynomial == first.minimized_relative_polynomial
    assert again.minimized_absolute_error == first.minimized_absolute_error
    assert again.minimized_relative_error == first.minimized_relative_error


class TestRestarts:

    def test_finds_minimum(self, fast_config):
        x = _minimize(lambda p: (p[0] - 3.0) ** 2 + (p[1] + 0.5) ** 2, np.zeros(2), fast_config)
        assert abs(x[0] - 3.0) < 1e-6
        assert abs(x[1] + 0.5) < 1e-6

    def test_stops_when_error_stops_falling(self, fast_config, monkeypatch):
        runs = []
        scipy_minimize = minimax.minimize

        def counting_minimize(*args, **kwargs):
            runs.append(args[1])
            return scipy_minimize(*args, **kwargs)

        monkeypatch.setattr(minimax, 'minimize', counting_minimize)
        # A flat objective never improves on the first run.
        _minimize(lambda p: 1.0, np.zeros(1), fast_config)
        assert len(runs) == 2

    def test_restart_bound(self, fast_config):
        config = replace(fast_config, max_restarts=1)
        x = _minimize(lambda p: (p[0] - 3.0) ** 2, np.zeros(1), config)
        assert abs(x[0] - 3.0) < 1e-6
