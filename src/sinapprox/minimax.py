# Sinapprox -- Minimax approximations of sin(x)
# Copyright 2026 The Sinapprox Authors

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License version 3. A copy
# of the License is available in the root of the repository.


# The goal is to approximate sin(x) with an odd polynomial p on the domain
# [0, pi/2], such that the worst error is minimal. That is, pick the function
# that performs best in the worst case. Furthermore, I impose the restrictions
# of sinapprox.constrain: p'(0) = 1, p'(pi/2) = 0, and p(pi/2) = 1.
#
# The remaining free coefficients are found with Nelder-Mead, once minimizing
# the worst absolute error and once minimizing the worst relative error. The
# two optima differ, and each search is started from the other's result.

import logging
from collections import namedtuple

import numpy as np
from scipy.optimize import minimize

from .config import DEFAULT_CONFIG
from .constrain import HALF_PI, solve
from .extremum import max_absolute_error, max_relative_error

logger = logging.getLogger(__name__)

SUPPORTED_DEGREES = (5, 7, 9, 11, 13)

ApproximationResult = namedtuple('ApproximationResult', [
    'minimized_absolute_polynomial',
    'minimized_absolute_error',
    'minimized_relative_polynomial',
    'minimized_relative_error',
])


def free_coefficient_count(degree):
    if degree not in SUPPORTED_DEGREES:
        raise ValueError('unsupported degree {}, expected one of {}'.format(
            degree, ', '.join(str(d) for d in SUPPORTED_DEGREES)))
    return (degree - 5) // 2


def absolute_objective(config=DEFAULT_CONFIG):
    def objective(params):
        poly = solve(params, config)
        err = max_absolute_error(0.0, HALF_PI, poly, config)
        logger.debug('free coefficients: %s, max absolute error: %r', list(params), err)
        return err
    return objective


def relative_objective(config=DEFAULT_CONFIG):
    def objective(params):
        poly = solve(params, config)
        err = max_relative_error(config.relative_min, HALF_PI, poly, config)
        logger.debug('free coefficients: %s, max relative error: %r', list(params), err)
        return err
    return objective


def _minimize(objective, initial_guess, config):
    # A collapsed simplex says little about the optimum when the coefficients
    # differ by orders of magnitude. Restarting rebuilds the simplex with steps
    # proportional to each coordinate, so keep restarting while that helps.
    best_x = initial_guess
    best_error = None
    for restart in range(config.max_restarts):
        result = minimize(objective, best_x, method='Nelder-Mead', options={
            'xatol': config.xtol,
            'fatol': config.ftol,
            'maxiter': config.maxiter,
        })
        if not result.success:
            logger.warning('Nelder-Mead stopped after %d iterations: %s', result.nit, result.message)
        if best_error is not None and not result.fun < best_error:
            break
        logger.debug('restart %d: max error %r', restart, result.fun)
        best_x = result.x
        best_error = result.fun
    return best_x


def minimize_errors(free_count, config=DEFAULT_CONFIG):
    if free_count < 1:
        raise ValueError('need at least one free coefficient, got {}'.format(free_count))
    compute_absolute_error = absolute_objective(config)
    compute_relative_error = relative_objective(config)

    initial_guess = np.zeros(free_count)
    result_absolute = _minimize(compute_absolute_error, initial_guess, config)
    result_relative = _minimize(compute_relative_error, result_absolute, config)
    result_absolute = _minimize(compute_absolute_error, result_relative, config)

    return ApproximationResult(
        minimized_absolute_polynomial=solve(result_absolute, config),
        minimized_absolute_error=compute_absolute_error(result_absolute),
        minimized_relative_polynomial=solve(result_relative, config),
        minimized_relative_error=compute_relative_error(result_relative),
    )


def approximate(degree, config=DEFAULT_CONFIG):
    """Approximate sin(x) on [0, pi/2] with an odd polynomial of the given degree.

    Degree 5 has no free coefficients left, so the constrained polynomial is
    returned as is. Higher degrees return an ApproximationResult.
    """
    free_count = free_coefficient_count(degree)
    if free_count == 0:
        return solve([], config)
    return minimize_errors(free_count, config)
