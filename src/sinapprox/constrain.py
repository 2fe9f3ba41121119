# Sinapprox -- Minimax approximations of sin(x)
# Copyright 2026 The Sinapprox Authors

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License version 3. A copy
# of the License is available in the root of the repository.


# Builds odd polynomials p that approximate sin(x) on [0, pi/2] from a handful
# of free coefficients. The polynomial is constructed via its derivative, which
# should look like cos(x):
#
#  * p'(x) = e(x) * (x^2 - (pi/2)^2) for an even polynomial e. This implies that
#    p'(pi/2) = 0, like cos(pi/2) = 0.
#  * e(0) = -1 / (pi/2)^2. This implies that p'(0) = 1.
#  * p(pi/2) = 1. This fixes the highest nonzero coefficient of e, which is
#    solved for numerically and then nudged until p(pi/2) is exactly 1.0.
#
# For C free coefficients the polynomial has C + 3 coefficients and degree
# 2C + 5: the top coefficient of e stays zero to make room for the product.

import logging
import math

from .config import DEFAULT_CONFIG
from .errors import ConstraintUnsatisfiable, RefinementOscillation, RootFindingError
from .polynomial import EvenPolynomial
from .roots import find_root

logger = logging.getLogger(__name__)

HALF_PI = math.pi * 0.5
HALF_PI_SQUARED = HALF_PI * HALF_PI


def build_candidate(constants, dependent):
    raw = [0.0] * (len(constants) + 3)
    raw[0] = -1.0 / HALF_PI_SQUARED
    raw[1:len(constants) + 1] = constants
    raw[-2] = dependent
    derivative = EvenPolynomial(raw).multiply_by_conjugate_roots(HALF_PI)
    return derivative.integral()


def boundary_value(constants, dependent):
    return build_candidate(constants, dependent).eval(HALF_PI)


def solve(constants, config=DEFAULT_CONFIG):
    constants = [float(c) for c in constants]
    low, high = config.boundary_bracket

    def residual(dependent):
        return boundary_value(constants, dependent) - 1.0

    try:
        dependent = find_root(low, high, residual, config.boundary_tolerance)
    except RootFindingError as e:
        raise ConstraintUnsatisfiable(constants, config.boundary_bracket) from e

    return refine_boundary(constants, dependent, config.max_refinement_steps)


def refine_boundary(constants, dependent, max_steps):
    """Step the dependent coefficient one float at a time until p(pi/2) == 1.0.

    The root-finder only gets within a few ulps of the root, and the maximum
    relative error is sensitive to p(pi/2) being off by even that much. If no
    representable dependent coefficient hits 1.0 exactly, the walk turns
    around, and the candidate just below 1.0 is returned.
    """
    constants = [float(c) for c in constants]
    # The boundary value is linear in the dependent coefficient, with the
    # slope fixed by the construction; its sign picks the step direction.
    rising = boundary_value(constants, 1.0) > boundary_value(constants, -1.0)

    candidate = build_candidate(constants, dependent)
    value = candidate.eval(HALF_PI)
    previous = None
    last_up = None
    steps = 0
    while value != 1.0:
        up = (value < 1.0) == rising
        if last_up is not None and up != last_up:
            # Adjacent dependent coefficients straddle 1.0.
            if value > 1.0:
                candidate = previous
            logger.debug('p(pi/2) settles at %r for free coefficients %s',
                         candidate.eval(HALF_PI), constants)
            return candidate
        if steps == max_steps:
            raise RefinementOscillation(constants, dependent, steps)
        dependent = math.nextafter(dependent, math.inf if up else -math.inf)
        previous = candidate
        candidate = build_candidate(constants, dependent)
        value = candidate.eval(HALF_PI)
        last_up = up
        steps += 1
    return candidate
