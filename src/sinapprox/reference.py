# Sinapprox -- Minimax approximations of sin(x)
# Copyright 2026 The Sinapprox Authors

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License version 3. A copy
# of the License is available in the root of the repository.


# Brute force error measurement, independent of the extremum search. The
# polynomial is evaluated in extended precision at many evenly spaced points,
# so the result is the error of the exact polynomial with these coefficients,
# not of its floating point evaluation.

from mpmath import mp, mpf, fabs, polyval, sin

from .constrain import HALF_PI

PRECISION = 64
SAMPLES = 4096


def _eval(poly, x):
    return polyval(poly.dense(), x, asc=True)


def _sample_points(low, high, samples):
    low = mpf(low)
    width = mpf(high) - low
    return (low + width * i / samples for i in range(samples + 1))


def sampled_absolute_error(poly, low=0.0, high=HALF_PI, samples=SAMPLES):
    with mp.workprec(PRECISION):
        xs = _sample_points(low, high, samples)
        return float(max(fabs(_eval(poly, x) - sin(x)) for x in xs))


def sampled_relative_error(poly, low=1e-4, high=HALF_PI, samples=SAMPLES):
    if not low > 0.0:
        raise ValueError('relative error is undefined at {}, domain must exclude zero'.format(low))
    with mp.workprec(PRECISION):
        xs = _sample_points(low, high, samples)
        return float(max(fabs(_eval(poly, x) / sin(x) - 1) for x in xs))
