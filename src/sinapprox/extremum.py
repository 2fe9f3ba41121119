# Sinapprox -- Minimax approximations of sin(x)
# Copyright 2026 The Sinapprox Authors

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License version 3. A copy
# of the License is available in the root of the repository.


# Finds the worst error of an approximation on an interval. The error curve is
# sampled uniformly; wherever the derivative of the error changes sign between
# two samples, the root of the derivative is located, and the error at that
# local extremum is a candidate for the maximum.

import math
from itertools import islice

from .config import DEFAULT_CONFIG
from .roots import find_root


def iter_float_range(low, high, steps):
    width = high - low
    divisor = float(steps - 1)
    return ((i / divisor) * width + low for i in range(steps))


def max_error(low, high, error_fn, derivative_fn, config=DEFAULT_CONFIG):
    prev_sample = low
    prev_sign = math.copysign(1.0, derivative_fn(low))
    largest = abs(error_fn(low))
    for sample in islice(iter_float_range(low, high, config.samples), 1, None):
        sign = math.copysign(1.0, derivative_fn(sample))
        if sign != prev_sign:
            extremum = find_root(prev_sample, sample, derivative_fn, config.extremum_tolerance)
            largest = max(largest, abs(error_fn(extremum)))
        prev_sample = sample
        prev_sign = sign
    return largest


def max_absolute_error(low, high, poly, config=DEFAULT_CONFIG):
    """Return max |p(x) - sin(x)| for x in [low, high]."""
    derivative = poly.derivative()

    def error_fn(x):
        return poly.eval(x) - math.sin(x)

    def derivative_fn(x):
        return derivative.eval(x) - math.cos(x)

    return max_error(low, high, error_fn, derivative_fn, config)


def max_relative_error(low, high, poly, config=DEFAULT_CONFIG):
    """Return max |p(x) / sin(x) - 1| for x in [low, high], with low > 0."""
    if not low > 0.0:
        raise ValueError('relative error is undefined at {}, domain must exclude zero'.format(low))
    derivative = poly.derivative()

    def error_fn(x):
        return poly.eval(x) / math.sin(x) - 1.0

    def derivative_fn(x):
        sin = math.sin(x)
        cos = math.cos(x)
        return (derivative.eval(x) - poly.eval(x) * cos / sin) / sin

    return max_error(low, high, error_fn, derivative_fn, config)
