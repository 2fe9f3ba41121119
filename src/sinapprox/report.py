# Sinapprox -- Minimax approximations of sin(x)
# Copyright 2026 The Sinapprox Authors

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License version 3. A copy
# of the License is available in the root of the repository.


from .config import DEFAULT_CONFIG
from .constrain import HALF_PI
from .extremum import max_absolute_error, max_relative_error
from .minimax import ApproximationResult


def format_polynomial(poly, config=DEFAULT_CONFIG):
    return '\n'.join([
        'Degree {} polynomial:'.format(poly.degree),
        str(poly),
        'Max absolute error: {}'.format(max_absolute_error(0.0, HALF_PI, poly, config)),
        'Max relative error: {}'.format(max_relative_error(config.relative_min, HALF_PI, poly, config)),
    ])


def format_result(result):
    return '\n'.join([
        'Degree {} polynomial:'.format(result.minimized_absolute_polynomial.degree),
        'Minimized absolute error: [max error: {}, {}]'.format(
            result.minimized_absolute_error, result.minimized_absolute_polynomial),
        'Minimized relative error: [max error: {}, {}]'.format(
            result.minimized_relative_error, result.minimized_relative_polynomial),
    ])


def polynomials(approximation):
    if isinstance(approximation, ApproximationResult):
        return [approximation.minimized_absolute_polynomial,
                approximation.minimized_relative_polynomial]
    return [approximation]


def format_approximation(approximation, config=DEFAULT_CONFIG):
    if isinstance(approximation, ApproximationResult):
        return format_result(approximation)
    return format_polynomial(approximation, config)
