# Sinapprox -- Minimax approximations of sin(x)
# Copyright 2026 The Sinapprox Authors

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License version 3. A copy
# of the License is available in the root of the repository.


# Bracketing root-finder. Brent's method keeps a sign-changing interval like
# regula falsi does, but it also converges when the function is far from linear.

from scipy.optimize import brentq

from .errors import RootFindingError

MAX_ITERATIONS = 100


def find_root(low, high, f, tolerance):
    try:
        root, info = brentq(f, low, high, xtol=tolerance, maxiter=MAX_ITERATIONS,
                            full_output=True, disp=False)
    except ValueError as e:
        raise RootFindingError('no sign change in [{}, {}]: {}'.format(low, high, e)) from e
    if not info.converged:
        raise RootFindingError('no root in [{}, {}] after {} iterations: {}'.format(
            low, high, info.iterations, info.flag))
    return root
