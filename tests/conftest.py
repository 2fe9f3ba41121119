from dataclasses import replace

import pytest

from sinapprox import DEFAULT_CONFIG, approximate

# The default tolerances ask Nelder-Mead to run until the simplex collapses;
# these keep the test run short while leaving the optima well separated. A
# stalled run is cut short and picked up by the next restart.
FAST_CONFIG = replace(DEFAULT_CONFIG, xtol=1e-12, ftol=1e-16, maxiter=10000, max_restarts=200)


@pytest.fixture(scope='session')
def fast_config():
    return FAST_CONFIG


@pytest.fixture(scope='session')
def approximations():
    """Approximations by degree, computed once per test session."""
    cache = {}

    def get(degree):
        if degree not in cache:
            cache[degree] = approximate(degree, FAST_CONFIG)
        return cache[degree]

    return get
