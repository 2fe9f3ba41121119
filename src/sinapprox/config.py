# Sinapprox -- Minimax approximations of sin(x)
# Copyright 2026 The Sinapprox Authors

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License version 3. A copy
# of the License is available in the root of the repository.


# Tunable constants of the approximation. None of them is derived; the sample
# count and the left end of the relative error domain in particular were picked
# because they work for the degrees up to 13.

from dataclasses import dataclass


@dataclass(frozen=True)
class ApproximationConfig:
    # Root bracket and tolerance for the coefficient fixed by p(pi/2) = 1.
    boundary_bracket: tuple = (-1.0, 1.0)
    boundary_tolerance: float = 1e-50
    max_refinement_steps: int = 100000

    # Error extremum search.
    samples: int = 50
    extremum_tolerance: float = 1e-15

    # sin(x) is zero at the origin, so the relative error starts a bit later.
    relative_min: float = 1e-4

    # Nelder-Mead.
    xtol: float = 1e-20
    ftol: float = 1e-20
    maxiter: int = 5000000
    # Nelder-Mead is restarted from its own result until the error stops falling.
    max_restarts: int = 1000

    def __post_init__(self):
        low, high = self.boundary_bracket
        if not low < high:
            raise ValueError('empty boundary bracket: {}'.format(self.boundary_bracket))
        if self.samples < 2:
            raise ValueError('need at least two samples, got {}'.format(self.samples))
        if self.max_restarts < 1:
            raise ValueError('need at least one Nelder-Mead run, got {}'.format(self.max_restarts))
        if not self.relative_min > 0.0:
            raise ValueError('relative error domain must exclude zero, got {}'.format(self.relative_min))


DEFAULT_CONFIG = ApproximationConfig()
