# Sinapprox -- Minimax approximations of sin(x)
# Copyright 2026 The Sinapprox Authors

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License version 3. A copy
# of the License is available in the root of the repository.


class ApproximationError(Exception):
    pass


class RootFindingError(ApproximationError):
    """The bracket holds no sign change, or the root-finder did not converge."""


class ConstraintUnsatisfiable(ApproximationError):
    """No dependent coefficient in the bracket makes the polynomial hit 1 at pi/2."""

    def __init__(self, constants, bracket):
        self.constants = tuple(constants)
        self.bracket = tuple(bracket)
        super().__init__(
            'cannot satisfy p(pi/2) = 1 for free coefficients {} with the '
            'dependent coefficient in [{}, {}]'.format(list(self.constants), *self.bracket))


class RefinementOscillation(ApproximationError):
    """Stepping the dependent coefficient did not settle within the step bound."""

    def __init__(self, constants, dependent, steps):
        self.constants = tuple(constants)
        self.dependent = dependent
        self.steps = steps
        super().__init__(
            'boundary value of free coefficients {} did not settle after {} steps '
            '(dependent coefficient at {!r})'.format(list(self.constants), steps, dependent))
