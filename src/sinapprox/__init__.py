# Sinapprox -- Minimax approximations of sin(x)
# Copyright 2026 The Sinapprox Authors

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License version 3. A copy
# of the License is available in the root of the repository.


from .config import DEFAULT_CONFIG, ApproximationConfig
from .errors import (
    ApproximationError,
    ConstraintUnsatisfiable,
    RefinementOscillation,
    RootFindingError,
)
from .minimax import SUPPORTED_DEGREES, ApproximationResult, approximate, minimize_errors
from .polynomial import EvenPolynomial, OddPolynomial

__all__ = [
    'DEFAULT_CONFIG',
    'SUPPORTED_DEGREES',
    'ApproximationConfig',
    'ApproximationError',
    'ApproximationResult',
    'ConstraintUnsatisfiable',
    'EvenPolynomial',
    'OddPolynomial',
    'RefinementOscillation',
    'RootFindingError',
    'approximate',
    'minimize_errors',
]
