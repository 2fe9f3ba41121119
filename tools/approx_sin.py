#!/usr/bin/env python3

# Sinapprox -- Minimax approximations of sin(x)
# Copyright 2026 The Sinapprox Authors

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License version 3. A copy
# of the License is available in the root of the repository.

# Prints minimax approximations of sin(x) on [0, pi/2] for the requested
# degrees, together with their worst absolute and relative error. With --check,
# the errors are also measured by brute force in extended precision.

import argparse
import logging
from dataclasses import replace

from sinapprox import DEFAULT_CONFIG, SUPPORTED_DEGREES, approximate
from sinapprox.constrain import HALF_PI
from sinapprox.reference import sampled_absolute_error, sampled_relative_error
from sinapprox.report import format_approximation, polynomials


def main(argv=None):
    p = argparse.ArgumentParser(description='Compute minimax odd polynomial approximations of sin(x).')
    p.add_argument('degrees', type=int, nargs='*', default=list(SUPPORTED_DEGREES),
                   help='polynomial degrees (default: all)')
    p.add_argument('--xtol', type=float, default=DEFAULT_CONFIG.xtol)
    p.add_argument('--ftol', type=float, default=DEFAULT_CONFIG.ftol)
    p.add_argument('--maxiter', type=int, default=DEFAULT_CONFIG.maxiter)
    p.add_argument('--samples', type=int, default=DEFAULT_CONFIG.samples,
                   help='samples in the error extremum search')
    p.add_argument('--relative-min', type=float, default=DEFAULT_CONFIG.relative_min,
                   help='left end of the relative error domain')
    p.add_argument('--check', action='store_true',
                   help='also measure the errors by sampling in extended precision')
    p.add_argument('-v', '--verbose', action='store_true', help='log every objective evaluation')
    args = p.parse_args(argv)
    for degree in args.degrees:
        if degree not in SUPPORTED_DEGREES:
            p.error('unsupported degree {}, expected one of {}'.format(
                degree, ', '.join(str(d) for d in SUPPORTED_DEGREES)))

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(levelname)s %(name)s: %(message)s')

    config = replace(DEFAULT_CONFIG, xtol=args.xtol, ftol=args.ftol, maxiter=args.maxiter,
                     samples=args.samples, relative_min=args.relative_min)

    for degree in args.degrees:
        approximation = approximate(degree, config)
        print(format_approximation(approximation, config))
        if args.check:
            for poly in polynomials(approximation):
                print('sampled absolute error: {}, sampled relative error: {}'.format(
                    sampled_absolute_error(poly, 0.0, HALF_PI),
                    sampled_relative_error(poly, config.relative_min, HALF_PI)))
        print()
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
