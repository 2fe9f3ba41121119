# Sinapprox -- Minimax approximations of sin(x)
# Copyright 2026 The Sinapprox Authors

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License version 3. A copy
# of the License is available in the root of the repository.

# Polynomials that contain only odd or only even powers of x. Coefficient i of
# an odd polynomial multiplies x^(2i + 1), coefficient i of an even polynomial
# multiplies x^(2i). The number of coefficients is fixed at construction.

import math

# Python 3.13 and later provide a correctly rounded fused multiply-add. Older
# interpreters round the product separately, which changes the last bit.
_fma = getattr(math, 'fma', None)
if _fma is None:
    def _fma(a, b, c):
        return a * b + c


def _horner(coefficients, xsquared):
    result = coefficients[-1]
    for coefficient in reversed(coefficients[:-1]):
        result = _fma(result, xsquared, coefficient)
    return result


class _Polynomial:
    __slots__ = ('coefficients',)

    def __init__(self, coefficients):
        coefficients = tuple(float(c) for c in coefficients)
        if not coefficients:
            raise ValueError('a polynomial needs at least one coefficient')
        object.__setattr__(self, 'coefficients', coefficients)

    def __setattr__(self, name, value):
        raise AttributeError('{} is immutable'.format(type(self).__name__))

    def __len__(self):
        return len(self.coefficients)

    def __getitem__(self, index):
        return self.coefficients[index]

    def __iter__(self):
        return iter(self.coefficients)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.coefficients == other.coefficients

    def __hash__(self):
        return hash((type(self).__name__, self.coefficients))

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, list(self.coefficients))


class OddPolynomial(_Polynomial):
    __slots__ = ()

    def eval(self, x):
        return _horner(self.coefficients, x * x) * x

    def derivative(self):
        return EvenPolynomial(c * (2 * i + 1) for i, c in enumerate(self.coefficients))

    @property
    def degree(self):
        return 2 * len(self.coefficients) - 1

    def dense(self):
        """Coefficients of all powers of x, lowest power first."""
        result = [0.0] * (2 * len(self.coefficients))
        for i, c in enumerate(self.coefficients):
            result[2 * i + 1] = c
        return result

    def __str__(self):
        chunks = []
        for i in reversed(range(len(self.coefficients))):
            exponent = 2 * i + 1
            if exponent == 1:
                chunks.append('{}x'.format(self.coefficients[i]))
            else:
                chunks.append('{}x^{}'.format(self.coefficients[i], exponent))
        return ' + '.join(chunks)


class EvenPolynomial(_Polynomial):
    __slots__ = ()

    def eval(self, x):
        return _horner(self.coefficients, x * x)

    def integral(self):
        # The constant of integration is zero; odd polynomials have no slot for it.
        return OddPolynomial(c / (2 * i + 1) for i, c in enumerate(self.coefficients))

    def multiply_by_conjugate_roots(self, c):
        """Multiply by (x + c) * (x - c), keeping the number of coefficients.

        The highest coefficient must be zero to make room for the product. This
        is not checked: a nonzero top coefficient is silently dropped.
        """
        neg_c_squared = -(c * c)
        result = [0.0] * len(self.coefficients)
        for i in range(len(result) - 1, 0, -1):
            result[i] = self.coefficients[i - 1] + self.coefficients[i] * neg_c_squared
        result[0] = self.coefficients[0] * neg_c_squared
        return EvenPolynomial(result)

    @property
    def degree(self):
        return 2 * len(self.coefficients) - 2

    def dense(self):
        """Coefficients of all powers of x, lowest power first."""
        result = [0.0] * (2 * len(self.coefficients) - 1)
        for i, c in enumerate(self.coefficients):
            result[2 * i] = c
        return result

    def __str__(self):
        chunks = []
        for i in reversed(range(len(self.coefficients))):
            exponent = 2 * i
            if exponent == 0:
                chunks.append('{}'.format(self.coefficients[i]))
            else:
                chunks.append('{}x^{}'.format(self.coefficients[i], exponent))
        return ' + '.join(chunks)
