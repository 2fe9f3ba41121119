"""Tests for the diagnostic text output."""

from sinapprox import ApproximationResult, OddPolynomial, approximate
from sinapprox.report import format_approximation, format_polynomial, format_result, polynomials


def test_format_result():
    result = ApproximationResult(
        minimized_absolute_polynomial=OddPolynomial([1.0, -0.25, 0.5, 0.125]),
        minimized_absolute_error=0.5,
        minimized_relative_polynomial=OddPolynomial([1.0, -0.5, 0.25, 0.0]),
        minimized_relative_error=0.25,
    )
    assert format_result(result) == '\n'.join([
        'Degree 7 polynomial:',
        'Minimized absolute error: [max error: 0.5, 0.125x^7 + 0.5x^5 + -0.25x^3 + 1.0x]',
        'Minimized relative error: [max error: 0.25, 0.0x^7 + 0.25x^5 + -0.5x^3 + 1.0x]',
    ])
    assert format_approximation(result) == format_result(result)


def test_format_polynomial():
    poly = approximate(5)
    lines = format_polynomial(poly).split('\n')
    assert lines[0] == 'Degree 5 polynomial:'
    assert lines[1] == str(poly)
    assert lines[2].startswith('Max absolute error: ')
    assert lines[3].startswith('Max relative error: ')
    assert format_approximation(poly) == format_polynomial(poly)


def test_plain_tuple_is_not_a_result():
    # Only an ApproximationResult carries two polynomials.
    pair = (OddPolynomial([1.0]), OddPolynomial([2.0]))
    assert polynomials(pair) == [pair]


def test_polynomials():
    absolute = OddPolynomial([1.0, -0.25, 0.5, 0.125])
    relative = OddPolynomial([1.0, -0.5, 0.25, 0.0])
    result = ApproximationResult(absolute, 0.5, relative, 0.25)
    assert polynomials(result) == [absolute, relative]
    assert polynomials(absolute) == [absolute]
