"""Tests for the exponent-keyed polynomial."""

from fractions import Fraction

import pytest

from errors import DivisionByZeroPolynomial
from polynomial import DensePolynomial
from sparse_polynomial import SparsePolynomial


def test_construction_prunes_zeros():
    p = SparsePolynomial([0, 2, 0, 3, 0])
    assert p.terms == {1: 2, 3: 3}
    assert p.degree == 3


def test_zero_polynomial():
    assert SparsePolynomial.from_scalar(0).degree == -1
    assert SparsePolynomial.from_scalar(0).terms == {}
    assert SparsePolynomial([0, 0]).degree == -1
    assert str(SparsePolynomial()) == "0"
    assert SparsePolynomial() == 0
    assert not SparsePolynomial([0])


def test_from_terms():
    p = SparsePolynomial.from_terms({1000: 1, 0: 1})
    assert p.degree == 1000
    assert len(p.terms) == 2
    assert SparsePolynomial.from_terms([(4, 1), (4, -1)]).terms == {}
    with pytest.raises(ValueError):
        SparsePolynomial.from_terms([(-2, 1)])


def test_coefficient_access():
    p = SparsePolynomial.from_terms({5: 7})
    assert p[5] == 7
    assert p[4] == 0
    assert p[50] == 0
    assert p.leading_coefficient == 7
    assert SparsePolynomial().leading_coefficient == 0


def test_iteration_yields_ascending_pairs():
    p = SparsePolynomial.from_terms({9: 1})
    p += SparsePolynomial.from_terms({2: 3})
    p += SparsePolynomial.from_terms({0: -1})
    assert list(p) == [(0, -1), (2, 3), (9, 1)]
    assert list(p) == [(0, -1), (2, 3), (9, 1)]


def test_add():
    p = SparsePolynomial([1, 2, 3])
    q = SparsePolynomial([1, 1])
    assert p + q == SparsePolynomial([2, 3, 3])
    assert str(p + q) == "3*x^2+3*x+2"


def test_add_removes_cancelled_entries():
    p = SparsePolynomial([1, 2, 3])
    s = p + SparsePolynomial([0, -2, -3])
    assert s.terms == {0: 1}
    assert s.degree == 0
    assert (p - p).terms == {}


def test_scalar_operands():
    p = SparsePolynomial([1, 2])
    assert p + 1 == SparsePolynomial([2, 2])
    assert 1 - p == SparsePolynomial([0, -2])
    assert 3 * p == SparsePolynomial([3, 6])
    assert SparsePolynomial([2, 4]) / 2 == SparsePolynomial([1, 2])


def test_negate():
    assert -SparsePolynomial([1, 0, -3]) == SparsePolynomial([-1, 0, 3])


def test_compound_operators_mutate_and_return_self():
    p = SparsePolynomial([1, 1])
    r = p
    r *= SparsePolynomial([1, 1])
    assert r is p
    assert p == SparsePolynomial([1, 2, 1])
    r -= SparsePolynomial([1, 2, 1])
    assert r is p
    assert p.terms == {}


def test_compound_operators_with_self():
    p = SparsePolynomial([1, 2])
    p -= p
    assert p.terms == {}
    q = SparsePolynomial([1, 1])
    q *= q
    assert q == SparsePolynomial([1, 2, 1])


def test_binary_operators_do_not_alias():
    p = SparsePolynomial([1, 2, 3])
    s = p * SparsePolynomial([0, 1])
    s += SparsePolynomial([4])
    assert p.terms == {0: 1, 1: 2, 2: 3}


def test_multiply_high_degree_few_terms():
    p = SparsePolynomial.from_terms({1000: 1, 0: 1})
    q = SparsePolynomial.from_terms({1000: 1, 0: -1})
    assert p * q == SparsePolynomial.from_terms({2000: 1, 0: -1})


def test_power():
    p = SparsePolynomial.from_terms({10: 1, 0: 1})
    assert p**2 == SparsePolynomial.from_terms({20: 1, 10: 2, 0: 1})
    assert p**0 == SparsePolynomial([1])
    with pytest.raises(ValueError):
        p ** -3


def test_evaluate():
    p = SparsePolynomial([1, 2, 3])
    assert p.evaluate(2) == 17
    assert p(Fraction(1, 2)) == Fraction(11, 4)
    assert SparsePolynomial.from_terms({1000: 1, 0: 1}).evaluate(2) == 2**1000 + 1
    assert SparsePolynomial().evaluate(3) == 0


def test_compose():
    p = SparsePolynomial([1, 2, 3])
    q = SparsePolynomial([1, 1])
    assert p.compose(q) == SparsePolynomial([6, 8, 3])
    assert (p & q) == SparsePolynomial([6, 8, 3])
    x50 = SparsePolynomial.from_terms({50: 1})
    assert x50.compose(q).evaluate(1) == 2**50


def test_divide_exact():
    p = SparsePolynomial([-1, 0, 1])
    q = SparsePolynomial([-1, 1])
    assert p / q == SparsePolynomial([1, 1])
    assert (p % q).terms == {}


def test_divide_geometric_series():
    p = SparsePolynomial.from_terms({100: 1, 0: -1})
    q = SparsePolynomial([-1, 1])
    quotient, remainder = divmod(p, q)
    assert quotient == SparsePolynomial([1] * 100)
    assert not remainder


def test_divide_with_remainder():
    p = SparsePolynomial([Fraction(1), Fraction(2), Fraction(3)])
    q = SparsePolynomial([Fraction(1), Fraction(2)])
    quotient, remainder = divmod(p, q)
    assert quotient == SparsePolynomial([Fraction(1, 4), Fraction(3, 2)])
    assert remainder == SparsePolynomial([Fraction(3, 4)])
    assert quotient * q + remainder == p


def test_divide_by_zero_polynomial():
    p = SparsePolynomial([1, 2, 3])
    with pytest.raises(DivisionByZeroPolynomial):
        p / SparsePolynomial()
    with pytest.raises(DivisionByZeroPolynomial):
        p % SparsePolynomial([0, 0])
    with pytest.raises(ZeroDivisionError):
        divmod(p, 0)


def test_gcd():
    p = SparsePolynomial([0, 0, 1])
    q = SparsePolynomial([0, 1])
    g = p.gcd(q)
    assert g == SparsePolynomial([0, 1])
    assert g.leading_coefficient == 1


def test_gcd_of_zeros():
    with pytest.raises(DivisionByZeroPolynomial):
        SparsePolynomial().gcd(SparsePolynomial())


@pytest.mark.parametrize(
    "terms, text",
    [
        ({0: 1, 1: 2, 2: 3}, "3*x^2+2*x+1"),
        ({0: -1, 2: 1}, "x^2-1"),
        ({1: -1, 3: -2}, "-2*x^3-x"),
        ({100: 1, 0: 1}, "x^100+1"),
        ({0: 5}, "5"),
        ({1: Fraction(-1, 3)}, "-1/3*x"),
    ],
)
def test_str(terms, text):
    assert str(SparsePolynomial.from_terms(terms)) == text


def test_repr():
    p = SparsePolynomial.from_terms({2: 3, 0: 1})
    assert repr(p) == "SparsePolynomial.from_terms({0: 1, 2: 3})"


def test_from_string():
    p = SparsePolynomial.from_string("x^1000 - 2*x + 1")
    assert p.terms == {1000: 1, 1: -2, 0: 1}
    assert SparsePolynomial.from_string("y^2+y", variable="y") == SparsePolynomial([0, 1, 1])


def test_no_mixing_with_dense():
    s = SparsePolynomial([1, 2])
    d = DensePolynomial([1, 2])
    assert s != d
    with pytest.raises(TypeError):
        s + d
    with pytest.raises(TypeError):
        d * s
    with pytest.raises(TypeError):
        s.gcd(d)


def test_integer_remainder_drops_cancelled_leading_term():
    p = SparsePolynomial([-6, 4, -7, -3, -9, 6])
    q = SparsePolynomial([-1, -3])
    assert (p % q).degree < q.degree
    assert p % q == divmod(p, q)[1]


def test_integer_gcd_of_coprime_polynomials():
    g = SparsePolynomial([5, -7]).gcd(SparsePolynomial([-7, 9, -2]))
    assert g == SparsePolynomial([1])


def test_scalar_dividend():
    assert 2 / SparsePolynomial([2]) == SparsePolynomial([1])
    assert 6 % SparsePolynomial.from_terms({9: 1}) == SparsePolynomial([6])
    quotient, remainder = divmod(6, SparsePolynomial([3]))
    assert quotient == SparsePolynomial([2])
    assert not remainder
    with pytest.raises(DivisionByZeroPolynomial):
        1 / SparsePolynomial()
