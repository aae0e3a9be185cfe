"""
Tests for SymPy interop; SymPy also serves as an independent oracle.

Run with: pytest algstruct/tests/test_sympy_bridge.py -v
"""

import os
import random
import sys

import pytest

sp = pytest.importorskip("sympy")

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from algstruct import (
    FieldPolynomial, Integer, Natural, Rational, field_polynomial_ring,
    from_sympy, gcd, polynomial_gcd, polynomial_ring, to_sympy,
)

QX = field_polynomial_ring(Rational)
ZX = polynomial_ring(Integer)
x, y = sp.symbols("x y")


class TestToSympy:
    def test_numbers(self):
        assert to_sympy(Natural(5)) == sp.Integer(5)
        assert to_sympy(Integer(-12)) == sp.Integer(-12)
        assert to_sympy(Rational(10, 12)) == sp.Rational(5, 6)

    def test_polynomial(self):
        p = QX([Rational(1, 2), 0, 1])
        assert to_sympy(p).as_expr() == x**2 + sp.Rational(1, 2)

    def test_zero_polynomial(self):
        assert to_sympy(QX.zero()).as_expr() == 0

    def test_custom_symbol(self):
        t = sp.Symbol("t")
        assert to_sympy(ZX([1, 2]), symbol=t).as_expr() == 2 * t + 1

    def test_unsupported(self):
        with pytest.raises(TypeError):
            to_sympy(3.5)


class TestFromSympy:
    def test_numbers(self):
        assert from_sympy(sp.Integer(7)) == Integer(7)
        assert str(from_sympy(sp.Rational(-3, 6))) == "-1/2"
        assert isinstance(from_sympy(4), Integer)

    def test_polynomial_over_rationals(self):
        p = from_sympy(x**2 + sp.Rational(1, 2))
        assert isinstance(p, FieldPolynomial)
        assert p == QX([Rational(1, 2), 0, 1])

    def test_polynomial_over_integers(self):
        p = from_sympy(sp.Poly(2 * x + 3, x), Integer)
        assert p.ring is Integer
        assert p == ZX([3, 2])

    def test_rejects_fractional_coefficient_for_integers(self):
        with pytest.raises(ValueError):
            from_sympy(x / 2, Integer)

    def test_rejects_multivariate(self):
        with pytest.raises(ValueError):
            from_sympy(x * y)

    def test_round_trip(self):
        p = QX([Rational(-1, 3), 0, Rational(7, 2), 1])
        assert from_sympy(to_sympy(p)) == p


class TestSympyOracle:
    @pytest.fixture
    def rng(self):
        return random.Random(42)

    def test_natural_gcd(self, rng):
        for _ in range(10):
            a, b = rng.getrandbits(48), rng.getrandbits(48)
            assert int(gcd(Natural(a), Natural(b))) == sp.igcd(a, b)

    def test_polynomial_product(self, rng):
        for _ in range(5):
            p = QX([Rational(rng.randint(-5, 5), rng.randint(1, 4)) for _ in range(3)])
            q = QX([Rational(rng.randint(-5, 5), rng.randint(1, 4)) for _ in range(4)])
            expected = sp.expand(to_sympy(p).as_expr() * to_sympy(q).as_expr())
            assert sp.expand(to_sympy(p * q).as_expr() - expected) == 0

    def test_polynomial_gcd(self):
        a = (x - 1) * (x + 2) * (2 * x + 1)
        b = (x - 1) * (2 * x + 1) * (x - 5)
        ours = polynomial_gcd(from_sympy(sp.expand(a)), from_sympy(sp.expand(b)))
        expected = sp.Poly(a, x, domain="QQ").gcd(sp.Poly(b, x, domain="QQ")).monic()
        assert sp.expand(to_sympy(ours).as_expr() - expected.as_expr()) == 0
