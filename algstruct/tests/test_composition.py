"""
Tests for direct products, quotients, ideals and cyclic groups.

Run with: pytest algstruct/tests/test_composition.py -v
"""

import logging
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from algstruct import (
    CyclicGroup, DirectProductAlgebra, DirectProductGroup, FormatConfig,
    IdealXSquaredPlus1, Integer, Natural, Polynomial, QuotientModule,
    QuotientRing, Rational, SubStructure, cyclic_group, direct_product,
    field_polynomial_ring, gaussian_rationals, integer_multiples,
    integers_modulo, is_algebra_over, is_field, is_group, is_module_over,
    is_monoid, is_ring, is_vector_space_over, pair, principal_ideal,
    quotient_structure,
)
from algstruct.logging import get_logger, level_from_env

QX = field_polynomial_ring(Rational)
QQ2 = direct_product(Rational, Rational)


class SecondAxis(SubStructure):
    """Pairs (0, b): the second coordinate axis of Q x Q."""

    parent_type = QQ2

    def __init__(self):
        self._element = QQ2.zero()

    @classmethod
    def contains(cls, value):
        return value.first.is_zero()

    @classmethod
    def reduce(cls, value):
        return QQ2(value.first, Rational(0))


class TestCapabilities:
    def test_number_types(self):
        assert is_monoid(Natural) and not is_group(Natural)
        assert is_ring(Integer) and not is_field(Integer)
        assert is_field(Rational)

    def test_modules_and_algebras(self):
        assert is_module_over(Rational, Integer)
        assert is_algebra_over(Integer, Integer)
        assert is_vector_space_over(QX, Rational)
        assert not is_vector_space_over(QX, Integer)
        assert not is_module_over(Integer, Rational)


class TestDirectProduct:
    @pytest.fixture
    def v(self):
        return QQ2(Rational(1, 2), Rational(3, 5))

    def test_scale_by_integer(self, v):
        assert str(v.scaled(Integer(6))) == "(3, 18/5)"
        assert str(v) == "(1/2, 3/5)"

    def test_variant_chosen(self):
        assert issubclass(QQ2, DirectProductAlgebra)
        C7 = cyclic_group(7)
        pairs = direct_product(C7, C7)
        assert issubclass(pairs, DirectProductGroup)
        assert not is_ring(pairs)

    def test_componentwise(self, v):
        w = QQ2(Rational(1, 2), 1)
        assert str(v + w) == "(1, 8/5)"
        assert str(v * w) == "(1/4, 3/5)"
        assert str(-v) == "(-1/2, -3/5)"
        assert (v - v).is_zero()

    def test_zero_and_one(self):
        assert QQ2.zero().is_zero()
        assert QQ2.one().is_one()
        assert QQ2.one() == QQ2(1, 1)

    def test_aliasing(self, v):
        v.add(v)
        assert str(v) == "(1, 6/5)"
        v.multiply(v)
        assert str(v) == "(1, 36/25)"

    def test_components_are_copies(self, v):
        first = v.first
        first.add(Rational(1))
        assert v.first == Rational(1, 2)

    def test_pair(self):
        p = pair(Integer(2), Integer(3))
        assert str(p * pair(Integer(4), Integer(5))) == "(8, 15)"

    def test_scalar_restriction(self, v):
        with pytest.raises(TypeError):
            v.scale(Natural(2))
        mixed = direct_product(Integer, Rational)(Integer(2), Rational(1, 3))
        assert str(mixed.scaled(Integer(3))) == "(6, 1)"
        with pytest.raises(TypeError):
            mixed.scale(Rational(1, 2))
        with pytest.raises(TypeError):
            direct_product(Integer, Rational, scalar_type=Rational)

    def test_non_groups_rejected(self):
        with pytest.raises(TypeError):
            direct_product(Natural, Integer)

    def test_cyclic_components(self):
        C7 = cyclic_group(7)
        pairs = direct_product(C7, C7)
        assert str(pairs(3, 4) + pairs(5, 6)) == "(1, 3)"

    def test_custom_format(self, v):
        config = FormatConfig(pair_brackets=("<", ">"), pair_separator="; ")
        assert v.format(config) == "<1/2; 3/5>"

    def test_different_component_types(self):
        ZZ2 = direct_product(Integer, Integer)
        assert not (QQ2(1, 2) == ZZ2(1, 2))
        assert QQ2(1, 2) != ZZ2(1, 2)
        with pytest.raises(TypeError):
            QQ2(1, 2) + ZZ2(1, 2)
        with pytest.raises(TypeError):
            QQ2(1, 2) * ZZ2(1, 2)

    def test_unbound_pair_matches_product(self):
        assert pair(Rational(1, 2), Rational(3)) == QQ2(Rational(1, 2), 3)
        assert pair(Integer(1), Integer(2)) != QQ2(1, 2)


class TestGaussianRationals:
    @pytest.fixture
    def G(self):
        return gaussian_rationals()

    def test_is_quotient_ring(self, G):
        assert issubclass(G, QuotientRing)

    def test_i_squared(self, G):
        i = G(QX([0, 1]))
        assert i * i == G(QX([-1]))
        assert i * i == -1

    def test_equality_is_side_effect_free(self, G):
        a = G(QX([0, 0, 1]))
        b = G(QX([-1]))
        assert a == b
        assert str(a) == "[1x^2 + 0x^1 + 0]"
        assert str(b) == "[-1]"

    def test_normalize(self, G):
        a = G(QX([2, 0, 1]))
        assert str(a.normalized()) == "[1]"
        a.normalize()
        assert str(a) == "[1]"

    def test_conjugate_product(self, G):
        one_plus_i = G(QX([1, 1]))
        one_minus_i = G(QX([1, -1]))
        assert one_plus_i * one_minus_i == G(QX([2]))

    def test_zero_and_one(self, G):
        assert G(QX([1, 0, 1])).is_zero()
        assert G(QX([0, 0, -1])).is_one()
        assert not G(QX([0, 1])).is_one()

    def test_inequality(self, G):
        assert G(QX([0, 1])) != G(QX([1]))

    def test_custom_brackets(self, G):
        config = FormatConfig(coset_brackets=("<", ">"))
        assert G(QX([0, 1])).format(config) == "<1x^1 + 0>"

    def test_plain_polynomial_representative(self, G):
        x_squared = Polynomial([Rational(0), Rational(0), Rational(1)])
        a = G(x_squared)
        assert type(a.representative) is QX
        assert a == G(QX([-1]))
        assert G(QX([-1])) == a
        assert a.normalized() == -1


class TestIdeals:
    def test_x_squared_plus_one_membership(self):
        assert IdealXSquaredPlus1.contains(QX([1, 0, 1]))
        assert IdealXSquaredPlus1.contains(QX([0, 1, 0, 1]))
        assert not IdealXSquaredPlus1.contains(QX([1, 1]))

    def test_element_outside_rejected(self):
        with pytest.raises(ValueError):
            IdealXSquaredPlus1(QX([1, 1]))

    def test_from_parent(self):
        element = IdealXSquaredPlus1()
        assert not element.from_parent(QX([1, 1]))
        assert element.is_zero()
        assert element.from_parent(QX([2, 0, 2]))
        assert element.to_parent() == QX([2, 0, 2])

    def test_ideal_absorbs_multiplication(self):
        element = IdealXSquaredPlus1(QX([1, 0, 1]))
        element.scale(QX([3, 1]))
        assert IdealXSquaredPlus1.contains(element.to_parent())

    def test_generator(self):
        element = IdealXSquaredPlus1()
        element.set_generator()
        assert element.is_generator()

    def test_one_plus_x_generator(self):
        ideal = principal_ideal(QX([1, 1]))
        Q = quotient_structure(QX, ideal)
        assert Q(QX([0, 1])) == Q(QX([-1]))
        assert str(Q(QX([0, 0, 1])).normalized()) == "[1]"

    def test_zero_generator(self):
        with pytest.raises(ValueError):
            principal_ideal(QX.zero())

    def test_integer_multiples_zero(self):
        with pytest.raises(ValueError):
            integer_multiples(0)


class TestIntegersModulo:
    @pytest.fixture
    def Z5(self):
        return integers_modulo(5)

    def test_congruence(self, Z5):
        assert Z5(7) == Z5(2)
        assert Z5(-3) == Z5(2)
        assert Z5(3) != Z5(4)

    def test_arithmetic(self, Z5):
        assert Z5(3) * Z5(4) == Z5(2)
        assert Z5(3) + Z5(4) == 2
        assert (Z5(10)).is_zero()
        assert Z5(6).is_one()

    def test_canonical_representative(self, Z5):
        assert Z5(-3).normalized().representative == Integer(2)
        assert str(Z5(12).normalized()) == "[2]"
        assert str(Z5(12)) == "[12]"


class TestQuotientModule:
    @pytest.fixture
    def Q(self):
        return quotient_structure(QQ2, SecondAxis)

    def test_variant(self, Q):
        assert issubclass(Q, QuotientModule)

    def test_equality_modulo_axis(self, Q):
        assert Q(QQ2(1, 2)) == Q(QQ2(1, 5))
        assert Q(QQ2(1, 2)) != Q(QQ2(2, 2))

    def test_scale_and_normalize(self, Q):
        q = Q(QQ2(1, 2))
        q.scale(Integer(2))
        assert str(q) == "[(2, 4)]"
        assert str(q.normalized()) == "[(2, 0)]"

    def test_wrong_parent(self):
        with pytest.raises(TypeError):
            quotient_structure(Integer, SecondAxis)


class TestCyclicGroup:
    def test_reduction_scenarios(self):
        assert str(CyclicGroup(1597, modulus=1597)) == "0"
        assert str(CyclicGroup(2000, modulus=1597)) == "403"

    def test_fixed_modulus_class(self):
        C = cyclic_group(1597)
        assert str(C(2000)) == "403"
        assert C is cyclic_group(1597)
        assert C.zero().is_zero()

    def test_negative_values(self):
        assert int(CyclicGroup(-3, modulus=7)) == 4
        assert int(CyclicGroup(-7, modulus=7)) == 0

    def test_group_operations(self):
        C7 = cyclic_group(7)
        assert str(C7(5) + C7(4)) == "2"
        assert str(C7(2) - C7(5)) == "4"
        assert str(-C7(3)) == "4"
        assert str(-C7(0)) == "0"
        assert C7(3) == 10

    def test_accessors(self):
        c = CyclicGroup(9, modulus=4)
        assert c.value == Natural(1)
        assert c.modulus == Natural(4)

    def test_modulus_errors(self):
        with pytest.raises(ValueError):
            CyclicGroup(3, modulus=0)
        with pytest.raises(ValueError):
            cyclic_group(0)
        with pytest.raises(ValueError):
            CyclicGroup(1, modulus=5) + CyclicGroup(1, modulus=7)
        with pytest.raises(TypeError):
            CyclicGroup(3)
        assert CyclicGroup(1, modulus=5) != CyclicGroup(1, modulus=7)


class TestGeneratedClasses:
    def test_module_of_bound_classes(self):
        assert QX.__module__ == "algstruct.polynomial"
        assert QQ2.__module__ == "algstruct.product"
        assert IdealXSquaredPlus1.__module__ == "algstruct.quotient"
        assert gaussian_rationals().__module__ == "algstruct.quotient"
        assert integer_multiples(3).__module__ == "algstruct.quotient"
        assert cyclic_group(7).__module__ == "algstruct.cyclic"

    def test_repr_names_package(self):
        assert repr(cyclic_group(7)).startswith("<class 'algstruct.cyclic.")


class TestLogging:
    def test_single_handler(self):
        first = get_logger("algstruct.tests.handlers")
        second = get_logger("algstruct.tests.handlers")
        assert first is second
        assert len(first.handlers) == 1

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("ALGSTRUCT_LOG_LEVEL", "debug")
        assert get_logger("algstruct.tests.env_debug").level == logging.DEBUG
        monkeypatch.setenv("ALGSTRUCT_LOG_LEVEL", "nonsense")
        assert get_logger("algstruct.tests.env_bad").level == logging.WARNING

    def test_simplify_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="algstruct.rational"):
            Rational(2, 4)
        assert "simplify" in caplog.text

    def test_numeric_level(self, monkeypatch):
        monkeypatch.setenv("ALGSTRUCT_LOG_LEVEL", "10")
        assert level_from_env() == logging.DEBUG
        monkeypatch.delenv("ALGSTRUCT_LOG_LEVEL")
        assert level_from_env() == logging.WARNING
        assert level_from_env(logging.INFO) == logging.INFO

    def test_explicit_level_wins(self, monkeypatch):
        monkeypatch.setenv("ALGSTRUCT_LOG_LEVEL", "debug")
        logger = get_logger("algstruct.tests.explicit", level=logging.ERROR)
        assert logger.level == logging.ERROR
