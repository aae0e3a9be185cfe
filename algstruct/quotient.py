"""
Quotient structures and principal ideals.

A quotient element holds one representative of its coset.  Two elements
are equal when the difference of their representatives lies in the
sub-structure; equality never rewrites either operand.  normalize() replaces
the representative by the canonical one (the remainder modulo the
generator) when that is wanted explicitly.

Principal ideals are generated by a single element of a ring with
division with remainder (Integer, FieldPolynomial[F]):

    I = ideal_x_squared_plus_one()          # (x^2 + 1) in Q[x]
    G = gaussian_rationals()                # Q[x] / (x^2 + 1)
    i = G(QX([Rational(0), Rational(1)]))
    i * i == G(QX([Rational(-1)]))          # True

    Z5 = integers_modulo(5)                 # Z / 5Z
"""

from functools import lru_cache
from typing import Optional

from .config import DEFAULT_FORMAT, FormatConfig
from .integer import Integer
from .logging import get_logger
from .polynomial import Polynomial, field_polynomial_ring
from .rational import Rational
from .structures import (
    AdditiveGroup, Ideal, Multiplicative, Scalable, SubStructure,
    is_group, is_ring,
)

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Principal ideals
# ---------------------------------------------------------------------------

class PrincipalIdeal(Ideal, AdditiveGroup, Scalable):
    """Element of the ideal generated by `generator`.

    The parent ring must provide divide_with_remainder(divisor), returning
    the quotient and leaving the remainder in the receiver.
    """

    generator = None

    def __init__(self, element=None):
        cls = type(self)
        if cls.generator is None:
            raise TypeError("PrincipalIdeal has no generator; use principal_ideal()")
        if element is None:
            element = cls.parent_type.zero()
        elif not cls.contains(element):
            raise ValueError(f"{element} is not in the ideal generated by {cls.generator}")
        self._element = element.copy()

    @classmethod
    def _remainder(cls, value):
        remainder = cls.parent_type.zero()._coerce(value)
        if remainder is NotImplemented:
            raise TypeError(f"{type(value).__name__} is not in {cls.parent_type.__name__}")
        remainder = remainder.copy()
        remainder.divide_with_remainder(cls.generator)
        return remainder

    @classmethod
    def contains(cls, value) -> bool:
        """Membership: division by the generator leaves no remainder."""
        return cls._remainder(value).is_zero()

    @classmethod
    def reduce(cls, value):
        remainder = cls._remainder(value)
        if isinstance(remainder, Integer) and remainder.negative:
            remainder.add(abs(cls.generator))
        return remainder

    @classmethod
    def zero(cls) -> "PrincipalIdeal":
        return cls()

    def set_generator(self) -> None:
        self._element = type(self).generator.copy()

    def is_generator(self) -> bool:
        return self._element == type(self).generator

    def _coerce(self, other):
        if isinstance(other, type(self)):
            return other
        return NotImplemented

    def copy(self) -> "PrincipalIdeal":
        return type(self)(self._element)

    def assign(self, other: "PrincipalIdeal") -> None:
        if other is not self:
            self._element.assign(other._element)

    def add(self, other: "PrincipalIdeal") -> None:
        if other is self:
            other = other.copy()
        self._element.add(other._element)

    def set_zero(self) -> None:
        self._element.set_zero()

    def is_zero(self) -> bool:
        return self._element.is_zero()

    def negate(self) -> None:
        self._element.negate()

    def scale(self, scalar) -> None:
        # An ideal absorbs multiplication by any ring element.
        self._check_scalar(scalar)
        self._element.multiply(scalar)

    def __eq__(self, other) -> bool:
        if not isinstance(other, PrincipalIdeal):
            return NotImplemented
        return self._element == other._element

    __hash__ = None

    def __str__(self) -> str:
        return str(self._element)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"


def principal_ideal(generator, name: Optional[str] = None) -> type:
    """Ideal class generated by one non-zero ring element."""
    parent = type(generator)
    if isinstance(generator, Polynomial) and parent.ring is None:
        parent = field_polynomial_ring(generator.ring)
        generator = parent(generator)
    if not hasattr(parent, "divide_with_remainder"):
        raise TypeError(f"{parent.__name__} has no division with remainder")
    if generator.is_zero():
        raise ValueError("Ideal generator must be non-zero")
    return type(name or f"PrincipalIdeal[{generator}]", (PrincipalIdeal,), {
        "generator": generator.copy(),
        "parent_type": parent,
        "scalar_types": (parent,),
        "__module__": __name__,
    })


def ideal_x_squared_plus_one(field: type = Rational) -> type:
    """The ideal (x^2 + 1) of F[x]."""
    return _ideal_x_squared_plus_one(field)


@lru_cache(maxsize=None)
def _ideal_x_squared_plus_one(field: type) -> type:
    polynomials = field_polynomial_ring(field)
    generator = polynomials([field.one(), field.zero(), field.one()])
    return principal_ideal(generator, name=f"IdealXSquaredPlus1[{field.__name__}]")


@lru_cache(maxsize=None)
def integer_multiples(n: int) -> type:
    """The ideal nZ of Integer; canonical representatives lie in [0, n)."""
    if n == 0:
        raise ValueError("integer_multiples(0) has no reduction")
    return principal_ideal(Integer(abs(n)), name=f"IntegerMultiples[{abs(n)}]")


IdealXSquaredPlus1 = ideal_x_squared_plus_one(Rational)


# ---------------------------------------------------------------------------
# Quotients
# ---------------------------------------------------------------------------

class QuotientGroup(AdditiveGroup):
    """Coset g + H, stored as one representative g."""

    substructure: type = None

    def __init__(self, representative=None, substructure: Optional[type] = None):
        self.substructure = substructure or type(self).substructure
        if self.substructure is None:
            raise TypeError(
                f"{type(self).__name__} has no sub-structure; use quotient_structure()"
            )
        self._representative = self._lift(representative)

    def _lift(self, value):
        parent = self.substructure.parent_type
        if value is None:
            return parent.zero()
        if isinstance(value, QuotientGroup):
            value = value._representative
        lifted = parent.zero()._coerce(value)
        if lifted is NotImplemented:
            raise TypeError(f"Cannot use {type(value).__name__} as {parent.__name__}")
        return lifted.copy()

    @classmethod
    def zero(cls):
        if cls.substructure is None:
            raise TypeError(f"{cls.__name__} has no sub-structure; use quotient_structure()")
        return cls()

    @property
    def representative(self):
        return self._representative.copy()

    def normalize(self) -> None:
        """Replace the representative by the canonical one of its coset."""
        reduced = self.substructure.reduce(self._representative)
        logger.debug("normalize %s -> %s", self._representative, reduced)
        self._representative = reduced

    def normalized(self):
        result = self.copy()
        result.normalize()
        return result

    def _coerce(self, other):
        if isinstance(other, QuotientGroup):
            if other.substructure is not self.substructure:
                return NotImplemented
            return other
        try:
            return type(self)(other, substructure=self.substructure)
        except TypeError:
            return NotImplemented

    def copy(self):
        return type(self)(self._representative, substructure=self.substructure)

    def assign(self, other) -> None:
        if other is not self:
            self._representative.assign(other._representative)

    def add(self, other) -> None:
        if other is self:
            other = other.copy()
        self._representative.add(other._representative)

    def set_zero(self) -> None:
        self._representative.set_zero()

    def is_zero(self) -> bool:
        return self.substructure.contains(self._representative)

    def negate(self) -> None:
        self._representative.negate()

    def subtract(self, other) -> None:
        if other is self:
            self.set_zero()
            return
        self._representative.subtract(other._representative)

    def __eq__(self, other) -> bool:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        difference = self._representative - other._representative
        # from_parent tests membership and stores into a scratch element only.
        return self.substructure().from_parent(difference)

    __hash__ = None

    def format(self, config: FormatConfig = DEFAULT_FORMAT) -> str:
        left, right = config.coset_brackets
        return f"{left}{self._representative}{right}"

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"


class QuotientRing(QuotientGroup, Multiplicative):
    """Commutative ring modulo an ideal."""

    @classmethod
    def one(cls):
        result = cls.zero()
        result.set_one()
        return result

    def multiply(self, other) -> None:
        if other is self:
            other = other.copy()
        self._representative.multiply(other._representative)

    def set_one(self) -> None:
        self._representative.set_one()

    def is_one(self) -> bool:
        difference = self._representative.copy()
        difference.subtract(type(self._representative).one())
        return self.substructure.contains(difference)


class QuotientModule(QuotientGroup, Scalable):
    """Module modulo a sub-module."""

    def scale(self, scalar) -> None:
        self._check_scalar(scalar)
        self._representative.scale(scalar)


@lru_cache(maxsize=None)
def quotient_structure(parent_type: type, substructure: type) -> type:
    """Bind a quotient class to a parent type and one of its sub-structures."""
    if not is_group(parent_type):
        raise TypeError(f"{parent_type.__name__} is not a group")
    if not (isinstance(substructure, type) and issubclass(substructure, SubStructure)):
        raise TypeError(f"{substructure!r} is not a sub-structure")
    if not issubclass(substructure.parent_type, parent_type):
        raise TypeError(
            f"{substructure.__name__} is not a sub-structure of {parent_type.__name__}"
        )

    attrs = {"substructure": substructure, "__module__": __name__}
    if is_ring(parent_type) and issubclass(substructure, Ideal):
        base = QuotientRing
    elif issubclass(parent_type, Scalable) and parent_type.scalar_types:
        base = QuotientModule
        attrs["scalar_types"] = parent_type.scalar_types
    else:
        base = QuotientGroup
    name = f"Quotient[{parent_type.__name__}, {substructure.__name__}]"
    return type(name, (base,), attrs)


@lru_cache(maxsize=None)
def gaussian_rationals() -> type:
    """Q[x] / (x^2 + 1)."""
    return quotient_structure(field_polynomial_ring(Rational), IdealXSquaredPlus1)


@lru_cache(maxsize=None)
def integers_modulo(n: int) -> type:
    """Z / nZ as a quotient ring of Integer."""
    return quotient_structure(Integer, integer_multiples(n))
