"""
Polynomials over an arbitrary ring.

Coefficients are stored lowest power first with no trailing zero
coefficient; the empty list is the zero polynomial (degree -1).  All
coefficient arithmetic goes through the ring's own operations, so the same
code serves Polynomial[Integer], Polynomial[Rational], polynomials over a
quotient ring, and so on.

FieldPolynomial adds Euclidean division when the coefficients form a field.

Example:
    QX = field_polynomial_ring(Rational)
    p = QX([Rational(1, 2), Rational(2, 3)])      # 2/3x^1 + 1/2
    q, r = divmod(p * p, p)
"""

from functools import lru_cache
from typing import List, Optional, Sequence, Tuple

from .config import DEFAULT_FORMAT, FormatConfig
from .logging import get_logger
from .structures import (
    AdditiveGroup, Multiplicative, Scalable, is_field, is_ring,
)

logger = get_logger(__name__)


class Polynomial(AdditiveGroup, Multiplicative, Scalable):
    """Polynomial with coefficients in `ring`; an algebra over `ring`."""

    ring: type = None

    def __init__(self, coefficients: Sequence = (), ring: Optional[type] = None):
        if isinstance(coefficients, Polynomial):
            ring = ring or coefficients.ring
            coefficients = coefficients._coefficients
        coefficients = list(coefficients)

        ring = ring or type(self).ring
        if ring is None:
            if not coefficients or isinstance(coefficients[0], int):
                raise TypeError(
                    "Coefficient ring unknown: pass ring= or use polynomial_ring()"
                )
            ring = type(coefficients[0])
        if not is_ring(ring):
            raise TypeError(f"{ring.__name__} is not a ring")

        self.ring = ring
        self.scalar_types = (ring,)
        self._coefficients: List = [self._lift(c) for c in coefficients]
        self.normalize()

    def _lift(self, value):
        if isinstance(value, self.ring):
            return value.copy()
        return self.ring(value)

    @classmethod
    def _bound_ring(cls) -> type:
        if cls.ring is None:
            raise TypeError(
                f"{cls.__name__} has no coefficient ring; use polynomial_ring()"
            )
        return cls.ring

    @classmethod
    def zero(cls) -> "Polynomial":
        return cls([], ring=cls._bound_ring())

    @classmethod
    def one(cls) -> "Polynomial":
        ring = cls._bound_ring()
        return cls([ring.one()], ring=ring)

    @classmethod
    def monomial(cls, coefficient, power: int, ring: Optional[type] = None) -> "Polynomial":
        """coefficient * x^power."""
        ring = ring or cls.ring or type(coefficient)
        return cls([ring.zero() for _ in range(power)] + [coefficient], ring=ring)

    def _new(self, coefficients: Sequence = ()) -> "Polynomial":
        return type(self)(coefficients, ring=self.ring)

    def _coerce(self, other):
        if isinstance(other, Polynomial):
            if other.ring is not self.ring:
                return NotImplemented
            if type(other) is not type(self):
                return self._new(other._coefficients)
            return other
        constant = self.ring.zero()._coerce(other)
        if constant is NotImplemented:
            return NotImplemented
        return self._new([constant])

    # ------------------------------------------------------------------
    # Coefficient access
    # ------------------------------------------------------------------

    @property
    def coefficients(self) -> Tuple:
        return tuple(c.copy() for c in self._coefficients)

    def __getitem__(self, power: int):
        if power < 0:
            raise IndexError(f"Negative power {power}")
        if power < len(self._coefficients):
            return self._coefficients[power].copy()
        return self.ring.zero()

    def __setitem__(self, power: int, value) -> None:
        if power < 0:
            raise IndexError(f"Negative power {power}")
        while len(self._coefficients) <= power:
            self._coefficients.append(self.ring.zero())
        self._coefficients[power] = self._lift(value)
        self.normalize()

    def __len__(self) -> int:
        return len(self._coefficients)

    def normalize(self) -> None:
        """Remove trailing zero coefficients."""
        while self._coefficients and self._coefficients[-1].is_zero():
            self._coefficients.pop()

    def degree(self) -> int:
        return len(self._coefficients) - 1

    def leading_coefficient(self):
        if not self._coefficients:
            return self.ring.zero()
        return self._coefficients[-1].copy()

    # ------------------------------------------------------------------
    # Group
    # ------------------------------------------------------------------

    def copy(self) -> "Polynomial":
        return self._new(self._coefficients)

    def assign(self, other: "Polynomial") -> None:
        if other is not self:
            self._coefficients = [c.copy() for c in other._coefficients]

    def add(self, other: "Polynomial") -> None:
        if other is self:
            other = other.copy()
        for i, c in enumerate(other._coefficients):
            if i < len(self._coefficients):
                self._coefficients[i].add(c)
            else:
                self._coefficients.append(c.copy())
        self.normalize()

    def set_zero(self) -> None:
        self._coefficients = []

    def is_zero(self) -> bool:
        return not self._coefficients

    def negate(self) -> None:
        for c in self._coefficients:
            c.negate()

    # ------------------------------------------------------------------
    # Ring / algebra
    # ------------------------------------------------------------------

    def multiply(self, other: "Polynomial") -> None:
        """Discrete convolution of the coefficient lists."""
        if self.is_zero() or other.is_zero():
            self.set_zero()
            return
        lhs, rhs = self._coefficients, other._coefficients
        product = []
        for k in range(len(lhs) + len(rhs) - 1):
            term = self.ring.zero()
            for j in range(max(0, k - len(rhs) + 1), min(k, len(lhs) - 1) + 1):
                piece = lhs[j].copy()
                piece.multiply(rhs[k - j])
                term.add(piece)
            product.append(term)
        self._coefficients = product
        self.normalize()

    def set_one(self) -> None:
        self._coefficients = [self.ring.one()]

    def is_one(self) -> bool:
        return len(self._coefficients) == 1 and self._coefficients[0].is_one()

    def scale(self, scalar) -> None:
        if not isinstance(scalar, self.ring):
            lifted = self.ring.zero()._coerce(scalar)
            if lifted is not NotImplemented:
                scalar = lifted
        self._check_scalar(scalar)
        for c in self._coefficients:
            c.multiply(scalar)
        self.normalize()

    def evaluate(self, point):
        """Horner evaluation at a ring element."""
        point = self._lift(point)
        result = self.ring.zero()
        for c in reversed(self._coefficients):
            result.multiply(point)
            result.add(c)
        return result

    __call__ = evaluate

    # ------------------------------------------------------------------
    # Comparison / text
    # ------------------------------------------------------------------

    def __eq__(self, other) -> bool:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        if len(self._coefficients) != len(other._coefficients):
            return False
        return all(a == b for a, b in zip(self._coefficients, other._coefficients))

    __hash__ = None

    def format(self, config: FormatConfig = DEFAULT_FORMAT) -> str:
        if not self._coefficients:
            return str(self.ring.zero())
        terms = [
            f"{self._coefficients[i]}{config.indeterminate}{config.power_marker}{i}"
            for i in range(len(self._coefficients) - 1, 0, -1)
        ]
        terms.append(str(self._coefficients[0]))
        return config.term_separator.join(terms)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"


class FieldPolynomial(Polynomial):
    """Polynomial over a field, with Euclidean division."""

    def __init__(self, coefficients: Sequence = (), ring: Optional[type] = None):
        super().__init__(coefficients, ring)
        if not is_field(self.ring):
            raise TypeError(f"{self.ring.__name__} is not a field")

    def divide_with_remainder(self, divisor: "FieldPolynomial") -> "FieldPolynomial":
        """Polynomial long division.

        Returns the quotient; self is replaced by the remainder, whose degree
        is below the divisor's.

        Raises:
            ZeroDivisionError: divisor is the zero polynomial.
        """
        if divisor.is_zero():
            raise ZeroDivisionError("Polynomial division by zero")
        quotient = self._new()
        divisor_degree = divisor.degree()
        if divisor_degree > self.degree():
            return quotient

        leading = divisor._coefficients[divisor_degree]
        logger.debug("divide degree %d by degree %d", self.degree(), divisor_degree)

        for power in range(self.degree() - divisor_degree, -1, -1):
            factor = self[power + divisor_degree]
            if factor.is_zero():
                continue
            factor.divide(leading)
            term = self._new([self.ring.zero() for _ in range(power)] + [factor])
            quotient.add(term)
            term.multiply(divisor)
            self.subtract(term)
        return quotient

    def __divmod__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        remainder = self.copy()
        quotient = remainder.divide_with_remainder(other)
        return quotient, remainder

    def __floordiv__(self, other):
        result = self.__divmod__(other)
        if result is NotImplemented:
            return NotImplemented
        return result[0]

    def __mod__(self, other):
        result = self.__divmod__(other)
        if result is NotImplemented:
            return NotImplemented
        return result[1]

    def monic(self) -> "FieldPolynomial":
        """Copy scaled so the leading coefficient is one (zero stays zero)."""
        result = self.copy()
        if not result.is_zero():
            result.scale(self.leading_coefficient().inverse())
        return result


def polynomial_gcd(a: FieldPolynomial, b: FieldPolynomial) -> FieldPolynomial:
    """Monic greatest common divisor by Euclid's algorithm."""
    a = a.copy()
    b = b.copy()
    while not b.is_zero():
        a.divide_with_remainder(b)
        a, b = b, a
    return a.monic()


@lru_cache(maxsize=None)
def polynomial_ring(ring: type) -> type:
    """Polynomial class bound to a coefficient ring, e.g. Polynomial[Integer]."""
    if not is_ring(ring):
        raise TypeError(f"{ring.__name__} is not a ring")
    return type(f"Polynomial[{ring.__name__}]", (Polynomial,),
                {"ring": ring, "scalar_types": (ring,), "__module__": __name__})


@lru_cache(maxsize=None)
def field_polynomial_ring(field: type) -> type:
    """FieldPolynomial class bound to a coefficient field."""
    if not is_field(field):
        raise TypeError(f"{field.__name__} is not a field")
    return type(f"FieldPolynomial[{field.__name__}]", (FieldPolynomial,),
                {"ring": field, "scalar_types": (field,), "__module__": __name__})
