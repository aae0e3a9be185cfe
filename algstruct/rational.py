"""
Exact rational numbers.

A Rational is an Integer numerator over a non-zero Natural denominator.
Every construction and every arithmetic mutation ends in _simplify(), so
gcd(|numerator|, denominator) == 1 always holds.
"""

from typing import Union

from .integer import Integer
from .logging import get_logger
from .natural import Natural, gcd
from .structures import AdditiveGroup, Invertible, Multiplicative, Scalable

logger = get_logger(__name__)


class Rational(AdditiveGroup, Multiplicative, Invertible, Scalable):
    """Field of fractions of Integer; an algebra over Integer and over itself."""

    def __init__(self,
                 numerator: Union[int, Natural, Integer, "Rational"] = 0,
                 denominator: Union[int, Natural, Integer] = 1):
        if isinstance(numerator, Rational):
            self._numerator = numerator._numerator.copy()
            self._denominator = numerator._denominator.copy()
            if not (isinstance(denominator, int) and denominator == 1):
                self.divide(Rational(denominator))
            return

        self._numerator = Integer(numerator)
        if isinstance(denominator, Natural):
            self._denominator = denominator.copy()
        else:
            denominator = Integer(denominator)
            if denominator.negative:
                self._numerator.negate()
            self._denominator = denominator.magnitude
        if self._denominator.is_zero():
            raise ZeroDivisionError("Rational with zero denominator")
        self._simplify()

    @classmethod
    def from_string(cls, text: str) -> "Rational":
        """Parse "p" or "p/q" with an optional sign on p."""
        numerator, sep, denominator = text.strip().partition("/")
        if not sep:
            return cls(Integer.from_string(numerator))
        return cls(Integer.from_string(numerator), Natural.from_string(denominator))

    @classmethod
    def zero(cls) -> "Rational":
        return cls(0)

    @classmethod
    def one(cls) -> "Rational":
        return cls(1)

    @property
    def numerator(self) -> Integer:
        return self._numerator.copy()

    @numerator.setter
    def numerator(self, value) -> None:
        self._numerator = Integer(value)
        self._simplify()

    @property
    def denominator(self) -> Natural:
        return self._denominator.copy()

    @denominator.setter
    def denominator(self, value) -> None:
        value = Natural(value)
        if value.is_zero():
            raise ZeroDivisionError("Rational with zero denominator")
        self._denominator = value
        self._simplify()

    def _simplify(self) -> None:
        """Divide gcd(|numerator|, denominator) out of both parts."""
        if self._numerator.is_zero():
            self._denominator.set_one()
            return
        divisor = gcd(self._numerator._magnitude, self._denominator)
        if not divisor.is_one():
            logger.debug("simplify %s/%s by %s",
                         self._numerator, self._denominator, divisor)
            self._numerator = self._numerator.divide_with_remainder(Integer(divisor))
            self._denominator = self._denominator.divide_with_remainder(divisor)

    def _coerce(self, other):
        if isinstance(other, Rational):
            return other
        if isinstance(other, (Integer, Natural)):
            return Rational(other)
        if isinstance(other, int) and not isinstance(other, bool):
            return Rational(other)
        return NotImplemented

    # ------------------------------------------------------------------
    # Group
    # ------------------------------------------------------------------

    def copy(self) -> "Rational":
        return Rational(self)

    def assign(self, other: "Rational") -> None:
        if other is not self:
            self._numerator.assign(other._numerator)
            self._denominator.assign(other._denominator)

    def add(self, other: "Rational") -> None:
        # Cross multiplication, reduced afterwards.
        rhs_numerator = other._numerator.copy()
        rhs_numerator.multiply(Integer(self._denominator))
        self._numerator.multiply(Integer(other._denominator))
        self._numerator.add(rhs_numerator)
        self._denominator.multiply(other._denominator)
        self._simplify()

    def set_zero(self) -> None:
        self._numerator.set_zero()
        self._denominator.set_one()

    def is_zero(self) -> bool:
        return self._numerator.is_zero()

    def negate(self) -> None:
        self._numerator.negate()

    # ------------------------------------------------------------------
    # Field
    # ------------------------------------------------------------------

    def multiply(self, other: "Rational") -> None:
        self._numerator.multiply(other._numerator)
        self._denominator.multiply(other._denominator)
        self._simplify()

    def set_one(self) -> None:
        self._numerator.set_one()
        self._denominator.set_one()

    def is_one(self) -> bool:
        return self._numerator.is_one() and self._denominator.is_one()

    def invert(self) -> None:
        if self.is_zero():
            raise ZeroDivisionError("Rational inverse of zero")
        magnitude = self._numerator.magnitude
        self._numerator.magnitude = self._denominator
        self._denominator = magnitude

    def scale(self, scalar: Union[Integer, "Rational"]) -> None:
        self._check_scalar(scalar)
        self.multiply(self._coerce(scalar))

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def _compare(self, other: "Rational") -> int:
        # Compare a/b with c/d through a*d and c*b; denominators are positive.
        lhs = self._numerator * Integer(other._denominator)
        rhs = other._numerator * Integer(self._denominator)
        return lhs._compare(rhs)

    def __eq__(self, other) -> bool:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return (self._numerator == other._numerator
                and self._denominator == other._denominator)

    def __lt__(self, other) -> bool:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._compare(other) < 0

    def __le__(self, other) -> bool:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._compare(other) <= 0

    def __gt__(self, other) -> bool:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._compare(other) > 0

    def __ge__(self, other) -> bool:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._compare(other) >= 0

    __hash__ = None

    def __abs__(self) -> "Rational":
        return Rational(abs(self._numerator), self._denominator)

    def __str__(self) -> str:
        if self._denominator.is_one():
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    def __repr__(self) -> str:
        return f"Rational({self})"


Rational.scalar_types = (Integer, Rational)
