"""
Signed integers on top of the Natural engine.

An Integer is a Natural magnitude plus a sign flag.  Zero is always
non-negative.
"""

from typing import Tuple, Union

from .natural import Natural
from .structures import AdditiveGroup, Multiplicative, Scalable


class Integer(AdditiveGroup, Multiplicative, Scalable):
    """Signed integer of unbounded size; a ring and a module over itself."""

    def __init__(self, value: Union[int, Natural, "Integer"] = 0,
                 negative: bool = False):
        if isinstance(value, Integer):
            self._magnitude = value._magnitude.copy()
            self._negative = value._negative
        elif isinstance(value, Natural):
            self._magnitude = value.copy()
            self._negative = bool(negative)
        elif isinstance(value, int):
            self._magnitude = Natural(abs(value))
            self._negative = value < 0
        else:
            raise TypeError(f"Cannot build Integer from {type(value).__name__}")
        self._fix_zero_sign()

    @classmethod
    def from_string(cls, text: str) -> "Integer":
        text = text.strip()
        negative = text.startswith("-")
        if negative or text.startswith("+"):
            text = text[1:]
        return cls(Natural.from_string(text), negative=negative)

    @classmethod
    def zero(cls) -> "Integer":
        return cls(0)

    @classmethod
    def one(cls) -> "Integer":
        return cls(1)

    @property
    def magnitude(self) -> Natural:
        return self._magnitude.copy()

    @magnitude.setter
    def magnitude(self, value: Natural) -> None:
        self._magnitude.assign(value)
        self._fix_zero_sign()

    @property
    def negative(self) -> bool:
        return self._negative

    def _fix_zero_sign(self) -> None:
        if self._magnitude.is_zero():
            self._negative = False

    def _coerce(self, other):
        if isinstance(other, Integer):
            return other
        if isinstance(other, Natural):
            return Integer(other)
        if isinstance(other, int) and not isinstance(other, bool):
            return Integer(other)
        return NotImplemented

    # ------------------------------------------------------------------
    # Group
    # ------------------------------------------------------------------

    def copy(self) -> "Integer":
        return Integer(self)

    def assign(self, other: "Integer") -> None:
        if other is not self:
            self._magnitude.assign(other._magnitude)
            self._negative = other._negative

    def add(self, other: "Integer") -> None:
        if self._negative == other._negative:
            # Same sign: magnitudes add, sign is kept.
            self._magnitude.add(other._magnitude)
        elif self._negative:
            self.assign(other._magnitude.difference(self._magnitude))
        else:
            self.assign(self._magnitude.difference(other._magnitude))
        self._fix_zero_sign()

    def set_zero(self) -> None:
        self._magnitude.set_zero()
        self._negative = False

    def is_zero(self) -> bool:
        return self._magnitude.is_zero()

    def negate(self) -> None:
        self._negative = not self._negative
        self._fix_zero_sign()

    # ------------------------------------------------------------------
    # Ring / module
    # ------------------------------------------------------------------

    def multiply(self, other: "Integer") -> None:
        self._negative ^= other._negative
        self._magnitude.multiply(other._magnitude)
        self._fix_zero_sign()

    def set_one(self) -> None:
        self._magnitude.set_one()
        self._negative = False

    def is_one(self) -> bool:
        return self._magnitude.is_one() and not self._negative

    def scale(self, scalar: "Integer") -> None:
        self._check_scalar(scalar)
        self.multiply(scalar)

    # ------------------------------------------------------------------
    # Division
    # ------------------------------------------------------------------

    def divide_with_remainder(self, divisor: "Integer") -> "Integer":
        """Truncating division.

        Returns the quotient, rounded toward zero; self is replaced by the
        remainder, which keeps the dividend's sign.

        Raises:
            ZeroDivisionError: divisor is zero.
        """
        magnitude = self._magnitude.divide_with_remainder(divisor._magnitude)
        quotient = Integer(magnitude, negative=self._negative ^ divisor._negative)
        self._fix_zero_sign()
        return quotient

    def truncating_divmod(self, divisor) -> Tuple["Integer", "Integer"]:
        divisor = self._coerce(divisor)
        if divisor is NotImplemented:
            raise TypeError(f"Cannot divide Integer by {type(divisor).__name__}")
        remainder = self.copy()
        quotient = remainder.divide_with_remainder(divisor)
        return quotient, remainder

    def __truediv__(self, other):
        """Exact division, producing a Rational."""
        from .rational import Rational

        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        if other.is_zero():
            raise ZeroDivisionError("Integer division by zero")
        return Rational(self, other)

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other.__truediv__(self)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def _compare(self, other: "Integer") -> int:
        if self._negative != other._negative:
            return -1 if self._negative else 1
        order = self._magnitude._compare(other._magnitude)
        return -order if self._negative else order

    def __eq__(self, other) -> bool:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._compare(other) == 0

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

    def __abs__(self) -> "Integer":
        return Integer(self._magnitude)

    def __int__(self) -> int:
        value = int(self._magnitude)
        return -value if self._negative else value

    def __str__(self) -> str:
        if self._negative:
            return "-" + str(self._magnitude)
        return str(self._magnitude)

    def __repr__(self) -> str:
        return f"Integer({self})"


Integer.scalar_types = (Integer,)
