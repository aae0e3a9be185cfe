"""
Arbitrary-precision natural numbers.

A Natural is a little-endian array of 16-bit limbs with no trailing
(most-significant) zero limb; the empty array is zero.

    value = sum(limb[i] * 65536**i)

All arithmetic is exact and schoolbook:
  - add:      limb-wise sum with carry propagation
  - multiply: full convolution accumulated in uint64, then carry propagation
  - divide:   binary long division by shift-and-subtract
  - gcd:      Euclid on top of divide_with_remainder

Mutating methods (add, multiply, shift_left, shift_right,
divide_with_remainder, absolute_difference) work in place on the receiver.
Operators copy first.  Every constructor copies its limb array, so two
Naturals never share storage.
"""

from typing import List, Tuple, Union

import numpy as np

from .constants import (
    LIMB_BITS, LIMB_BASE, LIMB_MASK, LIMB_DTYPE, ACC_DTYPE,
    DECIMAL_RADIX, DECIMAL_DIGITS,
)
from .structures import AdditiveMonoid, Multiplicative


def _trim(limbs: np.ndarray) -> np.ndarray:
    """Drop trailing zero limbs."""
    nonzero = np.flatnonzero(limbs)
    if nonzero.size == 0:
        return np.zeros(0, dtype=LIMB_DTYPE)
    return limbs[:nonzero[-1] + 1]


def _propagate(values: List[int]) -> np.ndarray:
    """Carry-propagate wide column sums into a normalized limb array."""
    limbs = []
    carry = 0
    for v in values:
        carry += v
        limbs.append(carry & LIMB_MASK)
        carry >>= LIMB_BITS
    while carry:
        limbs.append(carry & LIMB_MASK)
        carry >>= LIMB_BITS
    return _trim(np.array(limbs, dtype=LIMB_DTYPE))


class Natural(AdditiveMonoid, Multiplicative):
    """Unsigned integer of unbounded size."""

    def __init__(self, value: Union[int, "Natural"] = 0):
        if isinstance(value, Natural):
            self._limbs = value._limbs.copy()
            return
        if not isinstance(value, (int, np.integer)):
            raise TypeError(f"Cannot build Natural from {type(value).__name__}")
        value = int(value)
        if value < 0:
            raise ValueError(f"Natural cannot hold negative value {value}")
        limbs = []
        while value > 0:
            limbs.append(value & LIMB_MASK)
            value >>= LIMB_BITS
        self._limbs = np.array(limbs, dtype=LIMB_DTYPE)

    @classmethod
    def from_limbs(cls, limbs) -> "Natural":
        """Build from least-significant-first limbs, each in [0, 65536)."""
        values = [int(v) for v in limbs]
        for v in values:
            if not 0 <= v < LIMB_BASE:
                raise ValueError(f"Limb {v} outside [0, {LIMB_BASE})")
        n = cls()
        n._limbs = _trim(np.array(values, dtype=LIMB_DTYPE))
        return n

    @classmethod
    def from_string(cls, text: str) -> "Natural":
        """Parse unsigned decimal text, e.g. "1111111110"."""
        text = text.strip()
        if not text or not all(c in DECIMAL_DIGITS for c in text):
            raise ValueError(f"Invalid decimal natural: {text!r}")
        n = cls()
        ten = cls(DECIMAL_RADIX)
        for c in text:
            n.multiply(ten)
            n.add(cls(DECIMAL_DIGITS.index(c)))
        return n

    @classmethod
    def zero(cls) -> "Natural":
        return cls(0)

    @classmethod
    def one(cls) -> "Natural":
        return cls(1)

    @property
    def limbs(self) -> Tuple[int, ...]:
        return tuple(int(v) for v in self._limbs)

    def _coerce(self, other):
        if isinstance(other, Natural):
            return other
        if isinstance(other, int) and not isinstance(other, bool) and other >= 0:
            return Natural(other)
        return NotImplemented

    def _limb(self, index: int) -> int:
        if index < len(self._limbs):
            return int(self._limbs[index])
        return 0

    # ------------------------------------------------------------------
    # Monoid / semiring interface
    # ------------------------------------------------------------------

    def copy(self) -> "Natural":
        return Natural(self)

    def assign(self, other: "Natural") -> None:
        if other is not self:
            self._limbs = other._limbs.copy()

    def add(self, other: "Natural") -> None:
        a, b = self._limbs, other._limbs
        columns = np.zeros(max(len(a), len(b)), dtype=np.uint32)
        columns[:len(a)] += a
        columns[:len(b)] += b
        self._limbs = _propagate(columns.tolist())

    def set_zero(self) -> None:
        self._limbs = np.zeros(0, dtype=LIMB_DTYPE)

    def is_zero(self) -> bool:
        return len(self._limbs) == 0

    def multiply(self, other: "Natural") -> None:
        if self.is_zero() or other.is_zero():
            self.set_zero()
            return
        columns = np.convolve(
            self._limbs.astype(ACC_DTYPE), other._limbs.astype(ACC_DTYPE)
        )
        self._limbs = _propagate(columns.tolist())

    def set_one(self) -> None:
        self._limbs = np.ones(1, dtype=LIMB_DTYPE)

    def is_one(self) -> bool:
        return len(self._limbs) == 1 and int(self._limbs[0]) == 1

    # ------------------------------------------------------------------
    # Subtraction
    # ------------------------------------------------------------------

    def _subtract_in_place(self, other: "Natural") -> None:
        """self -= other, assuming self >= other."""
        limbs = self._limbs.tolist()
        rhs = other._limbs.tolist()
        borrow = 0
        for i in range(len(limbs)):
            borrow += rhs[i] if i < len(rhs) else 0
            if limbs[i] >= borrow:
                limbs[i] -= borrow
                borrow = 0
            else:
                limbs[i] = limbs[i] + LIMB_BASE - borrow
                borrow = 1
        self._limbs = _trim(np.array(limbs, dtype=LIMB_DTYPE))

    def difference(self, other: "Natural"):
        """Signed difference self - other as an Integer."""
        from .integer import Integer

        if self < other:
            result = other.copy()
            result._subtract_in_place(self)
            return Integer(result, negative=True)
        result = self.copy()
        result._subtract_in_place(other)
        return Integer(result)

    def absolute_difference(self, other: "Natural") -> None:
        """self = |self - other| (in place)."""
        if self < other:
            result = other.copy()
            result._subtract_in_place(self)
            self._limbs = result._limbs
        else:
            self._subtract_in_place(other)

    # ------------------------------------------------------------------
    # Shifts
    # ------------------------------------------------------------------

    def shift_left(self, power: int) -> None:
        """self <<= power."""
        if power < 0:
            raise ValueError(f"Negative shift {power}")
        if power == 0 or self.is_zero():
            return
        big, small = divmod(power, LIMB_BITS)
        limbs = self._limbs.astype(np.uint32)
        if small:
            shifted = limbs << small
            spread = np.zeros(len(limbs) + 1, dtype=np.uint32)
            spread[:-1] = shifted & LIMB_MASK
            spread[1:] |= shifted >> LIMB_BITS
            limbs = spread
        if big:
            limbs = np.concatenate((np.zeros(big, dtype=np.uint32), limbs))
        self._limbs = _trim(limbs.astype(LIMB_DTYPE))

    def shift_right(self, power: int) -> None:
        """self >>= power (bits shifted out are discarded)."""
        if power < 0:
            raise ValueError(f"Negative shift {power}")
        big, small = divmod(power, LIMB_BITS)
        if big >= len(self._limbs):
            self.set_zero()
            return
        limbs = self._limbs[big:].astype(np.uint32)
        if small:
            spill = (limbs << (LIMB_BITS - small)) & LIMB_MASK
            limbs = limbs >> small
            limbs[:-1] |= spill[1:]
        self._limbs = _trim(limbs.astype(LIMB_DTYPE))

    # ------------------------------------------------------------------
    # Division
    # ------------------------------------------------------------------

    def divide_with_remainder(self, divisor: "Natural") -> "Natural":
        """Binary long division.

        Returns the quotient; self is replaced by the remainder.

        The divisor is shifted left by (len(self) - len(divisor) + 1) * 16
        bits, which is always at least self.  Walking the shift back down
        to zero, the shifted divisor is subtracted whenever it is <= the
        running remainder, and the matching quotient bit is set.

        Raises:
            ZeroDivisionError: divisor is zero.
        """
        if divisor.is_zero():
            raise ZeroDivisionError("Natural division by zero")
        if divisor > self:
            return Natural()

        max_shift = (len(self._limbs) - len(divisor._limbs) + 1) * LIMB_BITS
        shifted = divisor.copy()
        shifted.shift_left(max_shift)
        quotient = [0] * (max_shift // LIMB_BITS + 1)

        for shift in range(max_shift, -1, -1):
            if shifted <= self:
                self._subtract_in_place(shifted)
                quotient[shift // LIMB_BITS] |= 1 << (shift % LIMB_BITS)
            shifted.shift_right(1)

        return Natural.from_limbs(quotient)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def _compare(self, other: "Natural") -> int:
        a, b = self._limbs, other._limbs
        if len(a) != len(b):
            return -1 if len(a) < len(b) else 1
        differing = np.flatnonzero(a != b)
        if differing.size == 0:
            return 0
        top = differing[-1]
        return -1 if a[top] < b[top] else 1

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

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __sub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.difference(other)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other.difference(self)

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

    def __lshift__(self, power: int) -> "Natural":
        result = self.copy()
        result.shift_left(power)
        return result

    def __rshift__(self, power: int) -> "Natural":
        result = self.copy()
        result.shift_right(power)
        return result

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def bit_length(self) -> int:
        if self.is_zero():
            return 0
        return (len(self._limbs) - 1) * LIMB_BITS + self._limb(len(self._limbs) - 1).bit_length()

    def __int__(self) -> int:
        value = 0
        for limb in reversed(self._limbs.tolist()):
            value = (value << LIMB_BITS) | limb
        return value

    def __str__(self) -> str:
        # Least significant digit first, then reversed.
        if self.is_zero():
            return "0"
        digits = []
        n = self.copy()
        ten = Natural(DECIMAL_RADIX)
        while not n.is_zero():
            quotient = n.divide_with_remainder(ten)
            digits.append(DECIMAL_DIGITS[n._limb(0)])
            n = quotient
        return "".join(reversed(digits))

    def __repr__(self) -> str:
        return f"Natural({self})"


def gcd(a: Natural, b: Natural) -> Natural:
    """Greatest common divisor by Euclid's algorithm.

    gcd(0, b) = b and gcd(a, 0) = a; gcd(0, 0) = 0.
    """
    a = Natural(a)
    b = Natural(b)
    while not b.is_zero():
        a.divide_with_remainder(b)
        a, b = b, a
    return a
