"""
Algebraic capability traits.

Each concrete number type composes the traits it supports instead of
inheriting from a tower of structures:

    Natural    AdditiveMonoid, Multiplicative
    Integer    AdditiveGroup, Multiplicative, Scalable[Integer]
    Rational   AdditiveGroup, Multiplicative, Invertible, Scalable[Integer, Rational]
    Polynomial AdditiveGroup, Multiplicative, Scalable[R]

Every trait has two forms of each operation:
  - a mutating method on an owned value (add, multiply, negate, ...)
  - an operator that copies first and leaves its operands untouched

Generic layers never build a coefficient by calling a type with no
arguments; they ask the type for zero() / one().
"""

from abc import ABC, abstractmethod
from typing import Tuple


class AdditiveMonoid(ABC):
    """Closed, associative addition with a zero element."""

    @classmethod
    @abstractmethod
    def zero(cls):
        """Return a new additive identity of this type."""

    @abstractmethod
    def copy(self):
        """Return an independent deep copy."""

    @abstractmethod
    def assign(self, other) -> None:
        """Overwrite self with a deep copy of other's value."""

    @abstractmethod
    def add(self, other) -> None:
        """self += other (in place)."""

    @abstractmethod
    def set_zero(self) -> None:
        pass

    @abstractmethod
    def is_zero(self) -> bool:
        pass

    def _coerce(self, other):
        """Bring an operand to this value's type, or NotImplemented.

        Native ints go through the type's constructor.  Subclasses with
        extra constructor parameters (ring, modulus) override this.
        """
        if isinstance(other, type(self)):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return type(self)(other)
        return NotImplemented

    def __add__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        result = self.copy()
        result.add(other)
        return result

    def __radd__(self, other):
        return self.__add__(other)

    def __bool__(self) -> bool:
        return not self.is_zero()

    # Values are mutable in place, so they must not be hashed.
    __hash__ = None


class AdditiveGroup(AdditiveMonoid):
    """Additive monoid where every element has a negative."""

    @abstractmethod
    def negate(self) -> None:
        """self = -self (in place)."""

    def subtract(self, other) -> None:
        """self -= other (in place)."""
        negative = other.copy()
        negative.negate()
        self.add(negative)

    def __neg__(self):
        result = self.copy()
        result.negate()
        return result

    def __sub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        result = self.copy()
        result.subtract(other)
        return result

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        result = other.copy()
        result.subtract(self)
        return result


class Multiplicative(ABC):
    """Associative multiplication with a unit element."""

    @classmethod
    @abstractmethod
    def one(cls):
        """Return a new multiplicative identity of this type."""

    @abstractmethod
    def multiply(self, other) -> None:
        """self *= other (in place)."""

    @abstractmethod
    def set_one(self) -> None:
        pass

    @abstractmethod
    def is_one(self) -> bool:
        pass

    def __mul__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        result = self.copy()
        result.multiply(other)
        return result

    def __rmul__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        result = other.copy()
        result.multiply(self)
        return result


class Invertible(ABC):
    """Multiplicative inverses for every non-zero element."""

    @abstractmethod
    def invert(self) -> None:
        """self = 1 / self.  Raises ZeroDivisionError on zero."""

    def divide(self, other) -> None:
        """self /= other.  Raises ZeroDivisionError if other is zero."""
        if other.is_zero():
            raise ZeroDivisionError(f"{type(self).__name__} division by zero")
        inverse = other.copy()
        inverse.invert()
        self.multiply(inverse)

    def inverse(self):
        result = self.copy()
        result.invert()
        return result

    def __truediv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        result = self.copy()
        result.divide(other)
        return result

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        result = other.copy()
        result.divide(self)
        return result


class Scalable(ABC):
    """Closed under scaling by elements of a designated ring."""

    scalar_types: Tuple[type, ...] = ()

    @abstractmethod
    def scale(self, scalar) -> None:
        """self = scalar * self (in place)."""

    def scaled(self, scalar):
        result = self.copy()
        result.scale(scalar)
        return result

    def _check_scalar(self, scalar) -> None:
        if not isinstance(scalar, self.scalar_types):
            accepted = ", ".join(t.__name__ for t in self.scalar_types)
            raise TypeError(
                f"{type(self).__name__} cannot be scaled by "
                f"{type(scalar).__name__} (accepts: {accepted})"
            )


class SubStructure(ABC):
    """A normal sub-group / ideal / sub-module of a parent structure.

    An instance holds one element of the sub-structure.  The classmethods
    answer questions about arbitrary parent elements without touching any
    instance.
    """

    parent_type: type = None

    @classmethod
    @abstractmethod
    def contains(cls, value) -> bool:
        """True if the parent element lies in the sub-structure."""

    @classmethod
    @abstractmethod
    def reduce(cls, value):
        """Canonical representative of value's coset (a new parent element)."""

    def from_parent(self, value) -> bool:
        """Store value if it belongs to the sub-structure.

        Returns False and leaves self unchanged otherwise.
        """
        if not self.contains(value):
            return False
        self._element = value.copy()
        return True

    def to_parent(self):
        return self._element.copy()


class Ideal(SubStructure):
    """Sub-structure of a commutative ring absorbing multiplication by any
    ring element; quotienting by it yields a ring."""


# ---------------------------------------------------------------------------
# Capability predicates
# ---------------------------------------------------------------------------

def is_monoid(t: type) -> bool:
    return isinstance(t, type) and issubclass(t, AdditiveMonoid)


def is_group(t: type) -> bool:
    return isinstance(t, type) and issubclass(t, AdditiveGroup)


def is_ring(t: type) -> bool:
    return is_group(t) and issubclass(t, Multiplicative)


def is_field(t: type) -> bool:
    return is_ring(t) and issubclass(t, Invertible)


def is_module_over(t: type, ring: type) -> bool:
    """True if t is a group whose elements can be scaled by ring elements."""
    if not (is_group(t) and issubclass(t, Scalable)):
        return False
    return any(issubclass(ring, s) for s in t.scalar_types)


def is_algebra_over(t: type, ring: type) -> bool:
    return is_ring(t) and is_module_over(t, ring)


def is_vector_space_over(t: type, field: type) -> bool:
    return is_field(field) and is_module_over(t, field)
