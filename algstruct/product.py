"""
Direct products of two algebraic structures.

A direct product (a, b) supports exactly the capabilities its two component
types share, applied component-wise:

    DirectProductGroup      add, negate, subtract
    DirectProductRing       + multiply, one
    DirectProductModule     + scale (by a scalar ring both components accept)
    DirectProductAlgebra    ring and module together

direct_product(A, B) picks the richest variant and binds the component
types, so zero() and one() can be built without sample values:

    QQ2 = direct_product(Rational, Rational)
    v = QQ2(Rational(1, 2), Rational(3, 5))
    v.scale(Integer(6))                          # (3, 18/5)
"""

from functools import lru_cache
from typing import Optional, Tuple

from .config import DEFAULT_FORMAT, FormatConfig
from .structures import AdditiveGroup, Multiplicative, Scalable, is_group, is_ring


class DirectProductGroup(AdditiveGroup):
    """Ordered pair of group elements with component-wise operations."""

    first_type: type = None
    second_type: type = None

    def __init__(self, first=None, second=None):
        self.first_type = type(self).first_type or type(first)
        self.second_type = type(self).second_type or type(second)
        if first is None or second is None:
            if type(self).first_type is None:
                raise TypeError(
                    f"{type(self).__name__} needs both components; "
                    "use direct_product() to bind component types"
                )
        self._first = self._lift(first, self.first_type)
        self._second = self._lift(second, self.second_type)

    @staticmethod
    def _lift(value, component_type: type):
        if value is None:
            return component_type.zero()
        if isinstance(value, component_type):
            return value.copy()
        lifted = component_type.zero()._coerce(value)
        if lifted is NotImplemented:
            raise TypeError(
                f"Cannot use {type(value).__name__} as {component_type.__name__}"
            )
        return lifted.copy()

    @classmethod
    def _check_bound(cls) -> None:
        if cls.first_type is None or cls.second_type is None:
            raise TypeError(f"{cls.__name__} has no component types; use direct_product()")

    @classmethod
    def zero(cls):
        cls._check_bound()
        return cls(cls.first_type.zero(), cls.second_type.zero())

    @property
    def first(self):
        return self._first.copy()

    @first.setter
    def first(self, value) -> None:
        self._first = self._lift(value, self.first_type)

    @property
    def second(self):
        return self._second.copy()

    @second.setter
    def second(self, value) -> None:
        self._second = self._lift(value, self.second_type)

    def _same_components(self, other) -> bool:
        return (isinstance(other, DirectProductGroup)
                and other.first_type is self.first_type
                and other.second_type is self.second_type)

    def _coerce(self, other):
        if self._same_components(other):
            return other
        return NotImplemented

    def copy(self):
        return type(self)(self._first, self._second)

    def assign(self, other) -> None:
        if other is not self:
            self._first.assign(other._first)
            self._second.assign(other._second)

    def add(self, other) -> None:
        if other is self:
            other = other.copy()
        self._first.add(other._first)
        self._second.add(other._second)

    def set_zero(self) -> None:
        self._first.set_zero()
        self._second.set_zero()

    def is_zero(self) -> bool:
        return self._first.is_zero() and self._second.is_zero()

    def negate(self) -> None:
        self._first.negate()
        self._second.negate()

    def subtract(self, other) -> None:
        if other is self:
            self.set_zero()
            return
        self._first.subtract(other._first)
        self._second.subtract(other._second)

    def __eq__(self, other) -> bool:
        if not self._same_components(other):
            return NotImplemented
        return self._first == other._first and self._second == other._second

    __hash__ = None

    def format(self, config: FormatConfig = DEFAULT_FORMAT) -> str:
        left, right = config.pair_brackets
        return f"{left}{self._first}{config.pair_separator}{self._second}{right}"

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"{type(self).__name__}{self}"


class DirectProductRing(DirectProductGroup, Multiplicative):
    """Direct product of two rings."""

    @classmethod
    def one(cls):
        cls._check_bound()
        return cls(cls.first_type.one(), cls.second_type.one())

    def multiply(self, other) -> None:
        if other is self:
            other = other.copy()
        self._first.multiply(other._first)
        self._second.multiply(other._second)

    def set_one(self) -> None:
        self._first.set_one()
        self._second.set_one()

    def is_one(self) -> bool:
        return self._first.is_one() and self._second.is_one()


class DirectProductModule(DirectProductGroup, Scalable):
    """Direct product of two modules over a common scalar ring."""

    def scale(self, scalar) -> None:
        self._check_scalar(scalar)
        self._first.scale(scalar)
        self._second.scale(scalar)


class DirectProductAlgebra(DirectProductRing, Scalable):
    """Direct product of two algebras over a common scalar ring."""

    def scale(self, scalar) -> None:
        self._check_scalar(scalar)
        self._first.scale(scalar)
        self._second.scale(scalar)


def _shared_scalars(first_type: type, second_type: type) -> Tuple[type, ...]:
    if not (issubclass(first_type, Scalable) and issubclass(second_type, Scalable)):
        return ()
    return tuple(
        s for s in first_type.scalar_types
        if any(issubclass(s, t) for t in second_type.scalar_types)
    )


@lru_cache(maxsize=None)
def direct_product(first_type: type, second_type: type,
                   scalar_type: Optional[type] = None) -> type:
    """Bind a direct product class to its component types.

    Args:
        first_type: Type of the first component (a group at least).
        second_type: Type of the second component.
        scalar_type: Restrict scaling to this ring.  Defaults to every
            scalar ring both components accept.

    Returns:
        A subclass of the richest DirectProduct* variant both components
        support.
    """
    if not (is_group(first_type) and is_group(second_type)):
        raise TypeError(
            f"Direct product needs two groups, got "
            f"{first_type.__name__} and {second_type.__name__}"
        )
    scalars = _shared_scalars(first_type, second_type)
    if scalar_type is not None:
        if not any(issubclass(scalar_type, s) for s in scalars):
            raise TypeError(
                f"{scalar_type.__name__} does not scale both "
                f"{first_type.__name__} and {second_type.__name__}"
            )
        scalars = (scalar_type,)

    ring = is_ring(first_type) and is_ring(second_type)
    if ring and scalars:
        base = DirectProductAlgebra
    elif ring:
        base = DirectProductRing
    elif scalars:
        base = DirectProductModule
    else:
        base = DirectProductGroup

    name = f"DirectProduct[{first_type.__name__}, {second_type.__name__}]"
    return type(name, (base,), {
        "first_type": first_type,
        "second_type": second_type,
        "scalar_types": scalars,
        "__module__": __name__,
    })


def pair(first, second):
    """Build a direct product element from two values."""
    return direct_product(type(first), type(second))(first, second)
