"""
Finite cyclic groups Z/mZ under addition.

The modulus is either passed per instance, or fixed for a whole class with
cyclic_group(m):

    CyclicGroup(2000, modulus=1597)     # 403
    C1597 = cyclic_group(1597)
    C1597(1597)                          # 0
"""

from functools import lru_cache
from typing import Optional, Union

from .logging import get_logger
from .natural import Natural
from .structures import AdditiveGroup

logger = get_logger(__name__)


class CyclicGroup(AdditiveGroup):
    """Natural value held in [0, modulus)."""

    fixed_modulus: Optional[int] = None

    def __init__(self, value: Union[int, Natural, "CyclicGroup"] = 0,
                 modulus: Union[int, Natural, None] = None):
        if isinstance(value, CyclicGroup):
            if modulus is None:
                modulus = value._modulus
            value = value._value
        if modulus is None:
            modulus = type(self).fixed_modulus
        if modulus is None:
            raise TypeError("CyclicGroup needs a modulus; pass modulus= or use cyclic_group()")

        self._modulus = Natural(modulus)
        if self._modulus.is_zero():
            raise ValueError("CyclicGroup modulus must be positive")

        if isinstance(value, int) and value < 0:
            # -v is congruent to m - (v mod m)
            self._value = Natural(-value)
            self._reduce()
            self._value = self._modulus.difference(self._value).magnitude
        else:
            self._value = Natural(value)
        self._reduce()

    @classmethod
    def zero(cls) -> "CyclicGroup":
        if cls.fixed_modulus is None:
            raise TypeError(f"{cls.__name__} has no fixed modulus; use cyclic_group()")
        return cls(0)

    @property
    def value(self) -> Natural:
        return self._value.copy()

    @property
    def modulus(self) -> Natural:
        return self._modulus.copy()

    def _reduce(self) -> None:
        if self._value >= self._modulus:
            logger.debug("reduce %s mod %s", self._value, self._modulus)
            self._value.divide_with_remainder(self._modulus)

    def _check_modulus(self, other: "CyclicGroup") -> None:
        if self._modulus != other._modulus:
            raise ValueError(
                f"Cyclic group moduli differ: {self._modulus} vs {other._modulus}"
            )

    def _coerce(self, other):
        if isinstance(other, CyclicGroup):
            return other
        if isinstance(other, (int, Natural)) and not isinstance(other, bool):
            return type(self)(other, modulus=self._modulus)
        return NotImplemented

    def copy(self) -> "CyclicGroup":
        return type(self)(self._value, modulus=self._modulus)

    def assign(self, other: "CyclicGroup") -> None:
        if other is not self:
            self._modulus.assign(other._modulus)
            self._value.assign(other._value)

    def add(self, other: "CyclicGroup") -> None:
        self._check_modulus(other)
        self._value.add(other._value)
        self._reduce()

    def set_zero(self) -> None:
        self._value.set_zero()

    def is_zero(self) -> bool:
        return self._value.is_zero()

    def negate(self) -> None:
        self._value.absolute_difference(self._modulus)
        self._reduce()

    def subtract(self, other: "CyclicGroup") -> None:
        self._check_modulus(other)
        if other._value > self._value:
            self._value.add(self._modulus)
        self._value.absolute_difference(other._value)

    def __eq__(self, other) -> bool:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._modulus == other._modulus and self._value == other._value

    __hash__ = None

    def __int__(self) -> int:
        return int(self._value)

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"CyclicGroup({self._value}, modulus={self._modulus})"


@lru_cache(maxsize=None)
def cyclic_group(modulus: int) -> type:
    """CyclicGroup class with its modulus fixed at class level."""
    if modulus <= 0:
        raise ValueError(f"Cyclic group modulus must be positive, got {modulus}")
    logger.debug("binding cyclic group of order %d", modulus)
    return type(f"CyclicGroup[{modulus}]", (CyclicGroup,),
                {"fixed_modulus": modulus, "__module__": __name__})
