"""
Conversion between algstruct values and SymPy objects.

Example:
    import sympy as sp
    from algstruct.sympy_bridge import to_sympy, from_sympy

    to_sympy(Rational(5, 6))                     # sp.Rational(5, 6)
    from_sympy(sp.Poly(x**2 + 1, x), Rational)   # FieldPolynomial[Rational]
"""

from typing import Optional

try:
    import sympy as sp
    HAS_SYMPY = True
except ImportError:
    HAS_SYMPY = False
    sp = None

from .integer import Integer
from .natural import Natural
from .polynomial import Polynomial, field_polynomial_ring, polynomial_ring
from .rational import Rational
from .structures import is_field

# Default indeterminate for polynomials going out to SymPy.
SYMBOL_NAME = "x"


def _require_sympy() -> None:
    if not HAS_SYMPY:
        raise ImportError("sympy is required for algstruct.sympy_bridge")


def to_sympy(value, symbol: Optional["sp.Symbol"] = None):
    """Convert a Natural, Integer, Rational or Polynomial to SymPy.

    Polynomials become sp.Poly in `symbol` (default x); their coefficients
    must themselves be convertible.
    """
    _require_sympy()
    if isinstance(value, (Natural, Integer)):
        return sp.Integer(int(value))
    if isinstance(value, Rational):
        return sp.Rational(int(value.numerator), int(value.denominator))
    if isinstance(value, Polynomial):
        symbol = symbol or sp.Symbol(SYMBOL_NAME)
        coefficients = [to_sympy(c) for c in reversed(value.coefficients)]
        if not coefficients:
            coefficients = [sp.Integer(0)]
        return sp.Poly(coefficients, symbol)
    raise TypeError(f"No SymPy conversion for {type(value).__name__}")


def _number(expr):
    expr = sp.sympify(expr)
    if expr.is_Integer:
        return Integer(int(expr))
    if expr.is_Rational:
        return Rational(int(expr.p), int(expr.q))
    raise ValueError(f"{expr} is not an exact rational number")


def from_sympy(expr, ring: Optional[type] = None):
    """Convert a SymPy number or univariate polynomial.

    Args:
        expr: sp.Integer, sp.Rational, a native int, or a univariate
            expression / sp.Poly.
        ring: Coefficient ring for polynomial results.  Defaults to
            Rational.  Field rings give a FieldPolynomial.

    Returns:
        Integer or Rational for numbers, otherwise a polynomial over `ring`.

    Raises:
        ValueError: multivariate input or non-rational coefficients.
    """
    _require_sympy()
    if not isinstance(expr, sp.Poly):
        expr = sp.sympify(expr)
        if expr.is_Number:
            return _number(expr)
        free = expr.free_symbols
        if len(free) != 1:
            raise ValueError(f"Expected a univariate polynomial, got {expr}")
        expr = sp.Poly(expr, *free)
    if len(expr.gens) != 1:
        raise ValueError(f"Expected a univariate polynomial, got {expr}")

    ring = ring or Rational
    cls = field_polynomial_ring(ring) if is_field(ring) else polynomial_ring(ring)
    coefficients = []
    for c in reversed(expr.all_coeffs()):
        number = _number(c)
        lifted = ring.zero()._coerce(number)
        if lifted is NotImplemented:
            raise ValueError(f"Coefficient {c} does not fit in {ring.__name__}")
        coefficients.append(lifted)
    return cls(coefficients)
