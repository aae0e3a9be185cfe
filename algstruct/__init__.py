"""
algstruct: exact arbitrary-precision arithmetic and composable algebraic
structures.

Natural numbers are stored as 16-bit limbs and every layer above them
(Integer, Rational, polynomials, direct products, quotients, cyclic groups)
is built only from the operations of the layer below.
"""

__version__ = "0.1.0"

from .config import DEFAULT_FORMAT, FormatConfig
from .cyclic import CyclicGroup, cyclic_group
from .integer import Integer
from .natural import Natural, gcd
from .polynomial import (
    FieldPolynomial, Polynomial, field_polynomial_ring, polynomial_gcd,
    polynomial_ring,
)
from .product import (
    DirectProductAlgebra, DirectProductGroup, DirectProductModule,
    DirectProductRing, direct_product, pair,
)
from .quotient import (
    IdealXSquaredPlus1, PrincipalIdeal, QuotientGroup, QuotientModule,
    QuotientRing, gaussian_rationals, ideal_x_squared_plus_one,
    integer_multiples, integers_modulo, principal_ideal, quotient_structure,
)
from .rational import Rational
from .structures import (
    AdditiveGroup, AdditiveMonoid, Ideal, Invertible, Multiplicative,
    Scalable, SubStructure, is_algebra_over, is_field, is_group,
    is_module_over, is_monoid, is_ring, is_vector_space_over,
)
from .sympy_bridge import HAS_SYMPY, from_sympy, to_sympy

__all__ = [
    "__version__",
    # Numbers
    "Natural", "Integer", "Rational", "gcd",
    # Polynomials
    "Polynomial", "FieldPolynomial", "polynomial_ring",
    "field_polynomial_ring", "polynomial_gcd",
    # Composition
    "DirectProductGroup", "DirectProductRing", "DirectProductModule",
    "DirectProductAlgebra", "direct_product", "pair",
    "PrincipalIdeal", "IdealXSquaredPlus1", "principal_ideal",
    "ideal_x_squared_plus_one", "integer_multiples",
    "QuotientGroup", "QuotientRing", "QuotientModule", "quotient_structure",
    "gaussian_rationals", "integers_modulo",
    "CyclicGroup", "cyclic_group",
    # Traits
    "AdditiveMonoid", "AdditiveGroup", "Multiplicative", "Invertible",
    "Scalable", "SubStructure", "Ideal",
    "is_monoid", "is_group", "is_ring", "is_field", "is_module_over",
    "is_algebra_over", "is_vector_space_over",
    # Config / interop
    "FormatConfig", "DEFAULT_FORMAT",
    "to_sympy", "from_sympy", "HAS_SYMPY",
]
