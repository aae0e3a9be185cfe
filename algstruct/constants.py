"""
Numeric constants for the multi-precision engine.

Naturals are stored as little-endian sequences of 16-bit limbs:
  value = sum(limb[i] * LIMB_BASE**i)

Products of two limbs fit in 32 bits, so a schoolbook convolution can be
accumulated in uint64 without overflow for any operand length below 2^32
limbs.  Carries are then propagated in Python ints.
"""

from typing import Final

import numpy as np

# Limb geometry
LIMB_BITS: Final[int] = 16
LIMB_BASE: Final[int] = 1 << LIMB_BITS
LIMB_MASK: Final[int] = LIMB_BASE - 1

# Storage dtype for limbs, and the wide accumulator for convolution
LIMB_DTYPE = np.uint16
ACC_DTYPE = np.uint64

# Text rendering
DECIMAL_RADIX: Final[int] = 10
DECIMAL_DIGITS: Final[str] = "0123456789"

# Environment
LOG_LEVEL_ENV: Final[str] = "ALGSTRUCT_LOG_LEVEL"
LOG_FORMAT: Final[str] = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
