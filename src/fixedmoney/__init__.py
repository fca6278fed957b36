"""
fixedmoney — Fixed-point Money with exact proportional allocation

Monetary amounts stored as integers scaled by 10 ** precision, so that
arithmetic never accumulates floating-point error and allocation never
creates or destroys a single unit.

================================================================================
QUICK START
================================================================================

Basic usage:

    from fixedmoney import Money, RoundingMode

    # Create money (rounded once, half away from zero)
    price = Money.of("0.10")

    # Allocate by ratio (sum ALWAYS equals original)
    parts = price.allocate([3, 2, 1])        # [0.05, 0.03, 0.02]
    total = sum(parts, Money.zero())         # == price

    # Rounding is explicit where it happens
    half = Money.of("0.05").multiply("0.5", RoundingMode.HALF_EVEN)   # 0.02

Precision is part of the value:

    Money.of(1, precision=2) + Money.of(1, precision=3)   # PrecisionMismatch
    Money.of(1, precision=2).change_precision(3)          # 1.000

================================================================================
"""

import logging

from .core import (
    DEFAULT_PRECISION,
    Money,
)
from .rounding import (
    DEFAULT_ROUNDING,
    RoundingMode,
)
from .allocation import (
    MAX_ALLOCATION_PARTS,
    allocate_scaled,
)
from .errors import (
    InvalidArgument,
    MoneyError,
    PrecisionMismatch,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    # Core
    "Money",
    "RoundingMode",
    "DEFAULT_PRECISION",
    "DEFAULT_ROUNDING",
    # Allocation
    "allocate_scaled",
    "MAX_ALLOCATION_PARTS",
    # Errors
    "MoneyError",
    "InvalidArgument",
    "PrecisionMismatch",
]
