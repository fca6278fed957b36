"""
rounding.py — Exact number coercion and half-rounding strategies

All rounding in fixedmoney happens here, on exact rationals. Floats are
read through their shortest decimal representation before any arithmetic,
so 0.1 means one tenth and not 0.1000000000000000055511151231257827.
"""

from __future__ import annotations
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from numbers import Rational
import math

from .errors import InvalidArgument


HALF = Fraction(1, 2)


class RoundingMode(Enum):
    """
    Tie-breaking strategies for rounding to an integer.

    Only exact ties (fractional part == 1/2) are affected; every other value
    goes to the nearest integer regardless of mode.

    - HALF_UP: ties away from zero (2.5 -> 3, -2.5 -> -3)
    - HALF_DOWN: ties toward zero (2.5 -> 2, -2.5 -> -2)
    - HALF_EVEN: ties to the even neighbour, banker's rounding (2.5 -> 2, 3.5 -> 4)
    - HALF_ODD: ties to the odd neighbour (2.5 -> 3, 3.5 -> 3)
    """
    HALF_UP = "half_up"
    HALF_DOWN = "half_down"
    HALF_EVEN = "half_even"
    HALF_ODD = "half_odd"


DEFAULT_ROUNDING = RoundingMode.HALF_UP


def to_fraction(value: int | float | Decimal | Fraction | str) -> Fraction:
    """
    Convert a numeric value to an exact Fraction.

    Raises:
        InvalidArgument: for NaN, infinities and non-numeric input
    """
    if isinstance(value, bool):
        raise InvalidArgument(f"Not a number: {value!r}")
    if isinstance(value, Rational):
        return Fraction(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidArgument(f"Not a finite number: {value!r}")
        value = Decimal(repr(value))
    try:
        return Fraction(value)
    except (TypeError, ValueError, OverflowError, ArithmeticError) as exc:
        raise InvalidArgument(f"Not a finite number: {value!r}") from exc


def apply_rounding(value: Fraction, mode: RoundingMode = DEFAULT_ROUNDING) -> int:
    """Round an exact rational to an integer using the given tie strategy."""

    if not isinstance(mode, RoundingMode):
        raise InvalidArgument(f"Unknown rounding mode: {mode!r}")

    floor = math.floor(value)
    fraction = value - floor

    if fraction < HALF:
        return floor
    if fraction > HALF:
        return floor + 1

    def _half_up(f: int) -> int:
        return f + 1 if value > 0 else f

    def _half_down(f: int) -> int:
        return f if value > 0 else f + 1

    def _half_even(f: int) -> int:
        return f if f % 2 == 0 else f + 1

    def _half_odd(f: int) -> int:
        return f if f % 2 == 1 else f + 1

    strategies = {
        RoundingMode.HALF_UP: _half_up,
        RoundingMode.HALF_DOWN: _half_down,
        RoundingMode.HALF_EVEN: _half_even,
        RoundingMode.HALF_ODD: _half_odd,
    }

    return strategies[mode](floor)
