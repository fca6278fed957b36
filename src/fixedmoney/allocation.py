"""
allocation.py — Proportional allocation of scaled integer amounts

================================================================================
ALGORITHM
================================================================================

Given an integer amount A and ratios r_1..r_n with total T = sum(r_i):

1. Ideal shares:    ideal_i = A * r_i / T            (exact rationals)
2. Rounded shares:  share_i = round(ideal_i)         (half away from zero)
3. Remainder:       R = A - sum(share_i)

Rounding each share independently can create or destroy a few units. When
R != 0 the shares are walked in sorted order, one unit at a time, wrapping
around until R reaches zero:

- R < 0 (over-allocated): DESCENDING amount, each share gives back a unit,
  starting from the largest.
- R > 0 (under-allocated): ASCENDING amount, each share receives a unit,
  starting from the smallest.

Among shares of equal amount, the later position is adjusted first. Shares
currently at zero are skipped.

A share is also skipped when the unit would put it more than one unit away
from its ideal value. If the walk cannot place the whole remainder that way,
zero shares of positive ratio take the rest, in the same order. Every share
rounded against the adjustment carries at most 1/2 unit of error, so there
are always enough of them to finish.

================================================================================
GUARANTEES
================================================================================

- sum(result) == A, exactly
- |result_i - ideal_i| <= 1 for every i
- result_i has the sign of A or is zero
- a zero ratio always yields a zero share
- len(result) == len(ratios), in ratio order

================================================================================
"""

from __future__ import annotations
from fractions import Fraction
from typing import Sequence
import logging

from .errors import InvalidArgument
from .rounding import RoundingMode, apply_rounding, to_fraction


logger = logging.getLogger(__name__)

# Upper bound on the number of shares per allocation
MAX_ALLOCATION_PARTS: int = 10_000


def _validate_ratios(ratios: Sequence) -> list[Fraction]:
    if isinstance(ratios, (str, bytes)):
        raise InvalidArgument("ratios must be a sequence of numbers, not a string")
    weights = [to_fraction(r) for r in ratios]

    if not weights:
        raise InvalidArgument("ratios cannot be empty")
    if len(weights) > MAX_ALLOCATION_PARTS:
        raise InvalidArgument(f"ratios exceed the limit of {MAX_ALLOCATION_PARTS}")
    if any(w < 0 for w in weights):
        raise InvalidArgument("ratios cannot contain negative values")
    if sum(weights) == 0:
        raise InvalidArgument("sum of ratios must be greater than 0")

    return weights


def _adjustment_order(shares: list[int], step: int) -> list[int]:
    """
    Indices in the order they absorb the remainder.

    step < 0: largest first; step > 0: smallest first. Ties go to the later index.
    """
    if step < 0:
        return sorted(range(len(shares)), key=lambda i: (shares[i], i), reverse=True)
    return sorted(range(len(shares)), key=lambda i: (shares[i], -i))


def allocate_scaled(scaled_amount: int, ratios: Sequence) -> list[int]:
    """
    Split an integer amount proportionally to ratios.

    Args:
        scaled_amount: amount in the smallest unit (e.g. cents)
        ratios: non-negative numbers, at least one positive

    Returns:
        One integer share per ratio, in ratio order, summing to scaled_amount

    Raises:
        InvalidArgument: empty, oversized, negative or zero-sum ratios
    """
    weights = _validate_ratios(ratios)
    total = sum(weights)

    ideals = [Fraction(scaled_amount) * w / total for w in weights]
    shares = [apply_rounding(ideal, RoundingMode.HALF_UP) for ideal in ideals]

    remainder = scaled_amount - sum(shares)
    if remainder == 0:
        return shares

    step = 1 if remainder > 0 else -1
    order = _adjustment_order(shares, step)
    adjusted: list[int] = []

    def _within_one_unit(i: int) -> bool:
        return abs(shares[i] + step - ideals[i]) <= 1

    # Wrapping walk over the non-zero shares.
    while remainder != 0:
        moved = False
        for i in order:
            if remainder == 0:
                break
            if shares[i] == 0 or not _within_one_unit(i):
                continue
            shares[i] += step
            remainder -= step
            adjusted.append(i)
            moved = True
        if not moved:
            break

    # Whatever is left goes to zero shares of positive ratio.
    for i in order:
        if remainder == 0:
            break
        if shares[i] != 0 or ideals[i] == 0 or not _within_one_unit(i):
            continue
        shares[i] += step
        remainder -= step
        adjusted.append(i)

    logger.debug(
        "allocate %d over %d ratios: moved %+d unit(s) at indices %s",
        scaled_amount, len(weights), step * len(adjusted), adjusted,
    )
    return shares
