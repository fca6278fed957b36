#!/usr/bin/env python3
"""
allocation_demo.py — Splitting money without losing a cent

================================================================================
THE BUG
================================================================================

    >>> [round(0.10 / 4, 2) for _ in range(4)]
    [0.03, 0.03, 0.03, 0.03]    # 0.12 handed out of 0.10

Rounding each share on its own creates or destroys money.

================================================================================
THE FIX
================================================================================

    from fixedmoney import Money

    parts = Money.of("0.10").allocate([1, 1, 1, 1])
    # [0.03, 0.03, 0.02, 0.02]
    assert sum(parts, Money.zero()) == Money.of("0.10")

================================================================================
"""

import logging
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from fixedmoney import InvalidArgument, Money, PrecisionMismatch, RoundingMode


def demonstrate_bug():
    """Show the naive per-share rounding bug."""
    print("=" * 60)
    print("THE BUG")
    print("=" * 60)
    print()
    shares = [round(0.10 / 4, 2) for _ in range(4)]
    print(f"Naive split of 0.10 in 4: {shares}")
    print(f"Sum:                      {sum(shares)}")
    print()


def demonstrate_allocation():
    """Show exact allocation by ratio."""
    print("=" * 60)
    print("ALLOCATION")
    print("=" * 60)
    print()

    amount = Money.of("0.10")
    for ratios in ([1, 1], [3, 2, 1], [2, 3, 1], [1, 1, 1, 1]):
        parts = amount.allocate(ratios)
        total = sum(parts, Money.zero())
        print(f"  {amount} by {ratios!s:<14} -> {[str(p) for p in parts]}  sum={total}")
    print()

    debt = Money.of("-0.10")
    print(f"  {debt} by [1, 1, 1, 1]   -> {[str(p) for p in debt.allocate([1, 1, 1, 1])]}")
    print()

    budget = Money.of(2026)
    monthly = budget.allocate_to(12)
    print(f"Budget {budget} over 12 months:")
    for i, m in enumerate(monthly, 1):
        print(f"  Month {i:2d}: {m}")
    print(f"  Sum: {sum(monthly, Money.zero())}")
    print()


def demonstrate_rounding():
    """Show explicit rounding modes."""
    print("=" * 60)
    print("ROUNDING MODES")
    print("=" * 60)
    print()

    price = Money.of("0.05")
    for mode in RoundingMode:
        print(f"  {price} / 2 with {mode.name:<9} -> {price.divide(2, mode)}")
    print()

    print(">>> Money.of(1).divide(0)")
    try:
        Money.of(1).divide(0)
    except InvalidArgument as e:
        print(f"InvalidArgument: {e}")
    print()


def demonstrate_precision():
    """Show the precision mismatch policy."""
    print("=" * 60)
    print("PRECISION")
    print("=" * 60)
    print()

    cents = Money.of("1.25")
    mills = Money.of("0.001", precision=3)

    print(">>> cents + mills")
    try:
        cents + mills
    except PrecisionMismatch as e:
        print(f"PrecisionMismatch: {e}")
    print()

    print(">>> cents.change_precision(3) + mills")
    print(cents.change_precision(3) + mills)
    print()


def main():
    """Run all demonstrations."""
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    demonstrate_bug()
    demonstrate_allocation()
    demonstrate_rounding()
    demonstrate_precision()


if __name__ == "__main__":
    main()
