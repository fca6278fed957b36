"""
core.py — Fixed-point Money value type

================================================================================
DESIGN PRINCIPLES
================================================================================

1. INTERNAL REPRESENTATION
   A signed integer scaled by 10 ** precision (cents at precision 2).
   Never a float internally. The decimal amount is derived on read.

2. IMMUTABILITY
   Frozen dataclass. Every operation returns a new instance.
   No aliasing: two references can never observe a shared mutation.

3. EXPLICIT PRECISION
   Values at different precisions are never mixed silently. Combining or
   ordering them raises PrecisionMismatch; rescale with change_precision().

4. EXPLICIT ROUNDING
   Rounding happens at construction, rescale, multiply and divide, once,
   on exact rationals. multiply() and divide() take a RoundingMode.

5. VERIFIABLE INVARIANTS
   allocate(ratios) guarantees sum(parts) == original, each part within one
   unit of its ideal proportional value.

================================================================================
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Sequence

from .allocation import MAX_ALLOCATION_PARTS, allocate_scaled
from .errors import InvalidArgument, PrecisionMismatch
from .rounding import DEFAULT_ROUNDING, RoundingMode, apply_rounding, to_fraction


DEFAULT_PRECISION: int = 2


def _check_precision(precision: int) -> None:
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise InvalidArgument(f"precision must be an int, got {type(precision).__name__}")


def _scale(precision: int) -> Fraction:
    """10 ** precision as an exact rational (negative precisions allowed)."""
    return Fraction(10) ** precision


# ==============================================================================
# MONEY CLASS
# ==============================================================================

@dataclass(frozen=True, slots=True, order=False)
class Money:
    """
    Fixed-point monetary amount.

    INVARIANTS:
    1. _scaled_amount is always int (no floating point)
    2. amount == _scaled_amount / 10 ** _precision, exactly
    3. operations between different precisions raise PrecisionMismatch
    4. allocate(ratios) guarantees sum(parts) == self

    USAGE:
        price = Money.of("0.10")
        parts = price.allocate([1, 1, 1, 1])
        # [0.03, 0.03, 0.02, 0.02], sum == price
    """
    _scaled_amount: int
    _precision: int

    MAX_ALLOCATION_PARTS = MAX_ALLOCATION_PARTS

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def of(cls, amount, precision: int = DEFAULT_PRECISION) -> Money:
        """
        Build from a decimal amount, rounding half away from zero.

        amount may be int, float, Decimal, Fraction or a numeric string.
        Floats are read through their shortest repr, so Money.of(0.285)
        is 0.29 and not 0.28.
        """
        _check_precision(precision)
        scaled = apply_rounding(to_fraction(amount) * _scale(precision), DEFAULT_ROUNDING)
        return cls(_scaled_amount=scaled, _precision=precision)

    @classmethod
    def of_scaled(cls, scaled_amount: int, precision: int = DEFAULT_PRECISION) -> Money:
        """Build from an already scaled integer (e.g. cents). No rounding."""
        _check_precision(precision)
        if isinstance(scaled_amount, bool) or not isinstance(scaled_amount, int):
            raise InvalidArgument(
                f"scaled_amount must be an int, got {type(scaled_amount).__name__}"
            )
        return cls(_scaled_amount=scaled_amount, _precision=precision)

    @classmethod
    def zero(cls, precision: int = DEFAULT_PRECISION) -> Money:
        """Zero at the given precision. Useful as the start value for sum()."""
        return cls.of_scaled(0, precision)

    def copy(self) -> Money:
        """Independent Money with the same amount and precision."""
        return Money(_scaled_amount=self._scaled_amount, _precision=self._precision)

    def change_precision(self, precision: int) -> Money:
        """
        Rescale to a new precision, rounding half away from zero.

        Money.of(12).change_precision(-1) is 10 (precision -1 counts tens).
        """
        _check_precision(precision)
        rescaled = Fraction(self._scaled_amount) * _scale(precision - self._precision)
        return Money(
            _scaled_amount=apply_rounding(rescaled, DEFAULT_ROUNDING),
            _precision=precision,
        )

    # -------------------------------------------------------------------------
    # Allocation
    # -------------------------------------------------------------------------

    def allocate(self, ratios: Sequence) -> list[Money]:
        """
        Split the amount proportionally to ratios, with EXACT sum.

        See fixedmoney.allocation for the remainder distribution rules.

        Args:
            ratios: non-negative numbers, at least one positive

        Returns:
            One Money per ratio, in ratio order, same precision as self

        Raises:
            InvalidArgument: empty, oversized, negative or zero-sum ratios
        """
        return [
            Money(_scaled_amount=share, _precision=self._precision)
            for share in allocate_scaled(self._scaled_amount, ratios)
        ]

    def allocate_to(self, n: int) -> list[Money]:
        """Split into n parts as equal as possible (allocate([1] * n))."""
        if isinstance(n, bool) or not isinstance(n, int):
            raise InvalidArgument(f"n must be an int, got {type(n).__name__}")
        if n <= 0:
            raise InvalidArgument(f"n must be > 0, got {n}")
        if n > self.MAX_ALLOCATION_PARTS:
            raise InvalidArgument(f"n exceeds the limit of {self.MAX_ALLOCATION_PARTS}")
        return self.allocate([1] * n)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, other: Money) -> Money:
        self._check_compatible(other, "add")
        return Money(
            _scaled_amount=self._scaled_amount + other._scaled_amount,
            _precision=self._precision,
        )

    def subtract(self, other: Money) -> Money:
        self._check_compatible(other, "subtract")
        return Money(
            _scaled_amount=self._scaled_amount - other._scaled_amount,
            _precision=self._precision,
        )

    def multiply(self, multiplier, rounding: RoundingMode = DEFAULT_ROUNDING) -> Money:
        """
        Multiply by any number, rounding the scaled result once.

        Money.of("0.05").multiply("0.5") is 0.03 with HALF_UP, 0.02 with HALF_EVEN.
        """
        result = Fraction(self._scaled_amount) * to_fraction(multiplier)
        return Money(_scaled_amount=apply_rounding(result, rounding), _precision=self._precision)

    def divide(self, divisor, rounding: RoundingMode = DEFAULT_ROUNDING) -> Money:
        """
        Divide by a number, rounding the scaled result once.

        Raises:
            InvalidArgument: divisor is zero, or its magnitude is below the
                smallest unit at this precision (1 / 10 ** precision)
        """
        exact = to_fraction(divisor)
        if exact == 0:
            raise InvalidArgument("Division by zero")
        if abs(exact) < 1 / _scale(self._precision):
            raise InvalidArgument(
                f"Divisor {divisor!r} is smaller than the smallest unit "
                f"at precision {self._precision}"
            )
        result = Fraction(self._scaled_amount) / exact
        return Money(_scaled_amount=apply_rounding(result, rounding), _precision=self._precision)

    def __add__(self, other: Money) -> Money:
        return self.add(other)

    def __sub__(self, other: Money) -> Money:
        return self.subtract(other)

    def __neg__(self) -> Money:
        return Money(_scaled_amount=-self._scaled_amount, _precision=self._precision)

    def __abs__(self) -> Money:
        return Money(_scaled_amount=abs(self._scaled_amount), _precision=self._precision)

    def __mul__(self, factor: int) -> Money:
        """
        Exact multiplication by an int (quantity).

        For fractional factors use multiply(), which takes a rounding mode.
        """
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise TypeError(
                f"Money can only be multiplied by int (quantity), "
                f"not {type(factor).__name__}. Use multiply() for other factors."
            )
        return Money(_scaled_amount=self._scaled_amount * factor, _precision=self._precision)

    def __rmul__(self, factor: int) -> Money:
        return self.__mul__(factor)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def equals(self, other: Money) -> bool:
        return self == other

    def compare(self, other: Money) -> int:
        """-1 if self < other, 0 if equal, 1 if self > other."""
        self._check_compatible(other, "compare")
        if self._scaled_amount < other._scaled_amount:
            return -1
        if self._scaled_amount == other._scaled_amount:
            return 0
        return 1

    def greater_than(self, other: Money) -> bool:
        return self.compare(other) == 1

    def greater_than_or_equal(self, other: Money) -> bool:
        return self.compare(other) >= 0

    def less_than(self, other: Money) -> bool:
        return self.compare(other) == -1

    def less_than_or_equal(self, other: Money) -> bool:
        return self.compare(other) <= 0

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Money):
            return (
                self._scaled_amount == other._scaled_amount
                and self._precision == other._precision
            )
        return NotImplemented

    def __lt__(self, other: Money) -> bool:
        return self.less_than(other)

    def __le__(self, other: Money) -> bool:
        return self.less_than_or_equal(other)

    def __gt__(self, other: Money) -> bool:
        return self.greater_than(other)

    def __ge__(self, other: Money) -> bool:
        return self.greater_than_or_equal(other)

    def _check_compatible(self, other: Money, operation: str) -> None:
        if not isinstance(other, Money):
            raise TypeError(
                f"Operation not allowed: Money {operation} {type(other).__name__}. "
                f"Use Money.of() to convert."
            )
        if self._precision != other._precision:
            raise PrecisionMismatch(self._precision, other._precision, operation)

    # -------------------------------------------------------------------------
    # Properties and output
    # -------------------------------------------------------------------------

    @property
    def scaled_amount(self) -> int:
        """Amount in the smallest unit (cents at precision 2)."""
        return self._scaled_amount

    @property
    def precision(self) -> int:
        return self._precision

    @property
    def amount(self) -> Decimal:
        """Exact decimal amount: scaled_amount / 10 ** precision."""
        sign, digits, _ = Decimal(self._scaled_amount).as_tuple()
        return Decimal((sign, digits, -self._precision))

    def get_amount(self) -> Decimal:
        return self.amount

    def is_positive(self) -> bool:
        return self._scaled_amount > 0

    def is_negative(self) -> bool:
        return self._scaled_amount < 0

    def is_zero(self) -> bool:
        return self._scaled_amount == 0

    def __float__(self) -> float:
        """For display only. Never feed the result back into calculations."""
        return float(self.amount)

    def __repr__(self) -> str:
        return f"Money('{self}', precision={self._precision})"

    def __str__(self) -> str:
        return format(self.amount, "f")

    def __hash__(self) -> int:
        return hash((self._scaled_amount, self._precision))

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict:
        """
        Integer-only hand-off format.

        Format: {"scaled_amount": int, "precision": int}
        """
        return {
            "scaled_amount": self._scaled_amount,
            "precision": self._precision,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Money:
        """Accepts {"scaled_amount": int, "precision": int}."""
        try:
            scaled_amount = data["scaled_amount"]
            precision = data["precision"]
        except (KeyError, TypeError) as exc:
            raise InvalidArgument(f"Malformed Money payload: {data!r}") from exc
        return cls.of_scaled(scaled_amount, precision)
