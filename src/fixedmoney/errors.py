"""
errors.py — Exception taxonomy for fixedmoney

Every error raised by the package derives from MoneyError, and also from the
builtin that best describes it, so callers can catch either:

    MoneyError
    ├── InvalidArgument     (ValueError)  bad divisor, ratios, amounts
    └── PrecisionMismatch   (TypeError)   operands at different precisions
"""


class MoneyError(Exception):
    """Base class for all fixedmoney errors."""


class InvalidArgument(MoneyError, ValueError):
    """An argument is outside the domain of the operation."""


class PrecisionMismatch(MoneyError, TypeError):
    """
    Two Money values with different precision were combined or ordered.

    Scaled amounts at different precisions are not comparable as integers.
    Rescale one operand with change_precision() first.
    """

    def __init__(self, left: int, right: int, operation: str):
        self.left = left
        self.right = right
        self.operation = operation
        super().__init__(
            f"Precision mismatch in {operation}: {left} vs {right}. "
            f"Use change_precision() to align the operands."
        )
