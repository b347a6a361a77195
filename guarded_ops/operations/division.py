"""Integer division with a zero-divisor guard."""

from .errors import DivisionByZero
from .result import Result


def divide(a: int, b: int) -> Result[int]:
    """
    Divide ``a`` by ``b``, truncating toward zero.

    Returns:
        Result with the quotient, or a DivisionByZero failure when b is 0.
    """
    if b == 0:
        return Result.failure(DivisionByZero())

    return Result.success(truncating_div(a, b))


def truncating_div(a: int, b: int) -> int:
    """Integer quotient rounded toward zero (``//`` rounds toward -inf)."""
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        return -quotient
    return quotient
