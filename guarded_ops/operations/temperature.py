"""Bounds-checked lookup into a fixed temperature table."""

from collections.abc import Sequence

from ..config import TEMPERATURES
from .errors import OutOfRange
from .result import Result


def lookup(day: int, table: Sequence[int] = TEMPERATURES) -> Result[int]:
    """
    Get the temperature for a 1-based day number.

    Bounds are checked before indexing so negative days never wrap around.
    """
    if day < 1 or day > len(table):
        return Result.failure(OutOfRange(day, len(table)))

    return Result.success(table[day - 1])
