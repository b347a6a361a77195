"""Error taxonomy for guarded operations."""

import os

from ..config import (
    ACCESS_FAILURE_MESSAGE,
    DAY_OUT_OF_RANGE_MESSAGE,
    DIVISION_BY_ZERO_MESSAGE,
    INVALID_GRADE_MESSAGE,
)


class GuardedOperationError(Exception):
    """Base class for every failure a guarded operation can report."""

    default_message = "Guarded operation failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class DivisionByZero(GuardedOperationError, ZeroDivisionError):
    """Divisor was zero."""

    default_message = DIVISION_BY_ZERO_MESSAGE


class AccessFailure(GuardedOperationError):
    """
    A file could not be opened or read.

    The originating exception is kept as ``__cause__`` (set by the reader,
    since the failure is returned rather than raised); ``reason`` holds its
    text for display.
    """

    def __init__(self, path: str | os.PathLike, reason: str):
        self.path = os.fspath(path)
        self.reason = reason
        super().__init__(ACCESS_FAILURE_MESSAGE.format(reason=reason))


class OutOfRange(GuardedOperationError, IndexError):
    """Index fell outside a fixed lookup table."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(DAY_OUT_OF_RANGE_MESSAGE.format(max_day=size))


class InvalidArgument(GuardedOperationError, ValueError):
    """Argument failed a range check."""

    default_message = INVALID_GRADE_MESSAGE
