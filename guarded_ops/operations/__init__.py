"""Guarded operations and their result/error types."""

from .division import divide
from .errors import AccessFailure, DivisionByZero, GuardedOperationError, InvalidArgument, OutOfRange
from .file_reader import read_first_line
from .grade import calculate_grade, validate_score
from .result import Result
from .temperature import lookup

__all__ = [
    "AccessFailure",
    "DivisionByZero",
    "GuardedOperationError",
    "InvalidArgument",
    "OutOfRange",
    "Result",
    "calculate_grade",
    "divide",
    "lookup",
    "read_first_line",
    "validate_score",
]
