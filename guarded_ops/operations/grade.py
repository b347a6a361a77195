"""Grade score validation."""

from ..config import GRADE_MAX, GRADE_MIN
from .errors import InvalidArgument
from .result import Result


def validate_score(score: int) -> None:
    """Raise InvalidArgument if score is outside GRADE_MIN..GRADE_MAX."""
    if score < GRADE_MIN or score > GRADE_MAX:
        raise InvalidArgument()


def calculate_grade(score: int) -> Result[None]:
    """
    Check that a score is a valid grade.

    No letter grade is computed; success carries no value.
    """
    try:
        validate_score(score)
    except InvalidArgument as exc:
        return Result.failure(exc)

    return Result.success(None)
