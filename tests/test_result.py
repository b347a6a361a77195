"""Tests for the Result type and error taxonomy."""

import pytest

from guarded_ops.operations import (
    AccessFailure,
    DivisionByZero,
    GuardedOperationError,
    InvalidArgument,
    OutOfRange,
    Result,
)


class TestResult:
    """Tests for Result class."""

    def test_success(self):
        """Success result carries a value and no message."""
        result = Result.success(42)
        assert result.ok
        assert result.value == 42
        assert result.message is None
        assert result.unwrap() == 42

    def test_success_with_none_value(self):
        """None is a valid success value."""
        assert Result.success(None).ok

    def test_failure(self):
        """Failure result carries the error and its message."""
        error = DivisionByZero()
        result = Result.failure(error)
        assert not result.ok
        assert result.error is error
        assert result.message == "Cannot be divide by zero"

    def test_unwrap_raises_carried_error(self):
        """Unwrap re-raises the same error instance."""
        error = InvalidArgument()
        with pytest.raises(InvalidArgument) as exc_info:
            Result.failure(error).unwrap()
        assert exc_info.value is error

    def test_unwrap_or(self):
        """unwrap_or falls back to the default on failure."""
        assert Result.success(1).unwrap_or(0) == 1
        assert Result.failure(OutOfRange(9, 7)).unwrap_or(0) == 0

    def test_is_frozen(self):
        """Results cannot be modified after creation."""
        result = Result.success(1)
        with pytest.raises(AttributeError):
            result.value = 2

    def test_to_dict_success(self):
        """Success converts to a JSON-ready dict."""
        assert Result.success(5).to_dict() == {
            "ok": True,
            "value": 5,
            "error": None,
            "message": None,
        }

    def test_to_dict_failure(self):
        """Failure dict names the error class."""
        data = Result.failure(InvalidArgument()).to_dict()
        assert data["ok"] is False
        assert data["error"] == "InvalidArgument"
        assert data["message"] == "Grade is invalid."


class TestErrors:
    """Tests for the error hierarchy."""

    @pytest.mark.parametrize(
        "error",
        [DivisionByZero(), AccessFailure("x", "boom"), OutOfRange(0, 7), InvalidArgument()],
    )
    def test_all_share_base(self, error):
        """Every error is a GuardedOperationError."""
        assert isinstance(error, GuardedOperationError)

    def test_builtin_bases(self):
        """Errors can be caught by their matching builtin type."""
        assert isinstance(DivisionByZero(), ZeroDivisionError)
        assert isinstance(OutOfRange(0, 7), IndexError)
        assert isinstance(InvalidArgument(), ValueError)

    def test_custom_message(self):
        """Default message can be overridden."""
        assert str(InvalidArgument("Score must be numeric")) == "Score must be numeric"

    def test_access_failure_fields(self):
        """AccessFailure keeps the path and reason."""
        error = AccessFailure("notes.txt", "permission denied")
        assert error.path == "notes.txt"
        assert error.reason == "permission denied"
        assert error.message == "IOException occurred: permission denied"

    def test_out_of_range_message_follows_size(self):
        """OutOfRange names the range of whatever table size it is given."""
        error = OutOfRange(12, 10)
        assert error.index == 12
        assert error.size == 10
        assert error.message == "Invalid day number. Please enter a number between 1 and 10"

    def test_out_of_range_requires_size(self):
        """OutOfRange has no default table size."""
        with pytest.raises(TypeError):
            OutOfRange(3)
