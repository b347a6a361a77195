"""Result type returned by every guarded operation."""

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from .errors import GuardedOperationError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of a guarded operation: either a value or a typed error.

    Usage:
        result = divide(10, 0)
        if result.ok:
            print(result.value)
        else:
            print(result.message)
    """

    value: Optional[T] = None
    error: Optional[GuardedOperationError] = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        """Create a successful result."""
        return cls(value=value)

    @classmethod
    def failure(cls, error: GuardedOperationError) -> "Result[T]":
        """Create a failed result carrying ``error``."""
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str | None:
        """Human-readable failure message, or None on success."""
        if self.error is None:
            return None
        return str(self.error)

    def unwrap(self) -> T:
        """Return the value, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def unwrap_or(self, default: T) -> T:
        """Return the value, or ``default`` on failure."""
        if self.error is not None:
            return default
        return self.value  # type: ignore[return-value]

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dict."""
        return {
            "ok": self.ok,
            "value": self.value,
            "error": type(self.error).__name__ if self.error is not None else None,
            "message": self.message,
        }
