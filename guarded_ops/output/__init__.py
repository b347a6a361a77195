"""Output formatting modules."""

from .formatters import format_result, format_json

__all__ = ["format_result", "format_json"]
