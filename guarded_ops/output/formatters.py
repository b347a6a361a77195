"""Output formatters for operation results."""

import json

from rich.console import Console
from rich.text import Text

from ..operations import Result


def format_result(result: Result, console: Console, success_text: str, success_style: str = "green") -> None:
    """
    Print a result as a single line.

    Text is printed as-is (no markup, no wrapping) since it may be file
    content or an OS error string.
    """
    if result.ok:
        console.print(Text(success_text, style=success_style), soft_wrap=True)
    else:
        console.print(Text(result.message or "", style="red"), soft_wrap=True)


def format_json(payload: dict, console: Console) -> None:
    """Format and print a result payload as JSON."""
    console.print_json(json.dumps(payload, default=str))
