"""CLI entry point for guarded-ops."""

from typing import Optional

import typer
from rich.console import Console
from rich.text import Text

from .config import (
    CALCULATION_COMPLETED_MESSAGE,
    DEFAULT_GRADE_SCORE,
    DEFAULT_READ_PATH,
    OUTPUT_FORMATS,
    PROMPT_DAY,
    PROMPT_FIRST_NUMBER,
    PROMPT_SECOND_NUMBER,
    TEMPERATURES,
    VALID_GRADE_MESSAGE,
)
from .operations import calculate_grade, divide, lookup, read_first_line
from .output import format_json, format_result

app = typer.Typer(
    name="guarded-ops",
    help="Run guarded operations that report typed failures instead of crashing.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)

FORMAT_HELP = f"Output format: {' or '.join(OUTPUT_FORMATS)}"


def _check_format(output_format: str) -> None:
    """Exit with an error if output_format is not supported."""
    if output_format not in OUTPUT_FORMATS:
        console.print(Text(f"Invalid format: {output_format}", style="red"), soft_wrap=True)
        console.print(Text(f"Available formats: {', '.join(OUTPUT_FORMATS)}"), soft_wrap=True)
        raise typer.Exit(1)


@app.command("divide")
def divide_command(
    a: Optional[int] = typer.Argument(None, help="Dividend (prompted if omitted)"),
    b: Optional[int] = typer.Argument(None, help="Divisor (prompted if omitted)"),
    output_format: str = typer.Option("table", "--format", "-f", help=FORMAT_HELP),
) -> None:
    """Divide two integers, truncating toward zero."""
    _check_format(output_format)

    if a is None:
        a = typer.prompt(PROMPT_FIRST_NUMBER, type=int)
    if b is None:
        b = typer.prompt(PROMPT_SECOND_NUMBER, type=int)

    try:
        result = divide(a, b)
        if output_format == "json":
            format_json({"a": a, "b": b, **result.to_dict()}, console)
        else:
            format_result(result, console, f"Result: {result.value}")
    finally:
        # Keep stdout valid JSON in json mode
        target = err_console if output_format == "json" else console
        target.print(f"[dim]{CALCULATION_COMPLETED_MESSAGE}[/dim]")


@app.command("read-file")
def read_file_command(
    path: str = typer.Argument(DEFAULT_READ_PATH, help="File whose first line is printed"),
    output_format: str = typer.Option("table", "--format", "-f", help=FORMAT_HELP),
) -> None:
    """Print the first line of a file."""
    _check_format(output_format)

    result = read_first_line(path)
    if output_format == "json":
        format_json({"path": path, **result.to_dict()}, console)
    else:
        format_result(result, console, result.unwrap_or(""), success_style="")


@app.command("temperature")
def temperature_command(
    day: Optional[int] = typer.Argument(None, help="Day number, 1-based (prompted if omitted)"),
    output_format: str = typer.Option("table", "--format", "-f", help=FORMAT_HELP),
) -> None:
    """Look up the temperature for a day of the week."""
    _check_format(output_format)

    if day is None:
        day = typer.prompt(PROMPT_DAY.format(max_day=len(TEMPERATURES)), type=int)

    result = lookup(day)
    if output_format == "json":
        format_json({"day": day, **result.to_dict()}, console)
    else:
        format_result(result, console, f"Temperature for day {day}: {result.value}")


@app.command("grade")
def grade_command(
    score: int = typer.Argument(DEFAULT_GRADE_SCORE, help="Score to validate"),
    output_format: str = typer.Option("table", "--format", "-f", help=FORMAT_HELP),
) -> None:
    """Validate a grade score against the allowed range."""
    _check_format(output_format)

    result = calculate_grade(score)
    if output_format == "json":
        format_json({"score": score, **result.to_dict()}, console)
    else:
        format_result(result, console, VALID_GRADE_MESSAGE)


@app.command()
def version() -> None:
    """Show version information."""
    from . import __version__
    console.print(f"guarded-ops version {__version__}")


if __name__ == "__main__":
    app()
