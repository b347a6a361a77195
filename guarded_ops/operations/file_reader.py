"""First-line file reader."""

import os

from ..config import READ_ENCODING
from .errors import AccessFailure
from .result import Result


def read_first_line(path: str | os.PathLike, encoding: str = READ_ENCODING) -> Result[str]:
    """
    Read the first line of a text file.

    The trailing line terminator is stripped. An empty file yields "".

    Args:
        path: File to read.
        encoding: Text encoding used to decode the file.

    Returns:
        Result with the line text, or an AccessFailure describing why the
        file could not be read.
    """
    try:
        with open(path, "r", encoding=encoding, newline="") as f:
            line = f.readline()
    except (OSError, UnicodeDecodeError) as exc:
        return Result.failure(_access_failure(path, exc))

    return Result.success(line.rstrip("\r\n"))


def _access_failure(path: str | os.PathLike, exc: Exception) -> AccessFailure:
    """Wrap ``exc`` in an AccessFailure, chained as its cause."""
    failure = AccessFailure(path, str(exc))
    failure.__cause__ = exc
    return failure
