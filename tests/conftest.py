"""Pytest configuration and fixtures."""

import pytest
from typer.testing import CliRunner


@pytest.fixture
def runner():
    """Return a CLI runner for invoking the typer app."""
    return CliRunner()


@pytest.fixture
def name_file(tmp_path):
    """Return a single-line file containing a name."""
    path = tmp_path / "Zainab"
    path.write_text("Zainab\n", encoding="utf-8")
    return path
