"""This module contains shared fixtures for all unit tests."""

import os
from pathlib import Path

import pytest
from date_formatting.providers.logging import LoggingProvider


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Runs every unit test without DATE_* environment variables or a stray .env file.

    The working directory is moved to an empty temporary folder so the
    settings never pick up a developer's local .env.
    """
    for key in list(os.environ):
        if key.startswith("DATE_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(scope="session", autouse=True)
def configured_logger() -> None:
    """Configures the project logger once, before any CLI runner swaps the output streams."""
    LoggingProvider().get_logger()
