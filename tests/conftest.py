"""Shared pytest fixtures for domaincrafters-std tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest
from click.testing import CliRunner

from domaincrafters_std.config.logging import LIBRARY_LOGGER


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def restore_logging() -> Generator[None]:
    """Restore root and library logger state after a test reconfigures logging."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    library = logging.getLogger(LIBRARY_LOGGER)
    library_level = library.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    library.setLevel(library_level)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep DCSTD_* variables from the developer's shell out of tests."""
    for name in (
        "DCSTD_JSON_OUTPUT",
        "DCSTD_QUIET",
        "DCSTD_VERBOSE",
        "DCSTD_LOG_JSON",
        "DCSTD_MAX_GENERATE",
    ):
        monkeypatch.delenv(name, raising=False)
