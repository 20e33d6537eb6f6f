# tests/conftest.py

"""Shared pytest fixtures for all Product Store tests."""

import logging
from collections.abc import Generator
from pathlib import Path

import pytest

from shopping_app.config.settings import Settings


@pytest.fixture(autouse=True)
def isolated_logs_dir(tmp_path: Path) -> Generator[None, None, None]:
    """Send per-run log files to a temp ``logs/`` dir and drop handlers."""
    original = Settings.LOGS_DIR
    Settings.LOGS_DIR = tmp_path / "logs"
    yield
    Settings.LOGS_DIR = original
    root_logger = logging.getLogger("shopping_app")
    for handler in list(root_logger.handlers):
        handler.close()
        root_logger.removeHandler(handler)
