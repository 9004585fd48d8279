# tests/conftest.py

"""Shared pytest fixtures for all game tests."""

import logging
from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest

from src.config.settings import Settings


@pytest.fixture(autouse=True)
def isolated_logs(tmp_path: Path) -> Generator[Path, None, None]:
    """Send per-run log files to a temp ``logs/`` dir and drop handlers after."""
    logs_dir = tmp_path / "logs"
    with patch.object(Settings, "LOGS_DIR", logs_dir):
        yield logs_dir
    game_logger = logging.getLogger("price_guesser")
    for handler in list(game_logger.handlers):
        handler.close()
        game_logger.removeHandler(handler)
