# src/config/logging_config.py

"""Per-run logging for price_guesser.

Every launch writes to its own ``logs/run_<timestamp>.log`` file. The
``price_guesser`` logger owns the handlers, so module loggers such as
``price_guesser.engine`` only need ``logging.getLogger`` to take part.

The terminal UI owns the screen while a game is running, so the console
handler only lets warnings through.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from src.config.settings import Settings

LOGGER_NAME = "price_guesser"

_FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | "
    "%(funcName)s:%(lineno)d | %(message)s"
)
_CONSOLE_FORMAT = "%(levelname)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _log_file_for(run_started: datetime) -> Path:
    """Return the log path for a run started at *run_started*."""
    return Settings.LOGS_DIR / f"run_{run_started:%Y%m%d_%H%M%S}.log"


def setup_logging(console_level: int = logging.WARNING) -> Path:
    """Attach file and console handlers to the ``price_guesser`` logger.

    Args:
        console_level: Minimum level echoed to stderr.

    Returns:
        The :class:`~pathlib.Path` of this run's log file.
    """
    Settings.LOGS_DIR.mkdir(parents=True, exist_ok=True)
    log_file = _log_file_for(datetime.now())

    game_logger = logging.getLogger(LOGGER_NAME)
    game_logger.setLevel(logging.DEBUG)

    # Already configured in this process
    if game_logger.handlers:
        return log_file

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(_FILE_FORMAT, datefmt=_DATE_FORMAT)
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))

    game_logger.addHandler(file_handler)
    game_logger.addHandler(console_handler)
    game_logger.debug("Logging to %s", log_file)

    return log_file
