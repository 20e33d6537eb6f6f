# shopping_app/config/logging_config.py

"""Per-run logging for the Product Store.

A launch writes everything from the ``shopping_app.*`` loggers to one
timestamped file (``logs/run_20260214_153045.log``).  The terminal only
sees records at or above ``console_level``; the TUI keeps that at
WARNING so log lines do not bleed into the screen, while ``--verbose``
runs of the headless listing can lower it.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from shopping_app.config.settings import Settings

PROJECT_LOGGER = "shopping_app"

_FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | "
    "%(message)s"
)
_CONSOLE_FORMAT = "%(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def current_log_file() -> Path | None:
    """Path of the run log already attached to the project logger."""
    for handler in logging.getLogger(PROJECT_LOGGER).handlers:
        if isinstance(handler, logging.FileHandler):
            return Path(handler.baseFilename)
    return None


def setup_logging(
    logs_dir: Path | None = None,
    console_level: int = logging.WARNING,
) -> Path:
    """Attach the run log file and the stderr console to ``shopping_app``.

    Args:
        logs_dir: Directory for the run log; defaults to ``Settings.LOGS_DIR``.
        console_level: Minimum level echoed to stderr.

    Returns:
        The log file of this run.  A second call keeps the existing
        handlers, adjusts the console level and returns the same file.
    """
    root_logger = logging.getLogger(PROJECT_LOGGER)
    root_logger.setLevel(logging.DEBUG)

    existing = current_log_file()
    if existing is not None:
        for handler in root_logger.handlers:
            if not isinstance(handler, logging.FileHandler):
                handler.setLevel(console_level)
        return existing

    directory = logs_dir if logs_dir is not None else Settings.LOGS_DIR
    directory.mkdir(parents=True, exist_ok=True)
    log_file = directory / f"run_{datetime.now():%Y%m%d_%H%M%S}.log"

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(_FILE_FORMAT, datefmt=_DATE_FORMAT)
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    root_logger.info(
        "Run log %s (catalog=%s, console=%s)",
        log_file,
        Settings.CATALOG_PATH,
        logging.getLevelName(console_level),
    )
    return Path(file_handler.baseFilename)
