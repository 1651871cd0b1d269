"""
Logging configuration for the CLI.

Every module logs through `logging.getLogger(__name__)`, so all of them
hang off the `todo_cli` package logger configured here.
"""

import logging
import sys
from pathlib import Path

PACKAGE_LOGGER = "todo_cli"

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: int | str = logging.WARNING,
    log_file: Path | None = None,
) -> logging.Logger:
    """
    Configure the package logger with:
    - a stderr handler at `level`
    - a file handler at DEBUG, if `log_file` is given

    Safe to call more than once: handlers from a previous call are removed.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(fmt)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(fmt)
        logger.addHandler(file_handler)

    return logger
