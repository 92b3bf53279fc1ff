# core/logs.py

"""
Logging setup for the TeachStack application.

Every module obtains its logger with `logging.getLogger(__name__)`; this module only configures the handlers
once at startup. Records are written to a rotating log file, and anything at WARNING or above is echoed
to the console so the user sees storage problems without the file being opened.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

LOG_FILE_NAME = "teachstack.log"
MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 5

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def parse_level(level_name: str) -> int:
    """
    Converts a level name such as "info" or "WARNING" into a `logging` level constant.

    Raises:
        ValueError: If the name is not a recognized logging level.
    """
    level = logging.getLevelName(level_name.strip().upper())

    if not isinstance(level, int):
        raise ValueError(f"Unrecognized log level: {level_name}")

    return level


def setup_logging(log_dir: str, level_name: str = "INFO") -> logging.Logger:
    """
    Configures the root logger with a rotating file handler and a console handler.

    Args:
        log_dir (str): Directory in which `teachstack.log` is written; created if missing.
        level_name (str): Minimum level written to the log file.

    Returns:
        The configured root logger.

    Notes:
        - Calling this more than once replaces the handlers instead of stacking duplicates.
    """
    root = logging.getLogger()
    root.setLevel(parse_level(level_name))
    root.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)

    os.makedirs(log_dir, exist_ok=True)
    file_handler = RotatingFileHandler(
        os.path.join(log_dir, LOG_FILE_NAME),
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    return root
