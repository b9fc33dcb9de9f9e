"""Root logger setup for the ledger API server.

Every record goes to stdout and to a log file. LOG_LEVEL picks the
threshold (INFO when unset or unrecognized). Services log committed
ledger changes at INFO and rejected operations at WARNING, so
LOG_LEVEL=WARNING keeps only the rejections.
"""

import logging
import os
import sys
from pathlib import Path

DEFAULT_LOG_FILE = "logs/server.log"
LOG_FORMAT = "[%(asctime)s] %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def get_log_level() -> int:
    """Threshold named by LOG_LEVEL, case-insensitive; INFO otherwise."""
    return LOG_LEVEL_MAP.get(os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)


def _handler(handler: logging.Handler, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_server_logging(log_file: str = DEFAULT_LOG_FILE) -> logging.Logger:
    """Point the root logger at stdout and ``log_file``.

    Handlers from an earlier call are closed and replaced, so calling this
    twice does not duplicate output. The log file's directory is created
    if missing.

    Args:
        log_file: File receiving a copy of every record

    Returns:
        The root logger
    """
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    level = get_log_level()
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)

    root_logger.addHandler(_handler(logging.StreamHandler(sys.stdout), level, formatter))
    root_logger.addHandler(_handler(logging.FileHandler(log_path), level, formatter))
    return root_logger
