"""Logging configuration for the Pixel Gallery API."""

import logging
import sys
from typing import Optional


# Third-party loggers that are too chatty at INFO
NOISY_LOGGERS = [
    "aiosqlite",
    "asyncio",
    "httpcore",
    "httpx",
    "sqlalchemy.engine",
    "sqlalchemy.pool",
]


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure application logging.

    Installs a single stderr handler on the root logger and quiets noisy
    third-party loggers down to WARNING.

    Args:
        level: Log level name; defaults to INFO.
    """
    log_level = getattr(logging, (level or "INFO").upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    )
    root_logger.addHandler(console_handler)

    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
