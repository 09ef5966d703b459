"""Loguru setup for the API and scripts."""

import sys
from typing import Optional

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} - {message}"


def setup_logger(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Log to stderr and, when ``LOG_FILE`` is set, to a rotating file."""
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=level)
    if log_file:
        logger.add(log_file, format=LOG_FORMAT, level=level, rotation="10 MB", retention=5)
    logger.debug(f"Logging at {level}" + (f" to {log_file}" if log_file else ""))
