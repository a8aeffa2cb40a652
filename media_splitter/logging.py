"""Centralized logging configuration for the media splitter

This module handles:
- Setting up Rich-based console logging with proper formatting
- Configuring file-based logging in the configured log directory
- Managing log levels and output destinations
"""

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .config import LOG_DIR, LOG_LEVEL
from .utils import get_timestamp

def configure_logging(log_level: Optional[str] = None, file_logging: bool = True) -> Optional[Path]:
    """
    Central logging configuration for all modules.

    Args:
        log_level: Level name; falls back to the configured LOG_LEVEL.
        file_logging: Whether to also write a timestamped log file.

    Returns:
        Path of the log file, or None when file logging is disabled.
    """
    level = (log_level or LOG_LEVEL).upper()
    logger = logging.getLogger("media_splitter")
    logger.setLevel(level)

    # Remove existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    # Log records go to stderr; stdout carries the job result
    console_handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True
    )
    console_handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(console_handler)

    log_file = None
    if file_logging:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        log_file = LOG_DIR / f"media_splitter_{get_timestamp()}.log"
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        ))
        logger.addHandler(file_handler)

    # Capture warnings
    logging.captureWarnings(True)
    return log_file
