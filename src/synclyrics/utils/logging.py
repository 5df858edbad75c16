"""Logging configuration for synclyrics."""

import logging
import sys
from pathlib import Path
from typing import Optional


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    verbose: bool = False,
    file_level: Optional[str] = None,
) -> logging.Logger:
    """
    Set up logging configuration.

    The console handler logs at ``level``. The file handler, if any, logs at
    ``file_level`` (default: ``level``), so per-tick DEBUG records can go to a
    file while the console stays at INFO.
    """
    console_level = getattr(logging, level.upper())
    file_log_level = getattr(logging, file_level.upper()) if file_level else console_level

    # Create logger
    logger = logging.getLogger("synclyrics")
    logger.setLevel(min(console_level, file_log_level) if log_file else console_level)

    # Clear existing handlers
    logger.handlers.clear()

    # Create formatter
    if verbose:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
    else:
        formatter = logging.Formatter("%(levelname)s: %(message)s")

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File records always carry timestamps
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(file_log_level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = "synclyrics") -> logging.Logger:
    """Get logger instance."""
    return logging.getLogger(name)
