"""Utility modules."""

from .logging import setup_logging, get_logger
from .validation import (
    validate_position,
    validate_duration,
    validate_lrc_path,
    validate_filter_regex,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "validate_position",
    "validate_duration",
    "validate_lrc_path",
    "validate_filter_regex",
]
