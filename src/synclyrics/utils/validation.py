"""Validation utilities."""

import logging
import re
from pathlib import Path

from ..exceptions import ValidationError

logger = logging.getLogger(__name__)


def validate_position(position_ms: int) -> int:
    """Validate a playback position in milliseconds."""
    if position_ms < 0:
        raise ValidationError("Playback position cannot be negative")
    return position_ms


def validate_duration(duration_ms: int) -> int:
    """Validate a playback duration in milliseconds."""
    if duration_ms <= 0:
        raise ValidationError("Duration must be positive")
    return duration_ms


def validate_lrc_path(path: str) -> Path:
    """Validate that a lyrics file exists and is readable."""
    lrc_path = Path(path)
    if not lrc_path.is_file():
        raise ValidationError(f"Lyrics file not found: {path}")
    return lrc_path


def validate_filter_regex(pattern: str) -> str:
    """Validate a lyrics filter pattern before it is saved."""
    try:
        re.compile(pattern)
    except re.error as e:
        raise ValidationError(f"Invalid lyrics filter regex: {e}")
    return pattern
