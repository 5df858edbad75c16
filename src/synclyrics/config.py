"""Configuration settings for synclyrics."""

import json
import logging
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

# Directories
DEFAULT_CONFIG_DIR = Path.home() / ".config" / "synclyrics"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.json"

# Timeline synthesis (milliseconds)
BASE_UNIT_DURATION_MS = 150
CJK_UNIT_DURATION_MS = 180
PUNCTUATION_UNIT_DURATION_MS = 80
LATIN_CHAR_DURATION_MS = 60
WORD_GAP_MS = 20

# Line windows (milliseconds)
LAST_LINE_DURATION_MS = 5000
TITLE_LINE_FALLBACK_END_MS = 3000

# Highlight animation
PROGRESS_SMOOTHING = 0.3
PROGRESS_SNAP_THRESHOLD = 0.01
PROGRESS_EVICTION_MS = 1000

# Periodic callbacks (can be overridden via environment variables)
ANIMATION_INTERVAL_MS = int(os.getenv("SYNCLYRICS_ANIMATION_INTERVAL_MS", "16"))
SWEEP_INTERVAL_MS = int(os.getenv("SYNCLYRICS_SWEEP_INTERVAL_MS", "1000"))

# Credits, licensing and "pure music" notices commonly shipped with synced lyrics
DEFAULT_LYRICS_FILTER_REGEX = (
    "^([^：]*)：.*$|^([^:]*):.*$|^([^翻唱]*)翻唱.*$|^([^许可]*)许可.*$"
    "|^([^音乐人]*)音乐人.*$|^([^国风]*)国风.*$|^([^纯音乐]*)纯音乐.*$"
)


def validate_config() -> None:
    """Validate configuration values."""
    if ANIMATION_INTERVAL_MS <= 0:
        raise ConfigError("Invalid animation interval")

    if SWEEP_INTERVAL_MS < ANIMATION_INTERVAL_MS:
        raise ConfigError("Sweep interval must not be shorter than the animation interval")

    if not (0.0 < PROGRESS_SMOOTHING <= 1.0):
        raise ConfigError("Invalid progress smoothing factor")


# Validate config on import
validate_config()


def get_config_path() -> Path:
    """Get config file path from environment or default."""
    config_path = os.getenv("SYNCLYRICS_CONFIG")
    if config_path:
        return Path(config_path)
    return DEFAULT_CONFIG_FILE


@dataclass
class LyricsConfig:
    """Options the lyrics engine reads from the user's preferences."""

    show_translation: bool = True
    enable_lyrics_filter: bool = True
    lyrics_filter_regex: str = DEFAULT_LYRICS_FILTER_REGEX

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LyricsConfig":
        """Build a config from a preferences mapping, ignoring unknown keys."""
        values = {}
        for f in fields(cls):
            if f.name not in data:
                continue
            value = data[f.name]
            expected = bool if f.type in (bool, "bool") else str
            if value is None and expected is str:
                value = ""
            if not isinstance(value, expected):
                raise ConfigError(
                    f"Invalid value for {f.name}: expected {expected.__name__}, "
                    f"got {type(value).__name__}"
                )
            values[f.name] = value
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_lyrics_config(path: Optional[Path] = None) -> LyricsConfig:
    """
    Load the lyrics options from a JSON preferences file.

    A missing file gives the defaults. A file that cannot be read or is not
    a JSON object is logged and also gives the defaults.

    Raises:
        ConfigError: If a known option has the wrong type
    """
    config_path = path or get_config_path()
    if not config_path.exists():
        return LyricsConfig()

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load config from {config_path}: {e}")
        return LyricsConfig()

    if not isinstance(data, dict):
        logger.warning(f"Ignoring config {config_path}: expected a JSON object")
        return LyricsConfig()

    return LyricsConfig.from_dict(data)


def save_lyrics_config(config: LyricsConfig, path: Optional[Path] = None) -> Path:
    """Write the lyrics options as JSON, keeping other keys already in the file."""
    config_path = path or get_config_path()
    data: Dict[str, Any] = {}
    if config_path.exists():
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                existing = json.load(f)
            if isinstance(existing, dict):
                data = existing
        except (OSError, ValueError) as e:
            logger.warning(f"Overwriting unreadable config {config_path}: {e}")

    data.update(config.to_dict())
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
    except OSError as e:
        raise ConfigError(f"Failed to save config: {e}")
    return config_path
