"""Filtering of non-lyric lines (credits, licensing notices, ...)."""

import re
from dataclasses import dataclass
from typing import Optional, Pattern

from ..config import LyricsConfig
from ..utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class FilterGeneration:
    """A filter pattern compiled once per distinct pattern string.

    ``regex`` is None when the pattern failed to compile; filtering is then
    off until the pattern changes.
    """

    pattern: str
    regex: Optional[Pattern[str]] = None
    error: Optional[str] = None

    @classmethod
    def compile(cls, pattern: str) -> "FilterGeneration":
        try:
            return cls(pattern=pattern, regex=re.compile(pattern))
        except re.error as e:
            logger.error(f"Invalid lyrics filter regex {pattern!r}: {e}")
            return cls(pattern=pattern, error=str(e))

    def matches(self, text: Optional[str]) -> bool:
        if self.regex is None or not text:
            return False
        return self.regex.search(text) is not None


class LyricsFilter:
    """Decides which lines are dropped, recompiling only on pattern change."""

    def __init__(self, config: Optional[LyricsConfig] = None):
        self.config = config or LyricsConfig()
        self._generation: Optional[FilterGeneration] = None

    @property
    def enabled(self) -> bool:
        return self.config.enable_lyrics_filter and bool(self.config.lyrics_filter_regex)

    @property
    def generation(self) -> Optional[FilterGeneration]:
        """Current compiled generation, or None if filtering is off."""
        if not self.enabled:
            return None
        pattern = self.config.lyrics_filter_regex
        if self._generation is None or self._generation.pattern != pattern:
            self._generation = FilterGeneration.compile(pattern)
        return self._generation

    def update_config(self, config: LyricsConfig) -> None:
        self.config = config

    def clear(self) -> None:
        self._generation = None

    def should_filter(self, original_text: str, translation_text: Optional[str] = None) -> bool:
        generation = self.generation
        if generation is None:
            return False

        if generation.matches(original_text):
            logger.debug(f"Filtered lyrics line: {original_text}")
            return True

        if self.config.show_translation and generation.matches(translation_text):
            logger.debug(f"Filtered lyrics translation line: {translation_text}")
            return True

        return False
