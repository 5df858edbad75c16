"""Data models for synchronized lyrics."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class WordTiming:
    """A single display unit with its highlight window in milliseconds."""

    text: str
    start_time_ms: int
    end_time_ms: int

    @property
    def duration_ms(self) -> int:
        return self.end_time_ms - self.start_time_ms

    @property
    def is_space(self) -> bool:
        return self.text == " "

    def validate(self) -> None:
        if self.start_time_ms < 0:
            raise ValueError("Word timing must be non-negative")
        if self.end_time_ms < self.start_time_ms:
            raise ValueError("Word end_time_ms must be >= start_time_ms")


@dataclass
class LyricsLine:
    """A lyric line, its optional translation and its per-word timeline.

    ``end_time_ms`` is the only field written after construction; the
    parser sets it once while ordering the line list.
    """

    original_text: str
    start_time_ms: int
    end_time_ms: int = 0
    translation_text: Optional[str] = None
    word_timings: List[WordTiming] = field(default_factory=list)

    @property
    def has_translation(self) -> bool:
        return bool(self.translation_text)

    @property
    def has_word_timing(self) -> bool:
        return bool(self.word_timings)

    @property
    def text(self) -> str:
        return self.original_text

    def validate(self) -> None:
        if self.end_time_ms <= self.start_time_ms:
            raise ValueError("Line end_time_ms must be > start_time_ms")
        prev_end = None
        for w in self.word_timings:
            w.validate()
            if prev_end is not None and w.start_time_ms < prev_end:
                raise ValueError("Word timings overlap")
            prev_end = w.end_time_ms
