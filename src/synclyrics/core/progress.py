"""Smoothed per-word highlight progress for lyric animation."""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from ..config import PROGRESS_EVICTION_MS, PROGRESS_SMOOTHING, PROGRESS_SNAP_THRESHOLD
from .models import WordTiming

# (line_index, word_index)
WordKey = Tuple[int, int]


def ease_out_cubic(x: float) -> float:
    return 1 - (1 - x) ** 3


def target_progress(word: WordTiming, position_ms: int) -> float:
    """Eased fraction of the word's window that has elapsed at ``position_ms``."""
    if position_ms < word.start_time_ms:
        return 0.0
    if position_ms >= word.end_time_ms:
        return 1.0

    duration = word.end_time_ms - word.start_time_ms
    if duration <= 0:
        return 1.0
    x = (position_ms - word.start_time_ms) / duration
    return ease_out_cubic(max(0.0, min(1.0, x)))


@dataclass
class ProgressEntry:
    progress: float
    end_time_ms: int


class ProgressEngine:
    """
    Holds the displayed highlight progress of each word.

    ``tick`` is driven by the animation timer (about every 16 ms) and moves
    each word of the active line 30% of the way to its target. ``sweep`` is
    driven by a slower timer and evicts words that finished more than a
    second before the last seen position.
    """

    def __init__(
        self,
        smoothing: float = PROGRESS_SMOOTHING,
        snap_threshold: float = PROGRESS_SNAP_THRESHOLD,
        eviction_ms: int = PROGRESS_EVICTION_MS,
    ):
        self.smoothing = smoothing
        self.snap_threshold = snap_threshold
        self.eviction_ms = eviction_ms
        self._entries: Dict[WordKey, ProgressEntry] = {}
        self.last_position_ms: Optional[int] = None

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: WordKey) -> bool:
        return key in self._entries

    def _step(self, current: float, target: float) -> float:
        diff = target - current
        if abs(diff) <= self.snap_threshold:
            return target
        return current + diff * self.smoothing

    def tick(
        self, position_ms: int, line_index: int, words: Sequence[WordTiming]
    ) -> List[float]:
        """Advance the progress of one line's words; returns a value per word."""
        values: List[float] = []
        for word_index, word in enumerate(words):
            target = target_progress(word, position_ms)
            if word.is_space:
                values.append(target)
                continue

            key = (line_index, word_index)
            entry = self._entries.get(key)
            if entry is None:
                entry = ProgressEntry(progress=target, end_time_ms=word.end_time_ms)
                self._entries[key] = entry
            else:
                entry.progress = self._step(entry.progress, target)
            values.append(entry.progress)

        self.last_position_ms = position_ms
        return values

    def progress_for(self, line_index: int, word_index: int) -> float:
        entry = self._entries.get((line_index, word_index))
        return entry.progress if entry is not None else 0.0

    def sweep(self, now_ms: Optional[int] = None) -> int:
        """Evict finished words; returns how many entries were removed."""
        if now_ms is None:
            now_ms = self.last_position_ms
        if now_ms is None:
            return 0

        expired = [
            key for key, entry in self._entries.items()
            if now_ms > entry.end_time_ms + self.eviction_ms
        ]
        for key in expired:
            del self._entries[key]
        return len(expired)

    def clear(self) -> None:
        self._entries.clear()
        self.last_position_ms = None
