"""Active line selection and the per-song lyrics session."""

import threading
from bisect import bisect_right
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from ..config import LyricsConfig
from ..utils.logging import get_logger
from .lrc import parse_lyrics
from .lyrics_filter import LyricsFilter
from .models import LyricsLine
from .progress import ProgressEngine, target_progress

logger = get_logger(__name__)


def index_for_position(starts: Sequence[int], position_ms: int) -> int:
    """Index into sorted line start times for a position; -1 if there are none."""
    if not starts:
        return -1
    # bisect_right gives the insertion point after equal starts,
    # so subtract 1 to get the last start <= position
    return max(bisect_right(starts, position_ms) - 1, 0)


def current_line_index(lines: Sequence[LyricsLine], position_ms: int) -> int:
    """
    Index of the line whose ``[start, next start)`` window contains the position.

    Positions before the first line map to the first line; the last line has
    no upper bound. Returns -1 if there are no lines.
    """
    return index_for_position([line.start_time_ms for line in lines], position_ms)


def get_current_line(
    lines: Optional[Sequence[LyricsLine]], position_ms: int
) -> Optional[LyricsLine]:
    """Line to display at ``position_ms``, or None when nothing is loaded."""
    if not lines:
        return None
    return lines[current_line_index(lines, position_ms)]


@dataclass(frozen=True)
class LyricsFrame:
    """What the presentation layer draws for one animation tick."""

    position_ms: int
    line_index: int
    line: LyricsLine
    progress: List[float] = field(default_factory=list)
    translation_text: Optional[str] = None


class LyricsSession:
    """
    Lyrics state for the song currently playing.

    The line list is an immutable tuple replaced under the session lock
    together with its start times and a cleared progress cache. A tick takes
    the same lock, so it always works against one consistent snapshot.
    """

    def __init__(self, config: Optional[LyricsConfig] = None):
        self.config = config or LyricsConfig()
        self.lyrics_filter = LyricsFilter(self.config)
        self.progress = ProgressEngine()
        self._lines: Tuple[LyricsLine, ...] = ()
        self._starts: Tuple[int, ...] = ()
        self._lock = threading.Lock()
        self._last_lyrics_text = ""
        self._force_refresh = False
        self._last_line_count = 0
        self._active_index = -1
        self.song_title = ""

    @property
    def lines(self) -> Tuple[LyricsLine, ...]:
        return self._lines

    def set_song(self, title: str, artist: Optional[str] = None) -> bool:
        """Record the playing song; returns True and resets state on a change."""
        song_title = f"{artist} - {title}" if artist else title
        if not song_title or song_title == self.song_title:
            return False

        logger.info(f"Song changed: {self.song_title or '<none>'} -> {song_title}")
        self.song_title = song_title
        with self._lock:
            self._lines = ()
            self._starts = ()
            self._last_lyrics_text = ""
            self._force_refresh = True
            self.progress.clear()
        return True

    def update_lyrics(self, lyrics_text: Optional[str]) -> bool:
        """Reparse if the text changed or a refresh is pending; returns True if reloaded."""
        if not lyrics_text or not lyrics_text.strip():
            self._force_refresh = False
            return False

        text = lyrics_text.strip()
        if text == self._last_lyrics_text and not self._force_refresh:
            return False

        lines = tuple(
            parse_lyrics(text, title=self.song_title or None, lyrics_filter=self.lyrics_filter)
        )
        with self._lock:
            self._last_lyrics_text = text
            self._force_refresh = False
            self.progress.clear()
            self._lines = lines
            self._starts = tuple(line.start_time_ms for line in lines)

        if len(lines) != self._last_line_count:
            logger.info(f"Loaded {len(lines)} lyrics lines")
            self._last_line_count = len(lines)
        return True

    def apply_config(self, config: LyricsConfig) -> None:
        """Use new options; lyrics are reparsed on the next update."""
        self.config = config
        self.lyrics_filter.update_config(config)
        self.force_refresh()

    def force_refresh(self) -> None:
        self._force_refresh = True
        self.lyrics_filter.clear()
        with self._lock:
            self.progress.clear()

    def current_line(self, position_ms: int) -> Optional[LyricsLine]:
        with self._lock:
            lines, starts = self._lines, self._starts
        if not lines:
            return None
        return lines[index_for_position(starts, position_ms)]

    def frame(self, position_ms: int) -> Optional[LyricsFrame]:
        """Active line with the progress values as they stand, without advancing them."""
        with self._lock:
            if not self._lines:
                return None
            index = index_for_position(self._starts, position_ms)
            line = self._lines[index]
            progress = [
                target_progress(w, position_ms) if w.is_space else self.progress.progress_for(index, i)
                for i, w in enumerate(line.word_timings)
            ]
        return self._make_frame(position_ms, index, line, progress)

    def tick(self, position_ms: int) -> Optional[LyricsFrame]:
        """Animation tick: advance highlight progress of the active line."""
        # Snapshot lookup and progress update must see the same load
        with self._lock:
            if not self._lines:
                return None
            index = index_for_position(self._starts, position_ms)
            line = self._lines[index]
            progress = self.progress.tick(position_ms, index, line.word_timings)
            if index != self._active_index:
                self._active_index = index
                logger.debug(f"Active line {index}: {line.original_text}")
        return self._make_frame(position_ms, index, line, progress)

    def _make_frame(
        self, position_ms: int, index: int, line: LyricsLine, progress: List[float]
    ) -> LyricsFrame:
        translation = line.translation_text if self.config.show_translation else None
        return LyricsFrame(
            position_ms=position_ms,
            line_index=index,
            line=line,
            progress=progress,
            translation_text=translation,
        )

    def sweep(self, now_ms: Optional[int] = None) -> int:
        """Eviction sweep of stale highlight progress."""
        with self._lock:
            return self.progress.sweep(now_ms)
