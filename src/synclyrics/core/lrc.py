"""LRC parsing and LyricsLine list creation.

This module handles:
- LRC timestamp parsing
- Grouping original and translation lines that share a timestamp
- Creating LyricsLine objects with synthesized word timing
- Ordering lines and assigning their end times
"""

import re
from typing import Dict, Iterable, List, Optional, Tuple

from ..config import LAST_LINE_DURATION_MS, TITLE_LINE_FALLBACK_END_MS, LyricsConfig
from ..utils.logging import get_logger
from .lyrics_filter import LyricsFilter
from .models import LyricsLine
from .word_timing import build_lyrics_line

logger = get_logger(__name__)

# ----------------------
# LRC timestamp regex
# ----------------------
_LRC_TS_RE = re.compile(
    r"""
    \[              # opening bracket
    (?P<min>\d+)    # minutes
    :
    (?P<sec>\d+)    # seconds
    \.
    (?P<frac>\d+)   # fraction, added as-is in milliseconds
    \]              # closing bracket
    """,
    re.VERBOSE,
)


def parse_timestamp(line: str) -> Optional[Tuple[int, str]]:
    """
    Parse the first ``[mm:ss.ff]`` tag of a raw line.

    The fraction digits are added verbatim as milliseconds, so ``.50`` adds
    50 ms and ``.500`` adds 500 ms.

    Returns:
        ``(time_ms, text)`` with every tag removed from the text, or None if
        the line has no timestamp.
    """
    match = _LRC_TS_RE.search(line)
    if not match:
        return None

    minutes = int(match.group("min"))
    seconds = int(match.group("sec"))
    fraction = int(match.group("frac"))
    time_ms = (minutes * 60 + seconds) * 1000 + fraction

    text = _LRC_TS_RE.sub("", line).strip()
    return time_ms, text


def group_lines_by_timestamp(raw_lines: Iterable[str]) -> Dict[int, List[str]]:
    """Group texts by timestamp, keeping first-seen order (original, translation)."""
    groups: Dict[int, List[str]] = {}
    for raw in raw_lines:
        parsed = parse_timestamp(raw)
        if parsed is None:
            continue
        time_ms, text = parsed
        groups.setdefault(time_ms, []).append(text)
    return groups


def parse_line_group(
    start_time_ms: int,
    texts: List[str],
    lyrics_filter: Optional[LyricsFilter] = None,
) -> Optional[LyricsLine]:
    """Turn one timestamp group into a line; None if empty or filtered out."""
    if not texts or not texts[0]:
        return None

    translation = texts[1] if len(texts) > 1 else None
    line = build_lyrics_line(start_time_ms, texts[0], translation)

    if lyrics_filter is not None and lyrics_filter.should_filter(
        line.original_text, line.translation_text
    ):
        return None
    return line


def assign_end_times(lines: List[LyricsLine]) -> None:
    """Each line ends where the next one starts; the last one runs 5 s."""
    for i, line in enumerate(lines):
        if i + 1 < len(lines):
            line.end_time_ms = lines[i + 1].start_time_ms
        else:
            line.end_time_ms = line.start_time_ms + LAST_LINE_DURATION_MS


def make_title_line(title: str, lines: List[LyricsLine]) -> LyricsLine:
    """Synthetic line shown before the first lyric, without word timing."""
    end_time_ms = lines[0].start_time_ms if lines else TITLE_LINE_FALLBACK_END_MS
    return LyricsLine(original_text=title, start_time_ms=0, end_time_ms=end_time_ms)


def parse_lyrics(
    lyrics_text: Optional[str],
    title: Optional[str] = None,
    config: Optional[LyricsConfig] = None,
    lyrics_filter: Optional[LyricsFilter] = None,
) -> List[LyricsLine]:
    """
    Parse an LRC text blob into an ordered list of lines.

    Args:
        lyrics_text: Newline separated LRC text
        title: Optional song title, shown as a line before the lyrics
        config: Lyrics options; used to build a filter if none is given
        lyrics_filter: Filter to reuse across calls (keeps its compiled pattern)

    Returns:
        Lines sorted by start time, with end times assigned
    """
    if not lyrics_text:
        return []

    if lyrics_filter is None and config is not None:
        lyrics_filter = LyricsFilter(config)

    raw_lines = [raw for raw in lyrics_text.split("\n") if raw]
    groups = group_lines_by_timestamp(raw_lines)

    lines: List[LyricsLine] = []
    for start_time_ms, texts in groups.items():
        line = parse_line_group(start_time_ms, texts, lyrics_filter)
        if line is not None:
            lines.append(line)

    lines.sort(key=lambda ln: ln.start_time_ms)
    assign_end_times(lines)

    if title:
        lines.insert(0, make_title_line(title, lines))
        # A lone title line keeps its fallback window
        if len(lines) > 1:
            assign_end_times(lines)

    return lines
