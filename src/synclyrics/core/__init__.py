"""Core lyrics engine: parsing, timeline synthesis, line selection and progress."""

from .models import LyricsLine, WordTiming
from .lrc import parse_lyrics, parse_timestamp, group_lines_by_timestamp
from .text_utils import split_text_units
from .word_timing import SynthesisResult, synthesize_timeline, build_lyrics_line
from .lyrics_filter import FilterGeneration, LyricsFilter
from .progress import ProgressEngine, target_progress, ease_out_cubic
from .sync import (
    LyricsFrame,
    LyricsSession,
    current_line_index,
    get_current_line,
    index_for_position,
)

__all__ = [
    "LyricsLine",
    "WordTiming",
    "parse_lyrics",
    "parse_timestamp",
    "group_lines_by_timestamp",
    "split_text_units",
    "SynthesisResult",
    "synthesize_timeline",
    "build_lyrics_line",
    "FilterGeneration",
    "LyricsFilter",
    "ProgressEngine",
    "target_progress",
    "ease_out_cubic",
    "LyricsFrame",
    "LyricsSession",
    "current_line_index",
    "index_for_position",
    "get_current_line",
]
