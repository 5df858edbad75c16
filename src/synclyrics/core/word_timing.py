"""Per-word timeline synthesis for lines that only carry a line timestamp.

LRC lines give one start time per line. Each display unit is given an
estimated window from its character class, and units are laid out back to
back with a fixed gap.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..config import (
    BASE_UNIT_DURATION_MS,
    CJK_UNIT_DURATION_MS,
    LATIN_CHAR_DURATION_MS,
    PUNCTUATION_UNIT_DURATION_MS,
    WORD_GAP_MS,
)
from ..utils.logging import get_logger
from .models import LyricsLine, WordTiming
from .text_utils import is_cjk_char, is_punctuation, split_text_units

logger = get_logger(__name__)


@dataclass(frozen=True)
class SynthesisResult:
    """Outcome of timeline synthesis for one line.

    ``error`` is set when synthesis failed; ``words`` is then empty and the
    line is shown as plain text.
    """

    start_time_ms: int
    end_time_ms: int
    words: List[WordTiming] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def unit_duration_ms(unit: str) -> int:
    """Estimated highlight duration of one display unit."""
    first = unit[0]
    if is_cjk_char(first):
        return CJK_UNIT_DURATION_MS
    if is_punctuation(first):
        return PUNCTUATION_UNIT_DURATION_MS
    if len(unit) > 1:
        return len(unit) * LATIN_CHAR_DURATION_MS
    return BASE_UNIT_DURATION_MS


def layout_units(start_time_ms: int, units: Sequence[str]) -> SynthesisResult:
    """Place units back to back from ``start_time_ms``.

    Raises on malformed units (e.g. an empty string); use
    :func:`synthesize_timeline` for the non-raising entry point.
    """
    words: List[WordTiming] = []
    cursor = start_time_ms
    for unit in units:
        duration = unit_duration_ms(unit)
        words.append(WordTiming(text=unit, start_time_ms=cursor, end_time_ms=cursor + duration))
        cursor += duration + WORD_GAP_MS
    return SynthesisResult(start_time_ms=start_time_ms, end_time_ms=cursor, words=words)


def synthesize_timeline(start_time_ms: int, text: str) -> SynthesisResult:
    """Build the per-word timeline for a cleaned line of text.

    Never raises: any failure is logged and returned as a fallback result
    without word timings.
    """
    try:
        units = split_text_units(text)
        return layout_units(start_time_ms, units)
    except Exception as e:
        logger.error(f"Failed to build word timing for {text!r}: {e}")
        return SynthesisResult(
            start_time_ms=start_time_ms, end_time_ms=start_time_ms, error=str(e)
        )


def build_lyrics_line(
    start_time_ms: int, text: str, translation_text: Optional[str] = None
) -> LyricsLine:
    """Create a LyricsLine, degrading to whole-line display if synthesis fails."""
    result = synthesize_timeline(start_time_ms, text)
    return LyricsLine(
        original_text=text,
        start_time_ms=start_time_ms,
        end_time_ms=result.end_time_ms,
        translation_text=translation_text,
        word_timings=result.words,
    )
