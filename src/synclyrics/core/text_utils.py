"""
Character classification and splitting of lyric text into display units.

A unit is what gets its own highlight window: a CJK glyph, a punctuation
mark, a run of Latin letters/digits (with apostrophes), a single space, or
any other lone character.
"""

import unicodedata
from typing import List

# (first, last) code points, inclusive
_CJK_RANGES = (
    (0x4E00, 0x9FFF),  # CJK Unified Ideographs
    (0x3040, 0x309F),  # Hiragana
    (0x30A0, 0x30FF),  # Katakana
    (0xAC00, 0xD7AF),  # Hangul syllables
)


def is_cjk_char(ch: str) -> bool:
    code = ord(ch)
    return any(lo <= code <= hi for lo, hi in _CJK_RANGES)


def is_punctuation(ch: str) -> bool:
    return unicodedata.category(ch).startswith("P")


def is_letter_or_digit(ch: str) -> bool:
    return ch.isalpha() or unicodedata.category(ch) == "Nd"


def is_space_unit(unit: str) -> bool:
    return unit == " "


def split_text_units(text: str) -> List[str]:
    """Split cleaned lyric text into display units in one left-to-right pass."""
    units: List[str] = []
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]

        if ch.isspace():
            units.append(" ")
            i += 1
        elif is_cjk_char(ch) or is_punctuation(ch):
            units.append(ch)
            i += 1
        elif is_letter_or_digit(ch):
            start = i
            while i < n and (is_letter_or_digit(text[i]) or text[i] == "'"):
                i += 1
            units.append(text[start:i])
        else:
            units.append(ch)
            i += 1

    return units
