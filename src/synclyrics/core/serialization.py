"""JSON serialization for lyrics data structures."""

import json
from typing import List, Optional, Tuple

from .models import LyricsLine, WordTiming


def lines_to_json(lines: List[LyricsLine]) -> List[dict]:
    """Convert a list of LyricsLine objects into JSON-serializable dicts."""
    data: List[dict] = []
    for line in lines:
        data.append({
            "original_text": line.original_text,
            "translation_text": line.translation_text,
            "start_time_ms": line.start_time_ms,
            "end_time_ms": line.end_time_ms,
            "words": [
                {
                    "text": w.text,
                    "start_time_ms": w.start_time_ms,
                    "end_time_ms": w.end_time_ms,
                } for w in line.word_timings
            ]
        })
    return data


def lines_from_json(data: List[dict]) -> List[LyricsLine]:
    """Convert JSON data back into LyricsLine objects with WordTiming objects."""
    lines: List[LyricsLine] = []
    for item in data:
        words = [
            WordTiming(
                text=w["text"],
                start_time_ms=int(w["start_time_ms"]),
                end_time_ms=int(w["end_time_ms"]),
            ) for w in item.get("words", [])
        ]
        lines.append(LyricsLine(
            original_text=item.get("original_text", ""),
            translation_text=item.get("translation_text"),
            start_time_ms=int(item["start_time_ms"]),
            end_time_ms=int(item["end_time_ms"]),
            word_timings=words,
        ))
    return lines


def save_lines_to_json(
    filepath: str, lines: List[LyricsLine], title: Optional[str] = None
) -> None:
    """Save parsed lines and the song title to a JSON file."""
    data = {
        "title": title,
        "lines": lines_to_json(lines),
    }
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)


def load_lines_from_json(filepath: str) -> Tuple[List[LyricsLine], Optional[str]]:
    """Load parsed lines and the song title from a JSON file."""
    with open(filepath, "r", encoding="utf-8") as f:
        data = json.load(f)
    return lines_from_json(data.get("lines", [])), data.get("title")
