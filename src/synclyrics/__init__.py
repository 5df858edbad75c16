"""synclyrics - time-synchronized lyrics with per-word highlight progress."""

__version__ = "0.1.0"

from .core.models import LyricsLine, WordTiming
from .core.lrc import parse_lyrics
from .core.progress import ProgressEngine
from .core.sync import LyricsSession, get_current_line

__all__ = [
    "__version__",
    "LyricsLine",
    "WordTiming",
    "parse_lyrics",
    "ProgressEngine",
    "LyricsSession",
    "get_current_line",
]
