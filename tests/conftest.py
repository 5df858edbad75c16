"""Test configuration and fixtures.

Provides reusable fixtures for:
- Temporary files and directories
- LRC texts (bilingual, credits, mixed scripts)
- Lyrics preferences files
"""

import json
import logging
import tempfile
from pathlib import Path

import pytest

from synclyrics.config import LyricsConfig


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers that setup_logging() bound to a test's stdout."""
    yield
    logger = logging.getLogger("synclyrics")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


# =============================================================================
# Basic Fixtures
# =============================================================================


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# =============================================================================
# LRC Fixtures
# =============================================================================


@pytest.fixture
def bilingual_lrc():
    """Original lines followed by their translations at the same timestamp."""
    return "\n".join([
        "[ti:Song]",
        "[00:01.00]Hello world",
        "[00:01.00]你好世界",
        "[00:04.00]Good night",
        "[00:04.00]晚安",
        "[00:08.00]Bye",
    ])


@pytest.fixture
def credits_lrc():
    """Lyrics preceded by producer credits."""
    return "\n".join([
        "[00:00.00]作词：李四",
        "[00:00.50]制作人：张三",
        "[00:03.00]月亮代表我的心",
        "[00:07.00]你问我爱你有多深",
    ])


@pytest.fixture
def lrc_file(temp_dir, bilingual_lrc):
    """LRC file on disk."""
    path = temp_dir / "song.lrc"
    path.write_text(bilingual_lrc, encoding="utf-8")
    return path


@pytest.fixture
def no_filter_config():
    return LyricsConfig(enable_lyrics_filter=False)


@pytest.fixture
def config_file(temp_dir):
    """Preferences file holding lyrics options next to unrelated app settings."""
    path = temp_dir / "config.json"
    path.write_text(
        json.dumps({
            "font_family": "MiSans",
            "font_size": 16,
            "show_translation": False,
            "enable_lyrics_filter": True,
            "lyrics_filter_regex": "：",
        }, ensure_ascii=False),
        encoding="utf-8",
    )
    return path
