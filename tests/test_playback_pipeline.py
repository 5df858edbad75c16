"""End-to-end playback: parse, select lines and animate them at 60 Hz."""

from synclyrics.config import ANIMATION_INTERVAL_MS, SWEEP_INTERVAL_MS, LyricsConfig
from synclyrics.core.sync import LyricsSession

LRC = "\n".join([
    "[ar:Someone]",
    "[00:00.00]作词：某人",
    "[00:02.00]Yesterday, all my troubles seemed so far away",
    "[00:02.00]昨天，所有烦恼似乎都很遥远",
    "[00:06.50]今天 I believe",
    "[00:09.00]ありがとう",
])


def _play(session, start, end):
    frames = []
    next_sweep = start + SWEEP_INTERVAL_MS
    for position in range(start, end, ANIMATION_INTERVAL_MS):
        frames.append(session.tick(position))
        if position >= next_sweep:
            session.sweep()
            next_sweep += SWEEP_INTERVAL_MS
    return frames


def test_lines_are_ordered_and_filtered():
    session = LyricsSession(LyricsConfig(lyrics_filter_regex="："))
    session.update_lyrics(LRC)

    texts = [ln.original_text for ln in session.lines]
    assert texts == [
        "Yesterday, all my troubles seemed so far away",
        "今天 I believe",
        "ありがとう",
    ]
    for line in session.lines:
        line.validate()


def test_progress_is_monotonic_during_playback():
    session = LyricsSession(LyricsConfig(enable_lyrics_filter=False))
    session.update_lyrics(LRC)

    frames = _play(session, 2000, 6500)
    previous = {}
    for frame in frames:
        assert frame.line.start_time_ms == 2000
        for i, value in enumerate(frame.progress):
            assert 0.0 <= value <= 1.0
            assert value >= previous.get(i, 0.0)
            previous[i] = value

    # The line's words all finish well before the next line starts
    assert all(v == 1.0 for v in frames[-1].progress)


def test_sweep_bounds_cache_size():
    session = LyricsSession(LyricsConfig(enable_lyrics_filter=False))
    session.update_lyrics(LRC)

    _play(session, 0, 15000)
    # Only the last line's words can still be cached
    last_line = session.lines[-1]
    assert len(session.progress) <= len(last_line.word_timings)
