import pytest

from synclyrics.core.models import WordTiming
from synclyrics.core.progress import ProgressEngine, ease_out_cubic, target_progress


def _word(text="la", start=1000, end=1300):
    return WordTiming(text=text, start_time_ms=start, end_time_ms=end)


# ------------------------------
# Target progress
# ------------------------------


def test_ease_out_cubic_endpoints():
    assert ease_out_cubic(0.0) == 0.0
    assert ease_out_cubic(1.0) == 1.0
    assert ease_out_cubic(0.5) == pytest.approx(0.875)


def test_target_progress_outside_window():
    word = _word()
    assert target_progress(word, 0) == 0.0
    assert target_progress(word, 999) == 0.0
    assert target_progress(word, 1000) == 0.0
    assert target_progress(word, 1300) == 1.0
    assert target_progress(word, 5000) == 1.0


def test_target_progress_is_increasing_and_decelerating():
    word = _word(start=0, end=300)
    values = [target_progress(word, p) for p in range(0, 301, 30)]
    steps = [b - a for a, b in zip(values, values[1:])]
    assert all(s > 0 for s in steps)
    assert all(later < earlier for earlier, later in zip(steps, steps[1:]))


def test_target_progress_zero_length_word():
    word = _word(start=1000, end=1000)
    assert target_progress(word, 999) == 0.0
    assert target_progress(word, 1000) == 1.0


# ------------------------------
# Engine
# ------------------------------


def test_first_observation_takes_target():
    engine = ProgressEngine()
    values = engine.tick(150, 0, [_word(start=0, end=300)])
    assert values == [pytest.approx(0.875)]
    assert engine.progress_for(0, 0) == pytest.approx(0.875)


def test_tick_moves_thirty_percent_toward_target():
    engine = ProgressEngine()
    words = [_word(start=0, end=300)]
    engine.tick(0, 0, words)
    assert engine.progress_for(0, 0) == 0.0

    engine.tick(300, 0, words)
    assert engine.progress_for(0, 0) == pytest.approx(0.3)

    engine.tick(300, 0, words)
    assert engine.progress_for(0, 0) == pytest.approx(0.51)


def test_tick_snaps_when_close_to_target():
    engine = ProgressEngine()
    words = [_word(start=0, end=300)]
    engine.tick(0, 0, words)
    for _ in range(20):
        engine.tick(300, 0, words)
    assert engine.progress_for(0, 0) == 1.0


def test_progress_stays_in_unit_interval():
    engine = ProgressEngine()
    words = [_word(start=0, end=300)]
    for position in [0, 300, 0, 150, 300, 100, 300]:
        value = engine.tick(position, 0, words)[0]
        assert 0.0 <= value <= 1.0


def test_spaces_are_not_cached():
    engine = ProgressEngine()
    words = [_word("a", 0, 150), _word(" ", 170, 320), _word("b", 340, 490)]
    values = engine.tick(400, 0, words)
    assert len(values) == 3
    assert len(engine) == 2
    assert (0, 1) not in engine


def test_duplicate_words_have_separate_entries():
    engine = ProgressEngine()
    words = [_word("la", 0, 120), _word("la", 140, 260)]
    values = engine.tick(130, 3, words)
    assert values == [1.0, 0.0]
    assert (3, 0) in engine and (3, 1) in engine


def test_sweep_evicts_a_second_after_word_end():
    engine = ProgressEngine()
    engine.tick(300, 0, [_word(start=0, end=300)])

    assert engine.sweep(1300) == 0
    assert len(engine) == 1
    assert engine.sweep(1301) == 1
    assert len(engine) == 0


def test_sweep_defaults_to_last_position():
    engine = ProgressEngine()
    words = [_word(start=0, end=300)]
    engine.tick(0, 0, words)
    engine.tick(2000, 1, [_word(start=1900, end=2100)])
    assert engine.sweep() == 1
    assert (0, 0) not in engine
    assert (1, 0) in engine


def test_sweep_before_any_tick():
    assert ProgressEngine().sweep() == 0


def test_clear_resets_state():
    engine = ProgressEngine()
    engine.tick(100, 0, [_word(start=0, end=300)])
    engine.clear()
    assert len(engine) == 0
    assert engine.last_position_ms is None
    assert engine.progress_for(0, 0) == 0.0
