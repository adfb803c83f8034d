import pytest

from miniatari.level import (
    DELAY_CHANGE_PER_LEVEL_MS,
    INITIAL_DELAY_MS,
    MINIMUM_DELAY_MS,
    SCORE_THRESHOLD_FOR_LEVEL_UP,
    LevelTracker,
)


def _scored(points):
    tracker = LevelTracker()
    tracker.reset()
    for _ in range(points):
        tracker.increase_score()
    return tracker


def test_fresh_tracker_uses_initial_delay():
    tracker = LevelTracker()
    assert tracker.delay_ms == 120
    assert tracker.score == 0


def test_reset_restores_start_values():
    tracker = _scored(17)
    tracker.reset()
    assert (tracker.score, tracker.level, tracker.delay_ms) == (0, 1, INITIAL_DELAY_MS)


def test_no_level_up_before_threshold():
    tracker = _scored(SCORE_THRESHOLD_FOR_LEVEL_UP - 1)
    assert tracker.level == 1
    assert tracker.delay_ms == INITIAL_DELAY_MS
    assert tracker.score == SCORE_THRESHOLD_FOR_LEVEL_UP - 1


def test_level_up_at_threshold_speeds_up():
    tracker = _scored(SCORE_THRESHOLD_FOR_LEVEL_UP)
    assert tracker.level == 2
    assert tracker.delay_ms == INITIAL_DELAY_MS - DELAY_CHANGE_PER_LEVEL_MS


def test_delay_never_drops_below_minimum():
    tracker = LevelTracker()
    tracker.reset()
    previous = tracker.delay_ms
    for _ in range(200):
        tracker.increase_score()
        assert MINIMUM_DELAY_MS <= tracker.delay_ms <= previous
        previous = tracker.delay_ms
    assert tracker.delay_ms == MINIMUM_DELAY_MS


@pytest.mark.parametrize("points", [0, 4, 5, 9, 10, 42, 100])
def test_level_counts_completed_thresholds(points):
    tracker = _scored(points)
    assert tracker.level - 1 == points // SCORE_THRESHOLD_FOR_LEVEL_UP


def test_score_wraps_as_a_byte():
    tracker = _scored(256)
    assert tracker.score == 0