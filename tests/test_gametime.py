import pytest

from katana.gametime import MAX_FRAME_SECONDS, GameTime


def _clock(*readings):
    values = iter(readings)
    return lambda: next(values)


def test_starts_with_no_elapsed_time():
    gt = GameTime(_clock(5.0, 5.0))
    assert gt.elapsed_time == 0.0
    assert gt.total_time == 5.0


def test_update_measures_elapsed_time():
    gt = GameTime(_clock(5.0, 5.0, 5.1, 5.15))
    gt.update()
    assert gt.elapsed_time == pytest.approx(5.1 - 5.0)
    assert gt.total_time == 5.1
    gt.update()
    assert gt.elapsed_time == pytest.approx(5.15 - 5.1)
    assert gt.total_time == 5.15


def test_long_gap_keeps_previous_elapsed_time():
    gt = GameTime(_clock(1.0, 1.0, 1.05, 1.05 + MAX_FRAME_SECONDS + 1))
    gt.update()
    first = gt.elapsed_time
    gt.update()
    assert gt.elapsed_time == first
    assert gt.total_time == 1.05 + MAX_FRAME_SECONDS + 1


def test_gap_at_limit_is_accepted():
    gt = GameTime(_clock(0.0, 0.0, MAX_FRAME_SECONDS))
    gt.update()
    assert gt.elapsed_time == pytest.approx(MAX_FRAME_SECONDS)


def test_default_clock_is_monotonic():
    gt = GameTime()
    start = gt.total_time
    gt.update()
    assert gt.total_time >= start
    assert gt.elapsed_time >= 0.0