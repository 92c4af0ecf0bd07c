import pytest

from iats.timeutil import (
    cycle_every_ms,
    freq_to_ticks,
    micros_delay,
    micros_now,
    millis_to_micros,
    millis_to_ticks,
    secs_to_micros,
    secs_to_ticks,
    ticks_elapsed,
    ticks_to_millis,
)


@pytest.mark.parametrize("ms", [0, 10, 250, 1000, 12340])
def test_ticks_round_trip(ms):
    assert ticks_to_millis(millis_to_ticks(ms)) == ms


def test_secs_to_ticks_matches_millis():
    assert secs_to_ticks(3) == millis_to_ticks(3000)
    assert secs_to_ticks(3, 1) == millis_to_ticks(3000, 1)


def test_freq_to_ticks_matches_period():
    assert freq_to_ticks(50, 1) == millis_to_ticks(20, 1)


def test_secs_to_micros_matches_millis():
    assert secs_to_micros(2) == millis_to_micros(2000)
    assert millis_to_micros(1) * 1000 == secs_to_micros(1)


def test_ticks_elapsed_unset_since():
    assert ticks_elapsed(0, 5, 1000) is True


def test_ticks_elapsed_not_yet():
    assert ticks_elapsed(100, 150, 100) is False
    assert ticks_elapsed(100, 200, 100) is True


def test_ticks_elapsed_wraps():
    assert ticks_elapsed(0xFFFFFFF0, 0x10, 0x20) is True
    assert ticks_elapsed(0xFFFFFFF0, 0x10, 0x21) is False


def test_cycle_every_ms_range_and_period():
    for now in range(0, 5000, 37):
        idx = cycle_every_ms(now, 100, 4)
        assert 0 <= idx < 4
        assert cycle_every_ms(now + 400, 100, 4) == idx


def test_micros_now_is_monotonic():
    a = micros_now()
    b = micros_now()
    assert b >= a


def test_micros_delay_waits():
    start = micros_now()
    micros_delay(2000)
    assert micros_now() - start >= 2000