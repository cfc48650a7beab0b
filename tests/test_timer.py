import re

import pytest

from sudokugame.timer import Timer, format_time


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def _parse(text: str) -> int:
    match = re.fullmatch(r"Time: (\d{2,}):(\d{2})", text)
    assert match is not None
    return int(match.group(1)) * 60 + int(match.group(2))


def test_remaining_at_start_is_full_limit():
    clock = FakeClock()
    timer = Timer(10, clock)
    timer.start()
    assert timer.remaining() == 10 * 60
    assert timer.is_time_up() is False


def test_remaining_counts_down_with_clock():
    clock = FakeClock()
    timer = Timer(7, clock)
    timer.start()
    clock.advance(90)
    assert timer.remaining() == 7 * 60 - 90


def test_partial_seconds_are_truncated():
    clock = FakeClock()
    timer = Timer(5, clock)
    timer.start()
    clock.advance(1.9)
    assert timer.remaining() == 5 * 60 - 1


def test_time_up_exactly_at_limit():
    clock = FakeClock()
    timer = Timer(5, clock)
    timer.start()
    clock.advance(5 * 60 - 1)
    assert timer.is_time_up() is False
    clock.advance(1)
    assert timer.remaining() == 0
    assert timer.is_time_up() is True


def test_time_up_after_limit_goes_negative():
    clock = FakeClock()
    timer = Timer(1, clock)
    timer.start()
    clock.advance(75)
    assert timer.remaining() == 60 - 75
    assert timer.is_time_up() is True


def test_restart_resets_countdown():
    clock = FakeClock()
    timer = Timer(10, clock)
    timer.start()
    clock.advance(300)
    timer.start()
    assert timer.remaining() == 10 * 60


def test_zero_minutes_is_immediately_up():
    timer = Timer(0, FakeClock())
    timer.start()
    assert timer.is_time_up() is True


def test_not_started_raises():
    timer = Timer(10, FakeClock())
    with pytest.raises(RuntimeError):
        timer.remaining()
    with pytest.raises(RuntimeError):
        timer.is_time_up()


def test_negative_minutes_rejected():
    with pytest.raises(ValueError):
        Timer(-1, FakeClock())


def test_non_integer_minutes_rejected():
    with pytest.raises(TypeError):
        Timer("10", FakeClock())


def test_format_time_pinned_values():
    assert format_time(10 * 60) == "Time: 10:00"
    assert format_time(0) == "Time: 00:00"
    assert format_time(5) == "Time: 00:05"


@pytest.mark.parametrize("seconds", [0, 1, 59, 60, 61, 299, 420, 599, 600, 3599])
def test_format_time_round_trip(seconds):
    assert _parse(format_time(seconds)) == seconds


def test_format_time_negative_rejected():
    with pytest.raises(ValueError):
        format_time(-1)


def test_format_time_of_timer_remaining():
    clock = FakeClock()
    timer = Timer(7, clock)
    timer.start()
    clock.advance(42)
    assert _parse(format_time(timer.remaining())) == 7 * 60 - 42