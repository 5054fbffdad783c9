import pytest

from racecar.timer import ZERO_TIME, LapTimer, digit_colors, format_time


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


def _parse(text):
    minutes, rest = text.split(":")
    seconds, millis = rest.split(".")
    return int(minutes) * 60 + int(seconds) + int(millis) / 1000


def test_format_zero():
    assert format_time(0.0) == "00:00.000"


def test_format_pinned_example():
    assert format_time(75.5) == "01:15.500"


@pytest.mark.parametrize("seconds", [0.25, 1.5, 59.999, 61.125, 600.75, 3599.5])
def test_format_round_trip_within_a_millisecond(seconds):
    text = format_time(seconds)
    assert len(text) == 9
    parsed = _parse(text)
    assert parsed <= seconds + 1e-9
    assert seconds - parsed < 0.001


def test_format_seconds_field_wraps_at_sixty():
    text = format_time(60.0)
    assert text.startswith("01:00")


def test_digit_colors_length_matches():
    assert len(digit_colors("12:34.567")) == 9


def test_digit_colors_table():
    colors = digit_colors("0123456789:.x")
    zero, one, two, three, four, five, six, seven, eight, nine, colon, dot, other = colors
    assert zero == seven
    assert one == eight
    assert two == nine
    assert colon == four
    assert dot == five
    assert other == six
    assert len({zero, one, two, three, four, five, six}) == 7


def test_new_timer_state():
    timer = LapTimer(FakeClock())
    assert timer.running is False
    assert timer.started is False
    assert timer.elapsed_time == 0.0
    assert timer.time_string == ZERO_TIME


def test_update_before_start_does_nothing():
    clock = FakeClock()
    timer = LapTimer(clock)
    clock.now = 5.0
    timer.update()
    assert timer.elapsed_time == 0.0
    assert timer.time_string == ZERO_TIME


def test_start_and_update_measures_from_start():
    clock = FakeClock(10.0)
    timer = LapTimer(clock)
    clock.now = 20.0
    timer.start()
    clock.now = 22.5
    timer.update()
    assert timer.elapsed_time == pytest.approx(2.5)
    assert timer.time_string == format_time(2.5)
    assert timer.running is True
    assert timer.started is True


def test_second_start_does_not_restart():
    clock = FakeClock()
    timer = LapTimer(clock)
    timer.start()
    clock.now = 3.0
    timer.start()
    clock.now = 4.0
    timer.update()
    assert timer.elapsed_time == pytest.approx(4.0)


def test_stop_freezes_elapsed_time():
    clock = FakeClock()
    timer = LapTimer(clock)
    timer.start()
    clock.now = 2.0
    timer.update()
    timer.stop()
    clock.now = 9.0
    timer.update()
    assert timer.elapsed_time == pytest.approx(2.0)
    assert timer.running is False
    assert timer.started is True


def test_stopped_timer_cannot_be_started_again_without_reset():
    clock = FakeClock()
    timer = LapTimer(clock)
    timer.start()
    timer.stop()
    timer.start()
    assert timer.running is False


def test_reset_clears_and_allows_restart():
    clock = FakeClock()
    timer = LapTimer(clock)
    timer.start()
    clock.now = 5.0
    timer.update()
    timer.reset()
    assert timer.elapsed_time == 0.0
    assert timer.time_string == ZERO_TIME
    assert timer.started is False
    clock.now = 7.0
    timer.start()
    clock.now = 8.0
    timer.update()
    assert timer.elapsed_time == pytest.approx(1.0)