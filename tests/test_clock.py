import pytest

from dollhouse.engine.clock import SimClock, TimeOfDay


def _at(hour: int, minute: int = 0, day: int = 0) -> SimClock:
    return SimClock(elapsed_minutes=day * 1440 + hour * 60 + minute)


def test_advance_adds_speed_over_sixty_minutes():
    clock = SimClock(elapsed_minutes=480, speed_multiplier=600)
    clock.advance()
    assert clock.elapsed_minutes == pytest.approx(490)
    assert clock.time_label() == "Mon 08:10"


def test_day_and_weekday_roll_over():
    clock = _at(0, day=8)
    assert clock.day == 9
    assert clock.day_of_week == 1
    assert clock.weekday_name == "Tue"


@pytest.mark.parametrize("hour,minute,night", [
    (22, 0, True),
    (5, 59, True),
    (6, 0, False),
    (21, 59, False),
    (0, 0, True),
])
def test_is_night(hour, minute, night):
    clock = _at(hour, minute)
    assert clock.is_night is night
    assert clock.is_day is (not night)
    assert clock.night_multiplier == (0.5 if night else 1.0)


@pytest.mark.parametrize("hour,minute,wake", [
    (7, 0, True),
    (6, 59, False),
    (21, 59, True),
    (22, 0, False),
    (2, 0, False),
])
def test_wake_window(hour, minute, wake):
    clock = _at(hour, minute)
    assert clock.is_wake_time() is wake
    assert clock.in_sleep_window() is (not wake)


def test_bedtime_boundary():
    assert not _at(21, 59).is_past_bedtime()
    assert _at(22, 0).is_past_bedtime()


@pytest.mark.parametrize("hour,expected", [
    (3, TimeOfDay.NIGHT),
    (8, TimeOfDay.MORNING),
    (12, TimeOfDay.MIDDAY),
    (15, TimeOfDay.AFTERNOON),
    (19, TimeOfDay.EVENING),
])
def test_time_of_day(hour, expected):
    assert _at(hour).time_of_day is expected


def test_morning_and_evening_windows():
    assert _at(6).is_morning and not _at(10).is_morning
    assert _at(18).is_evening and not _at(22).is_evening


def test_daylight_range():
    assert _at(12).daylight() == pytest.approx(1.0)
    assert _at(0).daylight() == pytest.approx(0.4)
    for hour in range(24):
        assert 0.4 <= _at(hour, 30).daylight() <= 1.0
