from datetime import date

import pytest
from pydantic import ValidationError

from questlog.core.time_utils import format_day, pace_min_per_mile, parse_day, speed_mph
from questlog.models.activity import ActivityBase, ActivityKind, Cycling, Running, Swimming


DAY = date(2022, 11, 3)


def test_running_summary():
    run = Running(date=DAY, minutes=30, distance_mi=3.0)
    assert run.summary() == (
        "03 Nov 2022 Running (30 min) - Distance 3.0 miles, Speed 6.0 mph, Pace: 10.00 min per mile"
    )


def test_cycling_summary():
    ride = Cycling(date=DAY, minutes=30, speed_mph=15.0)
    assert ride.distance() == pytest.approx(7.5)
    assert ride.summary() == (
        "03 Nov 2022 Cycling (30 min) - Distance 7.5 miles, Speed 15.0 mph, Pace: 4.00 min per mile"
    )


def test_swimming_summary():
    swim = Swimming(date=DAY, minutes=40, laps=64)
    assert swim.distance() == pytest.approx(1.984)
    assert swim.summary() == (
        "03 Nov 2022 Swimming (40 min) - Distance 2.0 miles, Speed 3.0 mph, Pace: 20.16 min per mile"
    )


def test_zero_distance_has_zero_pace():
    assert Swimming(date=DAY, minutes=10, laps=0).pace() == 0.0
    assert Cycling(date=DAY, minutes=10, speed_mph=0).pace() == 0.0


def test_minutes_must_be_positive():
    with pytest.raises(ValidationError):
        Running(date=DAY, minutes=0, distance_mi=1.0)


def test_time_utils():
    assert parse_day("2022-11-03") == DAY
    assert parse_day("03 Nov 2022") == DAY
    assert parse_day("11/03/2022") == DAY
    assert format_day(date(2024, 1, 9)) == "09 Jan 2024"
    assert speed_mph(0, 3.0) == 0.0
    assert pace_min_per_mile(30, 0) == 0.0
    with pytest.raises(ValueError):
        parse_day("yesterday")


def test_activity_base_cannot_be_instantiated():
    with pytest.raises(TypeError):
        ActivityBase(kind=ActivityKind.running, date=DAY, minutes=30)


def test_kind_drives_label():
    assert Running(date=DAY, minutes=30, distance_mi=3.0).label == "Running"
    assert Swimming(date=DAY, minutes=30, laps=4).kind is ActivityKind.swimming
