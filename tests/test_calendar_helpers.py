from datetime import datetime

import pytest

from chronokit import Instant, InvalidDateError, UnsupportedUnitError
from chronokit.plugins.date_range import DateRangeOptions
from chronokit.plugins.greeting import GreetingConfigs, greet
from chronokit.plugins.support import rolled_date

STAMP = "YYYY-MM-DD HH:mm:ss.mss"


@pytest.mark.parametrize(
    "value,unit,nearest,expected",
    [
        ("2025-01-01T10:29:30Z", "hour", 1, "2025-01-01 10:00:00.000"),
        ("2025-01-01T10:30:00Z", "hour", 1, "2025-01-01 11:00:00.000"),
        ("2025-01-01T10:07:31Z", "minute", 15, "2025-01-01 10:15:00.000"),
        ("2025-01-01T10:07:29.600Z", "second", 1, "2025-01-01 10:07:30.000"),
        ("2025-01-01T10:07:29.123Z", "millisecond", 50, "2025-01-01 10:07:29.100"),
        ("2025-01-01T13:00:00Z", "day", 1, "2025-01-02 00:00:00.000"),
        ("2025-01-03T12:00:00Z", "week", 1, "2025-01-06 00:00:00.000"),
        ("2025-01-02T12:00:00Z", "week", 1, "2024-12-30 00:00:00.000"),
        ("2025-01-20T00:00:00Z", "month", 1, "2025-02-01 00:00:00.000"),
        ("2025-07-03T00:00:00Z", "year", 1, "2026-01-01 00:00:00.000"),
        ("2025-06-01T00:00:00Z", "year", 1, "2025-01-01 00:00:00.000"),
        ("2025-12-20T00:00:00Z", "month", 1, "2026-01-01 00:00:00.000"),
        ("2025-01-31T18:00:00Z", "day", 1, "2025-02-01 00:00:00.000"),
    ],
)
def test_round(value, unit, nearest, expected):
    assert Instant(value).round(unit, nearest).format(STAMP) == expected


def test_round_keeps_offset_and_rejects_bad_input():
    shown = Instant("2025-01-01T00:40:00Z").time_zone("UTC+06:00").round("hour")

    assert shown.format("HH:mm") == "07:00"
    assert shown.offset == "UTC+06:00"
    assert shown.origin == "round"

    with pytest.raises(UnsupportedUnitError):
        Instant("2025-01-01").round("decade")
    with pytest.raises(ValueError):
        Instant("2025-01-01").round("hour", 0)


def test_rolled_date_carries_overflow_forward():
    assert rolled_date(2025, 13, 1) == datetime(2026, 1, 1)
    assert rolled_date(2025, 2, 30) == datetime(2025, 3, 2)
    assert rolled_date(2025, 0, 1) == datetime(2024, 12, 1)

    with pytest.raises(InvalidDateError):
        rolled_date(9999, 13, 1)


@pytest.mark.parametrize(
    "hour,part",
    [(22, "night"), (0, "midnight"), (3, "late_night"), (8, "morning"), (13, "afternoon"), (18, "evening")],
)
def test_part_of_day(hour, part):
    assert Instant.from_fields(2025, 1, 1, hour).get_part_of_day() == part


def test_part_of_day_overrides_wrap_midnight():
    assert Instant.from_fields(2025, 1, 1, 3).get_part_of_day({"night": (22, 4)}) == "night"
    assert Instant.from_fields(2025, 1, 1, 19).get_part_of_day({"evening": (17, 18)}) == "night"


@pytest.mark.parametrize(
    "clock,message",
    [
        ("01:00", "Hello, Night Owl!"),
        ("09:00", "Good Morning!"),
        ("12:30", "Good Noon!"),
        ("15:00", "Good Afternoon!"),
        ("20:00", "Good Evening!"),
    ],
)
def test_default_greetings(clock, message):
    assert greet(clock) == message


def test_greeting_configuration():
    configs = GreetingConfigs(evening_ends="21:00", prepend_to_msg=">> ", append_to_msg=" <<")

    assert greet("22:00", configs) == ">> Greetings! <<"
    assert Instant.from_fields(2025, 1, 1, 9).get_greeting(morning_message="Morning, team!") == "Morning, team!"

    with pytest.raises(ValueError):
        GreetingConfigs(morning_ends="25:00")


def test_palindrome_dates():
    assert Instant("2021-12-02").is_palindrome_date()
    assert Instant("2020-02-02").is_palindrome_date()
    assert Instant("2012-10-02").is_palindrome_date()
    assert not Instant("2022-02-22").is_palindrome_date()
    assert not Instant("2025-01-01").is_palindrome_date()
    assert Instant("2012-11-21").is_palindrome_date(short_year=True)
    assert not Instant("2012-11-21").is_palindrome_date()


def test_dates_in_range_between_bounds():
    dates = Instant("2025-01-01T00:00:00Z").get_dates_in_range(to="2025-01-03T00:00:00Z")

    assert dates == [
        "2025-01-01T00:00:00.000+00:00",
        "2025-01-02T00:00:00.000+00:00",
        "2025-01-03T00:00:00.000+00:00",
    ]


def test_dates_in_range_defaults_to_four_weeks():
    assert len(Instant("2025-01-01").get_dates_in_range()) == 29


def test_dates_in_range_span_and_utc_output():
    dates = Instant("2025-01-01T00:00:00Z").time_zone("UTC+06:00").get_dates_in_range(span=2, unit="day", output="utc")

    assert dates == ["2025-01-01T00:00:00.000Z", "2025-01-02T00:00:00.000Z", "2025-01-03T00:00:00.000Z"]


def test_dates_in_range_keeps_time_zone():
    dates = Instant("2025-01-01T00:00:00Z").time_zone("UTC+06:00").get_dates_in_range(span=1, unit="day")

    assert dates == ["2025-01-01T06:00:00.000+06:00", "2025-01-02T06:00:00.000+06:00"]


def test_dates_in_range_filters_days():
    start = Instant("2025-01-03T00:00:00Z")

    skipped = start.get_dates_in_range(to="2025-01-06T00:00:00Z", skip_days=["Saturday", "sunday"])
    only = start.get_dates_in_range(to="2025-01-20T00:00:00Z", only_days=[1], skip_days=[1])

    assert [date[:10] for date in skipped] == ["2025-01-03", "2025-01-06"]
    assert [date[:10] for date in only] == ["2025-01-06", "2025-01-13", "2025-01-20"]


def test_dates_in_range_backwards_and_rounded():
    options = DateRangeOptions(**{"from": "2025-01-03T15:00:00Z", "to": "2025-01-01T09:00:00Z"}, round_date=True)

    dates = Instant("2025-01-01").get_dates_in_range(options)

    assert dates == [
        "2025-01-03T00:00:00.000+00:00",
        "2025-01-02T00:00:00.000+00:00",
        "2025-01-01T00:00:00.000+00:00",
    ]


def test_dates_in_range_rejects_unknown_day():
    with pytest.raises(ValueError):
        DateRangeOptions(skip_days=["Caturday"])


def test_dates_for_day_within_a_span():
    dates = Instant("2025-01-01T00:00:00Z").get_dates_for_day("Wednesday", span=7, unit="day")

    assert dates == ["2025-01-01T00:00:00.000+00:00", "2025-01-08T00:00:00.000+00:00"]


def test_dates_for_day_between_bounds_in_utc():
    dates = Instant("2025-01-01").get_dates_for_day("monday", **{"from": "2025-01-01", "to": "2025-01-31"}, output="utc")

    assert dates == [
        "2025-01-06T00:00:00.000Z",
        "2025-01-13T00:00:00.000Z",
        "2025-01-20T00:00:00.000Z",
        "2025-01-27T00:00:00.000Z",
    ]


def test_dates_for_day_replaces_existing_day_filters():
    options = DateRangeOptions(span=7, unit="day", only_days=[1], skip_days=["Friday"])

    dates = Instant("2025-01-01T00:00:00Z").get_dates_for_day(5, options)

    assert dates == ["2025-01-03T00:00:00.000+00:00"]

    with pytest.raises(ValueError):
        Instant("2025-01-01").get_dates_for_day("Caturday")
