import pytest

from chronokit import Instant, InvalidDateError, UnsupportedUnitError

STAMP = "YYYY-MM-DD HH:mm:ss.mss"


def test_add_fixed_units():
    base = Instant("2025-01-01T00:00:00Z")

    assert base.add(90, "minute").format(STAMP) == "2025-01-01 01:30:00.000"
    assert base.add(1.5, "hour").format(STAMP) == "2025-01-01 01:30:00.000"
    assert base.add(2, "week").format(STAMP) == "2025-01-15 00:00:00.000"
    assert base.add(250, "millisecond").format(STAMP) == "2025-01-01 00:00:00.250"
    assert base.add(-1, "second").format(STAMP) == "2024-12-31 23:59:59.000"


def test_add_calendar_units_roll_overflow_forward():
    assert Instant("2025-01-31").add(1, "month").format("YYYY-MM-DD") == "2025-03-03"
    assert Instant("2024-02-29").add(1, "year").format("YYYY-MM-DD") == "2025-03-01"
    assert Instant("2025-03-15").add(-3, "month").format("YYYY-MM-DD") == "2024-12-15"
    assert Instant("2025-01-15").add(13, "month").format("YYYY-MM-DD") == "2026-02-15"


def test_convenience_adders_match_add():
    base = Instant("2025-01-01T00:00:00Z")

    assert base.add_milliseconds(5) == base.add(5, "millisecond")
    assert base.add_seconds(5) == base.add(5, "second")
    assert base.add_minutes(5) == base.add(5, "minute")
    assert base.add_hours(5) == base.add(5, "hour")
    assert base.add_days(5) == base.add(5, "day")
    assert base.add_weeks(5) == base.add(5, "week")
    assert base.add_months(5) == base.add(5, "month")
    assert base.add_years(5) == base.add(5, "year")


def test_subtract_is_negative_add():
    base = Instant("2025-03-01T00:00:00Z")

    assert base.subtract(1, "day").format("YYYY-MM-DD") == "2025-02-28"
    assert base.subtract(1, "day") == base.add(-1, "day")


def test_add_keeps_display_offset():
    shown = Instant("2025-01-01T00:00:00Z").time_zone("UTC+06:00").add(2, "day")

    assert shown.offset == "UTC+06:00"
    assert shown.format("YYYY-MM-DD HH:mm") == "2025-01-03 06:00"


def test_add_rejects_unknown_unit():
    with pytest.raises(UnsupportedUnitError) as excinfo:
        Instant("2025-01-01").add(1, "fortnight")

    assert excinfo.value.unit == "fortnight"


def test_add_out_of_range_raises():
    with pytest.raises(InvalidDateError):
        Instant("2025-01-01").add(10_000, "year")


@pytest.mark.parametrize(
    "unit,start,end",
    [
        ("year", "2024-01-01 00:00:00.000", "2024-12-31 23:59:59.999"),
        ("month", "2024-02-01 00:00:00.000", "2024-02-29 23:59:59.999"),
        ("week", "2024-02-05 00:00:00.000", "2024-02-11 23:59:59.999"),
        ("day", "2024-02-10 00:00:00.000", "2024-02-10 23:59:59.999"),
        ("hour", "2024-02-10 13:00:00.000", "2024-02-10 13:59:59.999"),
        ("minute", "2024-02-10 13:45:00.000", "2024-02-10 13:45:59.999"),
        ("second", "2024-02-10 13:45:30.000", "2024-02-10 13:45:30.999"),
    ],
)
def test_start_and_end_of_unit(unit, start, end):
    instant = Instant("2024-02-10T13:45:30.500Z")

    assert instant.start_of(unit).format(STAMP) == start
    assert instant.end_of(unit).format(STAMP) == end
    assert instant.end_of(unit).add(1, "millisecond") == instant.start_of(unit).add(1, unit)


def test_week_starts_on_monday():
    assert Instant("2025-01-01").start_of("week").format("YYYY-MM-DD ddd") == "2024-12-30 Monday"
    assert Instant("2025-01-05").start_of("week").format("YYYY-MM-DD") == "2024-12-30"


def test_end_of_year_is_adjacent_to_next_year():
    last = Instant("2024-12-31T12:00:00Z").end_of("year")

    assert last.add(1, "millisecond").format(STAMP) == "2025-01-01 00:00:00.000"
    assert last.origin == "end_of"


def test_start_of_uses_display_offset():
    shown = Instant("2025-01-01T20:00:00Z").time_zone("UTC+06:00")

    assert shown.start_of("day").to_iso_string() == "2025-01-01T18:00:00.000Z"


def test_fractional_month_diff():
    value = Instant("2025-02-14").diff("2025-01-15", "month")

    assert value == pytest.approx(1 - 1 / 31)
    assert round(value, 2) == 0.97


def test_diff_fixed_units_are_signed():
    later = Instant("2025-01-03T12:00:00Z")

    assert later.diff("2025-01-01T00:00:00Z", "day") == 2.5
    assert later.diff("2025-01-04T12:00:00Z", "hour") == -24
    assert later.diff("2025-01-03T11:59:59Z", "millisecond") == 1_000


def test_diff_years_are_months_over_twelve():
    assert Instant("2026-01-01").diff("2025-01-01", "year") == 1
    assert Instant("2025-07-01").diff("2025-01-01", "year") == pytest.approx(0.5)


def test_diff_rejects_unknown_unit():
    with pytest.raises(UnsupportedUnitError):
        Instant("2025-01-01").diff("2024-01-01", "decade")


@pytest.mark.parametrize(
    "year,expected",
    [(2000, True), (2400, True), (2024, True), (1900, False), (2100, False), (2023, False)],
)
def test_leap_years(year, expected):
    assert Instant.from_fields(year).is_leap_year() is expected


def test_month_lengths_and_day_of_year():
    assert Instant("2024-02-10").days_in_month() == 29
    assert Instant("2023-02-10").last_date_of_month == 28
    assert Instant("2024-12-31").get_day_of_year() == 366
    assert Instant("2025-03-01").get_day_of_year() == 60


@pytest.mark.parametrize(
    "value,week,week_year",
    [
        ("2018-01-01", 1, 2018),  # Monday
        ("2019-01-01", 1, 2019),  # Tuesday
        ("2020-01-01", 1, 2020),  # Wednesday
        ("2015-01-01", 1, 2015),  # Thursday
        ("2016-01-01", 53, 2015),  # Friday
        ("2022-01-01", 52, 2021),  # Saturday
        ("2023-01-01", 52, 2022),  # Sunday
        ("2024-12-30", 1, 2025),
        ("2020-12-31", 53, 2020),
    ],
)
def test_iso_week_numbers(value, week, week_year):
    instant = Instant(value)

    assert instant.get_week() == week
    assert instant.get_week_year() == week_year
    assert instant.get("week") == week


def test_get_and_set():
    instant = Instant("2025-01-31T10:00:00Z")

    assert instant.get("hour") == 10
    assert instant.set("year", 2030).format("YYYY-MM-DD") == "2030-01-31"
    assert instant.set("month", 2).format("YYYY-MM-DD") == "2025-03-03"
    assert instant.set("hour", 23).format("HH:mm") == "23:00"
    assert instant.set("week", 10).get_week() == 10
    assert instant.set("day", 1).origin == "set"


def test_is_same_at_unit_granularity():
    morning = Instant("2025-01-01T10:00:00Z")

    assert morning.is_same("2025-01-01T23:00:00Z", "day")
    assert not morning.is_same("2025-01-02T00:00:00Z", "day")
    assert morning.is_same("2025-06-30", "year")
    assert morning.is_equal("2025-01-01T10:00:00.000Z")


def test_before_and_after():
    instant = Instant("2025-01-15T12:00:00Z")

    assert instant.is_before("2025-01-16")
    assert instant.is_after("2025-01-15T11:59:59Z")
    assert not instant.is_after("2025-01-15T00:00:00Z", "day")
    assert instant.is_same_or_before("2025-01-15T00:00:00Z", "day")
    assert instant.is_same_or_after("2025-01-15T12:00:00Z")


@pytest.mark.parametrize(
    "inclusive,expected_at_start,expected_at_end",
    [("()", False, False), ("[]", True, True), ("[)", True, False), ("(]", False, True)],
)
def test_is_between_inclusivity(inclusive, expected_at_start, expected_at_end):
    start, end = "2025-01-01", "2025-01-31"

    assert Instant("2025-01-15").is_between(start, end, inclusive)
    assert Instant(start).is_between(start, end, inclusive) is expected_at_start
    assert Instant(end).is_between(start, end, inclusive) is expected_at_end


def test_is_between_with_unit_and_bad_inclusive():
    assert Instant("2025-01-31T18:00:00Z").is_between("2025-01-01", "2025-01-31", "[]", "day")

    with pytest.raises(ValueError):
        Instant("2025-01-15").is_between("2025-01-01", "2025-01-31", "<>")


def test_to_utc_and_to_local():
    shown = Instant("2025-06-01T12:00:00Z").time_zone("UTC+05:45")

    assert shown.to_utc().offset == "UTC+00:00"
    assert shown.to_utc().time_zone("UTC+05:45") == shown
    assert shown.to_local().offset == "UTC+00:00"
    assert shown.to_local().origin == "to_local"


def test_is_dst_false_with_fixed_host_offset():
    assert Instant("2025-07-01").is_dst() is False


def test_month_diff_divides_by_the_other_operands_month_length():
    # Feb has 28 days in 2025; using March's 31 would give 1 - 1/31.
    assert Instant("2025-03-14").diff("2025-02-15", "month") == pytest.approx(1 - 1 / 28)
