import pytest

from chronokit import Instant
from chronokit.plugins.business import BusinessHourOptions

WEDNESDAY = (2025, 1, 8)
FRIDAY = (2025, 1, 10)
SUNDAY = (2025, 1, 12)


def test_default_weekend_is_friday_and_saturday():
    assert Instant.from_fields(*FRIDAY).is_weekend()
    assert Instant.from_fields(2025, 1, 11).is_weekend()
    assert Instant.from_fields(*SUNDAY).is_workday()


def test_weekend_follows_week_start_and_length():
    assert Instant.from_fields(*SUNDAY).is_weekend(week_starts_on=1)
    assert not Instant.from_fields(*FRIDAY).is_weekend(week_starts_on=0, weekend_length=1)
    assert Instant.from_fields(*WEDNESDAY).is_weekend(weekend_days=[3])


def test_business_hours_on_a_workday():
    assert Instant.from_fields(*WEDNESDAY, 10).is_business_hour()
    assert Instant.from_fields(*WEDNESDAY, 9).is_business_hour()
    assert not Instant.from_fields(*WEDNESDAY, 17).is_business_hour()
    assert not Instant.from_fields(*FRIDAY, 10).is_business_hour()


def test_overnight_business_hours():
    options = BusinessHourOptions(business_start_hour=22, business_end_hour=6)

    assert Instant.from_fields(*WEDNESDAY, 23).is_business_hour(options)
    assert Instant.from_fields(*WEDNESDAY, 2).is_business_hour(options)
    assert not Instant.from_fields(*WEDNESDAY, 10).is_business_hour(options)


def test_empty_business_window():
    assert not Instant.from_fields(*WEDNESDAY, 9).is_business_hour(business_start_hour=9, business_end_hour=9)


def test_business_hour_options_are_validated():
    with pytest.raises(ValueError):
        BusinessHourOptions(business_start_hour=24)
    with pytest.raises(ValueError):
        BusinessHourOptions(weekend_length=3)


@pytest.mark.parametrize("month,quarter", [(7, 1), (9, 1), (10, 2), (1, 3), (4, 4), (6, 4)])
def test_fiscal_quarter_from_july(month, quarter):
    assert Instant.from_fields(2025, month, 15).to_fiscal_quarter() == quarter


def test_fiscal_quarter_with_calendar_year():
    assert Instant.from_fields(2025, 2, 1).to_fiscal_quarter(start_month=1) == 1
    assert Instant.from_fields(2025, 12, 1).to_fiscal_quarter(start_month=1) == 4

    with pytest.raises(ValueError):
        Instant.from_fields(2025, 2, 1).to_fiscal_quarter(start_month=13)


def test_academic_year():
    assert Instant("2024-09-01").to_academic_year() == "2024-2025"
    assert Instant("2025-03-01").to_academic_year() == "2024-2025"
    assert Instant("2025-07-01").to_academic_year() == "2025-2026"
