from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from chronokit.application.plugins import install_methods
from chronokit.ports.plugins import InstantCapabilities


class BusinessHourOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    business_start_hour: int = Field(default=9, ge=0, le=23)
    business_end_hour: int = Field(default=17, ge=0, le=23)
    week_starts_on: int = Field(default=0, ge=0, le=6)
    weekend_length: int = Field(default=2, ge=1, le=2)
    weekend_days: Optional[List[int]] = None


def _weekday(caps: InstantCapabilities, instant: Any) -> int:
    return (caps.internal_date(instant).weekday() + 1) % 7


def is_weekend(
    caps: InstantCapabilities,
    instant: Any,
    week_starts_on: int = 0,
    weekend_length: int = 2,
    weekend_days: Optional[List[int]] = None,
) -> bool:
    """Weekend is either ``weekend_days`` or the last ``weekend_length`` days of the week.

    Weekdays count from Sunday (0). With ``week_starts_on=0`` the default weekend is
    Friday and Saturday.
    """
    day = _weekday(caps, instant)
    if weekend_days is not None:
        return day in weekend_days
    last_day = (week_starts_on + 6) % 7
    if weekend_length == 1:
        return day == last_day
    return day in (last_day, (week_starts_on + 5) % 7)


def is_workday(
    caps: InstantCapabilities,
    instant: Any,
    week_starts_on: int = 0,
    weekend_length: int = 2,
    weekend_days: Optional[List[int]] = None,
) -> bool:
    return not is_weekend(caps, instant, week_starts_on, weekend_length, weekend_days)


def is_business_hour(caps: InstantCapabilities, instant: Any, options: Optional[BusinessHourOptions] = None, **kwargs) -> bool:
    """Whether the instant falls on a workday within business hours.

    An end hour before the start hour describes an overnight shift.
    """
    options = options or BusinessHourOptions(**kwargs)
    if is_weekend(caps, instant, options.week_starts_on, options.weekend_length, options.weekend_days):
        return False
    start, end = options.business_start_hour, options.business_end_hour
    if start == end:
        return False
    hour = caps.internal_date(instant).hour
    if start < end:
        return start <= hour < end
    return hour >= start or hour < end


def to_fiscal_quarter(caps: InstantCapabilities, instant: Any, start_month: int = 7) -> int:
    if not 1 <= start_month <= 12:
        raise ValueError(f"start_month must be between 1 and 12, got {start_month}")
    month = caps.internal_date(instant).month
    return (month - start_month + 12) % 12 // 3 + 1


def to_academic_year(caps: InstantCapabilities, instant: Any) -> str:
    """Academic year running July to June, e.g. ``"2024-2025"``."""
    local = caps.internal_date(instant)
    if local.month >= 7:
        return f"{local.year}-{local.year + 1}"
    return f"{local.year - 1}-{local.year}"


def business_plugin(host: type, caps: InstantCapabilities) -> None:
    install_methods(
        host,
        caps,
        is_weekend=is_weekend,
        is_workday=is_workday,
        is_business_hour=is_business_hour,
        to_fiscal_quarter=to_fiscal_quarter,
        to_academic_year=to_academic_year,
    )
