from __future__ import annotations

from datetime import datetime
from typing import Any

from chronokit.application.plugins import install_methods
from chronokit.domain.constants import MS_PER_DAY, MS_PER_HOUR, MS_PER_MINUTE, MS_PER_SECOND
from chronokit.domain.errors import UnsupportedUnitError
from chronokit.plugins.support import local_view
from chronokit.ports.plugins import InstantCapabilities


def _midnight(moment: datetime) -> datetime:
    return datetime(moment.year, moment.month, moment.day)


def _elapsed_ms(caps: InstantCapabilities, instant: Any, time: Any) -> int:
    return instant.timestamp - caps.cast(time, "compare").timestamp


def get_relative_year(caps: InstantCapabilities, instant: Any, time: Any = None) -> int:
    """Whole calendar years from ``time`` (default now) to the instant, truncated toward zero."""
    mine = caps.internal_date(instant)
    now = local_view(caps, instant, time)
    years = mine.year - now.year
    if years > 0 and (mine.month, mine.day) < (now.month, now.day):
        years -= 1
    elif years < 0 and (mine.month, mine.day) > (now.month, now.day):
        years += 1
    return years


def get_relative_month(caps: InstantCapabilities, instant: Any, time: Any = None) -> int:
    mine = caps.internal_date(instant)
    now = local_view(caps, instant, time)
    months = (mine.year - now.year) * 12 + (mine.month - now.month)
    if months > 0 and mine.day < now.day:
        months -= 1
    elif months < 0 and mine.day > now.day:
        months += 1
    return months


def get_relative_day(caps: InstantCapabilities, instant: Any, time: Any = None) -> int:
    """Calendar days between the two dates, ignoring time of day."""
    mine = _midnight(caps.internal_date(instant))
    now = _midnight(local_view(caps, instant, time))
    return (mine - now).days


def get_relative_week(caps: InstantCapabilities, instant: Any, time: Any = None) -> int:
    return get_relative_day(caps, instant, time) // 7


def get_relative_hour(caps: InstantCapabilities, instant: Any, time: Any = None) -> int:
    return _elapsed_ms(caps, instant, time) // MS_PER_HOUR


def get_relative_minute(caps: InstantCapabilities, instant: Any, time: Any = None) -> int:
    return _elapsed_ms(caps, instant, time) // MS_PER_MINUTE


def get_relative_second(caps: InstantCapabilities, instant: Any, time: Any = None) -> int:
    return _elapsed_ms(caps, instant, time) // MS_PER_SECOND


def get_relative_millisecond(caps: InstantCapabilities, instant: Any, time: Any = None) -> int:
    return _elapsed_ms(caps, instant, time)


_BY_UNIT = {
    "year": get_relative_year,
    "month": get_relative_month,
    "week": get_relative_week,
    "day": get_relative_day,
    "hour": get_relative_hour,
    "minute": get_relative_minute,
    "second": get_relative_second,
    "millisecond": get_relative_millisecond,
}


def compare(caps: InstantCapabilities, instant: Any, unit: str = "minute", time: Any = None) -> int:
    """Signed distance from ``time`` (default now) to the instant in whole ``unit``s."""
    if unit not in _BY_UNIT:
        raise UnsupportedUnitError(unit)
    return _BY_UNIT[unit](caps, instant, time)


def is_today(caps: InstantCapabilities, instant: Any) -> bool:
    return get_relative_day(caps, instant) == 0


def is_tomorrow(caps: InstantCapabilities, instant: Any) -> bool:
    return get_relative_day(caps, instant) == 1


def is_yesterday(caps: InstantCapabilities, instant: Any) -> bool:
    return get_relative_day(caps, instant) == -1


def relative_time_plugin(host: type, caps: InstantCapabilities) -> None:
    install_methods(
        host,
        caps,
        get_relative_year=get_relative_year,
        get_relative_month=get_relative_month,
        get_relative_week=get_relative_week,
        get_relative_day=get_relative_day,
        get_relative_hour=get_relative_hour,
        get_relative_minute=get_relative_minute,
        get_relative_second=get_relative_second,
        get_relative_millisecond=get_relative_millisecond,
        compare=compare,
        is_today=is_today,
        is_tomorrow=is_tomorrow,
        is_yesterday=is_yesterday,
    )
