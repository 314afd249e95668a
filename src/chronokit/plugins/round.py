from __future__ import annotations

import calendar
from datetime import datetime, timedelta
from typing import Any, Union

from chronokit.application.plugins import install_methods
from chronokit.domain.errors import UnsupportedUnitError
from chronokit.plugins.support import rolled_date, round_to_nearest
from chronokit.ports.plugins import InstantCapabilities


def round_instant(caps: InstantCapabilities, instant: Any, unit: str, nearest: Union[int, float] = 1) -> Any:
    """Rounds half up to the nearest multiple of ``nearest`` ``unit``s.

    Units above the hour land on midnight; weeks snap to the closer Monday.
    """
    if nearest <= 0:
        raise ValueError(f"nearest must be positive, got {nearest}")
    d = caps.internal_date(instant)
    ms = d.microsecond // 1000

    if unit == "millisecond":
        rounded = int(round_to_nearest(ms, nearest))
        local = d.replace(microsecond=0) + timedelta(milliseconds=rounded)
    elif unit == "second":
        whole = round_to_nearest(d.second + ms / 1000, nearest)
        local = d.replace(second=0, microsecond=0) + timedelta(seconds=whole)
    elif unit == "minute":
        whole = round_to_nearest(d.minute + d.second / 60 + ms / 60_000, nearest)
        local = d.replace(minute=0, second=0, microsecond=0) + timedelta(minutes=whole)
    elif unit == "hour":
        whole = round_to_nearest(d.hour + d.minute / 60 + d.second / 3_600 + ms / 3_600_000, nearest)
        local = datetime(d.year, d.month, d.day) + timedelta(hours=whole)
    elif unit == "day":
        fraction = d.hour / 24 + d.minute / 1_440 + d.second / 86_400 + ms / 86_400_000
        whole = int(round_to_nearest(d.day + fraction, nearest))
        local = rolled_date(d.year, d.month, whole)
    elif unit == "week":
        start = datetime(d.year, d.month, d.day) - timedelta(days=d.weekday())
        end = start + timedelta(days=7)
        local = end if end - d < d - start else start
    elif unit == "month":
        position = d.month - 1 + d.day / calendar.monthrange(d.year, d.month)[1]
        local = rolled_date(d.year, int(round_to_nearest(position, nearest)) + 1, 1)
    elif unit == "year":
        day_of_year = (datetime(d.year, d.month, d.day) - datetime(d.year, 1, 1)).days
        length = 366 if calendar.isleap(d.year) else 365
        local = rolled_date(int(round_to_nearest(d.year + day_of_year / length, nearest)), 1, 1)
    else:
        raise UnsupportedUnitError(unit)
    return caps.with_native(instant, local, "round")


def round_plugin(host: type, caps: InstantCapabilities) -> None:
    install_methods(host, caps, round=round_instant)
