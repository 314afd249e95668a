from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from chronokit.application.plugins import install_methods
from chronokit.plugins.support import days_in_previous_month, local_view
from chronokit.ports.plugins import InstantCapabilities

SHORT_UNITS: Dict[str, str] = {
    "years": "y",
    "months": "mo",
    "days": "d",
    "hours": "h",
    "minutes": "m",
    "seconds": "s",
    "milliseconds": "ms",
}


class TimeDuration(BaseModel):
    model_config = ConfigDict(frozen=True)

    years: int = 0
    months: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    milliseconds: int = 0


class DurationOptions(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    to_time: Any = None
    absolute: bool = True
    max_units: int = Field(default=7, ge=1, le=7)
    separator: str = ", "
    style: Literal["full", "short"] = "full"
    show_zero: bool = False


def calendar_breakdown(earlier: datetime, later: datetime) -> Tuple[int, int, int, int, int, int, int]:
    """Years through milliseconds from ``earlier`` to ``later``, each borrowing from the next unit up.

    A negative day count borrows the length of the month before ``later``, or
    ``earlier``'s day when that is longer (Jan 31 to Mar 1 is one month and one day).
    """
    years = later.year - earlier.year
    months = later.month - earlier.month
    days = later.day - earlier.day
    hours = later.hour - earlier.hour
    minutes = later.minute - earlier.minute
    seconds = later.second - earlier.second
    milliseconds = later.microsecond // 1000 - earlier.microsecond // 1000

    if milliseconds < 0:
        milliseconds += 1000
        seconds -= 1
    if seconds < 0:
        seconds += 60
        minutes -= 1
    if minutes < 0:
        minutes += 60
        hours -= 1
    if hours < 0:
        hours += 24
        days -= 1
    if days < 0:
        days += max(days_in_previous_month(later), earlier.day)
        months -= 1
    if months < 0:
        months += 12
        years -= 1
    return years, months, days, hours, minutes, seconds, milliseconds


def duration(caps: InstantCapabilities, instant: Any, to_time: Any = None, absolute: bool = True) -> TimeDuration:
    """Calendar-aware breakdown between the instant and ``to_time`` (default now).

    With ``absolute=False`` a ``to_time`` in the past yields negated components.
    """
    mine = caps.internal_date(instant)
    target = local_view(caps, instant, to_time)
    is_future = target > mine
    earlier, later = (mine, target) if is_future else (target, mine)
    parts = calendar_breakdown(earlier, later)
    if not absolute and not is_future:
        parts = tuple(-value if value else 0 for value in parts)
    return TimeDuration(**dict(zip(SHORT_UNITS, parts)))


def duration_string(caps: InstantCapabilities, instant: Any, options: Optional[DurationOptions] = None, **kwargs) -> str:
    options = options or DurationOptions(**kwargs)
    result = duration(caps, instant, options.to_time, options.absolute)

    parts = []
    for unit, value in result.model_dump().items():
        if not options.show_zero and value == 0:
            continue
        if options.style == "short":
            parts.append(f"{value}{SHORT_UNITS[unit]}")
        else:
            parts.append(f"{value} {unit[:-1] if abs(value) == 1 else unit}")
    parts = parts[: options.max_units]

    if not parts:
        return "0s" if options.style == "short" else "0 seconds"
    return options.separator.join(parts)


def duration_plugin(host: type, caps: InstantCapabilities) -> None:
    install_methods(host, caps, duration=duration, duration_string=duration_string)
