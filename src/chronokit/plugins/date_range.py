from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, List, Literal, Optional, Set, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from chronokit.application.plugins import install_methods
from chronokit.domain.constants import DAYS
from chronokit.plugins.support import local_view
from chronokit.ports.plugins import InstantCapabilities

DayRef = Union[int, str]


class DateRangeOptions(BaseModel):
    """Either explicit ``from``/``to`` bounds or a relative ``span`` of ``unit``s."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, arbitrary_types_allowed=True)

    from_: Any = Field(default=None, alias="from")
    to: Any = None
    span: Optional[int] = None
    unit: Optional[str] = None
    output: Literal["local", "utc"] = "local"
    skip_days: Optional[List[DayRef]] = None
    only_days: Optional[List[DayRef]] = None
    round_date: bool = False

    @field_validator("skip_days", "only_days")
    @classmethod
    def _check_days(cls, value: Optional[List[DayRef]]) -> Optional[List[DayRef]]:
        for day in value or []:
            _day_index(day)
        return value


def _day_index(day: DayRef) -> int:
    if isinstance(day, int):
        if not 0 <= day <= 6:
            raise ValueError(f"weekday index must be 0-6, got {day}")
        return day
    names = [name.lower() for name in DAYS]
    if day.lower() not in names:
        raise ValueError(f"unknown weekday {day!r}")
    return names.index(day.lower())


def get_dates_in_range(
    caps: InstantCapabilities, instant: Any, options: Optional[DateRangeOptions] = None, **kwargs
) -> List[str]:
    """ISO strings for each day from the start to the end bound, both inclusive.

    Defaults to four weeks from the instant. ``only_days`` wins over ``skip_days``.
    Every date keeps the instant's time zone.
    """
    options = options or DateRangeOptions(**kwargs)
    start: datetime = caps.internal_date(instant)
    end: datetime = caps.internal_date(instant.add(4, "week"))
    if options.from_ is not None or options.to is not None:
        if options.from_ is not None:
            start = local_view(caps, instant, options.from_)
        if options.to is not None:
            end = local_view(caps, instant, options.to)
    elif options.span is not None or options.unit is not None:
        end = caps.internal_date(instant.add(options.span if options.span is not None else 4, options.unit or "week"))

    if options.round_date:
        start = datetime(start.year, start.month, start.day)
        end = datetime(end.year, end.month, end.day)

    only: Optional[Set[int]] = {_day_index(day) for day in options.only_days} if options.only_days else None
    skipped: Set[int] = {_day_index(day) for day in options.skip_days or []}

    step = timedelta(days=1 if start <= end else -1)
    total = abs(end - start) // timedelta(days=1)
    dates: List[str] = []
    for index in range(total + 1):
        local = start + step * index
        weekday = (local.weekday() + 1) % 7
        if (weekday not in only) if only is not None else (weekday in skipped):
            continue
        moment = caps.with_native(instant, local, "date_range")
        dates.append(moment.to_local_iso_string() if options.output == "local" else moment.to_iso_string())
    return dates


def get_dates_for_day(
    caps: InstantCapabilities, instant: Any, day: DayRef, options: Optional[DateRangeOptions] = None, **kwargs
) -> List[str]:
    """ISO strings for every ``day`` (name or Sunday-based index) inside the range.

    The range is read exactly as :func:`get_dates_in_range` reads it; day filters
    already on ``options`` are replaced.
    """
    _day_index(day)
    options = options or DateRangeOptions(**kwargs)
    return get_dates_in_range(caps, instant, options.model_copy(update={"only_days": [day], "skip_days": None}))


def date_range_plugin(host: type, caps: InstantCapabilities) -> None:
    install_methods(host, caps, get_dates_in_range=get_dates_in_range, get_dates_for_day=get_dates_for_day)
