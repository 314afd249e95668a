from __future__ import annotations

import calendar
import logging
import math
import re
import time as _time
from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from dateutil import parser as date_parser

from chronokit.application.plugins import PluginRegistry
from chronokit.application.resolver import ZoneId, get_resolver
from chronokit.config import get_settings
from chronokit.domain.constants import DAYS, DEFAULT_FORMAT, FIXED_UNIT_MS, MONTHS, MS_PER_DAY, MS_PER_MINUTE, TIME_UNITS
from chronokit.domain.errors import InvalidDateError, UnsupportedUnitError
from chronokit.domain.formatting import build_components, format_tokens, parse_to_fields
from chronokit.domain.offsets import format_clock_offset, format_utc_offset, offset_to_minutes, parse_iso_offset
from chronokit.ports.plugins import InstantCapabilities, Plugin

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1)
_ONE_MS = timedelta(milliseconds=1)
_DATE_ONLY = re.compile(r"^(?P<year>\d{4})(?:-(?P<month>\d{2})(?:-(?P<day>\d{2}))?)?$")
_BASIC_DATE = re.compile(r"^(?P<year>\d{4})(?P<month>\d{2})(?P<day>\d{2})$")
_TIME_PART = re.compile(
    r"^(?P<hour>\d{1,2}):(?P<minute>\d{2})(?::(?P<second>\d{2})(?:\.(?P<millisecond>\d{1,3}))?)?"
    r"(?P<offset>Z|[+-]\d{2}(?::?\d{2})?)?$"
)

DateLike = Union["Instant", int, float, str, datetime, date, None]


def host_offset(utc_ms: int) -> int:
    """Offset of the host zone in minutes at ``utc_ms``, honouring the configured override."""
    override = get_settings().local_offset
    if override is not None:
        return offset_to_minutes(override)
    try:
        moment = datetime.fromtimestamp(utc_ms / 1000, tz=timezone.utc).astimezone()
    except (OverflowError, OSError, ValueError):
        return 0
    delta = moment.utcoffset()
    return int(delta.total_seconds() // 60) if delta is not None else 0


def _to_ms(naive: datetime) -> int:
    return (naive - EPOCH) // _ONE_MS


def _from_ms(ms: int) -> datetime:
    try:
        return EPOCH + timedelta(milliseconds=ms)
    except OverflowError as exc:
        raise InvalidDateError(f"Timestamp {ms} is out of range.") from exc


def _truncate(naive: datetime) -> datetime:
    return naive.replace(microsecond=naive.microsecond // 1000 * 1000)


def _utc_view(local: datetime, offset: int) -> datetime:
    """True-UTC reading of a display-local datetime."""
    try:
        return local - timedelta(minutes=offset)
    except OverflowError as exc:
        raise InvalidDateError(f"{local.isoformat()} at offset {offset} minutes is out of range.") from exc


def normalize_fields(
    year: int,
    month: int = 1,
    day: int = 1,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> datetime:
    """Builds a naive datetime, rolling overflowing fields into the next unit.

    Month 13 becomes January of the next year and February 30 becomes early March,
    the same way a host calendar treats out-of-range field values.
    """
    try:
        year += (month - 1) // 12
        base = datetime(year, (month - 1) % 12 + 1, 1)
        return base + timedelta(days=day - 1, hours=hour, minutes=minute, seconds=second, milliseconds=millisecond)
    except (OverflowError, ValueError, TypeError) as exc:
        raise InvalidDateError(f"Invalid date fields: {year}-{month}-{day} {hour}:{minute}:{second}.{millisecond}") from exc


def _wall_to_utc_ms(naive: datetime) -> int:
    """Interprets ``naive`` as host-local wall time and returns the true-UTC milliseconds."""
    override = get_settings().local_offset
    if override is not None:
        return _to_ms(naive) - offset_to_minutes(override) * MS_PER_MINUTE
    try:
        aware = naive.astimezone(timezone.utc)
    except (OverflowError, OSError, ValueError) as exc:
        raise InvalidDateError(f"Cannot place {naive.isoformat()} in the host time zone.") from exc
    return _to_ms(aware.replace(tzinfo=None))


def _check_unit(unit: str) -> str:
    if unit not in TIME_UNITS:
        raise UnsupportedUnitError(unit)
    return unit


class Instant:
    """Immutable point in time held together with a display offset.

    The stored naive datetime carries the calendar fields as seen in the display
    offset, so every accessor reads it directly. The true UTC value is that datetime
    minus the offset.
    """

    __slots__ = ("_date", "_offset", "_tz_name", "_tz_id", "_tz_tracker", "_origin")

    _registry = PluginRegistry()

    def __init__(self, value: DateLike = None) -> None:
        source = Instant.coerce(value)
        source._copy_into(self, "root")

    # construction

    @classmethod
    def _make(
        cls,
        local: datetime,
        offset: int,
        origin: str = "root",
        tz_name: Optional[str] = None,
        tz_id: Optional[ZoneId] = None,
        tz_tracker: Optional[str] = None,
    ) -> "Instant":
        _utc_view(local, offset)
        instance = cls.__new__(cls)
        object.__setattr__(instance, "_date", _truncate(local))
        object.__setattr__(instance, "_offset", offset)
        object.__setattr__(instance, "_tz_name", tz_name)
        object.__setattr__(instance, "_tz_id", tz_id)
        object.__setattr__(instance, "_tz_tracker", tz_tracker)
        object.__setattr__(instance, "_origin", origin)
        return instance

    def _copy_into(self, target: "Instant", origin: str) -> None:
        for name in self.__slots__:
            object.__setattr__(target, name, getattr(self, name))
        object.__setattr__(target, "_origin", origin)

    @classmethod
    def _from_utc_ms(cls, utc_ms: int, origin: str = "root", offset: Optional[int] = None) -> "Instant":
        if offset is None:
            offset = host_offset(utc_ms)
        return cls._make(_from_ms(utc_ms + offset * MS_PER_MINUTE), offset, origin)

    @classmethod
    def _from_wall(cls, naive: datetime, origin: str = "root") -> "Instant":
        return cls._from_utc_ms(_wall_to_utc_ms(_truncate(naive)), origin)

    @classmethod
    def now(cls) -> "Instant":
        return cls._from_utc_ms(cls.timestamp_now())

    @classmethod
    def from_epoch(cls, ms: Union[int, float]) -> "Instant":
        if isinstance(ms, bool) or not isinstance(ms, (int, float)) or not math.isfinite(ms):
            raise InvalidDateError(f"Invalid epoch milliseconds: {ms!r}")
        return cls._from_utc_ms(int(ms))

    @classmethod
    def from_string(cls, text: str) -> "Instant":
        """Parses an ISO-8601 or free-form date string.

        Date-only strings (``YYYY``, ``YYYY-MM``, ``YYYY-MM-DD`` or ``YYYYMMDD``) mean
        midnight UTC. Date-times without an offset are read as host-local wall time.
        """
        value = text.strip()
        if not value:
            raise InvalidDateError("Empty date string.")

        match = _DATE_ONLY.match(value) or _BASIC_DATE.match(value)
        if match is not None:
            naive = normalize_fields(
                int(match.group("year")),
                int(match.group("month") or 1),
                int(match.group("day") or 1),
            )
            if naive.month != int(match.group("month") or 1):
                raise InvalidDateError(f"Invalid date string: {text!r}")
            return cls._from_utc_ms(_to_ms(naive))

        try:
            parsed = datetime.fromisoformat(value)
        except ValueError:
            logger.debug(f"{value!r} is not ISO-8601, trying dateutil")
            try:
                parsed = date_parser.parse(value)
            except (ValueError, OverflowError) as exc:
                raise InvalidDateError(f"Invalid date string: {text!r}") from exc
        return cls.from_native(parsed)

    @classmethod
    def from_native(cls, value: datetime) -> "Instant":
        """Aware datetimes keep their absolute instant, naive ones are host-local wall time."""
        if value.tzinfo is None or value.utcoffset() is None:
            return cls._from_wall(value)
        try:
            utc = value.astimezone(timezone.utc).replace(tzinfo=None)
        except OverflowError as exc:
            raise InvalidDateError(f"Datetime {value!r} is out of range.") from exc
        return cls._from_utc_ms(_to_ms(_truncate(utc)))

    @classmethod
    def from_fields(
        cls,
        year: int,
        month: int = 1,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
    ) -> "Instant":
        return cls._from_wall(normalize_fields(year, month, day, hour, minute, second, millisecond))

    @classmethod
    def coerce(cls, value: DateLike = None) -> "Instant":
        if value is None:
            return cls.now()
        if isinstance(value, Instant):
            return value
        if isinstance(value, bool):
            raise InvalidDateError(f"Cannot build an Instant from {value!r}")
        if isinstance(value, (int, float)):
            return cls.from_epoch(value)
        if isinstance(value, str):
            return cls.from_string(value)
        if isinstance(value, datetime):
            return cls.from_native(value)
        if isinstance(value, date):
            return cls.from_fields(value.year, value.month, value.day)
        raise InvalidDateError(f"Cannot build an Instant from {type(value).__name__}")

    def clone(self) -> "Instant":
        return self._derive(self._date, self._origin)

    @classmethod
    def parse(cls, text: str, template: str) -> "Instant":
        """Reads ``text`` laid out as ``template``. Raises ``FormatMismatchError`` on mismatch."""
        fields = parse_to_fields(text, template)
        naive = normalize_fields(
            fields.year, fields.month, fields.day, fields.hour, fields.minute, fields.second, fields.millisecond
        )
        if fields.offset is None:
            return cls._from_wall(naive, "parse")
        return cls._make(naive, fields.offset, "parse")

    @classmethod
    def utc(cls, value: DateLike = None) -> "Instant":
        return cls.coerce(value)._shift(0, "utc")

    @classmethod
    def min(cls, *values: DateLike) -> "Instant":
        instants = [cls.coerce(value) for value in values]
        return min(instants, key=lambda instant: instant.timestamp)

    @classmethod
    def max(cls, *values: DateLike) -> "Instant":
        instants = [cls.coerce(value) for value in values]
        return max(instants, key=lambda instant: instant.timestamp)

    @classmethod
    def today(cls, template: str = "dd, mmm DD, YYYY", use_utc: bool = False) -> str:
        return cls.now().format(template, use_utc=use_utc)

    @classmethod
    def yesterday(cls) -> "Instant":
        return cls.now().add(-1, "day")._derive_origin("yesterday")

    @classmethod
    def tomorrow(cls) -> "Instant":
        return cls.now().add(1, "day")._derive_origin("tomorrow")

    @classmethod
    def format_time_part(cls, time: str, template: str = "hh:mm:ss a") -> str:
        """Formats a time-only string such as ``14:50``, ``14:50:00.800`` or ``14:50+05:30``.

        The time is placed on today's date. Without an offset it is host-local wall
        time; with one it is converted and rendered in the host offset.
        """
        match = _TIME_PART.match(time.strip()) if isinstance(time, str) else None
        if match is None:
            raise InvalidDateError(f"Invalid time string: {time!r}")
        hour, minute = int(match.group("hour")), int(match.group("minute"))
        second = int(match.group("second") or 0)
        if hour > 23 or minute > 59 or second > 59:
            raise InvalidDateError(f"Invalid time string: {time!r}")
        millisecond = int((match.group("millisecond") or "0").ljust(3, "0"))

        today = cls.now()
        naive = normalize_fields(today.year, today.month, today.day, hour, minute, second, millisecond)
        zone = match.group("offset")
        if zone is None:
            moment = cls._from_wall(naive, "format_time_part")
        else:
            offset = parse_iso_offset(zone if len(zone) != 3 else f"{zone}:00")
            moment = cls._from_utc_ms(_to_ms(naive) - offset * MS_PER_MINUTE, "format_time_part")
        return moment.format(template)

    @staticmethod
    def is_valid_date(value: object) -> bool:
        """Whether ``value`` is a native ``datetime`` or ``date``."""
        return isinstance(value, date)

    @classmethod
    def is_date_string(cls, value: object) -> bool:
        if not isinstance(value, str):
            return False
        try:
            cls.from_string(value)
        except InvalidDateError:
            return False
        return True

    @staticmethod
    def is_valid_instant(value: object) -> bool:
        return isinstance(value, Instant)

    @staticmethod
    def timestamp_now() -> int:
        return int(_time.time() * 1000)

    @classmethod
    def register(cls, plugin: Plugin) -> bool:
        return cls._registry.apply(plugin, cls, CAPABILITIES)

    use = register

    # internal derivation

    def _derive(self, local: datetime, origin: str) -> "Instant":
        """New instant at ``local`` display time, keeping this instance's zone context."""
        return type(self)._make(local, self._offset, origin, self._tz_name, self._tz_id, self._tz_tracker)

    def _shift(
        self,
        offset: int,
        origin: str,
        tz_name: Optional[str] = None,
        tz_id: Optional[ZoneId] = None,
        tz_tracker: Optional[str] = None,
    ) -> "Instant":
        try:
            local = self._date + timedelta(minutes=offset - self._offset)
        except OverflowError as exc:
            raise InvalidDateError(f"Cannot show {self._date.isoformat()} at offset {offset} minutes.") from exc
        return type(self)._make(local, offset, origin, tz_name, tz_id, tz_tracker)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (
            _restore,
            (self._date, self._offset, self._origin, self._tz_name, self._tz_id, self._tz_tracker),
        )

    # fields

    @property
    def year(self) -> int:
        return self._date.year

    @property
    def month(self) -> int:
        return self._date.month

    @property
    def day(self) -> int:
        return self._date.day

    @property
    def weekday(self) -> int:
        """0 for Sunday through 6 for Saturday."""
        return (self._date.weekday() + 1) % 7

    @property
    def iso_weekday(self) -> int:
        return self._date.isoweekday()

    @property
    def hour(self) -> int:
        return self._date.hour

    @property
    def minute(self) -> int:
        return self._date.minute

    @property
    def second(self) -> int:
        return self._date.second

    @property
    def millisecond(self) -> int:
        return self._date.microsecond // 1000

    @property
    def timestamp(self) -> int:
        """True-UTC milliseconds since the epoch."""
        return _to_ms(self._date) - self._offset * MS_PER_MINUTE

    @property
    def unix(self) -> int:
        return self.timestamp // 1000

    @property
    def offset(self) -> str:
        return format_utc_offset(self._offset)

    @property
    def utc_offset(self) -> str:
        return format_clock_offset(self._offset)

    @property
    def time_zone_name(self) -> str:
        return self.get_time_zone_name()

    @property
    def time_zone_id(self) -> ZoneId:
        return self.get_time_zone_id()

    @property
    def origin(self) -> str:
        return self._origin

    @property
    def last_date_of_month(self) -> int:
        return self.days_in_month()

    # output

    def _components(self, use_utc: bool = False) -> Dict[str, str]:
        view = _utc_view(self._date, self._offset) if use_utc else self._date
        offset = format_clock_offset(0 if use_utc else self._offset)
        return build_components(
            view.year,
            view.month,
            view.day,
            (view.weekday() + 1) % 7,
            view.hour,
            view.minute,
            view.second,
            view.microsecond // 1000,
            offset,
        )

    def format(self, template: str = DEFAULT_FORMAT, use_utc: bool = False) -> str:
        return format_tokens(template, self._components(use_utc))

    format_strict = format

    def format_utc(self, template: str = DEFAULT_FORMAT) -> str:
        return self.format(template, use_utc=True)

    def to_iso_string(self) -> str:
        return self.format("YYYY-MM-DD[T]HH:mm:ss.mss[Z]", use_utc=True)

    def to_local_iso_string(self) -> str:
        return self.format("YYYY-MM-DD[T]HH:mm:ss.mssZZ")

    def to_json(self) -> str:
        return self.to_local_iso_string()

    def calendar(self, base: DateLike = None) -> str:
        """Calendar wording relative to ``base`` (default now), e.g. ``Today at 3:00 PM``.

        Days are compared in this instance's offset. Anything beyond yesterday or
        tomorrow is spelled out in full.
        """
        reference = Instant.coerce(base)._shift(self._offset, "calendar")
        days = (self._date.date() - reference._date.date()).days
        clock = self.format("h:mm A")
        if days == 0:
            return f"Today at {clock}"
        if days == 1:
            return f"Tomorrow at {clock}"
        if days == -1:
            return f"Yesterday at {clock}"
        return self.format("ddd, mmmm DD, YYYY [at] h:mm A")

    def to_native(self) -> datetime:
        """Aware datetime carrying the held offset."""
        return _utc_view(self._date, self._offset).replace(tzinfo=timezone.utc).astimezone(
            timezone(timedelta(minutes=self._offset))
        )

    def to_dict(self) -> Dict[str, int]:
        return dict(self)

    def to_list(self) -> List[int]:
        return [value for _, value in self]

    def __iter__(self) -> Iterator[Tuple[str, int]]:
        yield "year", self.year
        yield "month", self.month
        yield "day", self.day
        yield "weekday", self.weekday
        yield "iso_weekday", self.iso_weekday
        yield "hour", self.hour
        yield "minute", self.minute
        yield "second", self.second
        yield "millisecond", self.millisecond

    def __str__(self) -> str:
        clock = format_clock_offset(self._offset, separator="")
        return f"{self.format('dd mmm DD YYYY HH:mm:ss')} GMT{clock} ({self.get_time_zone_name()})"

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.to_local_iso_string()}>"

    def __format__(self, spec: str) -> str:
        return self.format(spec) if spec else str(self)

    def __int__(self) -> int:
        return self.timestamp

    # comparison

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.timestamp == other.timestamp

    def __hash__(self) -> int:
        return hash(self.timestamp)

    def __lt__(self, other: "Instant") -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.timestamp < other.timestamp

    def __le__(self, other: "Instant") -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.timestamp <= other.timestamp

    def __gt__(self, other: "Instant") -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.timestamp > other.timestamp

    def __ge__(self, other: "Instant") -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.timestamp >= other.timestamp

    def _aligned(self, other: DateLike, unit: Optional[str]) -> Tuple[int, int]:
        """Timestamps of both operands, truncated to ``unit`` in this instance's offset."""
        target = Instant.coerce(other)
        if unit is None:
            return self.timestamp, target.timestamp
        target = target._shift(self._offset, target._origin)
        return self.start_of(unit).timestamp, target.start_of(unit).timestamp

    def is_equal(self, other: DateLike) -> bool:
        return self.timestamp == Instant.coerce(other).timestamp

    def is_same(self, other: DateLike, unit: str = "millisecond") -> bool:
        mine, theirs = self._aligned(other, unit)
        return mine == theirs

    def is_before(self, other: DateLike, unit: Optional[str] = None) -> bool:
        mine, theirs = self._aligned(other, unit)
        return mine < theirs

    def is_after(self, other: DateLike, unit: Optional[str] = None) -> bool:
        mine, theirs = self._aligned(other, unit)
        return mine > theirs

    def is_same_or_before(self, other: DateLike, unit: Optional[str] = None) -> bool:
        mine, theirs = self._aligned(other, unit)
        return mine <= theirs

    def is_same_or_after(self, other: DateLike, unit: Optional[str] = None) -> bool:
        mine, theirs = self._aligned(other, unit)
        return mine >= theirs

    def is_between(self, start: DateLike, end: DateLike, inclusive: str = "()", unit: Optional[str] = None) -> bool:
        """Checks ``start < self < end``; ``inclusive`` is one of ``()``, ``[]``, ``[)``, ``(]``."""
        if inclusive not in ("()", "[]", "[)", "(]"):
            raise ValueError(f"inclusive must be one of (), [], [), (], got {inclusive!r}")
        mine, low = self._aligned(start, unit)
        _, high = self._aligned(end, unit)
        after_start = mine >= low if inclusive[0] == "[" else mine > low
        before_end = mine <= high if inclusive[1] == "]" else mine < high
        return after_start and before_end

    # arithmetic

    def add(self, amount: Union[int, float], unit: str) -> "Instant":
        unit = _check_unit(unit)
        if unit == "month":
            local = self._with_fields(month=self.month + int(amount))
        elif unit == "year":
            local = self._with_fields(year=self.year + int(amount))
        else:
            try:
                if unit in ("day", "week"):
                    local = self._date + timedelta(days=amount * (7 if unit == "week" else 1))
                else:
                    local = self._date + timedelta(milliseconds=amount * FIXED_UNIT_MS[unit])
            except OverflowError as exc:
                raise InvalidDateError(f"Adding {amount} {unit} leaves the supported range.") from exc
        return self._derive(local, "add")

    def subtract(self, amount: Union[int, float], unit: str) -> "Instant":
        return self.add(-amount, unit)._derive_origin("subtract")

    def _derive_origin(self, origin: str) -> "Instant":
        return self._derive(self._date, origin)

    def add_milliseconds(self, amount: Union[int, float]) -> "Instant":
        return self.add(amount, "millisecond")

    def add_seconds(self, amount: Union[int, float]) -> "Instant":
        return self.add(amount, "second")

    def add_minutes(self, amount: Union[int, float]) -> "Instant":
        return self.add(amount, "minute")

    def add_hours(self, amount: Union[int, float]) -> "Instant":
        return self.add(amount, "hour")

    def add_days(self, amount: Union[int, float]) -> "Instant":
        return self.add(amount, "day")

    def add_weeks(self, amount: Union[int, float]) -> "Instant":
        return self.add(amount, "week")

    def add_months(self, amount: int) -> "Instant":
        return self.add(amount, "month")

    def add_years(self, amount: int) -> "Instant":
        return self.add(amount, "year")

    def _with_fields(self, **changes: int) -> datetime:
        fields = {
            "year": self.year,
            "month": self.month,
            "day": self.day,
            "hour": self.hour,
            "minute": self.minute,
            "second": self.second,
            "millisecond": self.millisecond,
        }
        fields.update(changes)
        return normalize_fields(**fields)

    def start_of(self, unit: str) -> "Instant":
        unit = _check_unit(unit)
        d = self._date
        if unit == "year":
            local = datetime(d.year, 1, 1)
        elif unit == "month":
            local = datetime(d.year, d.month, 1)
        elif unit == "week":
            local = datetime(d.year, d.month, d.day) - timedelta(days=d.weekday())
        elif unit == "day":
            local = datetime(d.year, d.month, d.day)
        elif unit == "hour":
            local = d.replace(minute=0, second=0, microsecond=0)
        elif unit == "minute":
            local = d.replace(second=0, microsecond=0)
        elif unit == "second":
            local = d.replace(microsecond=0)
        else:
            local = d
        return self._derive(local, "start_of")

    def end_of(self, unit: str) -> "Instant":
        """Last millisecond of ``unit``: one millisecond before the next unit starts."""
        end = self.start_of(unit).add(1, unit).add(-1, "millisecond")
        return end._derive_origin("end_of")

    def get(self, unit: str) -> int:
        unit = _check_unit(unit)
        if unit == "week":
            return self.get_week()
        return getattr(self, unit)

    def set(self, unit: str, value: int) -> "Instant":
        unit = _check_unit(unit)
        if unit == "week":
            return self.add(value - self.get_week(), "week")._derive_origin("set")
        return self._derive(self._with_fields(**{unit: value}), "set")

    def diff(self, other: DateLike, unit: str) -> float:
        """Signed difference ``self - other`` expressed in ``unit``.

        Months are fractional: whole months plus the remaining days (and time of day)
        divided by the length of ``other``'s month. Years are months divided by 12.
        """
        unit = _check_unit(unit)
        target = Instant.coerce(other)
        if unit in FIXED_UNIT_MS:
            return (self.timestamp - target.timestamp) / FIXED_UNIT_MS[unit]
        months = (self.year - target.year) * 12 + (self.month - target.month)
        days = self.day - target.day
        time_of_day = (self._time_of_day_ms() - target._time_of_day_ms()) / MS_PER_DAY
        total = months + (days + time_of_day) / target.days_in_month()
        return total if unit == "month" else total / 12

    def _time_of_day_ms(self) -> int:
        d = self._date
        return ((d.hour * 60 + d.minute) * 60 + d.second) * 1000 + d.microsecond // 1000

    # calendar facts

    def is_leap_year(self) -> bool:
        return calendar.isleap(self.year)

    def days_in_month(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    def get_day_of_year(self) -> int:
        return self._date.timetuple().tm_yday

    def _iso_thursday(self) -> datetime:
        d = self._date
        return datetime(d.year, d.month, d.day) + timedelta(days=3 - d.weekday())

    def get_week(self) -> int:
        """ISO-8601 week number; week 1 contains January 4th."""
        thursday = self._iso_thursday()
        jan4 = datetime(thursday.year, 1, 4)
        first_thursday = jan4 + timedelta(days=3 - jan4.weekday())
        return (thursday - first_thursday).days // 7 + 1

    def get_week_year(self) -> int:
        return self._iso_thursday().year

    def is_dst(self) -> bool:
        """Whether the host zone observes daylight saving time at this instant."""
        if get_settings().local_offset is not None:
            return False
        january = host_offset(_wall_to_utc_ms(datetime(self.year, 1, 1)))
        july = host_offset(_wall_to_utc_ms(datetime(self.year, 7, 1)))
        return january != july and host_offset(self.timestamp) == max(january, july)

    # time zones

    def time_zone(self, zone: str) -> "Instant":
        """Same instant shown in ``zone``: a ``UTC±HH:MM`` offset, an abbreviation or an IANA id."""
        resolved = get_resolver().lookup(zone, self.timestamp)
        return self._shift(resolved.offset, "time_zone", resolved.name, resolved.zone_id, resolved.tracker)

    def to_utc(self) -> "Instant":
        return self._shift(0, "to_utc")

    def to_local(self) -> "Instant":
        return self._shift(host_offset(self.timestamp), "to_local")

    def get_time_zone_offset(self) -> str:
        return self.utc_offset

    def get_time_zone_offset_minutes(self) -> int:
        return self._offset

    def get_time_zone_name(self, utc: Optional[str] = None) -> str:
        if utc is not None:
            return get_resolver().name_for(utc, self.timestamp)
        if self._tz_name is not None:
            return self._tz_name
        return get_resolver().name_for(self._tz_tracker or self.offset, self.timestamp)

    def get_time_zone_name_short(self, utc: Optional[str] = None) -> str:
        if utc is not None:
            return get_resolver().short_name_for(utc, at_ms=self.timestamp)
        return get_resolver().short_name_for(self.offset, self._tz_tracker, self.timestamp)

    get_time_zone_name_abbr = get_time_zone_name_short

    def get_time_zone_id(self) -> ZoneId:
        if self._tz_id is not None:
            return self._tz_id
        return get_resolver().zone_id_for(self.offset)


def _restore(
    local: datetime,
    offset: int,
    origin: str,
    tz_name: Optional[str],
    tz_id: Optional[ZoneId],
    tz_tracker: Optional[str],
) -> Instant:
    return Instant._make(local, offset, origin, tz_name, tz_id, tz_tracker)


def _cast(value: Any, origin: str) -> Instant:
    return Instant.coerce(value)._derive_origin(origin)


CAPABILITIES = InstantCapabilities(
    internal_date=lambda instant: instant._date,
    offset=lambda instant: instant._offset,
    cast=_cast,
    with_native=lambda source, local, origin: source._derive(local, origin),
)
