from __future__ import annotations

import calendar
import logging
import re
from datetime import date as gregorian_date, datetime, timedelta, timezone
from typing import Any, Literal, NamedTuple, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict

from chronokit.application.plugins import install_methods
from chronokit.config import get_settings, override_settings
from chronokit.domain.constants import (
    BN_CALENDAR_VARIANTS,
    BN_DAYS,
    BN_DIGITS,
    BN_MONTH_TABLES,
    BN_MONTHS,
    BN_SEASONS,
    BN_YEAR_OFFSET,
    SORTED_TIME_FORMATS,
)
from chronokit.domain.formatting import format_tokens
from chronokit.domain.offsets import format_clock_offset, offset_to_minutes
from chronokit.ports.plugins import InstantCapabilities

logger = logging.getLogger(__name__)

Locale = Literal["bn", "en"]
Variant = Literal["revised-2019", "revised-1966"]

DEFAULT_BANGLA_FORMAT = "ddd, DD mmmm (SS), YYYY বঙ্গাব্দ - hh:mm:ss (A)"

BANGLA_TOKENS = tuple(sorted(SORTED_TIME_FORMATS + ("S", "SS"), key=len, reverse=True))


class BanglaDate(BaseModel):
    model_config = ConfigDict(frozen=True)

    year: Union[int, str]
    month: Union[int, str]
    date: Union[int, str]
    month_name: str
    day_name: str
    season_name: str
    is_leap_year: bool
    variant: Variant


def to_bangla_digits(value: Union[int, str]) -> str:
    return "".join(BN_DIGITS[int(char)] if char.isdigit() else char for char in str(value))


def resolve_variant(variant: Optional[str] = None) -> str:
    resolved = variant or get_settings().bangla_variant
    if resolved not in BN_CALENDAR_VARIANTS:
        raise ValueError(f"Unknown Bangla calendar variant {resolved!r}")
    return resolved


def configure_bangla_calendar(variant: str) -> None:
    """Sets the process-wide default variant used when a call does not name one."""
    resolve_variant(variant)
    override_settings(bangla_variant=variant)
    logger.debug(f"Default Bangla calendar variant set to {variant}")


def _base_year(local: datetime) -> int:
    """Gregorian year in which the current Bangla year began."""
    if local.month < 4 or (local.month == 4 and local.day < 14):
        return local.year - 1
    return local.year


def bangla_year(local: datetime) -> int:
    return _base_year(local) - BN_YEAR_OFFSET


def is_bangla_leap_year(local: datetime, variant: str) -> bool:
    """Leap flag reported on :class:`BanglaDate`.

    ``revised-1966`` counts every fourth Bangla year; ``revised-2019`` follows the
    Gregorian year of the date itself.
    """
    if variant == "revised-1966":
        return bangla_year(local) % 4 == 2
    return calendar.isleap(local.year)


def _has_long_falgun(local: datetime, variant: str) -> bool:
    if variant == "revised-1966":
        return is_bangla_leap_year(local, variant)
    # Falgun of a Bangla year falls in February of the following Gregorian year.
    return calendar.isleap(_base_year(local) + 1)


def bangla_month_day(local: datetime, variant: str) -> Tuple[int, int]:
    """Zero-based month index and zero-based day of that month."""
    table = BN_MONTH_TABLES[variant]
    base = _base_year(local)
    epoch_month, epoch_day = table["epoch"]
    elapsed = (gregorian_date(local.year, local.month, local.day) - gregorian_date(base, epoch_month, epoch_day)).days
    lengths = table["leap"] if _has_long_falgun(local, variant) else table["normal"]
    for index, length in enumerate(lengths):
        if elapsed < length:
            return index, elapsed
        elapsed -= length
    return len(lengths) - 1, lengths[-1] - 1


def _localize(value: int, locale: str) -> Union[int, str]:
    return value if locale == "en" else to_bangla_digits(value)


def _season_name(month_index: int, locale: str) -> str:
    bangla, latin = BN_SEASONS[month_index // 2]
    return latin if locale == "en" else bangla


def _weekday(local: datetime) -> int:
    return (local.weekday() + 1) % 7


def get_bangla_year(caps: InstantCapabilities, instant: Any, locale: Locale = "bn") -> Union[int, str]:
    return _localize(bangla_year(caps.internal_date(instant)), locale)


def get_bangla_month(
    caps: InstantCapabilities, instant: Any, locale: Locale = "bn", variant: Optional[str] = None
) -> Union[int, str]:
    month_index, _ = bangla_month_day(caps.internal_date(instant), resolve_variant(variant))
    return _localize(month_index + 1, locale)


def get_bangla_day(
    caps: InstantCapabilities, instant: Any, locale: Locale = "bn", variant: Optional[str] = None
) -> Union[int, str]:
    _, day_index = bangla_month_day(caps.internal_date(instant), resolve_variant(variant))
    return _localize(day_index + 1, locale)


def get_bangla_day_name(caps: InstantCapabilities, instant: Any, locale: Locale = "bn") -> str:
    bangla, latin, _ = BN_DAYS[_weekday(caps.internal_date(instant))]
    return latin if locale == "en" else bangla


def get_bangla_month_name(
    caps: InstantCapabilities, instant: Any, locale: Locale = "bn", variant: Optional[str] = None
) -> str:
    month_index, _ = bangla_month_day(caps.internal_date(instant), resolve_variant(variant))
    bangla, latin, _ = BN_MONTHS[month_index]
    return latin if locale == "en" else bangla


def get_bangla_season_name(
    caps: InstantCapabilities, instant: Any, locale: Locale = "bn", variant: Optional[str] = None
) -> str:
    month_index, _ = bangla_month_day(caps.internal_date(instant), resolve_variant(variant))
    return _season_name(month_index, locale)


def to_bangla(caps: InstantCapabilities, instant: Any, locale: Locale = "bn", variant: Optional[str] = None) -> BanglaDate:
    """Bangla calendar date of the instant, all parts computed with one variant."""
    resolved = resolve_variant(variant)
    local = caps.internal_date(instant)
    month_index, day_index = bangla_month_day(local, resolved)
    month_bn, month_en, _ = BN_MONTHS[month_index]
    day_bn, day_en, _ = BN_DAYS[_weekday(local)]
    return BanglaDate(
        year=_localize(bangla_year(local), locale),
        month=_localize(month_index + 1, locale),
        date=_localize(day_index + 1, locale),
        month_name=month_en if locale == "en" else month_bn,
        day_name=day_en if locale == "en" else day_bn,
        season_name=_season_name(month_index, locale),
        is_leap_year=is_bangla_leap_year(local, resolved),
        variant=resolved,
    )


def format_bangla(caps: InstantCapabilities, instant: Any, template: Optional[str] = None, variant: Optional[str] = None) -> str:
    """Renders the Bangla date with Bengali digits. ``S``/``SS`` render the season name."""
    resolved = resolve_variant(variant)
    local = caps.internal_date(instant)
    month_index, day_index = bangla_month_day(local, resolved)
    month_bn, _, month_short = BN_MONTHS[month_index]
    day_bn, _, day_short = BN_DAYS[_weekday(local)]
    season_name = _season_name(month_index, "bn")

    year = to_bangla_digits(f"{bangla_year(local):04d}")
    month = to_bangla_digits(month_index + 1)
    day = to_bangla_digits(day_index + 1)
    hour12 = local.hour % 12 or 12
    meridiem = "পূর্বাহ্ণ" if local.hour < 12 else "অপরাহ্ণ"
    offset = to_bangla_digits(format_clock_offset(caps.offset(instant)))
    millisecond = local.microsecond // 1000

    components = {
        "YYYY": year,
        "YY": year[-2:],
        "yyyy": year,
        "yy": year[-2:],
        "M": month,
        "MM": to_bangla_digits(f"{month_index + 1:02d}"),
        "mmm": month_short,
        "MMM": month_short,
        "mmmm": month_bn,
        "MMMM": month_bn,
        "d": day_short,
        "dd": day_bn.replace("বার", ""),
        "ddd": day_bn,
        "D": day,
        "DD": to_bangla_digits(f"{day_index + 1:02d}"),
        "Do": day,
        "H": to_bangla_digits(local.hour),
        "HH": to_bangla_digits(f"{local.hour:02d}"),
        "h": to_bangla_digits(hour12),
        "hh": to_bangla_digits(f"{hour12:02d}"),
        "m": to_bangla_digits(local.minute),
        "mm": to_bangla_digits(f"{local.minute:02d}"),
        "s": to_bangla_digits(local.second),
        "ss": to_bangla_digits(f"{local.second:02d}"),
        "ms": to_bangla_digits(millisecond),
        "mss": to_bangla_digits(f"{millisecond:03d}"),
        "a": meridiem,
        "A": meridiem,
        "Z": offset,
        "ZZ": offset,
        "S": season_name,
        "SS": season_name + "কাল",
    }
    return format_tokens(template or DEFAULT_BANGLA_FORMAT, components, BANGLA_TOKENS)


class BanglaNumber(NamedTuple):
    bn: str
    en: int


_BANGLA_YEAR = re.compile(r"^(?:০|[১-৯][০-৯]{0,3})$")
_BANGLA_MONTH = re.compile(r"^(?:[১-৯]|১০|১১|১২)$")
_BANGLA_DATE = re.compile(r"^(?:[১-৯]|[১২][০-৯]|৩০|৩১)$")


def from_bangla_digits(text: str) -> int:
    return int("".join(str(BN_DIGITS.index(char)) if char in BN_DIGITS else char for char in text))


def _number(value: int) -> BanglaNumber:
    return BanglaNumber(bn=to_bangla_digits(value), en=value)


def _host_now() -> datetime:
    override = get_settings().local_offset
    if override is None:
        return datetime.now()
    return datetime.now(timezone.utc).replace(tzinfo=None) + timedelta(minutes=offset_to_minutes(override))


class BanglaCalendar(BaseModel):
    """A Bangla calendar date carrying every part in Bengali and Latin digits.

    Build one from a Gregorian date with :meth:`of`, or directly from Bangla parts
    with :meth:`from_bangla`.
    """

    model_config = ConfigDict(frozen=True)

    year: BanglaNumber
    month: BanglaNumber
    date: BanglaNumber
    variant: Variant

    @classmethod
    def of(
        cls, moment: Union[datetime, gregorian_date, None] = None, variant: Optional[str] = None
    ) -> "BanglaCalendar":
        """Converts the calendar fields of ``moment`` (default: host-local now)."""
        resolved = resolve_variant(variant)
        if moment is None:
            local = _host_now()
        elif isinstance(moment, datetime):
            local = moment.replace(tzinfo=None)
        else:
            local = datetime(moment.year, moment.month, moment.day)
        month_index, day_index = bangla_month_day(local, resolved)
        return cls(
            year=_number(bangla_year(local)),
            month=_number(month_index + 1),
            date=_number(day_index + 1),
            variant=resolved,
        )

    @classmethod
    def from_bangla(
        cls, year: str, month: str = "১", date: str = "১", variant: Optional[str] = None
    ) -> "BanglaCalendar":
        """Builds a date from parts written in Bengali digits, e.g. ``("১৪৩০", "১", "১")``."""
        if not cls.is_bangla_year(year):
            raise ValueError(f"Invalid Bangla year {year!r}")
        if not cls.is_bangla_month(month):
            raise ValueError(f"Invalid Bangla month {month!r}")
        if not cls.is_bangla_date(date):
            raise ValueError(f"Invalid Bangla date {date!r}")
        return cls(
            year=BanglaNumber(year, from_bangla_digits(year)),
            month=BanglaNumber(month, from_bangla_digits(month)),
            date=BanglaNumber(date, from_bangla_digits(date)),
            variant=resolve_variant(variant),
        )

    @staticmethod
    def is_bangla_year(value: object) -> bool:
        return isinstance(value, str) and _BANGLA_YEAR.match(value) is not None

    @staticmethod
    def is_bangla_month(value: object) -> bool:
        return isinstance(value, str) and _BANGLA_MONTH.match(value) is not None

    @staticmethod
    def is_bangla_date(value: object) -> bool:
        return isinstance(value, str) and _BANGLA_DATE.match(value) is not None

    def __str__(self) -> str:
        return f"{self.date.bn} {BN_MONTHS[self.month.en - 1][0]}, {self.year.bn}"


def to_bangla_calendar(caps: InstantCapabilities, instant: Any, variant: Optional[str] = None) -> BanglaCalendar:
    return BanglaCalendar.of(caps.internal_date(instant), variant)


def _configure(caps: InstantCapabilities, instant: Any, variant: str) -> None:
    configure_bangla_calendar(variant)


def bangla_plugin(host: type, caps: InstantCapabilities) -> None:
    install_methods(
        host,
        caps,
        to_bangla=to_bangla,
        format_bangla=format_bangla,
        get_bangla_year=get_bangla_year,
        get_bangla_month=get_bangla_month,
        get_bangla_day=get_bangla_day,
        get_bangla_day_name=get_bangla_day_name,
        get_bangla_month_name=get_bangla_month_name,
        get_bangla_season_name=get_bangla_season_name,
        to_bangla_calendar=to_bangla_calendar,
        configure_bangla_calendar=_configure,
    )
