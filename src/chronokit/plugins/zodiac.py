from __future__ import annotations

from typing import Any, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

from chronokit.application.plugins import install_methods
from chronokit.domain.constants import ZODIAC_PRESETS
from chronokit.ports.plugins import InstantCapabilities


class ZodiacOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    birth_date: Optional[str] = None
    preset: Literal["western", "tropical", "vedic"] = "western"
    custom: Optional[List[Tuple[str, Tuple[int, int]]]] = None

    @field_validator("birth_date")
    @classmethod
    def _check_birth_date(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        month, _, day = value.partition("-")
        if not (month.isdigit() and day.isdigit() and 1 <= int(month) <= 12 and 1 <= int(day) <= 31):
            raise ValueError(f"birth_date must look like MM-DD, got {value!r}")
        return value


def find_sign(table: List[Tuple[str, Tuple[int, int]]], month: int, day: int) -> str:
    """Scans boundaries from the latest; the first one on or before ``month``/``day`` wins.

    Dates before the earliest boundary belong to the sign that starts latest in the year.
    """
    signs = sorted(table, key=lambda entry: entry[1][0] * 100 + entry[1][1])
    for name, (start_month, start_day) in reversed(signs):
        if (month, day) >= (start_month, start_day):
            return name
    return signs[-1][0]


def get_zodiac_sign(caps: InstantCapabilities, instant: Any, options: Optional[ZodiacOptions] = None, **kwargs) -> str:
    options = options or ZodiacOptions(**kwargs)
    if options.birth_date is not None:
        month, day = (int(part) for part in options.birth_date.split("-"))
    else:
        local = caps.internal_date(instant)
        month, day = local.month, local.day
    table = options.custom if options.custom else ZODIAC_PRESETS[options.preset]
    return find_sign(table, month, day)


def zodiac_plugin(host: type, caps: InstantCapabilities) -> None:
    install_methods(host, caps, get_zodiac_sign=get_zodiac_sign, zodiac=get_zodiac_sign)
