from __future__ import annotations

import re
from typing import Optional

UTC_OFFSET_PATTERN = re.compile(r"^UTC(?P<sign>[+-])(?P<hours>\d{2}):(?P<minutes>\d{2})$")
ISO_OFFSET_PATTERN = re.compile(r"^(?P<sign>[+-])(?P<hours>\d{2}):?(?P<minutes>\d{2})$")
MAX_OFFSET_HOURS = 14


def is_valid_utc_offset(value: object) -> bool:
    """Checks whether ``value`` is an offset string like ``UTC-01:30``, at most 14 hours off UTC."""
    if not isinstance(value, str):
        return False
    match = UTC_OFFSET_PATTERN.match(value)
    if match is None:
        return False
    hours, minutes = int(match.group("hours")), int(match.group("minutes"))
    return minutes < 60 and hours * 60 + minutes <= MAX_OFFSET_HOURS * 60


def offset_to_minutes(offset: str) -> int:
    """Converts ``UTC±HH:MM`` into signed minutes. Raises ``ValueError`` on bad input."""
    if not is_valid_utc_offset(offset):
        raise ValueError(f"Invalid UTC offset: {offset!r}")
    match = UTC_OFFSET_PATTERN.match(offset)
    total = int(match.group("hours")) * 60 + int(match.group("minutes"))
    return -total if match.group("sign") == "-" else total


def parse_iso_offset(value: str) -> Optional[int]:
    """Parses ``Z``, ``+06:00`` or ``-0430`` into minutes, ``None`` when unrecognised."""
    if value in ("Z", "z"):
        return 0
    match = ISO_OFFSET_PATTERN.match(value)
    if match is None:
        return None
    total = int(match.group("hours")) * 60 + int(match.group("minutes"))
    return -total if match.group("sign") == "-" else total


def format_clock_offset(minutes: int, separator: str = ":") -> str:
    sign = "-" if minutes < 0 else "+"
    hours, mins = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}{separator}{mins:02d}"


def format_utc_offset(minutes: int) -> str:
    """Converts signed minutes into the canonical ``UTC±HH:MM`` form."""
    return f"UTC{format_clock_offset(minutes)}"


def is_gmt(offset: Optional[str]) -> bool:
    return offset in ("UTC+00:00", "UTC-00:00")
