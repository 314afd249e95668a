from __future__ import annotations

import math
from datetime import datetime, timedelta
from typing import Any

from chronokit.domain.errors import InvalidDateError
from chronokit.ports.plugins import InstantCapabilities


def local_view(caps: InstantCapabilities, instant: Any, other: Any) -> datetime:
    """Calendar fields of ``other`` as seen in ``instant``'s display offset."""
    target = caps.cast(other, "compare")
    return caps.internal_date(target) + timedelta(minutes=caps.offset(instant) - caps.offset(target))


def round_to_nearest(value: float, nearest: float = 1) -> float:
    """Rounds half up to a multiple of ``nearest``."""
    return math.floor(value / nearest + 0.5) * nearest


def pluralize(count: int, unit: str) -> str:
    return f"{count} {unit}" if abs(count) == 1 else f"{count} {unit}s"


def days_in_previous_month(moment: datetime) -> int:
    return (moment.replace(day=1) - timedelta(days=1)).day


def rolled_date(year: int, month: int = 1, day: int = 1) -> datetime:
    """Midnight of ``year``/``month``/``day`` with overflowing months and days carried forward."""
    year += (month - 1) // 12
    try:
        return datetime(year, (month - 1) % 12 + 1, 1) + timedelta(days=day - 1)
    except (OverflowError, ValueError) as exc:
        raise InvalidDateError(f"Invalid date fields: {year}-{month}-{day}") from exc
