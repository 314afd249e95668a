from __future__ import annotations

from typing import Any, Tuple

from chronokit.application.plugins import install_methods
from chronokit.domain.errors import UnsupportedUnitError
from chronokit.plugins.duration import calendar_breakdown
from chronokit.plugins.support import local_view, pluralize
from chronokit.ports.plugins import InstantCapabilities

UNIT_ORDER: Tuple[str, ...] = ("year", "month", "day", "hour", "minute", "second", "millisecond")

# (upper bound in seconds, divisor, suffix)
_SHORT_STEPS = (
    (60, 1, "s"),
    (3_600, 60, "m"),
    (86_400, 3_600, "h"),
    (2_592_000, 86_400, "d"),
    (31_536_000, 2_592_000, "mo"),
)


def from_now(
    caps: InstantCapabilities,
    instant: Any,
    level: str = "minute",
    with_suffix_prefix: bool = True,
    time: Any = None,
) -> str:
    """Human distance to ``time`` (default now) down to ``level``, e.g. ``"in 2 days 3 hours"``."""
    if level not in UNIT_ORDER:
        raise UnsupportedUnitError(level)
    mine = caps.internal_date(instant)
    now = local_view(caps, instant, time)
    is_future = mine > now
    earlier, later = (now, mine) if is_future else (mine, now)
    values = calendar_breakdown(earlier, later)

    depth = UNIT_ORDER.index(level)
    parts = [pluralize(value, unit) for unit, value in zip(UNIT_ORDER[: depth + 1], values) if value > 0]
    if not parts:
        parts = [pluralize(0, level)]

    text = " ".join(parts)
    if not with_suffix_prefix:
        return text
    return f"in {text}" if is_future else f"{text} ago"


def from_now_short(caps: InstantCapabilities, instant: Any, time: Any = None) -> str:
    """Compact distance such as ``"in 5m"`` or ``"2h ago"``."""
    seconds = (instant.timestamp - caps.cast(time, "compare").timestamp) / 1000
    prefix = "in " if seconds >= 0 else ""
    suffix = " ago" if seconds < 0 else ""
    elapsed = abs(seconds)
    for bound, divisor, unit in _SHORT_STEPS:
        if elapsed < bound:
            return f"{prefix}{int(elapsed // divisor)}{unit}{suffix}"
    return f"{prefix}{int(elapsed // 31_536_000)}y{suffix}"


def from_now_plugin(host: type, caps: InstantCapabilities) -> None:
    install_methods(host, caps, from_now=from_now, from_now_short=from_now_short)
