from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from chronokit.application.plugins import install_methods
from chronokit.domain.constants import DEFAULT_DAY_PARTS
from chronokit.ports.plugins import InstantCapabilities


def get_part_of_day(caps: InstantCapabilities, instant: Any, config: Optional[Dict[str, Tuple[int, int]]] = None) -> str:
    """Names the part of day for the instant's hour.

    ``config`` overrides individual inclusive hour ranges; a range such as ``(22, 4)``
    crosses midnight. Hours no range claims count as ``"night"``.
    """
    ranges = {**DEFAULT_DAY_PARTS, **(config or {})}
    hour = caps.internal_date(instant).hour
    for part, (start, end) in ranges.items():
        start, end = int(start), int(end)
        if start <= end:
            if start <= hour <= end:
                return part
        elif hour >= start or hour <= end:
            return part
    return "night"


def day_part_plugin(host: type, caps: InstantCapabilities) -> None:
    install_methods(host, caps, get_part_of_day=get_part_of_day)
