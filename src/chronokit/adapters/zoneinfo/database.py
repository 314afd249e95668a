from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Dict, Iterable, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError, available_timezones

from chronokit.ports.zones import ZoneDatabasePort

logger = logging.getLogger(__name__)


class ZoneInfoDatabase(ZoneDatabasePort):
    """Timezone database backed by :mod:`zoneinfo` and the ``tzdata`` package."""

    def __init__(self) -> None:
        self._zones: Dict[str, Optional[ZoneInfo]] = {}

    def zone_ids(self) -> Iterable[str]:
        return sorted(available_timezones())

    def _zone(self, zone_id: str) -> Optional[ZoneInfo]:
        if zone_id not in self._zones:
            try:
                self._zones[zone_id] = ZoneInfo(zone_id)
            except (ZoneInfoNotFoundError, ValueError):
                logger.debug(f"Unknown IANA zone {zone_id!r}")
                self._zones[zone_id] = None
        return self._zones[zone_id]

    def _localize(self, zone_id: str, at_ms: int) -> Optional[datetime]:
        zone = self._zone(zone_id)
        if zone is None:
            return None
        return datetime.fromtimestamp(at_ms / 1000, tz=timezone.utc).astimezone(zone)

    def utc_offset(self, zone_id: str, at_ms: int) -> Optional[int]:
        moment = self._localize(zone_id, at_ms)
        if moment is None:
            return None
        delta = moment.utcoffset()
        return int(delta.total_seconds() // 60) if delta is not None else None

    def abbreviation(self, zone_id: str, at_ms: int) -> Optional[str]:
        moment = self._localize(zone_id, at_ms)
        return moment.tzname() if moment is not None else None
