from __future__ import annotations

from typing import Dict, Iterable, Optional

from chronokit.ports.zones import ZoneDatabasePort


class InMemoryZoneDatabase(ZoneDatabasePort):
    """Fixed-offset zone table, for tests and hosts without an IANA database."""

    def __init__(self, zones: Optional[Dict[str, int]] = None, abbreviations: Optional[Dict[str, str]] = None) -> None:
        self._zones: Dict[str, int] = dict(zones or {})
        self._abbreviations: Dict[str, str] = dict(abbreviations or {})

    def add(self, zone_id: str, offset_minutes: int, abbreviation: Optional[str] = None) -> None:
        self._zones[zone_id] = offset_minutes
        if abbreviation is not None:
            self._abbreviations[zone_id] = abbreviation

    def zone_ids(self) -> Iterable[str]:
        return list(self._zones)

    def utc_offset(self, zone_id: str, at_ms: int) -> Optional[int]:
        return self._zones.get(zone_id)

    def abbreviation(self, zone_id: str, at_ms: int) -> Optional[str]:
        return self._abbreviations.get(zone_id)
