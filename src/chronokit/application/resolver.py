from __future__ import annotations

import logging
import re
import threading
import time
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Tuple, Union

from chronokit.domain.offsets import format_utc_offset, is_gmt, is_valid_utc_offset, offset_to_minutes
from chronokit.domain.timezones import TIME_ZONE_LABELS, TIME_ZONES
from chronokit.ports.zones import ZoneDatabasePort

logger = logging.getLogger(__name__)

ZoneId = Union[str, List[str]]

_ALPHA = re.compile(r"^[A-Za-z]+$")


@dataclass(frozen=True)
class ResolvedZone:
    offset: int
    name: str
    zone_id: ZoneId
    tracker: str


def abbreviate(name: str) -> str:
    """``"Bangladesh Standard Time"`` -> ``"BST"``."""
    initials = "".join(word[0] for word in name.split() if word)
    return re.sub(r"\W", "", initials)


class TimeZoneResolver:
    """Translates between UTC offsets, zone abbreviations and IANA identifiers.

    Lookups never raise. Every path ends in a deterministic fallback, ultimately the
    formatted offset itself.
    """

    def __init__(
        self,
        database: ZoneDatabasePort,
        abbreviations: Mapping[str, Tuple[str, str]] = TIME_ZONES,
        labels: Mapping[str, str] = TIME_ZONE_LABELS,
    ) -> None:
        self.database = database
        self.abbreviations = abbreviations
        self.labels = labels
        self._first_abbreviation: Dict[str, str] = {}
        for abbr, (offset, _) in abbreviations.items():
            self._first_abbreviation.setdefault(offset, abbr)
        self._ids_by_offset: Optional[Dict[str, List[str]]] = None
        self._lock = threading.Lock()

    def resolve_offset(self, zone: str, at_ms: Optional[int] = None) -> int:
        """Returns the offset in minutes for an offset string, abbreviation or IANA id."""
        if is_valid_utc_offset(zone):
            return offset_to_minutes(zone)
        if zone in self.abbreviations:
            return offset_to_minutes(self.abbreviations[zone][0])
        if zone:
            minutes = self.database.utc_offset(zone, _now_ms() if at_ms is None else at_ms)
            if minutes is not None:
                return minutes
        logger.debug(f"No offset known for zone {zone!r}, using UTC")
        return 0

    def lookup(self, zone: str, at_ms: int) -> ResolvedZone:
        """Resolves everything an instant needs to be re-stamped into ``zone``."""
        if is_valid_utc_offset(zone) or zone in self.abbreviations:
            offset = self.resolve_offset(zone)
            return ResolvedZone(
                offset=offset,
                name=self.name_for(zone, at_ms),
                zone_id=self.zone_id_for(format_utc_offset(offset)),
                tracker=zone,
            )
        minutes = self.database.utc_offset(zone, at_ms) if zone else None
        if minutes is None:
            logger.info(f"Unknown time zone {zone!r}, falling back to UTC")
            return self.lookup("UTC+00:00", at_ms)
        return ResolvedZone(offset=minutes, name=self.name_for(zone, at_ms), zone_id=zone, tracker=zone)

    def name_for(self, zone: str, at_ms: Optional[int] = None) -> str:
        """Long descriptive name for an offset string, abbreviation or IANA id."""
        if is_gmt(zone):
            return "Greenwich Mean Time"
        if is_valid_utc_offset(zone):
            if zone in self.labels:
                return self.labels[zone]
            first = self._first_abbreviation.get(zone)
            return self.abbreviations[first][1] if first else zone
        if zone in self.abbreviations:
            return self.abbreviations[zone][1]

        at = _now_ms() if at_ms is None else at_ms
        minutes = self.database.utc_offset(zone, at) if zone else None
        if minutes is None:
            return zone
        offset = format_utc_offset(minutes)
        abbr = self.database.abbreviation(zone, at)
        if abbr and _ALPHA.match(abbr) and self.abbreviations.get(abbr, ("",))[0] == offset:
            return self.abbreviations[abbr][1]
        return self.labels.get(offset, offset)

    def short_name_for(self, offset: str, tracker: Optional[str] = None, at_ms: Optional[int] = None) -> str:
        """Abbreviated zone name for ``offset``, preferring the zone it was requested as."""
        key = tracker or offset
        if is_gmt(key):
            return "GMT"
        if tracker and tracker in self.abbreviations:
            return tracker
        if is_valid_utc_offset(key):
            if key in self._first_abbreviation:
                return self._first_abbreviation[key]
            if key in self.labels:
                return abbreviate(self.labels[key])
            return key
        name = self.name_for(key, at_ms)
        if name == key or is_valid_utc_offset(name):
            return offset
        return abbreviate(name)

    def ids_for(self, offset: str) -> List[str]:
        """All known IANA ids currently observing ``offset``. Empty for invalid input."""
        if not is_valid_utc_offset(offset):
            return []
        return list(self._id_index().get(format_utc_offset(offset_to_minutes(offset)), []))

    def zone_id_for(self, offset: str) -> ZoneId:
        ids = self.ids_for(offset)
        if not ids:
            return offset
        if len(ids) == 1:
            return ids[0]
        return ids

    def _id_index(self) -> Dict[str, List[str]]:
        if self._ids_by_offset is None:
            with self._lock:
                if self._ids_by_offset is None:
                    self._ids_by_offset = self._build_id_index()
        return self._ids_by_offset

    def _build_id_index(self) -> Dict[str, List[str]]:
        at = _now_ms()
        index: Dict[str, List[str]] = {}
        for zone_id in self.database.zone_ids():
            minutes = self.database.utc_offset(zone_id, at)
            if minutes is None:
                continue
            index.setdefault(format_utc_offset(minutes), []).append(zone_id)
        logger.debug(f"Indexed {sum(len(ids) for ids in index.values())} zone ids under {len(index)} offsets")
        return index


def _now_ms() -> int:
    return int(time.time() * 1000)


_default_resolver: Optional[TimeZoneResolver] = None
_default_lock = threading.Lock()


def get_resolver() -> TimeZoneResolver:
    """Process-wide resolver backed by the runtime IANA database."""
    global _default_resolver
    if _default_resolver is None:
        with _default_lock:
            if _default_resolver is None:
                from chronokit.adapters.zoneinfo.database import ZoneInfoDatabase

                _default_resolver = TimeZoneResolver(ZoneInfoDatabase())
    return _default_resolver


def set_resolver(resolver: Optional[TimeZoneResolver]) -> None:
    """Replaces the process-wide resolver. ``None`` restores the default on next use."""
    global _default_resolver
    _default_resolver = resolver
