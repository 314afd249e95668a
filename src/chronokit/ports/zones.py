from __future__ import annotations

from typing import Iterable, Optional


class ZoneDatabasePort:
    """Read access to a timezone database keyed by IANA identifiers."""

    def zone_ids(self) -> Iterable[str]:
        raise NotImplementedError

    def utc_offset(self, zone_id: str, at_ms: int) -> Optional[int]:
        """Offset of ``zone_id`` in minutes at the given true-UTC instant, ``None`` if unknown."""
        raise NotImplementedError

    def abbreviation(self, zone_id: str, at_ms: int) -> Optional[str]:
        raise NotImplementedError
