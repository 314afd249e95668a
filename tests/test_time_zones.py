import logging
from datetime import datetime, timezone

import pytest

from chronokit import InMemoryZoneDatabase, Instant, TimeZoneResolver, ZoneInfoDatabase, get_resolver
from chronokit.application.resolver import abbreviate
from chronokit.domain.offsets import is_valid_utc_offset, offset_to_minutes

JANUARY = int(datetime(2025, 1, 15, tzinfo=timezone.utc).timestamp() * 1000)
JULY = int(datetime(2025, 7, 15, tzinfo=timezone.utc).timestamp() * 1000)


class CountingZoneDatabase(InMemoryZoneDatabase):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.listings = 0

    def zone_ids(self):
        self.listings += 1
        return super().zone_ids()


def test_resolve_offset_from_each_kind_of_zone():
    resolver = get_resolver()

    assert resolver.resolve_offset("UTC+05:30") == 330
    assert resolver.resolve_offset("UTC-03:30") == -210
    assert resolver.resolve_offset("BDT") == 360
    assert resolver.resolve_offset("Asia/Kathmandu") == 345
    assert resolver.resolve_offset("Nowhere/Special") == 0


def test_time_zone_by_abbreviation():
    shown = Instant("2025-01-01T00:00:00Z").time_zone("JST")

    assert shown.format("HH:mm") == "09:00"
    assert shown.get_time_zone_name() == "Japan Standard Time"
    assert shown.get_time_zone_name_short() == "JST"
    assert shown.get_time_zone_id() == "Asia/Tokyo"


def test_time_zone_by_iana_id():
    shown = Instant("2025-01-01T00:00:00Z").time_zone("Asia/Dhaka")

    assert shown.offset == "UTC+06:00"
    assert shown.time_zone_id == "Asia/Dhaka"
    assert shown.time_zone_name == "Bangladesh Standard Time"
    assert shown.get_time_zone_name_abbr() == "BST"


def test_iana_id_uses_database_abbreviation_when_it_agrees():
    shown = Instant("2025-01-01T00:00:00Z").time_zone("America/New_York")

    assert shown.format("YYYY-MM-DD HH:mm") == "2024-12-31 19:00"
    assert shown.get_time_zone_name() == "Eastern Standard Time (North America)"


def test_offset_zone_names():
    shown = Instant("2025-01-01T00:00:00Z").time_zone("UTC+06:00")

    assert shown.get_time_zone_name() == "Bangladesh Standard Time"
    assert shown.get_time_zone_name_short() == "ALMT"
    assert shown.get_time_zone_id() == ["Asia/Dhaka", "Asia/Thimphu"]
    assert shown.get_time_zone_offset() == "+06:00"
    assert shown.get_time_zone_offset_minutes() == 360


def test_names_for_an_explicit_offset():
    instant = Instant("2025-01-01T00:00:00Z")

    assert instant.get_time_zone_name("UTC+05:30") == "India Standard Time"
    assert instant.get_time_zone_name_short("UTC+05:45") == "NPT"
    assert instant.get_time_zone_name_short("UTC+01:30") == "CAT"
    assert instant.get_time_zone_name_short("UTC+06:15") == "UTC+06:15"


def test_gmt_is_special_cased():
    instant = Instant("2025-01-01T00:00:00Z")

    assert instant.get_time_zone_name() == "Greenwich Mean Time"
    assert instant.get_time_zone_name_short() == "GMT"
    assert instant.get_time_zone_id() == "Europe/London"


def test_unknown_zone_falls_back_to_utc(caplog):
    with caplog.at_level(logging.INFO, logger="chronokit.application.resolver"):
        shown = Instant("2025-01-01T12:00:00Z").time_zone("Mars/Olympus_Mons")

    assert shown.offset == "UTC+00:00"
    assert shown.format("HH:mm") == "12:00"
    assert "Mars/Olympus_Mons" in caplog.text


def test_ids_for_offset():
    resolver = get_resolver()

    assert resolver.ids_for("UTC+06:00") == ["Asia/Dhaka", "Asia/Thimphu"]
    assert resolver.ids_for("UTC+6:00") == []
    assert resolver.ids_for("UTC+01:30") == []
    assert resolver.ids_for("not an offset") == []
    assert resolver.zone_id_for("UTC+05:30") == "Asia/Kolkata"
    assert resolver.zone_id_for("UTC+01:30") == "UTC+01:30"


def test_id_index_is_built_once():
    database = CountingZoneDatabase({"Asia/Dhaka": 360})
    resolver = TimeZoneResolver(database)

    resolver.ids_for("UTC+06:00")
    resolver.ids_for("UTC+00:00")

    assert database.listings == 1


def test_in_memory_database_add():
    database = InMemoryZoneDatabase()
    database.add("Pacific/Chatham", 765, "CHAST")

    assert database.utc_offset("Pacific/Chatham", 0) == 765
    assert database.abbreviation("Pacific/Chatham", 0) == "CHAST"
    assert database.utc_offset("Pacific/Nowhere", 0) is None


def test_abbreviate():
    assert abbreviate("Bangladesh Standard Time") == "BST"
    assert abbreviate("Central Africa Time (Unofficial)") == "CAT"


def test_zoneinfo_database_reads_iana_rules():
    database = ZoneInfoDatabase()

    assert database.utc_offset("Asia/Kolkata", JANUARY) == 330
    assert database.utc_offset("America/New_York", JANUARY) == -300
    assert database.utc_offset("America/New_York", JULY) == -240
    assert database.abbreviation("America/New_York", JANUARY) == "EST"
    assert database.utc_offset("Not/AZone", JANUARY) is None
    assert "Asia/Dhaka" in database.zone_ids()


@pytest.mark.parametrize("zone,expected", [("Asia/Dhaka", "06:00"), ("Asia/Kathmandu", "05:45")])
def test_resolver_over_zoneinfo(zone, expected):
    resolver = TimeZoneResolver(ZoneInfoDatabase())

    resolved = resolver.lookup(zone, JANUARY)

    assert resolved.zone_id == zone
    assert f"{resolved.offset // 60:02d}:{resolved.offset % 60:02d}" == expected


@pytest.mark.parametrize(
    "offset,valid",
    [
        ("UTC+06:00", True),
        ("UTC-12:00", True),
        ("UTC+14:00", True),
        ("UTC+05:45", True),
        ("UTC6:00", False),
        ("UTC+6:00", False),
        ("UTC+99:00", False),
        ("UTC+14:30", False),
        ("UTC+05:60", False),
    ],
)
def test_utc_offset_grammar(offset, valid):
    assert is_valid_utc_offset(offset) is valid


def test_malformed_offsets_are_not_used_as_zones():
    with pytest.raises(ValueError):
        offset_to_minutes("UTC+99:00")

    shown = Instant("2025-01-01T12:00:00Z").time_zone("UTC+99:00")

    assert shown.offset == "UTC+00:00"
    assert shown.time_zone_name != "UTC+99:00"
