import pytest

from chronokit import InMemoryZoneDatabase, Instant, TimeZoneResolver, set_resolver
from chronokit.config import override_settings, reset_settings
from chronokit.plugins import ALL_PLUGINS

for _plugin in ALL_PLUGINS:
    Instant.register(_plugin)


def zone_database() -> InMemoryZoneDatabase:
    return InMemoryZoneDatabase(
        zones={
            "Asia/Dhaka": 360,
            "Asia/Thimphu": 360,
            "Asia/Kolkata": 330,
            "Asia/Kathmandu": 345,
            "Asia/Tokyo": 540,
            "America/New_York": -300,
            "Europe/London": 0,
        },
        abbreviations={"America/New_York": "EST", "Asia/Tokyo": "JST", "Europe/London": "GMT"},
    )


@pytest.fixture(autouse=True)
def utc_host():
    reset_settings()
    override_settings(local_offset="UTC+00:00", bangla_variant="revised-2019")
    set_resolver(TimeZoneResolver(zone_database()))
    yield
    set_resolver(None)
    reset_settings()
