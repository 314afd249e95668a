from .domain.time import Instant
from .domain.errors import (
    ChronosError,
    FormatMismatchError,
    InvalidDateError,
    PluginConflictError,
    UnsupportedUnitError,
)
from .application.resolver import TimeZoneResolver, get_resolver, set_resolver
from .adapters.zoneinfo.database import ZoneInfoDatabase
from .infrastructure.zones.in_memory import InMemoryZoneDatabase
from .config import Settings, configure_logging, get_settings

__all__ = [
    "Instant",
    "ChronosError",
    "FormatMismatchError",
    "InvalidDateError",
    "PluginConflictError",
    "UnsupportedUnitError",
    "TimeZoneResolver",
    "get_resolver",
    "set_resolver",
    "ZoneInfoDatabase",
    "InMemoryZoneDatabase",
    "Settings",
    "configure_logging",
    "get_settings",
]
