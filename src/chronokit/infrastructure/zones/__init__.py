from chronokit.infrastructure.zones.in_memory import InMemoryZoneDatabase

__all__ = ["InMemoryZoneDatabase"]
