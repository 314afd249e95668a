from chronokit.adapters.zoneinfo.database import ZoneInfoDatabase

__all__ = ["ZoneInfoDatabase"]
