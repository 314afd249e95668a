from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from chronokit.application.plugins import install_methods
from chronokit.ports.plugins import InstantCapabilities

UNKNOWN_SEASON = "Unknown"


class Season(BaseModel):
    """A named season bounded either by whole months (1-12) or by ``MM-DD`` dates.

    A start after the end wraps over the new year.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    start_month: Optional[int] = Field(default=None, ge=1, le=12)
    end_month: Optional[int] = Field(default=None, ge=1, le=12)
    start_date: Optional[str] = Field(default=None, pattern=r"^\d{2}-\d{2}$")
    end_date: Optional[str] = Field(default=None, pattern=r"^\d{2}-\d{2}$")

    @model_validator(mode="after")
    def _check_boundary(self) -> "Season":
        by_month = self.start_month is not None and self.end_month is not None
        by_date = self.start_date is not None and self.end_date is not None
        if by_month == by_date:
            raise ValueError(f"Season {self.name!r} needs either start/end months or start/end dates")
        return self

    @property
    def bounds(self) -> Tuple[Tuple[int, int], Tuple[int, int]]:
        if self.start_date is not None and self.end_date is not None:
            start_month, start_day = (int(part) for part in self.start_date.split("-"))
            end_month, end_day = (int(part) for part in self.end_date.split("-"))
            return (start_month, start_day), (end_month, end_day)
        return (self.start_month, 1), (self.end_month, 31)

    def contains(self, month: int, day: int) -> bool:
        start, end = self.bounds
        point = (month, day)
        if start <= end:
            return start <= point <= end
        return point >= start or point <= end


def _months(*entries: Tuple[str, int, int]) -> List[Season]:
    return [Season(name=name, start_month=start, end_month=end) for name, start, end in entries]


def _dates(*entries: Tuple[str, str, str]) -> List[Season]:
    return [Season(name=name, start_date=start, end_date=end) for name, start, end in entries]


SEASON_PRESETS: Dict[str, List[Season]] = {
    "default": _months(("Spring", 3, 5), ("Summer", 6, 8), ("Autumn", 9, 11), ("Winter", 12, 2)),
    "bangladesh": _dates(
        ("Grishsho (Summer)", "04-15", "06-14"),
        ("Bôrsha (Monsoon)", "06-15", "08-14"),
        ("Shôrot (Autumn)", "08-15", "10-14"),
        ("Hemonto (Late Autumn)", "10-15", "12-14"),
        ("Sheet (Winter)", "12-15", "02-14"),
        ("Bôshonto (Spring)", "02-15", "04-14"),
    ),
    "india": _months(
        ("Winter", 1, 2),
        ("Pre-Monsoon", 3, 5),
        ("Monsoon", 6, 9),
        ("Post-Monsoon", 10, 11),
        ("Cool Season", 12, 12),
    ),
    "vedic": _dates(
        ("Shishir (Winter)", "12-15", "02-14"),
        ("Vasanta (Spring)", "02-15", "04-14"),
        ("Grishma (Summer)", "04-15", "06-14"),
        ("Varsha (Monsoon)", "06-15", "08-14"),
        ("Sharad (Autumn)", "08-15", "10-14"),
        ("Hemant (Late Autumn)", "10-15", "12-14"),
    ),
    "tamil": _months(
        ("Ilavenil (Mid-Summer)", 5, 6),
        ("Mutuvenil (Peak-Summer)", 7, 8),
        ("Kaar (Monsoon)", 8, 10),
        ("Koothir (Autumn)", 10, 11),
        ("Munpani (Early-Winter)", 11, 1),
        ("Pinpani (Late-Winter)", 1, 3),
    ),
    "philippines": _months(("Dry Season", 12, 5), ("Wet Season", 6, 11)),
    "academic_us": _dates(
        ("Spring", "01-10", "05-15"),
        ("Summer", "05-16", "08-15"),
        ("Fall", "08-16", "12-20"),
        ("Winter", "12-21", "01-09"),
    ),
    "japan": _dates(
        ("Haru (Spring)", "03-01", "05-31"),
        ("Natsu (Summer)", "06-01", "08-31"),
        ("Aki (Autumn)", "09-01", "11-30"),
        ("Fuyu (Winter)", "12-01", "02-28"),
    ),
    "australia": _months(("Summer", 12, 2), ("Autumn", 3, 5), ("Winter", 6, 8), ("Spring", 9, 11)),
    "ethiopia": _months(("Bega (Dry)", 11, 2), ("Belg (Short Rain)", 3, 5), ("Kiremt (Main Rain)", 6, 10)),
}


class SeasonOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    preset: str = "default"
    seasons: Optional[List[Season]] = None

    @model_validator(mode="after")
    def _check_preset(self) -> "SeasonOptions":
        if self.seasons is None and self.preset not in SEASON_PRESETS:
            raise ValueError(f"Unknown season preset {self.preset!r}")
        return self


def find_season(seasons: List[Season], month: int, day: int) -> str:
    """Latest-starting season whose start is on or before the date, if the date is inside it.

    Dates before every start fall to the season starting latest in the year.
    Returns ``"Unknown"`` when the candidate season has already ended.
    """
    if not seasons:
        return UNKNOWN_SEASON
    ordered = sorted(seasons, key=lambda season: season.bounds[0])
    candidate = ordered[-1]
    for season in reversed(ordered):
        if season.bounds[0] <= (month, day):
            candidate = season
            break
    return candidate.name if candidate.contains(month, day) else UNKNOWN_SEASON


def season(caps: InstantCapabilities, instant: Any, options: Optional[SeasonOptions] = None, **kwargs) -> str:
    options = options or SeasonOptions(**kwargs)
    seasons = options.seasons if options.seasons is not None else SEASON_PRESETS[options.preset]
    local = caps.internal_date(instant)
    return find_season(seasons, local.month, local.day)


def season_plugin(host: type, caps: InstantCapabilities) -> None:
    install_methods(host, caps, season=season, get_season_name=season)
