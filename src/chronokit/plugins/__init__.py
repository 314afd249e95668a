from chronokit.plugins.bangla import bangla_plugin
from chronokit.plugins.business import business_plugin
from chronokit.plugins.date_range import date_range_plugin
from chronokit.plugins.day_part import day_part_plugin
from chronokit.plugins.duration import duration_plugin
from chronokit.plugins.from_now import from_now_plugin
from chronokit.plugins.greeting import greeting_plugin
from chronokit.plugins.palindrome import palindrome_plugin
from chronokit.plugins.relative import relative_time_plugin
from chronokit.plugins.round import round_plugin
from chronokit.plugins.season import season_plugin
from chronokit.plugins.zodiac import zodiac_plugin

ALL_PLUGINS = (
    bangla_plugin,
    business_plugin,
    date_range_plugin,
    day_part_plugin,
    duration_plugin,
    from_now_plugin,
    greeting_plugin,
    palindrome_plugin,
    relative_time_plugin,
    round_plugin,
    season_plugin,
    zodiac_plugin,
)

__all__ = [
    "ALL_PLUGINS",
    "bangla_plugin",
    "business_plugin",
    "date_range_plugin",
    "day_part_plugin",
    "duration_plugin",
    "from_now_plugin",
    "greeting_plugin",
    "palindrome_plugin",
    "relative_time_plugin",
    "round_plugin",
    "season_plugin",
    "zodiac_plugin",
]
