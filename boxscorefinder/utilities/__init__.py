"""Utilities - logging, dates, league reference data."""

from boxscorefinder.utilities.dates import (
    format_long_date,
    format_short_date,
    parse_game_date,
    to_espn_date,
    to_us_date,
)
from boxscorefinder.utilities.logging import setup_logging
from boxscorefinder.utilities.sports import (
    LEAGUES,
    POPULAR_TEAMS,
    League,
    get_league,
    is_soccer_league,
)

__all__ = [
    "LEAGUES",
    "League",
    "POPULAR_TEAMS",
    "format_long_date",
    "format_short_date",
    "get_league",
    "is_soccer_league",
    "parse_game_date",
    "setup_logging",
    "to_espn_date",
    "to_us_date",
]
