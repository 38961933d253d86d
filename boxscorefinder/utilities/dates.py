"""
Date helpers for game dates.

Game dates travel through the system as ISO strings ("2024-01-15"). Each
provider wants its own encoding, and the UI wants a readable form. Dates are
handled as calendar dates, never datetimes, so no timezone shift can move a
game to the neighbouring day.
"""

import re
from datetime import date

# Only the extended form; date.fromisoformat also takes "20240115" and "2024W031"
_iso_date_re = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_game_date(date_iso: str) -> date:
    """
    Parse an ISO game date.

    Raises:
        ValueError: if the string is not a YYYY-MM-DD calendar date
    """
    value = date_iso.strip()
    if not _iso_date_re.fullmatch(value):
        raise ValueError(f"Not a YYYY-MM-DD date: '{date_iso}'")
    return date.fromisoformat(value)


def to_espn_date(date_iso: str) -> str:
    """'2024-01-15' -> '20240115' (ESPN scoreboard `dates` parameter)."""
    d = parse_game_date(date_iso)
    return f"{d.year:04d}{d.month:02d}{d.day:02d}"


def to_us_date(date_iso: str) -> str:
    """'2024-01-15' -> '01/15/2024' (stats.nba.com `GameDate` parameter)."""
    d = parse_game_date(date_iso)
    return f"{d.month:02d}/{d.day:02d}/{d.year:04d}"


def format_long_date(date_iso: str) -> str:
    """
    Format a game date for display.

    Examples:
        >>> format_long_date("2024-01-15")
        'Monday, January 15, 2024'
    """
    d = parse_game_date(date_iso)
    return f"{d:%A}, {d:%B} {d.day}, {d.year}"


def format_short_date(date_iso: str) -> str:
    """
    Short display form used inside search queries.

    Examples:
        >>> format_short_date("2024-01-05")
        'Jan 5, 2024'
    """
    d = parse_game_date(date_iso)
    return f"{d:%b} {d.day}, {d.year}"
