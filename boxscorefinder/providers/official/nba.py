"""NBA.com game lookup via the stats.nba.com scoreboard.

scoreboardv2 works for historical dates and returns tabular result sets.
The LineScore set has one row per team per game with TEAM_ABBREVIATION,
which is enough to pair an ESPN matchup with NBA's GAME_ID
(e.g. "0022300567"). NBA.com game URLs use lowercase tricodes as slugs.
"""

import logging

from boxscorefinder.core.types import GameInfo, OfficialGame
from boxscorefinder.providers.official.base import OfficialSiteLookup
from boxscorefinder.utilities.dates import to_us_date

logger = logging.getLogger(__name__)

NBA_SCOREBOARD_URL = "https://stats.nba.com/stats/scoreboardv2"

# stats.nba.com rejects requests that don't look like they come from nba.com
NBA_STATS_HEADERS = {
    "Accept": "application/json",
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
    "Referer": "https://www.nba.com/",
    "Origin": "https://www.nba.com",
}

# ESPN abbreviation -> NBA tricodes (preferred first)
NBA_TEAM_ALIASES: dict[str, tuple[str, ...]] = {
    "GS": ("GSW",),
    "NY": ("NYK",),
    "SA": ("SAS",),
    "NO": ("NOP", "NOH"),
    "UTAH": ("UTA",),
    "WSH": ("WAS",),
    "BKN": ("BKN", "NJN"),
    "CHA": ("CHA", "CHH"),
    "OKC": ("OKC", "SEA"),
    "MEM": ("MEM", "VAN"),
}


def _result_set(data: dict, name: str) -> dict | None:
    for result_set in data.get("resultSets") or []:
        if result_set.get("name") == name:
            return result_set
    return None


def line_score_teams(data: dict) -> dict[str, list[str]]:
    """Map GAME_ID -> team abbreviations from a scoreboardv2 payload."""
    line_score = _result_set(data, "LineScore")
    if not line_score or not line_score.get("rowSet"):
        return {}

    headers = line_score["headers"]
    game_id_idx = headers.index("GAME_ID")
    abbr_idx = headers.index("TEAM_ABBREVIATION")

    games: dict[str, list[str]] = {}
    for row in line_score["rowSet"]:
        game_id = str(row[game_id_idx])
        abbr = (row[abbr_idx] or "").upper()
        games.setdefault(game_id, []).append(abbr)
    return games


class NBAStatsClient(OfficialSiteLookup):
    """Finds NBA.com game ids for ESPN-resolved NBA games."""

    name = "NBA Stats"
    league = "nba"
    aliases = NBA_TEAM_ALIASES
    default_headers = NBA_STATS_HEADERS

    def _find_game(self, game: GameInfo) -> OfficialGame | None:
        data = self._get_json(
            NBA_SCOREBOARD_URL,
            params={"DayOffset": 0, "GameDate": to_us_date(game.game_date), "LeagueID": "00"},
        )
        if data is None:
            return None

        home_codes = self.home_codes(game)
        away_codes = self.away_codes(game)

        for game_id, teams in line_score_teams(data).items():
            home = next((t for t in teams if t in home_codes), None)
            away = next((t for t in teams if t in away_codes), None)
            if home and away:
                return OfficialGame(
                    league=self.league,
                    game_id=game_id,
                    home_slug=home.lower(),
                    away_slug=away.lower(),
                    game_date=game.game_date,
                )
        return None
