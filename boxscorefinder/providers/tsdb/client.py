"""TheSportsDB player lookup.

Resolves a player name to their current team with searchplayers.php:

    GET https://www.thesportsdb.com/api/v1/json/{key}/searchplayers.php?p=LeBron James
    -> {"player": [{"strPlayer": "LeBron James", "strTeam": "Los Angeles Lakers",
                    "strSport": "Basketball", ...}]}

API key resolution order:
1. Explicit api_key parameter
2. TSDB_API_KEY setting (environment)
3. Free test key "123"

Retired and free-agent players come back with placeholder teams whose names
start with an underscore ("_Retired Basketball"); those are skipped.
"""

import logging

import httpx

from boxscorefinder.config import HTTP_TIMEOUT, TSDB_API_KEY
from boxscorefinder.core.types import PlayerTeam
from boxscorefinder.providers.http import JSONHttpClient

logger = logging.getLogger(__name__)

TSDB_BASE_URL = "https://www.thesportsdb.com/api/v1/json"

# TSDB strSport -> league code
SPORT_TO_LEAGUE = {
    "Basketball": "nba",
    "Baseball": "mlb",
    "American Football": "nfl",
    "Ice Hockey": "nhl",
    "Soccer": "mls",
}


class TSDBClient(JSONHttpClient):
    """Low-level TheSportsDB client for player searches."""

    name = "TSDB"

    # Free test key
    FREE_API_KEY = "123"

    def __init__(
        self,
        api_key: str | None = None,
        http_client: httpx.Client | None = None,
        timeout: float = HTTP_TIMEOUT,
    ):
        super().__init__(http_client=http_client, timeout=timeout)
        self._api_key = api_key or TSDB_API_KEY or self.FREE_API_KEY

    def search_players(self, player_name: str) -> list[dict]:
        """Raw player records for a name; empty list on failure or no match."""
        data = self._get_json(f"{TSDB_BASE_URL}/{self._api_key}/searchplayers.php", params={"p": player_name})
        if data is None:
            return []
        players = data.get("player")
        if not isinstance(players, list):
            return []
        return [p for p in players if isinstance(p, dict)]

    def find_player_team(self, player_name: str) -> PlayerTeam | None:
        """
        Get the team a player currently plays for.

        Prefers players in a supported sport; among those, the first one
        TSDB returns (it ranks exact name matches first).

        Args:
            player_name: Player's name as typed by the user

        Returns:
            PlayerTeam, or None if no active player was found
        """
        candidates = []
        for player in self.search_players(player_name):
            team = (player.get("strTeam") or "").strip()
            if not team or team.startswith("_"):
                continue
            league = SPORT_TO_LEAGUE.get(player.get("strSport") or "", "")
            candidates.append(PlayerTeam(
                player_name=player.get("strPlayer") or player_name,
                team_name=team,
                league=league,
            ))

        if not candidates:
            logger.info(f"TSDB: no active player found for '{player_name}'")
            return None

        best = next((c for c in candidates if c.league), candidates[0])
        logger.info(f"TSDB: {player_name} -> {best.team_name} ({best.league or 'unknown league'})")
        return best
