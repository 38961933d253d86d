"""ESPN scoreboard client.

Fetches one league's scoreboard for one date and flattens ESPN's nested
events -> competitions -> competitors structure into GameInfo records.

Scoreboard URL:
    {ESPN_API_BASE}/{sport}/{league}/scoreboard?dates=YYYYMMDD

Only events with exactly identifiable home and away competitors (each with a
display name and abbreviation) are kept; anything incomplete is skipped
without failing the rest of the day.
"""

import logging

from boxscorefinder.core.types import GameInfo, ScoreboardResult
from boxscorefinder.providers.espn.constants import AWAY, ESPN_API_BASE, HOME
from boxscorefinder.providers.http import JSONHttpClient
from boxscorefinder.utilities.dates import to_espn_date
from boxscorefinder.utilities.sports import get_league

logger = logging.getLogger(__name__)


def scoreboard_url(league: str) -> str | None:
    """Scoreboard endpoint for a league code, or None if unsupported."""
    info = get_league(league)
    if info is None:
        return None
    return f"{ESPN_API_BASE}/{info.sport}/{info.espn_league}/scoreboard"


def _parse_event(event: dict, league: str, date_iso: str) -> GameInfo | None:
    """Convert one ESPN event to a GameInfo, or None if data is incomplete."""
    event_id = event.get("id")
    competitions = event.get("competitions") or []
    if not event_id or not competitions:
        return None

    competitors = competitions[0].get("competitors") or []
    if len(competitors) < 2:
        return None

    home = next((c for c in competitors if c.get("homeAway") == HOME), None)
    away = next((c for c in competitors if c.get("homeAway") == AWAY), None)
    if home is None or away is None:
        return None

    home_team = home.get("team") or {}
    away_team = away.get("team") or {}
    home_name = home_team.get("displayName")
    away_name = away_team.get("displayName")
    home_abbr = home_team.get("abbreviation")
    away_abbr = away_team.get("abbreviation")
    if not all(isinstance(v, str) and v for v in (home_name, away_name, home_abbr, away_abbr)):
        return None

    return GameInfo(
        external_game_id=str(event_id),
        home_team=home_name,
        away_team=away_name,
        home_team_abbr=home_abbr,
        away_team_abbr=away_abbr,
        game_date=date_iso,
        league=league.upper(),
    )


class ESPNClient(JSONHttpClient):
    """Client for ESPN's public scoreboard API."""

    name = "ESPN"

    def fetch_scoreboard(self, league: str, date_iso: str) -> ScoreboardResult:
        """
        Fetch all games for a league on a date.

        Args:
            league: League code (e.g. 'nba', 'mls')
            date_iso: Date in YYYY-MM-DD format

        Returns:
            ScoreboardResult; `error` is set and `games` empty on any failure
        """
        url = scoreboard_url(league)
        if url is None:
            logger.warning(f"No ESPN scoreboard for league '{league}'")
            return ScoreboardResult(league=league, date=date_iso, error=f"unsupported league '{league}'")

        try:
            espn_date = to_espn_date(date_iso)
        except ValueError:
            logger.warning(f"Invalid date '{date_iso}' for {league} scoreboard")
            return ScoreboardResult(league=league, date=date_iso, error="invalid date")

        data = self._get_json(url, params={"dates": espn_date})
        if data is None:
            return ScoreboardResult(league=league, date=date_iso, error="scoreboard request failed")

        events = data.get("events")
        if not isinstance(events, list):
            return ScoreboardResult(league=league, date=date_iso)

        games = []
        for event in events:
            try:
                game = _parse_event(event, league, date_iso)
            except (AttributeError, TypeError, IndexError, KeyError) as e:
                logger.debug(f"Skipping malformed {league} event: {e}")
                continue
            if game is not None:
                games.append(game)

        logger.debug(f"ESPN {league} scoreboard {espn_date}: {len(games)} games")
        return ScoreboardResult(league=league, date=date_iso, games=tuple(games))

    def get_games_by_date(self, league: str, date_iso: str) -> list[GameInfo]:
        """All games for a league on a date; empty list on any failure."""
        return list(self.fetch_scoreboard(league, date_iso).games)
