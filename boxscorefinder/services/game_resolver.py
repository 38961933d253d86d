"""Game resolution.

Finds the game a search term refers to on a given date by walking the
candidate leagues in order and testing each scoreboard game's home team,
then away team. The first match wins; later leagues are never queried.
"""

import logging

from boxscorefinder.core.interfaces import OfficialGameLookup, ScoreboardSource
from boxscorefinder.core.types import GameInfo, OfficialGame
from boxscorefinder.matching.team_matcher import team_matches

logger = logging.getLogger(__name__)


def game_matches(search_term: str, game: GameInfo) -> bool:
    """True if the search term names either team in the game (home first)."""
    return (
        team_matches(search_term, game.home_team, game.home_team_abbr, game.home_team)
        or team_matches(search_term, game.away_team, game.away_team_abbr, game.away_team)
    )


class GameResolver:
    """Resolves search terms to scoreboard games and official game ids.

    Args:
        scoreboard: Primary scoreboard (ESPN)
        official_lookups: Secondary lookups keyed by lowercase league code
    """

    def __init__(
        self,
        scoreboard: ScoreboardSource,
        official_lookups: dict[str, OfficialGameLookup] | None = None,
    ):
        self._scoreboard = scoreboard
        self._official_lookups = official_lookups or {}

    @property
    def scoreboard(self) -> ScoreboardSource:
        return self._scoreboard

    @property
    def official_lookups(self) -> dict[str, OfficialGameLookup]:
        return dict(self._official_lookups)

    def find_game(self, search_term: str, date_iso: str, leagues: list[str]) -> GameInfo | None:
        """
        Find the first game on the date involving the searched team.

        Args:
            search_term: Team name/nickname/abbreviation typed by the user
            date_iso: Date in YYYY-MM-DD format
            leagues: Candidate leagues, queried in this order

        Returns:
            First matching GameInfo, or None
        """
        for league in leagues:
            games = self._scoreboard.get_games_by_date(league, date_iso)
            logger.debug(f"Checking {len(games)} {league} games on {date_iso} for '{search_term}'")

            for game in games:
                if game_matches(search_term, game):
                    logger.info(
                        f"Matched '{search_term}' to {game.league} {game.away_team} @ {game.home_team} "
                        f"({game.external_game_id})"
                    )
                    return game

        logger.info(f"No game found for '{search_term}' on {date_iso} in {', '.join(leagues)}")
        return None

    def find_official_game(self, game: GameInfo) -> OfficialGame | None:
        """Look up the league site's own id for a resolved game, if supported."""
        lookup = self._official_lookups.get(game.league.lower())
        if lookup is None:
            return None
        return lookup.find_game(game)
