"""Shared pieces for league-operated (official site) lookups.

ESPN and the league sites do not always agree on team abbreviations
("GS" vs "GSW", "NJ" vs "NJD"), and relocated or renamed franchises carry
more than one code over time. Each lookup declares an alias table mapping an
ESPN abbreviation to the codes the league site may use for the same team.
"""

import logging
from abc import ABC, abstractmethod

from boxscorefinder.core.types import GameInfo, OfficialGame
from boxscorefinder.providers.http import JSONHttpClient

logger = logging.getLogger(__name__)


def team_codes(espn_abbr: str, aliases: dict[str, tuple[str, ...]]) -> frozenset[str]:
    """
    All league-site codes that may stand for an ESPN abbreviation.

    Examples:
        >>> sorted(team_codes("GS", {"GS": ("GSW",)}))
        ['GS', 'GSW']
    """
    code = (espn_abbr or "").upper()
    return frozenset((code, *aliases.get(code, ())))


class OfficialSiteLookup(JSONHttpClient, ABC):
    """Base class for secondary lookups against a league's own data.

    Subclasses implement `_find_game`; `find_game` guarantees the soft-fail
    contract by converting payload-shape errors into None.
    """

    league = ""
    aliases: dict[str, tuple[str, ...]] = {}

    def home_codes(self, game: GameInfo) -> frozenset[str]:
        return team_codes(game.home_team_abbr, self.aliases)

    def away_codes(self, game: GameInfo) -> frozenset[str]:
        return team_codes(game.away_team_abbr, self.aliases)

    def find_game(self, game: GameInfo) -> OfficialGame | None:
        """
        Find the league site's identifier for a resolved game.

        Returns:
            OfficialGame, or None when the game is not found or the
            lookup fails for any reason
        """
        try:
            official = self._find_game(game)
        except (KeyError, TypeError, ValueError, IndexError, AttributeError) as e:
            logger.warning(f"{self.name} lookup failed for {game.away_team_abbr} @ {game.home_team_abbr}: {e}")
            return None

        if official is None:
            logger.info(
                f"{self.name}: no game for {game.away_team_abbr} @ {game.home_team_abbr} on {game.game_date}"
            )
        else:
            logger.info(f"{self.name}: {game.away_team_abbr} @ {game.home_team_abbr} -> {official.game_id}")
        return official

    @abstractmethod
    def _find_game(self, game: GameInfo) -> OfficialGame | None:
        """Query the league site; may raise on unexpected payload shapes."""
        pass
