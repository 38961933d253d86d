"""NHL.com game lookup via the NHL web API daily scores.

GET https://api-web.nhle.com/v1/score/YYYY-MM-DD returns
{"games": [{"id": 2023020670, "homeTeam": {"abbrev": "MTL"},
"awayTeam": {"abbrev": "TOR"}, ...}]}.
"""

import logging

from boxscorefinder.core.types import GameInfo, OfficialGame
from boxscorefinder.providers.official.base import OfficialSiteLookup

logger = logging.getLogger(__name__)

NHL_SCORE_URL = "https://api-web.nhle.com/v1/score/{date}"

# ESPN abbreviation -> NHL codes (preferred first)
NHL_TEAM_ALIASES: dict[str, tuple[str, ...]] = {
    "NJ": ("NJD",),
    "SJ": ("SJS",),
    "TB": ("TBL",),
    "LA": ("LAK",),
    "UTAH": ("UTA",),
    "ARI": ("ARI", "UTA"),  # Coyotes hockey operations moved to Utah in 2024
}


class NHLScoreClient(OfficialSiteLookup):
    """Finds NHL.com game ids for ESPN-resolved NHL games."""

    name = "NHL API"
    league = "nhl"
    aliases = NHL_TEAM_ALIASES

    def _find_game(self, game: GameInfo) -> OfficialGame | None:
        data = self._get_json(NHL_SCORE_URL.format(date=game.game_date))
        if data is None:
            return None

        home_codes = self.home_codes(game)
        away_codes = self.away_codes(game)

        for nhl_game in data.get("games") or []:
            home = (nhl_game.get("homeTeam") or {}).get("abbrev", "").upper()
            away = (nhl_game.get("awayTeam") or {}).get("abbrev", "").upper()
            if home in home_codes and away in away_codes:
                return OfficialGame(
                    league=self.league,
                    game_id=str(nhl_game["id"]),
                    home_slug=home.lower(),
                    away_slug=away.lower(),
                    game_date=game.game_date,
                )
        return None
