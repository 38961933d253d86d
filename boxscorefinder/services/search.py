"""Search service - turns a query into box score links.

Pipeline for one query:
1. Player -> team (only when no team name was given)
2. League candidates from whichever name is available
3. Scoreboard game for the date (first matching league wins)
4. League site game id (NBA/NHL/MLB only)
5. Links + display metadata

Nothing is shared between calls except the provider clients themselves;
each call builds its result from scratch.
"""

import logging

import httpx

from boxscorefinder.core.interfaces import PlayerLookup
from boxscorefinder.core.types import MatchInfo, SearchQuery, SearchResult
from boxscorefinder.matching.league_detector import DEFAULT_LEAGUES, detect_leagues
from boxscorefinder.providers.espn import ESPNClient
from boxscorefinder.providers.official import create_official_lookups
from boxscorefinder.providers.tsdb import TSDBClient
from boxscorefinder.services.game_resolver import GameResolver
from boxscorefinder.services.link_builder import build_links
from boxscorefinder.utilities.dates import format_long_date

logger = logging.getLogger(__name__)


class SearchService:
    """Resolves search queries into SearchResults.

    Args:
        resolver: Game resolver (scoreboard + official lookups)
        player_lookup: Player -> team lookup; player-only queries fall back
            to searching by the player's name when omitted
    """

    def __init__(self, resolver: GameResolver, player_lookup: PlayerLookup | None = None):
        self._resolver = resolver
        self._player_lookup = player_lookup

    def search(self, query: SearchQuery) -> SearchResult:
        player_name = query.player_name.strip()
        team_name = query.team_name.strip()

        search_term = team_name
        display_team = team_name
        resolved_from_player = None
        player_league = ""

        if not team_name and player_name:
            player_team = self._player_lookup.find_player_team(player_name) if self._player_lookup else None
            if player_team is not None:
                search_term = player_team.team_name
                display_team = f"{player_team.team_name} (from {player_name})"
                resolved_from_player = True
                player_league = player_team.league
            else:
                search_term = player_name

        leagues = detect_leagues(search_term)
        if player_league and tuple(leagues) == DEFAULT_LEAGUES:
            leagues = [player_league] + [lg for lg in leagues if lg != player_league]

        logger.debug(f"Searching '{search_term}' on {query.game_date} in {leagues}")

        game = self._resolver.find_game(search_term, query.game_date, leagues)
        official = self._resolver.find_official_game(game) if game else None

        links = build_links(
            game,
            search_term=search_term,
            game_date=query.game_date,
            leagues=leagues,
            official=official,
            player_name=player_name,
        )

        return SearchResult(
            query=query,
            links=links,
            match_info=MatchInfo(
                player_name=query.player_name,
                team_name=display_team,
                game_date=query.game_date,
                formatted_date=format_long_date(query.game_date),
                resolved_from_player=resolved_from_player,
            ),
        )

    def close(self) -> None:
        """Close provider clients that hold HTTP connections."""
        for client in self._closeables():
            client.close()

    def _closeables(self) -> list:
        candidates = [self._resolver.scoreboard, *self._resolver.official_lookups.values(), self._player_lookup]
        return [c for c in candidates if c is not None and hasattr(c, "close")]


def create_default_service(http_client: httpx.Client | None = None) -> SearchService:
    """Build a SearchService wired to the live providers."""
    resolver = GameResolver(
        scoreboard=ESPNClient(http_client=http_client),
        official_lookups=create_official_lookups(http_client=http_client),
    )
    return SearchService(resolver, player_lookup=TSDBClient(http_client=http_client))
