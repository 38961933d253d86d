"""Interfaces between the search pipeline and its data providers.

The pipeline only depends on these protocols; concrete HTTP clients live in
boxscorefinder.providers and tests substitute small fakes.
"""

from typing import Protocol

from boxscorefinder.core.types import GameInfo, OfficialGame, PlayerTeam


class ScoreboardSource(Protocol):
    """Primary scoreboard: all games for a league on a date."""

    def get_games_by_date(self, league: str, date_iso: str) -> list[GameInfo]:
        """Return the league's games for the date; empty on any failure."""
        ...


class OfficialGameLookup(Protocol):
    """League-operated source that knows the league's own game ids."""

    league: str

    def find_game(self, game: GameInfo) -> OfficialGame | None:
        """Find the league site's id for a resolved game; None on any failure."""
        ...


class PlayerLookup(Protocol):
    """Resolves a player name to the team they play for."""

    def find_player_team(self, player_name: str) -> PlayerTeam | None:
        ...
