"""Core data types for Box Score Finder.

All data structures are pure dataclasses with attribute access.
Everything here is created and discarded within one search request.
"""

from dataclasses import dataclass, field
from typing import Literal

ProviderType = Literal["official", "third-party"]
LinkType = Literal["search", "direct"]


@dataclass(frozen=True)
class SearchQuery:
    """A validated search request."""

    game_date: str  # ISO "YYYY-MM-DD"
    player_name: str = ""
    team_name: str = ""


@dataclass(frozen=True)
class GameInfo:
    """A game found on the primary scoreboard (ESPN)."""

    external_game_id: str
    home_team: str  # display name, e.g. "Los Angeles Lakers"
    away_team: str
    home_team_abbr: str
    away_team_abbr: str
    game_date: str  # ISO date the game was looked up for
    league: str  # upper-case code, e.g. "NBA"


@dataclass(frozen=True)
class ScoreboardResult:
    """Outcome of one scoreboard fetch.

    A failed fetch carries the error message and no games; callers treat
    both failure and an empty day as "no data for this league/date".
    """

    league: str
    date: str
    games: tuple[GameInfo, ...] = ()
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class OfficialGame:
    """A game identified on a league-operated site (secondary lookup)."""

    league: str  # lowercase code, e.g. "nba"
    game_id: str
    home_slug: str  # team slug as used in the league site's URLs
    away_slug: str
    game_date: str


@dataclass(frozen=True)
class PlayerTeam:
    """Result of a player -> team lookup."""

    player_name: str
    team_name: str
    league: str = ""  # lowercase code; empty when the sport is unsupported


@dataclass(frozen=True)
class BoxScoreLink:
    """One link in a search result."""

    id: str
    provider: str
    provider_type: ProviderType
    league: str
    url: str
    description: str
    link_type: LinkType


@dataclass(frozen=True)
class MatchInfo:
    """Display metadata echoed back with the links."""

    player_name: str
    team_name: str
    game_date: str
    formatted_date: str
    resolved_from_player: bool | None = None


@dataclass
class SearchResult:
    """Links for a query, best links first."""

    query: SearchQuery
    links: list[BoxScoreLink] = field(default_factory=list)
    match_info: MatchInfo | None = None

    @property
    def direct_links(self) -> list[BoxScoreLink]:
        return [link for link in self.links if link.link_type == "direct"]
