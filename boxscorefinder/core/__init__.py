"""Core types and interfaces."""

from boxscorefinder.core.interfaces import OfficialGameLookup, PlayerLookup, ScoreboardSource
from boxscorefinder.core.types import (
    BoxScoreLink,
    GameInfo,
    LinkType,
    MatchInfo,
    OfficialGame,
    PlayerTeam,
    ProviderType,
    ScoreboardResult,
    SearchQuery,
    SearchResult,
)

__all__ = [
    "BoxScoreLink",
    "GameInfo",
    "LinkType",
    "MatchInfo",
    "OfficialGame",
    "OfficialGameLookup",
    "PlayerLookup",
    "PlayerTeam",
    "ProviderType",
    "ScoreboardResult",
    "ScoreboardSource",
    "SearchQuery",
    "SearchResult",
]
