"""Pydantic models for API requests and responses.

The wire format is camelCase (playerName, linkType, matchInfo); Python code
uses snake_case attribute names via alias generation.
"""

from dataclasses import asdict

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from boxscorefinder.core.types import SearchQuery, SearchResult
from boxscorefinder.utilities.dates import parse_game_date


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Requests
# =============================================================================


class SearchRequest(CamelModel):
    """Search request body. Either name may be omitted, but not both."""

    player_name: str = ""
    team_name: str = Field(default="", validate_default=True)
    game_date: str = Field(default="", validate_default=True)

    @field_validator("team_name")
    @classmethod
    def require_a_name(cls, value: str, info: ValidationInfo) -> str:
        player_name = info.data.get("player_name") or ""
        if not value.strip() and not player_name.strip():
            raise PydanticCustomError("name_required", "Either player name or team name is required")
        return value

    @field_validator("game_date")
    @classmethod
    def require_iso_date(cls, value: str) -> str:
        if not value.strip():
            raise PydanticCustomError("date_required", "Game date is required")
        try:
            parse_game_date(value)
        except ValueError:
            raise PydanticCustomError("date_format", "Game date must be in YYYY-MM-DD format") from None
        return value.strip()

    def to_query(self) -> SearchQuery:
        return SearchQuery(
            game_date=self.game_date,
            player_name=self.player_name,
            team_name=self.team_name,
        )


# =============================================================================
# Responses
# =============================================================================


class SearchQueryModel(CamelModel):
    player_name: str
    team_name: str
    game_date: str


class BoxScoreLinkModel(CamelModel):
    id: str
    provider: str
    provider_type: str
    league: str
    url: str
    description: str
    link_type: str


class MatchInfoModel(CamelModel):
    player_name: str
    team_name: str
    game_date: str
    formatted_date: str
    resolved_from_player: bool | None = None


class SearchResponse(CamelModel):
    """Links for a search, best first."""

    query: SearchQueryModel
    links: list[BoxScoreLinkModel]
    match_info: MatchInfoModel

    @classmethod
    def from_result(cls, result: SearchResult) -> "SearchResponse":
        return cls.model_validate(asdict(result))


class LeagueModel(CamelModel):
    id: str
    name: str
    sport: str


class PopularTeamModel(CamelModel):
    name: str
    league: str


class LeaguesResponse(CamelModel):
    """Supported leagues and autocomplete suggestions."""

    leagues: list[LeagueModel]
    popular_teams: list[PopularTeamModel]


class ErrorResponse(BaseModel):
    """Error body for 400 and 500 responses."""

    message: str
    errors: dict[str, list[str]] | None = None
