"""Search API endpoints."""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from boxscorefinder.api.dependencies import get_search_service
from boxscorefinder.api.models import (
    ErrorResponse,
    LeagueModel,
    LeaguesResponse,
    PopularTeamModel,
    SearchRequest,
    SearchResponse,
)
from boxscorefinder.services import SearchService
from boxscorefinder.utilities.sports import LEAGUES, POPULAR_TEAMS

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post(
    "/search",
    response_model=SearchResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def search(request: SearchRequest, service: SearchService = Depends(get_search_service)):
    """Generate box score links for a player or team on a date."""
    try:
        result = service.search(request.to_query())
    except Exception:
        logger.exception("Search error")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error"},
        )
    return SearchResponse.from_result(result)


@router.get("/leagues", response_model=LeaguesResponse)
def list_leagues() -> LeaguesResponse:
    """Supported leagues and popular teams for autocomplete."""
    return LeaguesResponse(
        leagues=[LeagueModel(id=lg.id, name=lg.name, sport=lg.sport) for lg in LEAGUES],
        popular_teams=[PopularTeamModel(name=name, league=league) for name, league in POPULAR_TEAMS],
    )
