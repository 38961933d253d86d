"""Integration tests for API endpoints.

Tests the health, search and leagues endpoints using FastAPI TestClient.
The search service is replaced with one wired to in-memory fakes, so no
request leaves the process.
"""

import pytest
from fastapi.testclient import TestClient

from boxscorefinder.api.app import create_app
from boxscorefinder.api.dependencies import get_search_service
from boxscorefinder.config import VERSION
from boxscorefinder.core.types import PlayerTeam
from boxscorefinder.services import GameResolver, SearchService
from tests.fakes import FakeOfficialLookup, FakePlayerLookup, FakeScoreboard, make_game


class ExplodingService:
    def search(self, query):
        raise RuntimeError("scoreboard exploded")


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    """Test client backed by a fake Lakers @ Celtics scoreboard."""
    scoreboard = FakeScoreboard({"nba": [make_game()]})
    players = FakePlayerLookup({
        "LeBron James": PlayerTeam(player_name="LeBron James", team_name="Los Angeles Lakers", league="nba"),
    })
    service = SearchService(GameResolver(scoreboard, {"nba": FakeOfficialLookup("nba")}), player_lookup=players)
    app.dependency_overrides[get_search_service] = lambda: service

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


# =============================================================================
# HEALTH CHECK
# =============================================================================


class TestHealthEndpoint:
    """Test health check endpoint."""

    def test_health_check(self, client):
        """Health endpoint returns healthy."""
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == VERSION


# =============================================================================
# SEARCH ENDPOINT
# =============================================================================


class TestSearchEndpoint:
    """Test POST /api/search."""

    def test_team_search(self, client):
        """A team search returns links and match info in camelCase."""
        response = client.post("/api/search", json={"teamName": "Lakers", "gameDate": "2024-01-15"})
        assert response.status_code == 200
        data = response.json()

        assert data["query"] == {"playerName": "", "teamName": "Lakers", "gameDate": "2024-01-15"}
        assert data["matchInfo"]["formattedDate"] == "Monday, January 15, 2024"
        assert data["matchInfo"]["teamName"] == "Lakers"
        assert "resolvedFromPlayer" not in data["matchInfo"]

        first = data["links"][0]
        assert set(first) == {"id", "provider", "providerType", "league", "url", "description", "linkType"}
        assert first["linkType"] == "direct"
        assert first["url"] == "https://www.espn.com/nba/boxscore/_/gameId/401585601"
        assert [link["provider"] for link in data["links"]].count("SofaScore") == 1

    def test_player_search(self, client):
        """A player-only search reports the resolved team."""
        response = client.post("/api/search", json={"playerName": "LeBron James", "gameDate": "2024-01-15"})
        assert response.status_code == 200
        match_info = response.json()["matchInfo"]

        assert match_info["resolvedFromPlayer"] is True
        assert match_info["teamName"] == "Los Angeles Lakers (from LeBron James)"
        assert match_info["playerName"] == "LeBron James"

    def test_no_game_found(self, client):
        """A day without the team's game returns search links only."""
        response = client.post("/api/search", json={"teamName": "Lakers", "gameDate": "2024-01-16"})
        assert response.status_code == 200
        links = response.json()["links"]

        assert [link["provider"] for link in links] == ["ESPN (Search)", "Google Search"]
        assert all(link["linkType"] == "search" for link in links)

    def test_team_not_playing(self, client):
        """A team absent from the day's scoreboard returns search links only."""
        response = client.post("/api/search", json={"teamName": "Knicks", "gameDate": "2024-01-15"})
        assert response.status_code == 200
        links = response.json()["links"]

        assert links
        assert all(link["linkType"] == "search" for link in links)

    def test_snake_case_body_accepted(self, client):
        """Field names are also accepted in snake_case."""
        response = client.post("/api/search", json={"team_name": "Lakers", "game_date": "2024-01-15"})
        assert response.status_code == 200

    def test_missing_names(self, client):
        """Blank player and team names are rejected."""
        response = client.post(
            "/api/search", json={"playerName": "  ", "teamName": "", "gameDate": "2024-01-15"}
        )
        assert response.status_code == 400
        data = response.json()

        assert data["message"] == "Invalid search query"
        assert data["errors"]["teamName"] == ["Either player name or team name is required"]

    def test_names_omitted(self, client):
        """Omitting both names reports the error under teamName."""
        response = client.post("/api/search", json={"gameDate": "2024-01-15"})
        assert response.status_code == 400
        errors = response.json()["errors"]

        assert errors == {"teamName": ["Either player name or team name is required"]}

    def test_missing_date(self, client):
        """A missing game date is rejected."""
        response = client.post("/api/search", json={"teamName": "Lakers"})
        assert response.status_code == 400
        assert response.json()["errors"]["gameDate"] == ["Game date is required"]

    @pytest.mark.parametrize("game_date", ["01/15/2024", "20240115", "2024W031", "2024-1-5"])
    def test_bad_date_format(self, client, game_date):
        """Non-ISO and compact ISO dates are rejected."""
        response = client.post("/api/search", json={"teamName": "Lakers", "gameDate": game_date})
        assert response.status_code == 400
        assert response.json()["errors"]["gameDate"] == ["Game date must be in YYYY-MM-DD format"]

    def test_all_errors_reported(self, client):
        """Name and date errors are reported together."""
        response = client.post("/api/search", json={})
        assert response.status_code == 400
        assert set(response.json()["errors"]) == {"teamName", "gameDate"}

    def test_internal_error(self, app, client):
        """Unexpected failures return a generic 500."""
        app.dependency_overrides[get_search_service] = lambda: ExplodingService()

        response = client.post("/api/search", json={"teamName": "Lakers", "gameDate": "2024-01-15"})
        assert response.status_code == 500
        assert response.json() == {"message": "Internal server error"}


# =============================================================================
# LEAGUES ENDPOINT
# =============================================================================


class TestLeaguesEndpoint:
    """Test GET /api/leagues."""

    def test_leagues(self, client):
        """Supported leagues are listed in detection order."""
        response = client.get("/api/leagues")
        assert response.status_code == 200
        data = response.json()

        assert [league["id"] for league in data["leagues"]] == ["nba", "mlb", "nfl", "nhl", "mls"]
        assert data["leagues"][4] == {"id": "mls", "name": "MLS", "sport": "soccer"}

    def test_popular_teams(self, client):
        """Popular teams come with their league."""
        data = client.get("/api/leagues").json()

        assert {"name": "Los Angeles Lakers", "league": "nba"} in data["popularTeams"]
        assert {team["league"] for team in data["popularTeams"]} <= {"nba", "mlb", "nfl", "nhl", "mls"}
