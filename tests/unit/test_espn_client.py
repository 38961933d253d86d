"""Tests for the ESPN scoreboard client (no network, httpx.MockTransport)."""

import httpx

from boxscorefinder.providers.espn import ESPNClient
from boxscorefinder.providers.espn.client import scoreboard_url
from tests.fakes import espn_event, mock_http_client


def make_client(handler) -> ESPNClient:
    return ESPNClient(http_client=mock_http_client(handler))


def scoreboard_handler(events, seen=None):
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(200, json={"events": events})

    return handler


# =============================================================================
# URL CONSTRUCTION
# =============================================================================


class TestScoreboardUrl:
    """Test scoreboard endpoint construction."""

    def test_nba(self):
        """NBA uses basketball/nba."""
        assert scoreboard_url("nba") == "https://site.api.espn.com/apis/site/v2/sports/basketball/nba/scoreboard"

    def test_mls_uses_espn_league_code(self):
        """MLS maps to soccer/usa.1."""
        assert scoreboard_url("mls").endswith("/soccer/usa.1/scoreboard")

    def test_unknown_league(self):
        """Unsupported leagues have no endpoint."""
        assert scoreboard_url("xfl") is None


# =============================================================================
# PARSING
# =============================================================================


class TestFetchScoreboard:
    """Test scoreboard fetching and event parsing."""

    def test_parses_events(self):
        """Events become GameInfo records with home/away resolved by role."""
        seen = []
        event = espn_event("401585601", home=("Boston Celtics", "BOS"), away=("Los Angeles Lakers", "LAL"))
        client = make_client(scoreboard_handler([event], seen))

        games = client.get_games_by_date("nba", "2024-01-15")

        assert len(games) == 1
        game = games[0]
        assert game.external_game_id == "401585601"
        assert game.home_team == "Boston Celtics"
        assert game.away_team == "Los Angeles Lakers"
        assert game.home_team_abbr == "BOS"
        assert game.away_team_abbr == "LAL"
        assert game.game_date == "2024-01-15"
        assert game.league == "NBA"

        assert seen[0].url.params["dates"] == "20240115"
        assert seen[0].url.path == "/apis/site/v2/sports/basketball/nba/scoreboard"

    def test_competitor_order_does_not_matter(self):
        """Away listed first is still parsed by the homeAway field."""
        event = espn_event("1", home=("Boston Celtics", "BOS"), away=("Los Angeles Lakers", "LAL"))
        competitors = event["competitions"][0]["competitors"]
        competitors.reverse()
        client = make_client(scoreboard_handler([event]))

        game = client.get_games_by_date("nba", "2024-01-15")[0]
        assert game.home_team == "Boston Celtics"

    def test_mls_request_path(self):
        """MLS scoreboards are requested from soccer/usa.1."""
        seen = []
        event = espn_event("700", home=("LA Galaxy", "LA"), away=("Inter Miami CF", "MIA"))
        client = make_client(scoreboard_handler([event], seen))

        games = client.get_games_by_date("mls", "2024-03-02")

        assert seen[0].url.path == "/apis/site/v2/sports/soccer/usa.1/scoreboard"
        assert games[0].league == "MLS"

    def test_skips_incomplete_events(self):
        """Events missing a side, abbreviation or competitions are dropped."""
        good = espn_event("1", home=("Boston Celtics", "BOS"), away=("Los Angeles Lakers", "LAL"))
        no_away = espn_event("2", home=("Miami Heat", "MIA"), away=("Chicago Bulls", "CHI"))
        no_away["competitions"][0]["competitors"] = no_away["competitions"][0]["competitors"][:1]
        no_abbr = espn_event("3", home=("Denver Nuggets", "DEN"), away=("Utah Jazz", "UTAH"))
        no_abbr["competitions"][0]["competitors"][0]["team"]["abbreviation"] = ""
        no_competitions = {"id": "4", "competitions": []}
        malformed = {"id": "5", "competitions": ["not a dict"]}

        client = make_client(scoreboard_handler([no_away, good, no_abbr, no_competitions, malformed]))

        games = client.get_games_by_date("nba", "2024-01-15")
        assert [g.external_game_id for g in games] == ["1"]

    def test_competitions_not_a_list(self):
        """A competitions object instead of a list skips the event."""
        good = espn_event("1", home=("Boston Celtics", "BOS"), away=("Los Angeles Lakers", "LAL"))
        client = make_client(scoreboard_handler([{"id": "9", "competitions": {"x": 1}}, good]))

        games = client.get_games_by_date("nba", "2024-01-15")
        assert [g.external_game_id for g in games] == ["1"]

    def test_non_string_team_fields(self):
        """Events whose names or abbreviations are not strings are skipped."""
        bad_name = espn_event("2", home=("Miami Heat", "MIA"), away=("Chicago Bulls", "CHI"))
        bad_name["competitions"][0]["competitors"][0]["team"]["displayName"] = 5
        bad_abbr = espn_event("3", home=("Denver Nuggets", "DEN"), away=("Utah Jazz", "UTAH"))
        bad_abbr["competitions"][0]["competitors"][1]["team"]["abbreviation"] = ["X"]
        client = make_client(scoreboard_handler([bad_name, bad_abbr]))

        assert client.get_games_by_date("nba", "2024-01-15") == []

    def test_no_events_is_empty_success(self):
        """A day without games is not an error."""
        client = make_client(lambda request: httpx.Response(200, json={"leagues": []}))

        result = client.fetch_scoreboard("nba", "2024-07-04")
        assert result.ok
        assert result.games == ()


# =============================================================================
# FAILURES
# =============================================================================


class TestFetchScoreboardFailures:
    """Test that every failure becomes an empty result."""

    def test_http_error_status(self):
        """Non-2xx responses yield no games."""
        client = make_client(lambda request: httpx.Response(500, text="boom"))

        result = client.fetch_scoreboard("nba", "2024-01-15")
        assert not result.ok
        assert result.games == ()
        assert client.get_games_by_date("nba", "2024-01-15") == []

    def test_network_error(self):
        """Transport errors yield no games."""

        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = make_client(handler)
        assert client.get_games_by_date("nba", "2024-01-15") == []

    def test_non_json_body(self):
        """HTML error pages yield no games."""
        client = make_client(lambda request: httpx.Response(200, text="<html>maintenance</html>"))
        assert client.get_games_by_date("nba", "2024-01-15") == []

    def test_json_array_body(self):
        """A JSON array instead of an object yields no games."""
        client = make_client(lambda request: httpx.Response(200, json=[1, 2, 3]))
        assert client.get_games_by_date("nba", "2024-01-15") == []

    def test_unsupported_league_makes_no_request(self):
        """Unknown leagues fail before any HTTP call."""
        seen = []
        client = make_client(scoreboard_handler([], seen))

        result = client.fetch_scoreboard("xfl", "2024-01-15")
        assert result.error == "unsupported league 'xfl'"
        assert seen == []

    def test_invalid_date_makes_no_request(self):
        """Unparseable dates fail before any HTTP call."""
        seen = []
        client = make_client(scoreboard_handler([], seen))

        result = client.fetch_scoreboard("nba", "01/15/2024")
        assert result.error == "invalid date"
        assert seen == []
