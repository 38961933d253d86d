"""Sport and league reference data.

Static lookup tables for the supported leagues: display names, the ESPN
sport/league path segments, and popular teams offered for autocomplete.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class League:
    """A supported league."""

    id: str  # lowercase code, e.g. "nba"
    name: str  # display code, e.g. "NBA"
    sport: str  # e.g. "basketball", "soccer"
    espn_league: str  # league segment in ESPN API paths


# Order matters: league detection probes leagues in this order
LEAGUES: tuple[League, ...] = (
    League("nba", "NBA", "basketball", "nba"),
    League("mlb", "MLB", "baseball", "mlb"),
    League("nfl", "NFL", "football", "nfl"),
    League("nhl", "NHL", "hockey", "nhl"),
    League("mls", "MLS", "soccer", "usa.1"),
)

LEAGUES_BY_ID: dict[str, League] = {league.id: league for league in LEAGUES}

# Popular teams for autocomplete suggestions: (team name, league id)
POPULAR_TEAMS: tuple[tuple[str, str], ...] = (
    # NBA
    ("Los Angeles Lakers", "nba"),
    ("Golden State Warriors", "nba"),
    ("Boston Celtics", "nba"),
    ("Miami Heat", "nba"),
    ("Chicago Bulls", "nba"),
    ("New York Knicks", "nba"),
    ("Brooklyn Nets", "nba"),
    ("Philadelphia 76ers", "nba"),
    ("Phoenix Suns", "nba"),
    ("Dallas Mavericks", "nba"),
    # MLB
    ("New York Yankees", "mlb"),
    ("Los Angeles Dodgers", "mlb"),
    ("Boston Red Sox", "mlb"),
    ("Chicago Cubs", "mlb"),
    ("San Francisco Giants", "mlb"),
    ("Houston Astros", "mlb"),
    ("Atlanta Braves", "mlb"),
    ("Philadelphia Phillies", "mlb"),
    # NFL
    ("Dallas Cowboys", "nfl"),
    ("New England Patriots", "nfl"),
    ("Green Bay Packers", "nfl"),
    ("Kansas City Chiefs", "nfl"),
    ("San Francisco 49ers", "nfl"),
    ("Philadelphia Eagles", "nfl"),
    ("Buffalo Bills", "nfl"),
    ("Miami Dolphins", "nfl"),
    # NHL
    ("Toronto Maple Leafs", "nhl"),
    ("Montreal Canadiens", "nhl"),
    ("Boston Bruins", "nhl"),
    ("New York Rangers", "nhl"),
    ("Chicago Blackhawks", "nhl"),
    ("Pittsburgh Penguins", "nhl"),
    ("Vegas Golden Knights", "nhl"),
    # MLS
    ("LA Galaxy", "mls"),
    ("Inter Miami", "mls"),
    ("Atlanta United", "mls"),
    ("Seattle Sounders", "mls"),
    ("LAFC", "mls"),
)


def get_league(league: str) -> League | None:
    """Look up a supported league by code (case-insensitive)."""
    return LEAGUES_BY_ID.get(league.lower())


def is_soccer_league(league: str) -> bool:
    """Check if a league is a soccer league.

    Args:
        league: League code, any case (e.g. 'mls', 'MLS')

    Returns:
        True if the league is soccer
    """
    info = get_league(league)
    return info is not None and info.sport == "soccer"
