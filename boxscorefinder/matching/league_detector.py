"""
League detection from free-text team names

Maps "Lakers", "boston red sox", "Toronto Maple Leafs" to the leagues worth
querying. Uses static keyword tables, one per league: a league is a candidate
when any of its keywords appears in the lowercased text. Names shared across
leagues ("kings", "rangers", "cardinals", "jets", "panthers", "giants")
produce several candidates, in LEAGUE_ORDER.

The returned order is the order the game resolver queries scoreboards, so it
decides which league wins an ambiguous name.
"""

import logging

logger = logging.getLogger(__name__)

LEAGUE_ORDER = ("nba", "mlb", "nfl", "nhl", "mls")

# Returned when nothing matches. MLS is not part of the default set.
DEFAULT_LEAGUES = ("nba", "mlb", "nfl", "nhl")

LEAGUE_TEAM_KEYWORDS: dict[str, frozenset[str]] = {
    "nba": frozenset({
        "lakers", "warriors", "celtics", "heat", "bulls", "knicks", "nets",
        "76ers", "suns", "mavericks", "bucks", "clippers", "nuggets",
        "grizzlies", "pelicans", "hawks", "hornets", "magic", "pistons",
        "pacers", "cavaliers", "raptors", "wizards", "timberwolves", "thunder",
        "blazers", "jazz", "kings", "spurs", "rockets",
    }),
    "mlb": frozenset({
        "yankees", "dodgers", "red sox", "cubs", "giants", "astros", "braves",
        "phillies", "mets", "cardinals", "padres", "mariners", "rangers",
        "twins", "guardians", "orioles", "rays", "blue jays", "white sox",
        "royals", "tigers", "angels", "athletics", "brewers", "reds",
        "pirates", "rockies", "diamondbacks", "nationals", "marlins",
    }),
    "nfl": frozenset({
        "cowboys", "patriots", "packers", "chiefs", "49ers", "eagles", "bills",
        "dolphins", "jets", "giants", "ravens", "steelers", "bengals",
        "browns", "titans", "colts", "texans", "jaguars", "broncos", "raiders",
        "chargers", "seahawks", "rams", "cardinals", "falcons", "panthers",
        "saints", "buccaneers", "bears", "lions", "vikings", "commanders",
    }),
    "nhl": frozenset({
        "maple leafs", "canadiens", "bruins", "rangers", "blackhawks",
        "penguins", "golden knights", "avalanche", "oilers", "flames",
        "canucks", "kraken", "kings", "sharks", "ducks", "coyotes", "stars",
        "blues", "wild", "predators", "jets", "lightning", "panthers",
        "hurricanes", "capitals", "flyers", "devils", "islanders", "sabres",
        "senators", "red wings", "blue jackets", "mammoth",
    }),
    "mls": frozenset({
        "galaxy", "inter miami", "atlanta united", "sounders", "lafc",
        "timbers", "whitecaps", "earthquakes", "fc dallas", "dynamo",
        "sporting kc", "minnesota united", "real salt lake", "colorado rapids",
        "austin fc", "nashville sc", "charlotte fc", "dc united",
        "new york red bulls", "nycfc", "new england revolution",
        "philadelphia union", "columbus crew", "chicago fire", "cf montreal",
        "toronto fc", "orlando city", "cincinnati", "st. louis city",
        "san diego fc",
    }),
}


def detect_leagues(search_term: str) -> list[str]:
    """
    Get candidate leagues for a team or player name.

    Args:
        search_term: Free text (team name, nickname, city + nickname)

    Returns:
        Non-empty list of league codes, most likely first

    Examples:
        >>> detect_leagues("Los Angeles Lakers")
        ['nba']
        >>> detect_leagues("Kings")
        ['nba', 'nhl']
        >>> detect_leagues("Unknown Rollerball Club")
        ['nba', 'mlb', 'nfl', 'nhl']
    """
    text = (search_term or "").lower()
    leagues = [
        league for league in LEAGUE_ORDER
        if any(keyword in text for keyword in LEAGUE_TEAM_KEYWORDS[league])
    ]

    if not leagues:
        logger.debug(f"No league keywords in '{search_term}', using default leagues")
        return list(DEFAULT_LEAGUES)

    return leagues
