"""Box score link construction.

Pure string building - no network calls. Given the resolved game (or None)
and optionally the league site's own game id, produce the ordered links
returned to the user:

Game resolved:
    1. official direct link (when the secondary lookup found the game)
    2. ESPN direct links built from the ESPN game id
    3. official "browse by date" + reference-site date links (league has an
       official integration but the secondary lookup failed)
    4. SofaScore search

No game:
    1. one ESPN search per candidate league
    2. one Google search for the whole query

Link ids are "<provider-slug>-<position>", unique within one result.
"""

import re
from dataclasses import dataclass
from urllib.parse import quote

from boxscorefinder.core.types import BoxScoreLink, GameInfo, LinkType, OfficialGame, ProviderType
from boxscorefinder.providers.espn.constants import ESPN_WEB_BASE
from boxscorefinder.utilities.dates import format_short_date, parse_game_date
from boxscorefinder.utilities.sports import is_soccer_league


@dataclass(frozen=True)
class OfficialSite:
    """URL templates for a league with an official-site integration.

    Template fields: {id}, {home}, {away} (team slugs), {date} (ISO),
    {year}, {month}, {day} (zero-padded), {m}, {d} (unpadded).
    """

    provider: str
    direct_url: str
    date_url: str
    reference_provider: str
    reference_date_url: str


OFFICIAL_SITES: dict[str, OfficialSite] = {
    "nba": OfficialSite(
        provider="NBA.com",
        direct_url="https://www.nba.com/game/{away}-vs-{home}-{id}/box-score",
        date_url="https://www.nba.com/games?date={date}",
        reference_provider="Basketball-Reference",
        reference_date_url="https://www.basketball-reference.com/boxscores/?month={m}&day={d}&year={year}",
    ),
    "nhl": OfficialSite(
        provider="NHL.com",
        direct_url="https://www.nhl.com/gamecenter/{away}-vs-{home}/{year}/{month}/{day}/{id}",
        date_url="https://www.nhl.com/scores/{date}",
        reference_provider="Hockey-Reference",
        reference_date_url="https://www.hockey-reference.com/boxscores/?month={m}&day={d}&year={year}",
    ),
    "mlb": OfficialSite(
        provider="MLB.com",
        direct_url="https://www.mlb.com/gameday/{away}-vs-{home}/{year}/{month}/{day}/{id}/final/box-score",
        date_url="https://www.mlb.com/scores/{date}",
        reference_provider="Baseball-Reference",
        reference_date_url="https://www.baseball-reference.com/boxes/?month={m}&day={d}&year={year}",
    ),
}

_slug_re = re.compile(r"[^a-z0-9]+")


def provider_slug(provider: str) -> str:
    """'ESPN (Search)' -> 'espn-search'"""
    return _slug_re.sub("-", provider.lower()).strip("-")


def _url_quote(text: str) -> str:
    return quote(text, safe="")


def _date_fields(date_iso: str) -> dict[str, str]:
    d = parse_game_date(date_iso)
    return {
        "date": d.isoformat(),
        "year": f"{d.year}",
        "month": f"{d.month:02d}",
        "day": f"{d.day:02d}",
        "m": f"{d.month}",
        "d": f"{d.day}",
    }


def _link(
    provider: str,
    provider_type: ProviderType,
    league: str,
    url: str,
    description: str,
    link_type: LinkType,
) -> dict:
    return {
        "provider": provider,
        "provider_type": provider_type,
        "league": league,
        "url": url,
        "description": description,
        "link_type": link_type,
    }


def espn_direct_links(game: GameInfo) -> list[dict]:
    """ESPN links keyed by the ESPN game id. Soccer uses match pages."""
    game_id = game.external_game_id
    matchup = f"{game.away_team} @ {game.home_team}"

    if is_soccer_league(game.league):
        base = f"{ESPN_WEB_BASE}/soccer"
        return [
            _link("ESPN Match Stats", "third-party", game.league,
                  f"{base}/match/_/gameId/{game_id}",
                  f"ESPN {game.league} match stats - {matchup}", "direct"),
            _link("ESPN Match Statistics", "third-party", game.league,
                  f"{base}/match/_/gameId/{game_id}/statistics",
                  f"ESPN {game.league} match statistics", "direct"),
            _link("ESPN Commentary", "third-party", game.league,
                  f"{base}/commentary/_/gameId/{game_id}",
                  f"ESPN {game.league} match commentary", "direct"),
        ]

    base = f"{ESPN_WEB_BASE}/{game.league.lower()}"
    return [
        _link("ESPN Box Score", "third-party", game.league,
              f"{base}/boxscore/_/gameId/{game_id}",
              f"ESPN {game.league} box score - {matchup}", "direct"),
        _link("ESPN Game Summary", "third-party", game.league,
              f"{base}/game/_/gameId/{game_id}",
              f"ESPN {game.league} game summary with all stats", "direct"),
        _link("ESPN Play-by-Play", "third-party", game.league,
              f"{base}/playbyplay/_/gameId/{game_id}",
              f"ESPN {game.league} play-by-play details", "direct"),
    ]


def official_direct_link(site: OfficialSite, game: GameInfo, official: OfficialGame) -> dict:
    url = site.direct_url.format(
        id=official.game_id,
        home=official.home_slug,
        away=official.away_slug,
        **_date_fields(official.game_date),
    )
    return _link(site.provider, "official", game.league, url,
                 f"Official {game.league} box score - {game.away_team} @ {game.home_team}", "direct")


def official_date_links(site: OfficialSite, game: GameInfo) -> list[dict]:
    """Lower-confidence links to everything played on the game's date."""
    fields = _date_fields(game.game_date)
    short_date = format_short_date(game.game_date)
    return [
        _link(site.provider, "official", game.league, site.date_url.format(**fields),
              f"Browse all {game.league} games on {short_date}", "search"),
        _link(site.reference_provider, "third-party", game.league, site.reference_date_url.format(**fields),
              f"{site.reference_provider} box scores for {short_date}", "search"),
    ]


def fallback_search_links(
    search_term: str,
    game_date: str,
    leagues: list[str],
    player_name: str = "",
) -> list[dict]:
    """Search links used when no game could be resolved."""
    short_date = format_short_date(game_date)
    links = []

    for league in leagues:
        league_upper = league.upper()
        espn_query = " ".join(p for p in (search_term, short_date, league_upper) if p)
        links.append(_link(
            "ESPN (Search)", "third-party", league_upper,
            f"{ESPN_WEB_BASE}/search/_/q/{_url_quote(espn_query)}",
            f"Search ESPN for {league_upper} box score", "search",
        ))

    player = player_name if player_name and player_name != search_term else ""
    google_query = " ".join(p for p in (search_term, player, short_date, "box score") if p)
    links.append(_link(
        "Google Search", "third-party", leagues[0].upper() if leagues else "ALL",
        f"https://www.google.com/search?q={_url_quote(google_query)}",
        "Search Google for box score results", "search",
    ))
    return links


def assign_ids(links: list[dict]) -> list[BoxScoreLink]:
    return [
        BoxScoreLink(id=f"{provider_slug(link['provider'])}-{index}", **link)
        for index, link in enumerate(links)
    ]


def build_links(
    game: GameInfo | None,
    search_term: str,
    game_date: str,
    leagues: list[str],
    official: OfficialGame | None = None,
    player_name: str = "",
) -> list[BoxScoreLink]:
    """
    Build the ordered links for a search.

    Args:
        game: Resolved scoreboard game, or None
        search_term: Team (or player) text the search was run with
        game_date: Date in YYYY-MM-DD format
        leagues: Candidate leagues (used only when no game was resolved)
        official: League site's own id for the game, when the lookup succeeded
        player_name: Player name from the query, added to the web search

    Returns:
        Links with direct links first
    """
    if game is None:
        return assign_ids(fallback_search_links(search_term, game_date, leagues, player_name))

    site = OFFICIAL_SITES.get(game.league.lower())
    links = []

    if site is not None and official is not None:
        links.append(official_direct_link(site, game, official))

    links.extend(espn_direct_links(game))

    if site is not None and official is None:
        links.extend(official_date_links(site, game))

    links.append(_link(
        "SofaScore", "third-party", game.league,
        f"https://www.sofascore.com/search?q={_url_quote(search_term)}",
        "Search SofaScore for detailed match statistics", "search",
    ))
    return assign_ids(links)
