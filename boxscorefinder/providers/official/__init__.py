"""Official league site lookups (secondary lookups).

Adding a league:
1. Create a module with an OfficialSiteLookup subclass
2. Add it to OFFICIAL_LOOKUP_CLASSES
3. Add its URL templates to services/link_builder.py (OFFICIAL_SITES)
"""

import httpx

from boxscorefinder.providers.official.base import OfficialSiteLookup, team_codes
from boxscorefinder.providers.official.mlb import MLBStatsClient
from boxscorefinder.providers.official.nba import NBAStatsClient
from boxscorefinder.providers.official.nhl import NHLScoreClient

OFFICIAL_LOOKUP_CLASSES: tuple[type[OfficialSiteLookup], ...] = (
    NBAStatsClient,
    NHLScoreClient,
    MLBStatsClient,
)


def create_official_lookups(http_client: httpx.Client | None = None) -> dict[str, OfficialSiteLookup]:
    """Build one lookup per supported league, keyed by league code."""
    return {cls.league: cls(http_client=http_client) for cls in OFFICIAL_LOOKUP_CLASSES}


__all__ = [
    "MLBStatsClient",
    "NBAStatsClient",
    "NHLScoreClient",
    "OFFICIAL_LOOKUP_CLASSES",
    "OfficialSiteLookup",
    "create_official_lookups",
    "team_codes",
]
