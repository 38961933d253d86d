"""Data providers.

- espn: primary scoreboard (games by league and date)
- official: league-operated sites (NBA, NHL, MLB game ids)
- tsdb: TheSportsDB (player -> team)
"""

from boxscorefinder.providers.espn import ESPNClient
from boxscorefinder.providers.http import JSONHttpClient
from boxscorefinder.providers.official import OfficialSiteLookup, create_official_lookups
from boxscorefinder.providers.tsdb import TSDBClient

__all__ = [
    "ESPNClient",
    "JSONHttpClient",
    "OfficialSiteLookup",
    "TSDBClient",
    "create_official_lookups",
]
