"""Service layer."""

from boxscorefinder.services.game_resolver import GameResolver, game_matches
from boxscorefinder.services.link_builder import OFFICIAL_SITES, build_links
from boxscorefinder.services.search import SearchService, create_default_service

__all__ = [
    "GameResolver",
    "OFFICIAL_SITES",
    "SearchService",
    "build_links",
    "create_default_service",
    "game_matches",
]
