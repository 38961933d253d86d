"""Name matching - league detection and team matching."""

from boxscorefinder.matching.league_detector import DEFAULT_LEAGUES, detect_leagues
from boxscorefinder.matching.team_matcher import extract_nickname, normalize_team_name, team_matches

__all__ = [
    "DEFAULT_LEAGUES",
    "detect_leagues",
    "extract_nickname",
    "normalize_team_name",
    "team_matches",
]
