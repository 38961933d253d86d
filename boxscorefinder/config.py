"""
Box Score Finder - direct and search links to game box scores
"""
import os

# Application version - single source of truth
# Format: MAJOR.MINOR.PATCH[-branch][+sha]
BASE_VERSION = "1.0.0"


def get_version() -> str:
    """
    Get version string with branch/commit suffix from the build environment

    Returns:
        - "X.Y.Z" on main/master (or when no branch is known)
        - "X.Y.Z-branch+SHA" on other branches when the commit SHA is known
        - "X.Y.Z-branch" on other branches otherwise
    """
    branch = os.environ.get('GIT_BRANCH')
    sha = os.environ.get('GIT_SHA')

    if not branch or branch == 'unknown' or branch in ['main', 'master']:
        return BASE_VERSION
    if sha and sha != 'unknown':
        return f"{BASE_VERSION}-{branch}+{sha}"
    return f"{BASE_VERSION}-{branch}"


VERSION = get_version()

# Application settings
APP_NAME = "Box Score Finder"
APP_DESCRIPTION = "Find box score links for a team or player on a given date"
USER_AGENT = f"BoxScoreFinder/{BASE_VERSION}"

# Server
PORT = int(os.environ.get("PORT", 5000))

# Outbound HTTP (seconds); applies to every provider call
HTTP_TIMEOUT = float(os.environ.get("BOXSCORE_HTTP_TIMEOUT", 10.0))

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
LOG_DIR = os.environ.get("BOXSCORE_LOG_DIR") or None

# TheSportsDB key for player lookups ("123" is the public free key)
TSDB_API_KEY = os.environ.get("TSDB_API_KEY", "123")
