"""
Team name matching

Decides whether free text typed by a user ("Lakers", "LAL", "los angeles
lakers") refers to a team listed on a scoreboard. Both sides are normalized
(lowercase, alphanumerics only) and compared with rules ordered from most to
least precise:

1. abbreviation equals the search term
2. search term equals the team nickname
3. search term equals the full name
4. search term is contained in the full name
5. full name is contained in the search term
6. nickname is contained in the search term

Substring rules require at least MIN_SUBSTRING_LENGTH characters so short
fragments ("LA", "NY") only match through an exact abbreviation.
"""

import re

_non_alnum_re = re.compile(r"[^a-z0-9]")

MIN_SUBSTRING_LENGTH = 4

# Nicknames that span two words; checked before falling back to the last word
TWO_WORD_NICKNAMES = (
    "trail blazers",
    "red sox",
    "white sox",
    "blue jays",
    "maple leafs",
    "golden knights",
    "red wings",
    "blue jackets",
)


def normalize_team_name(name: str) -> str:
    """Lowercase and drop every non-alphanumeric character."""
    return _non_alnum_re.sub("", (name or "").lower())


def extract_nickname(display_name: str) -> str:
    """
    Get the nickname part of a team's display name.

    Examples:
        >>> extract_nickname("Portland Trail Blazers")
        'trail blazers'
        >>> extract_nickname("Los Angeles Lakers")
        'lakers'
    """
    lowered = " ".join((display_name or "").lower().split())
    for nickname in TWO_WORD_NICKNAMES:
        if lowered.endswith(nickname):
            return nickname
    words = lowered.split(" ")
    return words[-1] if words else ""


def team_matches(search_term: str, full_name: str, abbreviation: str, display_name: str) -> bool:
    """
    Check whether a search term refers to the given team.

    Args:
        search_term: Free text entered by the user
        full_name: Team's full name from the scoreboard
        abbreviation: Scoreboard abbreviation (e.g. 'LAL')
        display_name: Team's display name (usually the same as full_name)

    Returns:
        True on the first rule that matches
    """
    search = normalize_team_name(search_term)
    if not search:
        return False

    abbr = normalize_team_name(abbreviation)
    if abbr and abbr == search:
        return True

    nickname = normalize_team_name(extract_nickname(display_name or full_name))
    if nickname and search == nickname:
        return True

    names = {n for n in (normalize_team_name(full_name), normalize_team_name(display_name)) if n}
    if search in names:
        return True

    long_enough = len(search) >= MIN_SUBSTRING_LENGTH
    if long_enough and any(search in name for name in names):
        return True
    if long_enough and any(name in search for name in names):
        return True

    return len(nickname) >= MIN_SUBSTRING_LENGTH and nickname in search
