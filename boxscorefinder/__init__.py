"""Box Score Finder - resolve a team or player and a date into box score links."""

from boxscorefinder.config import VERSION

__version__ = VERSION
