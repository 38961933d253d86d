"""TheSportsDB provider package."""

from boxscorefinder.providers.tsdb.client import TSDBClient

__all__ = ["TSDBClient"]
