"""ESPN provider package."""

from boxscorefinder.providers.espn.client import ESPNClient

__all__ = ["ESPNClient"]
