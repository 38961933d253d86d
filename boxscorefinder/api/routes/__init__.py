"""API routers."""

from boxscorefinder.api.routes import health, search

__all__ = ["health", "search"]
