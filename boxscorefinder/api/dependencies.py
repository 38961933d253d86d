"""FastAPI dependencies."""

import logging
import threading

from boxscorefinder.services import SearchService, create_default_service

logger = logging.getLogger(__name__)

# Singleton instance - created on first request, closed on shutdown.
# Sync routes run in the threadpool, so creation is serialized.
_search_service: SearchService | None = None
_search_service_lock = threading.Lock()


def get_search_service() -> SearchService:
    """Get the shared search service (tests override this dependency)."""
    global _search_service
    with _search_service_lock:
        if _search_service is None:
            _search_service = create_default_service()
            logger.debug("Search service created")
        return _search_service


def close_search_service() -> None:
    """Close provider connections held by the search service."""
    global _search_service
    with _search_service_lock:
        if _search_service is not None:
            _search_service.close()
            _search_service = None
