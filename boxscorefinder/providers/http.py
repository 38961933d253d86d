"""Soft-fail JSON HTTP client shared by all providers.

Every outbound call in a search is optional: a provider that is down, slow,
or returns something unexpected must turn into "no data", never into a failed
search. This base class owns one httpx.Client per provider (connection
pooling only, nothing is cached) and converts every transport, status, and
decoding problem into a logged warning plus None.
"""

import logging
import threading
from collections.abc import Mapping
from typing import Any

import httpx

from boxscorefinder.config import HTTP_TIMEOUT, USER_AGENT

logger = logging.getLogger(__name__)


class JSONHttpClient:
    """Base class for provider clients.

    Args:
        http_client: Pre-built httpx.Client (tests pass one with a
            MockTransport). Created lazily when omitted.
        timeout: Request timeout in seconds
    """

    # Provider name used in log messages
    name = "http"

    # Headers sent with every request from this provider
    default_headers: Mapping[str, str] = {
        "Accept": "application/json",
        "User-Agent": USER_AGENT,
    }

    def __init__(self, http_client: httpx.Client | None = None, timeout: float = HTTP_TIMEOUT):
        self._client = http_client
        self._owns_client = http_client is None
        self._timeout = timeout
        self._lock = threading.Lock()

    def _get_client(self) -> httpx.Client:
        with self._lock:
            if self._client is None:
                self._client = httpx.Client(
                    timeout=self._timeout,
                    headers=dict(self.default_headers),
                    follow_redirects=True,
                    limits=httpx.Limits(max_connections=10, max_keepalive_connections=5),
                )
            return self._client

    def _get_json(
        self,
        url: str,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> dict | None:
        """GET a URL and return the decoded JSON object.

        Returns None (after logging) on network errors, non-2xx responses,
        bodies that are not JSON, and JSON that is not an object. No retries.
        """
        client = self._get_client()
        request_headers = {**self.default_headers, **(headers or {})}

        try:
            response = client.get(url, params=params, headers=request_headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(f"{self.name} API error: HTTP {e.response.status_code} for {url}")
            return None
        except httpx.HTTPError as e:
            logger.warning(f"{self.name} request failed for {url}: {e}")
            return None

        try:
            data = response.json()
        except ValueError:
            logger.warning(f"{self.name} returned a non-JSON body for {url}")
            return None

        if not isinstance(data, dict):
            logger.warning(f"{self.name} returned {type(data).__name__}, expected a JSON object ({url})")
            return None

        return data

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        with self._lock:
            if self._client is not None and self._owns_client:
                self._client.close()
                self._client = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
