"""Tests for the shared HTTP client and the search service singleton."""

import threading
import time
from concurrent.futures import ThreadPoolExecutor

import httpx

from boxscorefinder.api import dependencies
from boxscorefinder.providers.http import JSONHttpClient
from tests.fakes import mock_http_client


class TestJSONHttpClient:
    """Test client ownership and lazy creation."""

    def test_concurrent_first_use_builds_one_client(self):
        """Threads racing on first use share a single httpx.Client."""
        client = JSONHttpClient()
        with ThreadPoolExecutor(max_workers=8) as pool:
            built = list(pool.map(lambda _: client._get_client(), range(32)))

        assert len({id(c) for c in built}) == 1
        client.close()
        assert built[0].is_closed

    def test_injected_client_left_open(self):
        """Clients passed in by the caller are not closed."""
        http = mock_http_client(lambda request: httpx.Response(200, json={}))
        with JSONHttpClient(http_client=http) as client:
            assert client._get_json("https://example.test/x") == {}

        assert not http.is_closed


class TestSearchServiceSingleton:
    """Test the shared search service dependency."""

    def test_concurrent_first_requests_share_one_service(self, monkeypatch):
        """Only one service is created when first requests race."""
        created = []
        start = threading.Event()

        def slow_factory():
            time.sleep(0.01)
            created.append(object())
            return created[-1]

        monkeypatch.setattr(dependencies, "create_default_service", slow_factory)
        monkeypatch.setattr(dependencies, "_search_service", None)

        def first_request(_):
            start.wait()
            return dependencies.get_search_service()

        with ThreadPoolExecutor(max_workers=8) as pool:
            futures = [pool.submit(first_request, i) for i in range(8)]
            start.set()
            services = [f.result() for f in futures]

        assert len(created) == 1
        assert all(s is created[0] for s in services)

    def test_close_resets_singleton(self, monkeypatch):
        """Closing the service lets the next request build a fresh one."""
        closed = []

        class Service:
            def close(self):
                closed.append(self)

        monkeypatch.setattr(dependencies, "create_default_service", Service)
        monkeypatch.setattr(dependencies, "_search_service", None)

        first = dependencies.get_search_service()
        dependencies.close_search_service()

        assert closed == [first]
        assert dependencies.get_search_service() is not first
