"""Shared test fixtures and configuration.

Provides a sample feed payload, gzip helpers and httpx clients backed by
MockTransport so no test touches the network.
"""

from __future__ import annotations

import copy
import gzip
import json
from typing import Any, Callable

import httpx
import pytest

from homefeed.config import FeedSettings


SAMPLE_PAYLOAD: dict[str, Any] = {
    "feeds": {
        "bbc": {
            "feedUrl": "https://bbc.example/rss",
            "title": "BBC",
            "link": "https://bbc.example",
            "excludeFromAll": False,
            "entries": [0, 2],
        },
        "reddit": {
            "feedUrl": "https://reddit.example/rss",
            "title": "Reddit",
            "link": "https://reddit.example",
            "excludeFromAll": True,
            "entries": [1],
        },
    },
    "entries": [
        {
            "title": "First",
            "link": "https://bbc.example/1",
            "image": "https://bbc.example/1.jpg",
            "meta": {"description": "  Meta description  "},
            "contentSnippetText": "first snippet",
            "source": "bbc",
        },
        {
            "title": "Second",
            "link": "https://reddit.example/2",
            "image": "",
            "meta": {},
            "contentSnippetText": "second snippet",
            "source": "reddit",
        },
        {
            "title": "Third",
            "link": "https://bbc.example/3",
            "image": "https://bbc.example/3.jpg",
            "meta": {"description": "   "},
            "contentSnippetText": "third snippet",
            "source": "bbc",
        },
    ],
    "sorted_feeds": ["bbc", "reddit"],
}


def gzip_json(payload: Any) -> bytes:
    """Serialize payload as gzipped UTF-8 JSON."""
    return gzip.compress(json.dumps(payload).encode("utf-8"))


def streamed_response(status_code: int, body: bytes = b"", headers: dict | None = None) -> httpx.Response:
    """Response whose body is still unread, the way it arrives from a server.

    Passing bytes straight to httpx.Response reads the body up front, which
    leaves nothing for iter_raw().
    """
    return httpx.Response(status_code, headers=headers, content=iter([body]))


@pytest.fixture
def sample_payload() -> dict[str, Any]:
    """A fresh copy of the sample feed payload."""
    return copy.deepcopy(SAMPLE_PAYLOAD)


@pytest.fixture
def settings() -> FeedSettings:
    """Settings pointing at a test endpoint, with no network country lookup."""
    return FeedSettings(
        feed_endpoint="https://example.org/%s/feed.json",
        default_locale="en_US",
        all_label="all",
        proxy_addr="",
        request_timeout_seconds=5,
        geo_lookup_timeout_seconds=1,
        geo_lookup_url="https://geo.example/country/",
        geo_lookup_enabled=False,
    )


class RecordingClientFactory:
    """ClientFactory returning MockTransport clients and recording calls."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.handler = handler
        self.calls: list[tuple[str, float]] = []
        self.requests: list[httpx.Request] = []
        self.clients: list[httpx.Client] = []

    def __call__(self, proxy_addr: str, timeout: float) -> httpx.Client:
        self.calls.append((proxy_addr, timeout))

        def _handle(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return self.handler(request)

        client = httpx.Client(transport=httpx.MockTransport(_handle), timeout=timeout)
        self.clients.append(client)
        return client


@pytest.fixture
def make_client_factory() -> Callable[..., RecordingClientFactory]:
    """Build a RecordingClientFactory from a request handler."""
    return RecordingClientFactory


@pytest.fixture
def gzip_response_factory(sample_payload) -> RecordingClientFactory:
    """Factory whose server answers every request with the gzipped sample feed."""
    body = gzip_json(sample_payload)
    return RecordingClientFactory(lambda request: streamed_response(200, body))


class RecordingProvider:
    """FeedProvider that remembers the sources it was given."""

    def __init__(self):
        self.sources: list[str] = []

    def add_source(self, title: str) -> None:
        self.sources.append(title)


class RecordingRetriever:
    """FeedRetriever that remembers the entries it was given."""

    def __init__(self):
        self.feeds: list[tuple[str, str, str, str]] = []

    def add_feed(self, title: str, description: str, image: str, link: str) -> None:
        self.feeds.append((title, description, image, link))


class StubGeoLookup:
    """GeoLookup returning a fixed country."""

    def __init__(self, country: str = ""):
        self.country = country
        self.timeouts: list[float] = []

    def get_country(self, timeout: float) -> str:
        self.timeouts.append(timeout)
        return self.country


@pytest.fixture
def provider() -> RecordingProvider:
    return RecordingProvider()


@pytest.fixture
def retriever() -> RecordingRetriever:
    return RecordingRetriever()


@pytest.fixture
def gzip_body() -> Callable[[Any], bytes]:
    """The gzip_json helper, for tests that build their own payloads."""
    return gzip_json


@pytest.fixture
def stub_geo() -> type[StubGeoLookup]:
    """The StubGeoLookup class; call it with a country code."""
    return StubGeoLookup


@pytest.fixture
def respond() -> Callable[..., httpx.Response]:
    """The streamed_response helper, for handlers built inside tests."""
    return streamed_response
