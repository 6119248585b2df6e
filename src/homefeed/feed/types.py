"""Interfaces between the feed pipeline and its collaborators.

The UI implements FeedProvider and FeedRetriever; GeoLookup and
ClientFactory are supplied to the pipeline and can be swapped in tests.
"""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable

import httpx


@runtime_checkable
class FeedProvider(Protocol):
    """Receives the feed sources, in display order."""

    def add_source(self, title: str) -> None:
        """Called once for each source with a title."""
        ...


@runtime_checkable
class FeedRetriever(Protocol):
    """Receives the entries of one source."""

    def add_feed(self, title: str, description: str, image: str, link: str) -> None:
        """Called once per entry, in the source's stored order."""
        ...


@runtime_checkable
class GeoLookup(Protocol):
    """Looks up the country the process is running in."""

    def get_country(self, timeout: float) -> str:
        """Return an ISO country code, or "" if it could not be determined.

        Args:
            timeout: Maximum seconds to spend on the lookup.
        """
        ...


# (proxy_addr, timeout) -> client. An empty proxy_addr means a direct client.
ClientFactory = Callable[[str, float], httpx.Client]
