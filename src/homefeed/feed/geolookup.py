"""Country lookup over HTTP."""

from __future__ import annotations

import logging

import httpx

from homefeed.constants import DEFAULT_GEO_LOOKUP_URL, LOGGER_NAME
from homefeed.feed.fetcher import create_http_client
from homefeed.feed.types import ClientFactory

logger = logging.getLogger(LOGGER_NAME)


class HttpGeoLookup:
    """Looks up the caller's country from a plain-text IP geolocation service.

    The service must answer a GET with the two-letter ISO country code as
    the whole body (e.g. ``IR``).

    Usage:
        lookup = HttpGeoLookup()
        country = lookup.get_country(timeout=10)  # "" on failure
    """

    def __init__(
        self,
        url: str = DEFAULT_GEO_LOOKUP_URL,
        client_factory: ClientFactory = create_http_client,
        proxy_addr: str = "",
    ):
        self.url = url
        self.client_factory = client_factory
        self.proxy_addr = proxy_addr

    def get_country(self, timeout: float) -> str:
        try:
            with self.client_factory(self.proxy_addr, timeout) as client:
                response = client.get(self.url)
                response.raise_for_status()
                body = response.text.strip()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.debug(f"GEO_LOOKUP_ERROR | url={self.url} | {e}")
            return ""

        if len(body) != 2 or not body.isalpha():
            logger.debug(f"GEO_LOOKUP_ERROR | url={self.url} | unexpected body {body[:40]!r}")
            return ""

        return body.upper()
