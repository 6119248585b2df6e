"""Feed URL construction."""

from __future__ import annotations

import logging

from homefeed.constants import GEO_LOOKUP_TIMEOUT_SECONDS, LOGGER_NAME
from homefeed.feed.locale import determine_locale
from homefeed.feed.types import GeoLookup

logger = logging.getLogger(LOGGER_NAME)


def build_feed_url(template: str, locale: str) -> str:
    """Substitute locale into the endpoint template's single ``%s``."""
    return template % locale


def get_feed_url(
    template: str,
    default_locale: str,
    geo_lookup: GeoLookup | None,
    timeout: float = GEO_LOOKUP_TIMEOUT_SECONDS,
) -> str:
    """Return the feed URL for the user's country, falling back to default_locale."""
    locale = determine_locale(default_locale, geo_lookup, timeout)
    url = build_feed_url(template, locale)
    logger.debug(f"FEED_URL | {url}")
    return url
