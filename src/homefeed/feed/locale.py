"""Locale resolution for the feed endpoint."""

from __future__ import annotations

import logging

from homefeed.constants import (
    COUNTRY_LOCALES,
    DEFAULT_LOCALE,
    GEO_LOOKUP_TIMEOUT_SECONDS,
    LOGGER_NAME,
    SUPPORTED_LOCALES,
)
from homefeed.feed.types import GeoLookup

logger = logging.getLogger(LOGGER_NAME)


def resolve_locale(locale: str) -> str:
    """Return locale if a feed is published for it, else the default locale."""
    if locale in SUPPORTED_LOCALES:
        return locale
    logger.debug(f"LOCALE_FALLBACK | requested={locale!r} | using={DEFAULT_LOCALE}")
    return DEFAULT_LOCALE


def determine_locale(
    default_locale: str,
    geo_lookup: GeoLookup | None,
    timeout: float = GEO_LOOKUP_TIMEOUT_SECONDS,
) -> str:
    """Pick the feed locale, letting the user's country override English.

    Only countries whose feed differs from the dominant machine language
    (see COUNTRY_LOCALES) override, and those all run mostly en_US, so the
    lookup is skipped for every other locale.

    Args:
        default_locale: Locale to use when the country gives no override.
        geo_lookup: Country lookup; None behaves like a failed lookup.
        timeout: Seconds allowed for the lookup.

    Returns:
        A locale string. Never raises.
    """
    if not default_locale:
        default_locale = DEFAULT_LOCALE

    if default_locale.lower() != DEFAULT_LOCALE.lower():
        return default_locale

    country = ""
    if geo_lookup is not None:
        try:
            country = geo_lookup.get_country(timeout)
        except Exception as e:
            logger.debug(f"GEO_LOOKUP_ERROR | {e}")
            country = ""

    if not country:
        logger.debug("GEO_LOOKUP | could not look up country")
        return default_locale

    return COUNTRY_LOCALES.get(country.upper(), default_locale)
