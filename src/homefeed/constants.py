"""Constants for the home feed pipeline.

This module contains the fixed values the pipeline falls back to when
nothing is configured:
- Feed endpoint template and locales
- Country to locale overrides
- Network timeouts

MODIFICATION GUIDE:
------------------
- SUPPORTED_LOCALES: only add a locale once a feed is published for it
- COUNTRY_LOCALES: countries whose feed differs from the machine language
- *_TIMEOUT_SECONDS: tune for slow or proxied networks
"""

from typing import Final

# =============================================================================
# FEED ENDPOINT
# =============================================================================

DEFAULT_FEED_ENDPOINT: Final[str] = "https://feeds.getiantem.org/%s/feed.json"
"""Where recent content is published, one gzipped document per locale."""

DEFAULT_ALL_LABEL: Final[str] = "all"
"""Bucket label for entries from every non-excluded source."""


# =============================================================================
# LOCALES
# =============================================================================

DEFAULT_LOCALE: Final[str] = "en_US"
"""Locale used whenever the requested one has no feed."""

SUPPORTED_LOCALES: Final[frozenset[str]] = frozenset({
    "en_US",
    "fa_IR",
    "fa",
    "ms_MY",
    "zh_CN",
})
"""Locales with a separately published feed."""

# In Iran and Malaysia English is the most common machine language, so the
# country decides the feed rather than the locale.
COUNTRY_LOCALES: Final[dict[str, str]] = {
    "IR": "fa_IR",
    "MY": "ms_MY",
}
"""Upper-case ISO country code -> feed locale."""


# =============================================================================
# NETWORK
# =============================================================================

GEO_LOOKUP_TIMEOUT_SECONDS: Final[float] = 10.0
"""Upper bound on the country lookup."""

DEFAULT_GEO_LOOKUP_URL: Final[str] = "https://ipapi.co/country/"
"""Returns the caller's ISO country code as plain text."""

REQUEST_TIMEOUT_SECONDS: Final[float] = 30.0
"""Timeout for the single feed request."""

LOGGER_NAME: Final[str] = "feed"
"""Logger shared by all pipeline modules."""
