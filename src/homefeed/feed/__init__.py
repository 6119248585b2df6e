"""Feed retrieval and normalization.

Usage:
    from homefeed.feed import FeedService, HttpGeoLookup

    service = FeedService(geo_lookup=HttpGeoLookup())
    result = service.get_feed("en_US", all_label="All", provider=ui)
    service.feed_by_name("All", retriever=ui)
"""

from .errors import (
    FeedError,
    FeedRequestError,
    FeedDecodeError,
    FeedParseError,
)

from .models import (
    FeedDocument,
    FeedEntry,
    Source,
)

from .types import (
    ClientFactory,
    FeedProvider,
    FeedRetriever,
    GeoLookup,
)

from .locale import determine_locale, resolve_locale
from .endpoint import build_feed_url, get_feed_url
from .fetcher import FeedFetcher, create_http_client
from .geolookup import HttpGeoLookup
from .normalizer import derive_description, normalize_feed, parse_feed_document
from .state import FeedState
from .service import FeedResult, FeedService

__all__ = [
    # Errors
    "FeedError",
    "FeedRequestError",
    "FeedDecodeError",
    "FeedParseError",
    # Models
    "FeedDocument",
    "FeedEntry",
    "Source",
    # Interfaces
    "ClientFactory",
    "FeedProvider",
    "FeedRetriever",
    "GeoLookup",
    # Pipeline
    "determine_locale",
    "resolve_locale",
    "build_feed_url",
    "get_feed_url",
    "FeedFetcher",
    "create_http_client",
    "HttpGeoLookup",
    "derive_description",
    "normalize_feed",
    "parse_feed_document",
    "FeedState",
    "FeedResult",
    "FeedService",
]
