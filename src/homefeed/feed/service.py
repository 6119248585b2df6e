"""Feed service: runs the fetch pipeline and answers queries about its result.

Usage:
    service = FeedService(settings=load_feed_settings())

    result = service.get_feed(all_label="All", provider=ui)
    if not result.success:
        show_offline_banner(result.error)

    service.feed_by_name("All", retriever=ui)
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass, field

from homefeed.config import FeedSettings
from homefeed.constants import LOGGER_NAME
from homefeed.feed.endpoint import get_feed_url
from homefeed.feed.errors import FeedError
from homefeed.feed.fetcher import FeedFetcher
from homefeed.feed.geolookup import HttpGeoLookup
from homefeed.feed.locale import resolve_locale
from homefeed.feed.models import FeedDocument, FeedEntry
from homefeed.feed.normalizer import normalize_feed, parse_feed_document
from homefeed.feed.state import FeedState
from homefeed.feed.types import FeedProvider, FeedRetriever, GeoLookup

logger = logging.getLogger(LOGGER_NAME)


@dataclass
class FeedResult:
    """Outcome of one FeedService.get_feed() run."""

    success: bool
    url: str = ""
    locale: str = ""
    document: FeedDocument | None = None
    error: str | None = None
    warnings: list[str] = field(default_factory=list)

    @property
    def entry_count(self) -> int:
        """Entries in the fetched document, 0 on failure."""
        return self.document.entry_count if self.document else 0


class FeedService:
    """Owns the current feed and the pipeline that replaces it.

    A run either publishes a fully normalized document or clears the
    current one; a failed fetch never leaves the previous feed in place.
    """

    def __init__(
        self,
        settings: FeedSettings | None = None,
        geo_lookup: GeoLookup | None = None,
        fetcher: FeedFetcher | None = None,
        state: FeedState | None = None,
    ):
        """Initialize the service.

        Args:
            settings: Pipeline settings (defaults + environment if None).
            geo_lookup: Country lookup for the locale override. If None, an
                HttpGeoLookup is built from settings unless
                settings.geo_lookup_enabled is False, which skips the lookup.
            fetcher: Downloader (built from settings if None).
            state: Holder for the current document.
        """
        self.settings = settings or FeedSettings()
        if geo_lookup is None and self.settings.geo_lookup_enabled:
            geo_lookup = HttpGeoLookup(
                url=self.settings.geo_lookup_url,
                proxy_addr=self.settings.proxy_addr,
            )
        self.geo_lookup = geo_lookup
        self.fetcher = fetcher or FeedFetcher(timeout=self.settings.request_timeout_seconds)
        self.state = state or FeedState()
        self._fetch_lock = threading.Lock()

    # =========================================================================
    # Pipeline
    # =========================================================================

    def get_feed_url(self, default_locale: str | None = None) -> str:
        """Return the feed URL for the user's country or default_locale.

        An empty or missing default_locale uses settings.default_locale.
        """
        return get_feed_url(
            self.settings.feed_endpoint,
            default_locale or self.settings.default_locale,
            self.geo_lookup,
            self.settings.geo_lookup_timeout_seconds,
        )

    def get_feed(
        self,
        locale: str | None = None,
        all_label: str | None = None,
        proxy_addr: str | None = None,
        provider: FeedProvider | None = None,
    ) -> FeedResult:
        """Fetch, normalize and publish the feed for locale.

        Args:
            locale: Requested locale; empty uses settings.default_locale and
                unsupported values fall back to en_US.
            all_label: Localized name of the "all" bucket.
            proxy_addr: Proxy to fetch through; "" for a direct connection.
            provider: Notified of each source, in display order.

        Returns:
            FeedResult; on failure the current feed has been cleared. Errors
            raised by the provider also count as a failed run.
        """
        if not locale:
            locale = self.settings.default_locale
        if all_label is None:
            all_label = self.settings.all_label
        if proxy_addr is None:
            proxy_addr = self.settings.proxy_addr

        with self._fetch_lock:
            start_time = time.time()
            locale = resolve_locale(locale)
            url = self.get_feed_url(locale)

            try:
                contents = self.fetcher.fetch(url, proxy_addr)
                document = parse_feed_document(contents)
            except FeedError as e:
                self.state.clear()
                logger.error(f"FEED_ERROR | url={url} | {e}")
                return FeedResult(success=False, url=url, locale=locale, error=str(e))

            try:
                warnings = normalize_feed(document, all_label, provider)
            except Exception as e:
                self.state.clear()
                error = f"Error processing feed: {e}"
                logger.error(f"FEED_ERROR | url={url} | {error}")
                return FeedResult(success=False, url=url, locale=locale, error=error)

            self.state.publish(document)

            duration_ms = int((time.time() - start_time) * 1000)
            logger.info(
                f"FEED_PUBLISHED | url={url} | entries={document.entry_count} | "
                f"sources={len(document.sources)} | warnings={len(warnings)} | {duration_ms}ms"
            )
            return FeedResult(
                success=True,
                url=url,
                locale=locale,
                document=document,
                warnings=warnings,
            )

    # =========================================================================
    # Accessors
    # =========================================================================

    def entries_for(self, name: str) -> list[FeedEntry]:
        """Entries in the bucket called name, or [] if there is none."""
        document = self.state.get()
        if document is None:
            return []
        return list(document.items_by_source.get(name, []))

    def feed_by_name(self, name: str, retriever: FeedRetriever) -> int:
        """Send every entry of the named bucket to retriever.

        Returns:
            Number of entries delivered.
        """
        entries = self.entries_for(name)
        for entry in entries:
            retriever.add_feed(entry.title, entry.description, entry.image, entry.link)
        return len(entries)

    def num_feed_entries(self) -> int:
        """Total entries in the current feed, 0 when none is loaded."""
        document = self.state.get()
        if document is None:
            logger.debug("FEED_ENTRIES | no feed loaded")
            return 0
        count = document.entry_count
        logger.debug(f"FEED_ENTRIES | {count}")
        return count

    def current_feed(self) -> FeedDocument | None:
        """The published document itself, not a copy."""
        return self.state.get()
