"""Parsing and indexing of the downloaded feed document.

normalize_feed turns a freshly parsed FeedDocument into the views the UI
reads:
- a description for every entry
- an "all" bucket of entries from non-excluded sources
- one bucket per source title, in the source's own entry order

Data problems (untitled sources, unknown keys, bad indices) are logged and
returned as warnings; they never stop the document from being published.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from homefeed.constants import LOGGER_NAME
from homefeed.feed.errors import FeedParseError
from homefeed.feed.models import FeedDocument, FeedEntry
from homefeed.feed.types import FeedProvider

logger = logging.getLogger(LOGGER_NAME)


def parse_feed_document(contents: bytes) -> FeedDocument:
    """Validate the decompressed JSON payload into a FeedDocument.

    Raises:
        FeedParseError: Invalid UTF-8, invalid JSON or wrong structure.
    """
    try:
        return FeedDocument.model_validate_json(contents)
    except ValidationError as e:
        raise FeedParseError(f"Error parsing feed: {e}") from e


def derive_description(entry: FeedEntry) -> str:
    """Prefer the trimmed meta description, else the content snippet."""
    description = entry.meta.get("description")
    if isinstance(description, str) and description.strip():
        return description.strip()
    return entry.content


def _build_all_bucket(document: FeedDocument) -> list[FeedEntry]:
    """Entries whose source is known and not excluded, in document order."""
    all_entries = []
    for entry in document.entries:
        source = document.get_source(entry.source_key)
        if source is not None and not source.exclude_from_all:
            all_entries.append(entry)
    return all_entries


def _announce_sources(document: FeedDocument, provider: FeedProvider | None) -> list[str]:
    """Send each titled source to the provider in display order."""
    warnings = []
    for key in document.sorted_source_names:
        source = document.get_source(key)
        if source is None:
            warnings.append(f"Couldn't add feed: {key}; missing from map")
        elif not source.title:
            warnings.append(f"Skipping feed source: {key}; missing title")
        else:
            logger.debug(f"FEED_SOURCE | {source.title}")
            if provider is not None:
                provider.add_source(source.title)
    return warnings


def _index_by_source(document: FeedDocument) -> list[str]:
    """Append each source's entries to the bucket named after its title."""
    warnings = []
    entry_count = len(document.entries)
    for key, source in document.sources.items():
        for index in source.entry_indices:
            # Negative indices are data errors, not offsets from the end
            if not 0 <= index < entry_count:
                warnings.append(
                    f"Skipping entry {index} of feed {key}; only {entry_count} entries"
                )
                continue
            document.items_by_source.setdefault(source.title, []).append(
                document.entries[index]
            )
    return warnings


def normalize_feed(
    document: FeedDocument,
    all_label: str,
    provider: FeedProvider | None = None,
) -> list[str]:
    """Derive descriptions and per-source buckets on an unpublished document.

    Args:
        document: Freshly parsed document; mutated in place.
        all_label: Bucket name for the entries of every non-excluded source.
        provider: Notified of each titled source, in sorted order.

    Returns:
        Data-quality warnings, in the order they were found.
    """
    logger.debug(f"FEED_NORMALIZE | entries={len(document.entries)} | sources={len(document.sources)}")

    for entry in document.entries:
        entry.description = derive_description(entry)

    document.items_by_source = {all_label: _build_all_bucket(document)}

    warnings = _announce_sources(document, provider)
    warnings.extend(_index_by_source(document))

    for warning in warnings:
        logger.warning(f"FEED_DATA | {warning}")

    return warnings
