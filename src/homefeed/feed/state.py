"""Holder for the most recently published feed."""

from __future__ import annotations

import threading

from homefeed.feed.models import FeedDocument


class FeedState:
    """Thread-safe reference to the current FeedDocument.

    Only fully normalized documents are published, and the reference is
    swapped under a lock held for the assignment alone, so readers see
    either the old document, the new one, or None.
    """

    def __init__(self, document: FeedDocument | None = None):
        self._lock = threading.Lock()
        self._document = document

    def get(self) -> FeedDocument | None:
        with self._lock:
            return self._document

    def publish(self, document: FeedDocument) -> None:
        with self._lock:
            self._document = document

    def clear(self) -> None:
        with self._lock:
            self._document = None

    @property
    def has_feed(self) -> bool:
        return self.get() is not None
