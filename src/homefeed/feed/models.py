"""Pydantic models for the published feed document.

Field names are pythonic; the wire keys are kept as aliases so a document
can be validated straight from the downloaded JSON.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, JsonValue, model_validator


class WireModel(BaseModel):
    """Base for models decoded from the feed JSON."""

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        """Decode a JSON null the same way as a missing key."""
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class Source(WireModel):
    """A feed authority, e.g. BBC, NYT or Reddit."""

    feed_url: str = Field(default="", alias="feedUrl")
    title: str = ""
    link: str = ""
    exclude_from_all: bool = Field(default=False, alias="excludeFromAll")
    entry_indices: list[int] = Field(default_factory=list, alias="entries")


class FeedEntry(WireModel):
    """A single article in the feed."""

    title: str = ""
    link: str = ""
    image: str = ""
    meta: dict[str, JsonValue] = Field(default_factory=dict)
    content: str = Field(default="", alias="contentSnippetText")
    source_key: str = Field(default="", alias="source")

    # Filled in by normalize_feed, never read from the wire
    description: str = Field(default="", exclude=True)


class FeedDocument(WireModel):
    """The full document published at the feed endpoint."""

    sources: dict[str, Source] = Field(default_factory=dict, alias="feeds")
    entries: list[FeedEntry] = Field(default_factory=list)
    sorted_source_names: list[str] = Field(default_factory=list, alias="sorted_feeds")

    # Display label -> entries, rebuilt by normalize_feed on every fetch
    items_by_source: dict[str, list[FeedEntry]] = Field(default_factory=dict, exclude=True)

    @property
    def entry_count(self) -> int:
        """Total entries across all sources."""
        return len(self.entries)

    def get_source(self, key: str) -> Source | None:
        """Get a source by its key."""
        return self.sources.get(key)
