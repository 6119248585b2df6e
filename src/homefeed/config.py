"""Feed pipeline configuration loading and validation."""

from __future__ import annotations

from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from homefeed.constants import (
    DEFAULT_ALL_LABEL,
    DEFAULT_FEED_ENDPOINT,
    DEFAULT_GEO_LOOKUP_URL,
    DEFAULT_LOCALE,
    GEO_LOOKUP_TIMEOUT_SECONDS,
    REQUEST_TIMEOUT_SECONDS,
)

# Load .env file
load_dotenv()

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "feed.yaml"


class FeedSettings(BaseSettings):
    """Settings for fetching the feed.

    Every field can be set from the environment with a ``HOMEFEED_`` prefix,
    e.g. ``HOMEFEED_PROXY_ADDR=127.0.0.1:8787``.
    """

    model_config = SettingsConfigDict(env_prefix="HOMEFEED_", extra="ignore")

    feed_endpoint: str = DEFAULT_FEED_ENDPOINT
    default_locale: str = DEFAULT_LOCALE
    all_label: str = DEFAULT_ALL_LABEL
    proxy_addr: str = ""
    request_timeout_seconds: float = REQUEST_TIMEOUT_SECONDS
    geo_lookup_timeout_seconds: float = GEO_LOOKUP_TIMEOUT_SECONDS
    geo_lookup_url: str = DEFAULT_GEO_LOOKUP_URL
    geo_lookup_enabled: bool = True

    @field_validator("feed_endpoint")
    @classmethod
    def check_placeholder(cls, v: str) -> str:
        """The template takes exactly one locale."""
        if v.count("%s") != 1:
            raise ValueError(f"feed_endpoint must contain exactly one %s placeholder: {v!r}")
        return v

    @field_validator("request_timeout_seconds", "geo_lookup_timeout_seconds")
    @classmethod
    def check_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("timeouts must be positive")
        return v


def load_feed_settings(config_path: Path | None = None) -> FeedSettings:
    """Load settings from YAML, falling back to the environment and defaults.

    Args:
        config_path: YAML file to read. Defaults to config/feed.yaml at the
            project root.

    Raises:
        ValueError: If the file is not valid YAML or has invalid values.
    """
    path = config_path or DEFAULT_CONFIG_PATH

    if not path.exists():
        return FeedSettings()

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}")

    if not isinstance(data, dict):
        raise ValueError(f"Invalid config structure in {path}: expected a mapping")

    try:
        return FeedSettings(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid config structure in {path}: {e}")
