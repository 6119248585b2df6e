"""Logging setup for the feed pipeline."""

from __future__ import annotations

import logging
from pathlib import Path

from homefeed.constants import LOGGER_NAME

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


def setup_logging(log_dir: Path, level: int = logging.DEBUG) -> logging.Logger:
    """Route the feed logger to log_dir/feed.log.

    Safe to call more than once; existing handlers are replaced.

    Returns:
        The configured feed logger.
    """
    log_dir.mkdir(parents=True, exist_ok=True)

    # Keep HTTP client chatter out of the feed log
    for logger_name in ["httpx", "httpcore"]:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    feed_logger = logging.getLogger(LOGGER_NAME)
    feed_logger.setLevel(level)
    feed_logger.propagate = False
    for handler in feed_logger.handlers:
        handler.close()
    feed_logger.handlers = []

    file_handler = logging.FileHandler(log_dir / "feed.log", encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    feed_logger.addHandler(file_handler)

    return feed_logger
