"""Exceptions raised inside the feed pipeline.

FeedService catches all of these, clears the current feed and reports the
failure through FeedResult, so callers never see them directly.
"""


class FeedError(Exception):
    """Base exception for feed pipeline errors."""

    pass


class FeedRequestError(FeedError):
    """Building the client or performing the request failed."""

    pass


class FeedDecodeError(FeedError):
    """The response body was not readable gzip."""

    pass


class FeedParseError(FeedError):
    """The decompressed payload was not a valid feed document."""

    pass
