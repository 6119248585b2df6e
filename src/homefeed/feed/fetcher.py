"""Feed download and decompression."""

from __future__ import annotations

import gzip
import logging
import time
import zlib

import httpx

from homefeed.constants import LOGGER_NAME, REQUEST_TIMEOUT_SECONDS
from homefeed.feed.errors import FeedDecodeError, FeedRequestError
from homefeed.feed.types import ClientFactory

logger = logging.getLogger(LOGGER_NAME)


def create_http_client(proxy_addr: str = "", timeout: float = REQUEST_TIMEOUT_SECONDS) -> httpx.Client:
    """Create an HTTP client, routed through proxy_addr when one is given.

    Args:
        proxy_addr: ``host:port`` or a full proxy URL. Empty for a direct client.
        timeout: Request timeout in seconds.

    Raises:
        httpx.InvalidURL, ValueError: If the proxy address is unusable.
    """
    if not proxy_addr:
        return httpx.Client(timeout=timeout)

    proxy = proxy_addr if "://" in proxy_addr else f"http://{proxy_addr}"
    return httpx.Client(proxy=proxy, timeout=timeout)


class FeedFetcher:
    """Downloads the gzipped feed document in a single attempt.

    The body is gunzipped here rather than by httpx, so a response that is
    not gzip fails even when the server omits Content-Encoding.

    Usage:
        fetcher = FeedFetcher(timeout=30.0)
        raw_json = fetcher.fetch("https://example.org/en_US/feed.json")

        # Through a local proxy
        raw_json = fetcher.fetch(url, proxy_addr="127.0.0.1:8787")
    """

    def __init__(
        self,
        client_factory: ClientFactory = create_http_client,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
    ):
        """Initialize the fetcher.

        Args:
            client_factory: Builds the client for a proxy address ("" = direct).
            timeout: Request timeout in seconds.
        """
        self.client_factory = client_factory
        self.timeout = timeout

    def fetch(self, url: str, proxy_addr: str = "") -> bytes:
        """Fetch url and return the decompressed body.

        Raises:
            FeedRequestError: Client construction, transport or HTTP status failure.
            FeedDecodeError: The body was not valid gzip.
        """
        start_time = time.time()

        try:
            client = self.client_factory(proxy_addr, self.timeout)
        except Exception as e:
            raise FeedRequestError(f"Error creating client: {e}") from e

        with client:
            try:
                with client.stream("GET", url, headers={"Accept-Encoding": "gzip"}) as response:
                    response.raise_for_status()
                    raw = b"".join(response.iter_raw())
            except httpx.HTTPStatusError as e:
                raise FeedRequestError(
                    f"Error fetching feed: HTTP {e.response.status_code}"
                ) from e
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                raise FeedRequestError(f"Error fetching feed: {e}") from e

        try:
            contents = gzip.decompress(raw)
        except (OSError, EOFError, zlib.error) as e:
            raise FeedDecodeError(f"Error reading feed: {e}") from e

        duration_ms = int((time.time() - start_time) * 1000)
        logger.info(
            f"FEED_FETCH | url={url} | proxy={proxy_addr or '-'} | "
            f"gzip={len(raw)}B | json={len(contents)}B | {duration_ms}ms"
        )
        return contents
