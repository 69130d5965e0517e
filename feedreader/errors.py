"""Exception hierarchy for feed fetching and caching."""

from __future__ import annotations

from typing import Optional


class FeedError(Exception):
    """Base class for every failure raised by the feed pipeline."""

    def __init__(self, message: str, feed_url: Optional[str] = None) -> None:
        super().__init__(message)
        self.feed_url = feed_url


class NetworkError(FeedError):
    """The transport call to the proxy failed."""


class HttpError(FeedError):
    """The proxy answered with a non-success status."""

    def __init__(self, status_code: int, feed_url: Optional[str] = None) -> None:
        super().__init__(
            f"Failed to fetch RSS feed: HTTP error! status: {status_code}", feed_url
        )
        self.status_code = status_code


class FormatError(FeedError):
    """The proxy payload has no usable ``items`` array."""


class EmptyFeedError(FeedError):
    """The feed was well formed but produced no usable articles."""


class CacheParseError(FeedError):
    """The stored article cache is not valid structured data."""


__all__ = [
    "CacheParseError",
    "EmptyFeedError",
    "FeedError",
    "FormatError",
    "HttpError",
    "NetworkError",
]
