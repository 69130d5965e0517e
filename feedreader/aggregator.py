"""Concurrent fan-out across several feeds."""

from __future__ import annotations

import asyncio
import logging
from typing import List, Optional, Sequence

from .config import FeedConfig
from .errors import FeedError
from .fetching import FeedFetcher
from .models import Article

LOGGER = logging.getLogger(__name__)


class FeedAggregator:
    """Merge several feeds into one list, newest first."""

    def __init__(self, fetcher: FeedFetcher, config: Optional[FeedConfig] = None) -> None:
        self.fetcher = fetcher
        self.config = config or fetcher.config

    async def _fetch_or_empty(self, feed_url: str) -> List[Article]:
        try:
            return await self.fetcher.fetch_feed(feed_url)
        except FeedError as exc:
            LOGGER.warning("Failed to fetch feed %s: %s", feed_url, exc)
            return []
        except Exception:  # pylint: disable=broad-exception-caught
            LOGGER.warning("Unexpected failure fetching feed %s", feed_url, exc_info=True)
            return []

    async def fetch_multiple(self, feed_urls: Sequence[str]) -> List[Article]:
        """Fetch every URL concurrently; a failing feed contributes nothing."""

        results = await asyncio.gather(*(self._fetch_or_empty(url) for url in feed_urls))
        articles = [article for batch in results for article in batch]

        fallback = self.config.fallback_feed_url
        if not articles and fallback and fallback not in feed_urls:
            LOGGER.info("No articles from %d feeds, trying fallback %s", len(feed_urls), fallback)
            articles = await self._fetch_or_empty(fallback)

        # sort() is stable, so equal timestamps keep concatenation order.
        articles.sort(key=lambda article: article.published_instant(), reverse=True)
        return articles


__all__ = ["FeedAggregator"]
