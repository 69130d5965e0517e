"""Feed fetching through the JSON conversion proxy."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from .config import FeedConfig
from .errors import FormatError, HttpError, NetworkError
from .models import Article
from .normalizer import normalize_item
from .schemas import FeedPayload

LOGGER = logging.getLogger(__name__)


class FeedFetcher:
    """Fetch a single feed and normalize its items."""

    def __init__(
        self,
        config: Optional[FeedConfig] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.config = config or FeedConfig()
        self._client = client

    def proxy_request_url(self, feed_url: str) -> str:
        separator = "&" if "?" in self.config.proxy_url else "?"
        encoded = quote(feed_url, safe="!*'()")
        return f"{self.config.proxy_url}{separator}rss_url={encoded}"

    async def _get(self, url: str) -> httpx.Response:
        headers = {"User-Agent": self.config.user_agent}
        if self._client is not None:
            return await self._client.get(
                url, headers=headers, timeout=self.config.timeout, follow_redirects=True
            )
        async with httpx.AsyncClient(
            headers=headers, timeout=self.config.timeout, follow_redirects=True
        ) as client:
            return await client.get(url)

    async def fetch_feed(
        self,
        feed_url: Optional[str] = None,
        category: Optional[str] = None,
    ) -> List[Article]:
        """Fetch ``feed_url`` (or the configured default) and return its articles.

        At most ``max_items`` raw items are considered, in feed order, and
        items whose title or summary is empty after sanitizing are dropped.
        """

        feed_url = feed_url or self.config.default_feed_url
        category = category or self.config.default_category
        request_url = self.proxy_request_url(feed_url)
        LOGGER.debug("Requesting %s", request_url)

        try:
            response = await self._get(request_url)
        except httpx.HTTPError as exc:
            detail = str(exc) or exc.__class__.__name__
            raise NetworkError(f"Failed to fetch RSS feed: {detail}", feed_url) from exc

        if not response.is_success:
            raise HttpError(response.status_code, feed_url)

        try:
            payload = FeedPayload.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise FormatError(
                "Failed to fetch RSS feed: Invalid RSS response format", feed_url
            ) from exc

        now = datetime.now(timezone.utc)
        articles = []
        for item in payload.items[: self.config.max_items]:
            article = normalize_item(item, category, self.config, now)
            if not article.title or not article.summary:
                LOGGER.debug("Skipping item without title or summary: %s", item.link)
                continue
            articles.append(article)

        LOGGER.info("Fetched %d articles from %s", len(articles), feed_url)
        return articles

    async def test_connection(self) -> bool:
        """Return True if the default feed yields at least one article."""

        try:
            articles = await self.fetch_feed()
        except Exception as exc:  # pylint: disable=broad-exception-caught
            LOGGER.debug("Connection test failed: %s", exc)
            return False
        return len(articles) > 0


__all__ = ["FeedFetcher"]
