from __future__ import annotations

import asyncio
import json
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

from feedreader.config import FeedConfig
from feedreader.models import Article


def raw_item(
    title: str = "Test Article",
    description: str = "This is a test article description",
    link: str = "https://example.com/article",
    pub_date: Optional[str] = "2024-01-15T10:30:00Z",
    **extra: Any,
) -> Dict[str, Any]:
    item: Dict[str, Any] = {"title": title, "description": description, "link": link}
    if pub_date is not None:
        item["pubDate"] = pub_date
    item.update(extra)
    return item


def json_handler(payload: Any, status_code: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=payload)

    return _handler


def mock_client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def make_article(
    article_id: str,
    published_at: str = "2024-01-15T10:30:00Z",
    title: Optional[str] = None,
) -> Article:
    return Article(
        id=article_id,
        title=title or f"Article {article_id}",
        summary=f"Summary {article_id}",
        content=f"Content {article_id}",
        author="News Staff",
        published_at=published_at,
        category="Design",
        read_time=1,
    )


def cached_payload(articles: List[Article]) -> str:
    return json.dumps([article.to_dict() for article in articles])


class FakeFetcher:
    """Scripted stand-in for :class:`feedreader.fetching.FeedFetcher`."""

    def __init__(self, *results: Any, delays: Optional[List[float]] = None) -> None:
        self.config = FeedConfig()
        self.results = list(results)
        self.delays = list(delays or [])
        self.calls: List[Optional[str]] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def fetch_feed(self, feed_url: Optional[str] = None, category: Optional[str] = None):
        self.calls.append(feed_url)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            delay = self.delays.pop(0) if self.delays else 0
            if delay:
                await asyncio.sleep(delay)
            result = self.results.pop(0) if len(self.results) > 1 else self.results[0]
            if isinstance(result, Exception):
                raise result
            if callable(result):
                return result(feed_url)
            return list(result)
        finally:
            self.in_flight -= 1


async def drain(ticks: int = 10) -> None:
    for _ in range(ticks):
        await asyncio.sleep(0)


@pytest.fixture
def feed_config() -> FeedConfig:
    return FeedConfig(proxy_url="https://proxy.test/api.json")
