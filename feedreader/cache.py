"""Article cache with seed fallback."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from pydantic import ValidationError

from .errors import CacheParseError
from .models import Article, parse_instant
from .storage import KeyValueStore

LOGGER = logging.getLogger(__name__)

ARTICLES_KEY = "rss-articles"
LAST_UPDATED_KEY = "rss-last-updated"


@dataclass
class CachedFeed:
    """Articles served without a live fetch, and where they came from."""

    articles: List[Article]
    last_updated: Optional[datetime]
    source: str


class FeedCache:
    """Persist the last good article set and serve it when live data is unavailable."""

    def __init__(self, store: KeyValueStore, seed: Sequence[Article]) -> None:
        self.store = store
        self.seed = list(seed)

    def save(self, articles: Sequence[Article], now: Optional[datetime] = None) -> datetime:
        """Overwrite the cached articles and timestamp; return the timestamp."""

        now = now or datetime.now(timezone.utc)
        payload = json.dumps([article.to_dict() for article in articles], ensure_ascii=False)
        self.store.set(ARTICLES_KEY, payload)
        self.store.set(LAST_UPDATED_KEY, now.isoformat())
        LOGGER.info("Cached %d articles", len(articles))
        return now

    def load(self) -> Optional[List[Article]]:
        """Return cached articles, ``None`` if nothing is cached.

        Raises :class:`CacheParseError` when the stored payload is unreadable.
        """

        raw = self.store.get(ARTICLES_KEY)
        if raw is None:
            return None
        try:
            data = json.loads(raw)
        except ValueError as exc:
            raise CacheParseError(f"Cached articles are not valid JSON: {exc}") from exc
        if not isinstance(data, list):
            raise CacheParseError("Cached articles are not a list")
        try:
            return [Article.from_dict(entry) for entry in data]
        except (TypeError, ValidationError) as exc:
            raise CacheParseError(f"Cached article is malformed: {exc}") from exc

    def last_updated(self, default: Optional[datetime] = None) -> datetime:
        fallback = default or datetime.now(timezone.utc)
        raw = self.store.get(LAST_UPDATED_KEY)
        if raw is None:
            return fallback
        parsed = parse_instant(raw)
        if parsed is None:
            LOGGER.warning("Unreadable cache timestamp %r", raw)
            return fallback
        return parsed

    def fallback(self) -> CachedFeed:
        """Serve cached articles, or the seed set if the cache is absent or corrupt."""

        try:
            articles = self.load()
        except CacheParseError as exc:
            LOGGER.warning("Ignoring corrupted article cache: %s", exc)
            articles = None

        if articles is not None:
            LOGGER.info("Serving %d cached articles", len(articles))
            return CachedFeed(articles=articles, last_updated=self.last_updated(), source="cache")

        LOGGER.info("Serving %d seed articles", len(self.seed))
        return CachedFeed(articles=list(self.seed), last_updated=None, source="seed")


__all__ = ["ARTICLES_KEY", "CachedFeed", "FeedCache", "LAST_UPDATED_KEY"]
