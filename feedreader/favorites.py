"""Persisted set of favorite article ids."""

from __future__ import annotations

import json
import logging
from typing import List, Sequence

from .models import Article
from .storage import KeyValueStore

LOGGER = logging.getLogger(__name__)

FAVORITES_KEY = "news-favorites"


class FavoritesStore:
    """Track favorite articles by id in keyed storage."""

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    def ids(self) -> List[str]:
        raw = self.store.get(FAVORITES_KEY)
        if raw is None:
            return []
        try:
            data = json.loads(raw)
        except ValueError:
            LOGGER.warning("Ignoring corrupted favorites entry")
            return []
        if not isinstance(data, list):
            LOGGER.warning("Ignoring favorites entry that is not a list")
            return []
        return [entry for entry in data if isinstance(entry, str)]

    def is_favorite(self, article_id: str) -> bool:
        return article_id in self.ids()

    def toggle(self, article_id: str) -> bool:
        """Add or remove ``article_id``; return True if it is now a favorite."""

        ids = self.ids()
        if article_id in ids:
            ids = [entry for entry in ids if entry != article_id]
            added = False
        else:
            ids.append(article_id)
            added = True
        self.store.set(FAVORITES_KEY, json.dumps(ids))
        return added

    def filter(self, articles: Sequence[Article]) -> List[Article]:
        favorites = set(self.ids())
        return [article for article in articles if article.id in favorites]


__all__ = ["FAVORITES_KEY", "FavoritesStore"]
