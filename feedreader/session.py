"""Observable feed session: live fetches, cache fallback and connectivity."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Optional, Sequence, Set, Tuple

import httpx

from .aggregator import FeedAggregator
from .cache import CachedFeed, FeedCache
from .config import SessionConfig
from .connectivity import ConnectivityMonitor
from .errors import EmptyFeedError, FeedError
from .fetching import FeedFetcher
from .models import Article
from .seed import SEED_ARTICLES
from .storage import JsonFileStore, KeyValueStore, MemoryStore

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionSnapshot:
    """Immutable view of a session at one point in time."""

    articles: Tuple[Article, ...]
    loading: bool
    error: Optional[str]
    last_updated: Optional[datetime]
    is_online: bool
    source: Optional[str] = None


Subscriber = Callable[[SessionSnapshot], None]


class FeedSession:
    """Own the current article set and keep it fresh.

    ``start`` performs the initial load with the loading flag raised,
    ``refresh`` reloads silently, and coming back online with no articles
    triggers a recovery load. All loads run one at a time.
    """

    def __init__(
        self,
        fetcher: FeedFetcher,
        cache: FeedCache,
        connectivity: ConnectivityMonitor,
        aggregator: Optional[FeedAggregator] = None,
        feed_urls: Optional[Sequence[str]] = None,
    ) -> None:
        self.fetcher = fetcher
        self.aggregator = aggregator or FeedAggregator(fetcher)
        self.cache = cache
        self.connectivity = connectivity
        self.feed_urls = tuple(feed_urls) if feed_urls else ()

        self._articles: List[Article] = []
        self._loading = False
        self._error: Optional[str] = None
        self._last_updated: Optional[datetime] = None
        self._is_online = connectivity.is_online
        self._source: Optional[str] = None

        self._lock = asyncio.Lock()
        self._subscribers: List[Subscriber] = []
        self._tasks: Set["asyncio.Task[None]"] = set()
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._started = False
        self._closed = False

    @classmethod
    def from_config(
        cls,
        config: SessionConfig,
        client: Optional[httpx.AsyncClient] = None,
        connectivity: Optional[ConnectivityMonitor] = None,
        store: Optional[KeyValueStore] = None,
    ) -> "FeedSession":
        if store is None:
            store = JsonFileStore(config.cache_path) if config.cache_path else MemoryStore()
        fetcher = FeedFetcher(config.feed, client)
        return cls(
            fetcher=fetcher,
            cache=FeedCache(store, SEED_ARTICLES),
            connectivity=connectivity or ConnectivityMonitor(),
            aggregator=FeedAggregator(fetcher, config.feed),
            feed_urls=config.feed_urls,
        )

    # -- observable state -------------------------------------------------

    @property
    def articles(self) -> Tuple[Article, ...]:
        return tuple(self._articles)

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def last_updated(self) -> Optional[datetime]:
        return self._last_updated

    @property
    def is_online(self) -> bool:
        return self._is_online

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            articles=tuple(self._articles),
            loading=self._loading,
            error=self._error,
            last_updated=self._last_updated,
            is_online=self._is_online,
            source=self._source,
        )

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback`` for every state change; return an unsubscribe handle."""

        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

    def _notify(self) -> None:
        snapshot = self.snapshot()
        for callback in list(self._subscribers):
            try:
                callback(snapshot)
            except Exception:
                LOGGER.exception("Session subscriber failed")

    # -- lifecycle --------------------------------------------------------

    async def start(self) -> None:
        if self._started:
            raise RuntimeError("session already started")
        self._started = True
        self._loop = asyncio.get_running_loop()
        self.connectivity.add_listener(self._on_connectivity)
        self._is_online = self.connectivity.is_online
        await self._load(show_loading=True)

    async def refresh(self) -> None:
        """Reload articles without raising the loading flag."""

        await self._load(show_loading=False)

    async def stop(self) -> None:
        if self._closed:
            return
        self._closed = True
        self.connectivity.remove_listener(self._on_connectivity)
        pending = list(self._tasks)
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
        self._subscribers.clear()

    async def __aenter__(self) -> "FeedSession":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.stop()

    # -- internals --------------------------------------------------------

    def _on_connectivity(self, online: bool) -> None:
        if self._closed:
            return
        self._is_online = online
        self._notify()
        if online and not self._articles and self._loop is not None:
            LOGGER.info("Back online with no articles, reloading")
            task = self._loop.create_task(self._load(show_loading=True, only_if_empty=True))
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)

    async def _fetch(self) -> List[Article]:
        if self.feed_urls:
            return await self.aggregator.fetch_multiple(self.feed_urls)
        return await self.fetcher.fetch_feed()

    async def _load(self, show_loading: bool, only_if_empty: bool = False) -> None:
        async with self._lock:
            if self._closed or (only_if_empty and self._articles):
                return
            if show_loading:
                self._loading = True
                self._error = None
                self._notify()

            if not self._is_online:
                self._apply_fallback(self.cache.fallback(), error=None)
                return

            try:
                articles = await self._fetch()
                if not articles:
                    raise EmptyFeedError("No articles found in RSS feed")
            except FeedError as exc:
                if self._closed:
                    return
                LOGGER.warning("Live fetch failed, falling back: %s", exc)
                self._apply_fallback(self.cache.fallback(), error=str(exc))
                return
            except Exception as exc:  # pylint: disable=broad-exception-caught
                if self._closed:
                    return
                LOGGER.exception("Unexpected failure during live fetch, falling back")
                self._apply_fallback(
                    self.cache.fallback(), error=str(exc) or "Failed to fetch RSS feed"
                )
                return

            if self._closed:
                return
            self._last_updated = self.cache.save(articles)
            self._articles = list(articles)
            self._error = None
            self._source = "live"
            self._loading = False
            self._notify()

    def _apply_fallback(self, cached: CachedFeed, error: Optional[str]) -> None:
        self._articles = list(cached.articles)
        if cached.last_updated is not None:
            self._last_updated = cached.last_updated
        self._error = error
        self._source = cached.source
        self._loading = False
        self._notify()


__all__ = ["FeedSession", "SessionSnapshot"]
