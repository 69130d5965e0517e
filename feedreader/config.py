"""Configuration helpers for the feed reader."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple
import os


DEFAULT_PROXY_URL = "https://api.rss2json.com/v1/api.json"
DEFAULT_FEED_URL = "https://design-milk.com/feed/"


@dataclass
class FeedConfig:
    """Configuration for fetching and normalizing a feed."""

    proxy_url: str = DEFAULT_PROXY_URL
    default_feed_url: str = DEFAULT_FEED_URL
    default_category: str = "Design"
    fallback_feed_url: Optional[str] = None
    max_items: int = 20
    summary_max_chars: int = 200
    min_content_chars: int = 500
    words_per_minute: int = 200
    timeout: float = 15.0
    user_agent: str = "feedreader/1.0"


@dataclass
class SessionConfig:
    """Top-level configuration for a feed session."""

    feed: FeedConfig = field(default_factory=FeedConfig)
    feed_urls: Optional[Tuple[str, ...]] = None
    cache_path: Optional[Path] = None


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def load_config() -> SessionConfig:
    """Load configuration from environment variables with sensible defaults."""

    feed = FeedConfig(
        proxy_url=os.getenv("RSS_PROXY_URL", DEFAULT_PROXY_URL),
        default_feed_url=os.getenv("RSS_DEFAULT_FEED_URL", DEFAULT_FEED_URL),
        default_category=os.getenv("RSS_DEFAULT_CATEGORY", "Design"),
        fallback_feed_url=os.getenv("RSS_FALLBACK_FEED_URL") or None,
        max_items=_int_env("RSS_MAX_ITEMS", 20),
        timeout=_float_env("RSS_TIMEOUT", 15.0),
    )

    feed_urls_env = os.getenv("RSS_FEED_URLS", "")
    urls = tuple(url.strip() for url in feed_urls_env.split(",") if url.strip())
    feed_urls: Optional[Tuple[str, ...]] = urls or None

    cache_path_env = os.getenv("RSS_CACHE_PATH")
    cache_path: Optional[Path]
    if cache_path_env:
        cache_path = Path(cache_path_env).expanduser()
    else:
        cache_path = None

    return SessionConfig(feed=feed, feed_urls=feed_urls, cache_path=cache_path)


__all__ = [
    "DEFAULT_FEED_URL",
    "DEFAULT_PROXY_URL",
    "FeedConfig",
    "SessionConfig",
    "load_config",
]
