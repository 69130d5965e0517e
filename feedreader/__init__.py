"""Feed reader: normalize proxied RSS/Atom feeds into articles and keep them fresh."""

from .aggregator import FeedAggregator
from .cache import FeedCache
from .config import FeedConfig, SessionConfig, load_config
from .connectivity import ConnectivityMonitor
from .errors import (
    CacheParseError,
    EmptyFeedError,
    FeedError,
    FormatError,
    HttpError,
    NetworkError,
)
from .favorites import FavoritesStore
from .fetching import FeedFetcher
from .identifiers import generate_id
from .models import Article
from .normalizer import normalize_item
from .readtime import estimate_read_time
from .sanitizer import extract_image, sanitize
from .seed import SEED_ARTICLES
from .session import FeedSession, SessionSnapshot
from .storage import JsonFileStore, KeyValueStore, MemoryStore

__all__ = [
    "Article",
    "CacheParseError",
    "ConnectivityMonitor",
    "EmptyFeedError",
    "FavoritesStore",
    "FeedAggregator",
    "FeedCache",
    "FeedConfig",
    "FeedError",
    "FeedFetcher",
    "FeedSession",
    "FormatError",
    "HttpError",
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
    "NetworkError",
    "SEED_ARTICLES",
    "SessionConfig",
    "SessionSnapshot",
    "estimate_read_time",
    "extract_image",
    "generate_id",
    "load_config",
    "normalize_item",
    "sanitize",
]
