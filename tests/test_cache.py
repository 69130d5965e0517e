import json
from datetime import datetime, timezone

import pytest

from conftest import cached_payload, make_article

from feedreader.cache import ARTICLES_KEY, LAST_UPDATED_KEY, FeedCache
from feedreader.errors import CacheParseError
from feedreader.seed import SEED_ARTICLES
from feedreader.storage import JsonFileStore, MemoryStore



def test_save_writes_both_keys() -> None:
    store = MemoryStore()
    cache = FeedCache(store, SEED_ARTICLES)
    now = datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)
    returned = cache.save([make_article("a")], now)

    assert returned == now
    assert json.loads(store.get(ARTICLES_KEY))[0]["id"] == "a"
    assert store.get(LAST_UPDATED_KEY) == now.isoformat()


def test_save_overwrites_previous_entry() -> None:
    store = MemoryStore()
    cache = FeedCache(store, SEED_ARTICLES)
    cache.save([make_article("a")])
    cache.save([make_article("b"), make_article("c")])
    assert [article.id for article in cache.load()] == ["b", "c"]


def test_round_trip_preserves_articles() -> None:
    store = MemoryStore()
    cache = FeedCache(store, SEED_ARTICLES)
    original = [make_article("a"), SEED_ARTICLES[0]]
    cache.save(original)
    assert cache.load() == original


def test_load_without_cache_is_none() -> None:
    assert FeedCache(MemoryStore(), SEED_ARTICLES).load() is None


@pytest.mark.parametrize(
    "raw",
    ["invalid json", "{}", "null", '[{"id": "x"}]', '["just a string"]', '[{"readTime": 0}]'],
)
def test_load_rejects_bad_payloads(raw: str) -> None:
    cache = FeedCache(MemoryStore({ARTICLES_KEY: raw}), SEED_ARTICLES)
    with pytest.raises(CacheParseError):
        cache.load()


def test_fallback_serves_cache() -> None:
    stamp = "2024-01-10T08:00:00+00:00"
    store = MemoryStore({ARTICLES_KEY: cached_payload([make_article("a")]), LAST_UPDATED_KEY: stamp})
    served = FeedCache(store, SEED_ARTICLES).fallback()
    assert served.source == "cache"
    assert [article.id for article in served.articles] == ["a"]
    assert served.last_updated == datetime(2024, 1, 10, 8, 0, tzinfo=timezone.utc)


def test_fallback_with_unreadable_timestamp_uses_now() -> None:
    store = MemoryStore({ARTICLES_KEY: cached_payload([make_article("a")]), LAST_UPDATED_KEY: "garbage"})
    before = datetime.now(timezone.utc)
    served = FeedCache(store, SEED_ARTICLES).fallback()
    assert served.source == "cache"
    assert served.last_updated >= before


def test_fallback_empty_cache_list_is_still_cache() -> None:
    served = FeedCache(MemoryStore({ARTICLES_KEY: "[]"}), SEED_ARTICLES).fallback()
    assert served.source == "cache"
    assert served.articles == []


def test_fallback_without_cache_serves_seed() -> None:
    served = FeedCache(MemoryStore(), SEED_ARTICLES).fallback()
    assert served.source == "seed"
    assert served.articles == list(SEED_ARTICLES)
    assert served.last_updated is None


def test_fallback_corrupted_cache_serves_seed() -> None:
    served = FeedCache(MemoryStore({ARTICLES_KEY: "invalid json"}), SEED_ARTICLES).fallback()
    assert served.source == "seed"
    assert served.articles == list(SEED_ARTICLES)


class TestJsonFileStore:
    def test_missing_file_reads_empty(self, tmp_path) -> None:
        assert JsonFileStore(tmp_path / "store.json").get("k") is None

    def test_set_and_get(self, tmp_path) -> None:
        path = tmp_path / "nested" / "store.json"
        store = JsonFileStore(path)
        store.set("a", "1")
        store.set("b", "2")
        assert store.get("a") == "1"
        assert JsonFileStore(path).get("b") == "2"
        assert not path.with_name("store.json.tmp").exists()

    def test_corrupted_file_reads_empty(self, tmp_path) -> None:
        path = tmp_path / "store.json"
        path.write_text("{not json", encoding="utf-8")
        store = JsonFileStore(path)
        assert store.get("a") is None
        store.set("a", "1")
        assert store.get("a") == "1"

    def test_non_object_file_reads_empty(self, tmp_path) -> None:
        path = tmp_path / "store.json"
        path.write_text("[1, 2]", encoding="utf-8")
        assert JsonFileStore(path).get("0") is None

    def test_backs_feed_cache(self, tmp_path) -> None:
        store = JsonFileStore(tmp_path / "store.json")
        FeedCache(store, SEED_ARTICLES).save([make_article("disk")])
        reloaded = FeedCache(JsonFileStore(tmp_path / "store.json"), SEED_ARTICLES)
        assert [article.id for article in reloaded.load()] == ["disk"]
