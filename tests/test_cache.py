"""Tests for the in-memory TTL cache."""

from food_lookup.services.cache import InMemoryCache
from tests.conftest import FakeClock


def test_cache_expires_entries(clock: FakeClock) -> None:
    cache = InMemoryCache(clock=clock)
    cache.set("key", "value", ttl_seconds=10)

    assert cache.get("key") == "value"
    clock.advance(10)
    assert cache.get("key") is None
    assert len(cache) == 0


def test_cache_evicts_oldest_insertion_over_capacity(clock: FakeClock) -> None:
    cache = InMemoryCache(max_entries=2, clock=clock)
    cache.set("a", 1, ttl_seconds=60)
    cache.set("b", 2, ttl_seconds=60)
    cache.set("a", 10, ttl_seconds=60)
    cache.set("c", 3, ttl_seconds=60)

    assert cache.get("b") is None
    assert cache.get("a") == 10
    assert cache.get("c") == 3


def test_cache_prefers_dropping_expired_entries(clock: FakeClock) -> None:
    cache = InMemoryCache(max_entries=2, clock=clock)
    cache.set("short", 1, ttl_seconds=5)
    cache.set("long", 2, ttl_seconds=60)
    clock.advance(6)
    cache.set("new", 3, ttl_seconds=60)

    assert len(cache) == 2
    assert cache.get("long") == 2


def test_cache_remove_and_clear(clock: FakeClock) -> None:
    cache = InMemoryCache(clock=clock)
    cache.set("a", 1, ttl_seconds=60)
    cache.set("b", 2, ttl_seconds=60)

    cache.remove("a")
    assert cache.get("a") is None
    cache.clear()
    assert len(cache) == 0
