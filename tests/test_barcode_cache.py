"""Tests for the persistent barcode cache."""

import json

from food_lookup.domain.foods import BarcodeSource
from food_lookup.services.barcode_cache import PersistentBarcodeCache
from food_lookup.services.storage import InMemoryKeyValueStore
from tests.conftest import FakeClock, make_record


def test_put_and_get_round_trip_through_store(clock: FakeClock) -> None:
    store = InMemoryKeyValueStore()
    cache = PersistentBarcodeCache(store=store, clock=clock)
    record = make_record(
        "Oat Milk (Oatly)",
        brand="Oatly",
        micronutrients={"calcium": 120.0},
        is_per_serving=True,
    )

    entry, evicted = cache.put("7394376616037", record, BarcodeSource.OPENFOODFACTS)

    assert evicted == []
    assert entry.hit_count == 0
    assert "barcode:7394376616037" in store.values
    reloaded = PersistentBarcodeCache(store=store, clock=clock).get("7394376616037")
    assert reloaded is not None
    assert reloaded.record == record
    assert reloaded.source == BarcodeSource.OPENFOODFACTS
    assert reloaded.cached_at == clock.now


def test_put_existing_entry_bumps_hit_count(clock: FakeClock) -> None:
    cache = PersistentBarcodeCache(store=InMemoryKeyValueStore(), clock=clock)
    record = make_record("Crackers")

    cache.put("111", record, BarcodeSource.USDA)
    clock.advance(5)
    entry, _ = cache.put("111", record, BarcodeSource.USDA)

    assert entry.hit_count == 1
    assert entry.cached_at == clock.now
    assert len(cache) == 1


def test_record_hit_updates_index_only(clock: FakeClock) -> None:
    store = InMemoryKeyValueStore()
    cache = PersistentBarcodeCache(store=store, clock=clock)
    cache.put("222", make_record("Soda"), BarcodeSource.OPENFOODFACTS)

    assert cache.record_hit("222") == 1
    assert cache.record_hit("222") == 2
    assert cache.record_hit("999") is None
    index = json.loads(store.values["barcode:index"])
    assert index["222"]["hit_count"] == 2


def test_capacity_evicts_oldest_cached_entry(clock: FakeClock) -> None:
    store = InMemoryKeyValueStore()
    cache = PersistentBarcodeCache(store=store, max_entries=2, clock=clock)
    cache.put("1", make_record("First"), BarcodeSource.USDA)
    clock.advance(1)
    cache.put("2", make_record("Second"), BarcodeSource.USDA)
    clock.advance(1)

    _, evicted = cache.put("3", make_record("Third"), BarcodeSource.USDA)

    assert evicted == ["1"]
    assert len(cache) == 2
    assert "1" not in cache
    assert "barcode:1" not in store.values
    assert cache.get("1") is None


def test_history_returns_newest_first(clock: FakeClock) -> None:
    cache = PersistentBarcodeCache(store=InMemoryKeyValueStore(), clock=clock)
    for code in ("10", "20", "30"):
        cache.put(code, make_record(f"Item {code}"), BarcodeSource.OPENFOODFACTS)
        clock.advance(60)

    history = cache.history(limit=2)

    assert [entry.barcode for entry in history] == ["30", "20"]


def test_missing_entry_is_dropped_from_index(clock: FakeClock) -> None:
    store = InMemoryKeyValueStore()
    cache = PersistentBarcodeCache(store=store, clock=clock)
    cache.put("333", make_record("Chips"), BarcodeSource.USDA)
    store.remove("barcode:333")

    assert cache.get("333") is None
    assert "333" not in cache


def test_unreadable_index_starts_empty(clock: FakeClock) -> None:
    store = InMemoryKeyValueStore(values={"barcode:index": b"not json"})
    cache = PersistentBarcodeCache(store=store, clock=clock)

    assert len(cache) == 0


def test_malformed_index_entries_are_skipped(clock: FakeClock) -> None:
    store = InMemoryKeyValueStore()
    PersistentBarcodeCache(store=store, clock=clock).put(
        "555", make_record("Kefir"), BarcodeSource.OPENFOODFACTS
    )
    index = json.loads(store.values["barcode:index"])
    index["123"] = {"hit_count": 1}
    index["456"] = {"cached_at": "yesterday", "source": "usda"}
    index["789"] = {"cached_at": clock().isoformat(), "source": "bogus"}
    store.values["barcode:index"] = json.dumps(index).encode()
    cache = PersistentBarcodeCache(store=store, clock=clock)

    history = cache.history(5)
    cache.put("666", make_record("Skyr"), BarcodeSource.USDA)

    assert [entry.barcode for entry in history] == ["555"]
    assert set(json.loads(store.values["barcode:index"])) == {"555", "666"}


def test_unreadable_record_is_dropped_from_index(clock: FakeClock) -> None:
    store = InMemoryKeyValueStore()
    cache = PersistentBarcodeCache(store=store, clock=clock)
    cache.put("777", make_record("Tofu"), BarcodeSource.USDA)
    store.values["barcode:777"] = b'{"name": "Tofu"}'

    assert cache.get("777") is None
    assert "777" not in cache
    assert cache.history() == []


def test_clear_removes_entries_and_index(clock: FakeClock) -> None:
    store = InMemoryKeyValueStore()
    cache = PersistentBarcodeCache(store=store, clock=clock)
    cache.put("444", make_record("Juice"), BarcodeSource.USDA)

    cache.clear()

    assert store.values == {}
    assert len(cache) == 0
