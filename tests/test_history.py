"""Tests for recent and trending search tracking."""

from food_lookup.services.history import HistoryTracker
from food_lookup.services.storage import InMemoryKeyValueStore
from tests.conftest import FakeClock


def test_recent_searches_dedupe_case_insensitively(clock: FakeClock) -> None:
    tracker = HistoryTracker(InMemoryKeyValueStore(), clock=clock)

    tracker.record_search("Banana", 4)
    clock.advance(1)
    tracker.record_search("oats", 9)
    clock.advance(1)
    tracker.record_search("BANANA", 5)

    recent = tracker.recent_searches()
    assert [item.query for item in recent] == ["BANANA", "oats"]
    assert recent[0].result_count == 5
    assert recent[0].timestamp == clock.now


def test_short_queries_are_ignored(clock: FakeClock) -> None:
    store = InMemoryKeyValueStore()
    tracker = HistoryTracker(store, clock=clock)

    tracker.record_search(" a ", 1)

    assert tracker.recent_searches() == []
    assert store.values == {}


def test_trending_terms_count_and_sort(clock: FakeClock) -> None:
    tracker = HistoryTracker(InMemoryKeyValueStore(), clock=clock)
    for query in ("rice", "Eggs", "eggs", "oats", "RICE", "eggs"):
        tracker.record_search(query, 1)

    trending = tracker.trending_terms()

    assert [(item.term, item.count) for item in trending] == [
        ("eggs", 3),
        ("rice", 2),
        ("oats", 1),
    ]


def test_lists_are_capped(clock: FakeClock) -> None:
    tracker = HistoryTracker(
        InMemoryKeyValueStore(), max_recent=3, max_trending=2, clock=clock
    )
    for query in ("apple", "bread", "cheese", "dates"):
        tracker.record_search(query, 1)

    assert [item.query for item in tracker.recent_searches()] == [
        "dates",
        "cheese",
        "bread",
    ]
    assert len(tracker.trending_terms()) == 2


def test_history_is_loaded_from_store(clock: FakeClock) -> None:
    store = InMemoryKeyValueStore()
    HistoryTracker(store, clock=clock).record_search("salmon", 12)

    reloaded = HistoryTracker(store, clock=clock)

    assert reloaded.recent_searches()[0].query == "salmon"
    assert reloaded.trending_terms()[0].term == "salmon"
    assert reloaded.trending_terms()[0].last_searched == clock.now


def test_clear_recent_keeps_trending(clock: FakeClock) -> None:
    store = InMemoryKeyValueStore()
    tracker = HistoryTracker(store, clock=clock)
    tracker.record_search("tofu", 3)

    tracker.clear_recent()

    assert tracker.recent_searches() == []
    assert "history:recent" not in store.values
    assert HistoryTracker(store, clock=clock).trending_terms()[0].term == "tofu"
