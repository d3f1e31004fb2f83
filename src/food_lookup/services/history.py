"""Recent-search and trending-term tracking."""

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

from food_lookup.domain.history import RecentSearch, TrendingTerm
from food_lookup.services.cache import utc_now
from food_lookup.services.storage import KeyValueStore

_logger = logging.getLogger(__name__)

_RECENT_KEY = "history:recent"
_TRENDING_KEY = "history:trending"
_MIN_QUERY_LENGTH = 2


@dataclass
class HistoryTracker:
    """Keeps capped recent and trending lists in the key-value store."""

    store: KeyValueStore
    max_recent: int = 50
    max_trending: int = 30
    clock: Callable[[], datetime] = utc_now
    _recent: list[RecentSearch] | None = field(default=None, init=False)
    _trending: list[TrendingTerm] | None = field(default=None, init=False)

    def record_search(self, query: str, result_count: int) -> None:
        """Record a completed search in both lists."""
        cleaned = query.strip()
        if len(cleaned) < _MIN_QUERY_LENGTH:
            return
        now = self.clock()
        self._add_recent(cleaned, result_count, now)
        self._track_term(cleaned.lower(), now)

    def recent_searches(self, limit: int = 10) -> list[RecentSearch]:
        return self._load_recent()[:limit]

    def trending_terms(self, limit: int = 8) -> list[TrendingTerm]:
        return self._load_trending()[:limit]

    def clear_recent(self) -> None:
        self._recent = []
        self.store.remove(_RECENT_KEY)

    def _add_recent(self, query: str, result_count: int, now: datetime) -> None:
        lowered = query.lower()
        recent = [
            item for item in self._load_recent() if item.query.lower() != lowered
        ]
        recent.insert(
            0, RecentSearch(query=query, timestamp=now, result_count=result_count)
        )
        self._recent = recent[: self.max_recent]
        payload = [
            {
                "query": item.query,
                "timestamp": item.timestamp.isoformat(),
                "result_count": item.result_count,
            }
            for item in self._recent
        ]
        self.store.set(_RECENT_KEY, json.dumps(payload).encode())

    def _track_term(self, term: str, now: datetime) -> None:
        terms = list(self._load_trending())
        for position, item in enumerate(terms):
            if item.term == term:
                terms[position] = TrendingTerm(
                    term=term, count=item.count + 1, last_searched=now
                )
                break
        else:
            terms.append(TrendingTerm(term=term, count=1, last_searched=now))
        terms.sort(key=lambda item: item.count, reverse=True)
        self._trending = terms[: self.max_trending]
        payload = [
            {
                "term": item.term,
                "count": item.count,
                "last_searched": item.last_searched.isoformat(),
            }
            for item in self._trending
        ]
        self.store.set(_TRENDING_KEY, json.dumps(payload).encode())

    def _load_recent(self) -> list[RecentSearch]:
        if self._recent is None:
            self._recent = [
                RecentSearch(
                    query=item["query"],
                    timestamp=datetime.fromisoformat(item["timestamp"]),
                    result_count=int(item.get("result_count", 0)),
                )
                for item in _load_list(self.store, _RECENT_KEY)
            ]
        return self._recent

    def _load_trending(self) -> list[TrendingTerm]:
        if self._trending is None:
            self._trending = [
                TrendingTerm(
                    term=item["term"],
                    count=int(item["count"]),
                    last_searched=datetime.fromisoformat(item["last_searched"]),
                )
                for item in _load_list(self.store, _TRENDING_KEY)
            ]
        return self._trending


def _load_list(store: KeyValueStore, key: str) -> list[dict[str, object]]:
    raw = store.get(key)
    if not raw:
        return []
    try:
        payload = json.loads(raw)
    except ValueError:
        _logger.warning("Discarding unreadable history list: %s", key)
        return []
    return payload if isinstance(payload, list) else []
