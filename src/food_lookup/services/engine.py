"""Engine facade combining search, barcode lookups and history."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

from food_lookup.domain.foods import (
    BarcodeCacheEntry,
    BarcodeLookupResult,
    FoodRecord,
    SearchResult,
)
from food_lookup.domain.history import RecentSearch, TrendingTerm
from food_lookup.services.barcode import BarcodeService
from food_lookup.services.history import HistoryTracker
from food_lookup.services.search import FoodSearchService

_logger = logging.getLogger(__name__)


@dataclass
class FoodEngine:
    """Owns every cache and history list for one process."""

    search_service: FoodSearchService
    barcode_service: BarcodeService
    history: HistoryTracker
    close_callbacks: list[Callable[[], Awaitable[None]]] = field(default_factory=list)
    _pending: set[asyncio.Task[None]] = field(default_factory=set, init=False)

    async def search(
        self, query: str, premium: bool = False, max_results: int = 25
    ) -> SearchResult:
        """Search foods and record the query in the background."""
        result = await self.search_service.search(
            query, premium=premium, max_results=max_results
        )
        self._schedule_history(query.strip(), len(result.records))
        return result

    async def lookup_barcode(self, barcode: str) -> BarcodeLookupResult:
        return await self.barcode_service.lookup(barcode)

    def submit_barcode(self, barcode: str, record: FoodRecord) -> BarcodeCacheEntry:
        return self.barcode_service.submit(barcode, record)

    def scan_history(self, limit: int = 20) -> list[BarcodeCacheEntry]:
        return self.barcode_service.scan_history(limit)

    def recent_searches(self, limit: int = 10) -> list[RecentSearch]:
        return self.history.recent_searches(limit)

    def trending_terms(self, limit: int = 8) -> list[TrendingTerm]:
        return self.history.trending_terms(limit)

    def clear_recent(self) -> None:
        self.history.clear_recent()

    async def drain(self) -> None:
        """Wait for any pending history writes."""
        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)

    async def close(self) -> None:
        """Flush background work and release provider clients."""
        await self.drain()
        for callback in self.close_callbacks:
            await callback()

    def _schedule_history(self, query: str, result_count: int) -> None:
        task = asyncio.create_task(self._record_history(query, result_count))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _record_history(self, query: str, result_count: int) -> None:
        try:
            self.history.record_search(query, result_count)
        except Exception:
            _logger.exception("Failed to record search history: %s", query)
