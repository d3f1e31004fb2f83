"""Concurrent multi-source food search."""

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass, replace

from food_lookup.domain.errors import InvalidInputError
from food_lookup.domain.foods import SearchResult, SourceResult, SourceStatus
from food_lookup.services.cache import Cache
from food_lookup.services.dedup import deduplicate
from food_lookup.services.matching import expand_abbreviations
from food_lookup.services.ranking import rank_records
from food_lookup.services.sources.base import (
    MAX_QUERY_LENGTH,
    SourceAdapter,
    sanitize_query,
)

_logger = logging.getLogger(__name__)


@dataclass
class FoodSearchService:
    """Fans a query out to every eligible adapter and merges the answers.

    Adapters are consulted concurrently but merged in list order, so the
    order of ``adapters`` is the priority used when two sources return the
    same food. Results are cached only when every attempted source answered.
    """

    adapters: Sequence[SourceAdapter]
    cache: Cache
    cache_ttl_seconds: int = 300
    debug: bool = False

    async def search(
        self, query: str, premium: bool = False, max_results: int = 25
    ) -> SearchResult:
        """Search all sources and return deduplicated, ranked records."""
        if len((query or "").strip()) > MAX_QUERY_LENGTH:
            raise InvalidInputError(
                f"Search query must be at most {MAX_QUERY_LENGTH} characters"
            )
        cleaned = sanitize_query(query)
        if not cleaned:
            raise InvalidInputError("Search query must not be empty")
        if max_results < 1:
            raise InvalidInputError("max_results must be positive")

        cache_key = f"search:{premium}:{max_results}:{cleaned.lower()}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, SearchResult):
            return _snapshot(cached)

        provider_query = expand_abbreviations(cleaned)
        eligible = [a for a in self.adapters if premium or not a.premium_only]
        results = await asyncio.gather(
            *(
                self._run_adapter(adapter, provider_query, max_results)
                for adapter in eligible
            )
        )

        outcomes = {adapter.label: SourceStatus.SKIPPED for adapter in self.adapters}
        for result in results:
            outcomes[result.label] = result.status

        merged = deduplicate(
            (result.label, result.records)
            for result in results
            if result.status == SourceStatus.OK
        )
        ranked = rank_records(merged.records, cleaned)[:max_results]
        search_result = SearchResult(
            records=ranked,
            total_available_count=sum(result.total_count for result in results),
            per_source_counts={
                adapter.label: merged.accepted_counts.get(adapter.label, 0)
                for adapter in self.adapters
            },
            outcomes=outcomes,
        )
        if all(result.status == SourceStatus.OK for result in results):
            self.cache.set(
                cache_key, _snapshot(search_result), ttl_seconds=self.cache_ttl_seconds
            )
        if self.debug:
            _logger.info(
                "Food search: query=%s premium=%s results=%s outcomes=%s",
                cleaned,
                premium,
                len(ranked),
                {label.value: status.value for label, status in outcomes.items()},
            )
        return search_result

    async def _run_adapter(
        self, adapter: SourceAdapter, query: str, max_results: int
    ) -> SourceResult:
        try:
            return await asyncio.wait_for(
                adapter.search(query, max_results, adapter.timeout_seconds),
                timeout=adapter.timeout_seconds,
            )
        except TimeoutError:
            _logger.warning(
                "%s search exceeded %.1fs", adapter.label.value, adapter.timeout_seconds
            )
            return SourceResult.empty(adapter.label, SourceStatus.TIMEOUT)
        except Exception:
            _logger.exception("%s search failed", adapter.label.value)
            return SourceResult.empty(adapter.label, SourceStatus.FAILED)


def _snapshot(result: SearchResult) -> SearchResult:
    return replace(
        result,
        records=list(result.records),
        per_source_counts=dict(result.per_source_counts),
        outcomes=dict(result.outcomes),
    )
