"""Barcode resolution through a two-tier cache and provider chain."""

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass, replace

from food_lookup.domain.errors import InvalidInputError
from food_lookup.domain.foods import (
    DEFAULT_SERVING_LABEL,
    BarcodeCacheEntry,
    BarcodeLookupResult,
    BarcodeSource,
    Confidence,
    FoodRecord,
    clamp_macros,
)
from food_lookup.services.barcode_cache import PersistentBarcodeCache
from food_lookup.services.cache import Cache
from food_lookup.services.sources.base import BarcodeAdapter, clean_barcode

_HIGH_CONFIDENCE = 8
_MEDIUM_CONFIDENCE = 5

_logger = logging.getLogger(__name__)


@dataclass
class BarcodeService:
    """Resolves barcodes: fast cache, persistent cache, then providers in order."""

    providers: Sequence[BarcodeAdapter]
    fast_cache: Cache
    persistent_cache: PersistentBarcodeCache
    fast_ttl_seconds: int = 86400
    debug: bool = False

    async def lookup(self, barcode: str) -> BarcodeLookupResult:
        """Resolve a barcode, writing any provider hit back to both cache tiers."""
        code = _require_barcode(barcode)

        cached = self.fast_cache.get(_fast_key(code))
        if isinstance(cached, BarcodeCacheEntry):
            self._count_hit(code, cached)
            return _found(cached.record, cached.source, was_cached=True)

        entry = self._persistent_get(code)
        if entry is not None:
            self._count_hit(code, entry)
            self.fast_cache.set(
                _fast_key(code), entry, ttl_seconds=self.fast_ttl_seconds
            )
            return _found(entry.record, entry.source, was_cached=True)

        for provider in self.providers:
            record = await self._run_provider(provider, code)
            if record is None:
                continue
            self._write_back(code, record, provider.barcode_source)
            if self.debug:
                _logger.info(
                    "Barcode resolved: barcode=%s source=%s",
                    code,
                    provider.barcode_source.value,
                )
            return _found(record, provider.barcode_source, was_cached=False)

        _logger.info("Barcode not found: %s", code)
        return BarcodeLookupResult.not_found()

    def submit(self, barcode: str, record: FoodRecord) -> BarcodeCacheEntry:
        """Store a user-provided record for a barcode in both cache tiers."""
        code = _require_barcode(barcode)
        if not record.name.strip():
            raise InvalidInputError("Submitted food must have a name")
        calories, protein_g, carbs_g, fat_g = clamp_macros(
            record.calories, record.protein_g, record.carbs_g, record.fat_g
        )
        clamped = replace(
            record,
            calories=calories,
            protein_g=protein_g,
            carbs_g=carbs_g,
            fat_g=fat_g,
        )
        return self._write_back(code, clamped, BarcodeSource.USER_SUBMITTED)

    def scan_history(self, limit: int = 20) -> list[BarcodeCacheEntry]:
        return self.persistent_cache.history(limit)

    def clear(self) -> None:
        """Forget every cached barcode."""
        for entry in self.persistent_cache.history(len(self.persistent_cache)):
            self.fast_cache.remove(_fast_key(entry.barcode))
        self.persistent_cache.clear()

    async def _run_provider(
        self, provider: BarcodeAdapter, code: str
    ) -> FoodRecord | None:
        try:
            return await asyncio.wait_for(
                provider.lookup(code, provider.timeout_seconds),
                timeout=provider.timeout_seconds,
            )
        except TimeoutError:
            _logger.warning(
                "%s barcode lookup exceeded %.1fs",
                provider.barcode_source.value,
                provider.timeout_seconds,
            )
            return None

    def _write_back(
        self, code: str, record: FoodRecord, source: BarcodeSource
    ) -> BarcodeCacheEntry:
        entry = BarcodeCacheEntry(
            barcode=code,
            record=record,
            source=source,
            cached_at=self.persistent_cache.clock(),
        )
        try:
            entry, evicted = self.persistent_cache.put(code, record, source)
        except Exception:
            _logger.exception("Persistent barcode cache write failed: %s", code)
            evicted = []
        for evicted_code in evicted:
            self.fast_cache.remove(_fast_key(evicted_code))
        self.fast_cache.set(_fast_key(code), entry, ttl_seconds=self.fast_ttl_seconds)
        return entry

    def _persistent_get(self, code: str) -> BarcodeCacheEntry | None:
        try:
            return self.persistent_cache.get(code)
        except Exception:
            _logger.exception("Persistent barcode cache read failed: %s", code)
            return None

    def _count_hit(self, code: str, entry: BarcodeCacheEntry) -> None:
        try:
            hit_count = self.persistent_cache.record_hit(code)
        except Exception:
            _logger.exception("Persistent barcode cache hit update failed: %s", code)
            return
        if hit_count is not None:
            entry.hit_count = hit_count


def compute_confidence(record: FoodRecord) -> Confidence:
    """Grade how complete a barcode record is."""
    score = 0
    if len(record.name.strip()) > 2:
        score += 2
    if record.brand:
        score += 1
    if record.calories > 0:
        score += 2
    macros = (record.protein_g, record.carbs_g, record.fat_g)
    score += sum(1 for value in macros if value > 0)
    if record.image_url:
        score += 1
    if record.serving_label and record.serving_label != DEFAULT_SERVING_LABEL:
        score += 1
    if score >= _HIGH_CONFIDENCE:
        return Confidence.HIGH
    if score >= _MEDIUM_CONFIDENCE:
        return Confidence.MEDIUM
    return Confidence.LOW


def _found(
    record: FoodRecord, source: BarcodeSource, *, was_cached: bool
) -> BarcodeLookupResult:
    return BarcodeLookupResult(
        found=True,
        record=record,
        source=source,
        confidence=compute_confidence(record),
        was_cached=was_cached,
    )


def _require_barcode(barcode: str) -> str:
    code = clean_barcode(barcode)
    if not code:
        raise InvalidInputError("Barcode must contain digits")
    return code


def _fast_key(code: str) -> str:
    return f"barcode:{code}"
