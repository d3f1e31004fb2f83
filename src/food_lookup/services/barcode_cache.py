"""Persistent barcode cache backed by the host key-value store."""

import json
import logging
from collections.abc import Callable
from dataclasses import asdict, dataclass, field
from datetime import datetime

from food_lookup.domain.foods import BarcodeCacheEntry, BarcodeSource, FoodRecord
from food_lookup.services.cache import utc_now
from food_lookup.services.storage import KeyValueStore

_logger = logging.getLogger(__name__)

_ENTRY_PREFIX = "barcode:"
_INDEX_KEY = "barcode:index"


@dataclass
class _IndexEntry:
    cached_at: datetime
    hit_count: int
    source: BarcodeSource


@dataclass
class PersistentBarcodeCache:
    """Capacity-bounded barcode cache evicting the oldest cached entry.

    Each record is stored as JSON under its own key. A separate index keeps
    ``cached_at``, ``hit_count`` and ``source`` per barcode so hit accounting
    and eviction never need to deserialize the records themselves.
    """

    store: KeyValueStore
    max_entries: int = 200
    clock: Callable[[], datetime] = utc_now
    _index: dict[str, _IndexEntry] | None = field(default=None, init=False)

    def __len__(self) -> int:
        return len(self._load_index())

    def __contains__(self, barcode: str) -> bool:
        return barcode in self._load_index()

    def get(self, barcode: str) -> BarcodeCacheEntry | None:
        """Return the cached entry for a barcode without counting a hit."""
        index = self._load_index()
        meta = index.get(barcode)
        if meta is None:
            return None
        raw = self.store.get(_entry_key(barcode))
        try:
            record = _parse_record(json.loads(raw)) if raw is not None else None
        except (AttributeError, KeyError, TypeError, ValueError):
            _logger.warning("Unreadable barcode cache entry: %s", barcode)
            record = None
        if record is None:
            _logger.warning("Dropping barcode index entry: %s", barcode)
            index.pop(barcode, None)
            self._save_index()
            return None
        return BarcodeCacheEntry(
            barcode=barcode,
            record=record,
            source=meta.source,
            cached_at=meta.cached_at,
            hit_count=meta.hit_count,
        )

    def put(
        self, barcode: str, record: FoodRecord, source: BarcodeSource
    ) -> tuple[BarcodeCacheEntry, list[str]]:
        """Write an entry and return it together with any evicted barcodes."""
        index = self._load_index()
        existing = index.get(barcode)
        hit_count = existing.hit_count + 1 if existing else 0
        cached_at = self.clock()
        self.store.set(_entry_key(barcode), json.dumps(asdict(record)).encode())
        index[barcode] = _IndexEntry(
            cached_at=cached_at, hit_count=hit_count, source=source
        )
        evicted = self._evict_overflow()
        self._save_index()
        entry = BarcodeCacheEntry(
            barcode=barcode,
            record=record,
            source=source,
            cached_at=cached_at,
            hit_count=hit_count,
        )
        return entry, evicted

    def record_hit(self, barcode: str) -> int | None:
        """Increment the hit counter for a barcode and return the new value."""
        index = self._load_index()
        meta = index.get(barcode)
        if meta is None:
            return None
        meta.hit_count += 1
        self._save_index()
        return meta.hit_count

    def history(self, limit: int = 20) -> list[BarcodeCacheEntry]:
        """Return cached entries, most recently cached first."""
        index = self._load_index()
        newest = sorted(index, key=lambda code: index[code].cached_at, reverse=True)
        entries: list[BarcodeCacheEntry] = []
        for barcode in newest[:limit]:
            entry = self.get(barcode)
            if entry is not None:
                entries.append(entry)
        return entries

    def clear(self) -> None:
        """Remove every cached entry and the index."""
        for barcode in list(self._load_index()):
            self.store.remove(_entry_key(barcode))
        self.store.remove(_INDEX_KEY)
        self._index = {}

    def _evict_overflow(self) -> list[str]:
        index = self._load_index()
        evicted: list[str] = []
        while len(index) > self.max_entries:
            oldest = min(index, key=lambda code: index[code].cached_at)
            index.pop(oldest)
            self.store.remove(_entry_key(oldest))
            evicted.append(oldest)
        if evicted:
            _logger.info("Evicted %s barcode cache entries", len(evicted))
        return evicted

    def _load_index(self) -> dict[str, _IndexEntry]:
        if self._index is not None:
            return self._index
        raw = self.store.get(_INDEX_KEY)
        self._index = _parse_index(raw) if raw else {}
        return self._index

    def _save_index(self) -> None:
        payload = {
            barcode: {
                "cached_at": meta.cached_at.isoformat(),
                "hit_count": meta.hit_count,
                "source": meta.source.value,
            }
            for barcode, meta in self._load_index().items()
        }
        self.store.set(_INDEX_KEY, json.dumps(payload).encode())


def _entry_key(barcode: str) -> str:
    return f"{_ENTRY_PREFIX}{barcode}"


def _parse_index(raw: bytes) -> dict[str, _IndexEntry]:
    try:
        payload = json.loads(raw)
    except ValueError:
        _logger.warning("Discarding unreadable barcode cache index")
        return {}
    if not isinstance(payload, dict):
        _logger.warning("Discarding barcode cache index that is not an object")
        return {}
    index: dict[str, _IndexEntry] = {}
    for barcode, meta in payload.items():
        try:
            index[barcode] = _IndexEntry(
                cached_at=datetime.fromisoformat(meta["cached_at"]),
                hit_count=int(meta.get("hit_count", 0)),
                source=BarcodeSource(meta["source"]),
            )
        except (AttributeError, KeyError, TypeError, ValueError):
            _logger.warning("Skipping unreadable barcode cache entry: %s", barcode)
    return index


def _parse_record(payload: dict[str, object]) -> FoodRecord:
    micronutrients = payload.get("micronutrients") or {}
    return FoodRecord(
        external_id=str(payload["external_id"]),
        name=str(payload["name"]),
        calories=float(payload["calories"]),
        protein_g=float(payload["protein_g"]),
        carbs_g=float(payload["carbs_g"]),
        fat_g=float(payload["fat_g"]),
        brand=payload.get("brand"),
        image_url=payload.get("image_url"),
        serving_label=str(payload.get("serving_label", "100g")),
        serving_grams=float(payload.get("serving_grams", 100.0)),
        serving_unit=str(payload.get("serving_unit", "g")),
        is_per_serving=bool(payload.get("is_per_serving", False)),
        micronutrients={key: float(value) for key, value in micronutrients.items()},
    )
