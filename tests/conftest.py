"""Shared test fixtures."""

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

import pytest

from food_lookup.config import Settings
from food_lookup.containers import AppContainer
from food_lookup.domain.foods import (
    BarcodeSource,
    FoodRecord,
    SourceLabel,
    SourceResult,
    SourceStatus,
)
from food_lookup.services.barcode import BarcodeService
from food_lookup.services.barcode_cache import PersistentBarcodeCache
from food_lookup.services.cache import InMemoryCache
from food_lookup.services.engine import FoodEngine
from food_lookup.services.history import HistoryTracker
from food_lookup.services.search import FoodSearchService
from food_lookup.services.sources.base import BarcodeAdapter, SourceAdapter
from food_lookup.services.storage import InMemoryKeyValueStore


def make_record(name: str, **overrides: object) -> FoodRecord:
    """Build a record with plausible macros."""
    values: dict[str, object] = {
        "external_id": name.lower().replace(" ", "-"),
        "name": name,
        "calories": 120.0,
        "protein_g": 10.0,
        "carbs_g": 12.0,
        "fat_g": 4.0,
    }
    values.update(overrides)
    return FoodRecord(**values)


@dataclass
class FakeClock:
    """Controllable clock for caches and history."""

    now: datetime = field(default_factory=lambda: datetime(2026, 1, 1, tzinfo=UTC))

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


@dataclass
class FakeSourceAdapter(SourceAdapter):
    """Source adapter returning canned records."""

    label: SourceLabel
    records: list[FoodRecord] = field(default_factory=list)
    status: SourceStatus = SourceStatus.OK
    total_count: int | None = None
    premium_only: bool = False
    timeout_seconds: float = 1.0
    delay: float = 0.0
    queries: list[str] = field(default_factory=list)

    async def search(
        self, query: str, max_results: int, timeout: float
    ) -> SourceResult:
        self.queries.append(query)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.status != SourceStatus.OK:
            return SourceResult.empty(self.label, self.status)
        total = len(self.records) if self.total_count is None else self.total_count
        return SourceResult(
            label=self.label, records=list(self.records), total_count=total
        )


@dataclass
class FakeBarcodeAdapter(BarcodeAdapter):
    """Barcode adapter backed by a dict of known products."""

    barcode_source: BarcodeSource
    products: dict[str, FoodRecord] = field(default_factory=dict)
    timeout_seconds: float = 1.0
    delay: float = 0.0
    calls: list[str] = field(default_factory=list)

    async def lookup(self, barcode: str, timeout: float) -> FoodRecord | None:
        self.calls.append(barcode)
        if self.delay:
            await asyncio.sleep(self.delay)
        return self.products.get(barcode)


def build_engine(
    adapters: list[SourceAdapter] | None = None,
    providers: list[BarcodeAdapter] | None = None,
    store: InMemoryKeyValueStore | None = None,
    clock: FakeClock | None = None,
) -> FoodEngine:
    """Assemble an engine over fakes and an in-memory store."""
    resolved_store = store if store is not None else InMemoryKeyValueStore()
    resolved_clock = clock or FakeClock()
    search_service = FoodSearchService(
        adapters=adapters or [],
        cache=InMemoryCache(max_entries=50, clock=resolved_clock),
    )
    barcode_service = BarcodeService(
        providers=providers or [],
        fast_cache=InMemoryCache(max_entries=100, clock=resolved_clock),
        persistent_cache=PersistentBarcodeCache(
            store=resolved_store, clock=resolved_clock
        ),
    )
    return FoodEngine(
        search_service=search_service,
        barcode_service=barcode_service,
        history=HistoryTracker(resolved_store, clock=resolved_clock),
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        fdc_api_key="fdc-key",
        fatsecret_client_id=None,
        fatsecret_client_secret=None,
        nutritionix_app_id=None,
        nutritionix_app_key=None,
        supabase_url=None,
        supabase_service_key=None,
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def local_adapter() -> FakeSourceAdapter:
    return FakeSourceAdapter(
        label=SourceLabel.LOCAL,
        records=[
            make_record("Banana", calories=105, serving_label="1 medium (118g)"),
            make_record("Banana Bread", calories=326),
        ],
    )


@pytest.fixture
def off_provider() -> FakeBarcodeAdapter:
    return FakeBarcodeAdapter(
        barcode_source=BarcodeSource.OPENFOODFACTS,
        products={
            "3017620422003": make_record(
                "Nutella (Ferrero)",
                external_id="3017620422003",
                calories=539,
                protein_g=6.3,
                carbs_g=57.5,
                fat_g=30.9,
                brand="Ferrero",
                image_url="https://images.example/nutella.jpg",
                serving_label="15 g",
                serving_grams=15.0,
            )
        },
    )


@pytest.fixture
def container(
    settings: Settings,
    clock: FakeClock,
    local_adapter: FakeSourceAdapter,
    off_provider: FakeBarcodeAdapter,
) -> AppContainer:
    engine = build_engine(
        adapters=[local_adapter], providers=[off_provider], clock=clock
    )

    async def close_resources() -> None:
        await engine.close()

    return AppContainer(
        settings=settings, engine=engine, close_resources=close_resources
    )


@pytest.fixture
def engine_logs(
    caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch
) -> pytest.LogCaptureFixture:
    """Capture engine logs even after the app disabled propagation."""
    monkeypatch.setattr(logging.getLogger("food_lookup"), "propagate", True)
    return caplog
