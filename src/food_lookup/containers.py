"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from food_lookup.adapters.fatsecret_client import HttpxFatSecretClient
from food_lookup.adapters.fdc_client import HttpxFdcClient
from food_lookup.adapters.nutritionix_client import HttpxNutritionixClient
from food_lookup.adapters.open_food_facts_client import HttpxOpenFoodFactsClient
from food_lookup.adapters.supabase_kv_store import SupabaseKeyValueStore
from food_lookup.config import Settings
from food_lookup.services.barcode import BarcodeService
from food_lookup.services.barcode_cache import PersistentBarcodeCache
from food_lookup.services.cache import InMemoryCache
from food_lookup.services.engine import FoodEngine
from food_lookup.services.history import HistoryTracker
from food_lookup.services.search import FoodSearchService
from food_lookup.services.sources.base import SourceAdapter
from food_lookup.services.sources.fatsecret import FatSecretSourceAdapter
from food_lookup.services.sources.local_catalog import LocalCatalogAdapter
from food_lookup.services.sources.nutritionix import NutritionixSourceAdapter
from food_lookup.services.sources.open_food_facts import OpenFoodFactsSourceAdapter
from food_lookup.services.sources.restaurant_catalog import RestaurantCatalogAdapter
from food_lookup.services.sources.usda import UsdaSourceAdapter
from food_lookup.services.storage import InMemoryKeyValueStore, KeyValueStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    engine: FoodEngine
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    timeout = resolved_settings.source_timeout_seconds
    premium_timeout = timeout + resolved_settings.premium_timeout_bonus_seconds

    fdc_client = HttpxFdcClient.create(
        api_key=resolved_settings.fdc_api_key,
        base_url=resolved_settings.fdc_base_url,
    )
    off_client = HttpxOpenFoodFactsClient.create(
        base_url=resolved_settings.off_base_url,
        user_agent=resolved_settings.off_user_agent,
    )
    usda = UsdaSourceAdapter(client=fdc_client, timeout_seconds=timeout)
    open_food_facts = OpenFoodFactsSourceAdapter(
        client=off_client, timeout_seconds=timeout
    )
    closers: list[Callable[[], Awaitable[None]]] = [
        fdc_client.close,
        off_client.close,
    ]

    # List order is merge priority when sources return the same food.
    adapters: list[SourceAdapter] = [
        LocalCatalogAdapter(timeout_seconds=timeout),
        RestaurantCatalogAdapter(timeout_seconds=timeout),
        usda,
    ]
    if resolved_settings.fatsecret_configured:
        fatsecret_client = HttpxFatSecretClient.create(
            client_id=resolved_settings.fatsecret_client_id,
            client_secret=resolved_settings.fatsecret_client_secret,
            token_url=resolved_settings.fatsecret_token_url,
            api_url=resolved_settings.fatsecret_api_url,
        )
        adapters.append(
            FatSecretSourceAdapter(
                client=fatsecret_client, timeout_seconds=premium_timeout
            )
        )
        closers.append(fatsecret_client.close)
    adapters.append(open_food_facts)
    if resolved_settings.nutritionix_configured:
        nutritionix_client = HttpxNutritionixClient.create(
            app_id=resolved_settings.nutritionix_app_id,
            app_key=resolved_settings.nutritionix_app_key,
            base_url=resolved_settings.nutritionix_base_url,
        )
        adapters.append(
            NutritionixSourceAdapter(
                client=nutritionix_client, timeout_seconds=premium_timeout
            )
        )
        closers.append(nutritionix_client.close)

    store = _build_store(resolved_settings)
    search_service = FoodSearchService(
        adapters=adapters,
        cache=InMemoryCache(max_entries=resolved_settings.search_cache_max_entries),
        cache_ttl_seconds=resolved_settings.search_cache_ttl_seconds,
        debug=resolved_settings.debug,
    )
    barcode_service = BarcodeService(
        providers=[open_food_facts, usda],
        fast_cache=InMemoryCache(
            max_entries=resolved_settings.barcode_fast_cache_max_entries
        ),
        persistent_cache=PersistentBarcodeCache(
            store=store, max_entries=resolved_settings.barcode_cache_max_entries
        ),
        fast_ttl_seconds=resolved_settings.barcode_fast_cache_ttl_seconds,
        debug=resolved_settings.debug,
    )
    engine = FoodEngine(
        search_service=search_service,
        barcode_service=barcode_service,
        history=HistoryTracker(store),
        close_callbacks=closers,
    )

    async def close_resources() -> None:
        await engine.close()

    return AppContainer(
        settings=resolved_settings,
        engine=engine,
        close_resources=close_resources,
    )


def _build_store(settings: Settings) -> KeyValueStore:
    if not settings.supabase_configured:
        return InMemoryKeyValueStore()
    supabase_client = create_client(
        settings.supabase_url, settings.supabase_service_key
    )
    return SupabaseKeyValueStore(
        supabase_client, table_name=settings.supabase_kv_table
    )
