"""Tests for the offline catalog adapters."""

import asyncio

from food_lookup.catalog.common_foods import BASE_FOODS, COOKING_METHODS
from food_lookup.domain.foods import FoodRecord, SourceLabel, SourceStatus
from food_lookup.services.sources.local_catalog import (
    LocalCatalogAdapter,
    generate_records,
    match_score,
)
from food_lookup.services.sources.restaurant_catalog import RestaurantCatalogAdapter


def _by_name() -> dict[str, FoodRecord]:
    records = generate_records(BASE_FOODS, COOKING_METHODS)
    return {record.name: record for record in records}


def test_generated_catalog_has_unique_ids() -> None:
    records = generate_records(BASE_FOODS, COOKING_METHODS)
    ids = [record.external_id for record in records]

    assert ids[0] == "local-1"
    assert len(ids) == len(set(ids))


def test_cooked_variation_adjusts_macros() -> None:
    fried = _by_name()["Chicken Breast (Fried)"]

    assert fried.calories == 339
    assert fried.protein_g == 31
    assert fried.fat_g == 15.6
    assert fried.serving_label == "100g"
    assert not fried.is_per_serving


def test_raw_variant_skipped_for_poultry_and_pork() -> None:
    names = _by_name()

    assert "Chicken Breast (Raw)" not in names
    assert "Pork Chop (Raw)" not in names
    assert "Salmon (Raw)" in names


def test_portioned_food_reports_per_portion_values() -> None:
    wing = _by_name()["Chicken Wing"]

    assert wing.calories == 81
    assert wing.serving_label == "1 wing (40g)"
    assert wing.serving_grams == 40
    assert wing.is_per_serving


def test_match_score_tiers() -> None:
    assert match_score("Banana", "banana") == 100
    assert match_score("Banana Bread", "banana") == 80
    assert match_score("Sweet Potato", "potato") == 60
    assert match_score("Banana", "bananna") == 40
    assert match_score("Banana", "zz") == 0


def test_local_search_ranks_exact_match_first() -> None:
    adapter = LocalCatalogAdapter()

    result = asyncio.run(adapter.search("chicken breast", 25, 1.0))

    assert result.label == SourceLabel.LOCAL
    assert result.status == SourceStatus.OK
    assert result.records[0].name == "Chicken Breast"
    assert result.records[1].name.startswith("Chicken Breast (")
    assert result.total_count >= len(result.records)


def test_local_search_tolerates_typos() -> None:
    adapter = LocalCatalogAdapter()

    result = asyncio.run(adapter.search("bananna", 25, 1.0))

    assert result.records[0].name == "Banana"


def test_local_search_with_no_match_is_empty() -> None:
    result = asyncio.run(LocalCatalogAdapter().search("qx", 25, 1.0))

    assert result.records == []
    assert result.total_count == 0


def test_restaurant_search_builds_chain_records() -> None:
    adapter = RestaurantCatalogAdapter()

    result = asyncio.run(adapter.search("big mac", 25, 1.0))

    record = result.records[0]
    assert record.name == "Big Mac (McDonald's)"
    assert record.brand == "McDonald's"
    assert record.external_id == "mcdonalds_big_mac"
    assert record.serving_label == "1 sandwich"
    assert record.serving_grams == 200
    assert record.is_per_serving
    assert record.micronutrients == {"fiber": 3, "sodium": 1010, "sugar": 9}


def test_restaurant_search_orders_exact_then_popular() -> None:
    adapter = RestaurantCatalogAdapter()

    names = [item.name for item in adapter.find("whopper")]

    assert names == ["Whopper", "Whopper with Cheese", "Impossible Whopper"]


def test_restaurant_search_requires_every_term() -> None:
    adapter = RestaurantCatalogAdapter()

    items = adapter.find("burger king fries")

    assert [item.id for item in items] == ["bk_medium_fries"]


def test_restaurant_search_ignores_short_queries() -> None:
    result = asyncio.run(RestaurantCatalogAdapter().search("x", 25, 1.0))

    assert result.records == []
    assert result.status == SourceStatus.OK
