"""Offline restaurant-chain catalog adapter."""

from collections.abc import Sequence
from dataclasses import dataclass

from food_lookup.catalog.restaurant_foods import RESTAURANT_ITEMS, RestaurantItem
from food_lookup.domain.foods import (
    FoodRecord,
    NutrientKey,
    SourceLabel,
    SourceResult,
    SourceStatus,
)
from food_lookup.services.sources.base import (
    SourceAdapter,
    build_record,
    sanitize_query,
)

_MIN_QUERY_LENGTH = 2


@dataclass
class RestaurantCatalogAdapter(SourceAdapter):
    """Matches chain menu items where every query term hits name, chain or category."""

    items: Sequence[RestaurantItem] = RESTAURANT_ITEMS
    timeout_seconds: float = 4.0
    label: SourceLabel = SourceLabel.RESTAURANT
    premium_only: bool = False

    async def search(
        self, query: str, max_results: int, timeout: float
    ) -> SourceResult:
        matches = self.find(query)
        records = [_to_record(item) for item in matches]
        return SourceResult(
            label=self.label,
            records=records,
            total_count=len(records),
            status=SourceStatus.OK,
        )

    def find(self, query: str) -> list[RestaurantItem]:
        """Return matching items: exact name first, then popular, then by name."""
        needle = sanitize_query(query).lower()
        if len(needle) < _MIN_QUERY_LENGTH:
            return []
        terms = needle.split()
        matches = [
            item
            for item in self.items
            if all(
                term in f"{item.name} {item.chain} {item.category}".lower()
                for term in terms
            )
        ]
        return sorted(
            matches,
            key=lambda item: (
                item.name.lower() != needle,
                not item.popular,
                item.name.lower(),
            ),
        )


def _to_record(item: RestaurantItem) -> FoodRecord:
    micronutrients = {
        key.value: value
        for key, value in (
            (NutrientKey.FIBER, item.fiber_g),
            (NutrientKey.SODIUM, item.sodium_mg),
            (NutrientKey.SUGAR, item.sugar_g),
        )
        if value is not None
    }
    return build_record(
        external_id=item.id,
        name=f"{item.name} ({item.chain})",
        calories=item.calories,
        protein_g=item.protein_g,
        carbs_g=item.carbs_g,
        fat_g=item.fat_g,
        brand=item.chain,
        serving_label=item.serving,
        serving_grams=item.serving_grams,
        serving_unit="g",
        is_per_serving=True,
        micronutrients=micronutrients,
    )
