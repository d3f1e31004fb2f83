"""FatSecret source adapter."""

from dataclasses import dataclass

from food_lookup.adapters.fatsecret_client import FatSecretClient
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
    call_guarded,
    optional_float,
    require_mapping,
    sanitize_query,
    to_float,
)

_MICRONUTRIENT_FIELDS = {
    NutrientKey.FIBER: "fiber",
    NutrientKey.SUGAR: "sugar",
    NutrientKey.SODIUM: "sodium",
    NutrientKey.SATURATED_FAT: "saturated_fat",
    NutrientKey.TRANS_FAT: "trans_fat",
    NutrientKey.CHOLESTEROL: "cholesterol",
    NutrientKey.CALCIUM: "calcium",
    NutrientKey.IRON: "iron",
    NutrientKey.POTASSIUM: "potassium",
    NutrientKey.VITAMIN_A: "vitamin_a",
    NutrientKey.VITAMIN_C: "vitamin_c",
    NutrientKey.VITAMIN_D: "vitamin_d",
}


@dataclass
class FatSecretSourceAdapter(SourceAdapter):
    """Premium text search against the FatSecret platform."""

    client: FatSecretClient
    timeout_seconds: float = 5.0
    label: SourceLabel = SourceLabel.FATSECRET
    premium_only: bool = True

    async def search(
        self, query: str, max_results: int, timeout: float
    ) -> SourceResult:
        """Search FatSecret foods, keeping the default serving of each."""
        cleaned = sanitize_query(query)
        if not cleaned:
            return SourceResult.empty(self.label, SourceStatus.OK)
        result, status = await call_guarded(
            lambda: self._search(cleaned, max_results, timeout),
            label=self.label,
            action="search",
        )
        return result if result is not None else SourceResult.empty(self.label, status)

    async def _search(
        self, query: str, max_results: int, timeout: float
    ) -> SourceResult:
        payload = require_mapping(
            await self.client.search_foods(query, max_results, timeout=timeout),
            context="fatsecret search",
        )
        search = payload.get("foods_search") or {}
        results = search.get("results") or {} if isinstance(search, dict) else {}
        foods = _as_list(results.get("food") if isinstance(results, dict) else None)
        records = [
            record
            for food in foods
            if isinstance(food, dict) and (record := parse_food(food)) is not None
        ]
        total = search.get("total_results") if isinstance(search, dict) else None
        return SourceResult(
            label=self.label, records=records, total_count=int(to_float(total))
        )


def parse_food(food: dict[str, object]) -> FoodRecord | None:
    """Convert a FatSecret food into a per-serving record."""
    servings = food.get("servings") or {}
    if not isinstance(servings, dict):
        return None
    serving_list = _as_list(servings.get("serving"))
    if not serving_list or not isinstance(serving_list[0], dict):
        return None
    serving = serving_list[0]
    calories = round(to_float(serving.get("calories")))
    protein = round(to_float(serving.get("protein")), 1)
    carbs = round(to_float(serving.get("carbohydrate")), 1)
    fat = round(to_float(serving.get("fat")), 1)
    if not any((calories, protein, carbs, fat)):
        return None
    amount = optional_float(serving.get("metric_serving_amount")) or 100.0
    unit = str(serving.get("metric_serving_unit") or "g").lower()
    amount_text = str(int(amount)) if amount.is_integer() else str(amount)
    brand = food.get("brand_name") or None
    name = str(food["food_name"])
    micronutrients: dict[str, float] = {}
    for key, field in _MICRONUTRIENT_FIELDS.items():
        value = optional_float(serving.get(field))
        if value is not None:
            micronutrients[key.value] = round(value, 2)
    return build_record(
        external_id=f"fs-{food['food_id']}",
        name=f"{name} ({brand})" if brand else name,
        calories=calories,
        protein_g=protein,
        carbs_g=carbs,
        fat_g=fat,
        brand=str(brand) if brand else None,
        serving_label=str(serving.get("serving_description") or f"{amount_text}{unit}"),
        serving_grams=amount,
        serving_unit=unit,
        is_per_serving=True,
        micronutrients=micronutrients,
    )


def _as_list(value: object) -> list[object]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]
