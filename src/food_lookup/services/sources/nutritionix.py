"""Nutritionix source adapter."""

import logging
from dataclasses import dataclass

import httpx

from food_lookup.adapters.nutritionix_client import NutritionixClient
from food_lookup.domain.errors import MalformedResponseError
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

MAX_RESULTS = 10

_logger = logging.getLogger(__name__)

_NF_FIELDS = {
    NutrientKey.FIBER: "nf_dietary_fiber",
    NutrientKey.SUGAR: "nf_sugars",
    NutrientKey.SODIUM: "nf_sodium",
    NutrientKey.SATURATED_FAT: "nf_saturated_fat",
    NutrientKey.CHOLESTEROL: "nf_cholesterol",
    NutrientKey.POTASSIUM: "nf_potassium",
    NutrientKey.CALCIUM: "nf_calcium",
    NutrientKey.IRON: "nf_iron",
    NutrientKey.VITAMIN_D: "nf_vitamin_d",
}

_ATTR_IDS = {
    NutrientKey.CALCIUM: 301,
    NutrientKey.IRON: 303,
    NutrientKey.MAGNESIUM: 304,
    NutrientKey.PHOSPHORUS: 305,
    NutrientKey.ZINC: 309,
    NutrientKey.COPPER: 312,
    NutrientKey.MANGANESE: 315,
    NutrientKey.SELENIUM: 317,
    NutrientKey.VITAMIN_A: 320,
    NutrientKey.VITAMIN_C: 401,
    NutrientKey.VITAMIN_D: 324,
    NutrientKey.VITAMIN_E: 323,
    NutrientKey.VITAMIN_K: 430,
    NutrientKey.VITAMIN_B1: 404,
    NutrientKey.VITAMIN_B2: 405,
    NutrientKey.VITAMIN_B3: 406,
    NutrientKey.VITAMIN_B5: 410,
    NutrientKey.VITAMIN_B6: 415,
    NutrientKey.FOLATE: 417,
    NutrientKey.VITAMIN_B12: 418,
    NutrientKey.TRANS_FAT: 605,
}


@dataclass
class NutritionixSourceAdapter(SourceAdapter):
    """Premium search over Nutritionix common and branded foods.

    Instant search returns names only for common foods, so their macros are
    filled in with one follow-up natural-language nutrients request. A failure
    of that follow-up keeps the branded results.
    """

    client: NutritionixClient
    timeout_seconds: float = 5.0
    label: SourceLabel = SourceLabel.NUTRITIONIX
    premium_only: bool = True

    async def search(
        self, query: str, max_results: int, timeout: float
    ) -> SourceResult:
        """Search Nutritionix and enrich common foods with full nutrients."""
        cleaned = sanitize_query(query)
        if not cleaned:
            return SourceResult.empty(self.label, SourceStatus.OK)
        result, status = await call_guarded(
            lambda: self._search(cleaned, min(max_results, MAX_RESULTS), timeout),
            label=self.label,
            action="search",
        )
        return result if result is not None else SourceResult.empty(self.label, status)

    async def _search(
        self, query: str, max_results: int, timeout: float
    ) -> SourceResult:
        payload = require_mapping(
            await self.client.search_instant(query, timeout=timeout),
            context="nutritionix instant search",
        )
        common = [f for f in payload.get("common") or [] if isinstance(f, dict)]
        branded = [f for f in payload.get("branded") or [] if isinstance(f, dict)]
        common_names = [
            str(food["food_name"])
            for food in common[:max_results]
            if food.get("food_name")
        ]
        records = await self._common_records(common_names, timeout)
        records += [
            record
            for food in branded[:max_results]
            if (record := parse_branded_food(food)).calories > 0
        ]
        return SourceResult(label=self.label, records=records, total_count=len(records))

    async def _common_records(
        self, names: list[str], timeout: float
    ) -> list[FoodRecord]:
        if not names:
            return []
        try:
            payload = require_mapping(
                await self.client.natural_nutrients(names, timeout=timeout),
                context="nutritionix nutrients",
            )
            foods = payload.get("foods") or []
            return [
                parse_nutrient_food(food) for food in foods if isinstance(food, dict)
            ]
        except (
            httpx.HTTPError,
            MalformedResponseError,
            KeyError,
            TypeError,
            ValueError,
        ) as exc:
            _logger.warning("nutritionix nutrient follow-up failed: %s", exc)
            return []


def parse_branded_food(food: dict[str, object]) -> FoodRecord:
    """Convert an instant-search branded hit; only calories are known."""
    quantity = to_float(food.get("serving_qty")) or 1.0
    unit = str(food.get("serving_unit") or "serving")
    photo = food.get("photo") if isinstance(food.get("photo"), dict) else {}
    return build_record(
        external_id=f"nix-{food.get('nix_item_id')}",
        name=str(food.get("brand_name_item_name") or food["food_name"]),
        calories=round(to_float(food.get("nf_calories"))),
        protein_g=0.0,
        carbs_g=0.0,
        fat_g=0.0,
        brand=str(food["brand_name"]) if food.get("brand_name") else None,
        image_url=photo.get("thumb") or None,
        serving_label=f"{_format_number(quantity)} {unit}",
        serving_grams=quantity,
        serving_unit=unit,
        is_per_serving=True,
    )


def parse_nutrient_food(food: dict[str, object]) -> FoodRecord:
    """Convert a natural/nutrients food into a per-serving record."""
    name = str(food["food_name"])
    brand = food.get("brand_name") or None
    grams = optional_float(food.get("serving_weight_grams")) or 100.0
    quantity = to_float(food.get("serving_qty")) or 1.0
    photo = food.get("photo") if isinstance(food.get("photo"), dict) else {}
    item_id = food.get("nix_item_id")
    slug = "-".join(name.lower().split())
    external_id = f"nix-{item_id}" if item_id else f"nix-{slug}"
    return build_record(
        external_id=external_id,
        name=f"{name} ({brand})" if brand else name[:1].upper() + name[1:],
        calories=round(to_float(food.get("nf_calories"))),
        protein_g=round(to_float(food.get("nf_protein")), 1),
        carbs_g=round(to_float(food.get("nf_total_carbohydrate")), 1),
        fat_g=round(to_float(food.get("nf_total_fat")), 1),
        brand=str(brand) if brand else None,
        image_url=photo.get("thumb") or None,
        serving_label=(
            f"{_format_number(quantity)} {food.get('serving_unit') or 'serving'}"
            f" ({round(grams)}g)"
        ),
        serving_grams=grams,
        serving_unit="g",
        is_per_serving=True,
        micronutrients=_micronutrients(food),
    )


def _micronutrients(food: dict[str, object]) -> dict[str, float]:
    full_nutrients = {
        entry.get("attr_id"): entry.get("value")
        for entry in food.get("full_nutrients") or []
        if isinstance(entry, dict)
    }
    values: dict[str, float] = {}
    for key, attr_id in _ATTR_IDS.items():
        value = optional_float(full_nutrients.get(attr_id))
        if value is not None:
            values[key.value] = round(value, 2)
    for key, field in _NF_FIELDS.items():
        value = optional_float(food.get(field))
        if value is not None:
            values[key.value] = round(value, 2)
    return values


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)
