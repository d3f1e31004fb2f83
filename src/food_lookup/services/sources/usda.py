"""USDA FoodData Central source adapter."""

from dataclasses import dataclass

from food_lookup.adapters.fdc_client import FdcClient
from food_lookup.domain.errors import MalformedResponseError
from food_lookup.domain.foods import (
    BarcodeSource,
    FoodRecord,
    NutrientKey,
    SourceLabel,
    SourceResult,
    SourceStatus,
)
from food_lookup.services.sources.base import (
    BarcodeAdapter,
    SourceAdapter,
    build_record,
    call_guarded,
    optional_float,
    require_mapping,
    sanitize_query,
    to_float,
)

SEARCH_DATA_TYPES = ("SR Legacy", "Foundation", "Branded", "Survey (FNDDS)")
BARCODE_DATA_TYPES = ("Branded",)
BARCODE_PAGE_SIZE = 3
_MAX_BRAND_SUFFIX_LENGTH = 40
_UNIT_ALIASES = {"grm": "g", "mlt": "ml"}

_NUTRIENT_IDS = {
    "calories": 1008,
    "protein": 1003,
    "fat": 1004,
    "carbs": 1005,
}

_MICRONUTRIENT_IDS = {
    NutrientKey.FIBER: 1079,
    NutrientKey.SUGAR: 2000,
    NutrientKey.SODIUM: 1093,
    NutrientKey.SATURATED_FAT: 1258,
    NutrientKey.TRANS_FAT: 1257,
    NutrientKey.CHOLESTEROL: 1253,
    NutrientKey.CALCIUM: 1087,
    NutrientKey.IRON: 1089,
    NutrientKey.MAGNESIUM: 1090,
    NutrientKey.PHOSPHORUS: 1091,
    NutrientKey.POTASSIUM: 1092,
    NutrientKey.ZINC: 1095,
    NutrientKey.COPPER: 1098,
    NutrientKey.MANGANESE: 1101,
    NutrientKey.SELENIUM: 1103,
    NutrientKey.VITAMIN_A: 1106,
    NutrientKey.VITAMIN_C: 1162,
    NutrientKey.VITAMIN_D: 1114,
    NutrientKey.VITAMIN_E: 1109,
    NutrientKey.VITAMIN_K: 1185,
    NutrientKey.VITAMIN_B1: 1165,
    NutrientKey.VITAMIN_B2: 1166,
    NutrientKey.VITAMIN_B3: 1167,
    NutrientKey.VITAMIN_B5: 1170,
    NutrientKey.VITAMIN_B6: 1175,
    NutrientKey.FOLATE: 1177,
    NutrientKey.VITAMIN_B12: 1178,
}

NUTRIENT_NUMBERS = tuple(
    str(nutrient_id)
    for nutrient_id in (*_NUTRIENT_IDS.values(), *_MICRONUTRIENT_IDS.values())
)


@dataclass
class UsdaSourceAdapter(SourceAdapter, BarcodeAdapter):
    """Generic and branded food search against FoodData Central."""

    client: FdcClient
    timeout_seconds: float = 4.0
    label: SourceLabel = SourceLabel.USDA
    barcode_source: BarcodeSource = BarcodeSource.USDA
    premium_only: bool = False

    async def search(
        self, query: str, max_results: int, timeout: float
    ) -> SourceResult:
        """Search all FDC data types for a query."""
        cleaned = sanitize_query(query)
        if not cleaned:
            return SourceResult.empty(self.label, SourceStatus.OK)
        result, status = await call_guarded(
            lambda: self._search(cleaned, max_results, timeout),
            label=self.label,
            action="search",
        )
        return result if result is not None else SourceResult.empty(self.label, status)

    async def lookup(self, barcode: str, timeout: float) -> FoodRecord | None:
        """Find a branded food by its GTIN/UPC."""
        record, _ = await call_guarded(
            lambda: self._lookup(barcode, timeout),
            label=self.label,
            action=f"lookup:{barcode}",
        )
        return record

    async def _search(
        self, query: str, max_results: int, timeout: float
    ) -> SourceResult:
        payload = require_mapping(
            await self.client.search_foods(
                query,
                page_size=max_results,
                data_types=SEARCH_DATA_TYPES,
                nutrient_numbers=NUTRIENT_NUMBERS,
                timeout=timeout,
            ),
            context="usda search",
        )
        records = [
            parse_food(food)
            for food in _foods(payload)
            if food.get("description")
            and _nutrient_amount(_nutrients(food), _NUTRIENT_IDS["calories"]) > 0
        ]
        return SourceResult(
            label=self.label,
            records=records,
            total_count=int(to_float(payload.get("totalHits"))),
        )

    async def _lookup(self, barcode: str, timeout: float) -> FoodRecord | None:
        payload = require_mapping(
            await self.client.search_foods(
                barcode,
                page_size=BARCODE_PAGE_SIZE,
                data_types=BARCODE_DATA_TYPES,
                timeout=timeout,
            ),
            context="usda barcode search",
        )
        foods = [food for food in _foods(payload) if food.get("description")]
        if not foods:
            return None
        stripped = barcode.lstrip("0")
        match = next(
            (food for food in foods if food.get("gtinUpc") in {barcode, stripped}),
            foods[0],
        )
        return parse_food(match, external_id=barcode)


def parse_food(food: dict[str, object], external_id: str | None = None) -> FoodRecord:
    """Convert an FDC search hit into a per-100g record."""
    nutrients = _nutrients(food)
    brand = food.get("brandOwner") or food.get("brandName") or None
    serving_size = optional_float(food.get("servingSize")) or 100.0
    unit = str(food.get("servingSizeUnit") or "g").lower()
    serving_unit = _UNIT_ALIASES.get(unit, unit)
    household = food.get("householdServingFullText")
    size_text = f"{_format_number(serving_size)}{serving_unit}"
    serving_label = f"{household} ({size_text})" if household else size_text
    micronutrients: dict[str, float] = {}
    for key, nutrient_id in _MICRONUTRIENT_IDS.items():
        value = _optional_nutrient(nutrients, nutrient_id)
        if value is not None:
            micronutrients[key.value] = round(value, 2)
    return build_record(
        external_id=external_id or str(food.get("gtinUpc") or f"usda-{food['fdcId']}"),
        name=_format_name(str(food["description"]), brand),
        calories=round(_nutrient_amount(nutrients, _NUTRIENT_IDS["calories"])),
        protein_g=round(_nutrient_amount(nutrients, _NUTRIENT_IDS["protein"]), 1),
        carbs_g=round(_nutrient_amount(nutrients, _NUTRIENT_IDS["carbs"]), 1),
        fat_g=round(_nutrient_amount(nutrients, _NUTRIENT_IDS["fat"]), 1),
        brand=str(brand) if brand else None,
        serving_label=serving_label,
        serving_grams=100.0,
        serving_unit="g",
        is_per_serving=False,
        micronutrients=micronutrients,
    )


def _foods(payload: dict[str, object]) -> list[dict[str, object]]:
    foods = payload.get("foods") or []
    if not isinstance(foods, list):
        raise MalformedResponseError("usda search: foods is not a list")
    return [food for food in foods if isinstance(food, dict)]


def _nutrients(food: dict[str, object]) -> list[dict[str, object]]:
    nutrients = food.get("foodNutrients") or []
    if not isinstance(nutrients, list):
        return []
    return [nutrient for nutrient in nutrients if isinstance(nutrient, dict)]


def _optional_nutrient(
    nutrients: list[dict[str, object]], nutrient_id: int
) -> float | None:
    for nutrient in nutrients:
        nutrient_info = nutrient.get("nutrient") or {}
        found_id = nutrient.get("nutrientId") or (
            nutrient_info.get("id") if isinstance(nutrient_info, dict) else None
        )
        if found_id == nutrient_id:
            return optional_float(nutrient.get("value", nutrient.get("amount")))
    return None


def _nutrient_amount(nutrients: list[dict[str, object]], nutrient_id: int) -> float:
    return _optional_nutrient(nutrients, nutrient_id) or 0.0


def _format_name(description: str, brand: object) -> str:
    name = description
    if name == name.upper() and len(name) > 3:
        name = _title_case(name)
    if brand and str(brand).lower() not in name.lower():
        primary = str(brand).split(",")[0].strip()
        if primary and len(primary) < _MAX_BRAND_SUFFIX_LENGTH:
            name = f"{name} ({primary})"
    return name


def _title_case(text: str) -> str:
    words = text.lower().split(" ")
    return " ".join(word[:1].upper() + word[1:] for word in words)


def _format_number(value: float) -> str:
    return str(int(value)) if value.is_integer() else str(value)
