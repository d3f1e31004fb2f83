"""Open Food Facts source adapter."""

from dataclasses import dataclass

from food_lookup.adapters.open_food_facts_client import OpenFoodFactsClient
from food_lookup.domain.errors import MalformedResponseError
from food_lookup.domain.foods import (
    DEFAULT_SERVING_LABEL,
    BarcodeSource,
    FoodRecord,
    NutrientKey,
    SourceLabel,
    SourceResult,
    SourceStatus,
)
from food_lookup.services.serving import parse_serving_grams
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

KJ_PER_KCAL = 4.184

_MICRONUTRIENT_FIELDS = {
    NutrientKey.FIBER: "fiber",
    NutrientKey.SUGAR: "sugars",
    NutrientKey.SODIUM: "sodium",
    NutrientKey.SATURATED_FAT: "saturated-fat",
    NutrientKey.TRANS_FAT: "trans-fat",
    NutrientKey.CHOLESTEROL: "cholesterol",
    NutrientKey.CALCIUM: "calcium",
    NutrientKey.IRON: "iron",
    NutrientKey.MAGNESIUM: "magnesium",
    NutrientKey.POTASSIUM: "potassium",
    NutrientKey.ZINC: "zinc",
    NutrientKey.COPPER: "copper",
    NutrientKey.MANGANESE: "manganese",
    NutrientKey.SELENIUM: "selenium",
    NutrientKey.PHOSPHORUS: "phosphorus",
    NutrientKey.VITAMIN_A: "vitamin-a",
    NutrientKey.VITAMIN_C: "vitamin-c",
    NutrientKey.VITAMIN_D: "vitamin-d",
    NutrientKey.VITAMIN_E: "vitamin-e",
    NutrientKey.VITAMIN_K: "vitamin-k",
    NutrientKey.VITAMIN_B1: "vitamin-b1",
    NutrientKey.VITAMIN_B2: "vitamin-b2",
    NutrientKey.VITAMIN_B3: "vitamin-pp",
    NutrientKey.VITAMIN_B5: "pantothenic-acid",
    NutrientKey.VITAMIN_B6: "vitamin-b6",
    NutrientKey.VITAMIN_B12: "vitamin-b12",
    NutrientKey.FOLATE: "vitamin-b9",
    NutrientKey.OMEGA3: "omega-3-fat",
    NutrientKey.OMEGA6: "omega-6-fat",
}


@dataclass
class OpenFoodFactsSourceAdapter(SourceAdapter, BarcodeAdapter):
    """Branded-product search and barcode lookup against Open Food Facts."""

    client: OpenFoodFactsClient
    timeout_seconds: float = 4.0
    label: SourceLabel = SourceLabel.OPEN_FOOD_FACTS
    barcode_source: BarcodeSource = BarcodeSource.OPENFOODFACTS
    premium_only: bool = False

    async def search(
        self, query: str, max_results: int, timeout: float
    ) -> SourceResult:
        """Search products by text."""
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
        """Look up a product by barcode through the v2 product endpoint."""
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
            await self.client.search_products(
                query, page_size=max_results, timeout=timeout
            ),
            context="open food facts search",
        )
        products = payload.get("products") or []
        if not isinstance(products, list):
            raise MalformedResponseError(
                "open food facts search: products is not a list"
            )
        records = [
            record
            for product in products
            if isinstance(product, dict)
            and (record := parse_product(product)) is not None
        ]
        return SourceResult(
            label=self.label,
            records=records,
            total_count=int(to_float(payload.get("count"))),
        )

    async def _lookup(self, barcode: str, timeout: float) -> FoodRecord | None:
        payload = await self.client.get_product(barcode, timeout=timeout)
        if not isinstance(payload, dict) or payload.get("status") != 1:
            return None
        product = payload.get("product")
        if not isinstance(product, dict):
            return None
        return parse_product(product, fallback_id=barcode)


def parse_product(
    product: dict[str, object], fallback_id: str = ""
) -> FoodRecord | None:
    """Convert an Open Food Facts product into a record, or None if unnamed."""
    name = product.get("product_name") or product.get("product_name_en")
    if not name:
        return None
    nutriments = product.get("nutriments") or {}
    if not isinstance(nutriments, dict):
        nutriments = {}
    per_serving = product.get("nutrition_data_per") == "serving"
    serving_text = str(product.get("serving_size") or DEFAULT_SERVING_LABEL)
    brands = product.get("brands") or None
    image = (
        product.get("image_front_small_url")
        or product.get("image_front_thumb_url")
        or product.get("image_front_url")
        or None
    )
    return build_record(
        external_id=str(product.get("code") or product.get("_id") or fallback_id),
        name=_format_name(str(name), brands),
        calories=_calories(nutriments, per_serving),
        protein_g=_macro(nutriments, "proteins", per_serving),
        carbs_g=_macro(nutriments, "carbohydrates", per_serving),
        fat_g=_macro(nutriments, "fat", per_serving),
        brand=str(brands) if brands else None,
        image_url=str(image) if image else None,
        serving_label=serving_text if per_serving else DEFAULT_SERVING_LABEL,
        serving_grams=parse_serving_grams(serving_text) if per_serving else 100.0,
        serving_unit="g",
        is_per_serving=per_serving,
        micronutrients=_micronutrients(nutriments, per_serving),
    )


def _format_name(name: str, brands: object) -> str:
    if not brands:
        return name
    brand_text = str(brands)
    if brand_text.lower() in name.lower():
        return name
    primary = brand_text.split(",")[0].strip()
    return f"{name} ({primary})" if primary else name


def _calories(nutriments: dict[str, object], per_serving: bool) -> float:
    keys = ["energy-kcal_serving"] if per_serving else []
    keys += ["energy-kcal_100g", "energy-kcal"]
    for key in keys:
        value = optional_float(nutriments.get(key))
        if value:
            return float(round(value))
    kilojoules = optional_float(nutriments.get("energy_100g"))
    if kilojoules:
        return float(round(kilojoules / KJ_PER_KCAL))
    return 0.0


def _macro(nutriments: dict[str, object], field: str, per_serving: bool) -> float:
    keys = [f"{field}_serving"] if per_serving else []
    keys += [f"{field}_100g", field]
    for key in keys:
        value = optional_float(nutriments.get(key))
        if value is not None:
            return round(value, 1)
    return 0.0


def _micronutrients(
    nutriments: dict[str, object], per_serving: bool
) -> dict[str, float]:
    values: dict[str, float] = {}
    for key, field in _MICRONUTRIENT_FIELDS.items():
        raw = nutriments.get(f"{field}_serving") if per_serving else None
        if raw is None:
            raw = nutriments.get(f"{field}_100g")
        value = optional_float(raw)
        if value is not None and value >= 0:
            values[key.value] = round(value, 2)
    return values
