"""Offline common-foods catalog adapter."""

from collections.abc import Sequence
from dataclasses import dataclass, field, replace

from Levenshtein import distance as levenshtein_distance

from food_lookup.catalog.common_foods import (
    BASE_FOODS,
    COOKING_METHODS,
    NO_RAW_VARIANT,
    BaseFood,
    CookingMethod,
)
from food_lookup.domain.foods import (
    DEFAULT_SERVING_LABEL,
    FoodRecord,
    SourceLabel,
    SourceResult,
    SourceStatus,
)
from food_lookup.services.sources.base import (
    SourceAdapter,
    build_record,
    sanitize_query,
)

MAX_RESULTS = 50
_FUZZY_MIN_QUERY_LENGTH = 3


@dataclass
class LocalCatalogAdapter(SourceAdapter):
    """Scored search over generated common foods and their cooked variants."""

    foods: Sequence[BaseFood] = BASE_FOODS
    methods: Sequence[CookingMethod] = COOKING_METHODS
    timeout_seconds: float = 4.0
    label: SourceLabel = SourceLabel.LOCAL
    premium_only: bool = False
    _records: list[FoodRecord] | None = field(default=None, init=False)

    @property
    def records(self) -> list[FoodRecord]:
        if self._records is None:
            self._records = generate_records(self.foods, self.methods)
        return self._records

    async def search(
        self, query: str, max_results: int, timeout: float
    ) -> SourceResult:
        scored = self.scored_matches(query)
        return SourceResult(
            label=self.label,
            records=[record for record, _ in scored[:MAX_RESULTS]],
            total_count=len(scored),
            status=SourceStatus.OK,
        )

    def scored_matches(self, query: str) -> list[tuple[FoodRecord, int]]:
        """Return matching records with their scores, best first."""
        needle = sanitize_query(query).lower()
        if not needle:
            return []
        scored = [
            (record, score)
            for record in self.records
            if (score := match_score(record.name, needle)) > 0
        ]
        scored.sort(key=lambda item: item[1], reverse=True)
        return scored


def match_score(name: str, needle: str) -> int:
    """Score a catalog name against a lowercased query; 0 means no match."""
    lowered = name.lower()
    if lowered == needle:
        return 100
    if lowered.startswith(needle):
        return 80
    if needle in lowered:
        return 60
    if len(needle) >= _FUZZY_MIN_QUERY_LENGTH:
        distance = levenshtein_distance(needle, lowered)
        if distance <= len(lowered) // 3 + 1:
            return max(0, 50 - distance * 10)
    return 0


def generate_records(
    foods: Sequence[BaseFood], methods: Sequence[CookingMethod]
) -> list[FoodRecord]:
    """Expand base foods into catalog records, cooked variants included."""
    records: list[FoodRecord] = []
    for food in foods:
        records.append(_portion_record(food, food.name, food))
        if not food.variations:
            continue
        for method in methods:
            if method.name == "Raw" and any(
                meat in food.name for meat in NO_RAW_VARIANT
            ):
                continue
            name = f"{food.name} ({method.name})"
            records.append(_portion_record(food, name, _cooked(food, method)))
    return [
        replace(record, external_id=f"local-{position}")
        for position, record in enumerate(records, start=1)
    ]


def _cooked(food: BaseFood, method: CookingMethod) -> BaseFood:
    return BaseFood(
        name=food.name,
        calories=food.calories * method.calorie_factor + method.added_fat_g * 9,
        protein_g=food.protein_g * method.protein_factor,
        carbs_g=food.carbs_g * method.carbs_factor,
        fat_g=food.fat_g + method.added_fat_g,
        category=food.category,
        portion=food.portion,
        unit=food.unit,
    )


def _portion_record(food: BaseFood, name: str, per_100g: BaseFood) -> FoodRecord:
    scale = food.portion / 100
    per_portion = not (food.unit == "g" and food.portion == 100)
    label = (
        f"1 {food.unit} ({_format_grams(food.portion)}g)"
        if per_portion
        else DEFAULT_SERVING_LABEL
    )
    return build_record(
        external_id="",
        name=name,
        calories=round(per_100g.calories * scale),
        protein_g=round(per_100g.protein_g * scale, 1),
        carbs_g=round(per_100g.carbs_g * scale, 1),
        fat_g=round(per_100g.fat_g * scale, 1),
        serving_label=label,
        serving_grams=food.portion,
        serving_unit="g",
        is_per_serving=per_portion,
    )


def _format_grams(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)
