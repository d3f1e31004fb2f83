"""Relevance and data-quality ranking of merged results."""

import re

from food_lookup.domain.foods import DEFAULT_SERVING_LABEL, FoodRecord, NutrientKey
from food_lookup.services.matching import similarity
from food_lookup.services.serving import per_100g_factor

_KEY_MICRONUTRIENTS = (
    NutrientKey.FIBER,
    NutrientKey.SUGAR,
    NutrientKey.SODIUM,
    NutrientKey.SATURATED_FAT,
)
_COMPLETENESS_SLOTS = 8.0


def nutrition_completeness(record: FoodRecord) -> float:
    """Return a 0..1 grade of how fully a record's nutrition is described."""
    factor = per_100g_factor(record)
    macros = (record.calories, record.protein_g, record.carbs_g, record.fat_g)
    score = float(sum(1 for value in macros if value * factor > 0))
    score += 0.5 * sum(1 for key in _KEY_MICRONUTRIENTS if key in record.micronutrients)
    micro_count = len(record.micronutrients)
    if micro_count > 5:
        score += 0.5
    if micro_count > 10:
        score += 0.5
    return min(1.0, score / _COMPLETENESS_SLOTS)


def score_record(record: FoodRecord, query: str) -> float:
    """Score a record against the query it was found for."""
    name = record.name.lower()
    needle = query.lower().strip()
    score = _name_match_score(name, needle)
    score += nutrition_completeness(record) * 20
    if record.image_url:
        score += 5
    if record.serving_label and record.serving_label != DEFAULT_SERVING_LABEL:
        score += 3
    if record.brand:
        score += 2
    return score


def rank_records(records: list[FoodRecord], query: str) -> list[FoodRecord]:
    """Sort records by descending score; equal scores keep their input order."""
    scores = [score_record(record, query) for record in records]
    order = sorted(range(len(records)), key=lambda index: scores[index], reverse=True)
    return [records[index] for index in order]


def _name_match_score(name: str, needle: str) -> float:
    if not needle:
        return 0.0
    if name == needle:
        return 100.0
    if name.startswith(needle):
        return 80.0
    if re.search(rf"\b{re.escape(needle)}\b", name):
        return 60.0
    if needle in name:
        return 40.0
    return similarity(name, needle) * 30
