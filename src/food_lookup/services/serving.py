"""Serving-size parsing and per-100g normalization."""

import re

from food_lookup.domain.foods import FoodRecord, NormalizedServing

DEFAULT_SERVING_GRAMS = 100.0

_GRAMS = re.compile(r"(\d+(?:\.\d+)?)\s*g(?:rams?)?\b", re.IGNORECASE)
_NUMBER = re.compile(r"\d+(?:\.\d+)?")


def parse_serving_grams(text: str | None) -> float:
    """Parse free-text serving sizes like '1 cup (240g)' into grams."""
    if not text:
        return DEFAULT_SERVING_GRAMS
    match = _GRAMS.search(text)
    if match is None:
        match = _NUMBER.search(text)
        value = float(match.group(0)) if match else 0.0
    else:
        value = float(match.group(1))
    return value if value > 0 else DEFAULT_SERVING_GRAMS


def per_100g_factor(record: FoodRecord) -> float:
    """Multiplier taking a record's serving values to per-100g values."""
    return DEFAULT_SERVING_GRAMS / _serving_grams(record)


def to_per_100g(record: FoodRecord) -> NormalizedServing:
    """Rescale a record's macros to a per-100g basis."""
    grams = _serving_grams(record)
    factor = DEFAULT_SERVING_GRAMS / grams
    return NormalizedServing(
        serving_label=record.serving_label,
        serving_grams=grams,
        calories=round(record.calories * factor),
        protein_g=round(record.protein_g * factor, 1),
        carbs_g=round(record.carbs_g * factor, 1),
        fat_g=round(record.fat_g * factor, 1),
    )


def _serving_grams(record: FoodRecord) -> float:
    return record.serving_grams if record.serving_grams > 0 else DEFAULT_SERVING_GRAMS
