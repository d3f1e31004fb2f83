"""Food record domain models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

MAX_CALORIES = 5000.0
MAX_PROTEIN_G = 500.0
MAX_FAT_G = 500.0
MAX_CARBS_G = 1000.0

DEFAULT_SERVING_LABEL = "100g"


class NutrientKey(StrEnum):
    """Micronutrient keys carried in a record's sparse nutrient map."""

    FIBER = "fiber"
    SUGAR = "sugar"
    SODIUM = "sodium"
    SATURATED_FAT = "saturated_fat"
    TRANS_FAT = "trans_fat"
    CHOLESTEROL = "cholesterol"
    CALCIUM = "calcium"
    IRON = "iron"
    MAGNESIUM = "magnesium"
    POTASSIUM = "potassium"
    ZINC = "zinc"
    COPPER = "copper"
    MANGANESE = "manganese"
    SELENIUM = "selenium"
    PHOSPHORUS = "phosphorus"
    VITAMIN_A = "vitamin_a"
    VITAMIN_C = "vitamin_c"
    VITAMIN_D = "vitamin_d"
    VITAMIN_E = "vitamin_e"
    VITAMIN_K = "vitamin_k"
    VITAMIN_B1 = "vitamin_b1"
    VITAMIN_B2 = "vitamin_b2"
    VITAMIN_B3 = "vitamin_b3"
    VITAMIN_B5 = "vitamin_b5"
    VITAMIN_B6 = "vitamin_b6"
    VITAMIN_B12 = "vitamin_b12"
    FOLATE = "folate"
    CHOLINE = "choline"
    OMEGA3 = "omega3"
    OMEGA6 = "omega6"


class SourceLabel(StrEnum):
    """Identifies the provider a record came from."""

    LOCAL = "local"
    RESTAURANT = "restaurant"
    USDA = "usda"
    FATSECRET = "fatsecret"
    OPEN_FOOD_FACTS = "open_food_facts"
    NUTRITIONIX = "nutritionix"


class SourceStatus(StrEnum):
    """Outcome of a single adapter call during a search."""

    OK = "ok"
    TIMEOUT = "timeout"
    MALFORMED = "malformed"
    FAILED = "failed"
    SKIPPED = "skipped"


class BarcodeSource(StrEnum):
    OPENFOODFACTS = "openfoodfacts"
    USDA = "usda"
    USER_SUBMITTED = "user_submitted"


class Confidence(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class FoodRecord:
    """Canonical nutrition entry returned by the engine."""

    external_id: str
    name: str
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    brand: str | None = None
    image_url: str | None = None
    serving_label: str = DEFAULT_SERVING_LABEL
    serving_grams: float = 100.0
    serving_unit: str = "g"
    is_per_serving: bool = False
    micronutrients: dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class NormalizedServing:
    """A record's macros rescaled to a per-100g basis."""

    serving_label: str
    serving_grams: float
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float


@dataclass(frozen=True)
class SourceResult:
    """Records returned by one adapter for one query."""

    label: SourceLabel
    records: list[FoodRecord]
    total_count: int = 0
    status: SourceStatus = SourceStatus.OK

    @classmethod
    def empty(cls, label: SourceLabel, status: SourceStatus) -> "SourceResult":
        """Build an empty result carrying a failure status."""
        return cls(label=label, records=[], total_count=0, status=status)


@dataclass(frozen=True)
class SearchResult:
    """Merged, ranked answer to a text search."""

    records: list[FoodRecord]
    total_available_count: int
    per_source_counts: dict[SourceLabel, int]
    outcomes: dict[SourceLabel, SourceStatus] = field(default_factory=dict)


@dataclass
class BarcodeCacheEntry:
    """Cached barcode resolution with hit accounting."""

    barcode: str
    record: FoodRecord
    source: BarcodeSource
    cached_at: datetime
    hit_count: int = 0


@dataclass(frozen=True)
class BarcodeLookupResult:
    """Outcome of a barcode lookup."""

    found: bool
    record: FoodRecord | None
    source: BarcodeSource | None
    confidence: Confidence
    was_cached: bool

    @classmethod
    def not_found(cls) -> "BarcodeLookupResult":
        return cls(
            found=False,
            record=None,
            source=None,
            confidence=Confidence.NOT_FOUND,
            was_cached=False,
        )


def clamp_macros(
    calories: float, protein_g: float, carbs_g: float, fat_g: float
) -> tuple[float, float, float, float]:
    """Clamp macro values to the accepted non-negative ranges."""
    return (
        _clamp(calories, MAX_CALORIES),
        _clamp(protein_g, MAX_PROTEIN_G),
        _clamp(carbs_g, MAX_CARBS_G),
        _clamp(fat_g, MAX_FAT_G),
    )


def _clamp(value: float, upper: float) -> float:
    return max(0.0, min(float(value), upper))
