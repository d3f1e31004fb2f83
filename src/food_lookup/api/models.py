"""Pydantic models for the HTTP surface."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from food_lookup.domain.foods import (
    DEFAULT_SERVING_LABEL,
    BarcodeCacheEntry,
    BarcodeLookupResult,
    BarcodeSource,
    Confidence,
    FoodRecord,
    SearchResult,
    SourceLabel,
    SourceStatus,
)


class FoodRecordModel(BaseModel):
    """Serialized food record."""

    model_config = ConfigDict(from_attributes=True)

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
    micronutrients: dict[str, float] = Field(default_factory=dict)


class FoodSubmission(BaseModel):
    """Request body for a user-submitted barcode record."""

    name: str = Field(min_length=1, max_length=200)
    calories: float = Field(ge=0)
    protein_g: float = Field(default=0.0, ge=0)
    carbs_g: float = Field(default=0.0, ge=0)
    fat_g: float = Field(default=0.0, ge=0)
    brand: str | None = None
    image_url: str | None = None
    serving_label: str = DEFAULT_SERVING_LABEL
    serving_grams: float = Field(default=100.0, gt=0)
    is_per_serving: bool = False
    micronutrients: dict[str, float] = Field(default_factory=dict)

    def to_record(self, barcode: str) -> FoodRecord:
        return FoodRecord(
            external_id=barcode,
            name=self.name.strip(),
            calories=self.calories,
            protein_g=self.protein_g,
            carbs_g=self.carbs_g,
            fat_g=self.fat_g,
            brand=self.brand,
            image_url=self.image_url,
            serving_label=self.serving_label,
            serving_grams=self.serving_grams,
            is_per_serving=self.is_per_serving,
            micronutrients=dict(self.micronutrients),
        )


class SearchResponse(BaseModel):
    records: list[FoodRecordModel]
    total_available_count: int
    per_source_counts: dict[SourceLabel, int]
    outcomes: dict[SourceLabel, SourceStatus]

    @classmethod
    def from_result(cls, result: SearchResult) -> "SearchResponse":
        return cls(
            records=[
                FoodRecordModel.model_validate(record) for record in result.records
            ],
            total_available_count=result.total_available_count,
            per_source_counts=result.per_source_counts,
            outcomes=result.outcomes,
        )


class BarcodeLookupResponse(BaseModel):
    found: bool
    record: FoodRecordModel | None
    source: BarcodeSource | None
    confidence: Confidence
    was_cached: bool

    @classmethod
    def from_result(cls, result: BarcodeLookupResult) -> "BarcodeLookupResponse":
        return cls(
            found=result.found,
            record=(
                FoodRecordModel.model_validate(result.record) if result.record else None
            ),
            source=result.source,
            confidence=result.confidence,
            was_cached=result.was_cached,
        )


class BarcodeEntryResponse(BaseModel):
    """Cached barcode entry."""

    barcode: str
    record: FoodRecordModel
    source: BarcodeSource
    cached_at: datetime
    hit_count: int

    @classmethod
    def from_entry(cls, entry: BarcodeCacheEntry) -> "BarcodeEntryResponse":
        return cls(
            barcode=entry.barcode,
            record=FoodRecordModel.model_validate(entry.record),
            source=entry.source,
            cached_at=entry.cached_at,
            hit_count=entry.hit_count,
        )


class RecentSearchModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    query: str
    timestamp: datetime
    result_count: int


class TrendingTermModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    term: str
    count: int
    last_searched: datetime
