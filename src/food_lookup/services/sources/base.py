"""Shared contract and helpers for provider source adapters."""

import logging
import math
import re
from collections.abc import Awaitable, Callable
from typing import Protocol, TypeVar

import httpx

from food_lookup.domain.errors import MalformedResponseError
from food_lookup.domain.foods import (
    BarcodeSource,
    FoodRecord,
    SourceLabel,
    SourceResult,
    SourceStatus,
    clamp_macros,
)

MAX_QUERY_LENGTH = 200
MAX_BARCODE_LENGTH = 30

_NON_DIGIT = re.compile(r"\D")

_logger = logging.getLogger(__name__)

T = TypeVar("T")


class SourceAdapter(Protocol):
    """A provider that answers free-text food searches."""

    label: SourceLabel
    premium_only: bool
    timeout_seconds: float

    async def search(
        self, query: str, max_results: int, timeout: float
    ) -> SourceResult:
        """Search the provider and return normalized records."""


class BarcodeAdapter(Protocol):
    """A provider that resolves product barcodes."""

    barcode_source: BarcodeSource
    timeout_seconds: float

    async def lookup(self, barcode: str, timeout: float) -> FoodRecord | None:
        """Resolve a barcode to a record, or None when unknown."""


def sanitize_query(query: str | None) -> str:
    """Trim a query and cap its length."""
    return (query or "").strip()[:MAX_QUERY_LENGTH]


def clean_barcode(barcode: str | None) -> str:
    """Keep only digits and cap the barcode length."""
    return _NON_DIGIT.sub("", barcode or "")[:MAX_BARCODE_LENGTH]


def to_float(value: object) -> float:
    """Coerce a provider number to float, treating junk as zero."""
    number = optional_float(value)
    return 0.0 if number is None else number


def optional_float(value: object) -> float | None:
    """Coerce a provider number to float, returning None when absent or junk."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def build_record(  # noqa: PLR0913
    *,
    external_id: str,
    name: str,
    calories: float,
    protein_g: float,
    carbs_g: float,
    fat_g: float,
    **fields: object,
) -> FoodRecord:
    """Build a record with macro clamping applied."""
    calories, protein_g, carbs_g, fat_g = clamp_macros(
        calories, protein_g, carbs_g, fat_g
    )
    return FoodRecord(
        external_id=external_id,
        name=name,
        calories=calories,
        protein_g=protein_g,
        carbs_g=carbs_g,
        fat_g=fat_g,
        **fields,
    )


async def call_guarded(
    func: Callable[[], Awaitable[T]], *, label: SourceLabel, action: str
) -> tuple[T | None, SourceStatus]:
    """Run one provider call, absorbing failures into a status."""
    try:
        return await func(), SourceStatus.OK
    except httpx.TimeoutException:
        _logger.warning("%s %s timed out", label.value, action)
        return None, SourceStatus.TIMEOUT
    except httpx.HTTPError as exc:
        _logger.warning(
            "%s %s failed (status=%s): %s",
            label.value,
            action,
            _status_code_from_exception(exc),
            exc,
        )
        return None, SourceStatus.FAILED
    except (MalformedResponseError, KeyError, TypeError, ValueError) as exc:
        _logger.warning("%s %s returned malformed data: %s", label.value, action, exc)
        return None, SourceStatus.MALFORMED


def require_mapping(payload: object, *, context: str) -> dict[str, object]:
    """Ensure a decoded payload is a JSON object."""
    if not isinstance(payload, dict):
        raise MalformedResponseError(f"{context}: expected an object")
    return payload


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"
