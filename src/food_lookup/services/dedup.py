"""Priority-ordered merging of per-source results."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from food_lookup.domain.foods import FoodRecord, SourceLabel
from food_lookup.services.matching import is_duplicate


@dataclass(frozen=True)
class DedupResult:
    """Accepted records and how many each source contributed."""

    records: list[FoodRecord]
    accepted_counts: dict[SourceLabel, int]


def deduplicate(
    groups: Iterable[tuple[SourceLabel, Sequence[FoodRecord]]],
) -> DedupResult:
    """Merge groups in order, dropping records that duplicate an earlier name."""
    accepted_names: list[str] = []
    records: list[FoodRecord] = []
    counts: dict[SourceLabel, int] = {}
    for label, group in groups:
        added = 0
        for record in group:
            if any(is_duplicate(record.name, name) for name in accepted_names):
                continue
            accepted_names.append(record.name)
            records.append(record)
            added += 1
        counts[label] = counts.get(label, 0) + added
    return DedupResult(records=records, accepted_counts=counts)
