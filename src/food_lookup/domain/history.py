"""Search history domain models."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class RecentSearch:
    """A query the user ran recently."""

    query: str
    timestamp: datetime
    result_count: int


@dataclass(frozen=True)
class TrendingTerm:
    """A search term with its running frequency."""

    term: str
    count: int
    last_searched: datetime
