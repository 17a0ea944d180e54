"""Mood statistics over a set of records."""

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Optional

from shared_types import EmotionalCategory

from .records import MoodRecord

RECENT_LIMIT = 5
MIN_DISTINCT_CATEGORIES = 2


@dataclass(frozen=True)
class MoodSummary:
    """Derived view over a record set. Never persisted.

    ``counts`` only holds categories that occur; a missing key means zero.
    Keys are in order of first occurrence.
    """

    counts: dict[EmotionalCategory, int] = field(default_factory=dict)
    most_frequent: Optional[EmotionalCategory] = None
    recent: tuple[MoodRecord, ...] = ()

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    @property
    def has_enough_data(self) -> bool:
        """At least two distinct categories, enough to chart a distribution."""
        return len(self.counts) >= MIN_DISTINCT_CATEGORIES

    def count(self, category: EmotionalCategory) -> int:
        return self.counts.get(category, 0)


def summarize(records: Iterable[MoodRecord], recent_limit: int = RECENT_LIMIT) -> MoodSummary:
    """Compute counts, most frequent category and newest records.

    Ties for most frequent go to the category whose first record appears
    earliest in ``records``. Records with equal timestamps keep their input
    order in ``recent``.
    """
    records = list(records)
    counts = Counter(r.label for r in records)

    most_frequent = None
    if counts:
        # most_common is a stable sort, so ties keep first-occurrence order
        most_frequent = counts.most_common(1)[0][0]

    recent = sorted(records, key=lambda r: r.created_at, reverse=True)[:recent_limit]

    return MoodSummary(counts=dict(counts), most_frequent=most_frequent, recent=tuple(recent))


def has_enough_data(summary: MoodSummary) -> bool:
    return summary.has_enough_data


def chart_data(summary: MoodSummary) -> list[tuple[EmotionalCategory, int]]:
    """(category, count) pairs sorted by count descending, ties by first occurrence."""
    return sorted(summary.counts.items(), key=lambda item: item[1], reverse=True)
