"""Utility functions for calculating label and review statistics."""

from collections.abc import Iterable
from dataclasses import dataclass

from ..models.feedback import FeedbackRecord, LabelCount
from .labels import normalize_label


def aggregate_labels(records: Iterable[FeedbackRecord]) -> list[LabelCount]:
    """Count normalized labels across all records.

    Labels that normalize to an empty string are skipped. The result is
    sorted by count descending; ties keep the order in which each label
    was first seen.

    Args:
        records: Records to aggregate

    Returns:
        List of LabelCount, most frequent first

    """
    counts: dict[str, int] = {}
    for record in records:
        for label in record.labels:
            normalized = normalize_label(label)
            if not normalized:
                continue
            counts[normalized] = counts.get(normalized, 0) + 1

    # sorted() is stable and dicts keep insertion order
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [LabelCount(label=label, count=count) for label, count in ranked]


@dataclass
class ReviewStatistics:
    """Container for review progress statistics."""

    total: int
    incorrect: int
    unlabeled: int
    distinct_labels: int
    accuracy_rate: float

    def to_display_string(self) -> str:
        """Format statistics for display in UI."""
        return (
            f"Total: {self.total} | Incorrect: {self.incorrect} | "
            f"Unlabeled: {self.unlabeled} | Labels: {self.distinct_labels} | "
            f"Accuracy: {self.accuracy_rate:.0f}%"
        )


def calculate_review_statistics(records: list[FeedbackRecord]) -> ReviewStatistics:
    """Calculate statistics for a list of reviewed records.

    Args:
        records: Records to analyze

    Returns:
        ReviewStatistics object containing calculated statistics

    """
    total = len(records)

    if total == 0:
        return ReviewStatistics(
            total=0,
            incorrect=0,
            unlabeled=0,
            distinct_labels=0,
            accuracy_rate=0.0,
        )

    incorrect = sum(1 for r in records if r.is_incorrect)
    unlabeled = sum(
        1 for r in records if not any(normalize_label(label) for label in r.labels)
    )
    distinct_labels = len(aggregate_labels(records))
    accuracy_rate = (total - incorrect) / total * 100

    return ReviewStatistics(
        total=total,
        incorrect=incorrect,
        unlabeled=unlabeled,
        distinct_labels=distinct_labels,
        accuracy_rate=accuracy_rate,
    )
