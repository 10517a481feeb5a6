"""Feedback data models for classified customer feedback."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class FeedbackRecord:
    """Represents a single classified feedback line."""

    text: str
    labels: list[str] = field(default_factory=list)

    # Set only by the reviewer
    is_incorrect: bool = False

    @property
    def labels_display(self) -> str:
        """Labels joined for display and export."""
        return ", ".join(self.labels)

    def to_dict(self) -> dict[str, Any]:
        """Convert record to dictionary for serialization."""
        return {
            "text": self.text,
            "labels": list(self.labels),
            "is_incorrect": self.is_incorrect,
        }


@dataclass(frozen=True)
class LabelCount:
    """Number of records carrying a normalized label."""

    label: str
    count: int


@dataclass
class BatchProgress:
    """Progress event emitted after each classified batch."""

    batch_index: int  # 1-based
    batch_count: int
    lines_sent: int
    items_received: int
    records_so_far: int
    aligned: bool = True

    @property
    def is_last(self) -> bool:
        return self.batch_index == self.batch_count

    def to_display_string(self) -> str:
        """Format progress for the activity log."""
        message = (
            f"Batch {self.batch_index}/{self.batch_count}: "
            f"sent {self.lines_sent} lines, received {self.items_received} items"
        )
        if not self.aligned:
            message += " (output does not match input lines)"
        return message
