"""Holds the classified feedback of one analysis session and its edits."""

import logging
from collections.abc import Callable, Generator
from pathlib import Path

from ..config import DEFAULT_BATCH_SIZE
from ..exceptions import ExportError, InputEmptyError
from ..models.feedback import BatchProgress, FeedbackRecord, LabelCount
from ..services.input_loader import split_feedback_lines
from ..services.spreadsheet_writer import write_workbook
from ..utils.labels import parse_custom_labels
from ..utils.statistics import (
    ReviewStatistics,
    aggregate_labels,
    calculate_review_statistics,
)
from .batch_classifier import ClassifyFn, iter_classify
from .export_builder import build_export, export_filename

logger = logging.getLogger(__name__)


class AnalysisSession:
    """Owns the current records and the settings used to produce them."""

    def __init__(
        self,
        system_instruction: str | None = None,
        custom_labels: list[str] | None = None,
        batch_size: int = DEFAULT_BATCH_SIZE,
    ) -> None:
        self.system_instruction = system_instruction
        self.custom_labels: list[str] = list(custom_labels or [])
        self.batch_size = batch_size
        self._records: list[FeedbackRecord] = []

    @property
    def records(self) -> list[FeedbackRecord]:
        return self._records

    def has_results(self) -> bool:
        return bool(self._records)

    def set_custom_labels_from_text(self, value: str) -> None:
        """Replace custom labels from comma separated user input."""
        self.custom_labels = parse_custom_labels(value)

    @staticmethod
    def prepare_lines(text: str | None) -> list[str]:
        """Turn raw input into feedback lines.

        Raises:
            InputEmptyError: If the input holds no feedback

        """
        lines = split_feedback_lines(text or "")
        if not lines:
            raise InputEmptyError("Please provide some feedback to analyze.")
        return lines

    def run(
        self,
        text: str,
        classify_fn: ClassifyFn,
        should_cancel: Callable[[], bool] | None = None,
    ) -> Generator[BatchProgress, None, list[FeedbackRecord]]:
        """Classify text, yielding progress per batch.

        Records are replaced only when the whole run succeeds; a failed
        or cancelled run leaves the previous results untouched.
        """
        lines = self.prepare_lines(text)
        records = yield from iter_classify(lines, classify_fn, self.batch_size, should_cancel)
        self.replace_records(records)
        return records

    def replace_records(self, records: list[FeedbackRecord]) -> None:
        self._records = list(records)
        logger.info(f"Session now holds {len(self._records)} records")

    def _get(self, index: int) -> FeedbackRecord:
        if not 0 <= index < len(self._records):
            raise IndexError(f"No record at index {index}")
        return self._records[index]

    def set_labels(self, index: int, labels: list[str]) -> FeedbackRecord:
        """Replace the labels of one record."""
        record = self._get(index)
        record.labels = [label.strip() for label in labels if label.strip()]
        logger.debug(f"Record {index} labels set to {record.labels}")
        return record

    def set_labels_from_text(self, index: int, value: str) -> FeedbackRecord:
        """Replace labels from a comma separated string."""
        return self.set_labels(index, parse_custom_labels(value))

    def set_incorrect(self, index: int, is_incorrect: bool) -> FeedbackRecord:
        record = self._get(index)
        record.is_incorrect = is_incorrect
        logger.debug(f"Record {index} marked {'incorrect' if is_incorrect else 'correct'}")
        return record

    def toggle_incorrect(self, index: int) -> FeedbackRecord:
        return self.set_incorrect(index, not self._get(index).is_incorrect)

    def label_summary(self) -> list[LabelCount]:
        """Label counts for the current records."""
        return aggregate_labels(self._records)

    def review_statistics(self) -> ReviewStatistics:
        return calculate_review_statistics(self._records)

    def export(self, export_dir: Path, detailed: bool = False) -> Path:
        """Write the basic or detailed workbook into export_dir.

        Returns:
            Path of the written workbook

        """
        if not self._records:
            raise ExportError("There are no results to export.")
        sheets = build_export(self._records, detailed=detailed)
        return write_workbook(sheets, Path(export_dir) / export_filename(detailed))

    def clear(self) -> None:
        """Clear all results of this session."""
        count = len(self._records)
        self._records = []
        logger.info(f"Cleared {count} records")
