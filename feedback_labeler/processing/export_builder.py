"""Builds the flat tabular views used for spreadsheet export."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from ..config import (
    BASIC_EXPORT_FILENAME,
    DETAILED_EXPORT_FILENAME,
    SHEET_BASIC,
    SHEET_COMPILED,
    SHEET_COUNTS,
    SHEET_EXPLODED,
)
from ..models.feedback import FeedbackRecord
from ..utils.statistics import aggregate_labels

Row = dict[str, str | int]

COMPILED_COLUMNS = ["Feedback", "Labels", "Incorrect Analysis"]
EXPLODED_COLUMNS = ["Feedback", "Single Label", "Incorrect Analysis"]
COUNT_COLUMNS = ["Label", "Count"]


@dataclass
class SheetData:
    """One named sheet ready for the spreadsheet writer."""

    name: str
    columns: list[str]
    rows: list[Row] = field(default_factory=list)


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def build_compiled_rows(records: Sequence[FeedbackRecord]) -> list[Row]:
    """One row per record with its labels comma joined."""
    return [
        {
            "Feedback": record.text,
            "Labels": ", ".join(record.labels),
            "Incorrect Analysis": _yes_no(record.is_incorrect),
        }
        for record in records
    ]


def build_exploded_rows(records: Sequence[FeedbackRecord]) -> list[Row]:
    """One row per (record, label) pair.

    A record without labels still gets a single row with an empty
    label so it is not dropped from the view.
    """
    rows: list[Row] = []
    for record in records:
        incorrect = _yes_no(record.is_incorrect)
        for label in record.labels or [""]:
            rows.append(
                {
                    "Feedback": record.text,
                    "Single Label": label,
                    "Incorrect Analysis": incorrect,
                }
            )
    return rows


def build_label_count_rows(records: Sequence[FeedbackRecord]) -> list[Row]:
    """Normalized label frequencies, most frequent first."""
    return [{"Label": item.label, "Count": item.count} for item in aggregate_labels(records)]


def build_export(records: Sequence[FeedbackRecord], detailed: bool = False) -> list[SheetData]:
    """Assemble the sheets for a basic or detailed export.

    Args:
        records: Current session records; not modified
        detailed: Bundle exploded, compiled and count sheets instead of
            the single compiled sheet

    Returns:
        Sheets in workbook order

    """
    if not detailed:
        return [SheetData(SHEET_BASIC, COMPILED_COLUMNS, build_compiled_rows(records))]

    return [
        SheetData(SHEET_EXPLODED, EXPLODED_COLUMNS, build_exploded_rows(records)),
        SheetData(SHEET_COMPILED, COMPILED_COLUMNS, build_compiled_rows(records)),
        SheetData(SHEET_COUNTS, COUNT_COLUMNS, build_label_count_rows(records)),
    ]


def export_filename(detailed: bool = False) -> str:
    """Workbook file name for the export type."""
    return DETAILED_EXPORT_FILENAME if detailed else BASIC_EXPORT_FILENAME
