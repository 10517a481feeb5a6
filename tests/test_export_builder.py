"""Tests for the export sheet builders."""

import pytest

from feedback_labeler.models.feedback import FeedbackRecord
from feedback_labeler.processing.export_builder import (
    COMPILED_COLUMNS,
    EXPLODED_COLUMNS,
    build_compiled_rows,
    build_export,
    build_exploded_rows,
    build_label_count_rows,
    export_filename,
)


@pytest.fixture
def records():
    """Create records covering labeled, flagged and unlabeled cases."""
    return [
        FeedbackRecord(text="Great app!", labels=["Positive", "#positive"]),
        FeedbackRecord(text="Crashes on load", labels=["Bug Report"], is_incorrect=True),
        FeedbackRecord(text="Hmm", labels=[]),
        FeedbackRecord(text="Needs dark mode", labels=["Feature Request", "UI/UX", "Bug Report"]),
    ]


class TestCompiledView:
    """Test suite for the compiled view."""

    def test_one_row_per_record(self, records):
        rows = build_compiled_rows(records)

        assert len(rows) == len(records)
        assert list(rows[0].keys()) == COMPILED_COLUMNS

    def test_row_values(self, records):
        rows = build_compiled_rows(records)

        assert rows[0] == {
            "Feedback": "Great app!",
            "Labels": "Positive, #positive",
            "Incorrect Analysis": "No",
        }
        assert rows[1]["Incorrect Analysis"] == "Yes"
        assert rows[2]["Labels"] == ""


class TestExplodedView:
    """Test suite for the exploded view."""

    def test_row_count(self, records):
        rows = build_exploded_rows(records)

        assert len(rows) == sum(max(1, len(r.labels)) for r in records) == 7
        assert list(rows[0].keys()) == EXPLODED_COLUMNS

    def test_unlabeled_record_kept(self, records):
        rows = [r for r in build_exploded_rows(records) if r["Feedback"] == "Hmm"]

        assert rows == [{"Feedback": "Hmm", "Single Label": "", "Incorrect Analysis": "No"}]

    def test_flag_repeated_per_label(self, records):
        rows = [r for r in build_exploded_rows(records) if r["Feedback"] == "Crashes on load"]

        assert [r["Incorrect Analysis"] for r in rows] == ["Yes"]

    def test_label_order(self, records):
        rows = [r for r in build_exploded_rows(records) if r["Feedback"] == "Needs dark mode"]

        assert [r["Single Label"] for r in rows] == ["Feature Request", "UI/UX", "Bug Report"]


class TestLabelCountView:
    """Test suite for the label count view."""

    def test_counts(self, records):
        rows = build_label_count_rows(records)

        assert rows[:2] == [
            {"Label": "positive", "Count": 2},
            {"Label": "bug report", "Count": 2},
        ]
        assert len(rows) == 4


class TestBuildExport:
    """Test suite for assembling whole exports."""

    def test_detailed_order(self, records):
        sheets = build_export(records, detailed=True)

        assert [s.name for s in sheets] == ["Exploded Labels", "Compiled Feedback", "Label Counts"]
        assert sheets[2].columns == ["Label", "Count"]

    def test_basic_only_compiled(self, records):
        sheets = build_export(records)

        assert len(sheets) == 1
        assert sheets[0].columns == COMPILED_COLUMNS
        assert sheets[0].rows == build_compiled_rows(records)

    def test_records_not_modified(self, records):
        before = [r.to_dict() for r in records]
        build_export(records, detailed=True)

        assert [r.to_dict() for r in records] == before

    def test_filenames(self):
        assert export_filename() == "feedback_analysis_results.xlsx"
        assert export_filename(detailed=True) == "feedback_analysis_detailed_export.xlsx"
