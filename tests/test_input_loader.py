"""Tests for the feedback input loader."""

from unittest.mock import MagicMock, patch

import pytest
from openpyxl import Workbook

from feedback_labeler.exceptions import UnsupportedInputFormat
from feedback_labeler.services.input_loader import load_feedback_file, split_feedback_lines


class TestSplitFeedbackLines:
    """Test suite for split_feedback_lines."""

    def test_drops_blank_lines(self):
        text = "Great app!\nCrashes on load\n\n   \nNeeds dark mode\n"

        assert split_feedback_lines(text) == ["Great app!", "Crashes on load", "Needs dark mode"]

    def test_trims_and_handles_crlf(self):
        assert split_feedback_lines("  a  \r\nb\r\n") == ["a", "b"]

    def test_empty(self):
        assert split_feedback_lines("") == []


class TestLoadFeedbackFile:
    """Test suite for load_feedback_file."""

    def test_csv_one_feedback_per_row(self, tmp_path):
        path = tmp_path / "feedback.csv"
        path.write_text("Great app!\nCrashes on load\n\nNeeds dark mode\n", encoding="utf-8")

        assert load_feedback_file(path) == "Great app!\nCrashes on load\nNeeds dark mode"

    def test_csv_first_column_of_quoted_rows(self, tmp_path):
        path = tmp_path / "feedback.csv"
        path.write_text(
            'feedback,rating\n"Great app, love it",5\n,4\n"Line one\nline two",3\n',
            encoding="utf-8",
        )

        assert load_feedback_file(path) == "feedback\nGreat app, love it\nLine one line two"

    def test_csv_byte_order_mark(self, tmp_path):
        path = tmp_path / "feedback.csv"
        path.write_text("Great app!\n", encoding="utf-8-sig")

        assert load_feedback_file(path) == "Great app!"

    def test_xlsx_first_column(self, tmp_path):
        wb = Workbook()
        ws = wb.active
        ws.append(["Great app!", "ignored"])
        ws.append([None, "ignored"])
        ws.append(["   ", "ignored"])
        ws.append([42, "ignored"])
        ws.append(["Needs dark mode"])
        path = tmp_path / "feedback.xlsx"
        wb.save(path)

        assert load_feedback_file(path) == "Great app!\n42\nNeeds dark mode"

    @pytest.mark.parametrize("name", ["feedback.txt", "feedback.json", "feedback"])
    def test_unsupported_types(self, tmp_path, name):
        path = tmp_path / name
        path.write_text("anything")

        with pytest.raises(UnsupportedInputFormat):
            load_feedback_file(path)

    def test_corrupt_xlsx(self, tmp_path):
        path = tmp_path / "broken.xlsx"
        path.write_text("this is not a zip file")

        with pytest.raises(UnsupportedInputFormat):
            load_feedback_file(path)

    def test_missing_csv(self, tmp_path):
        with pytest.raises(UnsupportedInputFormat):
            load_feedback_file(tmp_path / "missing.csv")

    def test_corrupt_xls(self, tmp_path):
        path = tmp_path / "broken.xls"
        path.write_text("this is not a workbook")

        with pytest.raises(UnsupportedInputFormat):
            load_feedback_file(path)

    def test_xls_first_column(self, tmp_path):
        sheet = MagicMock(ncols=2)
        sheet.col_values.return_value = ["Great app!", "", "  ", 42.0, 1.5, "Needs dark mode"]
        book = MagicMock()
        book.sheet_by_index.return_value = sheet
        path = tmp_path / "feedback.xls"
        path.write_bytes(b"")

        with patch(
            "feedback_labeler.services.input_loader.xlrd.open_workbook", return_value=book
        ) as open_workbook:
            text = load_feedback_file(path)

        open_workbook.assert_called_once_with(str(path))
        book.sheet_by_index.assert_called_once_with(0)
        sheet.col_values.assert_called_once_with(0)
        book.release_resources.assert_called_once()
        assert text == "Great app!\n42\n1.5\nNeeds dark mode"
