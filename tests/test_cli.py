"""Tests for the headless batch runner."""

import pytest
from openpyxl import load_workbook

from feedback_labeler.cli import main


@pytest.fixture
def feedback_csv(tmp_path):
    path = tmp_path / "feedback.csv"
    path.write_text("Great app!\nCrashes on load\n\nNeeds dark mode\n", encoding="utf-8")
    return path


class TestCli:
    """Test suite for the command line runner."""

    def test_detailed_run_with_mock(self, feedback_csv, tmp_path, capsys):
        out_dir = tmp_path / "exports"

        code = main([str(feedback_csv), "--mock", "--batch-size", "2", "--detailed", "--output", str(out_dir)])

        assert code == 0
        output = capsys.readouterr().out
        assert "Batch 1/2" in output
        assert "Batch 2/2" in output
        wb = load_workbook(out_dir / "feedback_analysis_detailed_export.xlsx")
        assert wb.sheetnames == ["Exploded Labels", "Compiled Feedback", "Label Counts"]

    def test_basic_run(self, feedback_csv, tmp_path):
        code = main([str(feedback_csv), "--mock", "--output", str(tmp_path)])

        assert code == 0
        assert (tmp_path / "feedback_analysis_results.xlsx").exists()

    def test_unsupported_file(self, tmp_path, capsys):
        path = tmp_path / "feedback.txt"
        path.write_text("x")

        assert main([str(path), "--mock"]) == 2
        assert "Unsupported file type" in capsys.readouterr().out

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("\n\n")

        assert main([str(path), "--mock"]) == 2

    def test_invalid_batch_size(self, feedback_csv):
        assert main([str(feedback_csv), "--mock", "--batch-size", "0"]) == 2
