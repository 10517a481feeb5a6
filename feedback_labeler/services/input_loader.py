"""Reads feedback text from pasted input or uploaded files."""

import csv
import logging
from pathlib import Path

import xlrd
from openpyxl import load_workbook

from ..config import SUPPORTED_INPUT_EXTENSIONS
from ..exceptions import UnsupportedInputFormat

logger = logging.getLogger(__name__)


def split_feedback_lines(text: str) -> list[str]:
    """Split raw text into trimmed, non-blank feedback lines."""
    return [line.strip() for line in text.splitlines() if line.strip()]


def load_feedback_file(path: Path) -> str:
    """Load feedback text from a CSV or Excel file.

    Every format contributes the non-empty cells of its first column (the
    first sheet for workbooks). Each cell becomes one feedback line, so
    newlines inside a cell are folded into spaces.

    Args:
        path: File chosen by the user

    Returns:
        Newline separated feedback text

    Raises:
        UnsupportedInputFormat: If the file type is not supported or the
            file cannot be parsed

    """
    suffix = path.suffix.lower()

    if suffix == ".csv":
        cells = _read_csv_first_column(path)
    elif suffix == ".xlsx":
        cells = _read_first_column(path)
    elif suffix == ".xls":
        cells = _read_legacy_first_column(path)
    else:
        supported = ", ".join(SUPPORTED_INPUT_EXTENSIONS)
        raise UnsupportedInputFormat(
            f"Unsupported file type '{suffix or path.name}'. Please upload one of: {supported}."
        )

    logger.info(f"Loaded {len(cells)} feedback rows from {path.name}")
    return "\n".join(_single_line(cell) for cell in cells)


def _single_line(cell: str) -> str:
    return " ".join(part.strip() for part in cell.splitlines() if part.strip())


def _keep(value) -> bool:
    return value is not None and bool(str(value).strip())


def _read_csv_first_column(path: Path) -> list[str]:
    try:
        with path.open(newline="", encoding="utf-8-sig") as csvfile:
            return [row[0] for row in csv.reader(csvfile) if row and _keep(row[0])]
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise UnsupportedInputFormat(f"Error reading CSV file: {e}") from e


def _read_first_column(path: Path) -> list[str]:
    try:
        wb = load_workbook(path, read_only=True, data_only=True)
    except Exception as e:
        raise UnsupportedInputFormat(f"Error parsing Excel file: {e}") from e

    try:
        ws = wb.worksheets[0]
        cells = []
        for row in ws.iter_rows(min_col=1, max_col=1, values_only=True):
            value = row[0] if row else None
            if _keep(value):
                cells.append(str(value))
    finally:
        wb.close()

    return cells


def _read_legacy_first_column(path: Path) -> list[str]:
    try:
        book = xlrd.open_workbook(str(path))
    except Exception as e:
        raise UnsupportedInputFormat(f"Error parsing Excel file: {e}") from e

    try:
        sheet = book.sheet_by_index(0)
        values = sheet.col_values(0) if sheet.ncols else []
    finally:
        book.release_resources()

    # xlrd reports every number as a float
    cells = []
    for value in values:
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        if _keep(value):
            cells.append(str(value))
    return cells
