"""Serializes export sheets to an Excel workbook with openpyxl."""

import logging
from collections.abc import Sequence
from pathlib import Path

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from ..exceptions import ExportError
from ..processing.export_builder import SheetData

logger = logging.getLogger(__name__)

MAX_COLUMN_WIDTH = 80
MIN_COLUMN_WIDTH = 10


def _write_cell(ws, row: int, column: int, value):
    """Write a value so that text always lands as literal text.

    Control characters Excel cannot store are dropped, and strings that
    start with "=" are kept as text instead of becoming formulas.
    """
    if isinstance(value, str):
        value = ILLEGAL_CHARACTERS_RE.sub("", value)
    cell = ws.cell(row=row, column=column, value=value)
    if isinstance(value, str):
        cell.data_type = "s"
    return cell


def write_workbook(sheets: Sequence[SheetData], filepath: Path) -> Path:
    """Write sheets to an .xlsx file, one worksheet per sheet.

    Args:
        sheets: Sheets in workbook order
        filepath: Destination file

    Returns:
        The path written

    Raises:
        ExportError: If there is nothing to write or the file cannot be saved

    """
    if not sheets:
        raise ExportError("No sheets to export")

    wb = Workbook()
    # Drop the default sheet so workbook order matches the input
    wb.remove(wb.active)

    # Style for headers
    header_font = Font(bold=True, color="FFFFFF")
    header_fill = PatternFill(start_color="366092", end_color="366092", fill_type="solid")
    header_alignment = Alignment(horizontal="center", vertical="center")

    for sheet in sheets:
        ws = wb.create_sheet(title=sheet.name)
        widths = [len(column) for column in sheet.columns]

        for col, header in enumerate(sheet.columns, 1):
            cell = ws.cell(row=1, column=col, value=header)
            cell.font = header_font
            cell.fill = header_fill
            cell.alignment = header_alignment

        for row_idx, row in enumerate(sheet.rows, 2):
            for col, column in enumerate(sheet.columns, 1):
                value = row.get(column, "")
                _write_cell(ws, row_idx, col, value)
                widths[col - 1] = max(widths[col - 1], len(str(value)))

        for col, width in enumerate(widths, 1):
            ws.column_dimensions[get_column_letter(col)].width = min(
                max(width + 2, MIN_COLUMN_WIDTH), MAX_COLUMN_WIDTH
            )

        ws.freeze_panes = "A2"

    try:
        filepath.parent.mkdir(parents=True, exist_ok=True)
        wb.save(filepath)
    except (OSError, ValueError) as e:
        raise ExportError(f"Failed to write {filepath}: {e}") from e

    logger.info(f"Exported {len(sheets)} sheet(s) to {filepath}")
    return filepath
