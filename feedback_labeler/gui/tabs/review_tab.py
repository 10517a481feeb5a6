import logging
import platform
import subprocess
from pathlib import Path

from PyQt6.QtCore import Qt, QTimer, pyqtSignal
from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import (
    QAbstractItemView,
    QFileDialog,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QMessageBox,
    QSplitter,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from ...constants import (
    INCORRECT_ROW_COLOR,
    MAIN_LAYOUT_MARGINS,
    REVIEW_SPLITTER_SIZES,
    STATUS_COLOR_SUCCESS,
    STATUS_MESSAGE_MAX_HEIGHT,
    STATUS_MESSAGE_TIMEOUT_MS,
    TABLE_INCORRECT_COLUMN_WIDTH,
    TABLE_LABELS_COLUMN_WIDTH,
)
from ...exceptions import ExportError
from ...processing.session import AnalysisSession
from ..styles import (
    create_primary_button,
    create_secondary_button,
    create_title_label,
    style_status_message,
)
from ..widgets.label_summary import LabelSummaryPanel

logger = logging.getLogger(__name__)

COLUMN_FEEDBACK = 0
COLUMN_LABELS = 1
COLUMN_INCORRECT = 2


class ReviewTab(QWidget):
    """Tab for reviewing and correcting classifier labels."""

    records_edited = pyqtSignal()

    def __init__(self, session: AnalysisSession) -> None:
        super().__init__()
        self.session = session
        # Suppresses itemChanged while the table is being filled
        self._populating = False
        self._init_ui()
        self.refresh()

    def _init_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setContentsMargins(*MAIN_LAYOUT_MARGINS)

        header_layout = QHBoxLayout()
        header_layout.addWidget(create_title_label("Review Labels"))
        header_layout.addStretch()

        self.export_button = create_secondary_button("Export")
        self.export_button.clicked.connect(lambda: self.export_results(detailed=False))
        header_layout.addWidget(self.export_button)

        self.export_detailed_button = create_primary_button("Export Detailed")
        self.export_detailed_button.clicked.connect(lambda: self.export_results(detailed=True))
        header_layout.addWidget(self.export_detailed_button)
        layout.addLayout(header_layout)

        splitter = QSplitter(Qt.Orientation.Horizontal)

        self.table = QTableWidget(0, 3)
        self.table.setHorizontalHeaderLabels(["Feedback", "Labels", "Incorrect"])
        self.table.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.table.setWordWrap(True)
        self.table.verticalHeader().setVisible(False)
        header = self.table.horizontalHeader()
        header.setSectionResizeMode(COLUMN_FEEDBACK, QHeaderView.ResizeMode.Stretch)
        header.setSectionResizeMode(COLUMN_LABELS, QHeaderView.ResizeMode.Interactive)
        header.setSectionResizeMode(COLUMN_INCORRECT, QHeaderView.ResizeMode.Fixed)
        self.table.setColumnWidth(COLUMN_LABELS, TABLE_LABELS_COLUMN_WIDTH)
        self.table.setColumnWidth(COLUMN_INCORRECT, TABLE_INCORRECT_COLUMN_WIDTH)
        self.table.itemChanged.connect(self._on_item_changed)
        splitter.addWidget(self.table)

        self.summary_panel = LabelSummaryPanel()
        splitter.addWidget(self.summary_panel)
        splitter.setSizes(REVIEW_SPLITTER_SIZES)
        layout.addWidget(splitter, 1)

        hint = QLabel("Double-click a label cell to edit; separate labels with commas.")
        hint.setStyleSheet("font-size: 12px; color: #666;")
        layout.addWidget(hint)

        self._status_message = QLabel("")
        self._status_message.setMaximumHeight(STATUS_MESSAGE_MAX_HEIGHT)
        layout.addWidget(self._status_message)

        self.setLayout(layout)

    def refresh(self) -> None:
        """Rebuild the table and summary from the session."""
        self._populating = True
        try:
            records = self.session.records
            self.table.setRowCount(len(records))
            for row, record in enumerate(records):
                text_item = QTableWidgetItem(record.text)
                text_item.setFlags(text_item.flags() & ~Qt.ItemFlag.ItemIsEditable)
                self.table.setItem(row, COLUMN_FEEDBACK, text_item)

                self.table.setItem(row, COLUMN_LABELS, QTableWidgetItem(record.labels_display))

                flag_item = QTableWidgetItem()
                flag_item.setFlags(
                    Qt.ItemFlag.ItemIsUserCheckable
                    | Qt.ItemFlag.ItemIsEnabled
                    | Qt.ItemFlag.ItemIsSelectable
                )
                flag_item.setCheckState(
                    Qt.CheckState.Checked if record.is_incorrect else Qt.CheckState.Unchecked
                )
                self.table.setItem(row, COLUMN_INCORRECT, flag_item)
                self._paint_row(row, record.is_incorrect)
            self.table.resizeRowsToContents()
        finally:
            self._populating = False

        self._refresh_summary()
        self._update_button_states()

    def _paint_row(self, row: int, is_incorrect: bool) -> None:
        color = QColor(INCORRECT_ROW_COLOR) if is_incorrect else QColor("white")
        for column in (COLUMN_FEEDBACK, COLUMN_LABELS, COLUMN_INCORRECT):
            item = self.table.item(row, column)
            if item:
                item.setBackground(color)

    def _refresh_summary(self) -> None:
        if self.session.has_results():
            self.summary_panel.update_summary(
                self.session.label_summary(), self.session.review_statistics()
            )
        else:
            self.summary_panel.clear()

    def _update_button_states(self) -> None:
        has_results = self.session.has_results()
        self.export_button.setEnabled(has_results)
        self.export_detailed_button.setEnabled(has_results)

    def _on_item_changed(self, item: QTableWidgetItem) -> None:
        """Write a cell edit back to the session and re-aggregate."""
        if self._populating:
            return

        row = item.row()
        if item.column() == COLUMN_LABELS:
            record = self.session.set_labels_from_text(row, item.text())
            # Show the cleaned up labels
            self._populating = True
            try:
                item.setText(record.labels_display)
            finally:
                self._populating = False
        elif item.column() == COLUMN_INCORRECT:
            is_incorrect = item.checkState() == Qt.CheckState.Checked
            self.session.set_incorrect(row, is_incorrect)
            self._populating = True
            try:
                self._paint_row(row, is_incorrect)
            finally:
                self._populating = False
        else:
            return

        self._refresh_summary()
        self.records_edited.emit()

    def _show_status_message(self, message: str, color: str = STATUS_COLOR_SUCCESS) -> None:
        self._status_message.setText(message)
        self._status_message.setStyleSheet(style_status_message(color))
        QTimer.singleShot(STATUS_MESSAGE_TIMEOUT_MS, lambda: self._status_message.setText(""))

    def export_results(self, detailed: bool = False) -> None:
        """Export the reviewed records to a workbook in a chosen folder."""
        if not self.session.has_results():
            QMessageBox.warning(self, "No Results", "There are no results to export.")
            return

        directory = QFileDialog.getExistingDirectory(self, "Select Export Folder", str(Path.home()))
        if not directory:
            return

        try:
            filepath = self.session.export(Path(directory), detailed=detailed)
        except ExportError as e:
            QMessageBox.critical(self, "Export Error", f"Failed to export results: {e}")
            return

        self._show_status_message(f"Saved {filepath.name}")

        msg_box = QMessageBox(self)
        msg_box.setWindowTitle("Export Complete")
        msg_box.setText(f"Exported {len(self.session.records)} feedback items.\n\nFile: {filepath}")
        msg_box.setStandardButtons(
            QMessageBox.StandardButton.Open | QMessageBox.StandardButton.Ok
        )
        msg_box.setDefaultButton(QMessageBox.StandardButton.Ok)

        if msg_box.exec() == QMessageBox.StandardButton.Open:
            if platform.system() == "Windows":
                subprocess.run(["explorer", str(filepath.parent)])
            elif platform.system() == "Darwin":
                subprocess.run(["open", str(filepath.parent)])
            else:
                subprocess.run(["xdg-open", str(filepath.parent)])
