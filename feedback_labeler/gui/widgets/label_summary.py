"""Table widget showing normalized label counts."""

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QAbstractItemView,
    QGroupBox,
    QHeaderView,
    QLabel,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
)

from ...models.feedback import LabelCount
from ...utils.statistics import ReviewStatistics


class LabelSummaryPanel(QGroupBox):
    """Label frequency table plus a one-line review summary."""

    def __init__(self) -> None:
        super().__init__("Label Summary")
        layout = QVBoxLayout()

        self.stats_label = QLabel("No results yet")
        self.stats_label.setStyleSheet("font-size: 12px; color: #666;")
        layout.addWidget(self.stats_label)

        self.table = QTableWidget(0, 2)
        self.table.setHorizontalHeaderLabels(["Label", "Count"])
        self.table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.table.verticalHeader().setVisible(False)
        header = self.table.horizontalHeader()
        header.setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
        header.setSectionResizeMode(1, QHeaderView.ResizeMode.ResizeToContents)
        layout.addWidget(self.table)

        self.setLayout(layout)

    def update_summary(self, counts: list[LabelCount], stats: ReviewStatistics) -> None:
        """Redraw the table from freshly aggregated counts."""
        self.table.setRowCount(len(counts))
        for row, item in enumerate(counts):
            self.table.setItem(row, 0, QTableWidgetItem(item.label))
            count_item = QTableWidgetItem(str(item.count))
            count_item.setTextAlignment(Qt.AlignmentFlag.AlignCenter)
            self.table.setItem(row, 1, count_item)
        self.stats_label.setText(stats.to_display_string())

    def clear(self) -> None:
        self.table.setRowCount(0)
        self.stats_label.setText("No results yet")
