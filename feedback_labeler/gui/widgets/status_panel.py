"""Status panel widget for displaying batch classification progress."""

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from ...constants import (
    ACTIVITY_LOG_MAX_HEIGHT,
    MONOSPACE_FONT_STACK,
    STATUS_COLOR_ERROR,
    STATUS_COLOR_INFO,
    STATUS_COLOR_SUCCESS,
)
from ...models.feedback import BatchProgress
from ..styles import ACTIVITY_LOG_STYLE


class StatusPanel(QWidget):
    """Panel for displaying real-time classification status.

    Shows a batch progress bar, the batch currently in flight, run
    statistics and an activity log.
    """

    def __init__(self) -> None:
        """Initialize the status panel."""
        super().__init__()
        self._init_ui()

    def _init_ui(self) -> None:
        """Initialize the user interface."""
        layout = QVBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)

        # Progress section
        progress_group = QGroupBox("Batch Classification")
        progress_layout = QVBoxLayout()

        self.progress_bar = QProgressBar()
        self.progress_bar.setTextVisible(True)
        self.progress_bar.setFormat("%v / %m batches (%p%)")
        progress_layout.addWidget(self.progress_bar)

        self.current_batch_label = QLabel("Ready to analyze")
        self.current_batch_label.setStyleSheet("font-style: italic; color: #666;")
        progress_layout.addWidget(self.current_batch_label)

        progress_group.setLayout(progress_layout)
        layout.addWidget(progress_group)

        # Statistics section
        stats_group = QGroupBox("Run Statistics")
        stats_layout = QHBoxLayout()

        self.stats_labels = {
            "lines": self._create_stat_widget("Lines", "0", stats_layout),
            "batches": self._create_stat_widget("Batches", "0", stats_layout),
            "records": self._create_stat_widget(
                "Records", "0", stats_layout, STATUS_COLOR_SUCCESS
            ),
            "mismatched": self._create_stat_widget(
                "Mismatched", "0", stats_layout, STATUS_COLOR_ERROR
            ),
        }

        stats_group.setLayout(stats_layout)
        layout.addWidget(stats_group)

        # Activity log section
        log_group = QGroupBox("Activity Log")
        log_layout = QVBoxLayout()

        self.activity_log = QTextEdit()
        self.activity_log.setReadOnly(True)
        self.activity_log.setMinimumHeight(ACTIVITY_LOG_MAX_HEIGHT)
        # Use the first font from the stack
        font_family = MONOSPACE_FONT_STACK.split(",")[0].strip("'")
        self.activity_log.setStyleSheet(ACTIVITY_LOG_STYLE.format(font_family=font_family))
        log_layout.addWidget(self.activity_log)

        log_group.setLayout(log_layout)
        layout.addWidget(log_group, 1)

        self.setLayout(layout)
        self._mismatched = 0

    def _create_stat_widget(
        self,
        label: str,
        value: str,
        parent_layout: QHBoxLayout,
        color: str | None = None,
    ) -> QLabel:
        """Create a statistics widget.

        Returns:
            The value label for updates

        """
        container = QWidget()
        layout = QVBoxLayout()
        layout.setContentsMargins(10, 5, 10, 5)
        layout.setSpacing(2)

        label_widget = QLabel(label)
        label_widget.setAlignment(Qt.AlignmentFlag.AlignCenter)
        label_widget.setStyleSheet("font-size: 12px; color: #666;")
        layout.addWidget(label_widget)

        value_widget = QLabel(value)
        value_widget.setAlignment(Qt.AlignmentFlag.AlignCenter)
        style = "font-size: 20px; font-weight: bold;"
        if color:
            style += f" color: {color};"
        value_widget.setStyleSheet(style)
        layout.addWidget(value_widget)

        container.setLayout(layout)
        parent_layout.addWidget(container)

        return value_widget

    def start_run(self, line_count: int, batch_count: int) -> None:
        """Prepare the panel for a new classification run."""
        self.reset()
        self.progress_bar.setMaximum(batch_count)
        self.stats_labels["lines"].setText(str(line_count))
        self.stats_labels["batches"].setText(str(batch_count))

    def set_current_batch(self, index: int, total: int) -> None:
        """Show which batch is in flight."""
        self.current_batch_label.setText(f"Classifying batch {index} of {total}...")

    def update_batch_progress(self, progress: BatchProgress) -> None:
        """Apply a completed batch to the progress displays."""
        self.progress_bar.setMaximum(progress.batch_count)
        self.progress_bar.setValue(progress.batch_index)
        self.stats_labels["records"].setText(str(progress.records_so_far))
        if not progress.aligned:
            self._mismatched += 1
            self.stats_labels["mismatched"].setText(str(self._mismatched))
        self.add_log_entry(progress.to_display_string())

    def set_finished(self, message: str, color: str = STATUS_COLOR_INFO) -> None:
        """Show the final outcome of a run."""
        self.current_batch_label.setText(message)
        self.current_batch_label.setStyleSheet(f"font-style: italic; color: {color};")

    def add_log_entry(self, message: str) -> None:
        """Add an entry to the activity log."""
        self.activity_log.append(message)
        scrollbar = self.activity_log.verticalScrollBar()
        if scrollbar:
            scrollbar.setValue(scrollbar.maximum())

    def reset(self) -> None:
        """Reset all displays to initial state."""
        self.progress_bar.setValue(0)
        self.current_batch_label.setText("Ready to analyze")
        self.current_batch_label.setStyleSheet("font-style: italic; color: #666;")
        self.activity_log.clear()
        self._mismatched = 0
        for label in self.stats_labels.values():
            label.setText("0")
