import logging
from datetime import datetime
from pathlib import Path

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QFileDialog,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMessageBox,
    QPlainTextEdit,
    QSpinBox,
    QSplitter,
    QVBoxLayout,
    QWidget,
)

from ...config import MAX_BATCH_SIZE
from ...constants import (
    FILE_DIALOG_FILTER,
    MAIN_LAYOUT_MARGINS,
    SPLITTER_SIZES,
    STATUS_COLOR_ERROR,
    STATUS_COLOR_INFO,
    STATUS_COLOR_SUCCESS,
    SYSTEM_PROMPT_MAX_HEIGHT,
    TIME_FORMAT,
    WIDGET_SPACING,
)
from ...exceptions import InputEmptyError, UnsupportedInputFormat
from ...models.feedback import BatchProgress
from ...processing.batch_classifier import expected_batch_count
from ...processing.session import AnalysisSession
from ...processing.worker import ClassificationWorker
from ...services.input_loader import load_feedback_file
from ..styles import (
    create_danger_button,
    create_primary_button,
    create_secondary_button,
    create_title_label,
    style_file_label,
)
from ..widgets.status_panel import StatusPanel

logger = logging.getLogger(__name__)


class AnalyzeTab(QWidget):
    """Tab for feedback intake and batch classification.

    Lets the user paste feedback or load it from a CSV/Excel file, tune
    the prompt, and run the classifier in a background worker.
    """

    analysis_complete = pyqtSignal(list)  # Emitted with the new records
    analysis_started = pyqtSignal()

    def __init__(self, session: AnalysisSession) -> None:
        super().__init__()
        self.session = session
        self.worker: ClassificationWorker | None = None
        self._init_ui()
        self._check_inputs()

    def _init_ui(self) -> None:
        main_layout = QVBoxLayout()
        main_layout.setContentsMargins(*MAIN_LAYOUT_MARGINS)
        main_layout.setSpacing(WIDGET_SPACING)

        main_layout.addWidget(create_title_label("Feedback Analysis"), 0)

        splitter = QSplitter(Qt.Orientation.Horizontal)
        splitter.addWidget(self._create_input_widget())

        self.status_panel = StatusPanel()
        splitter.addWidget(self.status_panel)
        splitter.setSizes(SPLITTER_SIZES)

        main_layout.addWidget(splitter, 1)
        self.setLayout(main_layout)

    def _create_input_widget(self) -> QWidget:
        """Create the left side with input and prompt settings."""
        widget = QWidget()
        layout = QVBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)

        # Feedback input
        input_group = QGroupBox("Customer Feedback")
        input_layout = QVBoxLayout()

        file_layout = QHBoxLayout()
        self.file_button = create_secondary_button("Upload CSV / Excel...")
        self.file_button.clicked.connect(self.select_file)
        file_layout.addWidget(self.file_button)
        self.file_label = QLabel("No file chosen")
        self.file_label.setStyleSheet(style_file_label())
        file_layout.addWidget(self.file_label, 1)
        input_layout.addLayout(file_layout)

        self.feedback_input = QPlainTextEdit()
        self.feedback_input.setPlaceholderText("Paste customer feedback here, one item per line...")
        self.feedback_input.textChanged.connect(self._check_inputs)
        input_layout.addWidget(self.feedback_input, 1)

        input_group.setLayout(input_layout)
        layout.addWidget(input_group, 1)

        # Prompt settings
        settings_group = QGroupBox("Classifier Settings")
        settings_layout = QFormLayout()

        self.system_prompt_input = QPlainTextEdit()
        self.system_prompt_input.setPlaceholderText("Optional instructions for the model")
        self.system_prompt_input.setMaximumHeight(SYSTEM_PROMPT_MAX_HEIGHT)
        settings_layout.addRow("System instruction:", self.system_prompt_input)

        self.custom_labels_input = QLineEdit()
        self.custom_labels_input.setPlaceholderText("e.g. Billing, Onboarding, Mobile App")
        settings_layout.addRow("Suggested labels:", self.custom_labels_input)

        self.batch_size_input = QSpinBox()
        self.batch_size_input.setRange(1, MAX_BATCH_SIZE)
        self.batch_size_input.setValue(self.session.batch_size)
        settings_layout.addRow("Batch size:", self.batch_size_input)

        settings_group.setLayout(settings_layout)
        layout.addWidget(settings_group, 0)

        # Controls
        button_layout = QHBoxLayout()
        self.analyze_button = create_primary_button("Analyze Feedback")
        self.analyze_button.clicked.connect(self.start_analysis)
        button_layout.addWidget(self.analyze_button)

        self.cancel_button = create_danger_button("Cancel")
        self.cancel_button.clicked.connect(self.cancel_analysis)
        self.cancel_button.setEnabled(False)
        button_layout.addWidget(self.cancel_button)
        layout.addLayout(button_layout)

        widget.setLayout(layout)
        return widget

    def _check_inputs(self) -> None:
        """Enable Analyze only when there is text and no run in flight."""
        running = self.worker is not None and self.worker.isRunning()
        has_text = bool(self.feedback_input.toPlainText().strip())
        self.analyze_button.setEnabled(has_text and not running)

    def _log(self, message: str) -> None:
        timestamp = datetime.now().strftime(TIME_FORMAT)
        self.status_panel.add_log_entry(f"[{timestamp}] {message}")

    def select_file(self) -> None:
        """Load feedback from a CSV or Excel file into the input box."""
        filename, _ = QFileDialog.getOpenFileName(
            self, "Select Feedback File", str(Path.home()), FILE_DIALOG_FILTER
        )
        if not filename:
            return

        path = Path(filename)
        try:
            text = load_feedback_file(path)
        except UnsupportedInputFormat as e:
            self.file_label.setText("No file chosen")
            QMessageBox.warning(self, "Unsupported File", str(e))
            return

        self.file_label.setText(path.name)
        self.feedback_input.setPlainText(text)
        self._log(f"Loaded {path.name}")

    def start_analysis(self) -> None:
        """Validate input and start the background classification."""
        try:
            lines = self.session.prepare_lines(self.feedback_input.toPlainText())
        except InputEmptyError as e:
            QMessageBox.warning(self, "No Feedback", str(e))
            return

        system_instruction = self.system_prompt_input.toPlainText().strip() or None
        self.session.system_instruction = system_instruction
        self.session.set_custom_labels_from_text(self.custom_labels_input.text())
        self.session.batch_size = self.batch_size_input.value()

        batch_count = expected_batch_count(len(lines), self.session.batch_size)
        self.status_panel.start_run(len(lines), batch_count)
        self._log(f"Starting analysis of {len(lines)} lines in {batch_count} batch(es)")

        self.worker = ClassificationWorker(
            lines,
            self.session.batch_size,
            system_instruction=system_instruction,
            custom_labels=self.session.custom_labels,
        )
        self.worker.batch_started.connect(self._on_batch_started)
        self.worker.batch_completed.connect(self._on_batch_completed)
        self.worker.classification_complete.connect(self._on_complete)
        self.worker.no_results.connect(self._on_no_results)
        self.worker.cancelled.connect(self._on_cancelled)
        self.worker.error_occurred.connect(self._on_error)
        self.worker.finished.connect(self._on_worker_finished)

        self.analyze_button.setEnabled(False)
        self.cancel_button.setEnabled(True)
        self.analysis_started.emit()
        self.worker.start()

    def cancel_analysis(self) -> None:
        if self.worker and self.worker.isRunning():
            self.worker.cancel()
            self.cancel_button.setEnabled(False)
            self._log("Cancelling after the current batch...")

    def _on_batch_started(self, index: int, total: int) -> None:
        self.status_panel.set_current_batch(index, total)

    def _on_batch_completed(self, progress: BatchProgress) -> None:
        self.status_panel.update_batch_progress(progress)

    def _on_complete(self, records: list) -> None:
        self.session.replace_records(records)
        self.status_panel.set_finished(
            f"Analysis complete: {len(records)} feedback items labeled", STATUS_COLOR_SUCCESS
        )
        self._log("Analysis complete")
        self.analysis_complete.emit(records)

    def _on_no_results(self, message: str) -> None:
        self.status_panel.set_finished(message, STATUS_COLOR_INFO)
        self._log(message)

    def _on_cancelled(self) -> None:
        self.status_panel.set_finished("Analysis cancelled", STATUS_COLOR_INFO)
        self._log("Analysis cancelled; no results were kept")

    def _on_error(self, message: str) -> None:
        self.status_panel.set_finished("Analysis failed", STATUS_COLOR_ERROR)
        self._log(message)
        QMessageBox.critical(self, "Analysis Error", message)

    def _on_worker_finished(self) -> None:
        self.cancel_button.setEnabled(False)
        self.worker = None
        self._check_inputs()
