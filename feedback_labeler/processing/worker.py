"""Background worker thread for batch feedback classification."""

import logging

from PyQt6.QtCore import QThread, pyqtSignal

from ..exceptions import (
    ClassificationCancelledError,
    ClassificationError,
    EmptyResultWarning,
)
from ..langgraph.workflow import make_classify_fn
from ..models.feedback import BatchProgress
from .batch_classifier import ClassifyFn, expected_batch_count, iter_classify

logger = logging.getLogger(__name__)


class ClassificationWorker(QThread):
    """Background thread for classifying feedback batches.

    Emits signals to update the GUI with batch progress and results.
    Batches run one after another; results are only handed over once
    every batch has succeeded.
    """

    # Signals for communicating with GUI
    batch_started = pyqtSignal(int, int)  # batch index, batch count
    batch_completed = pyqtSignal(BatchProgress)
    classification_complete = pyqtSignal(list)  # list[FeedbackRecord]
    no_results = pyqtSignal(str)  # informational message
    cancelled = pyqtSignal()
    error_occurred = pyqtSignal(str)  # error message

    def __init__(
        self,
        lines: list[str],
        batch_size: int,
        system_instruction: str | None = None,
        custom_labels: list[str] | None = None,
        classify_fn: ClassifyFn | None = None,
    ) -> None:
        """Initialize the classification worker.

        Args:
            lines: Non-blank feedback lines to classify
            batch_size: Maximum lines per classification call
            system_instruction: Optional system prompt for the model
            custom_labels: Optional labels the model should prefer
            classify_fn: Override for the workflow backed classify function

        """
        super().__init__()
        self.lines = lines
        self.batch_size = batch_size
        self.classify_fn = classify_fn or make_classify_fn(system_instruction, custom_labels)
        self._is_cancelled = False
        self._batch_index = 0

    def cancel(self) -> None:
        """Cancel the classification; the batch in flight is discarded."""
        self._is_cancelled = True

    def _is_cancel_requested(self) -> bool:
        return self._is_cancelled

    def run(self) -> None:
        """Execute the batch loop in the background thread."""
        batch_count = expected_batch_count(len(self.lines), self.batch_size)

        def classify_with_signal(text: str):
            # Tracks the index of the batch about to be sent
            self._batch_index += 1
            self.batch_started.emit(self._batch_index, batch_count)
            return self.classify_fn(text)

        self._batch_index = 0
        generator = iter_classify(
            self.lines, classify_with_signal, self.batch_size, self._is_cancel_requested
        )

        try:
            while True:
                try:
                    progress = next(generator)
                except StopIteration as stop:
                    records = stop.value
                    break
                self.batch_completed.emit(progress)

            # A batch in flight when cancel was pressed is discarded too
            if self._is_cancelled:
                raise ClassificationCancelledError("Classification cancelled")

            self.classification_complete.emit(records)

        except ClassificationCancelledError:
            self.cancelled.emit()
        except EmptyResultWarning as e:
            if self._is_cancelled:
                self.cancelled.emit()
            else:
                self.no_results.emit(f"{e}. Please check your input.")
        except ClassificationError as e:
            logger.error(f"Classification failed: {e}")
            self.error_occurred.emit(f"An error occurred while analyzing the feedback: {e}")
        except Exception as e:
            logger.exception("Unexpected error during classification")
            self.error_occurred.emit(f"Processing failed: {e!s}")
