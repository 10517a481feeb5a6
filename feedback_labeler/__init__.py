"""Feedback Labeler - batch LLM labeling of customer feedback with review and export."""

from .config import DEFAULT_BATCH_SIZE, MODEL_CONFIG
from .exceptions import (
    ClassificationCancelledError,
    ClassificationError,
    EmptyResultWarning,
    ExportError,
    FeedbackLabelerError,
    InputEmptyError,
    UnsupportedInputFormat,
)

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_BATCH_SIZE",
    "MODEL_CONFIG",
    "ClassificationCancelledError",
    "ClassificationError",
    "EmptyResultWarning",
    "ExportError",
    "FeedbackLabelerError",
    "InputEmptyError",
    "UnsupportedInputFormat",
]
