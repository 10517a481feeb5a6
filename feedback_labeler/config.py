"""Configuration settings for Feedback Labeler."""

import os

# Model configuration
MODEL_CONFIG: dict[str, str | float | int] = {
    "classification_model": "gpt-4o-mini",
    "temperature": 0.1,
}

# Batching
DEFAULT_BATCH_SIZE = 250
MAX_BATCH_SIZE = 1000

# Set to "1" to use the keyword mock classifier instead of the OpenAI model
MOCK_CLASSIFIER_ENV = "FEEDBACK_LABELER_MOCK"

# Example labels shown to the model when no custom labels are given
EXAMPLE_LABELS = ["Bug Report", "Feature Request", "Positive Feedback", "UI/UX"]

# Export file names
BASIC_EXPORT_FILENAME = "feedback_analysis_results.xlsx"
DETAILED_EXPORT_FILENAME = "feedback_analysis_detailed_export.xlsx"

# Export sheet names
SHEET_BASIC = "Feedback Analysis"
SHEET_EXPLODED = "Exploded Labels"
SHEET_COMPILED = "Compiled Feedback"
SHEET_COUNTS = "Label Counts"

# Supported upload types
SUPPORTED_INPUT_EXTENSIONS = (".csv", ".xlsx", ".xls")

# Logging configuration
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL = "INFO"


def use_mock_classifier() -> bool:
    """Check whether the mock classifier is switched on via the environment."""
    return os.getenv(MOCK_CLASSIFIER_ENV, "").strip().lower() in ("1", "true", "yes")
