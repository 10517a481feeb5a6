"""Custom exceptions for Feedback Labeler."""


class FeedbackLabelerError(Exception):
    """Base exception for Feedback Labeler."""

    pass


class InputEmptyError(FeedbackLabelerError):
    """Raised when no feedback text was provided."""

    pass


class UnsupportedInputFormat(FeedbackLabelerError):
    """Raised when an uploaded file cannot be parsed."""

    pass


class ClassificationError(FeedbackLabelerError):
    """Raised when a batch classification call fails."""

    pass


class ClassificationCancelledError(ClassificationError):
    """Raised when the user cancels a classification run."""

    pass


class ExportError(FeedbackLabelerError):
    """Raised when a workbook cannot be written."""

    pass


class EmptyResultWarning(UserWarning):
    """Raised when classification succeeded but produced no records.

    Deliberately outside the FeedbackLabelerError hierarchy so callers
    can tell "nothing to show" apart from "call failed".
    """

    pass
