"""LangGraph workflow components for batch feedback classification."""

from .state import BatchState
from .workflow import classify_feedback_text, get_compiled_workflow, make_classify_fn

__all__ = [
    "BatchState",
    "classify_feedback_text",
    "get_compiled_workflow",
    "make_classify_fn",
]
