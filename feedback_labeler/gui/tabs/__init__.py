"""Tab components for the Feedback Labeler GUI."""

from .analyze_tab import AnalyzeTab
from .review_tab import ReviewTab

__all__ = ["AnalyzeTab", "ReviewTab"]
