"""GUI widget components."""

from .label_summary import LabelSummaryPanel
from .status_panel import StatusPanel

__all__ = ["LabelSummaryPanel", "StatusPanel"]
