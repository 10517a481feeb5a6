from PyQt6.QtWidgets import QMainWindow, QTabWidget, QVBoxLayout, QWidget

from ..constants import (
    TAB_ANALYZE,
    TAB_REVIEW,
    WINDOW_INITIAL_POSITION,
    WINDOW_INITIAL_SIZE,
    WINDOW_TITLE,
)
from ..processing.session import AnalysisSession
from .styles import MAIN_WINDOW_STYLE
from .tabs.analyze_tab import AnalyzeTab
from .tabs.review_tab import ReviewTab


class MainWindow(QMainWindow):
    """Main application window with tabbed interface.

    Owns the analysis session and shares it between the Analyze and
    Review tabs.
    """

    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.setGeometry(
            WINDOW_INITIAL_POSITION[0],
            WINDOW_INITIAL_POSITION[1],
            WINDOW_INITIAL_SIZE[0],
            WINDOW_INITIAL_SIZE[1],
        )

        self.session = AnalysisSession()

        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        layout = QVBoxLayout(central_widget)

        self.tab_widget = QTabWidget()
        layout.addWidget(self.tab_widget)

        self.analyze_tab = AnalyzeTab(self.session)
        self.review_tab = ReviewTab(self.session)

        self.tab_widget.addTab(self.analyze_tab, TAB_ANALYZE)
        self.tab_widget.addTab(self.review_tab, TAB_REVIEW)

        self._connect_signals()
        self.setStyleSheet(MAIN_WINDOW_STYLE)

    def _connect_signals(self) -> None:
        """Connect signals between tabs."""
        self.analyze_tab.analysis_complete.connect(self._on_analysis_complete)
        self.review_tab.records_edited.connect(self._update_window_title)

    def _on_analysis_complete(self, records: list) -> None:
        self.review_tab.refresh()
        self._update_window_title()
        self.tab_widget.setCurrentWidget(self.review_tab)

    def _update_window_title(self) -> None:
        stats = self.session.review_statistics()
        if stats.total:
            self.setWindowTitle(f"{WINDOW_TITLE} - {stats.total} items, {stats.incorrect} flagged")
        else:
            self.setWindowTitle(WINDOW_TITLE)
