"""Centralized styling for the Feedback Labeler GUI."""

# Main window styling
MAIN_WINDOW_STYLE = """
    QMainWindow {
        background-color: #f5f5f5;
    }
    QTabWidget::pane {
        border: 1px solid #ddd;
        background-color: white;
    }
    QTabBar::tab {
        padding: 8px 16px;
        margin-right: 2px;
    }
    QTabBar::tab:selected {
        background-color: white;
        border-bottom: 2px solid #0066cc;
    }
    QTabBar::tab:!selected {
        background-color: #f0f0f0;
    }
"""

# Activity log styling
ACTIVITY_LOG_STYLE = """
    QTextEdit {{
        background-color: #f8f9fa;
        border: 1px solid #dee2e6;
        font-family: {font_family};
        font-size: 12px;
    }}
"""

# Title label styling
TITLE_LABEL_STYLE = "font-size: 24px; font-weight: bold; margin-bottom: 20px;"


def create_title_label(text: str):
    """Create a standardized title label."""
    from PyQt6.QtWidgets import QLabel

    from ..constants import TITLE_MAX_HEIGHT

    label = QLabel(text)
    label.setStyleSheet(TITLE_LABEL_STYLE)
    label.setMaximumHeight(TITLE_MAX_HEIGHT)
    return label


def style_file_label() -> str:
    """Get styling for the chosen file label."""
    return "padding: 5px; background-color: #f9f9f9;"


def style_status_message(color: str) -> str:
    """Get styling for a colored status message."""
    return f"color: {color}; font-weight: bold;"


def create_styled_button(text: str, style_constant: str):
    """Create a button with specified style."""
    from PyQt6.QtWidgets import QPushButton

    button = QPushButton(text)
    button.setStyleSheet(style_constant)
    return button


def create_primary_button(text: str):
    """Create a primary styled button."""
    from ..constants import BUTTON_STYLE_PRIMARY

    return create_styled_button(text, BUTTON_STYLE_PRIMARY)


def create_secondary_button(text: str):
    """Create a secondary styled button."""
    from ..constants import BUTTON_STYLE_SECONDARY

    return create_styled_button(text, BUTTON_STYLE_SECONDARY)


def create_danger_button(text: str):
    """Create a danger styled button (red)."""
    from ..constants import BUTTON_STYLE_DANGER

    return create_styled_button(text, BUTTON_STYLE_DANGER)
