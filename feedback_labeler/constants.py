"""Constants used throughout the Feedback Labeler application."""

# Window configuration
WINDOW_TITLE = "Feedback Labeler"
WINDOW_INITIAL_SIZE = (1300, 850)
WINDOW_INITIAL_POSITION = (100, 100)

# Application styling
APP_STYLE = "Fusion"

# Tab names
TAB_ANALYZE = "Analyze"
TAB_REVIEW = "Review"

# GUI Layout constants
SPLITTER_SIZES = [550, 450]
REVIEW_SPLITTER_SIZES = [850, 350]
ACTIVITY_LOG_MAX_HEIGHT = 200
SYSTEM_PROMPT_MAX_HEIGHT = 90

# UI Element sizing
TITLE_MAX_HEIGHT = 50
STATUS_MESSAGE_MAX_HEIGHT = 30
STATUS_MESSAGE_TIMEOUT_MS = 3000

# Time format
TIME_FORMAT = "%H:%M:%S"

# File dialogs
FILE_DIALOG_FILTER = (
    "Feedback files (*.csv *.xlsx *.xls);;CSV files (*.csv);;Excel files (*.xlsx *.xls)"
)

# Button styling
BUTTON_STYLE_PRIMARY = """
    QPushButton {
        padding: 10px 30px;
        background-color: #28a745;
        color: white;
        border: none;
        border-radius: 3px;
        font-size: 16px;
        font-weight: bold;
    }
    QPushButton:hover:enabled {
        background-color: #218838;
    }
    QPushButton:disabled {
        background-color: #cccccc;
    }
"""

BUTTON_STYLE_DANGER = """
    QPushButton {
        padding: 10px 30px;
        background-color: #dc3545;
        color: white;
        border: none;
        border-radius: 3px;
        font-size: 16px;
        font-weight: bold;
    }
    QPushButton:hover:enabled {
        background-color: #c82333;
    }
    QPushButton:disabled {
        background-color: #cccccc;
    }
"""

BUTTON_STYLE_SECONDARY = """
    QPushButton {
        padding: 5px 15px;
        background-color: #0066cc;
        color: white;
        border: none;
        border-radius: 3px;
    }
    QPushButton:hover:enabled {
        background-color: #0052a3;
    }
    QPushButton:disabled {
        background-color: #cccccc;
        color: #666666;
    }
"""

# Font settings
MONOSPACE_FONT_STACK = "'Courier New', Courier, Monaco, 'Lucida Console', monospace"

# Layout margins and spacing
MAIN_LAYOUT_MARGINS = (20, 20, 20, 20)
WIDGET_SPACING = 10

# Table column widths
TABLE_INCORRECT_COLUMN_WIDTH = 90
TABLE_LABELS_COLUMN_WIDTH = 300

# Review table colors
INCORRECT_ROW_COLOR = "#FFC7CE"

# Status message colors
STATUS_COLOR_SUCCESS = "#28a745"
STATUS_COLOR_ERROR = "#dc3545"
STATUS_COLOR_INFO = "#0066cc"
