import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
from PyQt6.QtWidgets import QApplication

from .config import LOG_FORMAT, LOG_LEVEL
from .constants import APP_STYLE
from .gui.main_window import MainWindow

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format=LOG_FORMAT,
    stream=sys.stdout,
)

# Suppress HTTP request logging from OpenAI/httpx
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("openai").setLevel(logging.WARNING)


def main() -> None:
    """Launch the Feedback Labeler application."""
    # Find the .env file relative to the package, then fall back to the cwd
    load_dotenv(Path(__file__).parent.parent / ".env")
    load_dotenv()

    app = QApplication(sys.argv)
    app.setStyle(APP_STYLE)

    app.setStyleSheet(
        """
        QGroupBox {
            font-size: 16px;
            font-weight: bold;
        }
        QGroupBox::title {
            subcontrol-origin: margin;
            padding: 0 3px;
        }
        QLabel {
            font-size: 15px;
        }
    """
    )

    window = MainWindow()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
