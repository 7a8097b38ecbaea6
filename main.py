"""
WordGames - Desktop word guessing game

Entry point for the application.
"""

import logging
import sys

from PySide6.QtWidgets import QApplication

from config import init_config, APP_NAME, APP_VERSION, PATHS

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    """Log to the console and to the per-user log file."""
    handlers = [logging.StreamHandler()]
    try:
        handlers.append(logging.FileHandler(PATHS.log_file, encoding="utf-8"))
    except OSError as e:
        print(f"Warning: file logging disabled: {e}", file=sys.stderr)
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers)


def main() -> int:
    """Main entry point for WordGames."""
    # Initialize configuration and directories
    init_config()
    configure_logging()
    logging.getLogger(__name__).info("Starting %s %s", APP_NAME, APP_VERSION)

    # Create application
    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)

    # Create and show main window, then load the first word list
    from app import WordGamesApp
    word_app = WordGamesApp()
    word_app.show()
    word_app.start()

    # Run event loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
