#!/usr/bin/env python3
"""
N64 Login - GUI Application

Usage:
    python main_ui.py
    N64LOGIN_ENV=production N64LOGIN_CELL_SIZE=48 python main_ui.py
"""

import sys
import os

# Must be set before Qt is imported; an explicit value (e.g. offscreen) wins
os.environ.setdefault('QT_QPA_PLATFORM', 'xcb')

from PySide6.QtWidgets import QApplication, QMessageBox

from ui import __version__
from ui.main_window import MainWindow
from core.exceptions import InvalidConfigurationError
from core.logging_config import setup_logging, get_logger, get_session_id

logger = get_logger(__name__)


def report_startup_error(error: InvalidConfigurationError) -> None:
    """Log a configuration problem and show it to the user."""
    logger.error(f"Invalid configuration: {error} {error.details}")
    QMessageBox.critical(None, "Invalid Configuration", error.get_user_message())


def main():
    """Main entry point for the GUI application."""
    app = QApplication(sys.argv)
    app.setApplicationName("N64 Login")
    app.setApplicationVersion(__version__)

    try:
        setup_logging()
        logger.info(f"N64 Login v{__version__} starting (session {get_session_id()})")
        window = MainWindow()
    except InvalidConfigurationError as e:
        report_startup_error(e)
        return 1

    window.show()
    exit_code = app.exec()
    logger.info(f"Application exiting with code {exit_code}")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
