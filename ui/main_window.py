"""
Main Window for N64 Login

Central controller owning the navigation stack of screens.
"""

import logging
from typing import List, Optional

from PySide6.QtWidgets import QMainWindow, QStackedWidget, QWidget

from config import get_config
from core.tiling import TilingConfig
from .styles import MAIN_STYLESHEET, get_background_tiling
from .screens.login_screen import LoginScreen
from .screens.registration_screen import RegistrationScreen
from .screens.login_success_screen import LoginSuccessScreen

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Main application window.

    Screens are kept on a stack: the login screen is the root, pushed
    screens are created fresh and disposed when popped.
    """

    def __init__(self, tiling: Optional[TilingConfig] = None):
        super().__init__()

        self.tiling = tiling if tiling is not None else get_background_tiling()
        self._history: List[QWidget] = []

        self._setup_ui()
        self._connect_signals()

    def _setup_ui(self):
        """Setup the main window UI."""
        config = get_config()
        self.setWindowTitle(config.get('app.title', 'N64 Login'))
        self.setMinimumSize(
            config.get('window.min_width', 360),
            config.get('window.min_height', 640)
        )
        self.resize(config.get('window.width', 420), config.get('window.height', 860))

        # Apply stylesheet
        self.setStyleSheet(MAIN_STYLESHEET)

        self.screen_stack = QStackedWidget()
        self.setCentralWidget(self.screen_stack)

        # Root screen
        self.login_screen = LoginScreen(self.tiling)
        self.push(self.login_screen)

    def _connect_signals(self):
        """Connect screen signals to handlers."""
        self.login_screen.login_requested.connect(self._on_login_requested)
        self.login_screen.register_requested.connect(self._on_register_requested)

    # Navigation stack

    @property
    def depth(self) -> int:
        return len(self._history)

    @property
    def current_screen(self) -> Optional[QWidget]:
        return self._history[-1] if self._history else None

    def push(self, screen: QWidget) -> None:
        """Show a screen on top of the current one."""
        self._history.append(screen)
        self.screen_stack.addWidget(screen)
        self.screen_stack.setCurrentWidget(screen)
        logger.info(f"Navigated to {type(screen).__name__} (depth={self.depth})")

    def pop(self) -> Optional[QWidget]:
        """
        Dispose of the top screen and show the one below it.

        The root screen is never popped.

        Returns:
            The removed screen, or None when already at the root
        """
        if len(self._history) <= 1:
            logger.debug("Pop ignored at root screen")
            return None

        screen = self._history.pop()
        self.screen_stack.removeWidget(screen)
        screen.deleteLater()
        self.screen_stack.setCurrentWidget(self._history[-1])
        logger.info(
            f"Closed {type(screen).__name__}, back to "
            f"{type(self._history[-1]).__name__} (depth={self.depth})"
        )
        return screen

    def pop_to_root(self) -> None:
        """Dispose of every screen above the root."""
        while len(self._history) > 1:
            self.pop()

    def set_tiling(self, tiling: TilingConfig) -> None:
        """Apply a new background to every open screen."""
        self.tiling = tiling
        repainted = sum(1 for screen in self._history if screen.set_tiling(tiling))
        logger.debug(f"Background updated on {repainted} of {self.depth} screens")

    # Screen handlers

    def _on_login_requested(self):
        screen = LoginSuccessScreen(self.tiling)
        screen.back_to_login_requested.connect(self.pop_to_root)
        self.push(screen)

    def _on_register_requested(self):
        screen = RegistrationScreen(self.tiling)
        screen.registration_submitted.connect(self.pop)
        screen.back_requested.connect(self.pop)
        self.push(screen)

    def closeEvent(self, event):
        """Handle window close event."""
        logger.info("Main window closed")
        event.accept()
