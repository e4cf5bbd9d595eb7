"""
Registration Screen

Sign-up form reached from the login screen. Submitting only returns to the
previous screen.
"""

from typing import Optional

from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QToolButton
from PySide6.QtCore import Qt, Signal

from core.tiling import TilingConfig
from ..widgets import (
    CheckerboardBackground, StyledTextField, StyledButton, create_scroll_column
)


class RegistrationScreen(CheckerboardBackground):
    """Email, password and confirmation fields under a transparent top bar."""

    # Signals
    back_requested = Signal()
    registration_submitted = Signal()

    def __init__(self, tiling: Optional[TilingConfig] = None, parent=None):
        super().__init__(tiling, parent)
        self._setup_ui()

    def _setup_ui(self):
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        scroll_area, layout = create_scroll_column()
        main_layout.addWidget(scroll_area)

        # Keep content clear of the top bar
        layout.addSpacing(100)

        self.email_field = StyledTextField("Email")
        layout.addWidget(self.email_field)

        layout.addSpacing(20)

        self.password_field = StyledTextField("Senha", obscure_text=True)
        layout.addWidget(self.password_field)

        layout.addSpacing(20)

        self.confirm_password_field = StyledTextField("Confirmar Senha", obscure_text=True)
        layout.addWidget(self.confirm_password_field)

        layout.addSpacing(40)

        self.submit_btn = StyledButton("Efetuar Cadastro")
        self.submit_btn.clicked.connect(self.registration_submitted)
        layout.addWidget(self.submit_btn)

        layout.addSpacing(20)
        layout.addStretch()

        # Top bar floats over the scrolling content
        self.app_bar = self._create_app_bar()
        self.app_bar.raise_()

    def _create_app_bar(self) -> QWidget:
        bar = QWidget(self)
        bar.setObjectName("app_bar")
        bar_layout = QHBoxLayout(bar)
        bar_layout.setContentsMargins(8, 8, 16, 8)

        self.back_btn = QToolButton()
        self.back_btn.setObjectName("back_button")
        self.back_btn.setText("←")  # Left arrow
        self.back_btn.setToolTip("Voltar")
        self.back_btn.setCursor(Qt.PointingHandCursor)
        self.back_btn.clicked.connect(self._on_back_clicked)
        bar_layout.addWidget(self.back_btn)

        title = QLabel("Cadastro")
        title.setObjectName("app_bar_title")
        bar_layout.addWidget(title)
        bar_layout.addStretch()

        bar.setFixedHeight(56)
        return bar

    def _on_back_clicked(self):
        self.back_requested.emit()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.app_bar.setFixedWidth(self.width())
