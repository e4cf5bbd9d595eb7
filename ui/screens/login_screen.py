"""
Login Screen

Initial screen of the application: logo, credentials form, and buttons
leading to the success and registration screens.
"""

from typing import Optional

from PySide6.QtWidgets import QVBoxLayout
from PySide6.QtCore import Qt, Signal

from core.tiling import TilingConfig
from ..widgets import (
    CheckerboardBackground, StyledTextField, StyledButton, N64Logo,
    create_scroll_column
)


class LoginScreen(CheckerboardBackground):
    """
    Login Screen

    The credentials are not checked; both buttons only request navigation.
    """

    # Signals
    login_requested = Signal()
    register_requested = Signal()

    def __init__(self, tiling: Optional[TilingConfig] = None, parent=None):
        super().__init__(tiling, parent)
        self._setup_ui()

    def _setup_ui(self):
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)

        scroll_area, layout = create_scroll_column()
        main_layout.addWidget(scroll_area)

        layout.addSpacing(80)

        self.logo = N64Logo(200)
        layout.addWidget(self.logo, 0, Qt.AlignHCenter)

        layout.addSpacing(60)

        self.email_field = StyledTextField("Email")
        layout.addWidget(self.email_field)

        layout.addSpacing(20)

        self.password_field = StyledTextField("Senha", obscure_text=True)
        layout.addWidget(self.password_field)

        layout.addSpacing(40)

        self.login_btn = StyledButton("Login")
        self.login_btn.clicked.connect(self.login_requested)
        layout.addWidget(self.login_btn)

        layout.addSpacing(20)

        self.register_btn = StyledButton("Cadastrar")
        self.register_btn.clicked.connect(self.register_requested)
        layout.addWidget(self.register_btn)

        layout.addSpacing(40)
        layout.addStretch()
