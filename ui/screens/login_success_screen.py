"""
Login Success Screen

Shown after pressing Login; offers a way back to the start of the flow.
"""

from typing import Optional

from PySide6.QtWidgets import QVBoxLayout, QLabel
from PySide6.QtCore import Qt, Signal

from core.tiling import TilingConfig
from ..widgets import CheckerboardBackground, StyledButton, CheckCircleIcon


class LoginSuccessScreen(CheckerboardBackground):
    """Confirmation message with a button returning to the login screen."""

    # Signals
    back_to_login_requested = Signal()

    def __init__(self, tiling: Optional[TilingConfig] = None, parent=None):
        super().__init__(tiling, parent)
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        layout.addStretch()

        self.icon = CheckCircleIcon(80)
        layout.addWidget(self.icon, 0, Qt.AlignHCenter)

        layout.addSpacing(20)

        self.message_label = QLabel("Login efetuado com sucesso!")
        self.message_label.setObjectName("success_message")
        self.message_label.setAlignment(Qt.AlignCenter)
        self.message_label.setWordWrap(True)
        layout.addWidget(self.message_label)

        layout.addSpacing(40)

        self.back_btn = StyledButton("Voltar ao Login")
        self.back_btn.clicked.connect(self.back_to_login_requested)
        layout.addWidget(self.back_btn)

        layout.addStretch()
