"""
Shared Widgets

Checkerboard background, rounded text field and rounded button used by
every screen.
"""

import logging
from typing import Optional

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QFrame,
    QLineEdit, QScrollArea, QSizePolicy, QGraphicsDropShadowEffect
)
from PySide6.QtCore import Qt, QRectF, QPointF, Signal
from PySide6.QtGui import QPainter, QColor, QPen, QPainterPath

from core.tiling import TilingConfig, render, should_redraw
from .styles import (
    COLORS, FIELD_SHADOW, BUTTON_SHADOW, BUTTON_HEIGHT, SIDE_MARGIN,
    get_background_tiling
)

logger = logging.getLogger(__name__)


def _drop_shadow(shadow: tuple, parent=None) -> QGraphicsDropShadowEffect:
    alpha, blur, dx, dy = shadow
    effect = QGraphicsDropShadowEffect(parent)
    effect.setColor(QColor(0, 0, 0, alpha))
    effect.setBlurRadius(blur)
    effect.setOffset(dx, dy)
    return effect


class CheckerboardBackground(QWidget):
    """
    Widget that paints a two-colour checkerboard over its whole area.

    Screens derive from it so the pattern sits behind their content.
    """

    def __init__(self, tiling: Optional[TilingConfig] = None, parent=None):
        super().__init__(parent)
        self._tiling = tiling if tiling is not None else get_background_tiling()

    @property
    def tiling(self) -> TilingConfig:
        return self._tiling

    def set_tiling(self, tiling: TilingConfig) -> bool:
        """
        Replace the tiling, repainting only when it actually changed.

        Returns:
            True if a repaint was scheduled
        """
        if not should_redraw(self._tiling, tiling):
            return False
        logger.debug(f"Background tiling changed: {self._tiling} -> {tiling}")
        self._tiling = tiling
        self.update()
        return True

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setPen(Qt.NoPen)
        painter.setClipRect(self.rect())

        brushes = {}
        for rect in render(self.width(), self.height(), self._tiling):
            color = brushes.get(rect.color)
            if color is None:
                color = brushes[rect.color] = QColor(rect.color)
            painter.fillRect(QRectF(rect.x, rect.y, rect.width, rect.height), color)
        painter.end()


class StyledTextField(QWidget):
    """Bold label above a rounded, shadowed input."""

    def __init__(self, label_text: str, obscure_text: bool = False, parent=None):
        super().__init__(parent)
        self.label_text = label_text
        self.obscure_text = obscure_text
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.label = QLabel(self.label_text)
        self.label.setObjectName("field_label")
        layout.addWidget(self.label)

        self.frame = QFrame()
        self.frame.setObjectName("field_frame")
        self.frame.setGraphicsEffect(_drop_shadow(FIELD_SHADOW, self.frame))
        frame_layout = QHBoxLayout(self.frame)
        frame_layout.setContentsMargins(20, 0, 20, 0)

        self.line_edit = QLineEdit()
        self.line_edit.setObjectName("field_input")
        if self.obscure_text:
            self.line_edit.setEchoMode(QLineEdit.Password)
        frame_layout.addWidget(self.line_edit)

        margin_layout = QHBoxLayout()
        margin_layout.setContentsMargins(SIDE_MARGIN, 0, SIDE_MARGIN, 0)
        margin_layout.addWidget(self.frame)
        layout.addLayout(margin_layout)

    def text(self) -> str:
        return self.line_edit.text()

    def clear(self):
        self.line_edit.clear()


class StyledButton(QWidget):
    """Full-width rounded button with a soft shadow."""

    clicked = Signal()

    def __init__(self, text: str, parent=None):
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(SIDE_MARGIN, 0, SIDE_MARGIN, 0)

        self.button = QPushButton(text)
        self.button.setObjectName("styled_button")
        self.button.setFixedHeight(BUTTON_HEIGHT)
        self.button.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Fixed)
        self.button.setCursor(Qt.PointingHandCursor)
        self.button.setGraphicsEffect(_drop_shadow(BUTTON_SHADOW, self.button))
        self.button.clicked.connect(self._on_clicked)
        layout.addWidget(self.button)

    def text(self) -> str:
        return self.button.text()

    def click(self):
        """Programmatically press the button."""
        self.button.click()

    def _on_clicked(self):
        self.clicked.emit()


class N64Logo(QWidget):
    """Four-colour cube badge shown above the login form."""

    def __init__(self, size: int = 200, parent=None):
        super().__init__(parent)
        self.size = size
        self.setFixedSize(size, size)

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        painter.setPen(Qt.NoPen)

        # Diamond of four tiles around the centre
        half = self.size / 2
        tile = self.size * 0.3
        gap = self.size * 0.03
        painter.translate(half, half)
        painter.rotate(45)
        tiles = [
            (-tile - gap, -tile - gap, COLORS['logo_red']),
            (gap, -tile - gap, COLORS['logo_green']),
            (-tile - gap, gap, COLORS['logo_blue']),
            (gap, gap, COLORS['logo_yellow']),
        ]
        for x, y, color in tiles:
            painter.setBrush(QColor(color))
            painter.drawRoundedRect(QRectF(x, y, tile, tile), tile * 0.12, tile * 0.12)
        painter.end()


class CheckCircleIcon(QWidget):
    """Outlined circle with a check mark."""

    def __init__(self, size: int = 80, color: str = COLORS['success'], parent=None):
        super().__init__(parent)
        self.size = size
        self.color = color
        self.setFixedSize(size, size)

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)

        stroke = self.size * 0.08
        pen = QPen(QColor(self.color), stroke)
        pen.setCapStyle(Qt.RoundCap)
        pen.setJoinStyle(Qt.RoundJoin)
        painter.setPen(pen)
        painter.setBrush(Qt.NoBrush)

        inset = stroke / 2 + 1
        painter.drawEllipse(QRectF(inset, inset, self.size - 2 * inset, self.size - 2 * inset))

        check = QPainterPath(QPointF(self.size * 0.28, self.size * 0.52))
        check.lineTo(QPointF(self.size * 0.44, self.size * 0.67))
        check.lineTo(QPointF(self.size * 0.72, self.size * 0.37))
        painter.drawPath(check)
        painter.end()


def create_scroll_column(parent=None) -> tuple:
    """
    Build a transparent, vertically scrolling column.

    Returns:
        (scroll_area, content_layout)
    """
    scroll_area = QScrollArea(parent)
    scroll_area.setWidgetResizable(True)
    scroll_area.setFrameShape(QFrame.NoFrame)
    scroll_area.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
    scroll_area.viewport().setAutoFillBackground(False)

    content = QWidget()
    content.setObjectName("scroll_content")
    content.setAutoFillBackground(False)
    content_layout = QVBoxLayout(content)
    content_layout.setContentsMargins(0, 0, 0, 0)
    content_layout.setSpacing(0)

    scroll_area.setWidget(content)
    return scroll_area, content_layout
