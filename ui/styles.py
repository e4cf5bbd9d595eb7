"""
UI Styles and Theming

Centralized styling for the N64 Login application.
"""

from core.exceptions import InvalidConfigurationError
from core.tiling import DEFAULT_CELL_SIZE, TilingConfig

# Color palette
COLORS = {
    'checker_light': '#F9E8D1',   # Background squares, even cells
    'checker_dark': '#EBCDA6',    # Background squares, odd cells
    'field': '#FBFBFB',           # Light off-white text field background
    'button': '#BFBCA2',          # Button background
    'button_hover': '#ADA98C',    # Darker button for hover
    'button_pressed': '#9C9879',  # Darker still while pressed
    'text_dark': '#000000',       # Labels and field text
    'text_light': '#FFFFFF',      # Button text
    'success': '#4CAF50',         # Check icon on the success screen
    'logo_red': '#E4000F',
    'logo_green': '#009B48',
    'logo_blue': '#0064C8',
    'logo_yellow': '#FFC700',
}

# Shadows as (alpha 0-255, blur radius, x offset, y offset)
FIELD_SHADOW = (26, 4, 0, 2)
BUTTON_SHADOW = (51, 6, 0, 3)

MIN_CELL_SIZE = 4.0
FIELD_RADIUS = 30
BUTTON_HEIGHT = 60
SIDE_MARGIN = 30

# Main application stylesheet
MAIN_STYLESHEET = f"""
QWidget {{
    font-family: 'Segoe UI', 'Arial', sans-serif;
    color: {COLORS['text_dark']};
}}

QLabel#field_label {{
    font-size: 18px;
    font-weight: bold;
    color: {COLORS['text_dark']};
    padding-left: 40px;
    padding-bottom: 8px;
}}

QFrame#field_frame {{
    background-color: {COLORS['field']};
    border-radius: {FIELD_RADIUS}px;
}}

QLineEdit#field_input {{
    font-size: 18px;
    color: {COLORS['text_dark']};
    background: transparent;
    border: none;
    padding: 14px 0px;
}}

QPushButton#styled_button {{
    background-color: {COLORS['button']};
    color: {COLORS['text_light']};
    border: none;
    border-radius: {FIELD_RADIUS}px;
    font-size: 24px;
    font-weight: bold;
}}

QPushButton#styled_button:hover {{
    background-color: {COLORS['button_hover']};
}}

QPushButton#styled_button:pressed {{
    background-color: {COLORS['button_pressed']};
}}

QLabel#app_bar_title {{
    font-size: 20px;
    color: {COLORS['text_dark']};
}}

QToolButton#back_button {{
    font-size: 22px;
    color: {COLORS['text_dark']};
    background: transparent;
    border: none;
}}

QLabel#success_message {{
    font-size: 28px;
    font-weight: bold;
    color: {COLORS['text_dark']};
}}

QScrollArea {{
    border: none;
    background-color: transparent;
}}

QWidget#scroll_content {{
    background: transparent;
}}
"""


def get_background_tiling() -> TilingConfig:
    """
    Build the background tiling from the `background.*` settings.

    Raises:
        InvalidConfigurationError: If the cell size is not a number, or is
            smaller than MIN_CELL_SIZE
    """
    from config import get_config
    config = get_config()

    raw_size = config.get('background.cell_size', DEFAULT_CELL_SIZE)
    try:
        if isinstance(raw_size, bool):
            raise TypeError(raw_size)
        cell_size = float(raw_size)
    except (TypeError, ValueError):
        raise InvalidConfigurationError(
            field="background.cell_size",
            value=str(raw_size),
            message=f"Background cell size is not a number: {raw_size!r}"
        )

    # Smaller cells make every repaint walk a huge grid
    if cell_size < MIN_CELL_SIZE:
        raise InvalidConfigurationError(
            field="background.cell_size",
            value=str(raw_size),
            message=f"Background cell size must be at least {MIN_CELL_SIZE}, got {raw_size!r}"
        )

    return TilingConfig(
        color_a=str(config.get('background.color_a', COLORS['checker_light'])),
        color_b=str(config.get('background.color_b', COLORS['checker_dark'])),
        cell_size=cell_size,
    )
