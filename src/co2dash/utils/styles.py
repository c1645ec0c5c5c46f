"""
UI styling engine for CO2Dash using PyQt6 QSS.

This module reads raw style constants from `constants.styles` and uses them
to build dynamic stylesheets for the dashboard window.
"""

from co2dash.constants import styles as style_constants


def text_color(is_dark: bool) -> str:
    """Primary text colour for the given theme."""
    s = style_constants
    return s.DARK_MODE_TEXT_COLOR if is_dark else s.LIGHT_MODE_TEXT_COLOR


def dashboard_style(is_dark: bool) -> str:
    """Returns the QSS for the whole dashboard window."""
    s = style_constants
    bg = s.WINDOW_BG_DARK if is_dark else s.WINDOW_BG_LIGHT
    fg = text_color(is_dark)
    subtle = s.SUBTLE_TEXT_COLOR_DARK if is_dark else s.SUBTLE_TEXT_COLOR_LIGHT
    button_bg = s.BUTTON_BG_DARK if is_dark else s.BUTTON_BG_LIGHT
    button_border = s.BUTTON_BORDER_DARK if is_dark else s.BUTTON_BORDER_LIGHT

    return f"""
        QWidget {{
            background-color: {bg};
            color: {fg};
            font-size: 13px;
        }}
        QLabel#summaryTitle {{
            font-weight: 700;
        }}
        QLabel#subtleText {{
            color: {subtle};
            font-size: 11px;
        }}
        QLabel#errorLabel {{
            color: {s.ERROR_TEXT_COLOR};
            font-weight: 700;
        }}
        QPushButton {{
            background-color: {button_bg};
            border: 1px solid {button_border};
            border-radius: 4px;
            padding: 5px 14px;
        }}
        QPushButton:hover {{
            border-color: {s.UI_ACCENT};
        }}
        QSlider::handle:horizontal {{
            background: {s.UI_ACCENT};
            width: 12px;
            margin: -5px 0;
            border-radius: 6px;
        }}
        QSlider::groove:horizontal {{
            height: 4px;
            background: {button_border};
            border-radius: 2px;
        }}
    """
