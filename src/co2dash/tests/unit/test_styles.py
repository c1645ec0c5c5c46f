"""
Unit tests for the dashboard stylesheet helpers.
"""

from co2dash import constants
from co2dash.utils.styles import dashboard_style, text_color


def test_text_color_follows_theme():
    assert text_color(True) == constants.styles.DARK_MODE_TEXT_COLOR
    assert text_color(False) == constants.styles.LIGHT_MODE_TEXT_COLOR


def test_dashboard_style_uses_theme_background():
    dark = dashboard_style(True)
    light = dashboard_style(False)
    assert constants.styles.WINDOW_BG_DARK in dark
    assert constants.styles.WINDOW_BG_LIGHT in light
    assert dark != light
