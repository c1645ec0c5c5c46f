"""
Light/dark theme selection and the chart palette for each theme.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QGuiApplication

from co2dash import constants
from co2dash.constants import styles as style_constants

logger = logging.getLogger("CO2Dash.Theme")


class Theme(Enum):
    LIGHT = "light"
    DARK = "dark"

    @property
    def label(self) -> str:
        return constants.strings.THEME_LIGHT if self is Theme.LIGHT else constants.strings.THEME_DARK


@dataclass(frozen=True)
class ChartPalette:
    """Colours the renderer needs for one theme."""
    background: str
    text: str
    grid: str
    series: str
    minor_grid_alpha: float
    major_grid_alpha: float


_PALETTES = {
    Theme.LIGHT: ChartPalette(
        background=style_constants.GRAPH_BG_LIGHT,
        text=style_constants.LIGHT_MODE_TEXT_COLOR,
        grid=constants.graph.GRID_COLOR_LIGHT,
        series=constants.graph.SERIES_LINE_COLOR_LIGHT,
        minor_grid_alpha=constants.graph.MINOR_GRID_ALPHA,
        major_grid_alpha=constants.graph.MAJOR_GRID_ALPHA,
    ),
    Theme.DARK: ChartPalette(
        background=style_constants.GRAPH_BG_DARK,
        text=style_constants.DARK_MODE_TEXT_COLOR,
        grid=constants.graph.GRID_COLOR_DARK,
        series=constants.graph.SERIES_LINE_COLOR_DARK,
        minor_grid_alpha=constants.graph.MINOR_GRID_ALPHA,
        major_grid_alpha=constants.graph.MAJOR_GRID_ALPHA,
    ),
}


def palette_for(theme: Theme) -> ChartPalette:
    return _PALETTES[theme]


class ThemeContext:
    """
    The current theme. Seeded once from the host preference, then changed
    only by explicit user selection. Never persisted.
    """

    def __init__(self, theme: Theme = Theme.DARK) -> None:
        self._theme = theme

    @property
    def theme(self) -> Theme:
        return self._theme

    @property
    def is_dark(self) -> bool:
        return self._theme is Theme.DARK

    @property
    def palette(self) -> ChartPalette:
        return palette_for(self._theme)

    def set_theme(self, theme: Theme) -> bool:
        """Switches theme. Returns True if it actually changed."""
        if theme is self._theme:
            return False
        logger.info("Theme changed: %s -> %s", self._theme.value, theme.value)
        self._theme = theme
        return True


def detect_system_theme() -> Theme:
    """
    Reads the host colour-scheme preference via Qt.

    Only an explicit light scheme maps to LIGHT; dark or unknown maps to DARK.
    Requires a QGuiApplication instance.
    """
    app = QGuiApplication.instance()
    if app is None:
        logger.warning("No QGuiApplication available for theme detection, defaulting to dark.")
        return Theme.DARK
    scheme = app.styleHints().colorScheme()
    return Theme.LIGHT if scheme == Qt.ColorScheme.Light else Theme.DARK
