"""
Constants defining UI element styles, like colors.

This file serves as the "design token" repository for the application. It should
only contain raw, static values (e.g., hex color codes). The construction of
actual QSS stylesheets from these tokens is handled by functions in `utils/styles.py`.
"""
from typing import Final
from .color import color

class UIStyleConstants:
    """Defines theme colors and other style constants for the UI."""

    # --- Theme Agnostic ---
    UI_ACCENT: Final[str] = "#0078D4"
    ERROR_TEXT_COLOR: Final[str] = color.RED

    # --- Light Mode ---
    LIGHT_MODE_TEXT_COLOR: Final[str] = color.BLACK
    WINDOW_BG_LIGHT: Final[str] = "#F3F3F3"
    GRAPH_BG_LIGHT: Final[str] = color.WHITE
    BUTTON_BG_LIGHT: Final[str] = "#E6E6E6"
    BUTTON_BORDER_LIGHT: Final[str] = "#CCCCCC"

    # --- Dark Mode ---
    DARK_MODE_TEXT_COLOR: Final[str] = color.WHITE
    WINDOW_BG_DARK: Final[str] = "#202020"
    GRAPH_BG_DARK: Final[str] = "#1E1E1E"
    BUTTON_BG_DARK: Final[str] = "#3C3C3C"
    BUTTON_BORDER_DARK: Final[str] = "#555555"

    SUBTLE_TEXT_COLOR_LIGHT: Final[str] = color.SUBTLE_TEXT_COLOR_LIGHT
    SUBTLE_TEXT_COLOR_DARK: Final[str] = color.SUBTLE_TEXT_COLOR_DARK

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        for attr_name in dir(self):
            if not attr_name.startswith('_') and attr_name.isupper():
                value = getattr(self, attr_name)
                if not (isinstance(value, str) and value.startswith("#") and len(value) == 7):
                    raise ValueError(f"Style colour '{attr_name}' must be a 7-character hex string.")

# Singleton instance for easy access throughout the application
styles = UIStyleConstants()
