"""
Defines a common named color palette used throughout the application.
"""
from typing import Final

class ColorConstants:
    """Defines a static palette of named colors."""
    WHITE: Final[str] = "#FFFFFF"
    BLACK: Final[str] = "#000000"
    RED: Final[str] = "#D32F2F"

    # Chart palettes, light and dark
    GRID_LINE_LIGHT: Final[str] = "#646464"
    GRID_LINE_DARK: Final[str] = "#969696"
    SERIES_LINE_LIGHT: Final[str] = "#1E32C8"
    SERIES_LINE_DARK: Final[str] = "#3359DA"

    # UI Text Colors
    SUBTLE_TEXT_COLOR_LIGHT: Final[str] = "#595959"
    SUBTLE_TEXT_COLOR_DARK: Final[str] = "#808080"

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        for attr_name in dir(self):
            if not attr_name.startswith('_') and attr_name.isupper():
                value = getattr(self, attr_name)
                if not (isinstance(value, str) and value.startswith("#") and len(value) == 7):
                    raise ValueError(f"Color '{attr_name}' must be a 7-character hex string.")

# Singleton instance for easy access
color = ColorConstants()
