"""
User-facing text for the dashboard window.
"""
from typing import Final


class UIStrings:
    """Static labels and messages shown by the dashboard."""
    TITLE_LOADING_PREFIX: Final[str] = "Loading - "
    TITLE_ERROR_PREFIX: Final[str] = "Error - "

    LOADING_MESSAGE: Final[str] = "Loading..."
    ERROR_MESSAGE: Final[str] = "Error!"
    REFRESH_BUTTON: Final[str] = "Refresh"
    THEME_PROMPT: Final[str] = "Choose a theme:"
    THEME_LIGHT: Final[str] = "Light"
    THEME_DARK: Final[str] = "Dark"

    CO2_LABEL: Final[str] = "Co2:"
    TVOC_LABEL: Final[str] = "TVOC:"
    QUALITY_LABEL: Final[str] = "Quality index:"
    STATUS_LABEL: Final[str] = "Status:"
    UPDATED_LABEL: Final[str] = "Time updated:"

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        for attr_name in dir(self):
            if not attr_name.startswith('_') and attr_name.isupper():
                value = getattr(self, attr_name)
                if not isinstance(value, str) or not value:
                    raise ValueError(f"UIStrings.{attr_name} must be a non-empty string.")

# Singleton instance for easy access
strings = UIStrings()
