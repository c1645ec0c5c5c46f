"""
Constants for application metadata.
"""

from typing import Final

class AppConstants:
    """Defines application metadata."""
    APP_NAME: Final[str] = "CO2Dash"
    VERSION: Final[str] = "0.3.0"
    TITLE_BASE: Final[str] = "CO2"
    ENV_VAR_PROD_MODE: Final[str] = "CO2DASH_PROD"

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate the constants to ensure they meet constraints."""
        if not self.APP_NAME:
            raise ValueError("APP_NAME must not be empty")
        if not self.VERSION:
            raise ValueError("VERSION must not be empty")
        if not self.TITLE_BASE:
            raise ValueError("TITLE_BASE must not be empty")

# Singleton instance for easy access
app = AppConstants()
