"""
Constants for application configuration defaults and constraints.
"""
import logging
from typing import Final, Dict, Any, Tuple

from .api import api

class ConfigMessages:
    """Log message templates for configuration validation."""
    INVALID_NUMERIC: Final[str] = "Invalid {key} '{value}', resetting to default '{default}'"
    INVALID_URL: Final[str] = "Invalid {key} '{value}', resetting to default '{default}'"
    INVALID_CHOICE: Final[str] = "Invalid {key} '{value}', resetting to default '{default}'. Valid choices: {choices}"
    ENV_OVERRIDE: Final[str] = "Using {key} from environment variable {env_var}"

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        for attr_name in dir(self):
            if not attr_name.startswith('_') and attr_name.isupper():
                value = getattr(self, attr_name)
                if not isinstance(value, str) or not value:
                    raise ValueError(f"ConfigMessages.{attr_name} must be a non-empty string.")


class ConfigConstants:
    """Defines default values and constraints for all application settings."""
    # --- Default Values for Individual Settings ---
    DEFAULT_HISTORY_URL: Final[str] = api.HISTORY_URL
    DEFAULT_REQUEST_TIMEOUT: Final[float] = api.DEFAULT_TIMEOUT
    DEFAULT_WINDOW_WIDTH: Final[int] = 1000
    DEFAULT_WINDOW_HEIGHT: Final[int] = 700
    DEFAULT_LOG_LEVEL: Final[str] = "INFO"

    # --- Constraints ---
    WINDOW_WIDTH_RANGE: Final[Tuple[int, int]] = (400, 4000)
    WINDOW_HEIGHT_RANGE: Final[Tuple[int, int]] = (300, 4000)
    LOG_LEVEL_CHOICES: Final[Tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

    CONFIG_FILENAME: Final[str] = "CO2Dash_Config.json"
    CONFIG_PATH_ENV_VAR: Final[str] = "CO2DASH_CONFIG"

    DEFAULT_CONFIG: Final[Dict[str, Any]] = {
        "history_url": DEFAULT_HISTORY_URL,
        "request_timeout": DEFAULT_REQUEST_TIMEOUT,
        "window_width": DEFAULT_WINDOW_WIDTH,
        "window_height": DEFAULT_WINDOW_HEIGHT,
        "log_level": DEFAULT_LOG_LEVEL,
    }

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if not (api.MIN_TIMEOUT <= self.DEFAULT_REQUEST_TIMEOUT <= api.MAX_TIMEOUT):
            raise ValueError("DEFAULT_REQUEST_TIMEOUT out of range")
        if not self.CONFIG_FILENAME:
            raise ValueError("CONFIG_FILENAME must not be empty")
        if self.DEFAULT_LOG_LEVEL not in self.LOG_LEVEL_CHOICES:
            raise ValueError("DEFAULT_LOG_LEVEL must be one of LOG_LEVEL_CHOICES")
        for level in self.LOG_LEVEL_CHOICES:
            if not isinstance(logging.getLevelName(level), int):
                raise ValueError(f"Unknown logging level name: {level}")

        min_w, max_w = self.WINDOW_WIDTH_RANGE
        min_h, max_h = self.WINDOW_HEIGHT_RANGE
        if not (min_w <= self.DEFAULT_WINDOW_WIDTH <= max_w):
            raise ValueError("DEFAULT_WINDOW_WIDTH out of range")
        if not (min_h <= self.DEFAULT_WINDOW_HEIGHT <= max_h):
            raise ValueError("DEFAULT_WINDOW_HEIGHT out of range")


class ConfigurationConstants:
    """Container for configuration-related constant groups."""
    def __init__(self) -> None:
        self.defaults = ConfigConstants()
        self.messages = ConfigMessages()

# Singleton instance for easy access
config = ConfigurationConstants()
