"""
Utilities submodule for CO2Dash.

Provides helper functions and configuration management.
"""

from .config import ConfigManager, ConfigError
from .helpers import get_app_data_path, format_slider_time, format_updated_time

__all__ = ["ConfigManager", "ConfigError", "get_app_data_path", "format_slider_time", "format_updated_time"]
