"""
Helper utilities for CO2Dash.

This module provides foundational functions for the per-user data directory
and the display formatting used by the dashboard.
"""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from co2dash import constants


def get_app_data_path() -> Path:
    """
    Retrieve the per-user application data directory, creating it if needed.

    Uses %APPDATA% on Windows, $XDG_STATE_HOME (or ~/.local/state) elsewhere.
    """
    logger: logging.Logger = logging.getLogger(__name__)
    if sys.platform == "win32":
        base: Optional[str] = os.getenv("APPDATA")
        if not base:
            base = os.path.expanduser("~")
            logger.warning("APPDATA environment variable not set, using home directory: %s", base)
    else:
        base = os.getenv("XDG_STATE_HOME") or os.path.join(os.path.expanduser("~"), ".local", "state")
    path: Path = Path(base) / constants.app.APP_NAME
    try:
        path.mkdir(parents=True, exist_ok=True)
        return path
    except OSError as e:
        logger.error("Failed to create app data directory %s: %s", path, e)
        raise OSError(f"Error with app data directory: {path}. Check disk space or path validity.") from e


def format_slider_time(timestamp: datetime) -> str:
    """Compact time shown next to the window sliders (HH:MM)."""
    return timestamp.strftime(constants.graph.SLIDER_TIME_FORMAT)


def format_updated_time(timestamp: datetime) -> str:
    """Timestamp of the latest reading in the summary panel."""
    return timestamp.strftime(constants.graph.UPDATED_TIME_FORMAT)
