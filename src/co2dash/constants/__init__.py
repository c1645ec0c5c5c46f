"""
Provides centralized, immutable constants for the CO2Dash application.

This package exposes singleton instances of constant groups, ensuring they
are validated on import and easily accessible from a single namespace.

Usage:
    from co2dash import constants

    # Access application metadata
    print(constants.app.VERSION)

    # Access the fixed CO2 axis
    ax.set_ylim(constants.graph.Y_AXIS_MIN_PPM, constants.graph.Y_AXIS_MAX_PPM)
"""

from .api import api
from .app import app
from .color import color
from .config import config
from .graph import graph
from .logs import logs
from .strings import strings
from .styles import styles

# Validation happens on instantiation of each singleton within its own module.

__all__ = [
    "api",
    "app",
    "color",
    "config",
    "graph",
    "logs",
    "strings",
    "styles",
]
