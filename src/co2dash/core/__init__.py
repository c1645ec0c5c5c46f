"""
Core submodule for CO2Dash.

Contains the load state machine, the window selector, the render cache and the
data model. Nothing here needs a display. The controller depends on Qt for
its signals, and the theme module asks Qt for the host colour scheme.
"""

from co2dash.core.controller import LoadController, LoadState
from co2dash.core.errors import APIError, DataError, LoadError
from co2dash.core.model import QualityIndex, Reading, SensorStatus, SeriesStore
from co2dash.core.range_selector import RangeSelector
from co2dash.core.render_cache import RenderCache
from co2dash.core.theme import Theme, ThemeContext

__all__ = [
    "APIError",
    "DataError",
    "LoadController",
    "LoadError",
    "LoadState",
    "QualityIndex",
    "RangeSelector",
    "Reading",
    "RenderCache",
    "SensorStatus",
    "SeriesStore",
    "Theme",
    "ThemeContext",
]
