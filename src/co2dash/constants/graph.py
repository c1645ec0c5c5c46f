"""
Constants specific to the CO2 history chart and its window sliders.
"""
from typing import Final, Tuple
from .color import color

class GraphConstants:
    """Defines constants for the history chart."""
    # --- Windowing ---
    DEFAULT_WINDOW_SAMPLES: Final[int] = 60
    # low + MIN_WINDOW_GAP <= high, so a window always holds at least 3 readings
    MIN_WINDOW_GAP: Final[int] = 2
    MIN_SERIES_LENGTH: Final[int] = MIN_WINDOW_GAP + 1

    # --- Axes ---
    # Fixed CO2 scale in ppm, not fitted to the visible window
    Y_AXIS_MIN_PPM: Final[float] = 440.0
    Y_AXIS_MAX_PPM: Final[float] = 2000.0
    X_TICK_FORMAT: Final[str] = "%H:%M"
    SLIDER_TIME_FORMAT: Final[str] = "%H:%M"
    UPDATED_TIME_FORMAT: Final[str] = "%m-%d %H:%M:%S"

    # --- Sizing and Layout ---
    FIGURE_SIZE: Final[Tuple[float, float]] = (9.0, 4.5)
    FIGURE_DPI: Final[int] = 100
    LABEL_FONT_SIZE: Final[int] = 9
    SLIDER_WIDTH: Final[int] = 250

    # --- Plotting and Theming ---
    SERIES_LINE_COLOR_LIGHT: Final[str] = color.SERIES_LINE_LIGHT
    SERIES_LINE_COLOR_DARK: Final[str] = color.SERIES_LINE_DARK
    GRID_COLOR_LIGHT: Final[str] = color.GRID_LINE_LIGHT
    GRID_COLOR_DARK: Final[str] = color.GRID_LINE_DARK
    LINE_WIDTH: Final[float] = 1.5
    MINOR_GRID_ALPHA: Final[float] = 0.1
    MAJOR_GRID_ALPHA: Final[float] = 0.25

    # --- Text and Labels ---
    Y_AXIS_LABEL: Final[str] = "CO2 (ppm)"

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if not self.Y_AXIS_LABEL:
            raise ValueError("Y_AXIS_LABEL must not be empty")
        if self.MIN_WINDOW_GAP < 1:
            raise ValueError("MIN_WINDOW_GAP must be at least 1")
        if self.DEFAULT_WINDOW_SAMPLES <= self.MIN_WINDOW_GAP:
            raise ValueError("DEFAULT_WINDOW_SAMPLES must exceed MIN_WINDOW_GAP")
        if self.Y_AXIS_MIN_PPM >= self.Y_AXIS_MAX_PPM:
            raise ValueError("Y_AXIS_MIN_PPM must be below Y_AXIS_MAX_PPM")
        for alpha in (self.MINOR_GRID_ALPHA, self.MAJOR_GRID_ALPHA):
            if not 0.0 <= alpha <= 1.0:
                raise ValueError("Grid alpha values must be within [0, 1]")

# Singleton instance for easy access
graph = GraphConstants()
