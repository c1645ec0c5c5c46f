"""
Off-screen Matplotlib rendering of the CO2 chart.

The renderer draws one window of a SeriesStore into an RGBA buffer using the
Agg backend, so the result can be cached and blitted into any Qt widget
without keeping a live canvas per state.
"""
import logging
import warnings
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple

import numpy as np
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
import matplotlib.dates as mdates

from co2dash import constants
from co2dash.core.model import SeriesStore
from co2dash.core.theme import ChartPalette, Theme, palette_for

# Sparse windows can leave the AutoDateLocator without a sensible interval
warnings.filterwarnings("ignore", "AutoDateLocator was unable to pick an appropriate interval")


@dataclass(frozen=True)
class ChartImage:
    """
    A rendered chart plus the facts it was rendered from.

    Attributes:
        rgba: (height, width, 4) uint8 pixel buffer.
        theme: Theme the palette was taken from.
        x_range: First and last timestamp of the plotted window.
        y_limits: The y-axis domain in ppm.
        series_color: Hex colour of the CO2 line.
        grid_color: Hex colour of gridlines and axes.
        point_count: Number of readings plotted.
        x_tick_labels: Tick label texts on the time axis.
    """
    rgba: np.ndarray = field(repr=False, compare=False)
    theme: Theme
    x_range: Tuple[datetime, datetime]
    y_limits: Tuple[float, float]
    series_color: str
    grid_color: str
    point_count: int
    x_tick_labels: Tuple[str, ...] = ()

    @property
    def width(self) -> int:
        return int(self.rgba.shape[1])

    @property
    def height(self) -> int:
        return int(self.rgba.shape[0])


class ChartRenderer:
    """
    Owns one Matplotlib Figure and redraws it on demand.

    `render` matches the render function signature expected by RenderCache:
    (store, low, high, theme) -> ChartImage.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or logging.getLogger("CO2Dash.ChartRenderer")
        self.figure = Figure(figsize=constants.graph.FIGURE_SIZE, dpi=constants.graph.FIGURE_DPI)
        self.canvas = FigureCanvasAgg(self.figure)
        self.ax = self.figure.add_subplot(1, 1, 1)
        self.figure.subplots_adjust(left=0.08, right=0.98, top=0.96, bottom=0.1)

    def render(self, store: SeriesStore, low: int, high: int, theme: Theme) -> ChartImage:
        """Draws readings low..high inclusive with the palette of `theme`."""
        window = store.window(low, high)
        palette = palette_for(theme)
        times = [reading.time for reading in window]
        co2 = np.array([reading.co2 for reading in window], dtype=float)

        self.ax.clear()
        self._apply_palette(palette)

        self.ax.plot(times, co2, color=palette.series, linewidth=constants.graph.LINE_WIDTH)

        self.ax.set_xlim(times[0], times[-1])
        self.ax.set_ylim(constants.graph.Y_AXIS_MIN_PPM, constants.graph.Y_AXIS_MAX_PPM)
        self.ax.xaxis.set_major_formatter(mdates.DateFormatter(constants.graph.X_TICK_FORMAT))

        self.canvas.draw()
        rgba = np.asarray(self.canvas.buffer_rgba()).copy()
        tick_labels = tuple(label.get_text() for label in self.ax.get_xticklabels() if label.get_text())

        self.logger.debug("Rendered %d points (%s .. %s)", len(window), times[0], times[-1])
        return ChartImage(
            rgba=rgba,
            theme=theme,
            x_range=(times[0], times[-1]),
            y_limits=tuple(float(v) for v in self.ax.get_ylim()),
            series_color=palette.series,
            grid_color=palette.grid,
            point_count=len(window),
            x_tick_labels=tick_labels,
        )

    def _apply_palette(self, palette: ChartPalette) -> None:
        """Colours background, ticks, spines and both grid levels."""
        self.figure.patch.set_facecolor(palette.background)
        self.ax.set_facecolor(palette.background)

        self.ax.set_ylabel(constants.graph.Y_AXIS_LABEL, color=palette.text, fontsize=constants.graph.LABEL_FONT_SIZE)
        self.ax.tick_params(axis='both', which='both', colors=palette.text, labelsize=constants.graph.LABEL_FONT_SIZE)
        for spine in self.ax.spines.values():
            spine.set_color(palette.grid)

        self.ax.minorticks_on()
        self.ax.grid(True, which='major', color=palette.grid, alpha=palette.major_grid_alpha)
        self.ax.grid(True, which='minor', color=palette.grid, alpha=palette.minor_grid_alpha)
