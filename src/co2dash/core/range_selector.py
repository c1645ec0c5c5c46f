"""
The visible window of the loaded series, as a pair of slider indices.
"""

import logging
from typing import Tuple

from co2dash import constants
from co2dash.core.errors import DataError

logger = logging.getLogger("CO2Dash.RangeSelector")


def _clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(int(value), upper))


class RangeSelector:
    """
    Holds the inclusive window [low, high] into a series of `length` readings.

    Invariant: 0 <= low, low + MIN_WINDOW_GAP <= high <= length - 1, so the chart
    always has at least three points and a non-degenerate time axis. The
    setters never fail; out-of-range input is clamped.
    """

    def __init__(self, length: int) -> None:
        self.length = 0
        self.low = 0
        self.high = 0
        self.reinitialize(length)

    def __repr__(self) -> str:
        return f"RangeSelector(low={self.low}, high={self.high}, length={self.length})"

    @property
    def bounds(self) -> Tuple[int, int]:
        return self.low, self.high

    def reinitialize(self, length: int) -> None:
        """
        Resets to the default trailing window for a newly loaded series.

        Raises:
            DataError: If the series is too short to hold a minimum-width window.
        """
        if length < constants.graph.MIN_SERIES_LENGTH:
            raise DataError(
                f"Series of length {length} is shorter than the minimum window "
                f"of {constants.graph.MIN_SERIES_LENGTH} readings."
            )
        self.length = length
        self.high = length - 1
        self.low = max(0, length - constants.graph.DEFAULT_WINDOW_SAMPLES)
        logger.debug("Window reinitialized: %s", self)

    def set_low(self, value: int) -> bool:
        """Moves the lower bound, clamped to [0, high - gap]. Returns True if it moved."""
        new_low = _clamp(value, 0, self.high - constants.graph.MIN_WINDOW_GAP)
        changed = new_low != self.low
        self.low = new_low
        return changed

    def set_high(self, value: int) -> bool:
        """Moves the upper bound, clamped to [low + gap, length - 1]. Returns True if it moved."""
        new_high = _clamp(value, self.low + constants.graph.MIN_WINDOW_GAP, self.length - 1)
        changed = new_high != self.high
        self.high = new_high
        return changed

    def slider_bounds(self) -> Tuple[Tuple[int, int], Tuple[int, int]]:
        """The (min, max) ranges the low and high sliders may currently take."""
        gap = constants.graph.MIN_WINDOW_GAP
        return (0, self.high - gap), (self.low + gap, self.length - 1)
