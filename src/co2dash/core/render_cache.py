"""
Lazily computed chart image, reused until its inputs change.
"""

import logging
from typing import Callable, Generic, Optional, Tuple, TypeVar

from co2dash.core.model import SeriesStore
from co2dash.core.range_selector import RangeSelector
from co2dash.core.theme import Theme

logger = logging.getLogger("CO2Dash.RenderCache")

ImageT = TypeVar("ImageT")

RenderFn = Callable[[SeriesStore, int, int, Theme], ImageT]


class RenderCache(Generic[ImageT]):
    """
    Holds the last rendered chart image and the key it was rendered for.

    The key is (low, high, theme) plus the identity of the SeriesStore. The
    store is compared with `is` so that a fresh load always misses, even if
    it happens to contain equal readings.
    """

    def __init__(self, render_fn: RenderFn) -> None:
        self._render_fn = render_fn
        self._image: Optional[ImageT] = None
        self._key: Optional[Tuple[int, int, Theme]] = None
        self._store: Optional[SeriesStore] = None
        self.render_count = 0

    @property
    def is_valid(self) -> bool:
        return self._image is not None

    def invalidate(self) -> None:
        if self._image is not None:
            logger.debug("Render cache invalidated.")
        self._image = None
        self._key = None
        self._store = None

    def get_or_render(self, selector: RangeSelector, theme: Theme, store: SeriesStore) -> ImageT:
        """Returns the cached image, re-rendering first if any key component changed."""
        key = (selector.low, selector.high, theme)
        if self._image is not None and key == self._key and store is self._store:
            return self._image

        image = self._render_fn(store, selector.low, selector.high, theme)
        self.render_count += 1
        self._image = image
        self._key = key
        self._store = store
        logger.debug("Rendered window [%d, %d] (%s), render #%d", selector.low, selector.high, theme.value, self.render_count)
        return image
