"""
Controller module for CO2Dash.

This module defines the LoadController, the state machine behind the dashboard.
It owns the load lifecycle (LOADING -> LOADED | ERRORED, refresh to retry), the
visible window of the loaded series, and the chart render cache. All of its
methods run on the GUI thread; the network fetch itself happens in a worker
that reports back through `on_load_complete`.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Union

from PyQt6.QtCore import QObject, pyqtSignal

from co2dash import constants
from co2dash.core.errors import DataError, LoadError
from co2dash.core.model import Reading, SeriesStore
from co2dash.core.range_selector import RangeSelector
from co2dash.core.render_cache import RenderCache, RenderFn
from co2dash.core.request import FetchRequest
from co2dash.core.theme import Theme, ThemeContext

logger = logging.getLogger("CO2Dash.LoadController")


class LoadState(Enum):
    LOADING = "loading"
    LOADED = "loaded"
    ERRORED = "errored"


@dataclass
class LoadedSeries:
    """Everything that exists only while the controller is LOADED."""
    latest: Reading
    store: SeriesStore
    selector: RangeSelector
    cache: RenderCache


class LoadController(QObject):
    """
    Serialized owner of the dashboard state.

    Signals:
        fetch_requested(FetchRequest): A new fetch must be issued by the worker.
        state_changed(): The load state changed (title and layout depend on it).
        window_changed(): low/high moved; the chart must be redrawn.
        theme_changed(object): The theme changed; carries the new Theme.
    """
    fetch_requested = pyqtSignal(object)
    state_changed = pyqtSignal()
    window_changed = pyqtSignal()
    theme_changed = pyqtSignal(object)

    def __init__(
        self,
        render_fn: RenderFn,
        theme_context: Optional[ThemeContext] = None,
        history_url: str = constants.api.HISTORY_URL,
        timeout: float = constants.api.DEFAULT_TIMEOUT,
    ) -> None:
        super().__init__()
        self.logger = logger
        self._render_fn = render_fn
        self.theme_context = theme_context or ThemeContext()
        self.history_url = history_url
        self.timeout = timeout

        self._state = LoadState.LOADING
        self._loaded: Optional[LoadedSeries] = None
        self._sequence_id = 0
        self._started = False

    # --- Read accessors ---

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def title(self) -> str:
        if self._state is LoadState.LOADING:
            prefix = constants.strings.TITLE_LOADING_PREFIX
        elif self._state is LoadState.ERRORED:
            prefix = constants.strings.TITLE_ERROR_PREFIX
        else:
            prefix = ""
        return f"{prefix}{constants.app.TITLE_BASE}"

    @property
    def theme(self) -> Theme:
        return self.theme_context.theme

    @property
    def loaded(self) -> Optional[LoadedSeries]:
        return self._loaded

    @property
    def latest(self) -> Optional[Reading]:
        return self._loaded.latest if self._loaded else None

    @property
    def length(self) -> int:
        return len(self._loaded.store) if self._loaded else 0

    @property
    def low(self) -> Optional[int]:
        return self._loaded.selector.low if self._loaded else None

    @property
    def high(self) -> Optional[int]:
        return self._loaded.selector.high if self._loaded else None

    @property
    def current_sequence_id(self) -> int:
        return self._sequence_id

    def chart_image(self) -> Any:
        """Returns the (possibly cached) chart for the current window, or None unless LOADED."""
        if self._loaded is None:
            return None
        return self._loaded.cache.get_or_render(self._loaded.selector, self.theme, self._loaded.store)

    # --- Load lifecycle ---

    def start(self) -> FetchRequest:
        """Issues the initial fetch. Must be called exactly once."""
        if self._started:
            raise RuntimeError("LoadController.start() called twice")
        self._started = True
        return self._begin_loading()

    def request_refresh(self) -> Optional[FetchRequest]:
        """
        Re-enters LOADING and issues a new fetch.

        A no-op returning None while a fetch is already in flight.
        """
        if self._state is LoadState.LOADING:
            self.logger.debug("Refresh ignored, fetch #%d still in flight.", self._sequence_id)
            return None
        return self._begin_loading()

    def _begin_loading(self) -> FetchRequest:
        self._sequence_id += 1
        self._loaded = None
        self._set_state(LoadState.LOADING)
        request = FetchRequest(url=self.history_url, timeout=self.timeout, sequence_id=self._sequence_id)
        self.logger.info("Fetching history (request #%d).", request.sequence_id)
        self.fetch_requested.emit(request)
        return request

    def on_load_complete(self, result: Union[SeriesStore, LoadError], sequence_id: int) -> bool:
        """
        Applies a finished fetch. Returns False if the result was stale and ignored.

        `result` is either the decoded SeriesStore or the LoadError that ended the fetch.
        """
        if sequence_id != self._sequence_id or self._state is not LoadState.LOADING:
            self.logger.debug(
                "Discarding stale result of request #%d (current #%d, state %s).",
                sequence_id, self._sequence_id, self._state.value,
            )
            return False

        if isinstance(result, LoadError):
            self._fail(result)
            return True

        try:
            selector = RangeSelector(len(result))
        except DataError as e:
            self._fail(e)
            return True

        self._loaded = LoadedSeries(
            latest=result.latest,
            store=result,
            selector=selector,
            cache=RenderCache(self._render_fn),
        )
        self.logger.info("Loaded %d readings, window [%d, %d].", len(result), selector.low, selector.high)
        self._set_state(LoadState.LOADED)
        return True

    def _fail(self, error: LoadError) -> None:
        self.logger.warning("History load failed (%s): %s", type(error).__name__, error)
        self._loaded = None
        self._set_state(LoadState.ERRORED)

    def _set_state(self, state: LoadState) -> None:
        self._state = state
        self.state_changed.emit()

    # --- User interaction ---

    def on_low_changed(self, value: int) -> bool:
        return self._move_window(lambda selector: selector.set_low(value))

    def on_high_changed(self, value: int) -> bool:
        return self._move_window(lambda selector: selector.set_high(value))

    def _move_window(self, move: Callable[[RangeSelector], bool]) -> bool:
        if self._loaded is None:
            return False
        if not move(self._loaded.selector):
            return False
        self._loaded.cache.invalidate()
        self.window_changed.emit()
        return True

    def on_theme_changed(self, theme: Theme) -> bool:
        """Switches theme; low/high are left untouched."""
        if not self.theme_context.set_theme(theme):
            return False
        if self._loaded is not None:
            self._loaded.cache.invalidate()
        self.theme_changed.emit(theme)
        return True
