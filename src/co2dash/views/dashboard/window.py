import logging
from typing import Any, Dict, Optional

from PyQt6.QtCore import QThread, QTimer, pyqtSignal
from PyQt6.QtWidgets import QWidget

from co2dash import constants
from co2dash.core.api_client import HistoryClient
from co2dash.core.controller import LoadController, LoadState
from co2dash.core.request import FetchRequest
from co2dash.core.theme import Theme, ThemeContext
from co2dash.utils import helpers
from co2dash.views.dashboard.renderer import ChartRenderer
from co2dash.views.dashboard.ui import DashboardWindowUI
from co2dash.views.dashboard.worker import HistoryWorker


class DashboardWindow(QWidget):
    """
    A lean controller for the dashboard window.
    Forwards widget events to the LoadController and redraws from its state.
    """
    request_fetch = pyqtSignal(FetchRequest)
    window_closed = pyqtSignal()

    def __init__(self, config: Optional[Dict[str, Any]] = None, theme: Theme = Theme.DARK,
                 client: Optional[HistoryClient] = None, parent=None, logger=None):
        super().__init__(parent)
        self.logger = logger or logging.getLogger("CO2Dash.DashboardWindow")
        self.config = config or constants.config.defaults.DEFAULT_CONFIG.copy()

        # State
        self._is_closing = False
        self._initial_load_done = False
        self._syncing_sliders = False

        # Handlers
        self.renderer = ChartRenderer(self.logger.getChild("Renderer"))
        self.controller = LoadController(
            render_fn=self.renderer.render,
            theme_context=ThemeContext(theme),
            history_url=self.config["history_url"],
            timeout=self.config["request_timeout"],
        )
        self.ui = DashboardWindowUI(self)
        self.ui.setupUi()

        # Connections
        self._init_worker_thread(client)
        self._connect_signals()

        # Styling
        self.ui.theme_buttons[theme].setChecked(True)
        self.ui.apply_theme(theme is Theme.DARK)
        self.setWindowTitle(self.controller.title)
        self.resize(self.config["window_width"], self.config["window_height"])

    def _init_worker_thread(self, client: Optional[HistoryClient]):
        self.worker_thread = QThread()
        self.history_worker = HistoryWorker(client)
        self.history_worker.moveToThread(self.worker_thread)
        self.history_worker.data_ready.connect(self.controller.on_load_complete)
        self.history_worker.error.connect(self.controller.on_load_complete)
        self.request_fetch.connect(self.history_worker.process_request)
        self.worker_thread.start()

    def _connect_signals(self):
        self.controller.fetch_requested.connect(self.request_fetch)
        self.controller.state_changed.connect(self._on_state_changed)
        self.controller.window_changed.connect(self._refresh_loaded_view)
        self.controller.theme_changed.connect(self._on_theme_applied)

        self.ui.refresh_button.clicked.connect(self.controller.request_refresh)
        self.ui.error_refresh_button.clicked.connect(self.controller.request_refresh)
        self.ui.low_slider.valueChanged.connect(self._on_low_slider_moved)
        self.ui.high_slider.valueChanged.connect(self._on_high_slider_moved)
        for theme, button in self.ui.theme_buttons.items():
            button.toggled.connect(lambda checked, t=theme: self._on_theme_button_toggled(t, checked))

    # --- Widget events into the controller ---

    def _on_low_slider_moved(self, value: int):
        if self._syncing_sliders: return
        self.controller.on_low_changed(value)

    def _on_high_slider_moved(self, value: int):
        if self._syncing_sliders: return
        self.controller.on_high_changed(value)

    def _on_theme_button_toggled(self, theme: Theme, checked: bool):
        if checked:
            self.controller.on_theme_changed(theme)

    # --- Controller state out to the widgets ---

    def _on_state_changed(self):
        if self._is_closing: return
        self.setWindowTitle(self.controller.title)
        state = self.controller.state
        if state is LoadState.LOADING:
            self.ui.chart_view.set_chart(None)
            self.ui.show_page(self.ui.PAGE_LOADING)
        elif state is LoadState.ERRORED:
            self.ui.chart_view.set_chart(None)
            self.ui.show_page(self.ui.PAGE_ERROR)
        else:
            self._update_summary()
            self._refresh_loaded_view()
            self.ui.show_page(self.ui.PAGE_LOADED)

    def _on_theme_applied(self, theme: Theme):
        self.ui.apply_theme(theme is Theme.DARK)
        button = self.ui.theme_buttons[theme]
        if not button.isChecked():
            button.setChecked(True)
        if self.controller.state is LoadState.LOADED:
            self._refresh_loaded_view()

    def _update_summary(self):
        reading = self.controller.latest
        if reading is None: return
        self.ui.co2_value.setText(str(reading.co2))
        self.ui.tvoc_value.setText(str(reading.tvoc))
        self.ui.quality_value.setText(reading.quality.label)
        self.ui.status_value.setText(reading.status.label)
        self.ui.updated_value.setText(helpers.format_updated_time(reading.time))

    def _refresh_loaded_view(self):
        loaded = self.controller.loaded
        if loaded is None or self._is_closing: return
        self._sync_sliders()
        store, selector = loaded.store, loaded.selector
        self.ui.low_time_label.setText(helpers.format_slider_time(store[selector.low].time))
        self.ui.high_time_label.setText(helpers.format_slider_time(store[selector.high].time))
        try:
            self.ui.chart_view.set_chart(self.controller.chart_image())
        except Exception as e:
            self.logger.error(f"Render error: {e}", exc_info=True)

    def _sync_sliders(self):
        """Applies the selector's current ranges and values without feeding them back."""
        selector = self.controller.loaded.selector
        (low_min, low_max), (high_min, high_max) = selector.slider_bounds()
        self._syncing_sliders = True
        try:
            self.ui.low_slider.setRange(low_min, low_max)
            self.ui.low_slider.setValue(selector.low)
            self.ui.high_slider.setRange(high_min, high_max)
            self.ui.high_slider.setValue(selector.high)
        finally:
            self._syncing_sliders = False

    # --- Qt lifecycle ---

    def showEvent(self, event):
        super().showEvent(event)
        if not self._initial_load_done:
            self._initial_load_done = True
            QTimer.singleShot(0, self.controller.start)

    def closeEvent(self, event):
        if self._is_closing:
            event.accept()
            return
        self._is_closing = True
        self._stop_worker_thread()
        self.window_closed.emit()
        event.accept()

    def _stop_worker_thread(self):
        """
        Stops the worker thread, then releases the HTTP client.

        A fetch already in flight cannot be interrupted, so the wait extends to
        the request timeout. The client is only closed from a finished thread.
        """
        self.worker_thread.quit()
        if not self.worker_thread.wait(constants.api.SHUTDOWN_WAIT_MS):
            limit_ms = int(self.controller.timeout * 1000) + constants.api.SHUTDOWN_WAIT_MS
            self.logger.info("Fetch still in flight, waiting up to %d ms for it to end.", limit_ms)
            if not self.worker_thread.wait(limit_ms):
                self.logger.error("Worker thread did not stop; its client will close when it finishes.")
                self.worker_thread.finished.connect(self.history_worker.shutdown)
                return
        self.history_worker.shutdown()
