"""
Integration tests for DashboardWindow, driving its controller directly.

The window is never shown, so no fetch is started by Qt; each test feeds the
controller a result for the request it just issued.
"""

import threading
import time
from unittest.mock import MagicMock

import pytest

from co2dash import constants
from co2dash.core.api_client import HistoryClient
from co2dash.core.controller import LoadState
from co2dash.core.errors import APIError
from co2dash.core.theme import Theme
from co2dash.views.dashboard.window import DashboardWindow


@pytest.fixture
def window(q_app):
    client = MagicMock(spec=HistoryClient)
    client.fetch.side_effect = APIError("offline")
    window = DashboardWindow(theme=Theme.DARK, client=client)
    yield window
    window.close()
    window.worker_thread.quit()
    window.worker_thread.wait(1000)


def _load(window, store) -> None:
    window.controller.start()
    assert window.controller.on_load_complete(store, window.controller.current_sequence_id)


def test_starts_on_loading_page(window):
    assert window.windowTitle() == "Loading - CO2"
    assert window.ui.stack.currentIndex() == window.ui.PAGE_LOADING
    assert window.ui.chart_view.image is None


def test_loaded_page_shows_summary_and_chart(window, make_store):
    store = make_store(100)
    _load(window, store)

    assert window.controller.state is LoadState.LOADED
    assert window.windowTitle() == "CO2"
    assert window.ui.stack.currentIndex() == window.ui.PAGE_LOADED
    assert window.ui.co2_value.text() == str(store.latest.co2)
    assert window.ui.tvoc_value.text() == str(store.latest.tvoc)
    assert window.ui.status_value.text() == store.latest.status.label

    image = window.ui.chart_view.image
    assert image is not None
    assert image.x_range == (store[40].time, store[99].time)
    assert image.theme is Theme.DARK


def test_sliders_follow_selector(window, make_store):
    _load(window, make_store(100))

    assert window.ui.low_slider.value() == 40
    assert window.ui.high_slider.value() == 99
    assert (window.ui.low_slider.minimum(), window.ui.low_slider.maximum()) == (0, 97)
    assert (window.ui.high_slider.minimum(), window.ui.high_slider.maximum()) == (42, 99)

    window.ui.low_slider.setValue(10)

    assert window.controller.low == 10
    assert window.ui.high_slider.minimum() == 12
    assert window.ui.chart_view.image.x_range[0] == window.controller.loaded.store[10].time


def test_error_page_and_refresh(window):
    window.controller.start()
    window.controller.on_load_complete(APIError("boom"), window.controller.current_sequence_id)

    assert window.windowTitle() == "Error - CO2"
    assert window.ui.stack.currentIndex() == window.ui.PAGE_ERROR

    window.ui.error_refresh_button.click()

    assert window.controller.state is LoadState.LOADING
    assert window.ui.stack.currentIndex() == window.ui.PAGE_LOADING


def test_theme_button_re_renders_chart(window, make_store):
    _load(window, make_store(30))
    dark_image = window.ui.chart_view.image

    window.ui.theme_buttons[Theme.LIGHT].setChecked(True)

    assert window.controller.theme is Theme.LIGHT
    assert window.ui.chart_view.image is not dark_image
    assert window.ui.chart_view.image.theme is Theme.LIGHT


def test_stale_result_leaves_window_loading(window, make_store):
    window.controller.start()
    stale_id = window.controller.current_sequence_id - 1

    assert not window.controller.on_load_complete(make_store(10), stale_id)
    assert window.ui.stack.currentIndex() == window.ui.PAGE_LOADING


def test_close_during_fetch_waits_for_worker_before_closing_client(q_app):
    events = []
    fetch_started = threading.Event()

    def slow_fetch(url, timeout):
        fetch_started.set()
        time.sleep(0.8)
        events.append("fetch finished")
        raise APIError("timed out")

    client = MagicMock(spec=HistoryClient)
    client.fetch.side_effect = slow_fetch
    client.close.side_effect = lambda: events.append("client closed")
    config = dict(constants.config.defaults.DEFAULT_CONFIG, request_timeout=1.0)
    window = DashboardWindow(config=config, client=client)

    window.controller.start()
    assert fetch_started.wait(2.0)
    window.close()

    assert not window.worker_thread.isRunning()
    assert events == ["fetch finished", "client closed"]
