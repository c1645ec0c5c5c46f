"""
Unit tests for RenderCache hit/miss behaviour, using a counting render function.
"""

import pytest

from co2dash.core.range_selector import RangeSelector
from co2dash.core.render_cache import RenderCache
from co2dash.core.theme import Theme


class CountingRenderer:
    """Sentinel render function: returns a fresh object per call and counts calls."""

    def __init__(self):
        self.calls = []

    def __call__(self, store, low, high, theme):
        self.calls.append((id(store), low, high, theme))
        return object()


@pytest.fixture
def renderer():
    return CountingRenderer()


@pytest.fixture
def cache(renderer):
    return RenderCache(renderer)


def test_consecutive_calls_hit_the_cache(cache, renderer, make_store):
    store = make_store(100)
    selector = RangeSelector(len(store))

    first = cache.get_or_render(selector, Theme.LIGHT, store)
    second = cache.get_or_render(selector, Theme.LIGHT, store)

    assert first is second
    assert len(renderer.calls) == 1
    assert cache.render_count == 1
    assert cache.is_valid


def test_window_change_forces_rerender(cache, renderer, make_store):
    store = make_store(100)
    selector = RangeSelector(len(store))
    first = cache.get_or_render(selector, Theme.LIGHT, store)

    selector.set_low(50)
    second = cache.get_or_render(selector, Theme.LIGHT, store)

    assert second is not first
    assert renderer.calls[-1][1:3] == (50, 99)
    assert cache.render_count == 2


def test_theme_change_forces_rerender(cache, renderer, make_store):
    store = make_store(100)
    selector = RangeSelector(len(store))
    first = cache.get_or_render(selector, Theme.LIGHT, store)
    second = cache.get_or_render(selector, Theme.DARK, store)

    assert second is not first
    assert renderer.calls[-1][3] is Theme.DARK


def test_new_store_forces_rerender_even_with_equal_content(cache, renderer, make_store):
    selector = RangeSelector(100)
    first = cache.get_or_render(selector, Theme.DARK, make_store(100))
    second = cache.get_or_render(selector, Theme.DARK, make_store(100))

    assert second is not first
    assert cache.render_count == 2


def test_invalidate_clears_image(cache, renderer, make_store):
    store = make_store(10)
    selector = RangeSelector(len(store))
    first = cache.get_or_render(selector, Theme.LIGHT, store)

    cache.invalidate()
    assert not cache.is_valid

    second = cache.get_or_render(selector, Theme.LIGHT, store)
    assert second is not first
    assert len(renderer.calls) == 2


def test_cache_is_lazy(cache, renderer):
    assert not cache.is_valid
    assert renderer.calls == []
