"""Shared fixtures for tagdown tests."""

import pytest

from tagdown import (
    BeautifulSoupWindowService,
    Converter,
    DefaultPreset,
    PluginManager,
    ServiceManager,
    Transformer,
)

BASE_URI = "https://example.com/docs/"


@pytest.fixture
def window_service():
    """Window service resolving relative URLs against a fixed base URI."""
    return BeautifulSoupWindowService(base_uri=BASE_URI)


@pytest.fixture
def window(window_service):
    """A fresh, empty window."""
    window = window_service.get_window()
    yield window
    window.close()


@pytest.fixture
def services(window_service):
    """Isolated service registry with a window service configured."""
    manager = ServiceManager()
    manager.set_service("window", window_service)
    return manager


@pytest.fixture
def empty_plugins():
    """Isolated plugin registry without any plugins."""
    return PluginManager()


@pytest.fixture
def default_plugins():
    """Isolated plugin registry with the default preset registered."""
    manager = PluginManager()
    manager.register_preset(DefaultPreset())
    return manager


@pytest.fixture
def transformer(window, empty_plugins):
    """Transformer with an empty plugin registry."""
    return Transformer(window, empty_plugins)


@pytest.fixture
def make_converter(default_plugins, services):
    """Factory for converters sharing the isolated registries."""
    converters = []

    def factory(options=None, plugins=None):
        converter = Converter(
            options,
            plugins=plugins if plugins is not None else default_plugins,
            services=services,
        )
        converters.append(converter)
        return converter

    yield factory

    for converter in converters:
        converter.destroy()


@pytest.fixture
def to_markdown(make_converter):
    """Convert HTML with the default plugins and optional options."""

    def convert(html, options=None):
        return make_converter(options).convert(html)

    return convert
