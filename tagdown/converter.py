"""Public conversion API and the process-wide plugin and service registries."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import TracebackType
from typing import TYPE_CHECKING, Any, Optional, Union

from .models.options import ConversionOptions
from .plugins.base import Plugin, Preset
from .plugins.manager import PluginManager
from .plugins.presets import DefaultPreset
from .services.base import Service, ServiceManager
from .services.window import BeautifulSoupWindowService, Window, WindowService
from .transformer import Transformer

if TYPE_CHECKING:
    from bs4.element import Tag

logger = logging.getLogger(__name__)

OptionsType = Union[ConversionOptions, Mapping[str, Any], None]

plugin_manager = PluginManager()
plugin_manager.register_preset(DefaultPreset())

service_manager = ServiceManager()


class Converter:
    """
    Configurable HTML to Markdown converter for HTML strings and elements.

    The window used for parsing is obtained lazily from the ``window``
    service and kept until :meth:`destroy` is called.

    Example:
        with Converter({"inline": True}) as converter:
            markdown = converter.convert('<a href="/docs">Docs</a>')
    """

    def __init__(
        self,
        options: OptionsType = None,
        *,
        plugins: Optional[PluginManager] = None,
        services: Optional[ServiceManager] = None,
    ):
        """
        Initialize the converter.

        Args:
            options: Conversion options (instance or mapping)
            plugins: Plugin registry (defaults to the process-wide one)
            services: Service registry (defaults to the process-wide one)
        """
        self._options = ConversionOptions.parse(options)
        self._plugins = plugins if plugins is not None else plugin_manager
        self._services = services if services is not None else service_manager
        self._window: Optional[Window] = None

    @property
    def window_service(self) -> WindowService:
        """The configured ``window`` service."""
        service = self._services.get_service(WindowService.name)
        return service  # type: ignore[return-value]

    @property
    def window(self) -> Window:
        """The window used for conversions by this converter."""
        if self._window is None:
            self._window = self.window_service.get_window()
        return self._window

    @property
    def document(self):
        """The document of this converter's window."""
        return self.window.document

    @property
    def options(self) -> ConversionOptions:
        """Options as configured, before any defaults are resolved."""
        return self._options

    def convert(self, html: Union[str, Tag, None]) -> str:
        """
        Convert HTML into Markdown.

        ``html`` can either be an HTML string or an element whose contents
        are to be converted.

        Args:
            html: HTML (or element whose inner HTML is) to be converted

        Returns:
            The Markdown converted from ``html``
        """
        if not html:
            return ""

        window = self.window
        options = self._options
        if options.base_uri is None:
            options = options.model_copy(update={"base_uri": self.window_service.get_base_uri(window)})

        transformer = Transformer(window, self._plugins)
        try:
            return transformer.transform(html, options)
        except Exception as e:
            logger.error(f"Failed to convert HTML to Markdown: {e}", exc_info=True)
            raise

    def destroy(self) -> Converter:
        """
        Release the window used by this converter.

        Another window is retrieved from the window service the next time
        one is required.

        Returns:
            Self for chaining
        """
        if self._window is not None:
            self.window_service.close_window(self._window)
            self._window = None
        return self

    def __enter__(self) -> Converter:
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        self.destroy()


def convert(html: Union[str, Tag, None], options: OptionsType = None) -> str:
    """
    Convert HTML into Markdown using the process-wide plugins and services.

    Args:
        html: HTML string, or element whose contents are to be converted
        options: Conversion options (instance or mapping)

    Returns:
        Markdown text, or an empty string for empty input
    """
    with Converter(options) as converter:
        return converter.convert(html)


def register(plugin: Plugin) -> None:
    """
    Register a plugin to be used by all converters sharing the process-wide registry.

    If the plugin declares a tag name which already has a plugin registered
    for it, the new plugin replaces the previous one for conflicting tag
    names only.
    """
    plugin_manager.register(plugin)


def register_preset(preset: Preset) -> None:
    """Register all plugins of a preset, in order, into the process-wide registry."""
    plugin_manager.register_preset(preset)


def use(service: Service) -> None:
    """
    Configure a service to be used by all converters sharing the process-wide services.

    Raises:
        ServiceError: If a service has already been configured with the same name
    """
    service_manager.set_service(service.get_name(), service)


use(BeautifulSoupWindowService())
