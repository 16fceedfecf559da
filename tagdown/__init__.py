"""
tagdown - Convert HTML into Markdown through pluggable per-tag handlers.

Usage:
    import tagdown

    markdown = tagdown.convert("<p>Hello <b>World</b></p>")

    class MarkPlugin(tagdown.Plugin):
        tag_names = ("mark",)

        def transform(self, transformation, context):
            transformation.output("==")
            return True

        def after(self, transformation, context):
            transformation.output("==")

    tagdown.register(MarkPlugin())
"""

__version__ = "1.0.0"

from .converter import Converter, convert, plugin_manager, register, register_preset, service_manager, use
from .exceptions import ConversionDepthError, PluginError, ServiceError, TagdownError
from .models.options import ConversionOptions
from .plugins import DefaultPreset, Plugin, PluginManager, Preset
from .services import BeautifulSoupWindowService, Service, ServiceManager, Window, WindowService
from .transformation import Transformation
from .transformer import Transformer

__all__ = [
    "__version__",
    # Core
    "convert",
    "register",
    "register_preset",
    "use",
    "Converter",
    "Transformer",
    "Transformation",
    "plugin_manager",
    "service_manager",
    # Plugins
    "Plugin",
    "Preset",
    "PluginManager",
    "DefaultPreset",
    # Services
    "Service",
    "ServiceManager",
    "WindowService",
    "Window",
    "BeautifulSoupWindowService",
    # Config
    "ConversionOptions",
    # Errors
    "TagdownError",
    "ServiceError",
    "PluginError",
    "ConversionDepthError",
]
