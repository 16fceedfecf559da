"""Plugin contract, registry and predefined plugins."""

from .base import Plugin, Preset
from .manager import PluginManager
from .presets import DefaultPreset

__all__ = [
    "Plugin",
    "Preset",
    "PluginManager",
    "DefaultPreset",
]
