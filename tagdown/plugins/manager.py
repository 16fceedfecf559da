"""Registry mapping tag names to the plugin that handles them."""

import logging
from collections.abc import Iterator
from typing import Optional

from ..exceptions import PluginError
from .base import Plugin, Preset

logger = logging.getLogger(__name__)


class PluginManager:
    """Manage the active plugin for each tag name.

    Registering a plugin claims all of its tag names; a tag name already
    claimed by another plugin is taken over, while that plugin stays active
    for any of its other tag names.
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._plugins: dict[str, Plugin] = {}

    def register(self, plugin: Plugin) -> None:
        """Register a plugin for each of its tag names.

        Args:
            plugin: Plugin instance

        Raises:
            PluginError: If the plugin declares no tag names
        """
        tag_names = plugin.get_tag_names()
        if not tag_names:
            raise PluginError(
                f"{plugin.__class__.__name__} must declare a non-empty collection of tag names",
                context={"plugin": plugin.__class__.__name__},
            )

        for tag_name in tag_names:
            key = tag_name.lower()
            previous = self._plugins.get(key)
            if previous is not None and previous is not plugin:
                logger.debug(f"{plugin.__class__.__name__} replaces {previous.__class__.__name__} for <{key}>")
            self._plugins[key] = plugin

        logger.debug(f"Registered {plugin.__class__.__name__} for {', '.join(tag_names)}")

    def register_preset(self, preset: Preset) -> None:
        """Register every plugin of a preset, in the preset's order.

        Args:
            preset: Preset instance
        """
        for plugin in preset.plugins:
            self.register(plugin)

        logger.debug(f"Registered preset {preset.name} ({len(preset.plugins)} plugins)")

    def get(self, tag_name: Optional[str]) -> Optional[Plugin]:
        """Return the plugin active for a tag name, if any."""
        if not tag_name:
            return None
        return self._plugins.get(tag_name.lower())

    @property
    def plugins(self) -> list[Plugin]:
        """Distinct active plugins in registry order."""
        seen: set[int] = set()
        plugins: list[Plugin] = []
        for plugin in self._plugins.values():
            if id(plugin) not in seen:
                seen.add(id(plugin))
                plugins.append(plugin)
        return plugins

    def tag_names(self) -> list[str]:
        """Return all tag names that have an active plugin."""
        return list(self._plugins)

    def __contains__(self, tag_name: object) -> bool:
        return isinstance(tag_name, str) and tag_name.lower() in self._plugins

    def __iter__(self) -> Iterator[Plugin]:
        return iter(self.plugins)

    def __len__(self) -> int:
        return len(self._plugins)
