"""Plugin contract and presets used to dispatch per-tag conversion behavior."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from ..transformation import Transformation

logger = logging.getLogger(__name__)


class Plugin:
    """Base class for tag handlers.

    A plugin declares the tag names it handles and hooks into the traversal
    of every matching element:

    - ``before_all`` / ``after_all`` run once per conversion.
    - ``before`` runs when a matching element is entered, then ``transform``.
      ``transform`` returns whether the element's children should be
      traversed; returning ``False`` means the plugin owns the subtree.
    - ``after`` always runs once ``before`` has, even if ``transform``
      returned ``False`` or a descendant raised.

    ``context`` is a fresh dict per element, shared only between ``before``,
    ``transform`` and ``after`` of that element.

    Example:
        class MarkPlugin(Plugin):
            tag_names = ("mark",)

            def transform(self, transformation, context):
                transformation.output("==")
                transformation.at_no_white_space = True
                return True

            def after(self, transformation, context):
                transformation.output("==")
    """

    tag_names: tuple[str, ...] = ()

    def before_all(self, transformation: Transformation) -> None:
        """Called once before the conversion starts."""

    def before(self, transformation: Transformation, context: dict[str, Any]) -> None:
        """Called when a matching element is entered, before ``transform``."""

    def transform(self, transformation: Transformation, context: dict[str, Any]) -> Optional[bool]:
        """Transform the current element. Return ``False`` to skip its children."""
        return True

    def after(self, transformation: Transformation, context: dict[str, Any]) -> None:
        """Called when a matching element is left."""

    def after_all(self, transformation: Transformation) -> None:
        """Called once after the conversion has finished."""

    def get_tag_names(self) -> tuple[str, ...]:
        """Return the tag names handled by this plugin."""
        if isinstance(self.tag_names, str):
            return (self.tag_names,)
        return tuple(self.tag_names)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(tag_names={list(self.get_tag_names())})"


class Preset:
    """An ordered collection of plugins registered together.

    Example:
        preset = Preset(name="inline").add(StrongPlugin()).add(EmphasisPlugin())
    """

    def __init__(self, plugins: Optional[Iterable[Plugin]] = None, name: Optional[str] = None):
        """
        Initialize preset.

        Args:
            plugins: Plugins in registration order
            name: Optional preset name
        """
        self.name = name or self.__class__.__name__
        self.plugins: list[Plugin] = list(plugins or [])

    def add(self, plugin: Plugin) -> Preset:
        """
        Add a plugin to the preset (fluent API).

        Args:
            plugin: The plugin to add

        Returns:
            Self for chaining
        """
        self.plugins.append(plugin)
        return self

    def __iter__(self) -> Iterator[Plugin]:
        return iter(self.plugins)

    def __len__(self) -> int:
        return len(self.plugins)
