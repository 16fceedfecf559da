"""Tree walker converting a DOM into Markdown through the registered plugins."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional, Union

from .exceptions import ConversionDepthError
from .models.options import ConversionOptions
from .transformation import Transformation

if TYPE_CHECKING:
    from bs4.element import PageElement, Tag

    from .plugins.manager import PluginManager
    from .services.window import Window

logger = logging.getLogger(__name__)


class Transformer:
    """
    Transforms an HTML string or DOM element into Markdown.

    Example:
        transformer = Transformer(window, plugin_manager)
        markdown = transformer.transform("<p>Hello <b>World</b></p>", ConversionOptions())
    """

    def __init__(self, window: Window, plugins: PluginManager):
        """
        Initialize the transformer.

        Args:
            window: Window used to create and inspect elements
            plugins: Registry consulted for every element
        """
        self.window = window
        self.plugins = plugins

    @property
    def document(self):
        """Document of the transformer's window."""
        return self.window.document

    def transform(
        self,
        html: Union[str, Tag, None],
        options: Optional[ConversionOptions] = None,
    ) -> str:
        """
        Transform HTML into Markdown.

        Args:
            html: HTML string, or element whose contents are to be transformed
            options: Conversion options

        Returns:
            Markdown with surrounding whitespace trimmed
        """
        if not html:
            return ""

        if isinstance(html, str):
            root = self.window.create_element("div")
            self.window.set_inner_html(root, html)
        else:
            root = html

        transformation = Transformation(self, options or ConversionOptions())
        plugins = self.plugins.plugins

        logger.debug(f"Transforming <{getattr(root, 'name', '?')}> with {len(plugins)} plugins")

        for plugin in plugins:
            plugin.before_all(transformation)

        self.transform_element(root, transformation)

        for plugin in plugins:
            plugin.after_all(transformation)

        markdown = transformation.buffer.strip()
        logger.debug(f"Transformed <{getattr(root, 'name', '?')}> into {len(markdown)} characters")
        return markdown

    def transform_element(self, element: Optional[PageElement], transformation: Transformation) -> None:
        """
        Transform a node and its children into Markdown using ``transformation``.

        Nothing happens if ``element`` is ``None`` or is an invisible element
        (simplified detection used).

        Args:
            element: Node to be transformed, along with its children
            transformation: The current transformation
        """
        if element is None:
            return

        window = transformation.window

        if window.is_element(element):
            if not self._is_visible(element, window):
                logger.debug(f"Skipping invisible <{element.name}>")
                return

            self._transform_tag(element, transformation)
        elif window.is_text(element):
            value = str(element)

            if transformation.in_preformatted_block:
                transformation.output(value)
            elif transformation.in_code_block:
                transformation.output(value.replace("`", "\\`"))
            else:
                transformation.output(value, clean=True)

    def _transform_tag(self, element: Tag, transformation: Transformation) -> None:
        transformation.element = element
        tag_name = transformation.tag_name

        max_depth = transformation.options.max_depth
        if max_depth is not None and transformation.depth >= max_depth:
            raise ConversionDepthError(transformation.depth + 1, max_depth, tag_name)

        context: dict[str, Any] = {}
        plugin = self.plugins.get(tag_name)

        transformation.depth += 1
        try:
            if plugin is None:
                self._transform_children(element, transformation)
                return

            plugin.before(transformation, context)
            try:
                if plugin.transform(transformation, context) is not False:
                    self._transform_children(element, transformation)
            finally:
                transformation.element = element
                plugin.after(transformation, context)
        finally:
            transformation.depth -= 1

    def _transform_children(self, element: Tag, transformation: Transformation) -> None:
        for child in transformation.window.child_nodes(element):
            self.transform_element(child, transformation)

    @staticmethod
    def _is_visible(element: Tag, window: Window) -> bool:
        """
        Check whether an element is currently visible.

        This is not a very sophisticated check and only looks at the element's
        own computed style, but it catches the most simple cases.
        """
        style = window.get_computed_style(element)

        return style.get_property_value("display") != "none" and style.get_property_value("visibility") != "hidden"
