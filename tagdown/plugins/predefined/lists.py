"""Ordered and unordered lists."""

import logging

from ..base import Plugin

logger = logging.getLogger(__name__)


class ListPlugin(Plugin):
    """A plugin which tracks the kind and numbering of the innermost list.

    The outermost list is separated from surrounding content by paragraph
    breaks; nested lists continue inside their parent item.
    """

    tag_names = ("ol", "ul")

    def before(self, transformation, context):
        context["previous_in_ordered_list"] = transformation.in_ordered_list
        context["previous_list_index"] = transformation.list_index

    def transform(self, transformation, context):
        if transformation.list_depth == 0:
            transformation.append_paragraph()

        transformation.in_ordered_list = transformation.tag_name == "ol"
        transformation.list_index = self._start(transformation.element) if transformation.in_ordered_list else 1
        transformation.list_depth += 1
        return True

    def after(self, transformation, context):
        transformation.list_depth -= 1
        transformation.in_ordered_list = context["previous_in_ordered_list"]
        transformation.list_index = context["previous_list_index"]

        if transformation.list_depth == 0:
            transformation.append_paragraph()

    @staticmethod
    def _start(element) -> int:
        start = element.get("start")
        if start is None:
            return 1
        try:
            return int(str(start).strip())
        except ValueError:
            logger.debug(f"Ignoring invalid list start: {start!r}")
            return 1


class ListItemPlugin(Plugin):
    """A plugin which outputs a list item marker and indents the item's contents."""

    tag_names = ("li",)
    indent = "    "

    def before(self, transformation, context):
        context["previous_left"] = transformation.left

    def transform(self, transformation, context):
        if transformation.in_ordered_list:
            marker = f"{transformation.list_index}. "
            transformation.list_index += 1
        else:
            marker = "* "

        if not transformation.at_left:
            transformation.append_line()

        transformation.append(marker)
        transformation.left += self.indent

        # block children start on the marker's line
        transformation.at_left = False
        transformation.at_no_white_space = True
        transformation.at_paragraph = True
        return True

    def after(self, transformation, context):
        transformation.left = context["previous_left"]
