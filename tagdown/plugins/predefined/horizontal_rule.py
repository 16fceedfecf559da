"""Thematic breaks."""

from ..base import Plugin


class HorizontalRulePlugin(Plugin):
    """A plugin which outputs a horizontal rule as its own paragraph."""

    tag_names = ("hr",)

    def transform(self, transformation, context):
        transformation.append_paragraph().output("---").append_paragraph()
        return False
