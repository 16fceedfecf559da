"""Inline quotations."""

from ..base import Plugin


class QuotePlugin(Plugin):
    """A plugin which wraps inline quotations in double quotes."""

    tag_names = ("q",)

    def transform(self, transformation, context):
        transformation.output('"')
        transformation.at_no_white_space = True
        return True

    def after(self, transformation, context):
        transformation.output('"')
