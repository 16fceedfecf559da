"""Inline code spans."""

from ..base import Plugin


class CodePlugin(Plugin):
    """A plugin which outputs inline code, or raw code inside a preformatted block.

    Backticks inside the code are escaped by the engine while ``in_code_block``
    is set.
    """

    tag_names = ("code", "kbd", "samp", "tt")

    def before(self, transformation, context):
        context["previous_in_code_block"] = transformation.in_code_block

    def transform(self, transformation, context):
        if not transformation.in_preformatted_block:
            transformation.output("`")

        transformation.in_code_block = True
        return True

    def after(self, transformation, context):
        if not transformation.in_preformatted_block:
            transformation.output("`")

        transformation.in_code_block = context["previous_in_code_block"]
