"""Emphasis (``_text_``)."""

from ..base import Plugin


class EmphasisPlugin(Plugin):
    """A plugin which outputs as emphasised text."""

    tag_names = ("cite", "dfn", "em", "i", "u", "var")

    def transform(self, transformation, context):
        transformation.output("_")
        transformation.at_no_white_space = True
        return True

    def after(self, transformation, context):
        transformation.output("_")
