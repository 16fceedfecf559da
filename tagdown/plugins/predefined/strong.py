"""Strong emphasis (``**text**``)."""

from ..base import Plugin


class StrongPlugin(Plugin):
    """A plugin which outputs as strong text."""

    tag_names = ("b", "strong")

    def transform(self, transformation, context):
        transformation.output("**")
        transformation.at_no_white_space = True
        return True

    def after(self, transformation, context):
        transformation.output("**")
