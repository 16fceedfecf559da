"""Hard line breaks."""

from ..base import Plugin


class LineBreakPlugin(Plugin):
    """A plugin which outputs a hard line break (two trailing spaces)."""

    tag_names = ("br",)

    def transform(self, transformation, context):
        transformation.append("  ").append_line()
        return False
