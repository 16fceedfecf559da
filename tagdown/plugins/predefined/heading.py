"""Headings (``#`` to ``######``)."""

from ..base import Plugin


class HeadingPlugin(Plugin):
    """A plugin which outputs ATX headings, one ``#`` per level."""

    tag_names = ("h1", "h2", "h3", "h4", "h5", "h6")

    def transform(self, transformation, context):
        level = int(transformation.tag_name[1:])

        transformation.append_paragraph()
        transformation.output("#" * level + " ")
        return True

    def after(self, transformation, context):
        transformation.append_paragraph()
