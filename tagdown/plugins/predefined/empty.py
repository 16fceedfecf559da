"""Suppression of elements whose contents have no Markdown representation."""

from ..base import Plugin


class EmptyPlugin(Plugin):
    """A plugin which simply ensures that all children elements are not transformed."""

    tag_names = (
        "applet",
        "area",
        "audio",
        "button",
        "canvas",
        "datalist",
        "embed",
        "head",
        "input",
        "map",
        "menu",
        "meter",
        "noframes",
        "noscript",
        "object",
        "optgroup",
        "option",
        "param",
        "progress",
        "rp",
        "rt",
        "ruby",
        "script",
        "select",
        "style",
        "template",
        "textarea",
        "title",
        "video",
    )

    def transform(self, transformation, context):
        return False
