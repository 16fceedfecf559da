"""Nested frame documents."""

from ..base import Plugin


class FramePlugin(Plugin):
    """A plugin which outputs the contents of a nested frame.

    The frame's window replaces the current one while its body is converted,
    and the previous window is restored afterwards.
    """

    tag_names = ("frame", "iframe")

    def before(self, transformation, context):
        context["previous_window"] = transformation.window

    def transform(self, transformation, context):
        window = transformation.window.content_window(transformation.element)

        if window is not None:
            context["window"] = window
            transformation.window = window

            transformation.transformer.transform_element(window.body, transformation)

        return False

    def after(self, transformation, context):
        transformation.window = context["previous_window"]

        window = context.get("window")
        if window is not None:
            window.close()
