"""Preformatted blocks rendered as fenced code blocks."""

from ..base import Plugin


class PreformattedPlugin(Plugin):
    """A plugin which outputs the contents in a fenced preformatted block.

    Contents are written verbatim, with the current indentation applied after
    each line break so that blocks nested in quotes or lists stay aligned. As
    in HTML, a single line break directly after the opening tag is ignored.
    """

    tag_names = ("pre",)
    fence = "```"

    def before(self, transformation, context):
        context["previous_in_preformatted_block"] = transformation.in_preformatted_block

    def transform(self, transformation, context):
        transformation.append_paragraph()
        transformation.output(self.fence)
        transformation.append_line()
        transformation.in_preformatted_block = True

        window = transformation.window
        children = window.child_nodes(transformation.element)

        if children and window.is_text(children[0]):
            first = str(children[0])
            if first.startswith("\r\n"):
                first = first[2:]
            elif first.startswith(("\n", "\r")):
                first = first[1:]
            transformation.output(first)
            children = children[1:]

        for child in children:
            transformation.transformer.transform_element(child, transformation)

        return False

    def after(self, transformation, context):
        transformation.in_preformatted_block = context["previous_in_preformatted_block"]

        if not transformation.at_left:
            transformation.append_line()

        transformation.output(self.fence)
        transformation.append_paragraph()
