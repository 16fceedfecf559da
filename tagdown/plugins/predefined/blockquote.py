"""Block quotations."""

from ..base import Plugin


class BlockQuotePlugin(Plugin):
    """A plugin which prefixes every line of its contents with ``> ``."""

    tag_names = ("blockquote", "dd")
    prefix = "> "

    def before(self, transformation, context):
        context["previous_left"] = transformation.left

    def transform(self, transformation, context):
        transformation.append_paragraph()

        # the current line already carries the outer prefix
        transformation.append(self.prefix)
        transformation.left += self.prefix
        return True

    def after(self, transformation, context):
        transformation.left = context["previous_left"]
        transformation.append_paragraph()
