"""Hyperlinks."""

from .references import ReferencePlugin


class AnchorPlugin(ReferencePlugin):
    """A plugin which outputs links, inline or reference-style depending on options.

    Anchors without an ``href`` are output as their plain contents.
    """

    tag_names = ("a",)
    reference_prefix = "anchor"

    def transform(self, transformation, context):
        href = transformation.element.get("href")
        if not href:
            return True

        target = self.format_target(self.resolve_url(transformation, str(href)), transformation.element.get("title"))

        if transformation.options.inline:
            context["value"] = f"({target})"
        else:
            context["value"] = f"[{self.add_reference(transformation, target)}]"

        transformation.output("[")
        transformation.at_no_white_space = True
        return True

    def after(self, transformation, context):
        if "value" in context:
            transformation.output("]" + context["value"])
