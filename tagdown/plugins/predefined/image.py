"""Images."""

from .references import ReferencePlugin


class ImagePlugin(ReferencePlugin):
    """A plugin which outputs images, inline or reference-style depending on options."""

    tag_names = ("img",)
    reference_prefix = "image"

    def transform(self, transformation, context):
        element = transformation.element
        source = element.get("src")
        if not source:
            return False

        alternative_text = element.get("alt") or ""
        target = self.format_target(self.resolve_url(transformation, str(source)), element.get("title"))

        if transformation.options.inline:
            value = f"({target})"
        else:
            value = f"[{self.add_reference(transformation, target)}]"

        transformation.output(f"![{alternative_text}]{value}")
        return False
