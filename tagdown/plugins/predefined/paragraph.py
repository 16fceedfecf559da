"""Block containers rendered as paragraphs."""

from ..base import Plugin


class ParagraphPlugin(Plugin):
    """A plugin which separates block content with blank lines."""

    tag_names = (
        "address",
        "article",
        "aside",
        "div",
        "dl",
        "dt",
        "fieldset",
        "figcaption",
        "figure",
        "footer",
        "form",
        "header",
        "main",
        "nav",
        "p",
        "section",
    )

    def transform(self, transformation, context):
        transformation.append_paragraph()
        return True

    def after(self, transformation, context):
        transformation.append_paragraph()
