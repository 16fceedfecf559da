"""Shared support for plugins that emit reference-style links."""

from urllib.parse import urljoin

from ..base import Plugin


class ReferencePlugin(Plugin):
    """Base for plugins collecting URL references during a conversion.

    Identical targets share one reference; the references are written at the
    end of the document as ``[<prefix><index>]: <target>`` lines.
    """

    reference_prefix = "ref"

    @property
    def _map_key(self) -> str:
        return f"{self.reference_prefix}_map"

    @property
    def _list_key(self) -> str:
        return f"{self.reference_prefix}_references"

    def before_all(self, transformation):
        transformation.context[self._map_key] = {}
        transformation.context[self._list_key] = []

    def after_all(self, transformation):
        references = transformation.context.get(self._list_key)
        if not references:
            return

        transformation.append_paragraph()
        for index, value in enumerate(references):
            if index:
                transformation.append_line()
            transformation.output(f"[{self.reference_prefix}{index}]: {value}")

        transformation.append_paragraph()

    def add_reference(self, transformation, value: str) -> str:
        """Return the reference name for ``value``, adding it if not yet known."""
        reference_map = transformation.context[self._map_key]
        references = transformation.context[self._list_key]

        index = reference_map.get(value)
        if index is None:
            index = len(references)
            references.append(value)
            reference_map[value] = index

        return f"{self.reference_prefix}{index}"

    @staticmethod
    def resolve_url(transformation, url: str) -> str:
        """Resolve ``url`` against the base URI when absolute URLs are requested."""
        if transformation.options.absolute:
            return urljoin(transformation.options.base_uri or "", url)
        return url

    @staticmethod
    def format_target(url: str, title=None) -> str:
        return f'{url} "{title}"' if title else url
