"""Window service: the DOM provider used to parse and inspect HTML."""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from .base import Service

logger = logging.getLogger(__name__)

IMPORTANT_PATTERN = re.compile(r"\s*!\s*important\s*$", re.IGNORECASE)


class ComputedStyle:
    """
    Simplified computed style of an element.

    Only the inline ``style`` attribute is considered, together with the
    ``hidden`` attribute which the UA stylesheet maps to ``display: none``.
    Stylesheets and inheritance are not evaluated.
    """

    def __init__(self, element: Tag):
        self._properties = self._parse(element)

    @staticmethod
    def _parse(element: Tag) -> dict[str, str]:
        properties: dict[str, str] = {}

        style = element.get("style")
        if isinstance(style, list):
            style = " ".join(style)

        for declaration in (style or "").split(";"):
            name, sep, value = declaration.partition(":")
            if not sep:
                continue
            value = IMPORTANT_PATTERN.sub("", value).strip().lower()
            properties[name.strip().lower()] = value

        if element.has_attr("hidden") and "display" not in properties:
            properties["display"] = "none"

        return properties

    def get_property_value(self, name: str) -> str:
        """Return the value of a CSS property, or an empty string when unset."""
        return self._properties.get(name.lower(), "")


class Window:
    """
    A parsed HTML document together with the DOM operations tagdown needs.

    Example:
        window = Window(BeautifulSoup("<p>Hi</p>", "html.parser"))
        root = window.create_element("div")
        window.set_inner_html(root, "<b>Hello</b>")
    """

    def __init__(
        self,
        document: BeautifulSoup,
        url: Optional[str] = None,
        features: str = "html.parser",
        default_base_uri: Optional[str] = None,
    ):
        """
        Initialize the window.

        Args:
            document: Parsed document
            url: URL the document was loaded from, if any
            features: BeautifulSoup parser used for fragments and nested documents
            default_base_uri: Base URI used when the document has neither a URL nor a <base>
        """
        self.document = document
        self.url = url
        self.features = features
        self.closed = False
        self._default_base_uri = default_base_uri

    @property
    def body(self) -> Tag:
        """The document body, or the document itself when it has no <body>."""
        body = self.document.body
        return body if body is not None else self.document

    @property
    def base_uri(self) -> str:
        """Base URI of the document, honouring any <base href> element."""
        fallback = self.url or self._default_base_uri or Path.cwd().as_uri() + "/"

        base = self.document.find("base", href=True)
        if isinstance(base, Tag):
            return urljoin(fallback, str(base["href"]))
        return fallback

    @staticmethod
    def is_element(node: Any) -> bool:
        """Check whether a node is an element."""
        return isinstance(node, Tag)

    @staticmethod
    def is_text(node: Any) -> bool:
        """Check whether a node is a text node (comments, doctypes, etc. are not)."""
        return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)

    @staticmethod
    def child_nodes(element: Tag) -> list[PageElement]:
        """Return a snapshot of an element's child nodes in document order."""
        return list(element.children)

    def create_element(self, tag_name: str) -> Tag:
        """Create a detached element owned by this window's document."""
        return self.document.new_tag(tag_name)

    def set_inner_html(self, element: Tag, html: str) -> Tag:
        """Replace the children of an element with the nodes parsed from ``html``."""
        element.clear()

        fragment = BeautifulSoup(html, self.features)
        for child in list(fragment.contents):
            element.append(child.extract())

        return element

    def get_computed_style(self, element: Tag) -> ComputedStyle:
        """Return the simplified computed style of an element."""
        return ComputedStyle(element)

    def content_window(self, element: Tag) -> Optional[Window]:
        """
        Return the nested window of a frame element.

        Only inline frame documents (``srcdoc``) are available; frames that
        reference external documents by ``src`` have no content window.
        """
        srcdoc = element.get("srcdoc")
        if srcdoc is None:
            return None

        return Window(
            BeautifulSoup(str(srcdoc), self.features),
            url=self.url,
            features=self.features,
            default_base_uri=self.base_uri,
        )

    def close(self) -> None:
        """Release the parsed document."""
        if not self.closed:
            self.document.decompose()
            self.closed = True


class WindowService(Service, ABC):
    """Service providing windows for conversions."""

    name = "window"

    @abstractmethod
    def get_window(self) -> Window:
        """Return a new window."""
        ...

    def get_base_uri(self, window: Window) -> str:
        """Return the base URI for a window."""
        return window.base_uri

    def close_window(self, window: Window) -> None:
        """Close a window and free up its resources."""
        window.close()


class BeautifulSoupWindowService(WindowService):
    """
    Window service backed by BeautifulSoup.

    Example:
        service = BeautifulSoupWindowService(base_uri="https://example.com/")
        window = service.get_window()
    """

    def __init__(self, features: str = "html.parser", base_uri: Optional[str] = None):
        """
        Initialize the window service.

        Args:
            features: BeautifulSoup parser to use (default: the stdlib html.parser)
            base_uri: Default base URI for windows without a URL
        """
        self.features = features
        self.base_uri = base_uri

    def get_window(self, html: Optional[str] = None, url: Optional[str] = None) -> Window:
        """
        Return a new window, optionally loaded with a document.

        Args:
            html: Optional HTML document to load
            url: Optional URL the document came from

        Returns:
            Window wrapping the parsed document
        """
        logger.debug(f"Creating window (parser={self.features}, url={url})")
        document = BeautifulSoup(html or "", self.features)
        return Window(document, url=url, features=self.features, default_base_uri=self.base_uri)
