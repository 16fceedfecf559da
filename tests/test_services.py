"""Tests for services and the BeautifulSoup window."""

from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from bs4.element import Comment, NavigableString

import tagdown
from tagdown import BeautifulSoupWindowService, Service, ServiceError, ServiceManager, Window, WindowService


class TestServiceManager:
    """Test ServiceManager."""

    def test_set_and_get(self):
        """Test a configured service can be retrieved."""
        manager = ServiceManager()
        service = BeautifulSoupWindowService()

        manager.set_service("window", service)

        assert manager.get_service("window") is service
        assert manager.has_service("window")

    def test_duplicate_name_rejected(self):
        """Test a name can only be configured once."""
        manager = ServiceManager()
        manager.set_service("window", BeautifulSoupWindowService())

        with pytest.raises(ServiceError) as exc_info:
            manager.set_service("window", BeautifulSoupWindowService())

        assert exc_info.value.name == "window"

    def test_missing_service(self):
        """Test retrieving an unconfigured service fails."""
        manager = ServiceManager()

        assert not manager.has_service("window")
        with pytest.raises(ServiceError, match="not configured"):
            manager.get_service("window")

    def test_service_name(self):
        """Test services report their class-level name."""
        assert BeautifulSoupWindowService().get_name() == "window"
        assert Service().get_name() == ""

    def test_use_rejects_second_window_service(self):
        """Test the process-wide window service cannot be configured twice."""
        with pytest.raises(ServiceError):
            tagdown.use(BeautifulSoupWindowService())

    def test_window_service_is_abstract(self):
        """Test get_window must be implemented."""
        with pytest.raises(TypeError):
            WindowService()


class TestComputedStyle:
    """Test the simplified computed style."""

    def _style(self, window, html):
        element = BeautifulSoup(html, "html.parser").find()
        return window.get_computed_style(element)

    def test_inline_style(self, window):
        """Test names and values are normalized and !important dropped."""
        style = self._style(window, '<div style="Display: NONE !important; color:Red">x</div>')

        assert style.get_property_value("display") == "none"
        assert style.get_property_value("COLOR") == "red"

    def test_unset_property(self, window):
        """Test unset properties are empty."""
        style = self._style(window, "<div>x</div>")

        assert style.get_property_value("display") == ""

    def test_hidden_attribute(self, window):
        """Test the hidden attribute maps to display none."""
        assert self._style(window, "<p hidden>x</p>").get_property_value("display") == "none"

    def test_explicit_display_overrides_hidden(self, window):
        """Test an inline display wins over the hidden attribute."""
        style = self._style(window, '<p hidden style="display: block">x</p>')

        assert style.get_property_value("display") == "block"

    def test_malformed_declarations_ignored(self, window):
        """Test declarations without a colon are skipped."""
        style = self._style(window, '<p style="bogus; visibility: hidden;">x</p>')

        assert style.get_property_value("visibility") == "hidden"


class TestWindow:
    """Test Window DOM operations."""

    def test_node_types(self):
        """Test elements, text and comments are told apart."""
        soup = BeautifulSoup("<p>text<!-- note --></p>", "html.parser")
        text, comment = soup.p.contents

        assert Window.is_element(soup.p)
        assert not Window.is_element(text)
        assert Window.is_text(text)
        assert isinstance(comment, Comment)
        assert not Window.is_text(comment)

    def test_set_inner_html(self, window):
        """Test inner HTML replaces the element's children."""
        element = window.create_element("div")
        element.append(NavigableString("old"))

        window.set_inner_html(element, "<b>new</b> text")

        assert element.name == "div"
        assert [child.name for child in window.child_nodes(element)] == ["b", None]
        assert element.get_text() == "new text"

    def test_body(self, window_service):
        """Test body falls back to the document without a <body>."""
        with_body = window_service.get_window("<html><body><p>x</p></body></html>")
        without_body = window_service.get_window("<p>x</p>")

        assert with_body.body.name == "body"
        assert without_body.body is without_body.document

    def test_base_uri_defaults(self, window):
        """Test the service's base URI is used without a URL."""
        assert window.base_uri == "https://example.com/docs/"

    def test_base_uri_from_url(self, window_service):
        """Test the document URL takes precedence over the default."""
        window = window_service.get_window("<p>x</p>", url="https://example.org/a/b.html")

        assert window.base_uri == "https://example.org/a/b.html"

    def test_base_uri_from_base_element(self, window_service):
        """Test a <base href> is resolved against the document URL."""
        html = '<html><head><base href="/root/"></head><body></body></html>'
        window = window_service.get_window(html, url="https://example.org/a/b.html")

        assert window.base_uri == "https://example.org/root/"

    def test_base_uri_falls_back_to_cwd(self):
        """Test the working directory is used when nothing else is known."""
        window = BeautifulSoupWindowService().get_window()

        assert window.base_uri == Path.cwd().as_uri() + "/"

    def test_content_window(self, window_service):
        """Test frames with srcdoc expose a nested window."""
        window = window_service.get_window('<iframe srcdoc="<p>inner</p>"></iframe><iframe src="x.html"></iframe>')
        inline_frame, external_frame = window.document.find_all("iframe")

        nested = window.content_window(inline_frame)

        assert nested is not None
        assert nested.body.get_text() == "inner"
        assert nested.base_uri == window.base_uri
        assert window.content_window(external_frame) is None

    def test_close(self, window_service):
        """Test closing a window is idempotent."""
        window = window_service.get_window("<p>x</p>")

        window_service.close_window(window)
        window_service.close_window(window)

        assert window.closed

    def test_get_base_uri_through_service(self, window_service, window):
        """Test the service resolves a window's base URI."""
        assert window_service.get_base_uri(window) == window.base_uri
