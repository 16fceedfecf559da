"""Mutable output state shared by the engine and plugins during one conversion."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from bs4 import BeautifulSoup
    from bs4.element import Tag

    from .models.options import ConversionOptions
    from .services.window import Window
    from .transformer import Transformer

WHITESPACE_PATTERN = re.compile(r"[ \t\n\r\f]+")
LEADING_WHITESPACE_PATTERN = re.compile(r"^[ \t\n\r\f]+")


class Transformation:
    """
    Output state for a single HTML to Markdown conversion.

    A transformation owns the Markdown buffer and the flags that decide how
    the next write is rendered. One instance is created per conversion and is
    threaded by reference through the whole traversal; plugins mutate it in
    place and use per-element contexts to restore anything they change.

    Line breaks are held back until the next write, which then starts with
    the indentation in force at that point. Breaks with nothing after them,
    and a collapsed space directly before a break, are never written.

    Attributes:
        transformer: Engine performing the conversion (for manual recursion)
        options: Resolved conversion options
        window: Window of the document currently being traversed
        context: Conversion-wide scratch data shared between plugin hooks
        at_left: Next write starts at the beginning of a line
        at_no_white_space: Leading whitespace of the next collapsible write is dropped
        at_paragraph: Buffer currently ends at a paragraph boundary
        left: Indentation prefix written after every line break
        in_code_block: Text nodes are written with backticks escaped
        in_preformatted_block: Text nodes are written verbatim
        in_ordered_list: Innermost list is ordered
        list_depth: Number of lists currently entered
        list_index: Next ordinal of the innermost ordered list
        depth: Current element nesting depth
    """

    def __init__(self, transformer: Transformer, options: ConversionOptions):
        self.transformer = transformer
        self.options = options
        self.window: Window = transformer.window
        self.context: dict[str, Any] = {}

        self.at_left = True
        self.at_no_white_space = True
        self.at_paragraph = True
        self.left = ""
        self.in_code_block = False
        self.in_preformatted_block = False
        self.in_ordered_list = False
        self.list_depth = 0
        self.list_index = 1
        self.depth = 0

        self._buffer: list[str] = []
        self._pending_breaks = 0
        self._pending_space = False
        self._element: Optional[Tag] = None
        self._tag_name: Optional[str] = None

    @property
    def buffer(self) -> str:
        """Markdown written so far, without line breaks still waiting for content."""
        return "".join(self._buffer)

    @property
    def document(self) -> BeautifulSoup:
        """Document of the current window."""
        return self.window.document

    @property
    def element(self) -> Optional[Tag]:
        """Element currently being transformed."""
        return self._element

    @element.setter
    def element(self, element: Optional[Tag]) -> None:
        self._element = element
        if element is not None and self.window.is_element(element):
            self._tag_name = element.name.lower()
        else:
            self._tag_name = None

    @property
    def tag_name(self) -> Optional[str]:
        """Lower-cased tag name of the current element."""
        return self._tag_name

    def append(self, text: str) -> Transformation:
        """Append ``text`` to the buffer exactly as given, leaving all flags untouched.

        Any pending line breaks (or a pending separator space) are written
        first.
        """
        if text:
            self._flush()
            self._buffer.append(text)
        return self

    def append_line(self) -> Transformation:
        """Start a new line carrying the current indentation."""
        self._pending_space = False
        self._pending_breaks += 1
        self.at_left = True
        self.at_no_white_space = True
        return self

    def append_paragraph(self) -> Transformation:
        """
        Ensure the buffer ends with a single blank line.

        Idempotent: nothing is written when the buffer already ends at a
        paragraph boundary.
        """
        if self.at_paragraph:
            return self

        self._pending_space = False
        self._pending_breaks += 1 if self.at_left else 2
        self.at_left = True
        self.at_no_white_space = True
        self.at_paragraph = True
        return self

    def output(self, text: str, clean: bool = False) -> Transformation:
        """
        Write text to the buffer under the current state.

        Args:
            text: Text to write
            clean: Collapse whitespace runs to a single space and drop leading
                whitespace at the start of a line or after syntax markup

        Returns:
            This transformation for chaining
        """
        if not text:
            return self

        text = text.replace("\r\n", "\n").replace("\r", "\n")

        if clean:
            text = WHITESPACE_PATTERN.sub(" ", text)
            if self.at_left or self.at_no_white_space:
                text = LEADING_WHITESPACE_PATTERN.sub("", text)

        if not text:
            return self

        self.at_left = text.endswith("\n")
        self.at_no_white_space = text[-1] in " \t\n"
        self.at_paragraph = text.endswith("\n\n")

        body = text.rstrip("\n")
        breaks = len(text) - len(body)
        # a collapsed separator is only written once more content follows on the line
        trailing_space = clean and body.endswith(" ")
        if trailing_space:
            body = body[:-1]

        self.append(body.replace("\n", "\n" + self.left))

        if breaks:
            self._pending_space = False
            self._pending_breaks += breaks
        elif trailing_space:
            self._pending_space = True

        return self

    def _flush(self) -> None:
        if self._pending_breaks:
            # blank lines keep the prefix (e.g. "> ") minus trailing spaces
            for _ in range(self._pending_breaks - 1):
                self._buffer.append("\n" + self.left.rstrip())
            self._buffer.append("\n" + self.left)
        elif self._pending_space:
            self._buffer.append(" ")

        self._pending_breaks = 0
        self._pending_space = False
