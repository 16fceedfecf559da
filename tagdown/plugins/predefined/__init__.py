"""Predefined plugins for common HTML elements."""

from .anchor import AnchorPlugin
from .blockquote import BlockQuotePlugin
from .code import CodePlugin
from .emphasis import EmphasisPlugin
from .empty import EmptyPlugin
from .frame import FramePlugin
from .heading import HeadingPlugin
from .horizontal_rule import HorizontalRulePlugin
from .image import ImagePlugin
from .line_break import LineBreakPlugin
from .lists import ListItemPlugin, ListPlugin
from .paragraph import ParagraphPlugin
from .preformatted import PreformattedPlugin
from .quote import QuotePlugin
from .references import ReferencePlugin
from .strong import StrongPlugin

__all__ = [
    "AnchorPlugin",
    "BlockQuotePlugin",
    "CodePlugin",
    "EmphasisPlugin",
    "EmptyPlugin",
    "FramePlugin",
    "HeadingPlugin",
    "HorizontalRulePlugin",
    "ImagePlugin",
    "LineBreakPlugin",
    "ListPlugin",
    "ListItemPlugin",
    "ParagraphPlugin",
    "PreformattedPlugin",
    "QuotePlugin",
    "ReferencePlugin",
    "StrongPlugin",
]
