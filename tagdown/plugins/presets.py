"""Presets bundling the predefined plugins."""

from .base import Preset
from .predefined import (
    AnchorPlugin,
    BlockQuotePlugin,
    CodePlugin,
    EmphasisPlugin,
    EmptyPlugin,
    FramePlugin,
    HeadingPlugin,
    HorizontalRulePlugin,
    ImagePlugin,
    LineBreakPlugin,
    ListItemPlugin,
    ListPlugin,
    ParagraphPlugin,
    PreformattedPlugin,
    QuotePlugin,
    StrongPlugin,
)


class DefaultPreset(Preset):
    """The preset registered for every conversion unless overridden."""

    def __init__(self):
        super().__init__(
            [
                AnchorPlugin(),
                BlockQuotePlugin(),
                LineBreakPlugin(),
                CodePlugin(),
                EmphasisPlugin(),
                EmptyPlugin(),
                FramePlugin(),
                HeadingPlugin(),
                HorizontalRulePlugin(),
                ImagePlugin(),
                ListPlugin(),
                ListItemPlugin(),
                ParagraphPlugin(),
                PreformattedPlugin(),
                QuotePlugin(),
                StrongPlugin(),
            ],
            name="default",
        )
