"""Typography styles, their cascade and the CSS generated from them.

Examples
--------
>>> from folio.typography import ElementType, TypographyConfiguration
>>> config = TypographyConfiguration.preset("default")
>>> config.style_for(ElementType.LINK).font.color
'rgb(59 130 246)'
>>> config.style_for("unknown") is None
True
"""

from __future__ import annotations

from .configuration import DEFAULT_FONT_FAMILY, StyleKey, TypographyConfiguration
from .presets import TYPOGRAPHY_PRESETS
from .style import (
    BackgroundProperties,
    BorderProperties,
    FontProperties,
    Spacing,
    TypographyStyle,
)
from .values import (
    Alignment,
    CustomTextSize,
    Decoration,
    ElementType,
    FontSize,
    HeadingLevel,
    Leading,
    TextSize,
    Tracking,
    Weight,
)

__all__ = [
    "DEFAULT_FONT_FAMILY",
    "TYPOGRAPHY_PRESETS",
    "Alignment",
    "BackgroundProperties",
    "BorderProperties",
    "CustomTextSize",
    "Decoration",
    "ElementType",
    "FontProperties",
    "FontSize",
    "HeadingLevel",
    "Leading",
    "Spacing",
    "StyleKey",
    "TextSize",
    "Tracking",
    "TypographyConfiguration",
    "TypographyStyle",
    "Weight",
]
