"""Enumerated scales and element keys used by typography styles.

Every scale exposes ``css_value``, the literal emitted into stylesheets.

Examples
--------
>>> from folio.typography.values import TextSize, Weight
>>> TextSize.MEDIUM is TextSize.BODY
True
>>> TextSize.TITLE.css_value, Weight.BOLD.css_value
('1.5rem', '700')
"""

from __future__ import annotations

import dataclasses as dc
import enum

from folio._constants import ELEMENT_CLASS_TEMPLATE, HEADING_CLASS_TEMPLATE


class TextSize(enum.Enum):
    """Named font sizes; ``MEDIUM`` is an alias of ``BODY``."""

    CAPTION2 = "caption2"
    CAPTION = "caption"
    FOOTNOTE = "footnote"
    SUBHEADLINE = "subheadline"
    CALLOUT = "callout"
    BODY = "body"
    HEADLINE = "headline"
    TITLE3 = "title3"
    TITLE2 = "title2"
    TITLE = "title"
    LARGE = "large"
    EXTRA_LARGE = "extra_large"
    MEDIUM = "body"

    @property
    def css_value(self) -> str:
        return _TEXT_SIZE_CSS[self]


_TEXT_SIZE_CSS: dict[TextSize, str] = {
    TextSize.CAPTION2: "0.75rem",
    TextSize.CAPTION: "0.8125rem",
    TextSize.FOOTNOTE: "0.875rem",
    TextSize.SUBHEADLINE: "0.9375rem",
    TextSize.CALLOUT: "1rem",
    TextSize.BODY: "1rem",
    TextSize.HEADLINE: "1.125rem",
    TextSize.TITLE3: "1.25rem",
    TextSize.TITLE2: "1.375rem",
    TextSize.TITLE: "1.5rem",
    TextSize.LARGE: "1.75rem",
    TextSize.EXTRA_LARGE: "2rem",
}


@dc.dataclass(frozen=True, slots=True)
class CustomTextSize:
    """Font size outside the named scale, in ``rem``."""

    rem: float

    @property
    def css_value(self) -> str:
        return f"{self.rem:g}rem"


FontSize = TextSize | CustomTextSize


class _CssEnum(enum.StrEnum):
    @property
    def css_value(self) -> str:
        return self.value


class Weight(_CssEnum):
    ULTRA_LIGHT = "100"
    THIN = "200"
    LIGHT = "300"
    REGULAR = "400"
    MEDIUM = "500"
    SEMIBOLD = "600"
    BOLD = "700"
    HEAVY = "800"
    BLACK = "900"


class Alignment(_CssEnum):
    LEADING = "left"
    CENTER = "center"
    TRAILING = "right"
    JUSTIFIED = "justify"


class Leading(_CssEnum):
    """Line-height scale."""

    TIGHT = "1.25"
    SNUG = "1.375"
    NORMAL = "1.5"
    RELAXED = "1.625"
    LOOSE = "2"


class Tracking(_CssEnum):
    """Letter-spacing scale."""

    TIGHTER = "-0.05em"
    TIGHT = "-0.025em"
    NORMAL = "0"
    WIDE = "0.025em"
    WIDER = "0.05em"
    WIDEST = "0.1em"


class Decoration(_CssEnum):
    NONE = "none"
    UNDERLINE = "underline"
    STRIKETHROUGH = "line-through"


class HeadingLevel(enum.IntEnum):
    H1 = 1
    H2 = 2
    H3 = 3
    H4 = 4
    H5 = 5
    H6 = 6

    @property
    def tag_name(self) -> str:
        return f"h{self.value}"

    @property
    def css_class(self) -> str:
        return HEADING_CLASS_TEMPLATE.format(level=self.value)


class ElementType(enum.StrEnum):
    """Styleable Markdown element kinds, valued by their HTML tag."""

    PARAGRAPH = "p"
    EMPHASIS = "em"
    STRONG = "strong"
    CODE = "code"
    INLINE_CODE = "code-inline"
    CODE_BLOCK = "pre"
    BLOCKQUOTE = "blockquote"
    ORDERED_LIST = "ol"
    UNORDERED_LIST = "ul"
    LIST_ITEM = "li"
    LINK = "a"
    IMAGE = "img"
    TABLE = "table"
    TABLE_HEADER = "th"
    TABLE_CELL = "td"
    TABLE_ROW = "tr"
    HORIZONTAL_RULE = "hr"

    @property
    def css_class(self) -> str:
        return ELEMENT_CLASS_TEMPLATE.format(kind=self.value)

    @property
    def css_selector(self) -> str:
        """Return the element selector, excluding code inside ``<pre>`` for inline code."""
        if self is ElementType.INLINE_CODE:
            return "code:not(pre code)"
        return self.value


__all__ = [
    "Alignment",
    "CustomTextSize",
    "Decoration",
    "ElementType",
    "FontSize",
    "HeadingLevel",
    "Leading",
    "TextSize",
    "Tracking",
    "Weight",
]
