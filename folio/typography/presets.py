"""Ready-made typography configurations.

Each preset is built by a function so callers always receive a fresh
configuration. Look presets up by name through
:meth:`TypographyConfiguration.preset` or :data:`TYPOGRAPHY_PRESETS`.
"""

from __future__ import annotations

import typing as typ

from .configuration import TypographyConfiguration
from .style import (
    BackgroundProperties,
    BorderProperties,
    FontProperties,
    Spacing,
    TypographyStyle,
)
from .values import (
    Decoration,
    ElementType,
    HeadingLevel,
    Leading,
    TextSize,
    Weight,
)

MONOSPACE_FAMILY = "ui-monospace, Menlo, Monaco, monospace"
CODE_BACKGROUND = "rgb(248 250 252)"
RULE_COLOR = "rgb(229 231 235)"


def _heading(
    size: TextSize,
    weight: Weight,
    *,
    line_height: Leading | None = None,
    top: str | None = None,
    bottom: str,
) -> TypographyStyle:
    return TypographyStyle(
        font=FontProperties(size=size, weight=weight, line_height=line_height),
        margins=Spacing(top=top, bottom=bottom),
    )


def default() -> TypographyConfiguration:
    """Balanced defaults for general content."""
    return TypographyConfiguration(
        headings={
            HeadingLevel.H1: _heading(TextSize.EXTRA_LARGE, Weight.BOLD, bottom="1.5rem"),
            HeadingLevel.H2: _heading(TextSize.LARGE, Weight.BOLD, bottom="1.25rem"),
            HeadingLevel.H3: _heading(TextSize.TITLE, Weight.SEMIBOLD, bottom="1rem"),
            HeadingLevel.H4: _heading(
                TextSize.HEADLINE, Weight.SEMIBOLD, bottom="0.75rem"
            ),
            HeadingLevel.H5: _heading(
                TextSize.SUBHEADLINE, Weight.MEDIUM, bottom="0.5rem"
            ),
            HeadingLevel.H6: _heading(TextSize.FOOTNOTE, Weight.MEDIUM, bottom="0.5rem"),
        },
        elements={
            ElementType.PARAGRAPH: TypographyStyle(margins=Spacing(bottom="1rem")),
            ElementType.CODE: TypographyStyle(
                font=FontProperties(family=MONOSPACE_FAMILY),
                background=BackgroundProperties(color=CODE_BACKGROUND),
                padding=Spacing.symmetric(vertical="0.125rem", horizontal="0.25rem"),
                border=BorderProperties(radius="0.25rem"),
            ),
            ElementType.CODE_BLOCK: TypographyStyle(
                font=FontProperties(family=MONOSPACE_FAMILY),
                background=BackgroundProperties(color=CODE_BACKGROUND),
                padding=Spacing.all("1rem"),
                margins=Spacing(bottom="1rem"),
                border=BorderProperties(radius="0.5rem"),
            ),
            ElementType.BLOCKQUOTE: TypographyStyle(
                padding=Spacing(left="1rem"),
                margins=Spacing(bottom="1rem"),
                border=BorderProperties(width="0", style="solid", color=RULE_COLOR),
                custom_properties={"border-left-width": "4px"},
            ),
            ElementType.LINK: TypographyStyle(
                font=FontProperties(
                    color="rgb(59 130 246)", text_decoration=Decoration.UNDERLINE
                )
            ),
        },
    )


def documentation() -> TypographyConfiguration:
    """Dense, readable styling for technical documentation."""
    return TypographyConfiguration(
        headings={
            HeadingLevel.H1: TypographyStyle(
                font=FontProperties(
                    size=TextSize.EXTRA_LARGE,
                    weight=Weight.BOLD,
                    line_height=Leading.TIGHT,
                ),
                margins=Spacing(bottom="2rem"),
                border=BorderProperties(width="0", style="solid", color=RULE_COLOR),
                custom_properties={
                    "border-bottom-width": "1px",
                    "padding-bottom": "0.5rem",
                },
            ),
            HeadingLevel.H2: _heading(
                TextSize.LARGE,
                Weight.SEMIBOLD,
                line_height=Leading.TIGHT,
                top="2rem",
                bottom="1rem",
            ),
            HeadingLevel.H3: _heading(
                TextSize.TITLE, Weight.SEMIBOLD, top="1.5rem", bottom="0.75rem"
            ),
        },
        elements={
            ElementType.PARAGRAPH: TypographyStyle(
                font=FontProperties(line_height=Leading.RELAXED),
                margins=Spacing(bottom="1rem"),
            ),
            ElementType.CODE: TypographyStyle(
                font=FontProperties(family=MONOSPACE_FAMILY, size=TextSize.FOOTNOTE),
                background=BackgroundProperties(color=CODE_BACKGROUND),
                padding=Spacing.symmetric(vertical="0.125rem", horizontal="0.375rem"),
                border=BorderProperties(
                    width="1px", style="solid", color=RULE_COLOR, radius="0.25rem"
                ),
            ),
        },
        default_font_family="ui-sans-serif, system-ui, sans-serif",
    )


def marketing() -> TypographyConfiguration:
    """Bold, high-contrast styling for landing pages."""
    return TypographyConfiguration(
        headings={
            HeadingLevel.H1: _heading(
                TextSize.EXTRA_LARGE,
                Weight.BLACK,
                line_height=Leading.TIGHT,
                bottom="1.5rem",
            ),
            HeadingLevel.H2: _heading(
                TextSize.LARGE,
                Weight.BOLD,
                line_height=Leading.TIGHT,
                top="2rem",
                bottom="1rem",
            ),
        },
        elements={
            ElementType.PARAGRAPH: TypographyStyle(
                font=FontProperties(size=TextSize.HEADLINE, line_height=Leading.RELAXED),
                margins=Spacing(bottom="1.25rem"),
            ),
            ElementType.STRONG: TypographyStyle(
                font=FontProperties(weight=Weight.BOLD, color="rgb(16 185 129)")
            ),
        },
    )


def article() -> TypographyConfiguration:
    """Serif long-form reading styles."""
    return TypographyConfiguration(
        headings={
            HeadingLevel.H1: _heading(
                TextSize.EXTRA_LARGE,
                Weight.BOLD,
                line_height=Leading.TIGHT,
                bottom="2rem",
            ),
            HeadingLevel.H2: _heading(
                TextSize.LARGE,
                Weight.SEMIBOLD,
                line_height=Leading.SNUG,
                top="3rem",
                bottom="1.5rem",
            ),
            HeadingLevel.H3: _heading(
                TextSize.TITLE, Weight.SEMIBOLD, top="2rem", bottom="1rem"
            ),
        },
        elements={
            ElementType.PARAGRAPH: TypographyStyle(
                font=FontProperties(size=TextSize.CALLOUT, line_height=Leading.RELAXED),
                margins=Spacing(bottom="1.5rem"),
            ),
            ElementType.BLOCKQUOTE: TypographyStyle(
                font=FontProperties(
                    size=TextSize.CALLOUT,
                    color="rgb(107 114 128)",
                    line_height=Leading.RELAXED,
                ),
                padding=Spacing(left="1.5rem"),
                margins=Spacing(top="2rem", bottom="2rem"),
                border=BorderProperties(
                    width="0", style="solid", color="rgb(209 213 219)"
                ),
                custom_properties={"border-left-width": "4px"},
            ),
        },
        default_font_family="Georgia, 'Times New Roman', serif",
        default_font_size=TextSize.CALLOUT,
    )


def blog() -> TypographyConfiguration:
    """Friendly styling for blog posts."""
    return TypographyConfiguration(
        headings={
            HeadingLevel.H1: _heading(
                TextSize.EXTRA_LARGE,
                Weight.BLACK,
                line_height=Leading.TIGHT,
                bottom="1rem",
            ),
            HeadingLevel.H2: _heading(
                TextSize.LARGE,
                Weight.BOLD,
                line_height=Leading.SNUG,
                top="2.5rem",
                bottom="1rem",
            ),
            HeadingLevel.H3: _heading(
                TextSize.TITLE, Weight.SEMIBOLD, top="2rem", bottom="0.75rem"
            ),
        },
        elements={
            ElementType.PARAGRAPH: TypographyStyle(
                font=FontProperties(line_height=Leading.RELAXED),
                margins=Spacing(bottom="1.25rem"),
            ),
            ElementType.LINK: TypographyStyle(
                font=FontProperties(
                    color="rgb(37 99 235)", text_decoration=Decoration.UNDERLINE
                ),
                custom_properties={"text-decoration-color": "rgb(147 197 253)"},
            ),
            ElementType.CODE: TypographyStyle(
                font=FontProperties(
                    family="'Fira Code', 'SF Mono', Consolas, monospace",
                    size=TextSize.FOOTNOTE,
                ),
                background=BackgroundProperties(color="rgb(249 250 251)"),
                padding=Spacing.symmetric(vertical="0.125rem", horizontal="0.375rem"),
                border=BorderProperties(
                    width="1px", style="solid", color=RULE_COLOR, radius="0.375rem"
                ),
            ),
        },
        default_font_family=(
            "-apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif"
        ),
    )


TYPOGRAPHY_PRESETS: dict[str, typ.Callable[[], TypographyConfiguration]] = {
    "default": default,
    "documentation": documentation,
    "marketing": marketing,
    "article": article,
    "blog": blog,
}

__all__ = [
    "TYPOGRAPHY_PRESETS",
    "article",
    "blog",
    "default",
    "documentation",
    "marketing",
]
