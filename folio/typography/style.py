"""Typography style records and the rule for merging them.

A :class:`TypographyStyle` groups optional font, background, padding, margin
and border settings. Merging is field by field: the right-hand style wins
wherever it sets a value and the left-hand value survives everywhere else, so
one style can set ``font.size`` and another ``font.weight`` and the merge
carries both.

Examples
--------
>>> from folio.typography.style import FontProperties, TypographyStyle
>>> from folio.typography.values import TextSize, Weight
>>> sized = TypographyStyle(font=FontProperties(size=TextSize.MEDIUM))
>>> bold = TypographyStyle(font=FontProperties(weight=Weight.BOLD))
>>> merged = sized.merging(bold)
>>> merged.font.size is TextSize.BODY, merged.font.weight is Weight.BOLD
(True, True)
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from .values import Alignment, Decoration, FontSize, Leading, Tracking, Weight

if typ.TYPE_CHECKING:
    import collections.abc as cabc

_GroupT = typ.TypeVar("_GroupT")


@dc.dataclass(frozen=True, slots=True)
class FontProperties:
    family: str | None = None
    size: FontSize | None = None
    weight: Weight | None = None
    alignment: Alignment | None = None
    color: str | None = None
    line_height: Leading | None = None
    letter_spacing: Tracking | None = None
    text_decoration: Decoration | None = None
    text_transform: str | None = None


@dc.dataclass(frozen=True, slots=True)
class BackgroundProperties:
    color: str | None = None
    opacity: float | None = None


@dc.dataclass(frozen=True, slots=True)
class Spacing:
    """Per-side lengths used for both padding and margins."""

    top: str | None = None
    right: str | None = None
    bottom: str | None = None
    left: str | None = None

    @classmethod
    def all(cls, value: str) -> Spacing:
        return cls(top=value, right=value, bottom=value, left=value)

    @classmethod
    def symmetric(cls, *, vertical: str, horizontal: str) -> Spacing:
        return cls(top=vertical, right=horizontal, bottom=vertical, left=horizontal)


@dc.dataclass(frozen=True, slots=True)
class BorderProperties:
    width: str | None = None
    style: str | None = None
    color: str | None = None
    radius: str | None = None


def _merge_group(left: _GroupT | None, right: _GroupT | None) -> _GroupT | None:
    """Overlay the set fields of ``right`` onto ``left``."""
    if left is None:
        return right
    if right is None:
        return left
    overrides = {
        field.name: getattr(right, field.name)
        for field in dc.fields(right)  # type: ignore[arg-type]
        if getattr(right, field.name) is not None
    }
    return dc.replace(left, **overrides)  # type: ignore[type-var]


@dc.dataclass(frozen=True, slots=True)
class TypographyStyle:
    """Styling applied to one heading level, element kind or selector.

    Attributes
    ----------
    font, background, padding, margins, border
        Optional property groups; ``None`` means the group is not set.
    css_classes : frozenset[str]
        Extra classes injected into rendered elements using this style.
    custom_properties : Mapping[str, str]
        Free-form CSS declarations emitted after all typed properties, in
        insertion order.
    """

    font: FontProperties | None = None
    background: BackgroundProperties | None = None
    padding: Spacing | None = None
    margins: Spacing | None = None
    border: BorderProperties | None = None
    css_classes: frozenset[str] = frozenset()
    custom_properties: cabc.Mapping[str, str] = dc.field(default_factory=dict)

    def merging(self, other: TypographyStyle) -> TypographyStyle:
        """Return this style overlaid with the set values of ``other``."""
        return TypographyStyle(
            font=_merge_group(self.font, other.font),
            background=_merge_group(self.background, other.background),
            padding=_merge_group(self.padding, other.padding),
            margins=_merge_group(self.margins, other.margins),
            border=_merge_group(self.border, other.border),
            css_classes=self.css_classes | other.css_classes,
            custom_properties={**self.custom_properties, **other.custom_properties},
        )

    def properties(self) -> list[tuple[str, str]]:
        """Return the CSS declarations this style sets, in emission order."""
        declared: list[tuple[str, str | None]] = []
        if (font := self.font) is not None:
            declared += [
                ("font-family", font.family),
                ("font-size", font.size.css_value if font.size else None),
                ("font-weight", font.weight.css_value if font.weight else None),
                ("text-align", font.alignment.css_value if font.alignment else None),
                ("color", font.color),
                (
                    "line-height",
                    font.line_height.css_value if font.line_height else None,
                ),
                (
                    "letter-spacing",
                    font.letter_spacing.css_value if font.letter_spacing else None,
                ),
                (
                    "text-decoration",
                    font.text_decoration.css_value if font.text_decoration else None,
                ),
                ("text-transform", font.text_transform),
            ]
        if (background := self.background) is not None:
            opacity = background.opacity
            declared += [
                ("background-color", background.color),
                ("opacity", f"{opacity:g}" if opacity is not None else None),
            ]
        for prefix, spacing in (("padding", self.padding), ("margin", self.margins)):
            if spacing is not None:
                declared += [
                    (f"{prefix}-top", spacing.top),
                    (f"{prefix}-right", spacing.right),
                    (f"{prefix}-bottom", spacing.bottom),
                    (f"{prefix}-left", spacing.left),
                ]
        if (border := self.border) is not None:
            declared += [
                ("border-width", border.width),
                ("border-style", border.style),
                ("border-color", border.color),
                ("border-radius", border.radius),
            ]
        declared += list(self.custom_properties.items())
        return [(name, value) for name, value in declared if value is not None]

    def declarations(self) -> str:
        """Return the properties as an inline ``style`` attribute value."""
        return "; ".join(f"{name}: {value}" for name, value in self.properties())

    @property
    def is_empty(self) -> bool:
        return not self.properties()


__all__ = [
    "BackgroundProperties",
    "BorderProperties",
    "FontProperties",
    "Spacing",
    "TypographyStyle",
]
