"""Typography cascade: style lookup, merging and stylesheet generation."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from folio._constants import CONTENT_CLASS

from .values import ElementType, FontSize, HeadingLevel, TextSize

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .style import TypographyStyle

DEFAULT_FONT_FAMILY = "system-ui, -apple-system, sans-serif"
CONTENT_SELECTOR = f".{CONTENT_CLASS}"

StyleKey = HeadingLevel | ElementType | str
_KeyT = typ.TypeVar("_KeyT")


def _merge_styles(
    left: cabc.Mapping[_KeyT, TypographyStyle],
    right: cabc.Mapping[_KeyT, TypographyStyle],
) -> dict[_KeyT, TypographyStyle]:
    merged = dict(left)
    for key, style in right.items():
        merged[key] = merged[key].merging(style) if key in merged else style
    return merged


def _format_rule(selector: str, properties: cabc.Sequence[tuple[str, str]]) -> str:
    body = "\n".join(f"  {name}: {value};" for name, value in properties)
    return f"{selector} {{\n{body}\n}}"


def _scoped_selector(selector: str) -> str:
    """Scope a custom selector under the content wrapper, keeping it verbatim."""
    return f"{CONTENT_SELECTOR} {selector.strip()}"


@dc.dataclass(frozen=True, slots=True)
class TypographyConfiguration:
    """Styles keyed by heading level, element kind and custom selector.

    Lookups are exact: a style configured for ``H2`` says nothing about
    ``H3``. ``enable_responsive_typography`` is carried through merges for
    consumers; stylesheet generation does not read it.

    Examples
    --------
    >>> from folio.typography import FontProperties, TypographyStyle, Weight
    >>> config = TypographyConfiguration().with_heading(
    ...     HeadingLevel.H1, TypographyStyle(font=FontProperties(weight=Weight.BOLD))
    ... )
    >>> print(config.generate_css())
    .markdown-content {
      font-family: system-ui, -apple-system, sans-serif;
      font-size: 1rem;
    }
    <BLANKLINE>
    .markdown-content h1, .markdown-heading-1 {
      font-weight: 700;
    }
    """

    headings: cabc.Mapping[HeadingLevel, TypographyStyle] = dc.field(
        default_factory=dict
    )
    elements: cabc.Mapping[ElementType, TypographyStyle] = dc.field(
        default_factory=dict
    )
    selectors: cabc.Mapping[str, TypographyStyle] = dc.field(default_factory=dict)
    default_font_family: str = DEFAULT_FONT_FAMILY
    default_font_size: FontSize = TextSize.BODY
    enable_responsive_typography: bool = True

    @classmethod
    def preset(cls, name: str) -> TypographyConfiguration:
        """Return the named preset configuration.

        Raises
        ------
        KeyError
            If no preset is registered under ``name``.
        """
        from .presets import TYPOGRAPHY_PRESETS

        if name not in TYPOGRAPHY_PRESETS:
            msg = f"Unknown typography preset '{name}'"
            raise KeyError(msg)
        return TYPOGRAPHY_PRESETS[name]()

    def style_for(self, key: StyleKey) -> TypographyStyle | None:
        """Return the style configured for exactly ``key``, if any."""
        match key:
            case HeadingLevel():
                return self.headings.get(key)
            case ElementType():
                return self.elements.get(key)
            case str():
                return self.selectors.get(key)
            case _:
                msg = f"Unsupported style key: {key!r}"
                raise TypeError(msg)

    def merging(self, other: TypographyConfiguration) -> TypographyConfiguration:
        """Return this configuration overlaid with ``other``.

        Styles present on both sides are merged with
        :meth:`TypographyStyle.merging`; keys present on one side are carried
        over. The default font family comes from ``other`` unless it is
        empty; the default size and responsive flag always come from
        ``other``.
        """
        return TypographyConfiguration(
            headings=_merge_styles(self.headings, other.headings),
            elements=_merge_styles(self.elements, other.elements),
            selectors=_merge_styles(self.selectors, other.selectors),
            default_font_family=other.default_font_family or self.default_font_family,
            default_font_size=other.default_font_size,
            enable_responsive_typography=other.enable_responsive_typography,
        )

    def with_heading(
        self, level: HeadingLevel, style: TypographyStyle
    ) -> TypographyConfiguration:
        return dc.replace(self, headings={**self.headings, level: style})

    def with_element(
        self, kind: ElementType, style: TypographyStyle
    ) -> TypographyConfiguration:
        return dc.replace(self, elements={**self.elements, kind: style})

    def with_selector(self, selector: str, style: TypographyStyle) -> TypographyConfiguration:
        return dc.replace(self, selectors={**self.selectors, selector: style})

    def generate_css(self) -> str:
        """Serialize the configuration into a stylesheet.

        The base rule comes first, then headings by ascending level, element
        kinds in declaration order and custom selectors in insertion order.
        Styles that set no properties produce no rule.
        """
        rules = [
            _format_rule(
                CONTENT_SELECTOR,
                [
                    ("font-family", self.default_font_family),
                    ("font-size", self.default_font_size.css_value),
                ],
            )
        ]
        for level in sorted(self.headings):
            selector = f"{CONTENT_SELECTOR} {level.tag_name}, .{level.css_class}"
            rules.append(self._rule(selector, self.headings[level]))
        for kind in ElementType:
            if kind in self.elements:
                selector = f"{CONTENT_SELECTOR} {kind.css_selector}, .{kind.css_class}"
                rules.append(self._rule(selector, self.elements[kind]))
        for selector, style in self.selectors.items():
            rules.append(self._rule(_scoped_selector(selector), style))
        return "\n\n".join(rule for rule in rules if rule)

    @staticmethod
    def _rule(selector: str, style: TypographyStyle) -> str:
        properties = style.properties()
        return _format_rule(selector, properties) if properties else ""


__all__ = ["DEFAULT_FONT_FAMILY", "StyleKey", "TypographyConfiguration"]
