"""Utility helpers shared by the folio configuration loader."""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ

from folio.render import (
    CodeBlockOptions,
    MathSupport,
    RenderingOptions,
    SyntaxHighlighting,
    TableOfContents,
)
from folio.typography import (
    Alignment,
    BackgroundProperties,
    BorderProperties,
    CustomTextSize,
    Decoration,
    ElementType,
    FontProperties,
    FontSize,
    HeadingLevel,
    Leading,
    Spacing,
    TextSize,
    Tracking,
    TypographyConfiguration,
    TypographyStyle,
    Weight,
)

from .models import DEFAULT_TYPOGRAPHY_PRESET, RenderConfigError

_EnumT = typ.TypeVar("_EnumT", bound=enum.Enum)

DEFAULT_RENDERING_PRESET = "basic"
SPACING_SIDES = ("top", "right", "bottom", "left")


def _normalize_classes(value: str | list[object] | None) -> list[str]:
    """Normalize class definitions into a list of non-empty strings."""
    if isinstance(value, str):
        return [segment for segment in value.split() if segment]
    if isinstance(value, list):
        normalized: list[str] = []
        for segment in value:
            text = str(segment).strip()
            if text:
                normalized.append(text)
        return normalized
    return []


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _mapping(value: object, *, context: str) -> typ.Mapping[str, typ.Any]:
    """Return ``value`` as a mapping, treating ``None`` as empty."""
    match value:
        case None:
            return {}
        case dict():
            return value
        case _:
            msg = f"'{context}' must be a mapping."
            raise RenderConfigError(msg)


def _enum_member(enum_type: type[_EnumT], value: object, *, context: str) -> _EnumT:
    """Look up ``value`` by member name (case-insensitive) or by raw value."""
    text = str(value).strip()
    try:
        return enum_type[text.upper().replace("-", "_")]
    except KeyError:
        pass
    try:
        return enum_type(text)
    except ValueError:
        msg = f"Unknown {context} '{text}'."
        raise RenderConfigError(msg) from None


def _require_bool(value: object, *, context: str) -> bool:
    """Return ``value`` when it is a YAML boolean."""
    if not isinstance(value, bool):
        msg = f"'{context}' must be true or false, got '{value}'."
        raise RenderConfigError(msg)
    return value


def _optional_enum(
    enum_type: type[_EnumT], value: object | None, *, context: str
) -> _EnumT | None:
    if value is None:
        return None
    return _enum_member(enum_type, value, context=context)


def _parse_font_size(value: object) -> FontSize:
    """Parse a named size or a number of ``rem``."""
    if isinstance(value, bool):
        msg = f"Invalid font size '{value}'."
        raise RenderConfigError(msg)
    if isinstance(value, int | float):
        return CustomTextSize(float(value))
    return _enum_member(TextSize, value, context="font size")


def _parse_heading_level(value: object) -> HeadingLevel:
    text = str(value).strip().lower().removeprefix("h")
    try:
        return HeadingLevel(int(text))
    except ValueError:
        msg = f"Unknown heading level '{value}'."
        raise RenderConfigError(msg) from None


def _build_spacing(value: object, *, context: str) -> Spacing | None:
    """Build spacing from a single length or a per-side mapping.

    Mappings may use ``vertical`` and ``horizontal`` shorthands; explicit
    sides take precedence over them.
    """
    if value is None:
        return None
    if not isinstance(value, dict):
        return Spacing.all(str(value))
    vertical = _optional_str(value.get("vertical"))
    horizontal = _optional_str(value.get("horizontal"))
    fallbacks = {
        "top": vertical,
        "bottom": vertical,
        "left": horizontal,
        "right": horizontal,
    }
    unknown = set(value) - {*SPACING_SIDES, "vertical", "horizontal"}
    if unknown:
        msg = f"Unknown '{context}' keys: {', '.join(sorted(unknown))}."
        raise RenderConfigError(msg)
    return Spacing(
        **{
            side: _optional_str(value.get(side)) or fallbacks[side]
            for side in SPACING_SIDES
        }
    )


def _build_font(payload: typ.Mapping[str, typ.Any] | None) -> FontProperties | None:
    if payload is None:
        return None
    font = _mapping(payload, context="font")
    size = font.get("size")
    return FontProperties(
        family=_optional_str(font.get("family")),
        size=_parse_font_size(size) if size is not None else None,
        weight=_optional_enum(Weight, font.get("weight"), context="font weight"),
        alignment=_optional_enum(
            Alignment, font.get("alignment"), context="text alignment"
        ),
        color=_optional_str(font.get("color")),
        line_height=_optional_enum(
            Leading, font.get("line_height"), context="line height"
        ),
        letter_spacing=_optional_enum(
            Tracking, font.get("letter_spacing"), context="letter spacing"
        ),
        text_decoration=_optional_enum(
            Decoration, font.get("text_decoration"), context="text decoration"
        ),
        text_transform=_optional_str(font.get("text_transform")),
    )


def _build_style(payload: object, *, context: str) -> TypographyStyle:
    """Build a TypographyStyle from its YAML mapping."""
    raw = _mapping(payload, context=context)
    background = raw.get("background")
    border = raw.get("border")
    opacity = _mapping(background, context="background").get("opacity")
    return TypographyStyle(
        font=_build_font(raw.get("font")),
        background=(
            BackgroundProperties(
                color=_optional_str(background.get("color")),
                opacity=float(opacity) if opacity is not None else None,
            )
            if background is not None
            else None
        ),
        padding=_build_spacing(raw.get("padding"), context=f"{context}.padding"),
        margins=_build_spacing(raw.get("margins"), context=f"{context}.margins"),
        border=(
            BorderProperties(
                **{
                    key: _optional_str(_mapping(border, context="border").get(key))
                    for key in ("width", "style", "color", "radius")
                }
            )
            if border is not None
            else None
        ),
        css_classes=frozenset(_normalize_classes(raw.get("css_classes"))),
        custom_properties={
            str(key): str(value)
            for key, value in _mapping(
                raw.get("custom_properties"), context="custom_properties"
            ).items()
        },
    )


def _build_typography(payload: object) -> TypographyConfiguration:
    """Merge typography overrides onto the configured preset."""
    raw = _mapping(payload, context="typography")
    preset_name = str(raw.get("preset", DEFAULT_TYPOGRAPHY_PRESET))
    try:
        base = TypographyConfiguration.preset(preset_name)
    except KeyError:
        msg = f"Unknown typography preset '{preset_name}'."
        raise RenderConfigError(msg) from None

    size = raw.get("default_font_size")
    overrides = TypographyConfiguration(
        headings={
            _parse_heading_level(level): _build_style(style, context=f"h{level}")
            for level, style in _mapping(raw.get("headings"), context="headings").items()
        },
        elements={
            _enum_member(ElementType, kind, context="element"): _build_style(
                style, context=str(kind)
            )
            for kind, style in _mapping(raw.get("elements"), context="elements").items()
        },
        selectors={
            str(selector): _build_style(style, context=str(selector))
            for selector, style in _mapping(
                raw.get("selectors"), context="selectors"
            ).items()
        },
        default_font_family=_optional_str(raw.get("default_font_family")) or "",
        default_font_size=(
            _parse_font_size(size) if size is not None else base.default_font_size
        ),
        enable_responsive_typography=bool(
            raw.get("responsive", base.enable_responsive_typography)
        ),
    )
    return base.merging(overrides)


def _build_syntax_highlighting(value: object) -> SyntaxHighlighting:
    match value:
        case "all" | True:
            return SyntaxHighlighting.enabled_for_all()
        case "none" | False | None:
            return SyntaxHighlighting.disabled()
        case list():
            try:
                return SyntaxHighlighting.enabled(
                    str(language).strip().lower() for language in value
                )
            except ValueError as exc:
                msg = f"Unknown syntax highlighting language: {exc}"
                raise RenderConfigError(msg) from exc
        case _:
            msg = f"Invalid syntax_highlighting value '{value}'."
            raise RenderConfigError(msg)


def _build_table_of_contents(value: object) -> TableOfContents:
    match value:
        case False | None:
            return TableOfContents.disabled()
        case True:
            return TableOfContents.enabled()
        case dict():
            return TableOfContents.enabled(
                max_depth=int(value.get("max_depth", 6)),
                include_ids=_require_bool(
                    value.get("include_ids", True), context="table_of_contents.include_ids"
                ),
            )
        case _:
            msg = f"Invalid table_of_contents value '{value}'."
            raise RenderConfigError(msg)


def _build_code_blocks(
    base: CodeBlockOptions, payload: object
) -> CodeBlockOptions:
    overrides = dict(_mapping(payload, context="code_blocks"))
    known = {field.name for field in dc.fields(CodeBlockOptions)}
    unknown = set(overrides) - known
    if unknown:
        msg = f"Unknown code_blocks keys: {', '.join(sorted(unknown))}."
        raise RenderConfigError(msg)
    for key, value in overrides.items():
        expected = type(getattr(base, key))
        if type(value) is not expected:
            msg = (
                f"code_blocks.{key} must be a {expected.__name__}, got '{value}'."
            )
            raise RenderConfigError(msg)
    return dc.replace(base, **overrides)


def _build_rendering_options(payload: object) -> RenderingOptions | None:
    """Build rendering options from their YAML mapping; absent means plain."""
    if payload is None or payload is False:
        return None
    raw = _mapping({} if payload is True else payload, context="rendering")
    preset_name = str(raw.get("preset", DEFAULT_RENDERING_PRESET))
    try:
        options = RenderingOptions.preset(preset_name)
    except KeyError:
        msg = f"Unknown rendering preset '{preset_name}'."
        raise RenderConfigError(msg) from None

    if "syntax_highlighting" in raw:
        options = options.with_syntax_highlighting(
            _build_syntax_highlighting(raw["syntax_highlighting"])
        )
    if "table_of_contents" in raw:
        options = options.with_table_of_contents(
            _build_table_of_contents(raw["table_of_contents"])
        )
    if "code_blocks" in raw:
        options = options.with_code_blocks(
            _build_code_blocks(options.code_blocks, raw["code_blocks"])
        )
    if "math" in raw:
        options = options.with_math(
            MathSupport.enabled()
            if _require_bool(raw["math"], context="math")
            else MathSupport.disabled()
        )
    return options


__all__ = [
    "DEFAULT_RENDERING_PRESET",
    "DEFAULT_TYPOGRAPHY_PRESET",
    "_build_rendering_options",
    "_build_style",
    "_build_typography",
    "_normalize_classes",
    "_optional_str",
]
