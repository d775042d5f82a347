"""Tests for loading ``folio.yaml`` rendering configuration.

The loader resolves rendering and typography presets, layers the YAML
overrides on top and rejects unknown names with ``RenderConfigError``. Files
are written to ``tmp_path`` so every test runs against real YAML parsing.

Usage
-----
Run ``pytest tests/test_config.py -v``.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from ruamel.yaml.error import YAMLError

from folio.config import (
    RenderConfig,
    RenderConfigError,
    build_render_config,
    load_render_config,
)
from folio.render import RenderingOptions, SupportedLanguage
from folio.typography import (
    CustomTextSize,
    ElementType,
    HeadingLevel,
    Spacing,
    TextSize,
    TypographyConfiguration,
    Weight,
)


def _write_config(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "folio.yaml"
    path.write_text(body.strip() + "\n", encoding="utf-8")
    return path


def test_full_configuration(tmp_path: Path) -> None:
    path = _write_config(
        tmp_path,
        """
include_stylesheet: true
pygments_style: friendly
rendering:
  preset: documentation
  syntax_highlighting: [Python, rust]
  table_of_contents:
    max_depth: 2
  code_blocks:
    run_button: true
  math: false
typography:
  preset: article
  default_font_size: 1.125
  headings:
    h2:
      font:
        weight: black
        alignment: center
      css_classes: section-title accent
  elements:
    blockquote:
      padding: 2rem
    inline-code:
      margins:
        vertical: 0.5rem
        left: 1px
  selectors:
    .callout:
      background:
        color: "#fffbe6"
        opacity: 0.9
      custom_properties:
        border-left: 4px solid gold
""",
    )
    config = load_render_config(path)

    assert config.include_stylesheet is True
    assert config.pygments_style == "friendly"

    rendering = config.rendering
    assert rendering is not None
    assert rendering.syntax_highlighting.languages == {
        SupportedLanguage.PYTHON,
        SupportedLanguage.RUST,
    }
    assert rendering.table_of_contents.max_depth == 2
    assert rendering.code_blocks.run_button is True
    assert rendering.code_blocks.wrap_lines is True, "preset values must survive"
    assert rendering.math.is_enabled is False

    typography = config.typography
    assert typography.default_font_family == "Georgia, 'Times New Roman', serif"
    assert typography.default_font_size == CustomTextSize(1.125)
    h2 = typography.style_for(HeadingLevel.H2)
    assert h2 is not None
    assert h2.font.weight is Weight.BLACK
    assert h2.font.size is TextSize.LARGE, "preset size must survive the merge"
    assert h2.css_classes == {"section-title", "accent"}
    quote = typography.style_for(ElementType.BLOCKQUOTE)
    assert quote is not None
    assert quote.padding == Spacing.all("2rem")
    inline = typography.style_for(ElementType.INLINE_CODE)
    assert inline is not None
    assert inline.margins == Spacing(top="0.5rem", bottom="0.5rem", left="1px")
    callout = typography.style_for(".callout")
    assert callout is not None
    assert callout.background.opacity == pytest.approx(0.9)
    assert dict(callout.custom_properties) == {"border-left": "4px solid gold"}


def test_empty_file_uses_defaults(tmp_path: Path) -> None:
    config = load_render_config(_write_config(tmp_path, ""))
    assert config.rendering is None
    assert config.typography == TypographyConfiguration.preset("default")
    assert config.include_stylesheet is False
    assert config.pygments_style == "monokai"


def test_rendering_true_selects_basic_preset() -> None:
    config = build_render_config({"rendering": True})
    assert config.rendering == RenderingOptions.basic()


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("all", True),
        (True, True),
        ("none", False),
        (False, False),
    ],
)
def test_syntax_highlighting_switches(value: object, expected: bool) -> None:  # noqa: FBT001
    config = build_render_config(
        {"rendering": {"preset": "minimal", "syntax_highlighting": value}}
    )
    assert config.rendering is not None
    assert config.rendering.syntax_highlighting.is_enabled is expected


@pytest.mark.parametrize(
    ("raw", "message"),
    [
        ({"rendering": {"preset": "fancy"}}, "Unknown rendering preset"),
        ({"typography": {"preset": "comic"}}, "Unknown typography preset"),
        ({"rendering": {"syntax_highlighting": ["cobol"]}}, "cobol"),
        ({"rendering": {"syntax_highlighting": 3}}, "syntax_highlighting"),
        ({"rendering": {"table_of_contents": "yes"}}, "table_of_contents"),
        ({"rendering": {"code_blocks": {"sparkles": True}}}, "sparkles"),
        ({"typography": {"headings": {"h9": {}}}}, "heading level"),
        ({"typography": {"elements": {"marquee": {}}}}, "Unknown element"),
        (
            {"typography": {"headings": {"h1": {"font": {"weight": "chunky"}}}}},
            "font weight",
        ),
        ({"typography": {"elements": {"p": {"padding": {"diagonal": "1px"}}}}}, "diagonal"),
        ({"typography": {"headings": []}}, "must be a mapping"),
    ],
)
def test_invalid_values_raise(raw: dict[str, object], message: str) -> None:
    with pytest.raises(RenderConfigError, match=message):
        build_render_config(raw)


def test_elements_accept_tag_values() -> None:
    config = build_render_config({"typography": {"elements": {"p": {"css_classes": ["x"]}}}})
    paragraph = config.typography.style_for(ElementType.PARAGRAPH)
    assert paragraph is not None
    assert paragraph.css_classes == {"x"}


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="not found"):
        load_render_config(tmp_path / "missing.yaml")


def test_non_mapping_document_raises(tmp_path: Path) -> None:
    with pytest.raises(TypeError, match="mapping"):
        load_render_config(_write_config(tmp_path, "- a\n- b"))


def test_invalid_yaml_raises(tmp_path: Path) -> None:
    with pytest.raises(YAMLError):
        load_render_config(_write_config(tmp_path, "rendering: [unclosed"))


def test_build_pipeline_uses_configuration() -> None:
    config = RenderConfig(
        rendering=RenderingOptions.enhanced(),
        typography=TypographyConfiguration.preset("blog"),
        include_stylesheet=True,
        pygments_style="friendly",
    )
    pipeline = config.build_pipeline()
    assert pipeline.highlighter.pygments_style == "friendly"
    document = pipeline.parse("# Title")
    assert 'id="title-1"' in document.body_markup
    assert document.stylesheet is not None
    assert "Segoe UI" in document.stylesheet


def test_default_config_uses_default_typography_preset() -> None:
    """A bare RenderConfig styles documents like an empty YAML file."""
    assert RenderConfig().typography == build_render_config({}).typography
    css = RenderConfig().build_pipeline().generate_css()
    assert ".markdown-heading-1" in css


@pytest.mark.parametrize(
    ("raw", "message"),
    [
        ({"code_blocks": {"copy_button": "no"}}, "code_blocks.copy_button must be a bool"),
        ({"code_blocks": {"copy_button_text": 5}}, "code_blocks.copy_button_text must be a str"),
        ({"table_of_contents": {"include_ids": "yes"}}, "include_ids"),
        ({"math": "off"}, "'math' must be true or false"),
    ],
)
def test_switches_reject_non_boolean_values(
    raw: dict[str, object], message: str
) -> None:
    with pytest.raises(RenderConfigError, match=message):
        build_render_config({"rendering": raw})


def test_code_block_switches_accept_booleans() -> None:
    config = build_render_config(
        {"rendering": {"code_blocks": {"copy_button": False, "run_button_text": "Go"}}}
    )
    assert config.rendering is not None
    assert config.rendering.code_blocks.copy_button is False
    assert config.rendering.code_blocks.run_button_text == "Go"
