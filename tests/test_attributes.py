"""Unit tests for attribute serialization and tag assembly.

These tests pin the byte-level output of ``folio.markup.attributes``: scalar,
boolean and enum attribute helpers, the ordered attribute list produced by
``build_attributes`` and the three tag shapes emitted by ``build_tag``.

Usage
-----
Run ``pytest tests/test_attributes.py -v``. No fixtures are required.
"""

from __future__ import annotations

import enum

import pytest

from folio.markup.attributes import (
    AriaRole,
    build_attributes,
    build_tag,
    enum_value,
    flag,
    scalar,
)


class _Size(enum.StrEnum):
    SMALL = "sm"


@pytest.mark.parametrize("value", [None, ""])
def test_scalar_omits_missing_values(value: str | None) -> None:
    """Missing or empty values should produce no attribute."""
    assert scalar("title", value) is None, "expected empty scalar to be dropped"


def test_scalar_quotes_value() -> None:
    """Present values are serialized as name="value"."""
    assert scalar("title", "Intro") == 'title="Intro"'


@pytest.mark.parametrize(
    ("enabled", "expected"), [(True, "disabled"), (False, None), (None, None)]
)
def test_flag_only_emits_for_true(enabled: bool | None, expected: str | None) -> None:
    """Boolean attributes appear bare, and only when enabled."""
    assert flag("disabled", enabled) == expected


def test_enum_value_uses_raw_value() -> None:
    """Enum attributes serialize their raw string value."""
    assert enum_value("data-size", _Size.SMALL) == 'data-size="sm"'
    assert enum_value("data-size", None) is None


def test_build_attributes_orders_fragments() -> None:
    """Attributes follow id, class, role, label, data, extras order."""
    attributes = build_attributes(
        id="main",
        classes=["a", "b"],
        role=AriaRole.NAVIGATION,
        label="Primary",
        data={"state": "open"},
        additional=["hidden"],
    )
    assert attributes == [
        'id="main"',
        'class="a b"',
        'role="navigation"',
        'aria-label="Primary"',
        'data-state="open"',
        "hidden",
    ], f"unexpected attribute order: {attributes!r}"


def test_build_attributes_skips_empty_inputs() -> None:
    """Unset inputs contribute nothing."""
    assert build_attributes(classes=[], data={}) == []


def test_build_tag_shapes() -> None:
    """Each tag shape has exactly one textual form."""
    assert build_tag("p", [], "Hi") == "<p>Hi</p>"
    assert build_tag("p", ['class="x"'], "Hi") == '<p class="x">Hi</p>'
    assert build_tag("br", [], self_closing=True) == "<br />"
    assert build_tag("img", ['src="a.png"'], self_closing=True) == '<img src="a.png" />'
    assert build_tag("meta", ['charset="utf-8"'], no_closing_tag=True) == (
        '<meta charset="utf-8">'
    )


def test_self_closing_ignores_content() -> None:
    """Content is dropped for self-closing tags."""
    assert build_tag("hr", [], "ignored", self_closing=True) == "<hr />"
