"""Unit tests for content nodes and the composition DSL.

The tests cover the combinators in ``folio.markup.builder`` (ordering,
flattening and empty-input behaviour), the ``markup_builder`` decorator that
lets generator functions use ordinary control flow, the primitive nodes in
``folio.markup.nodes`` and the generic ``Element`` node.

Usage
-----
Run ``pytest tests/test_builder.py -v``. No fixtures are required.
"""

from __future__ import annotations

import typing as typ

import pytest

from folio.errors import MarkupCycleError
from folio.markup import (
    AnyMarkup,
    Composite,
    Element,
    MarkupString,
    compose,
    either_first,
    either_second,
    flatten_many,
    is_leaf,
    markup_builder,
    optional,
    render_all,
    resolve,
    sequence,
    single,
)


def _leaf(text: str) -> MarkupString:
    return MarkupString(text)


def test_sequence_preserves_order_and_duplicates() -> None:
    """Sequence concatenates in argument order without deduplication."""
    a, b = _leaf("a"), _leaf("b")
    assert sequence([a, b], [a]) == [a, b, a]


def test_combinators_accept_empty_input() -> None:
    """Every combinator yields an empty list for empty input."""
    assert sequence() == []
    assert optional(None) == []
    assert optional([]) == []
    assert either_first([]) == []
    assert either_second([]) == []
    assert flatten_many([]) == []


def test_single_and_branches_pass_through() -> None:
    """Single wraps one node; either arms return their branch unchanged."""
    node = _leaf("x")
    assert single(node) == [node]
    assert either_first([node]) == [node]
    assert either_second([node, node]) == [node, node]


def test_flatten_many_keeps_iteration_order() -> None:
    """Loop bodies are flattened in iteration order."""
    nodes = [[_leaf(str(index)), _leaf("|")] for index in range(3)]
    assert render_all(flatten_many(nodes)) == "0|1|2|"


def test_sequence_is_associative() -> None:
    """Grouping of nested sequences does not change the result."""
    a, b, c = _leaf("a"), _leaf("b"), _leaf("c")
    left = sequence(sequence([a], [b]), [c])
    right = sequence([a], sequence([b], [c]))
    assert left == right


def test_compose_normalizes_author_input() -> None:
    """Strings become leaves, None is skipped and nesting is flattened."""
    composed = compose("a", None, ["b", ("c", None)], _leaf("d"))
    assert render_all(composed) == "abcd"
    assert all(isinstance(node, MarkupString) for node in composed)


def test_compose_rejects_unknown_objects() -> None:
    """Objects that are not markup, strings or iterables are rejected."""
    with pytest.raises(TypeError, match="int"):
        compose(42)


def test_markup_builder_supports_control_flow() -> None:
    """Generator bodies with if/else and loops produce one ordered sequence."""

    @markup_builder
    def listing(items: list[str], *, ordered: bool) -> typ.Iterator[object]:
        yield "<p>Items</p>"
        if ordered:
            yield "<ol>"
        else:
            yield "<ul>"
        for item in items:
            yield Element("li", item)
        yield "</ol>" if ordered else "</ul>"

    assert render_all(listing(["x", "y"], ordered=False)) == (
        "<p>Items</p><ul><li>x</li><li>y</li></ul>"
    )
    assert render_all(listing([], ordered=True)) == "<p>Items</p><ol></ol>"


def test_element_renders_attributes_and_children() -> None:
    """Element combines build_attributes, build_tag and composed children."""
    card = Element(
        "section",
        Element("h2", "Title"),
        "Body",
        id="card",
        classes=["card"],
        data={"kind": "note"},
    )
    assert card.render() == (
        '<section id="card" class="card" data-kind="note"><h2>Title</h2>Body</section>'
    )


def test_element_self_closing() -> None:
    """Void elements render with the self-closing shape."""
    assert Element("br", self_closing=True).render() == "<br />"


def test_any_markup_boxes_heterogeneous_nodes() -> None:
    """AnyMarkup keeps the wrapped node and renders through it."""
    inner = Element("em", "hi")
    boxed = AnyMarkup(inner)
    assert boxed.wrapped is inner
    assert render_all([boxed, AnyMarkup(_leaf("!"))]) == "<em>hi</em>!"


class _Greeting(Composite):
    def __init__(self, name: str) -> None:
        self.name = name

    @property
    def body(self) -> MarkupString:
        return MarkupString(f"<p>Hello {self.name}</p>")


class _Ping(Composite):
    def __init__(self) -> None:
        self.partner: _Ping | None = None

    @property
    def body(self) -> _Ping:
        assert self.partner is not None
        return self.partner


def test_resolve_follows_body_to_leaf() -> None:
    """Composite nodes resolve to the leaf their body chain ends in."""
    greeting = _Greeting("Ada")
    assert not is_leaf(greeting)
    leaf = resolve(greeting)
    assert isinstance(leaf, MarkupString)
    assert greeting.render() == "<p>Hello Ada</p>"


def test_resolve_detects_cycles() -> None:
    """A body chain that revisits a node raises instead of looping forever."""
    first, second = _Ping(), _Ping()
    first.partner, second.partner = second, first
    with pytest.raises(MarkupCycleError):
        resolve(first)
