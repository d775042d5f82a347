"""Combinators that turn declarative author code into an ordered node list.

The combinators mirror the statement forms an author writes: a block of
statements (:func:`sequence`), a single expression (:func:`single`), an ``if``
without ``else`` (:func:`optional`), both arms of an ``if``/``else``
(:func:`either_first`, :func:`either_second`) and a ``for`` loop body
(:func:`flatten_many`). None of them reorder, deduplicate or drop nodes, and
every one accepts empty input.

Most callers use :func:`markup_builder`, which lets a generator function use
plain Python control flow:

>>> from folio.markup.builder import markup_builder, render_all
>>> @markup_builder
... def greeting(names):
...     yield "<p>Hello</p>"
...     for name in names:
...         yield f"<span>{name}</span>"
...     if not names:
...         yield "<em>nobody</em>"
>>> render_all(greeting(["Ada", "Lin"]))
'<p>Hello</p><span>Ada</span><span>Lin</span>'
"""

from __future__ import annotations

import collections.abc as cabc
import functools
import itertools
import typing as typ

from .nodes import Markup, MarkupString

P = typ.ParamSpec("P")

ComposedSequence = list[Markup]
Composable = Markup | str | cabc.Iterable[typ.Any] | None


def sequence(*components: cabc.Sequence[Markup]) -> ComposedSequence:
    """Concatenate component sequences in argument order."""
    return list(itertools.chain.from_iterable(components))


def single(expression: Markup) -> ComposedSequence:
    """Wrap one node in a sequence."""
    return [expression]


def optional(component: cabc.Sequence[Markup] | None) -> ComposedSequence:
    """Return the branch of an ``if`` without ``else``, or nothing."""
    return list(component) if component is not None else []


def either_first(component: cabc.Sequence[Markup]) -> ComposedSequence:
    """Return the taken ``if`` branch unchanged."""
    return list(component)


def either_second(component: cabc.Sequence[Markup]) -> ComposedSequence:
    """Return the taken ``else`` branch unchanged."""
    return list(component)


def flatten_many(
    components: cabc.Iterable[cabc.Sequence[Markup]],
) -> ComposedSequence:
    """Flatten per-iteration sequences from a loop body in iteration order."""
    return [node for component in components for node in component]


def compose(*items: Composable) -> ComposedSequence:
    """Normalize loosely typed author input into one composed sequence.

    Strings become :class:`MarkupString` leaves, ``None`` is skipped and any
    other iterable is flattened recursively in order.

    Raises
    ------
    TypeError
        If an item is neither markup, a string, ``None`` nor an iterable.
    """
    return sequence(*(_normalize(item) for item in items))


def _normalize(item: Composable) -> ComposedSequence:
    match item:
        case None:
            return optional(None)
        case str():
            return single(MarkupString(item))
        case Markup():
            return single(item)
        case cabc.Iterable():
            return flatten_many(_normalize(child) for child in item)
        case _:
            msg = f"Cannot compose object of type {type(item).__name__}"
            raise TypeError(msg)


def markup_builder(
    func: cabc.Callable[P, cabc.Iterable[Composable]],
) -> cabc.Callable[P, ComposedSequence]:
    """Collect everything a generator function yields into a sequence."""

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> ComposedSequence:
        return compose(func(*args, **kwargs))

    return wrapper


def render_all(nodes: cabc.Iterable[Markup]) -> str:
    """Render nodes in order and concatenate the results."""
    return "".join(node.render() for node in nodes)


__all__ = [
    "Composable",
    "ComposedSequence",
    "compose",
    "either_first",
    "either_second",
    "flatten_many",
    "markup_builder",
    "optional",
    "render_all",
    "sequence",
    "single",
]
