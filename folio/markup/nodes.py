"""Content node protocol and the primitive nodes every document is built from.

A node exposes ``body`` (the node it resolves to) and ``render()`` (its final
markup). Composite nodes describe themselves through ``body``; leaves return
themselves, which is what terminates :func:`resolve`.
"""

from __future__ import annotations

import typing as typ

from folio.errors import MarkupCycleError

# Composite bodies may build fresh objects on every access, so identity
# tracking alone cannot catch every cycle.
MAX_RESOLVE_DEPTH = 1000


@typ.runtime_checkable
class Markup(typ.Protocol):
    """Anything that can resolve to further markup and render to text."""

    @property
    def body(self) -> Markup:
        """Return the node this one resolves to (itself for leaves)."""
        ...

    def render(self) -> str:
        """Return the serialized markup."""
        ...


class MarkupString:
    """Raw markup leaf; rendered verbatim."""

    __slots__ = ("content",)

    def __init__(self, content: str) -> None:
        self.content = content

    @property
    def body(self) -> MarkupString:
        return self

    def render(self) -> str:
        return self.content

    def __repr__(self) -> str:
        return f"MarkupString({self.content!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MarkupString):
            return NotImplemented
        return self.content == other.content

    def __hash__(self) -> int:
        return hash(self.content)


class AnyMarkup:
    """Type-erased wrapper pairing a node with a captured render callable.

    Use it when nodes of unrelated kinds must share one sequence and only
    their rendered output matters.
    """

    __slots__ = ("_render", "wrapped")

    def __init__(self, markup: Markup) -> None:
        self.wrapped = markup
        self._render: typ.Callable[[], str] = markup.render

    @property
    def body(self) -> AnyMarkup:
        return self

    def render(self) -> str:
        return self._render()

    def __repr__(self) -> str:
        return f"AnyMarkup({self.wrapped!r})"


class Composite:
    """Mixin for author components that only define ``body``."""

    @property
    def body(self) -> Markup:
        raise NotImplementedError

    def render(self) -> str:
        return self.body.render()


def is_leaf(node: Markup) -> bool:
    """Return whether ``node`` resolves to itself."""
    return node.body is node


def resolve(node: Markup) -> Markup:
    """Follow ``body`` links until a leaf node is reached.

    Raises
    ------
    MarkupCycleError
        If a non-leaf node is visited twice or the chain exceeds
        ``MAX_RESOLVE_DEPTH`` links.
    """
    seen: set[int] = set()
    current = node
    while not is_leaf(current):
        marker = id(current)
        if marker in seen or len(seen) >= MAX_RESOLVE_DEPTH:
            msg = f"Markup body chain of {type(node).__name__} does not terminate"
            raise MarkupCycleError(msg)
        seen.add(marker)
        current = current.body
    return current


__all__ = [
    "AnyMarkup",
    "Composite",
    "MAX_RESOLVE_DEPTH",
    "Markup",
    "MarkupString",
    "is_leaf",
    "resolve",
]
