"""Generic element node used to compose arbitrary tags."""

from __future__ import annotations

import typing as typ

from .attributes import AriaRole, build_attributes, build_tag
from .builder import Composable, ComposedSequence, compose, render_all
from .nodes import MarkupString

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class Element:
    """A tag with attributes and composed children.

    Parameters
    ----------
    tag : str
        Element name, e.g. ``"section"``.
    *children : Composable
        Child nodes, strings, ``None`` or nested iterables; normalized with
        :func:`~folio.markup.builder.compose`.
    id, classes, role, label, data
        Common attributes forwarded to
        :func:`~folio.markup.attributes.build_attributes`.
    attributes : Iterable[str]
        Extra serialized attribute fragments appended last.
    self_closing, no_closing_tag : bool
        Select the tag shape; see :func:`~folio.markup.attributes.build_tag`.

    Examples
    --------
    >>> Element("p", "Hi", classes=["lead"]).render()
    '<p class="lead">Hi</p>'
    """

    def __init__(
        self,
        tag: str,
        *children: Composable,
        id: str | None = None,  # noqa: A002
        classes: cabc.Sequence[str] | None = None,
        role: AriaRole | None = None,
        label: str | None = None,
        data: cabc.Mapping[str, str] | None = None,
        attributes: cabc.Iterable[str] = (),
        self_closing: bool = False,
        no_closing_tag: bool = False,
    ) -> None:
        self.tag = tag
        self.children: ComposedSequence = compose(*children)
        self.attributes = build_attributes(
            id=id,
            classes=classes,
            role=role,
            label=label,
            data=data,
            additional=attributes,
        )
        self.self_closing = self_closing
        self.no_closing_tag = no_closing_tag

    @property
    def body(self) -> MarkupString:
        return MarkupString(
            build_tag(
                self.tag,
                self.attributes,
                render_all(self.children),
                self_closing=self.self_closing,
                no_closing_tag=self.no_closing_tag,
            )
        )

    def render(self) -> str:
        return self.body.render()

    def __repr__(self) -> str:
        return f"Element({self.tag!r}, children={len(self.children)})"


__all__ = ["Element"]
