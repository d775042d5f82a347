"""Inject extra CSS classes into already-rendered markup.

This is a shallow textual patch rather than a parse: only the first tag in a
fragment is considered. Markup whose first tag is not the element the caller
had in mind (a leading comment, say) gets the classes on that first tag.
"""

from __future__ import annotations

import re
import typing as typ

from .nodes import Markup, MarkupString

if typ.TYPE_CHECKING:
    import collections.abc as cabc

FIRST_TAG_PATTERN = re.compile(r"<[^>]+>")
CLASS_ATTRIBUTE_PATTERN = re.compile(r' class="([^"]*)"')
TAG_END_PATTERN = re.compile(r"\s*/?>$")


def inject_classes(fragment: str, classes: cabc.Sequence[str]) -> str:
    """Merge ``classes`` into the first tag of ``fragment``.

    Parameters
    ----------
    fragment : str
        Serialized markup.
    classes : Sequence[str]
        Class names to add, emitted after any existing classes in call order.

    Returns
    -------
    str
        The fragment with its first tag's ``class`` attribute extended, a
        ``class`` attribute added to that tag, or the whole fragment wrapped
        in a ``<span>`` when it contains no tag.
    """
    if not classes:
        return fragment
    joined = " ".join(classes)
    tag_match = FIRST_TAG_PATTERN.search(fragment)
    if tag_match is None:
        return f'<span class="{joined}">{fragment}</span>'

    tag = tag_match.group(0)
    class_match = CLASS_ATTRIBUTE_PATTERN.search(tag)
    if class_match is not None:
        existing = class_match.group(1)
        merged = f"{existing} {joined}" if existing else joined
        start, end = class_match.span(1)
        patched = f"{tag[:start]}{merged}{tag[end:]}"
    else:
        # Keep the "/>" of self-closing tags after the new attribute.
        end_match = TAG_END_PATTERN.search(tag)
        cut = end_match.start() if end_match else len(tag) - 1
        patched = f'{tag[:cut]} class="{joined}"{tag[cut:]}'

    start, end = tag_match.span()
    return f"{fragment[:start]}{patched}{fragment[end:]}"


class ClassedMarkup:
    """Node that renders ``content`` and injects ``classes`` into the result."""

    __slots__ = ("classes", "content")

    def __init__(self, content: Markup, classes: cabc.Sequence[str]) -> None:
        self.content = content
        self.classes = list(classes)

    @property
    def body(self) -> MarkupString:
        return MarkupString(inject_classes(self.content.render(), self.classes))

    def render(self) -> str:
        return self.body.render()


def add_classes(node: Markup, classes: cabc.Sequence[str]) -> ClassedMarkup:
    """Return ``node`` wrapped so that rendering adds ``classes``."""
    return ClassedMarkup(node, classes)


__all__ = ["ClassedMarkup", "add_classes", "inject_classes"]
