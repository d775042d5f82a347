"""Value types produced while rendering a single document."""

from __future__ import annotations

import dataclasses as dc
import re

SLUG_SEPARATOR_PATTERN = re.compile(r" ")
SLUG_INVALID_PATTERN = re.compile(r"[^a-z0-9-]")


@dc.dataclass(frozen=True, slots=True)
class TableOfContentsEntry:
    """Heading recorded for the table of contents.

    Attributes
    ----------
    level : int
        Heading level, 1 to 6.
    text : str
        Plain-text heading content.
    id : str
        Generated element id the entry links to.
    children : tuple[TableOfContentsEntry, ...]
        Nested entries; the renderer always produces a flat list.
    """

    level: int
    text: str
    id: str
    children: tuple[TableOfContentsEntry, ...] = ()


@dc.dataclass(slots=True)
class RenderState:
    """Mutable state owned by exactly one ``render`` call."""

    id_counter: int = 0
    inside_table_head: bool = False
    table_of_contents: list[TableOfContentsEntry] = dc.field(default_factory=list)

    def next_heading_id(self, text: str) -> str:
        """Return a document-unique id derived from ``text``.

        Spaces become hyphens and anything outside ``[a-z0-9-]`` is dropped;
        the per-render counter suffix keeps ids of repeated headings distinct.

        Examples
        --------
        >>> state = RenderState()
        >>> state.next_heading_id("Getting Started!"), state.next_heading_id("Getting Started!")
        ('getting-started-1', 'getting-started-2')
        """
        base = SLUG_SEPARATOR_PATTERN.sub("-", text.lower())
        base = SLUG_INVALID_PATTERN.sub("", base)
        self.id_counter += 1
        return f"{base}-{self.id_counter}"


__all__ = ["RenderState", "TableOfContentsEntry"]
