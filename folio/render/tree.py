"""Parse Markdown into the syntax tree the renderers walk.

Parsing is delegated to :mod:`markdown_it` using the CommonMark preset with
GitHub-style tables and raw HTML enabled. The renderers only depend on the
:class:`~markdown_it.tree.SyntaxTreeNode` interface (``type``, ``children``,
``attrs``, ``content``, ``info`` and ``tag``).
"""

from __future__ import annotations

import functools

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

TEXT_NODE_TYPES = frozenset({"text", "code_inline"})
BREAK_NODE_TYPES = frozenset({"softbreak", "hardbreak"})


@functools.cache
def _parser() -> MarkdownIt:
    return MarkdownIt("commonmark", {"html": True}).enable("table")


def parse_markdown(text: str) -> SyntaxTreeNode:
    """Return the root node of the syntax tree for ``text``."""
    return SyntaxTreeNode(_parser().parse(text))


def plain_text(node: SyntaxTreeNode) -> str:
    """Concatenate the text content below ``node`` without any markup.

    Examples
    --------
    >>> root = parse_markdown("# Hello *world*")
    >>> plain_text(root.children[0])
    'Hello world'
    """
    if node.type in TEXT_NODE_TYPES:
        return node.content
    if node.type in BREAK_NODE_TYPES:
        return " "
    return "".join(plain_text(child) for child in node.children)


__all__ = ["SyntaxTreeNode", "parse_markdown", "plain_text"]
