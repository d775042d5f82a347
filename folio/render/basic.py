"""Render a Markdown syntax tree into plain HTML.

:class:`HtmlRenderer` walks a :class:`~markdown_it.tree.SyntaxTreeNode` and
returns one string per node, so each call owns its traversal state and one
renderer instance can be shared between threads. Unknown node kinds render
their children only, which keeps the renderer usable when the parser grows
new node types.

Raw HTML blocks and inline HTML pass through untouched; sanitize untrusted
input before it reaches the renderer.

Example
-------
>>> from folio.render import HtmlRenderer, parse_markdown
>>> HtmlRenderer().render(parse_markdown("# Hi *there*"))
'<h1>Hi <em>there</em></h1>'
"""

from __future__ import annotations

import typing as typ

from folio._constants import EXTERNAL_LINK_PREFIXES
from folio.errors import (
    InvalidCodeBlockError,
    InvalidLinkDestinationError,
    MissingImageSourceError,
    RenderError,
)
from folio.markup.attributes import build_tag
from folio.markup.escaping import escape_html
from folio.typography.values import ElementType, HeadingLevel

from .models import RenderState
from .tree import plain_text

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .tree import SyntaxTreeNode

StyleKey = HeadingLevel | ElementType

_VISITORS: dict[str, str] = {
    "heading": "_visit_heading",
    "paragraph": "_visit_paragraph",
    "text": "_visit_text",
    "softbreak": "_visit_softbreak",
    "hardbreak": "_visit_hardbreak",
    "link": "_visit_link",
    "em": "_visit_emphasis",
    "strong": "_visit_strong",
    "fence": "_visit_code_block",
    "code_block": "_visit_code_block",
    "code_inline": "_visit_inline_code",
    "list_item": "_visit_list_item",
    "bullet_list": "_visit_unordered_list",
    "ordered_list": "_visit_ordered_list",
    "blockquote": "_visit_blockquote",
    "hr": "_visit_thematic_break",
    "image": "_visit_image",
    "table": "_visit_table",
    "thead": "_visit_table_head",
    "tbody": "_visit_table_body",
    "tr": "_visit_table_row",
    "th": "_visit_table_cell",
    "td": "_visit_table_cell",
    "html_block": "_visit_html",
    "html_inline": "_visit_html",
}


def is_external(destination: str) -> bool:
    """Return whether ``destination`` points at another site."""
    return destination.startswith(EXTERNAL_LINK_PREFIXES)


class HtmlRenderer:
    """Render Markdown syntax trees into unstyled HTML."""

    external_link_rel = "noopener"

    def render(self, tree: SyntaxTreeNode) -> str:
        """Return the HTML for ``tree``.

        Raises
        ------
        InvalidLinkDestinationError
            If a link has an empty destination.
        MissingImageSourceError
            If an image has an empty source.
        InvalidCodeBlockError
            If a code block contains only whitespace.
        """
        return self.visit(tree, RenderState())

    def render_safely(self, tree: SyntaxTreeNode) -> str:
        """Return the HTML for ``tree`` or an HTML comment naming the error."""
        try:
            return self.render(tree)
        except RenderError as exc:
            return f"<!-- Rendering error: {escape_html(str(exc))} -->"

    def visit(self, node: SyntaxTreeNode, state: RenderState) -> str:
        """Render one node, dispatching on its type."""
        name = _VISITORS.get(node.type)
        if name is None:
            return self.visit_children(node, state)
        visitor: cabc.Callable[[SyntaxTreeNode, RenderState], str] = getattr(
            self, name
        )
        return visitor(node, state)

    def visit_children(self, node: SyntaxTreeNode, state: RenderState) -> str:
        return "".join(self.visit(child, state) for child in node.children)

    # Styling hooks; the plain renderer adds nothing.

    def style_attributes(self, key: StyleKey) -> list[str]:
        """Return extra attributes for elements of kind ``key``."""
        return []

    def decorate(self, key: StyleKey, fragment: str) -> str:
        """Post-process the rendered markup of an element of kind ``key``."""
        return fragment

    def heading_attributes(
        self, level: HeadingLevel, text: str, state: RenderState
    ) -> list[str]:
        """Return attributes placed before the style attributes of a heading."""
        return []

    def element(
        self,
        tag: str,
        key: StyleKey,
        content: str = "",
        attributes: cabc.Sequence[str] = (),
        *,
        self_closing: bool = False,
    ) -> str:
        """Build a tag for an element of kind ``key`` and apply the hooks."""
        fragment = build_tag(
            tag,
            [*attributes, *self.style_attributes(key)],
            content,
            self_closing=self_closing,
        )
        return self.decorate(key, fragment)

    # Node visitors

    def _visit_heading(self, node: SyntaxTreeNode, state: RenderState) -> str:
        level = HeadingLevel(int(node.tag.removeprefix("h")))
        attributes = self.heading_attributes(level, plain_text(node), state)
        return self.element(
            level.tag_name, level, self.visit_children(node, state), attributes
        )

    def _visit_paragraph(self, node: SyntaxTreeNode, state: RenderState) -> str:
        content = self.visit_children(node, state)
        if node.hidden:
            return content
        return self.element("p", ElementType.PARAGRAPH, content)

    def _visit_text(self, node: SyntaxTreeNode, state: RenderState) -> str:
        return escape_html(node.content)

    def _visit_softbreak(self, node: SyntaxTreeNode, state: RenderState) -> str:
        return "\n"

    def _visit_hardbreak(self, node: SyntaxTreeNode, state: RenderState) -> str:
        return "<br />"

    def _visit_link(self, node: SyntaxTreeNode, state: RenderState) -> str:
        destination = str(node.attrs.get("href") or "")
        if not destination:
            raise InvalidLinkDestinationError()
        escaped = escape_html(destination)
        attributes = [f'href="{escaped}"']
        if is_external(escaped):
            attributes += ['target="_blank"', f'rel="{self.external_link_rel}"']
        return self.element(
            "a", ElementType.LINK, self.visit_children(node, state), attributes
        )

    def _visit_emphasis(self, node: SyntaxTreeNode, state: RenderState) -> str:
        return self.element("em", ElementType.EMPHASIS, self.visit_children(node, state))

    def _visit_strong(self, node: SyntaxTreeNode, state: RenderState) -> str:
        return self.element(
            "strong", ElementType.STRONG, self.visit_children(node, state)
        )

    def _visit_code_block(self, node: SyntaxTreeNode, state: RenderState) -> str:
        code = node.content
        if not code.strip():
            raise InvalidCodeBlockError()
        return f"<pre><code>{escape_html(code)}</code></pre>"

    def _visit_inline_code(self, node: SyntaxTreeNode, state: RenderState) -> str:
        return self.element("code", ElementType.INLINE_CODE, escape_html(node.content))

    def _visit_list_item(self, node: SyntaxTreeNode, state: RenderState) -> str:
        return self.element(
            "li", ElementType.LIST_ITEM, self.visit_children(node, state)
        )

    def _visit_unordered_list(self, node: SyntaxTreeNode, state: RenderState) -> str:
        return self.element(
            "ul", ElementType.UNORDERED_LIST, self.visit_children(node, state)
        )

    def _visit_ordered_list(self, node: SyntaxTreeNode, state: RenderState) -> str:
        return self.element(
            "ol", ElementType.ORDERED_LIST, self.visit_children(node, state)
        )

    def _visit_blockquote(self, node: SyntaxTreeNode, state: RenderState) -> str:
        return self.element(
            "blockquote", ElementType.BLOCKQUOTE, self.visit_children(node, state)
        )

    def _visit_thematic_break(self, node: SyntaxTreeNode, state: RenderState) -> str:
        return self.element("hr", ElementType.HORIZONTAL_RULE, self_closing=True)

    def _visit_image(self, node: SyntaxTreeNode, state: RenderState) -> str:
        source = str(node.attrs.get("src") or "")
        if not source:
            raise MissingImageSourceError()
        attributes = [
            f'src="{escape_html(source)}"',
            f'alt="{escape_html(plain_text(node))}"',
        ]
        return self.element("img", ElementType.IMAGE, "", attributes, self_closing=True)

    def _visit_table(self, node: SyntaxTreeNode, state: RenderState) -> str:
        state.inside_table_head = False
        content = self.visit_children(node, state)
        state.inside_table_head = False
        return self.element("table", ElementType.TABLE, content)

    def _visit_table_head(self, node: SyntaxTreeNode, state: RenderState) -> str:
        state.inside_table_head = True
        try:
            content = self.visit_children(node, state)
        finally:
            state.inside_table_head = False
        return f"<thead>{content}</thead>"

    def _visit_table_body(self, node: SyntaxTreeNode, state: RenderState) -> str:
        return f"<tbody>{self.visit_children(node, state)}</tbody>"

    def _visit_table_row(self, node: SyntaxTreeNode, state: RenderState) -> str:
        content = self.visit_children(node, state)
        if state.inside_table_head:
            return f"<tr>{content}</tr>"
        return self.element("tr", ElementType.TABLE_ROW, content)

    def _visit_table_cell(self, node: SyntaxTreeNode, state: RenderState) -> str:
        if state.inside_table_head:
            tag, key = "th", ElementType.TABLE_HEADER
        else:
            tag, key = "td", ElementType.TABLE_CELL
        return self.element(tag, key, self.visit_children(node, state))

    def _visit_html(self, node: SyntaxTreeNode, state: RenderState) -> str:
        return node.content


__all__ = ["HtmlRenderer", "is_external"]
