"""Typography-aware HTML renderer with code, math and contents features.

:class:`EnhancedHtmlRenderer` extends :class:`~folio.render.basic.HtmlRenderer`
with everything :class:`~folio.render.options.RenderingOptions` can switch on:

* ``markdown-*`` classes on elements whose kind has a typography style, plus
  the style's extra ``css_classes``;
* generated heading ids and a table of contents;
* highlighted code blocks with an optional header, copy and run buttons and
  line numbers;
* ``$...$`` inline math and ``math`` fenced blocks passed through for a
  client-side typesetter.

Examples
--------
>>> from folio.render import EnhancedHtmlRenderer, RenderingOptions, parse_markdown
>>> from folio.render.options import TableOfContents
>>> renderer = EnhancedHtmlRenderer(
...     RenderingOptions().with_table_of_contents(TableOfContents.enabled())
... )
>>> renderer.render(parse_markdown("# Hi"))
'<div class="markdown-content"><h1 id="hi-1" class="markdown-heading-1">Hi</h1></div>'
"""

from __future__ import annotations

import re
import typing as typ

from folio._constants import CONTENT_CLASS, TOC_CLASS, TOC_ID, TOC_TITLE
from folio.errors import InvalidCodeBlockError
from folio.markup.classes import inject_classes
from folio.markup.escaping import escape_html
from folio.typography.configuration import TypographyConfiguration
from folio.typography.values import ElementType, HeadingLevel

from .basic import HtmlRenderer, StyleKey
from .highlight import HtmlHighlighter, detect_language, extract_file_name
from .models import RenderState, TableOfContentsEntry
from .options import RenderingOptions, SupportedLanguage

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .tree import SyntaxTreeNode

MATH_INLINE_PATTERN = re.compile(r"\$([^$]+)\$")
MATH_FENCE_INFO = "math"
RUNNABLE_LANGUAGE = SupportedLanguage.SWIFT


def generate_table_of_contents_html(
    entries: cabc.Sequence[TableOfContentsEntry],
) -> str:
    """Return the navigation markup for ``entries``, or ``""`` when empty."""
    if not entries:
        return ""
    items = "".join(
        f'<li><a href="#{entry.id}">{escape_html(entry.text)}</a></li>'
        for entry in entries
    )
    return (
        f'<aside id="{TOC_ID}" class="{TOC_CLASS}"><nav>'
        f"<h2>{TOC_TITLE}</h2><ul>{items}</ul></nav></aside>"
    )


class EnhancedHtmlRenderer(HtmlRenderer):
    """Render Markdown into styled HTML according to rendering options.

    Parameters
    ----------
    options : RenderingOptions, optional
        Feature switches; defaults to :meth:`RenderingOptions.enhanced`.
    typography : TypographyConfiguration, optional
        Styles that decide which elements get ``markdown-*`` classes;
        defaults to the ``default`` preset.
    highlighter : HtmlHighlighter, optional
        Syntax highlighter for enabled languages.
    """

    external_link_rel = "noopener noreferrer"

    def __init__(
        self,
        options: RenderingOptions | None = None,
        typography: TypographyConfiguration | None = None,
        highlighter: HtmlHighlighter | None = None,
    ) -> None:
        self.options = options or RenderingOptions.enhanced()
        self.typography = typography or TypographyConfiguration.preset("default")
        self.highlighter = highlighter or HtmlHighlighter()

    def render(self, tree: SyntaxTreeNode) -> str:
        """Return the styled HTML for ``tree`` wrapped in the content div."""
        html, _entries = self._render(tree)
        return html

    def render_with_table_of_contents(self, tree: SyntaxTreeNode) -> tuple[str, str]:
        """Return the rendered HTML and its table-of-contents markup."""
        html, entries = self._render(tree)
        return html, generate_table_of_contents_html(entries)

    def table_of_contents(self, tree: SyntaxTreeNode) -> list[TableOfContentsEntry]:
        """Return the table-of-contents entries collected while rendering ``tree``."""
        _html, entries = self._render(tree)
        return entries

    def _render(self, tree: SyntaxTreeNode) -> tuple[str, list[TableOfContentsEntry]]:
        state = RenderState()
        body = self.visit(tree, state)
        return f'<div class="{CONTENT_CLASS}">{body}</div>', state.table_of_contents

    # Styling hooks

    def style_attributes(self, key: StyleKey) -> list[str]:
        if self.typography.style_for(key) is None:
            return []
        return [f'class="{key.css_class}"']

    def decorate(self, key: StyleKey, fragment: str) -> str:
        style = self.typography.style_for(key)
        if style is None or not style.css_classes:
            return fragment
        return inject_classes(fragment, sorted(style.css_classes))

    def heading_attributes(
        self, level: HeadingLevel, text: str, state: RenderState
    ) -> list[str]:
        contents = self.options.table_of_contents
        if not (contents.is_enabled and contents.include_ids):
            return []
        heading_id = state.next_heading_id(text)
        if level <= contents.max_depth:
            state.table_of_contents.append(
                TableOfContentsEntry(level=level, text=text, id=heading_id)
            )
        return [f'id="{heading_id}"']

    # Node visitors

    def _visit_text(self, node: SyntaxTreeNode, state: RenderState) -> str:
        escaped = escape_html(node.content)
        if not self.options.math.is_enabled:
            return escaped
        return MATH_INLINE_PATTERN.sub(r'<span class="math-inline">\1</span>', escaped)

    def _visit_code_block(self, node: SyntaxTreeNode, state: RenderState) -> str:
        code = node.content
        if not code.strip():
            raise InvalidCodeBlockError()
        info = node.info.strip() if node.type == "fence" else ""
        if self.options.math.is_enabled and info == MATH_FENCE_INFO:
            formula = escape_html(code.removesuffix("\n"))
            return f'<div class="math-block">{formula}</div>'

        language = detect_language(info)
        file_name = extract_file_name(info)
        if language is not None and self.options.syntax_highlighting.covers(language):
            highlighted = self.highlighter.highlight(code, language)
        else:
            highlighted = escape_html(code)

        classes = ["markdown-code-block"]
        if language is not None:
            classes.append(language.css_class)
        if self.options.code_blocks.wrap_lines:
            classes.append("wrap-lines")
        if self.typography.style_for(ElementType.CODE_BLOCK) is not None:
            classes.append(ElementType.CODE_BLOCK.css_class)

        parts = [f'<pre class="{" ".join(classes)}">']
        if self.options.code_blocks.has_header:
            parts.append(self._code_header(code, language, file_name))
        parts.append(self._code_content(code, highlighted))
        parts.append("</pre>")
        return self.decorate(ElementType.CODE_BLOCK, "".join(parts))

    def _code_header(
        self, code: str, language: SupportedLanguage | None, file_name: str | None
    ) -> str:
        settings = self.options.code_blocks
        parts = ['<div class="code-block-header">']
        if settings.show_file_name:
            if file_name:
                parts.append(f'<span class="code-filename">{escape_html(file_name)}</span>')
            elif language is not None:
                parts.append(f'<span class="code-language">{language.display_name}</span>')
        parts.append('<div class="code-controls">')
        if settings.copy_button:
            parts.append(
                f'<button class="copy-button" type="button" '
                f'data-copy-text="{escape_html(code)}">'
                f"{escape_html(settings.copy_button_text)}</button>"
            )
        if settings.run_button and language is RUNNABLE_LANGUAGE:
            parts.append(
                f'<button class="run-button" type="button" '
                f'data-run-code="{escape_html(code)}">'
                f"{escape_html(settings.run_button_text)}</button>"
            )
        parts.append("</div></div>")
        return "".join(parts)

    def _code_content(self, code: str, highlighted: str) -> str:
        if not self.options.code_blocks.line_numbers:
            return f"<code>{highlighted}</code>"
        line_count = len(code.rstrip("\n").split("\n"))
        numbers = "".join(
            f'<span class="line-number">{number}</span>'
            for number in range(1, line_count + 1)
        )
        return (
            '<div class="code-content-with-lines">'
            f'<div class="line-numbers">{numbers}</div>'
            f'<code class="code-content">{highlighted}</code>'
            "</div>"
        )


__all__ = [
    "EnhancedHtmlRenderer",
    "generate_table_of_contents_html",
]
