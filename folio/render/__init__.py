"""Markdown parsing and HTML rendering.

Exports
-------
- ``parse_markdown``: build the syntax tree the renderers consume.
- ``HtmlRenderer``: plain HTML rendering.
- ``EnhancedHtmlRenderer``: typography-aware rendering with optional
  table of contents, highlighted code blocks and math passthrough.
- ``RenderingOptions`` and its parts: feature switches for the enhanced
  renderer.
"""

from __future__ import annotations

from .basic import HtmlRenderer
from .enhanced import EnhancedHtmlRenderer, generate_table_of_contents_html
from .highlight import HtmlHighlighter, detect_language, extract_file_name
from .models import RenderState, TableOfContentsEntry
from .options import (
    RENDERING_PRESETS,
    CodeBlockOptions,
    MathSupport,
    RenderingOptions,
    SupportedLanguage,
    SyntaxHighlighting,
    TableOfContents,
)
from .tree import SyntaxTreeNode, parse_markdown, plain_text

__all__ = [
    "RENDERING_PRESETS",
    "CodeBlockOptions",
    "EnhancedHtmlRenderer",
    "HtmlHighlighter",
    "HtmlRenderer",
    "MathSupport",
    "RenderState",
    "RenderingOptions",
    "SupportedLanguage",
    "SyntaxHighlighting",
    "SyntaxTreeNode",
    "TableOfContents",
    "TableOfContentsEntry",
    "detect_language",
    "extract_file_name",
    "generate_table_of_contents_html",
    "parse_markdown",
    "plain_text",
]
