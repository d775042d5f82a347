"""Declarative markup composition and Markdown rendering.

folio builds HTML two ways: by composing content nodes through a small
builder DSL, and by rendering Markdown documents (with optional front matter)
into styled markup plus a matching stylesheet.

Exports
-------
- ``DocumentPipeline`` / ``ParsedDocument``: parse Markdown documents.
- ``RenderingOptions``: enhanced rendering feature switches.
- ``TypographyConfiguration``: styles and CSS generation.
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from folio import DocumentPipeline
>>> DocumentPipeline().parse("Hello *world*").body_markup
'<p>Hello <em>world</em></p>'
"""

from __future__ import annotations

from .cli import app, main
from .pipeline import DocumentPipeline, ParsedDocument
from .render import RenderingOptions
from .typography import TypographyConfiguration

__all__ = [
    "DocumentPipeline",
    "ParsedDocument",
    "RenderingOptions",
    "TypographyConfiguration",
    "app",
    "main",
]
