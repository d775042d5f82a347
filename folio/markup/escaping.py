"""HTML escaping used for all non-raw text content."""

from __future__ import annotations

from html import escape


def escape_html(text: str) -> str:
    """Escape ``& < > " '`` for use in element content or attribute values.

    The ampersand is replaced first, so applying this twice double-escapes;
    callers escape exactly once at the point text enters markup.
    """
    return escape(text, quote=True)


__all__ = ["escape_html"]
