"""Standalone HTML page output for parsed documents."""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

if typ.TYPE_CHECKING:
    from .pipeline import ParsedDocument

DEFAULT_TITLE = "Untitled document"


def _display_date(value: object) -> str | None:
    match value:
        case dt.date():
            return f"{value:%B} {value.day}, {value.year}"
        case str() as text if text:
            return text
        case _:
            return None


class DocumentPageBuilder:
    """Wrap a parsed document into a complete HTML page."""

    def __init__(
        self,
        document: ParsedDocument,
        *,
        title: str | None = None,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the builder and Jinja environment.

        Parameters
        ----------
        document : ParsedDocument
            Rendered body, front matter and optional stylesheet and table of
            contents.
        title : str, optional
            Page title; defaults to the ``title`` front matter value.
        templates_dir : Path, optional
            Directory holding ``document.jinja``; defaults to the packaged
            templates.
        """
        self.document = document
        self.title = title or str(document.front_matter.get("title") or DEFAULT_TITLE)
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("document.jinja")

    def render(self) -> str:
        """Return the page HTML, always ending with a newline."""
        front_matter = self.document.front_matter
        context = {
            "title": self.title,
            "description": front_matter.get("description"),
            "published": _display_date(
                front_matter.get("published") or front_matter.get("date")
            ),
            "document": self.document,
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return html

    def run(self, output_path: Path) -> Path:
        """Render and write the page, returning the output path."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render(), encoding="utf-8")
        return output_path


__all__ = ["DocumentPageBuilder"]
