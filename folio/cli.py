"""Cyclopts CLI entrypoint for rendering Markdown documents with folio.

The ``folio`` console script renders Markdown files into HTML fragments or
standalone pages, writes the stylesheet derived from a typography
configuration, and prints parsed front matter. Options can also be supplied
through ``FOLIO_*`` environment variables.

Examples
--------
Render a document into a standalone page:

>>> from folio.cli import app
>>> app(["render", "post.md", "--page", "--output", "public/post.html"])  # doctest: +SKIP

Write the stylesheet for the configured typography:

>>> app(["css", "--output", "public/folio.css"])  # doctest: +SKIP
"""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import RenderConfig, load_render_config
from .front_matter import extract_front_matter
from .page import DocumentPageBuilder

DEFAULT_CONFIG = Path("folio.yaml")

app = App(name="folio", config=cyclopts.config.Env("FOLIO_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _load_config(path: Path | None) -> RenderConfig:
    """Load ``path``, or ``folio.yaml`` when present, or the defaults."""
    if path is not None:
        return load_render_config(path)
    if DEFAULT_CONFIG.exists():
        return load_render_config(DEFAULT_CONFIG)
    return RenderConfig()


def _emit(text: str, output: Path | None) -> None:
    """Print ``text`` or write it to ``output`` and report the path."""
    if output is None:
        print(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    if not text.endswith("\n"):
        text += "\n"
    output.write_text(text, encoding="utf-8")
    print(f"wrote {_format_path(output)}")


@app.command(help="Render a Markdown document into HTML.")
def render(
    source: typ.Annotated[Path, Parameter(help="Markdown file to render")],
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to rendering config", env_var="FOLIO_CONFIG")
    ] = None,
    output: typ.Annotated[
        Path | None, Parameter(help="Write HTML here instead of stdout")
    ] = None,
    page: typ.Annotated[
        bool, Parameter(help="Wrap the body in a standalone HTML page")
    ] = False,
    toc: typ.Annotated[
        bool, Parameter(help="Generate a table of contents")
    ] = False,
    safe: typ.Annotated[
        bool, Parameter(help="Fall back to escaped source instead of failing")
    ] = False,
) -> None:
    """Render ``source`` through the configured document pipeline.

    Parameters
    ----------
    source : Path
        Markdown document, optionally starting with a front matter block.
    config : Path or None, optional
        Rendering configuration; defaults to ``folio.yaml`` when it exists.
    output : Path or None, optional
        Destination file; the HTML is printed when omitted.
    page : bool, optional
        Produce a complete page with title, stylesheet and table of contents.
    toc : bool, optional
        Collect a table of contents (prepended to fragment output).
    safe : bool, optional
        Use the graceful pipeline entry points.

    Raises
    ------
    FolioError
        If ``safe`` is not set and the document cannot be parsed or rendered.
    """
    pipeline = _load_config(config).build_pipeline()
    if page:
        pipeline.include_stylesheet = True
    raw = source.read_text(encoding="utf-8")
    match (toc, safe):
        case (True, True):
            document = pipeline.parse_safely_with_table_of_contents(raw)
        case (True, False):
            document = pipeline.parse_with_table_of_contents(raw)
        case (False, True):
            document = pipeline.parse_safely(raw)
        case _:
            document = pipeline.parse(raw)

    if page:
        html = DocumentPageBuilder(document).render()
    else:
        html = f"{document.table_of_contents or ''}{document.body_markup}"
    _emit(html, output)


@app.command(help="Write the stylesheet for the configured typography.")
def css(
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to rendering config", env_var="FOLIO_CONFIG")
    ] = None,
    output: typ.Annotated[
        Path | None, Parameter(help="Write CSS here instead of stdout")
    ] = None,
) -> None:
    """Print or write typography CSS, plus highlighting CSS when enabled."""
    pipeline = _load_config(config).build_pipeline()
    _emit(pipeline.stylesheet(), output)


@app.command(help="Print the front matter of a Markdown document.")
def front_matter(
    source: typ.Annotated[Path, Parameter(help="Markdown file to inspect")],
) -> None:
    """Print one ``key: value`` line per front matter entry.

    Dates are printed in ISO format.

    Raises
    ------
    FrontMatterError
        If the front matter block is unterminated or malformed.
    """
    metadata, _body = extract_front_matter(source.read_text(encoding="utf-8"))
    for key, value in metadata.items():
        shown = value.isoformat() if isinstance(value, dt.date) else value
        print(f"{key}: {shown}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``folio`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
