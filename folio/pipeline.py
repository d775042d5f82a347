r"""Turn raw Markdown documents into front matter, markup and stylesheets.

:class:`DocumentPipeline` ties the front-matter extractor, the parser, one of
the two renderers and the typography configuration together. The strict
entry points raise :class:`~folio.errors.FolioError` subclasses; the
``*_safely`` variants never raise and fall back to the escaped source in a
single ``<pre>`` block.

Example
-------
>>> from folio.pipeline import DocumentPipeline
>>> document = DocumentPipeline().parse("---\ntitle: Sample\n---\n# Hi\n")
>>> document.front_matter, document.body_markup
({'title': 'Sample'}, '<h1>Hi</h1>')
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from ._constants import FALLBACK_CLASS
from .errors import EmptyContentError, FolioError
from .front_matter import FrontMatter, extract_front_matter
from .markup.escaping import escape_html
from .render import (
    EnhancedHtmlRenderer,
    HtmlHighlighter,
    HtmlRenderer,
    parse_markdown,
)
from .typography import TypographyConfiguration

if typ.TYPE_CHECKING:
    from .render import RenderingOptions

logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class ParsedDocument:
    """Result of running a document through the pipeline.

    Attributes
    ----------
    front_matter : FrontMatter
        Metadata from the leading ``---`` block; empty when absent.
    body_markup : str
        Rendered HTML for the document body.
    table_of_contents : str or None
        Table-of-contents markup from the ``*_with_table_of_contents`` entry
        points (``""`` when no headings qualify), otherwise ``None``.
    stylesheet : str or None
        Generated CSS when the pipeline includes stylesheets.
    """

    front_matter: FrontMatter
    body_markup: str
    table_of_contents: str | None = None
    stylesheet: str | None = None


class DocumentPipeline:
    """Parse Markdown documents with a fixed renderer configuration.

    Parameters
    ----------
    options : RenderingOptions, optional
        Enhanced rendering features. ``None`` selects the plain
        :class:`~folio.render.HtmlRenderer`.
    typography : TypographyConfiguration, optional
        Styles for the enhanced renderer and :meth:`generate_css`; defaults
        to the ``default`` preset.
    include_stylesheet : bool, optional
        Attach the generated CSS to every :class:`ParsedDocument`.
    highlighter : HtmlHighlighter, optional
        Syntax highlighter shared with the enhanced renderer.
    """

    def __init__(
        self,
        options: RenderingOptions | None = None,
        typography: TypographyConfiguration | None = None,
        *,
        include_stylesheet: bool = False,
        highlighter: HtmlHighlighter | None = None,
    ) -> None:
        self.options = options
        self.typography = typography or TypographyConfiguration.preset("default")
        self.include_stylesheet = include_stylesheet
        self.highlighter = highlighter or HtmlHighlighter()
        self.renderer: HtmlRenderer
        if options is None:
            self.renderer = HtmlRenderer()
        else:
            self.renderer = EnhancedHtmlRenderer(
                options, self.typography, self.highlighter
            )

    def parse(self, raw: str) -> ParsedDocument:
        """Split and render ``raw``.

        Raises
        ------
        EmptyContentError
            If ``raw`` is empty or whitespace only.
        FrontMatterError
            If the front matter block is unterminated or malformed.
        RenderError
            If a link, image or code block in the body is invalid.
        """
        return self._parse(raw, with_table_of_contents=False)

    def parse_with_table_of_contents(self, raw: str) -> ParsedDocument:
        """Like :meth:`parse`, also filling ``table_of_contents``."""
        return self._parse(raw, with_table_of_contents=True)

    def parse_safely(self, raw: str) -> ParsedDocument:
        """Like :meth:`parse`, but return escaped fallback output on error."""
        try:
            return self.parse(raw)
        except FolioError as exc:
            return self._fallback(raw, exc)

    def parse_safely_with_table_of_contents(self, raw: str) -> ParsedDocument:
        """Like :meth:`parse_with_table_of_contents`, but never raise."""
        try:
            return self.parse_with_table_of_contents(raw)
        except FolioError as exc:
            return self._fallback(raw, exc)

    def generate_css(self) -> str:
        """Return the stylesheet for the active typography configuration."""
        return self.typography.generate_css()

    def stylesheet(self) -> str:
        """Return typography CSS plus highlighting CSS when highlighting is on."""
        parts = [self.generate_css()]
        if self.options is not None and self.options.syntax_highlighting.is_enabled:
            parts.append(self.highlighter.stylesheet)
        return "\n\n".join(parts)

    def _parse(self, raw: str, *, with_table_of_contents: bool) -> ParsedDocument:
        if not raw.strip():
            raise EmptyContentError()
        front_matter, body = extract_front_matter(raw)
        tree = parse_markdown(body)
        table_of_contents: str | None = None
        if isinstance(self.renderer, EnhancedHtmlRenderer) and with_table_of_contents:
            markup, table_of_contents = self.renderer.render_with_table_of_contents(
                tree
            )
        else:
            markup = self.renderer.render(tree)
            if with_table_of_contents:
                table_of_contents = ""
        return ParsedDocument(
            front_matter=front_matter,
            body_markup=markup,
            table_of_contents=table_of_contents,
            stylesheet=self.stylesheet() if self.include_stylesheet else None,
        )

    @staticmethod
    def _fallback(raw: str, error: FolioError) -> ParsedDocument:
        logger.warning("Rendering fell back to preformatted source: %s", error)
        return ParsedDocument(
            front_matter={},
            body_markup=f'<pre class="{FALLBACK_CLASS}">{escape_html(raw)}</pre>',
        )


__all__ = ["DocumentPipeline", "ParsedDocument"]
