"""Pygments-backed syntax highlighting for fenced code blocks.

Code fence info strings may carry a file name after a colon
(```` ```swift:Sources/App.swift ````). The helpers here split that suffix off,
map common aliases onto :class:`~folio.render.options.SupportedLanguage` and
produce inline ``<span>`` markup that the enhanced renderer places inside its
own ``<pre>``/``<code>`` wrapper.

Examples
--------
>>> from folio.render.highlight import detect_language, extract_file_name
>>> detect_language("py:tools/build.py")
<SupportedLanguage.PYTHON: 'python'>
>>> extract_file_name("py:tools/build.py")
'tools/build.py'
"""

from __future__ import annotations

from pygments import highlight as pygments_highlight
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from .options import SupportedLanguage

LANGUAGE_ALIASES: dict[str, SupportedLanguage] = {
    "js": SupportedLanguage.JAVASCRIPT,
    "ts": SupportedLanguage.TYPESCRIPT,
    "sh": SupportedLanguage.SHELL,
    "py": SupportedLanguage.PYTHON,
    "rb": SupportedLanguage.RUBY,
    "cpp": SupportedLanguage.CPP,
    "c++": SupportedLanguage.CPP,
}
LEXER_NAMES: dict[SupportedLanguage, str] = {
    SupportedLanguage.SHELL: "bash",
    SupportedLanguage.MARKDOWN: "markdown",
}
CODE_BLOCK_CSS_CLASS = "markdown-code-block"


def _split_info(info: str | None) -> tuple[str, str | None]:
    """Return the language word and the optional file name of ``info``."""
    if not info:
        return "", None
    language, separator, file_name = info.partition(":")
    words = language.split()
    name = words[0].lower() if words else ""
    if not separator:
        return name, None
    return name, file_name.strip() or None


def detect_language(info: str | None) -> SupportedLanguage | None:
    """Return the language named by a fence info string, resolving aliases."""
    name, _file_name = _split_info(info)
    if not name:
        return None
    if name in LANGUAGE_ALIASES:
        return LANGUAGE_ALIASES[name]
    try:
        return SupportedLanguage(name)
    except ValueError:
        return None


def extract_file_name(info: str | None) -> str | None:
    """Return the file name following ``:`` in a fence info string."""
    _name, file_name = _split_info(info)
    return file_name


class HtmlHighlighter:
    """Highlight code into bare token spans styled by a pygments theme."""

    def __init__(
        self,
        pygments_style: str = "monokai",
        css_class: str = CODE_BLOCK_CSS_CLASS,
    ) -> None:
        """Initialize the highlighter.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for :attr:`stylesheet`. Defaults to
            ``"monokai"``.
        css_class : str, optional
            Class of the block element the token spans are scoped under.
        """
        self.pygments_style = pygments_style
        self.css_class = css_class
        self._formatter = HtmlFormatter(style=pygments_style, nowrap=True)

    @property
    def stylesheet(self) -> str:
        """Return the CSS for highlighted token spans."""
        return self._formatter.get_style_defs(f".{self.css_class}")

    def highlight(self, code: str, language: SupportedLanguage) -> str:
        """Return ``code`` as escaped HTML with token ``<span>`` elements.

        The text is neither trimmed nor given a trailing newline, so the
        output has exactly as many lines as ``code``. Languages without a
        pygments lexer fall back to plain escaping through the text lexer.
        """
        options: dict[str, bool] = {"stripnl": False, "ensurenl": False}
        if language is SupportedLanguage.PHP:
            options["startinline"] = True
        try:
            lexer = get_lexer_by_name(LEXER_NAMES.get(language, language.value), **options)
        except ClassNotFound:
            lexer = get_lexer_by_name("text", **options)
        return pygments_highlight(code, lexer, self._formatter)


__all__ = [
    "CODE_BLOCK_CSS_CLASS",
    "LANGUAGE_ALIASES",
    "HtmlHighlighter",
    "detect_language",
    "extract_file_name",
]
