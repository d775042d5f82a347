"""Feature switches for the enhanced Markdown renderer.

All option types are frozen dataclasses, so presets can be shared freely and
customized through :func:`dataclasses.replace` or the ``with_*`` helpers on
:class:`RenderingOptions`.

Examples
--------
>>> from folio.render.options import RenderingOptions, TableOfContents
>>> options = RenderingOptions.basic().with_table_of_contents(
...     TableOfContents.enabled(max_depth=2)
... )
>>> options.table_of_contents.max_depth
2
>>> RenderingOptions.minimal().has_enhanced_features
False
"""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class SupportedLanguage(enum.StrEnum):
    """Languages the enhanced renderer recognizes in code fence info strings."""

    SWIFT = "swift"
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    HTML = "html"
    CSS = "css"
    JSON = "json"
    YAML = "yaml"
    SHELL = "shell"
    BASH = "bash"
    PYTHON = "python"
    RUST = "rust"
    GO = "go"
    KOTLIN = "kotlin"
    JAVA = "java"
    CPP = "cpp"
    C = "c"
    PHP = "php"
    RUBY = "ruby"
    SQL = "sql"
    XML = "xml"
    MARKDOWN = "markdown"

    @property
    def display_name(self) -> str:
        """Return the human-facing label shown in code block headers."""
        return _DISPLAY_NAMES.get(self, self.value.title())

    @property
    def css_class(self) -> str:
        return f"language-{self.value}"


_DISPLAY_NAMES: dict[SupportedLanguage, str] = {
    SupportedLanguage.JAVASCRIPT: "JavaScript",
    SupportedLanguage.TYPESCRIPT: "TypeScript",
    SupportedLanguage.HTML: "HTML",
    SupportedLanguage.CSS: "CSS",
    SupportedLanguage.JSON: "JSON",
    SupportedLanguage.YAML: "YAML",
    SupportedLanguage.SHELL: "Shell",
    SupportedLanguage.BASH: "Shell",
    SupportedLanguage.CPP: "C++",
    SupportedLanguage.PHP: "PHP",
    SupportedLanguage.SQL: "SQL",
    SupportedLanguage.XML: "XML",
}


@dc.dataclass(frozen=True, slots=True)
class SyntaxHighlighting:
    """Which languages get highlighted; empty ``languages`` disables it."""

    languages: frozenset[SupportedLanguage] = frozenset()

    @classmethod
    def disabled(cls) -> SyntaxHighlighting:
        return cls()

    @classmethod
    def enabled(
        cls, languages: cabc.Iterable[SupportedLanguage | str]
    ) -> SyntaxHighlighting:
        """Highlight only ``languages``; strings are looked up by value."""
        return cls(frozenset(SupportedLanguage(language) for language in languages))

    @classmethod
    def enabled_for_all(cls) -> SyntaxHighlighting:
        return cls(frozenset(SupportedLanguage))

    @property
    def is_enabled(self) -> bool:
        return bool(self.languages)

    def covers(self, language: SupportedLanguage | None) -> bool:
        """Return whether code in ``language`` should be highlighted."""
        return language is not None and language in self.languages


@dc.dataclass(frozen=True, slots=True)
class TableOfContents:
    """Heading id generation and table-of-contents collection settings.

    Attributes
    ----------
    is_enabled : bool
        Whether headings are tracked at all.
    max_depth : int
        Deepest heading level that gets a table-of-contents entry.
    include_ids : bool
        Whether headings receive generated ``id`` attributes. Entries are
        only collected when ids are generated, since they link to them.
    """

    is_enabled: bool = False
    max_depth: int = 0
    include_ids: bool = False

    @classmethod
    def disabled(cls) -> TableOfContents:
        return cls()

    @classmethod
    def enabled(cls, max_depth: int = 6, *, include_ids: bool = True) -> TableOfContents:
        return cls(is_enabled=True, max_depth=max_depth, include_ids=include_ids)


@dc.dataclass(frozen=True, slots=True)
class CodeBlockOptions:
    """Interactive extras rendered around fenced code blocks."""

    copy_button: bool = False
    line_numbers: bool = False
    show_file_name: bool = False
    run_button: bool = False
    copy_button_text: str = "Copy"
    run_button_text: str = "Run"
    wrap_lines: bool = False

    @classmethod
    def disabled(cls) -> CodeBlockOptions:
        return cls()

    @classmethod
    def basic(cls) -> CodeBlockOptions:
        return cls(copy_button=True, line_numbers=True, show_file_name=True)

    @classmethod
    def enhanced(cls) -> CodeBlockOptions:
        return cls(
            copy_button=True, line_numbers=True, show_file_name=True, run_button=True
        )

    @property
    def has_header(self) -> bool:
        """Return whether code blocks get a header bar."""
        return self.show_file_name or self.copy_button or self.run_button


@dc.dataclass(frozen=True, slots=True)
class MathSupport:
    """Toggle for ``$...$`` and ``math`` fence passthrough."""

    is_enabled: bool = False

    @classmethod
    def disabled(cls) -> MathSupport:
        return cls()

    @classmethod
    def enabled(cls) -> MathSupport:
        return cls(is_enabled=True)


@dc.dataclass(frozen=True, slots=True)
class RenderingOptions:
    """Complete feature set for one :class:`~folio.render.EnhancedHtmlRenderer`."""

    syntax_highlighting: SyntaxHighlighting = dc.field(
        default_factory=SyntaxHighlighting.disabled
    )
    table_of_contents: TableOfContents = dc.field(
        default_factory=TableOfContents.disabled
    )
    code_blocks: CodeBlockOptions = dc.field(default_factory=CodeBlockOptions)
    math: MathSupport = dc.field(default_factory=MathSupport.disabled)

    @classmethod
    def basic(cls) -> RenderingOptions:
        return cls(
            syntax_highlighting=SyntaxHighlighting.enabled_for_all(),
            code_blocks=CodeBlockOptions.basic(),
        )

    @classmethod
    def enhanced(cls) -> RenderingOptions:
        return cls(
            syntax_highlighting=SyntaxHighlighting.enabled_for_all(),
            table_of_contents=TableOfContents.enabled(max_depth=4),
            code_blocks=CodeBlockOptions.enhanced(),
            math=MathSupport.enabled(),
        )

    @classmethod
    def minimal(cls) -> RenderingOptions:
        """Return options with every enhanced feature switched off."""
        return cls()

    @classmethod
    def documentation(cls) -> RenderingOptions:
        return cls(
            syntax_highlighting=SyntaxHighlighting.enabled(
                [
                    SupportedLanguage.SWIFT,
                    SupportedLanguage.JAVASCRIPT,
                    SupportedLanguage.TYPESCRIPT,
                    SupportedLanguage.JSON,
                    SupportedLanguage.YAML,
                ]
            ),
            table_of_contents=TableOfContents.enabled(max_depth=3),
            code_blocks=CodeBlockOptions(
                copy_button=True,
                line_numbers=True,
                show_file_name=True,
                wrap_lines=True,
            ),
            math=MathSupport.enabled(),
        )

    @classmethod
    def preset(cls, name: str) -> RenderingOptions:
        """Return the preset called ``name``.

        Raises
        ------
        KeyError
            If ``name`` is not one of :data:`RENDERING_PRESETS`.
        """
        if name not in RENDERING_PRESETS:
            msg = f"Unknown rendering preset '{name}'"
            raise KeyError(msg)
        return getattr(cls, name)()

    @property
    def has_enhanced_features(self) -> bool:
        code_blocks = self.code_blocks
        return (
            self.syntax_highlighting.is_enabled
            or self.table_of_contents.is_enabled
            or code_blocks.copy_button
            or code_blocks.line_numbers
            or code_blocks.show_file_name
            or code_blocks.run_button
            or self.math.is_enabled
        )

    def with_syntax_highlighting(
        self, syntax_highlighting: SyntaxHighlighting
    ) -> RenderingOptions:
        return dc.replace(self, syntax_highlighting=syntax_highlighting)

    def with_table_of_contents(
        self, table_of_contents: TableOfContents
    ) -> RenderingOptions:
        return dc.replace(self, table_of_contents=table_of_contents)

    def with_code_blocks(self, code_blocks: CodeBlockOptions) -> RenderingOptions:
        return dc.replace(self, code_blocks=code_blocks)

    def with_math(self, math: MathSupport) -> RenderingOptions:
        return dc.replace(self, math=math)


RENDERING_PRESETS = ("basic", "enhanced", "minimal", "documentation")

__all__ = [
    "RENDERING_PRESETS",
    "CodeBlockOptions",
    "MathSupport",
    "RenderingOptions",
    "SupportedLanguage",
    "SyntaxHighlighting",
    "TableOfContents",
]
