"""Exception hierarchy shared by the folio composition and Markdown layers.

Input-shape problems (empty documents, broken front matter) derive from
:class:`MarkdownError`, content problems found while walking the parsed tree
derive from :class:`RenderError`. Both are fatal for the strict pipeline entry
points and are converted into fallback output by the ``*_safely`` variants.
"""

from __future__ import annotations


class FolioError(Exception):
    """Base class for every error raised by folio."""


class MarkupCycleError(FolioError):
    """Raised when resolving a node's ``body`` chain never reaches a leaf."""


class MarkdownError(FolioError, ValueError):
    """Raised when Markdown source cannot be split into metadata and body."""


class EmptyContentError(MarkdownError):
    """Raised when the Markdown source is empty or whitespace only."""

    def __init__(self) -> None:
        super().__init__("Markdown content is empty or invalid")


class FrontMatterError(MarkdownError):
    """Raised when the front matter block is structurally invalid."""


class UnterminatedFrontMatterError(FrontMatterError):
    """Raised when the opening ``---`` has no matching closing delimiter."""

    def __init__(self) -> None:
        super().__init__("Front matter is not properly closed with '---'")


class MalformedFrontMatterError(FrontMatterError):
    """Raised when a front matter line is not a ``key: value`` pair.

    Attributes
    ----------
    line : str
        The offending (trimmed) line.
    """

    def __init__(self, line: str) -> None:
        self.line = line
        super().__init__(f"Malformed front matter line: '{line}'")


class RenderError(FolioError):
    """Raised when a parsed Markdown node cannot be rendered."""


class InvalidLinkDestinationError(RenderError):
    """Raised when a link has no destination."""

    def __init__(self) -> None:
        super().__init__("Link destination is missing or invalid")


class MissingImageSourceError(RenderError):
    """Raised when an image has no source."""

    def __init__(self) -> None:
        super().__init__("Image source is required but missing")


class InvalidCodeBlockError(RenderError):
    """Raised when a code block contains only whitespace."""

    def __init__(self) -> None:
        super().__init__("Code block contains invalid content")


__all__ = [
    "EmptyContentError",
    "FolioError",
    "FrontMatterError",
    "InvalidCodeBlockError",
    "InvalidLinkDestinationError",
    "MalformedFrontMatterError",
    "MarkdownError",
    "MarkupCycleError",
    "MissingImageSourceError",
    "RenderError",
    "UnterminatedFrontMatterError",
]
