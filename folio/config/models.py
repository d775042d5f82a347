"""Typed dataclasses describing folio rendering configuration."""

from __future__ import annotations

import dataclasses as dc

from folio.pipeline import DocumentPipeline
from folio.render import HtmlHighlighter, RenderingOptions
from folio.typography import TypographyConfiguration

DEFAULT_TYPOGRAPHY_PRESET = "default"


def _default_typography() -> TypographyConfiguration:
    return TypographyConfiguration.preset(DEFAULT_TYPOGRAPHY_PRESET)


class RenderConfigError(ValueError):
    """Raised when the rendering configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class RenderConfig:
    """Everything needed to build a :class:`~folio.pipeline.DocumentPipeline`.

    Attributes
    ----------
    rendering : RenderingOptions or None
        Enhanced rendering features; ``None`` selects the plain renderer.
    typography : TypographyConfiguration
        Styles after merging overrides onto the chosen preset; the
        ``default`` preset when nothing is configured.
    include_stylesheet : bool
        Whether parsed documents carry the generated CSS.
    pygments_style : str
        Pygments theme used for highlighted code.
    """

    rendering: RenderingOptions | None = None
    typography: TypographyConfiguration = dc.field(
        default_factory=_default_typography
    )
    include_stylesheet: bool = False
    pygments_style: str = "monokai"

    def build_pipeline(self) -> DocumentPipeline:
        """Return a pipeline configured from this object."""
        return DocumentPipeline(
            self.rendering,
            self.typography,
            include_stylesheet=self.include_stylesheet,
            highlighter=HtmlHighlighter(pygments_style=self.pygments_style),
        )


__all__ = ["DEFAULT_TYPOGRAPHY_PRESET", "RenderConfig", "RenderConfigError"]
