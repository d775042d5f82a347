"""Load rendering configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML

from .helpers import _build_rendering_options, _build_typography, _optional_str
from .models import RenderConfig

if typ.TYPE_CHECKING:
    from pathlib import Path

DEFAULT_PYGMENTS_STYLE = "monokai"


def load_render_config(path: Path) -> RenderConfig:
    """Load the YAML file describing rendering features and typography.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``folio.yaml``).

    Returns
    -------
    RenderConfig
        Rendering options, typography merged onto its preset, and output
        flags.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    RenderConfigError
        If a preset, language, enum name or section shape is invalid.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from folio.config import load_render_config
    >>> config = load_render_config(Path("folio.yaml"))  # doctest: +SKIP
    >>> config.rendering.table_of_contents.max_depth  # doctest: +SKIP
    3
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    return build_render_config(loaded)


def build_render_config(raw: typ.Mapping[str, typ.Any]) -> RenderConfig:
    """Build a RenderConfig from an already-loaded mapping."""
    return RenderConfig(
        rendering=_build_rendering_options(raw.get("rendering")),
        typography=_build_typography(raw.get("typography")),
        include_stylesheet=bool(raw.get("include_stylesheet", False)),
        pygments_style=_optional_str(raw.get("pygments_style"))
        or DEFAULT_PYGMENTS_STYLE,
    )


__all__ = ["build_render_config", "load_render_config"]
