"""Load and validate rendering configuration YAML for folio.

This subpackage parses a ``folio.yaml`` file, resolves the rendering and
typography presets it names, merges any overrides on top, and produces a
:class:`RenderConfig` that can build a ready-to-use
:class:`~folio.pipeline.DocumentPipeline`.

Examples
--------
>>> from folio.config import build_render_config
>>> config = build_render_config({"rendering": {"preset": "documentation"}})
>>> config.rendering.table_of_contents.max_depth
3
>>> build_render_config({}).rendering is None
True
"""

from .loader import build_render_config, load_render_config
from .models import RenderConfig, RenderConfigError

__all__ = [
    "RenderConfig",
    "RenderConfigError",
    "build_render_config",
    "load_render_config",
]
