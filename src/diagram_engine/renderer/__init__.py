# MIT License (see LICENSE)
"""
Rendering adapters for diagram frames.

This subpackage provides abstract and concrete renderer implementations:
    - RendererAdapter: Abstract base class defining the rendering interface.
    - DebugRenderer: Text/console output for debugging.
    - NullRenderer: No-op renderer.
    - BufferedRenderer: Records frames for inspection or export.
    - render_page: Renders a page of payloads with per-diagram fallbacks.

The engine has no drawing dependency; these adapters are optional.

Typical usage:
    from diagram_engine.renderer import DebugRenderer, render_page

    render_page(DebugRenderer(), payloads)
"""
from .adapter import (
    FALLBACK_MESSAGE,
    RendererAdapter,
    DebugRenderer,
    NullRenderer,
    BufferedRenderer,
    render_page,
)

__all__ = [
    "FALLBACK_MESSAGE",
    "RendererAdapter",
    "DebugRenderer",
    "NullRenderer",
    "BufferedRenderer",
    "render_page",
]
