# MIT License (see LICENSE)
"""
Exception types raised by the engine.

Only payload validation and the optional sandbox raise. The kernel, the
layout engine and step navigation never raise for out-of-range input.
"""
from __future__ import annotations


class InvalidDiagramData(ValueError):
    """
    A diagram payload is structurally invalid.

    Renderers catch this per diagram and show a fallback message for that
    one diagram while the rest of the page keeps rendering.

    Attributes:
        diagram_type: Type tag of the offending diagram (may be None when the
                      tag itself is missing).
        field: Dotted path of the offending field, if known.
    """

    def __init__(self, message: str, diagram_type: str | None = None, field: str | None = None):
        super().__init__(message)
        self.diagram_type = diagram_type
        self.field = field

    def __str__(self) -> str:
        base = super().__str__()
        if self.diagram_type:
            return f"invalid diagram data ({self.diagram_type}): {base}"
        return f"invalid diagram data: {base}"


class SandboxNotReady(RuntimeError):
    """The free-play sandbox was used before initialize() succeeded."""
