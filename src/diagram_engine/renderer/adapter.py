# MIT License (see LICENSE)
"""
Renderer adapters for diagram frames.

The engine only produces frames: which elements are visible, where force
arrows start, and when each element should enter. Drawing is left to an
adapter. This module provides the abstract interface plus text, no-op and
buffering implementations.
"""
from __future__ import annotations
import logging
import sys
from abc import ABC, abstractmethod
from typing import Any, Sequence, TextIO

from ..config import EngineConfig
from ..diagrams import Diagram, DiagramFailure, DiagramFrame, build_diagrams
from ..types import Force

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = "This diagram could not be displayed."


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Subclasses implement the drawing methods for a graphics backend (SVG,
    canvas, a web front end, ...).

    Usage:
        renderer = MyRenderer()
        frame = diagram.frame()
        renderer.begin_frame(frame)
        for force in frame.forces:
            renderer.draw_element(force, frame)
        renderer.end_frame()

    Or use the convenience method:
        renderer.render_diagram(diagram)
    """

    @abstractmethod
    def begin_frame(self, frame: DiagramFrame) -> None:
        """
        Begin drawing a diagram at one step.

        Args:
            frame: Snapshot of the diagram at its current step.
        """
        ...

    @abstractmethod
    def draw_element(self, force: Force, frame: DiagramFrame) -> None:
        """
        Draw one visible force arrow.

        Args:
            force: The force to draw; its anchor is frame.anchors[force.name].
            frame: The frame being drawn.
        """
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    @abstractmethod
    def draw_fallback(self, failure: DiagramFailure) -> None:
        """Draw the placeholder shown in place of a diagram that failed validation."""
        ...

    def render_diagram(self, diagram: Diagram, reduced_motion: bool = False) -> DiagramFrame:
        """
        Render a diagram at its current step.

        Returns:
            The frame that was drawn.
        """
        frame = diagram.frame(reduced_motion=reduced_motion)
        self.begin_frame(frame)
        for force in frame.forces:
            self.draw_element(force, frame)
        self.end_frame()
        return frame


class DebugRenderer(RendererAdapter):
    """
    Text renderer for development and testing.

    Writes a human-readable description of each frame to a stream (stdout
    by default).

    Output:
        === fbd step 2/4 [normal] ===
        weight     W   49.00 N @ -90.0° from (0.00, 0.00) +0.20s
        normal     N   49.00 N @  90.0° from (0.00, 25.00) +0.45s
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True):
        """
        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, include anchors, entrance delays and results.
        """
        self.output = output or sys.stdout
        self.verbose = verbose
        self._delays: dict[str, float] = {}

    def begin_frame(self, frame: DiagramFrame) -> None:
        self._delays = {t.element_id: t.delay for t in frame.timings}
        title = f" {frame.title}" if frame.title else ""
        self.output.write(
            f"=== {frame.diagram_type}{title} step {frame.current_step + 1}/{frame.total_steps}"
            f" [{frame.current_step_id}] ===\n"
        )
        if self.verbose:
            for r in frame.results:
                marker = "*" if r.is_primary else " "
                self.output.write(f"{marker} {r.label}: {r.formatted}\n")

    def draw_element(self, force: Force, frame: DiagramFrame) -> None:
        symbol = force.symbol or ""
        if force.subscript:
            symbol += f"_{force.subscript}"
        line = f"{force.name:<10} {symbol:<4} {force.magnitude:.2f} N @ {force.angle:6.1f}°"
        if self.verbose:
            anchor = frame.anchors.get(force.name)
            if anchor is not None:
                line += f" from ({anchor[0]:.2f}, {anchor[1]:.2f})"
            if force.name in self._delays:
                line += f" +{self._delays[force.name]:.2f}s"
        if force.name in frame.highlighted_forces:
            line += " <"
        self.output.write(line + "\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()

    def draw_fallback(self, failure: DiagramFailure) -> None:
        self.output.write(f"=== diagram {failure.index} unavailable ===\n{FALLBACK_MESSAGE}\n")
        if self.verbose:
            self.output.write(f"({failure.message})\n")
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """
    No-op renderer.

    Useful as a placeholder, or to drive step logic without drawing.
    """

    def begin_frame(self, frame: DiagramFrame) -> None:
        pass

    def draw_element(self, force: Force, frame: DiagramFrame) -> None:
        pass

    def end_frame(self) -> None:
        pass

    def draw_fallback(self, failure: DiagramFailure) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Renderer that records frames for later inspection.

    Example:
        renderer = BufferedRenderer()
        render_page(renderer, payloads)
        for entry in renderer.frames:
            print(entry["type"], entry.get("forces"))
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, frame: DiagramFrame) -> None:
        self._current_frame = {
            "type": frame.diagram_type,
            "step": frame.current_step,
            "total_steps": frame.total_steps,
            "step_id": frame.current_step_id,
            "timings": {t.element_id: (t.delay, t.duration) for t in frame.timings},
            "results": [r.formatted for r in frame.results],
            "forces": [],
        }

    def draw_element(self, force: Force, frame: DiagramFrame) -> None:
        if self._current_frame is None:
            return
        anchor = frame.anchors.get(force.name)
        self._current_frame["forces"].append({
            "name": force.name,
            "type": force.type,
            "magnitude": force.magnitude,
            "angle": force.angle,
            "anchor": anchor.tolist() if anchor is not None else None,
            "highlighted": force.name in frame.highlighted_forces,
        })

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def draw_fallback(self, failure: DiagramFailure) -> None:
        self.frames.append({
            "type": failure.diagram_type,
            "fallback": FALLBACK_MESSAGE,
            "error": failure.message,
        })

    def clear(self) -> None:
        """Clear all buffered frames."""
        self.frames.clear()


def render_page(
    renderer: RendererAdapter,
    payloads: Sequence[Any],
    config: EngineConfig | None = None,
    reduced_motion: bool = False,
) -> list[Diagram | DiagramFailure]:
    """
    Build and render every diagram on a page.

    A diagram whose payload is invalid is drawn as a fallback; the others
    render normally.

    Returns:
        The built diagrams, with DiagramFailure entries for invalid payloads.
    """
    built = build_diagrams(payloads, config)
    failed = 0
    for item in built:
        if isinstance(item, Diagram):
            renderer.render_diagram(item, reduced_motion=reduced_motion)
        else:
            renderer.draw_fallback(item)
            failed += 1
    logger.debug("rendered %d diagrams, %d fallbacks", len(built) - failed, failed)
    return built
