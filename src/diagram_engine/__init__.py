# MIT License (see LICENSE)
"""
diagram_engine - step engine for progressively revealed physics diagrams.

This package computes what a tutoring UI needs to draw textbook physics
diagrams one step at a time: closed-form physics results, where force arrows
start, in which order elements are revealed and when they animate in.

Main entry points:
    - Diagram: A configured diagram with its own step state.
    - build_diagrams: Build a page of payloads with per-diagram fallbacks.
    - DiagramStateAdapter: Override/internal step control.
    - AnimationChoreographer: Entrance timings for a reveal batch.
    - force_origin: Anchor point of a force arrow.
    - explore: What-if recomputation for slider values.

Submodules:
    - kernel: Closed-form physics per scenario.
    - layout: Force anchoring and decomposition.
    - steps: Step ordering, cursor, choreography and state adapter.
    - io: Payload parsing and JSON serialization.
    - renderer: Optional rendering adapters.

Example:
    from diagram_engine import Diagram

    diagram = Diagram.from_json({"type": "fbd", "data": {...}})
    diagram.next()
    frame = diagram.frame()

The package logs through the standard logging module under the
"diagram_engine" logger and installs only a NullHandler.
"""
import logging

from .config import EngineConfig
from .diagrams import Diagram, DiagramFailure, DiagramFrame, build_diagrams
from .errors import InvalidDiagramData, SandboxNotReady
from .layout import decompose_force, force_origin
from .sandbox import SandboxLoader
from .steps import (
    AnimationChoreographer,
    DiagramStateAdapter,
    StepSequencer,
    build_step_ids,
)
from .types import CalculationResult, DiagramStepState, Force, PhysicsObject, StepDefinition
from .what_if import explore

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Diagrams
    "Diagram",
    "DiagramFailure",
    "DiagramFrame",
    "build_diagrams",
    # Configuration and errors
    "EngineConfig",
    "InvalidDiagramData",
    "SandboxNotReady",
    # Components
    "AnimationChoreographer",
    "DiagramStateAdapter",
    "StepSequencer",
    "build_step_ids",
    "decompose_force",
    "force_origin",
    "explore",
    "SandboxLoader",
    # Types
    "CalculationResult",
    "DiagramStepState",
    "Force",
    "PhysicsObject",
    "StepDefinition",
]
