# MIT License (see LICENSE)
"""
Progressive reveal: step ordering, the step cursor, entrance timing and the
override/internal state adapter.

Typical usage:
    from diagram_engine.steps import build_step_definitions, DiagramStateAdapter

    defs = build_step_definitions(forces, net_force=True)
    state = DiagramStateAdapter(defs)
    state.next()
    state.is_visible("weight")
"""
from .ordering import (
    CANONICAL_FORCE_ORDER,
    COMPONENTS_STEP,
    OBJECT_STEP,
    SETUP_STEP,
    STEP_LABELS,
    TRAILING_STEPS,
    plan_step_ids,
    step_label,
)
from .sequencer import (
    RESERVED_STEP_IDS,
    StepSequencer,
    build_step_definitions,
    build_step_ids,
    definitions_from_ids,
    force_step_id,
)
from .choreography import AnimationChoreographer, ElementTiming, reveal_batch
from .adapter import INTERNAL, OVERRIDE, DiagramStateAdapter

__all__ = [
    # Ordering data
    "CANONICAL_FORCE_ORDER",
    "COMPONENTS_STEP",
    "OBJECT_STEP",
    "SETUP_STEP",
    "STEP_LABELS",
    "TRAILING_STEPS",
    "plan_step_ids",
    "step_label",
    # Sequencer
    "RESERVED_STEP_IDS",
    "StepSequencer",
    "build_step_definitions",
    "build_step_ids",
    "definitions_from_ids",
    "force_step_id",
    # Choreography
    "AnimationChoreographer",
    "ElementTiming",
    "reveal_batch",
    # Adapter
    "INTERNAL",
    "OVERRIDE",
    "DiagramStateAdapter",
]
