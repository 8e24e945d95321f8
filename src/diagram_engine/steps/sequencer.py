# MIT License (see LICENSE)
"""
Reveal-step ordering and the step cursor.

build_step_ids() turns the set of force types present in a diagram into the
ordered list of reveal steps:

    lead step ("object")
    canonical force types that are present, in CANONICAL_FORCE_ORDER
    other force types, in first-seen order
    "components" when decomposition is shown
    enabled trailing steps: net_force, momentum, energy

StepSequencer holds the cursor over such a list. Navigation never raises:
next() at the last step and prev() at step 0 are no-ops, and go_to() clamps.
Visibility is monotonic: a step is visible iff its index is <= current step.
"""
from __future__ import annotations
from typing import Iterable, Mapping, Sequence

from ..types import DiagramStepState, Force, StepDefinition
from .ordering import (
    CANONICAL_FORCE_ORDER,
    COMPONENTS_STEP,
    OBJECT_STEP,
    SETUP_STEP,
    TRAILING_STEPS,
    step_label,
)


# Step ids a force type may not take over.
RESERVED_STEP_IDS: frozenset[str] = frozenset({OBJECT_STEP, SETUP_STEP, COMPONENTS_STEP, *TRAILING_STEPS})


def force_step_id(force_type: str, lead: str = OBJECT_STEP) -> str:
    """Step id revealing forces of force_type; reserved ids are suffixed with "_force"."""
    t = force_type.lower()
    if t in RESERVED_STEP_IDS or t == lead:
        return f"{t}_force"
    return t


def build_step_ids(
    force_types: Iterable[str],
    net_force: bool = False,
    momentum: bool = False,
    energy: bool = False,
    lead: str = OBJECT_STEP,
    components: bool = False,
) -> list[str]:
    """
    Ordered step ids for a set of force types.

    Types are compared lowercase and duplicates collapse to one step. A type
    that equals a reserved step id gets the step "<type>_force" instead. Types
    outside the canonical table keep their first-seen order; when force_types
    is a set (which has no meaningful order) they are sorted instead, so equal
    sets always give equal sequences.

    Args:
        force_types: Force types present in the diagram.
        net_force, momentum, energy: Enable the trailing synthetic steps.
        lead: Id of the leading step.
        components: Insert a "components" step after the force steps.

    Returns:
        Step ids, lead step first.
    """
    if isinstance(force_types, (set, frozenset)):
        force_types = sorted(force_types)
    present: list[str] = []
    for t in force_types:
        step_id = force_step_id(t, lead)
        if step_id not in present:
            present.append(step_id)

    canonical = set(CANONICAL_FORCE_ORDER)
    ids = [lead]
    ids.extend(t for t in CANONICAL_FORCE_ORDER if t in present)
    ids.extend(t for t in present if t not in canonical)
    if components:
        ids.append(COMPONENTS_STEP)
    enabled = {"net_force": net_force, "momentum": momentum, "energy": energy}
    ids.extend(s for s in TRAILING_STEPS if enabled[s])
    return ids


def definitions_from_ids(
    step_ids: Sequence[str],
    force_names: dict[str, Sequence[str]] | None = None,
) -> tuple[StepDefinition, ...]:
    """Wrap step ids into StepDefinitions, attaching force names per id."""
    force_names = force_names or {}
    return tuple(
        StepDefinition(
            id=step_id,
            ordinal=i,
            force_names=tuple(force_names.get(step_id, ())),
            label=step_label(step_id),
        )
        for i, step_id in enumerate(step_ids)
    )


def build_step_definitions(
    forces: Sequence[Force],
    net_force: bool = False,
    momentum: bool = False,
    energy: bool = False,
    lead: str = OBJECT_STEP,
    components: bool = False,
    synthetic_forces: Mapping[str, Sequence[str]] | None = None,
) -> tuple[StepDefinition, ...]:
    """
    Step definitions for a force set.

    Each force is attached to the step of its type, in payload order.
    synthetic_forces maps synthetic step ids ("components", "net_force") to
    the names of the derived forces they reveal.
    """
    ids = build_step_ids([f.type for f in forces], net_force, momentum, energy, lead, components)
    names: dict[str, list[str]] = {}
    for f in forces:
        names.setdefault(force_step_id(f.kind, lead), []).append(f.name)
    for step_id, extra in (synthetic_forces or {}).items():
        names.setdefault(step_id, []).extend(extra)
    return definitions_from_ids(ids, names)


class StepSequencer:
    """
    Cursor over an immutable list of step definitions.

    The state is a DiagramStepState replaced by a single assignment on every
    move, so there is no observable intermediate state.
    """

    def __init__(self, definitions: Sequence[StepDefinition], initial_step: int = 0):
        self._definitions = tuple(definitions)
        self._index = {d.id: i for i, d in enumerate(self._definitions)}
        self._state = DiagramStepState(initial_step, len(self._definitions))

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def definitions(self) -> tuple[StepDefinition, ...]:
        return self._definitions

    @property
    def step_ids(self) -> list[str]:
        return [d.id for d in self._definitions]

    @property
    def state(self) -> DiagramStepState:
        return self._state

    @property
    def current_step(self) -> int:
        return self._state.current_step

    @property
    def total_steps(self) -> int:
        return self._state.total_steps

    @property
    def current_definition(self) -> StepDefinition | None:
        if not self._definitions:
            return None
        return self._definitions[self._state.current_step]

    @property
    def progress(self) -> float:
        """Fraction of the sequence revealed, 0.0 at the first step and 1.0 at the last."""
        if self.total_steps <= 1:
            return 1.0
        return self.current_step / (self.total_steps - 1)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def next(self) -> int:
        return self.go_to(self._state.current_step + 1)

    def prev(self) -> int:
        return self.go_to(self._state.current_step - 1)

    def go_to(self, step: int) -> int:
        """Move to `step`, clamped into range. Returns the new current step."""
        self._state = DiagramStepState(step, self._state.total_steps)
        return self._state.current_step

    # ------------------------------------------------------------------
    # Visibility
    # ------------------------------------------------------------------

    def index_of(self, step_id: str) -> int | None:
        return self._index.get(step_id)

    def is_visible(self, step_id: str) -> bool:
        idx = self._index.get(step_id)
        return idx is not None and idx <= self._state.current_step

    def is_current(self, step_id: str) -> bool:
        idx = self._index.get(step_id)
        return idx is not None and idx == self._state.current_step

    def visible_force_names(self) -> list[str]:
        """Names of all revealed forces, in step order."""
        names: list[str] = []
        for d in self._definitions[: self._state.current_step + 1]:
            names.extend(d.force_names)
        return names

    def highlighted_force_names(self) -> list[str]:
        """Names of the forces revealed by the current step."""
        current = self.current_definition
        return list(current.force_names) if current is not None else []

    def is_force_visible(self, name: str) -> bool:
        return name in self.visible_force_names()

    def revealed_between(self, previous_step: int, current_step: int | None = None) -> list[StepDefinition]:
        """
        Steps that became visible moving from previous_step to current_step
        (default: the current step). Empty when moving backward or standing still.
        """
        if current_step is None:
            current_step = self._state.current_step
        lo = max(0, previous_step + 1)
        hi = min(current_step, len(self._definitions) - 1)
        return list(self._definitions[lo: hi + 1])

    def __len__(self) -> int:
        return len(self._definitions)

    def __repr__(self) -> str:
        return f"StepSequencer(step={self.current_step}/{self.total_steps}, ids={self.step_ids})"
