# MIT License (see LICENSE)
"""
Diagram assembly: one object per displayed diagram.

plan_diagram() dispatches on the diagram type tag to a builder that derives,
once, everything static about the diagram: its step definitions, the forces
it can show (payload forces plus derived components and net force), their
anchors, named points such as trajectory samples, and the what-if results.

Diagram wraps a plan with a DiagramStateAdapter and an
AnimationChoreographer. Each call to frame() returns an immutable snapshot
of what the renderer should show at the current step, including entrance
timings for whatever was revealed since the previous frame.

build_diagrams() turns a page of raw payloads into Diagrams, replacing each
payload that fails validation with a DiagramFailure so the others still
render.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Sequence

import numpy as np

from .config import EngineConfig
from .errors import InvalidDiagramData
from .io.json_io import diagram_from_json
from .kernel import (
    atwood_results,
    calculate_projectile,
    circular_motion_results,
    collision_results,
    free_body_results,
    inclined_plane_results,
    projectile_position,
    projectile_results,
    restitution_for,
    sample_trajectory,
)
from .kernel.results import create_result
from .layout import decompose_force, force_origins, is_decomposable, resultant
from .steps import (
    COMPONENTS_STEP,
    AnimationChoreographer,
    DiagramStateAdapter,
    ElementTiming,
    build_step_definitions,
    definitions_from_ids,
    plan_step_ids,
    reveal_batch,
)
from .steps.ordering import CIRCULAR_PLAN, COLLISION_PLAN, PROJECTILE_PLAN, PULLEY_PLAN
from .types import (
    CalculationResult,
    CircularMotionData,
    CollisionData,
    DiagramSpec,
    Force,
    FreeBodyData,
    InclinedPlaneData,
    PhysicsObject,
    ProjectileData,
    PulleyData,
    StepDefinition,
    object_center,
)
from .util import f64

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiagramPlan:
    """Static content of a diagram, derived once from its payload."""
    definitions: tuple[StepDefinition, ...]
    forces: tuple[Force, ...] = ()
    anchors: dict[str, np.ndarray] = field(default_factory=dict)
    points: dict[str, np.ndarray] = field(default_factory=dict)
    results: tuple[CalculationResult, ...] = ()
    trajectory: np.ndarray | None = None


@dataclass(frozen=True)
class DiagramFrame:
    """
    What to show at one step.

    Attributes:
        visible_forces: Names of revealed forces, in step order.
        highlighted_forces: Names revealed by the current step (spotlight).
        anchors: Anchor point per visible force.
        timings: Entrance timings of elements revealed since the last frame.
        points: Named diagram points (trajectory marks, apex, pulleys).
        trajectory: Sampled projectile path, shape (n, 2), if any.
    """
    diagram_type: str
    title: str | None
    current_step: int
    total_steps: int
    step_ids: tuple[str, ...]
    visible_steps: tuple[str, ...]
    current_step_id: str | None
    visible_forces: tuple[str, ...]
    highlighted_forces: tuple[str, ...]
    forces: tuple[Force, ...]
    anchors: dict[str, np.ndarray]
    timings: tuple[ElementTiming, ...]
    results: tuple[CalculationResult, ...]
    points: dict[str, np.ndarray]
    trajectory: np.ndarray | None = None


@dataclass(frozen=True)
class DiagramFailure:
    """Stand-in for a diagram whose payload failed validation."""
    index: int
    diagram_type: str | None
    message: str
    error: InvalidDiagramData


# =============================================================================
# Builders
# =============================================================================

def _net_force_extras(forces: Sequence[Force], enabled: bool) -> tuple[list[Force], dict[str, list[str]]]:
    if not enabled:
        return [], {}
    net = resultant(forces)
    return [net], {"net_force": [net.name]}


def _plan_free_body(spec: DiagramSpec, config: EngineConfig) -> DiagramPlan:
    data: FreeBodyData = spec.data
    obj = data.object
    extra, synthetic = _net_force_extras(data.forces, data.show_net_force)
    definitions = build_step_definitions(data.forces, net_force=data.show_net_force, synthetic_forces=synthetic)

    center = object_center(obj)
    anchors = force_origins(data.forces, obj, data.reference_angle, center,
                            default_size=config.default_object_size)
    for f in extra:
        anchors[f.name] = center

    if obj.mass is not None:
        applied = next((f for f in data.forces if f.kind == "applied"), None)
        results = free_body_results(
            obj.mass,
            applied.magnitude if applied else 0.0,
            applied.angle if applied else 0.0,
            data.friction_coefficient,
            config.gravity,
        )
    else:
        net = resultant(data.forces)
        results = [create_result(net.magnitude, "N", "Net Force", is_primary=True)]

    return DiagramPlan(definitions, tuple(data.forces) + tuple(extra), anchors, results=tuple(results))


def _plan_inclined_plane(spec: DiagramSpec, config: EngineConfig) -> DiagramPlan:
    data: InclinedPlaneData = spec.data
    obj = data.object
    center = object_center(obj)
    anchors = force_origins(data.forces, obj, data.angle, center, default_size=config.default_object_size)

    components: list[Force] = []
    if data.show_decomposition:
        for f in data.forces:
            if is_decomposable(f):
                for c in decompose_force(f, data.angle):
                    components.append(c)
                    anchors[c.name] = anchors[f.name]

    extra, synthetic = _net_force_extras(data.forces, data.show_net_force)
    for f in extra:
        anchors[f.name] = center
    if components:
        synthetic[COMPONENTS_STEP] = [c.name for c in components]

    definitions = build_step_definitions(
        data.forces,
        net_force=data.show_net_force,
        components=bool(components),
        synthetic_forces=synthetic,
    )
    results: list[CalculationResult] = []
    if obj.mass is not None:
        results = inclined_plane_results(obj.mass, data.angle, data.friction_coefficient, config.gravity)

    forces = tuple(data.forces) + tuple(components) + tuple(extra)
    return DiagramPlan(definitions, forces, anchors, results=tuple(results))


def _plan_projectile(spec: DiagramSpec, config: EngineConfig) -> DiagramPlan:
    data: ProjectileData = spec.data
    g = config.gravity
    definitions = definitions_from_ids(plan_step_ids(PROJECTILE_PLAN, data))
    path = sample_trajectory(data.speed, data.angle, g, data.initial, data.ground_level,
                             config.trajectory_points, data.scale)

    summary = calculate_projectile(data.speed, data.angle, 0.0, g)
    points = {
        "launch": f64(data.initial),
        "apex": projectile_position(data.speed, data.angle, summary.peak_time, g, data.initial, data.scale),
    }
    for t in data.time_intervals:
        points[f"t={t:g}"] = projectile_position(data.speed, data.angle, t, g, data.initial, data.scale)

    results = projectile_results(data.speed, data.angle, data.initial_height, g)
    return DiagramPlan(definitions, points=points, results=tuple(results), trajectory=path.points)


def _plan_pulley(spec: DiagramSpec, config: EngineConfig) -> DiagramPlan:
    data: PulleyData = spec.data
    definitions = definitions_from_ids(
        plan_step_ids(PULLEY_PLAN, data),
        {"tensions": [f.name for f in data.tensions]},
    )
    # Tension i acts on the pulley that mass i hangs from, else on pulley 0.
    by_pulley: dict[int, list[Force]] = {}
    for i, f in enumerate(data.tensions):
        k = data.masses[i].attached_to if i < len(data.masses) else 0
        by_pulley.setdefault(k, []).append(f)
    anchors: dict[str, np.ndarray] = {}
    for k, tensions in by_pulley.items():
        wheel = PhysicsObject(type="sphere", radius=data.pulleys[k].radius)
        anchors.update(force_origins(
            tensions, wheel, center=data.pulleys[k].position, default_size=config.default_object_size,
        ))
    points = {f"pulley{i}": f64(p.position) for i, p in enumerate(data.pulleys)}

    results: list[CalculationResult] = []
    # Two masses on the same pulley form an Atwood machine.
    if len(data.masses) == 2 and data.masses[0].attached_to == data.masses[1].attached_to:
        m1, m2 = (m.object.mass for m in data.masses)
        if m1 is not None and m2 is not None:
            results = atwood_results(m1, m2, config.gravity)
    return DiagramPlan(definitions, tuple(data.tensions), anchors, points, tuple(results))


def _plan_circular(spec: DiagramSpec, config: EngineConfig) -> DiagramPlan:
    data: CircularMotionData = spec.data
    ids = plan_step_ids(CIRCULAR_PLAN, data)
    # Forces go to the step named after their type, otherwise to setup.
    names: dict[str, list[str]] = {}
    for f in data.forces:
        names.setdefault(f.kind if f.kind in ids else ids[0], []).append(f.name)
    definitions = definitions_from_ids(ids, names)

    body = PhysicsObject(type="particle")
    anchors = force_origins(data.forces, body, default_size=config.default_object_size)
    results = circular_motion_results(data.mass, data.speed, data.radius)
    return DiagramPlan(definitions, tuple(data.forces), anchors, results=tuple(results))


def _plan_collision(spec: DiagramSpec, config: EngineConfig) -> DiagramPlan:
    data: CollisionData = spec.data
    definitions = definitions_from_ids(plan_step_ids(COLLISION_PLAN, data))
    a, b = data.bodies[0], data.bodies[1]
    e = restitution_for(data.collision_type, data.restitution)
    results = collision_results(a.mass, b.mass, a.velocity_before, b.velocity_before, e)
    return DiagramPlan(definitions, results=tuple(results))


DIAGRAM_BUILDERS: dict[str, Callable[[DiagramSpec, EngineConfig], DiagramPlan]] = {
    "fbd": _plan_free_body,
    "inclined_plane": _plan_inclined_plane,
    "projectile": _plan_projectile,
    "pulley": _plan_pulley,
    "circular": _plan_circular,
    "collision": _plan_collision,
}


def plan_diagram(spec: DiagramSpec, config: EngineConfig | None = None) -> DiagramPlan:
    """Derive the static plan of a validated diagram."""
    builder = DIAGRAM_BUILDERS.get(spec.type)
    if builder is None:
        raise InvalidDiagramData(f"no builder for diagram type {spec.type!r}", spec.type, "type")
    return builder(spec, config or EngineConfig())


# =============================================================================
# Diagram
# =============================================================================

class Diagram:
    """
    A configured diagram with its own step state.

    Args:
        spec: Validated diagram.
        config: Engine configuration (defaults to EngineConfig()).
        step_override: Visible step pushed by the tutoring driver, or None.
        on_step_request: Receives navigation requests in override mode.
        on_step_change: Notified of internal step changes.
    """

    def __init__(
        self,
        spec: DiagramSpec,
        config: EngineConfig | None = None,
        step_override: int | None = None,
        on_step_request: Callable[[int], None] | None = None,
        on_step_change: Callable[[int], None] | None = None,
    ):
        self.spec = spec
        self.config = config or EngineConfig()
        self.plan = plan_diagram(spec, self.config)
        self.state = DiagramStateAdapter(
            self.plan.definitions,
            step_override=step_override,
            initial_step=spec.visible_step,
            on_step_request=on_step_request,
            on_step_change=on_step_change,
        )
        self.choreographer = AnimationChoreographer.from_config(self.config)
        self._forces = {f.name: f for f in self.plan.forces}
        self._last_step: int | None = None

    @classmethod
    def from_json(cls, payload: Any, config: EngineConfig | None = None, **kwargs) -> "Diagram":
        return cls(diagram_from_json(payload), config, **kwargs)

    @property
    def type(self) -> str:
        return self.spec.type

    # Navigation passes straight through to the adapter.

    def next(self) -> int:
        return self.state.next()

    def prev(self) -> int:
        return self.state.prev()

    def go_to(self, step: int) -> int:
        return self.state.go_to(step)

    def update(self, step_override: int | None = None) -> None:
        self.state.update(step_override)

    def is_visible(self, step_id: str) -> bool:
        return self.state.is_visible(step_id)

    def is_current(self, step_id: str) -> bool:
        return self.state.is_current(step_id)

    def frame(self, reduced_motion: bool = False) -> DiagramFrame:
        """
        Snapshot for the renderer at the current step.

        Timings cover the elements revealed since the previous frame (the
        whole visible set on the first frame). Moving backward reveals
        nothing and yields no timings.
        """
        seq = self.state.sequencer
        previous = -1 if self._last_step is None else self._last_step
        timings = self.choreographer.schedule(
            reveal_batch(seq, previous),
            reduced_motion=reduced_motion or self.config.reduced_motion,
        )
        self._last_step = seq.current_step

        visible = tuple(n for n in seq.visible_force_names() if n in self._forces)
        current = seq.current_definition
        return DiagramFrame(
            diagram_type=self.spec.type,
            title=self.spec.title,
            current_step=seq.current_step,
            total_steps=seq.total_steps,
            step_ids=tuple(seq.step_ids),
            visible_steps=tuple(s for s in seq.step_ids if seq.is_visible(s)),
            current_step_id=current.id if current is not None else None,
            visible_forces=visible,
            highlighted_forces=tuple(seq.highlighted_force_names()),
            forces=tuple(self._forces[n] for n in visible),
            anchors={n: self.plan.anchors[n] for n in visible if n in self.plan.anchors},
            timings=tuple(timings),
            results=self.plan.results,
            points=dict(self.plan.points),
            trajectory=self.plan.trajectory,
        )

    def __repr__(self) -> str:
        return f"Diagram(type={self.spec.type!r}, {self.state!r})"


def build_diagrams(
    payloads: Sequence[Any],
    config: EngineConfig | None = None,
) -> list[Diagram | DiagramFailure]:
    """
    Build every diagram on a page.

    A payload that raises InvalidDiagramData becomes a DiagramFailure at the
    same position; the remaining payloads are unaffected.
    """
    out: list[Diagram | DiagramFailure] = []
    for i, payload in enumerate(payloads):
        try:
            out.append(Diagram.from_json(payload, config))
        except InvalidDiagramData as exc:
            logger.warning("diagram %d failed validation: %s", i, exc)
            out.append(DiagramFailure(i, exc.diagram_type, str(exc), exc))
    return out
