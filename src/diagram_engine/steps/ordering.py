# MIT License (see LICENSE)
"""
Pedagogy ordering tables.

These are data, not logic: the order in which forces are introduced, the
synthetic steps that close a sequence, the step titles, and the fixed step
plans of the scenario diagrams that are not built from a force set.

A step plan is a tuple of (step_id, flag) rows. A row with flag None is always
present; otherwise it is present only when the named attribute of the scenario
payload is truthy.
"""
from __future__ import annotations

OBJECT_STEP = "object"
SETUP_STEP = "setup"
COMPONENTS_STEP = "components"

# Order in which force types are introduced.
CANONICAL_FORCE_ORDER: tuple[str, ...] = (
    "weight",
    "normal",
    "friction",
    "tension",
    "applied",
    "drive",
    "resistance",
    "thrust",
    "lift",
    "drag",
    "spring",
    "buoyancy",
    "centripetal",
)

# Synthetic steps that close a sequence, in this order when enabled.
TRAILING_STEPS: tuple[str, ...] = ("net_force", "momentum", "energy")

STEP_LABELS: dict[str, str] = {
    "object": "Draw the object",
    "setup": "Setup",
    "weight": "Add weight force",
    "normal": "Add normal force",
    "friction": "Add friction force",
    "tension": "Add tension force",
    "applied": "Add applied force",
    "drive": "Add drive force",
    "resistance": "Add resistance force",
    "thrust": "Add thrust force",
    "lift": "Add lift force",
    "drag": "Add drag force",
    "spring": "Add spring force",
    "buoyancy": "Add buoyancy force",
    "centripetal": "Add centripetal force",
    "components": "Show force components",
    "net_force": "Show net force",
    "momentum": "Momentum conservation",
    "energy": "Energy comparison",
    # Projectile
    "launch": "Launch",
    "trajectory": "Draw the trajectory",
    "velocity": "Show velocity",
    "acceleration": "Show acceleration",
    "max_height": "Maximum height",
    # Pulley
    "masses": "Add masses",
    "tensions": "Show tension forces",
    # Collision
    "before": "Before collision",
    "collision": "Collision",
    "after": "After collision",
}

StepPlan = tuple[tuple[str, str | None], ...]

PROJECTILE_PLAN: StepPlan = (
    ("launch", None),
    ("trajectory", None),
    ("velocity", "show_velocity_vectors"),
    ("components", "show_components"),
    ("acceleration", "show_acceleration"),
    ("max_height", None),
)

PULLEY_PLAN: StepPlan = (
    ("setup", None),
    ("masses", None),
    ("tensions", "tensions"),
    ("acceleration", "show_acceleration"),
)

CIRCULAR_PLAN: StepPlan = (
    ("setup", None),
    ("velocity", "show_velocity"),
    ("centripetal", "show_centripetal_force"),
    ("acceleration", "show_acceleration"),
)

COLLISION_PLAN: StepPlan = (
    ("setup", None),
    ("before", "show_before"),
    ("collision", "show_after"),
    ("after", "show_after"),
    ("momentum", "show_momentum"),
    ("energy", "show_energy"),
)


def step_label(step_id: str) -> str:
    """Display title of a step; unknown ids (custom force types) are derived."""
    label = STEP_LABELS.get(step_id)
    if label is not None:
        return label
    name = step_id[: -len("_force")] if step_id.endswith("_force") else step_id
    return f"Add {name.replace('_', ' ')} force"


def plan_step_ids(plan: StepPlan, data: object) -> list[str]:
    """Step ids of a plan whose flags are set on `data`."""
    return [step_id for step_id, flag in plan if flag is None or getattr(data, flag, False)]
