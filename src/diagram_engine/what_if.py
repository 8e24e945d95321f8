# MIT License (see LICENSE)
"""
"What-if" exploration: slider parameters and recomputed results.

Each scenario declares its sliders (range, step, default), a calculation
that maps slider values to CalculationResult rows, and a few suggested
experiments. explore() snaps every value to its slider grid, clamps it into
range, and recomputes from scratch; nothing is cached between calls.

Typical usage:
    from diagram_engine.what_if import explore, SCENARIOS

    explore("inclined_plane", angle=45)
    SCENARIOS["projectile"].apply("optimal-angle")
"""
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Callable, Mapping

from .constants import GRAVITY
from .kernel import (
    atwood_results,
    circular_motion_results,
    collision_results,
    free_body_results,
    inclined_plane_results,
    projectile_results,
)
from .types import CalculationResult


@dataclass(frozen=True)
class ParameterDefinition:
    """One slider: value range, grid step, default and unit."""
    name: str
    label: str
    default: float
    min: float
    max: float
    step: float
    unit: str = ""

    def clamp(self, value: float) -> float:
        """Snap value to the slider grid anchored at min, then clamp into [min, max]."""
        if self.step > 0:
            value = self.min + round((value - self.min) / self.step) * self.step
        value = min(self.max, max(self.min, value))
        # Strip float noise left by the grid arithmetic.
        return round(value, 10)


@dataclass(frozen=True)
class Suggestion:
    """A suggested experiment: a question and the slider changes that answer it."""
    id: str
    question: str
    changes: Mapping[str, float]
    insight: str


@dataclass(frozen=True)
class Scenario:
    name: str
    parameters: tuple[ParameterDefinition, ...]
    calculate: Callable[[Mapping[str, float], float], list[CalculationResult]]
    suggestions: tuple[Suggestion, ...] = ()

    def parameter(self, name: str) -> ParameterDefinition:
        for p in self.parameters:
            if p.name == name:
                return p
        raise ValueError(f"Scenario '{self.name}' has no parameter '{name}'")

    def defaults(self) -> dict[str, float]:
        return {p.name: p.default for p in self.parameters}

    def resolve(self, **values: float) -> dict[str, float]:
        """Defaults overlaid with `values`, each snapped and clamped."""
        resolved = self.defaults()
        for name, value in values.items():
            resolved[name] = self.parameter(name).clamp(float(value))
        return resolved

    def results(self, g: float = GRAVITY, **values: float) -> list[CalculationResult]:
        return self.calculate(self.resolve(**values), g)

    def apply(self, suggestion_id: str, **values: float) -> dict[str, float]:
        """Slider values after applying a suggestion on top of `values`."""
        for s in self.suggestions:
            if s.id == suggestion_id:
                return self.resolve(**{**values, **s.changes})
        raise ValueError(f"Scenario '{self.name}' has no suggestion '{suggestion_id}'")


# =============================================================================
# Slider presets
# =============================================================================

PRESETS: dict[str, ParameterDefinition] = {
    "mass": ParameterDefinition("mass", "Mass", 5.0, 0.1, 100.0, 0.1, "kg"),
    "angle": ParameterDefinition("angle", "Angle", 30.0, 0.0, 90.0, 1.0, "°"),
    "friction": ParameterDefinition("friction", "Friction Coefficient", 0.3, 0.0, 1.0, 0.01),
    "velocity": ParameterDefinition("velocity", "Velocity", 10.0, 0.0, 50.0, 0.5, "m/s"),
    "radius": ParameterDefinition("radius", "Radius", 2.0, 0.1, 10.0, 0.1, "m"),
    "height": ParameterDefinition("height", "Height", 0.0, 0.0, 50.0, 0.5, "m"),
    "force": ParameterDefinition("force", "Force", 50.0, 0.0, 500.0, 1.0, "N"),
}


def preset(kind: str, **changes) -> ParameterDefinition:
    """A preset slider with some fields replaced."""
    return replace(PRESETS[kind], **changes)


# =============================================================================
# Scenarios
# =============================================================================

INCLINED_PLANE = Scenario(
    name="inclined_plane",
    parameters=(
        preset("mass", default=5.0, max=20.0),
        preset("angle", default=30.0, max=60.0),
        preset("friction", default=0.3),
    ),
    calculate=lambda v, g: inclined_plane_results(v["mass"], v["angle"], v["friction"], g),
    suggestions=(
        Suggestion("steep-angle", "What if the angle was steeper?", {"angle": 45.0},
                   "A steeper angle increases the parallel component of weight, making sliding more likely."),
        Suggestion("no-friction", "What if there was no friction?", {"friction": 0.0},
                   "Without friction, the object will always slide down regardless of angle (except 0°)."),
        Suggestion("critical-angle", "What angle makes it start sliding?", {"angle": 17.0},
                   "The critical angle depends on the friction coefficient: tan(θ) = μ."),
        Suggestion("double-mass", "What if the mass was doubled?", {"mass": 10.0},
                   "Doubling mass doubles all forces, but acceleration stays the same."),
    ),
)

FREE_BODY = Scenario(
    name="fbd",
    parameters=(
        preset("mass", default=5.0, max=50.0),
        preset("force", name="applied_force", label="Applied Force", default=20.0, max=100.0),
        preset("angle", name="applied_angle", label="Force Angle", default=0.0, min=-45.0, max=45.0),
        preset("friction", default=0.2),
    ),
    calculate=lambda v, g: free_body_results(v["mass"], v["applied_force"], v["applied_angle"], v["friction"], g),
    suggestions=(
        Suggestion("no-push", "What if nobody pushes?", {"applied_force": 0.0},
                   "With no applied force, friction has nothing to oppose and the block stays at rest."),
        Suggestion("pull-up", "What if the force pulls upward?", {"applied_angle": 30.0},
                   "Pulling upward lowers the normal force, and with it the friction."),
    ),
)

PROJECTILE = Scenario(
    name="projectile",
    parameters=(
        preset("velocity", name="initial_velocity", label="Initial Velocity", default=20.0, max=50.0),
        preset("angle", name="launch_angle", label="Launch Angle", default=45.0, min=15.0, max=75.0),
        preset("height", name="initial_height", label="Initial Height", default=0.0, max=20.0),
    ),
    calculate=lambda v, g: projectile_results(v["initial_velocity"], v["launch_angle"], v["initial_height"], g),
    suggestions=(
        Suggestion("optimal-angle", "What angle gives maximum range?", {"launch_angle": 45.0},
                   "On level ground, 45° gives the maximum range."),
        Suggestion("high-angle", "What if launched nearly vertical?", {"launch_angle": 75.0},
                   "A high angle trades range for height and flight time."),
        Suggestion("low-angle", "What if launched at a low angle?", {"launch_angle": 15.0},
                   "15° and 75° give the same range on level ground."),
        Suggestion("double-velocity", "What if velocity was doubled?", {"initial_velocity": 40.0},
                   "Range grows with the square of the launch speed, so it quadruples."),
    ),
)

CIRCULAR = Scenario(
    name="circular",
    parameters=(
        preset("mass", default=2.0),
        preset("velocity", default=5.0, max=20.0),
        preset("radius", default=2.0, max=5.0),
    ),
    calculate=lambda v, g: circular_motion_results(v["mass"], v["velocity"], v["radius"]),
    suggestions=(
        Suggestion("double-speed", "What if the speed was doubled?", {"velocity": 10.0},
                   "Centripetal force grows with v², so doubling speed quadruples it."),
        Suggestion("wider-circle", "What if the circle was wider?", {"radius": 4.0},
                   "At the same speed, a larger radius needs less centripetal force."),
    ),
)

COLLISION = Scenario(
    name="collision",
    parameters=(
        ParameterDefinition("mass1", "Mass 1", 2.0, 0.1, 20.0, 0.1, "kg"),
        ParameterDefinition("mass2", "Mass 2", 3.0, 0.1, 20.0, 0.1, "kg"),
        ParameterDefinition("velocity1", "Velocity 1", 5.0, -10.0, 10.0, 0.5, "m/s"),
        ParameterDefinition("velocity2", "Velocity 2", -2.0, -10.0, 10.0, 0.5, "m/s"),
        ParameterDefinition("elasticity", "Elasticity", 1.0, 0.0, 1.0, 0.1),
    ),
    calculate=lambda v, g: collision_results(v["mass1"], v["mass2"], v["velocity1"], v["velocity2"], v["elasticity"]),
    suggestions=(
        Suggestion("stick-together", "What if the objects stick together?", {"elasticity": 0.0},
                   "Momentum is still conserved, but kinetic energy is lost."),
        Suggestion("equal-masses", "What if the masses were equal?", {"mass1": 2.0, "mass2": 2.0},
                   "In an elastic collision equal masses swap velocities."),
    ),
)

PULLEY = Scenario(
    name="pulley",
    parameters=(
        ParameterDefinition("mass1", "Mass 1", 5.0, 0.1, 20.0, 0.1, "kg"),
        ParameterDefinition("mass2", "Mass 2", 3.0, 0.1, 20.0, 0.1, "kg"),
    ),
    calculate=lambda v, g: atwood_results(v["mass1"], v["mass2"], g),
    suggestions=(
        Suggestion("balanced", "What if both masses were equal?", {"mass1": 4.0, "mass2": 4.0},
                   "Equal masses balance: no acceleration, and tension equals each weight."),
    ),
)

SCENARIOS: dict[str, Scenario] = {
    s.name: s for s in (INCLINED_PLANE, FREE_BODY, PROJECTILE, CIRCULAR, COLLISION, PULLEY)
}


def explore(name: str, g: float = GRAVITY, **values: float) -> list[CalculationResult]:
    """
    Recompute a scenario's results for slider values.

    Args:
        name: Scenario name (see SCENARIOS).
        g: Gravitational acceleration.
        **values: Slider values by parameter name; missing ones use defaults.

    Raises:
        ValueError: If the scenario or a parameter name is unknown.
    """
    if name not in SCENARIOS:
        raise ValueError(f"Unknown what-if scenario: '{name}'")
    return SCENARIOS[name].results(g, **values)
