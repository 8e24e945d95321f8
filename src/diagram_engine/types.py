# MIT License (see LICENSE)
"""
Core type definitions for the diagram step engine.

Defines the value records passed between the components:
- Force, PhysicsObject: what a diagram shows.
- StepDefinition, DiagramStepState: the reveal sequence and its cursor.
- CalculationResult: one row of a "what-if" panel.
- Scenario payloads (FreeBodyData, InclinedPlaneData, ...): the typed data
  behind each diagram type tag.

All records are frozen. The engine never mutates a payload; a changed force
set means building new step definitions from scratch.
"""
from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from .util import f64


# =============================================================================
# Force and object descriptors
# =============================================================================

# Force types the engine knows about. The type field stays an open string so
# payloads may introduce new ones; unknown types get default layout and are
# sequenced after the canonical ones.
KNOWN_FORCE_TYPES: tuple[str, ...] = (
    "weight", "normal", "friction", "tension", "applied", "drive",
    "resistance", "thrust", "lift", "drag", "spring", "buoyancy",
    "centripetal", "net", "component", "electric", "magnetic", "reaction",
    "custom",
)

KNOWN_OBJECT_TYPES: tuple[str, ...] = (
    "block", "sphere", "particle", "boat", "car", "truck", "airplane",
    "person", "rocket", "pendulum", "crate", "cylinder", "wedge", "pulley",
)


@dataclass(frozen=True)
class Force:
    """
    A force arrow in a diagram.

    Attributes:
        name: Identifier, unique within one diagram.
        type: Force type tag (see KNOWN_FORCE_TYPES), compared lowercase.
        magnitude: Size in newtons, never negative.
        angle: Direction in degrees, 0 = +x axis, counterclockwise positive.
        symbol: Display symbol such as "W" or "F_net".
        subscript: Display subscript such as "k" for f_k.
        color: Display color, passed through untouched.
        origin: Explicit anchor offset from the object center (diagram space).
                When present the layout engine uses it verbatim.
    """
    name: str
    type: str
    magnitude: float
    angle: float = 0.0
    symbol: str | None = None
    subscript: str | None = None
    color: str | None = None
    origin: tuple[float, float] | None = None

    @property
    def kind(self) -> str:
        """Normalized (lowercase) force type."""
        return self.type.lower()


@dataclass(frozen=True)
class PhysicsObject:
    """
    The body a diagram is drawn around.

    Only used to pick a layout shape and its size; the engine never changes it.

    Attributes:
        type: Object type tag (see KNOWN_OBJECT_TYPES).
        width, height: Extents for box-like objects.
        radius: Radius for round objects.
        mass: Mass in kg, used by what-if calculations.
        label: Display label.
        color: Display color.
        position: Center in diagram space, if the payload pins it.
    """
    type: str = "block"
    width: float | None = None
    height: float | None = None
    radius: float | None = None
    mass: float | None = None
    label: str | None = None
    color: str | None = None
    position: tuple[float, float] | None = None


# =============================================================================
# Step sequencing
# =============================================================================

@dataclass(frozen=True)
class StepDefinition:
    """
    One reveal step.

    Attributes:
        id: Unique step id, e.g. "object", "weight", "net_force".
        ordinal: Position in the sequence (0-based).
        force_names: Names of the forces revealed by this step, in payload
                     order. Empty for steps that reveal no force.
        label: Human readable step title for progress indicators.
    """
    id: str
    ordinal: int
    force_names: tuple[str, ...] = ()
    label: str = ""


@dataclass(frozen=True)
class DiagramStepState:
    """
    Step cursor of one diagram.

    Construction clamps current_step into [0, total_steps - 1] and
    total_steps to at least 1, so an out-of-range state cannot exist.
    """
    current_step: int = 0
    total_steps: int = 1

    def __post_init__(self) -> None:
        total = max(1, int(self.total_steps))
        object.__setattr__(self, "total_steps", total)
        object.__setattr__(self, "current_step", clamp_step(self.current_step, total))

    @property
    def at_start(self) -> bool:
        return self.current_step == 0

    @property
    def at_end(self) -> bool:
        return self.current_step == self.total_steps - 1


def clamp_step(step: int, total_steps: int) -> int:
    """Clamp a step index into [0, total_steps - 1]."""
    return max(0, min(int(step), max(1, total_steps) - 1))


# =============================================================================
# Calculation results
# =============================================================================

@dataclass(frozen=True)
class CalculationResult:
    """
    One computed quantity for a what-if panel.

    Attributes:
        value: Numeric value in SI units.
        unit: Unit string, e.g. "N" or "m/s²".
        label: Short display label.
        formatted: Display string, value with two decimals plus unit.
        is_primary: Marks the headline quantity of a result list.
        description: Longer explanation; defaults to the label.
    """
    value: float
    unit: str
    label: str
    formatted: str
    is_primary: bool = False
    description: str = ""


# =============================================================================
# Scenario payloads
# =============================================================================

@dataclass(frozen=True)
class FreeBodyData:
    """Free-body diagram: one object and the forces acting on it."""
    object: PhysicsObject
    forces: tuple[Force, ...]
    show_net_force: bool = False
    reference_angle: float = 0.0
    friction_coefficient: float = 0.0


@dataclass(frozen=True)
class InclinedPlaneData:
    """Block on a slope rising at `angle` degrees."""
    angle: float
    object: PhysicsObject
    forces: tuple[Force, ...]
    friction_coefficient: float = 0.0
    show_decomposition: bool = False
    show_net_force: bool = False


@dataclass(frozen=True)
class ProjectileData:
    """Projectile launched from `initial` at `speed` m/s and `angle` degrees."""
    speed: float
    angle: float
    initial: tuple[float, float] = (0.0, 0.0)
    initial_height: float = 0.0
    ground_level: float | None = None
    time_intervals: tuple[float, ...] = ()
    show_velocity_vectors: bool = False
    show_components: bool = False
    show_acceleration: bool = False
    scale: float = 1.0


@dataclass(frozen=True)
class Pulley:
    """A pulley wheel in diagram space."""
    position: tuple[float, float]
    radius: float
    fixed: bool = True


@dataclass(frozen=True)
class HangingMass:
    """A mass hanging from pulley number `attached_to` on `side`."""
    object: PhysicsObject
    attached_to: int
    side: str = "left"


@dataclass(frozen=True)
class PulleyData:
    """Pulley system; two masses on one pulley form an Atwood machine."""
    pulleys: tuple[Pulley, ...]
    masses: tuple[HangingMass, ...]
    tensions: tuple[Force, ...] = ()
    show_acceleration: bool = False


@dataclass(frozen=True)
class CircularMotionData:
    """Object of `mass` moving at `speed` on a circle of `radius`."""
    radius: float
    mass: float = 1.0
    speed: float = 0.0
    forces: tuple[Force, ...] = ()
    show_velocity: bool = True
    show_centripetal_force: bool = True
    show_acceleration: bool = False


@dataclass(frozen=True)
class CollisionBody:
    """A body in a 1-D collision with its velocity before (and maybe after)."""
    object: PhysicsObject
    velocity_before: float
    velocity_after: float | None = None

    @property
    def mass(self) -> float:
        return float(self.object.mass or 0.0)


@dataclass(frozen=True)
class CollisionData:
    """Head-on collision of two bodies."""
    bodies: tuple[CollisionBody, ...]
    collision_type: str = "elastic"
    restitution: float | None = None
    show_before: bool = True
    show_after: bool = True
    show_momentum: bool = False
    show_energy: bool = False


ScenarioData = (
    FreeBodyData | InclinedPlaneData | ProjectileData | PulleyData
    | CircularMotionData | CollisionData
)


@dataclass(frozen=True)
class DiagramSpec:
    """
    A validated diagram: its type tag, typed data and the visible step the
    payload asked for.
    """
    type: str
    data: ScenarioData
    visible_step: int = 0
    title: str | None = None


def object_center(obj: PhysicsObject, default: tuple[float, float] = (0.0, 0.0)) -> np.ndarray:
    """Center of an object in diagram space as a float64 array."""
    return f64(obj.position if obj.position is not None else default)
