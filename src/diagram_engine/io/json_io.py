# MIT License (see LICENSE)
"""
JSON parsing and validation for diagram payloads.

A diagram arrives from the tutoring backend as a type tag plus a data
payload. Keys are camelCase, as the backend sends them; points may be given
as {"x": .., "y": ..} or [x, y].

JSON Schema Overview:
---------------------
{
  "type": "fbd" | "inclined_plane" | "projectile" | "pulley"
          | "circular" | "collision",
  "visibleStep": int,              # Optional initial step
  "title": string,                 # Optional
  "data": { ... }                  # Per type, see below
}

Shared records:
  object: {"type": string, "position": point, "width": float,
           "height": float, "radius": float, "mass": float,
           "label": string, "color": string}
  force:  {"name": string, "type": string, "magnitude": float >= 0,
           "angle": float, "symbol": string, "subscript": string,
           "color": string, "origin": point}

fbd:             {"object", "forces", "showNetForce", "referenceAngle",
                  "frictionCoefficient"}
inclined_plane:  {"angle", "object", "forces", "frictionCoefficient",
                  "showDecomposition", "showNetForce"}
projectile:      {"initialVelocity": {"magnitude", "angle"}, "initial",
                  "initialHeight", "groundLevel", "timeIntervals",
                  "showVelocityVectors", "showComponents",
                  "showAcceleration", "scale"}
pulley:          {"pulleys": [{"position", "radius", "fixed"}],
                  "masses": [{"object", "attachedTo": int, "side"}],
                  "tensions": [force], "showAcceleration"}
circular:        {"radius", "mass", "speed", "forces", "showVelocity",
                  "showCentripetalForce", "showAcceleration"}
collision:       {"objects": [{"object", "velocity": {"before", "after"}}],
                  "collisionType": "elastic" | "inelastic"
                                   | "perfectly_inelastic",
                  "restitution", "showBefore", "showAfter",
                  "showMomentum", "showEnergy"}

Every structural problem raises InvalidDiagramData tagged with the diagram
type and the offending field.
"""
from __future__ import annotations
import json
import logging
from typing import TYPE_CHECKING, Any, Callable

from ..errors import InvalidDiagramData
from ..kernel.collision import RESTITUTION_BY_TYPE
from ..types import (
    CalculationResult,
    CircularMotionData,
    CollisionBody,
    CollisionData,
    DiagramSpec,
    Force,
    FreeBodyData,
    HangingMass,
    InclinedPlaneData,
    PhysicsObject,
    ProjectileData,
    Pulley,
    PulleyData,
)

if TYPE_CHECKING:
    from ..diagrams import DiagramFrame

logger = logging.getLogger(__name__)


# =============================================================================
# Field helpers
# =============================================================================

class _Reader:
    """Typed field access on one payload dict, raising tagged errors."""

    def __init__(self, d: Any, diagram_type: str, path: str = "data"):
        if not isinstance(d, dict):
            raise InvalidDiagramData(f"'{path}' must be an object", diagram_type, path)
        self.d = d
        self.diagram_type = diagram_type
        self.path = path

    def _field(self, key: str) -> str:
        return f"{self.path}.{key}"

    def error(self, key: str, message: str) -> InvalidDiagramData:
        return InvalidDiagramData(message, self.diagram_type, self._field(key))

    def has(self, key: str) -> bool:
        return self.d.get(key) is not None

    def require(self, key: str) -> Any:
        if not self.has(key):
            raise self.error(key, f"missing required field '{self._field(key)}'")
        return self.d[key]

    def number(self, key: str, default: float | None = None, required: bool = False) -> float | None:
        if not self.has(key):
            if required:
                self.require(key)
            return default
        value = self.d[key]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise self.error(key, f"'{self._field(key)}' must be a number, got {value!r}")
        return float(value)

    def integer(self, key: str, default: int | None = None, required: bool = False) -> int | None:
        if not self.has(key):
            if required:
                self.require(key)
            return default
        value = self.d[key]
        if isinstance(value, bool) or not isinstance(value, int):
            raise self.error(key, f"'{self._field(key)}' must be an integer, got {value!r}")
        return value

    def string(self, key: str, default: str | None = None, required: bool = False) -> str | None:
        if not self.has(key):
            if required:
                self.require(key)
            return default
        value = self.d[key]
        if not isinstance(value, str):
            raise self.error(key, f"'{self._field(key)}' must be a string, got {value!r}")
        return value

    def flag(self, key: str, default: bool = False) -> bool:
        return bool(self.d.get(key, default))

    def point(self, key: str, default: tuple[float, float] | None = None) -> tuple[float, float] | None:
        if not self.has(key):
            return default
        return _point(self.d[key], self.diagram_type, self._field(key))

    def items(self, key: str, required: bool = False) -> list[Any]:
        if not self.has(key):
            if required:
                self.require(key)
            return []
        value = self.d[key]
        if not isinstance(value, list):
            raise self.error(key, f"'{self._field(key)}' must be a list")
        return value

    def child(self, key: str) -> "_Reader":
        return _Reader(self.require(key), self.diagram_type, self._field(key))


def _point(value: Any, diagram_type: str, field: str) -> tuple[float, float]:
    if isinstance(value, dict) and "x" in value and "y" in value:
        x, y = value["x"], value["y"]
    elif isinstance(value, (list, tuple)) and len(value) == 2:
        x, y = value
    else:
        raise InvalidDiagramData(f"'{field}' must be a point {{x, y}} or [x, y]", diagram_type, field)
    for c in (x, y):
        if isinstance(c, bool) or not isinstance(c, (int, float)):
            raise InvalidDiagramData(f"'{field}' has a non-numeric coordinate {c!r}", diagram_type, field)
    return (float(x), float(y))


# =============================================================================
# Shared records
# =============================================================================

def object_from_json(d: Any, diagram_type: str, path: str = "data.object") -> PhysicsObject:
    """Parse a physics object; only positive dimensions and mass are accepted."""
    r = _Reader(d, diagram_type, path)
    obj = PhysicsObject(
        type=r.string("type", "block"),
        width=r.number("width"),
        height=r.number("height"),
        radius=r.number("radius"),
        mass=r.number("mass"),
        label=r.string("label"),
        color=r.string("color"),
        position=r.point("position"),
    )
    for key in ("width", "height", "radius", "mass"):
        value = getattr(obj, key)
        if value is not None and value <= 0:
            raise r.error(key, f"'{path}.{key}' must be positive, got {value}")
    return obj


def force_from_json(d: Any, diagram_type: str, path: str) -> Force:
    """Parse a force; magnitude must be non-negative."""
    r = _Reader(d, diagram_type, path)
    magnitude = r.number("magnitude", required=True)
    if magnitude < 0:
        raise r.error("magnitude", f"force magnitude must be non-negative, got {magnitude}")
    return Force(
        name=r.string("name", required=True),
        type=r.string("type", required=True),
        magnitude=magnitude,
        angle=r.number("angle", 0.0),
        symbol=r.string("symbol"),
        subscript=r.string("subscript"),
        color=r.string("color"),
        origin=r.point("origin"),
    )


def forces_from_json(r: _Reader, key: str = "forces", required: bool = False) -> tuple[Force, ...]:
    """Parse a force list and check that names are unique."""
    forces = tuple(
        force_from_json(item, r.diagram_type, f"{r.path}.{key}[{i}]")
        for i, item in enumerate(r.items(key, required=required))
    )
    seen: set[str] = set()
    for f in forces:
        if f.name in seen:
            raise r.error(key, f"duplicate force name '{f.name}'")
        seen.add(f.name)
    return forces


# =============================================================================
# Scenario payloads
# =============================================================================

def _free_body(r: _Reader) -> FreeBodyData:
    return FreeBodyData(
        object=object_from_json(r.require("object"), r.diagram_type),
        forces=forces_from_json(r, required=True),
        show_net_force=r.flag("showNetForce"),
        reference_angle=r.number("referenceAngle", 0.0),
        friction_coefficient=r.number("frictionCoefficient", 0.0),
    )


def _inclined_plane(r: _Reader) -> InclinedPlaneData:
    angle = r.number("angle", required=True)
    if not 0.0 <= angle < 90.0:
        raise r.error("angle", f"incline angle must be in [0, 90) degrees, got {angle}")
    mu = r.number("frictionCoefficient", 0.0)
    if mu < 0:
        raise r.error("frictionCoefficient", f"friction coefficient must be non-negative, got {mu}")
    return InclinedPlaneData(
        angle=angle,
        object=object_from_json(r.require("object"), r.diagram_type),
        forces=forces_from_json(r, required=True),
        friction_coefficient=mu,
        show_decomposition=r.flag("showDecomposition"),
        show_net_force=r.flag("showNetForce"),
    )


def _projectile(r: _Reader) -> ProjectileData:
    v = r.child("initialVelocity")
    speed = v.number("magnitude", required=True)
    if speed < 0:
        raise v.error("magnitude", f"launch speed must be non-negative, got {speed}")
    height = r.number("initialHeight", 0.0)
    if height < 0:
        raise r.error("initialHeight", f"launch height must be non-negative, got {height}")
    scale = r.number("scale", 1.0)
    if scale <= 0:
        raise r.error("scale", f"scale must be positive, got {scale}")
    times = []
    for i, t in enumerate(r.items("timeIntervals")):
        if isinstance(t, bool) or not isinstance(t, (int, float)) or t < 0:
            raise r.error(f"timeIntervals[{i}]", f"time marks must be non-negative numbers, got {t!r}")
        times.append(float(t))
    return ProjectileData(
        speed=speed,
        angle=v.number("angle", required=True),
        initial=r.point("initial", (0.0, 0.0)),
        initial_height=height,
        ground_level=r.number("groundLevel"),
        time_intervals=tuple(times),
        show_velocity_vectors=r.flag("showVelocityVectors"),
        show_components=r.flag("showComponents"),
        show_acceleration=r.flag("showAcceleration"),
        scale=scale,
    )


def _pulley(r: _Reader) -> PulleyData:
    pulleys = []
    for i, item in enumerate(r.items("pulleys", required=True)):
        p = _Reader(item, r.diagram_type, f"{r.path}.pulleys[{i}]")
        radius = p.number("radius", required=True)
        if radius <= 0:
            raise p.error("radius", f"pulley radius must be positive, got {radius}")
        pulleys.append(Pulley(position=p.point("position", (0.0, 0.0)), radius=radius, fixed=p.flag("fixed", True)))
    if not pulleys:
        raise r.error("pulleys", "a pulley system needs at least one pulley")

    masses = []
    for i, item in enumerate(r.items("masses", required=True)):
        m = _Reader(item, r.diagram_type, f"{r.path}.masses[{i}]")
        idx = m.integer("attachedTo", required=True)
        if not 0 <= idx < len(pulleys):
            raise m.error("attachedTo", f"mass references invalid pulley index: {idx}")
        side = m.string("side", "left")
        if side not in ("left", "right"):
            raise m.error("side", f"side must be 'left' or 'right', got '{side}'")
        masses.append(HangingMass(object=object_from_json(m.require("object"), r.diagram_type, f"{m.path}.object"),
                                  attached_to=idx, side=side))

    return PulleyData(
        pulleys=tuple(pulleys),
        masses=tuple(masses),
        tensions=forces_from_json(r, "tensions"),
        show_acceleration=r.flag("showAcceleration"),
    )


def _circular(r: _Reader) -> CircularMotionData:
    radius = r.number("radius", required=True)
    if radius <= 0:
        raise r.error("radius", f"radius must be positive, got {radius}")
    mass = r.number("mass", 1.0)
    if mass <= 0:
        raise r.error("mass", f"mass must be positive, got {mass}")
    speed = r.number("speed", 0.0)
    if speed < 0:
        raise r.error("speed", f"speed must be non-negative, got {speed}")
    return CircularMotionData(
        radius=radius,
        mass=mass,
        speed=speed,
        forces=forces_from_json(r),
        show_velocity=r.flag("showVelocity", True),
        show_centripetal_force=r.flag("showCentripetalForce", True),
        show_acceleration=r.flag("showAcceleration"),
    )


def _collision(r: _Reader) -> CollisionData:
    items = r.items("objects", required=True)
    if len(items) < 2:
        raise r.error("objects", f"a collision needs two bodies, got {len(items)}")
    bodies = []
    for i, item in enumerate(items):
        b = _Reader(item, r.diagram_type, f"{r.path}.objects[{i}]")
        obj = object_from_json(b.require("object"), r.diagram_type, f"{b.path}.object")
        if obj.mass is None:
            raise b.error("object.mass", "collision bodies need a positive mass")
        v = b.child("velocity")
        bodies.append(CollisionBody(object=obj, velocity_before=v.number("before", required=True),
                                    velocity_after=v.number("after")))
    if len(bodies) > 2:
        logger.debug("collision payload has %d bodies, only the first two collide", len(bodies))

    collision_type = r.string("collisionType", "elastic")
    if collision_type not in RESTITUTION_BY_TYPE:
        raise r.error("collisionType", f"unknown collision type '{collision_type}'")
    e = r.number("restitution")
    if e is not None and not 0.0 <= e <= 1.0:
        raise r.error("restitution", f"restitution must be in [0, 1], got {e}")
    return CollisionData(
        bodies=tuple(bodies),
        collision_type=collision_type,
        restitution=e,
        show_before=r.flag("showBefore", True),
        show_after=r.flag("showAfter", True),
        show_momentum=r.flag("showMomentum"),
        show_energy=r.flag("showEnergy"),
    )


PAYLOAD_PARSERS: dict[str, Callable[[_Reader], Any]] = {
    "fbd": _free_body,
    "inclined_plane": _inclined_plane,
    "projectile": _projectile,
    "pulley": _pulley,
    "circular": _circular,
    "collision": _collision,
}


# =============================================================================
# Entry points
# =============================================================================

def diagram_from_json(payload: Any) -> DiagramSpec:
    """
    Parse and validate one diagram payload.

    Args:
        payload: Dictionary with "type", "data" and optional "visibleStep"
                 and "title".

    Returns:
        A DiagramSpec with typed scenario data.

    Raises:
        InvalidDiagramData: If the tag is unknown or the data is malformed.
    """
    if not isinstance(payload, dict):
        raise InvalidDiagramData("diagram payload must be an object")
    diagram_type = payload.get("type")
    if diagram_type not in PAYLOAD_PARSERS:
        raise InvalidDiagramData(f"unknown diagram type {diagram_type!r}", field="type")

    data = PAYLOAD_PARSERS[diagram_type](_Reader(payload.get("data"), diagram_type))
    top = _Reader(payload, diagram_type, "diagram")
    return DiagramSpec(
        type=diagram_type,
        data=data,
        visible_step=top.integer("visibleStep", 0),
        title=top.string("title"),
    )


def load_diagram_raw(path: str) -> Any:
    """Load raw JSON from a diagram file without validation."""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_diagram(path: str) -> DiagramSpec:
    """
    Load and validate a single diagram from a JSON file.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        InvalidDiagramData: If the payload is malformed.
    """
    return diagram_from_json(load_diagram_raw(path))


def load_page_raw(path: str) -> list[Any]:
    """Load a page of diagram payloads (a JSON list, or one diagram object)."""
    data = load_diagram_raw(path)
    return data if isinstance(data, list) else [data]


# =============================================================================
# Serialization
# =============================================================================

def result_to_json(result: CalculationResult) -> dict[str, Any]:
    out = {
        "value": result.value,
        "unit": result.unit,
        "label": result.label,
        "formatted": result.formatted,
    }
    if result.is_primary:
        out["isPrimary"] = True
    if result.description and result.description != result.label:
        out["description"] = result.description
    return out


def results_to_json(results: list[CalculationResult]) -> list[dict[str, Any]]:
    """Serialize a what-if result list."""
    return [result_to_json(r) for r in results]


def frame_to_json(frame: "DiagramFrame") -> dict[str, Any]:
    """
    Serialize a diagram frame for a web front end.

    Anchors are emitted as [x, y] lists; timings as {id, delay, duration}.
    """
    return {
        "type": frame.diagram_type,
        "title": frame.title,
        "currentStep": frame.current_step,
        "totalSteps": frame.total_steps,
        "stepIds": list(frame.step_ids),
        "visibleSteps": list(frame.visible_steps),
        "currentStepId": frame.current_step_id,
        "visibleForces": list(frame.visible_forces),
        "highlightedForces": list(frame.highlighted_forces),
        "anchors": {name: _to_list(p) for name, p in frame.anchors.items()},
        "timings": [
            {"id": t.element_id, "delay": t.delay, "duration": t.duration}
            for t in frame.timings
        ],
        "results": results_to_json(list(frame.results)),
    }


def _to_list(arr: Any) -> list[float]:
    """Convert a numpy array or tuple to a list of floats."""
    if hasattr(arr, "tolist"):
        return arr.tolist()
    return list(arr)
