# MIT License (see LICENSE)
"""
Force arrow anchoring and decomposition.

force_origin() answers "where does this arrow start?" for one force. The
answer depends only on its arguments: not on render order, not on which step
is showing, not on any earlier call.

Anchoring rules per force type (ORIGIN_RULE_BY_FORCE_TYPE):
    center           weight-like forces act at the center of mass
    surface_contact  the point of the object touching the surface
    surface_front    the contact point shifted along the surface toward the
                     side the force points to (friction)
    edge             the boundary point in the direction of the force

Unknown force types use "center". An explicit origin override on a force is
added to the object's center verbatim; it is not validated or clamped.
"""
from __future__ import annotations
import math
from dataclasses import replace
from typing import Callable, Sequence

import numpy as np

from ..constants import DEFAULT_OBJECT_SIZE, ORIGIN_SPREAD_RADIUS
from ..types import Force, PhysicsObject
from ..util import f64
from .shapes import LayoutShape, boundary_offset, layout_shape

CENTER = "center"
SURFACE_CONTACT = "surface_contact"
SURFACE_FRONT = "surface_front"
EDGE = "edge"

ORIGIN_RULE_BY_FORCE_TYPE: dict[str, str] = {
    "weight": CENTER,
    "normal": SURFACE_CONTACT,
    "reaction": SURFACE_CONTACT,
    "friction": SURFACE_FRONT,
    "tension": EDGE,
    "spring": EDGE,
    "applied": EDGE,
    "thrust": EDGE,
    "drive": EDGE,
    "drag": CENTER,
    "lift": CENTER,
    "buoyancy": CENTER,
    "resistance": CENTER,
    "centripetal": CENTER,
    "electric": CENTER,
    "magnetic": CENTER,
    "net": CENTER,
    "component": CENTER,
    "custom": CENTER,
}

# Force types that decompose into slope-parallel and slope-perpendicular parts.
DECOMPOSABLE_FORCE_TYPES: frozenset[str] = frozenset({"weight"})


def _center_offset(shape: LayoutShape, force_angle: float, surface_angle: float) -> np.ndarray:
    return np.zeros(2, dtype=np.float64)


def _contact_offset(shape: LayoutShape, force_angle: float, surface_angle: float) -> np.ndarray:
    # Straight "down" into the surface, in the surface's frame.
    return boundary_offset(shape, surface_angle - 90.0, surface_angle)


def _front_offset(shape: LayoutShape, force_angle: float, surface_angle: float) -> np.ndarray:
    along = math.cos(math.radians(force_angle - surface_angle))
    side = surface_angle if along >= 0 else surface_angle + 180.0
    return _contact_offset(shape, force_angle, surface_angle) + 0.5 * boundary_offset(shape, side, surface_angle)


def _edge_offset(shape: LayoutShape, force_angle: float, surface_angle: float) -> np.ndarray:
    return boundary_offset(shape, force_angle, surface_angle)


ORIGIN_RULES: dict[str, Callable[[LayoutShape, float, float], np.ndarray]] = {
    CENTER: _center_offset,
    SURFACE_CONTACT: _contact_offset,
    SURFACE_FRONT: _front_offset,
    EDGE: _edge_offset,
}


def origin_rule(force_type: str) -> str:
    """Anchoring rule for a force type; unknown types anchor at the center."""
    return ORIGIN_RULE_BY_FORCE_TYPE.get(force_type.lower(), CENTER)


def force_origin(
    force_type: str,
    force_angle: float,
    obj: PhysicsObject,
    origin_override: Sequence[float] | None = None,
    surface_angle: float = 0.0,
    center: Sequence[float] = (0.0, 0.0),
    default_size: float = DEFAULT_OBJECT_SIZE,
) -> np.ndarray:
    """
    Diagram-space point where a force arrow begins.

    Args:
        force_type: Force type tag.
        force_angle: Force direction in degrees (0 = +x, CCW positive).
        obj: Object the force acts on; only its type and size are used.
        origin_override: Explicit offset from the center. Used verbatim.
        surface_angle: Angle of the reference surface in degrees, for
                       inclined coordinate systems.
        center: Object center in diagram space.
        default_size: Object size used when obj gives no dimensions.

    Returns:
        Anchor point as a float64 array [x, y].
    """
    c = f64(center)
    if origin_override is not None:
        return c + f64(origin_override)
    shape = layout_shape(obj, default_size)
    rule = ORIGIN_RULES[origin_rule(force_type)]
    return c + rule(shape, force_angle, surface_angle)


def anchor_for(
    force: Force,
    obj: PhysicsObject,
    surface_angle: float = 0.0,
    center: Sequence[float] = (0.0, 0.0),
    default_size: float = DEFAULT_OBJECT_SIZE,
) -> np.ndarray:
    """force_origin() for a Force record."""
    return force_origin(force.type, force.angle, obj, force.origin, surface_angle, center, default_size)


def force_origins(
    forces: Sequence[Force],
    obj: PhysicsObject,
    surface_angle: float = 0.0,
    center: Sequence[float] = (0.0, 0.0),
    spread_radius: float = ORIGIN_SPREAD_RADIUS,
    default_size: float = DEFAULT_OBJECT_SIZE,
) -> dict[str, np.ndarray]:
    """
    Anchors for a set of forces, keyed by force name.

    Forces without an override that land on the same point are spread evenly
    on a circle of spread_radius around it, in payload order, so their arrows
    stay distinguishable.
    """
    origins: dict[str, np.ndarray] = {}
    groups: dict[tuple[float, float], list[str]] = {}
    for f in forces:
        p = anchor_for(f, obj, surface_angle, center, default_size)
        origins[f.name] = p
        if f.origin is None:
            key = (round(float(p[0]), 9), round(float(p[1]), 9))
            groups.setdefault(key, []).append(f.name)

    for names in groups.values():
        n = len(names)
        if n < 2:
            continue
        for i, name in enumerate(names):
            phi = 2.0 * math.pi * i / n
            origins[name] = origins[name] + spread_radius * np.array([math.cos(phi), math.sin(phi)])
    return origins


def is_decomposable(force: Force) -> bool:
    return force.kind in DECOMPOSABLE_FORCE_TYPES


def decompose_force(force: Force, surface_angle: float) -> tuple[Force, Force]:
    """
    Split a force into components along and perpendicular to a surface.

    The parallel axis points down the slope (surface_angle + 180°) and the
    perpendicular axis into it (surface_angle − 90°). A component that points
    against its axis is flipped so magnitudes stay non-negative. For weight
    on a slope of angle θ the magnitudes are W·sinθ and W·cosθ.

    Returns:
        (parallel, perpendicular) as synthetic "component" forces named
        "<name>_parallel" and "<name>_perp".
    """
    parallel_axis = surface_angle + 180.0
    perp_axis = surface_angle - 90.0
    return (
        _component(force, parallel_axis, "_parallel", "∥"),
        _component(force, perp_axis, "_perp", "⊥"),
    )


def _component(force: Force, axis: float, suffix: str, subscript: str) -> Force:
    projected = force.magnitude * math.cos(math.radians(force.angle - axis))
    angle = axis if projected >= 0 else axis + 180.0
    return replace(
        force,
        name=f"{force.name}{suffix}",
        type="component",
        magnitude=abs(projected),
        angle=angle,
        subscript=subscript,
        origin=None,
    )


# Force types left out of a resultant: they restate other forces.
DERIVED_FORCE_TYPES: frozenset[str] = frozenset({"net", "component"})


def resultant(forces: Sequence[Force], name: str = "net_force") -> Force:
    """
    Vector sum of a force set as a synthetic "net" force.

    Net and component forces are skipped. A vanishing sum gives magnitude 0
    and angle 0.
    """
    fx = fy = 0.0
    for f in forces:
        if f.kind in DERIVED_FORCE_TYPES:
            continue
        rad = math.radians(f.angle)
        fx += f.magnitude * math.cos(rad)
        fy += f.magnitude * math.sin(rad)
    magnitude = math.hypot(fx, fy)
    angle = math.degrees(math.atan2(fy, fx)) if magnitude > 1e-12 else 0.0
    return Force(name=name, type="net", magnitude=magnitude, angle=angle, symbol="F", subscript="net")
