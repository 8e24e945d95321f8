# MIT License (see LICENSE)
"""
Layout shapes and their boundary functions.

An object is reduced to one of a closed set of layout shapes:
    ball   round objects, boundary is a circle
    point  particles, boundary collapses to the center
    block  everything else, boundary is a rectangle

Each shape class has a pure boundary function in BOUNDARY_FUNCTIONS. Adding
an object type means adding a row to SHAPE_CLASS_BY_OBJECT_TYPE; adding a
shape class means adding a boundary function.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable

import numpy as np

from ..constants import DEFAULT_OBJECT_SIZE
from ..types import PhysicsObject
from ..util import direction, rotate

BALL = "ball"
POINT = "point"
BLOCK = "block"

# Object types not listed here are laid out as blocks.
SHAPE_CLASS_BY_OBJECT_TYPE: dict[str, str] = {
    "sphere": BALL,
    "particle": POINT,
}


@dataclass(frozen=True)
class LayoutShape:
    """
    Geometry used for anchoring force arrows.

    Attributes:
        kind: One of BALL, POINT, BLOCK.
        half_extents: (hx, hy) of the bounding rectangle in the object's own
                      frame; for a ball both equal the radius.
    """
    kind: str
    half_extents: tuple[float, float]

    @property
    def radius(self) -> float:
        return self.half_extents[0]


def classify(object_type: str | None) -> str:
    """Map an object type tag to its layout shape class; unknown tags give BLOCK."""
    if not isinstance(object_type, str):
        return BLOCK
    return SHAPE_CLASS_BY_OBJECT_TYPE.get(object_type.lower(), BLOCK)


def layout_shape(obj: PhysicsObject, default_size: float = DEFAULT_OBJECT_SIZE) -> LayoutShape:
    """
    Build the layout shape of an object.

    Missing dimensions fall back to the other dimension, then to default_size.
    """
    kind = classify(obj.type)
    if kind == POINT:
        return LayoutShape(kind, (0.0, 0.0))
    if kind == BALL:
        if obj.radius is not None:
            r = float(obj.radius)
        else:
            r = float(obj.width or obj.height or default_size) / 2.0
        return LayoutShape(kind, (r, r))
    width = obj.width or obj.height or default_size
    height = obj.height or obj.width or default_size
    return LayoutShape(kind, (float(width) / 2.0, float(height) / 2.0))


def _ball_boundary(shape: LayoutShape, d: np.ndarray) -> np.ndarray:
    return shape.radius * d


def _point_boundary(shape: LayoutShape, d: np.ndarray) -> np.ndarray:
    return np.zeros(2, dtype=np.float64)


def _block_boundary(shape: LayoutShape, d: np.ndarray) -> np.ndarray:
    # Ray from the center hits whichever pair of faces it reaches first.
    hx, hy = shape.half_extents
    tx = hx / abs(d[0]) if abs(d[0]) > 1e-12 else np.inf
    ty = hy / abs(d[1]) if abs(d[1]) > 1e-12 else np.inf
    return min(tx, ty) * d


BOUNDARY_FUNCTIONS: dict[str, Callable[[LayoutShape, np.ndarray], np.ndarray]] = {
    BALL: _ball_boundary,
    POINT: _point_boundary,
    BLOCK: _block_boundary,
}


def boundary_offset(shape: LayoutShape, angle: float, surface_angle: float = 0.0) -> np.ndarray:
    """
    Offset from the center to the boundary point facing `angle` degrees.

    The shape is taken to be rotated with the surface it rests on, so the
    direction is brought into the shape's frame, intersected, and rotated back.
    """
    d_local = rotate(direction(angle), -surface_angle)
    offset = BOUNDARY_FUNCTIONS.get(shape.kind, _block_boundary)(shape, d_local)
    return rotate(offset, surface_angle)
