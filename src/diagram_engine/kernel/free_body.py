# MIT License (see LICENSE)
"""
Block on a horizontal surface pushed by one applied force.

With the applied force F at angle α above the horizontal:

    N   = max(0, m·g − F·sinα)
    f   = min(μ·N, |F·cosα|)     opposing the horizontal push
    F_x = F·cosα − f·sgn(F·cosα)
    F_y = N + F·sinα − m·g

Precondition (not checked): mass > 0.
"""
from __future__ import annotations
import math
from dataclasses import dataclass

from ..constants import GRAVITY
from ..types import CalculationResult
from .results import create_result


@dataclass(frozen=True)
class FreeBodyResult:
    """Forces (N) and accelerations (m/s²) for a pushed block."""
    weight: float
    normal_force: float
    applied_x: float
    applied_y: float
    friction_force: float
    net_x: float
    net_y: float
    acceleration_x: float
    acceleration_y: float

    @property
    def net_magnitude(self) -> float:
        return math.hypot(self.net_x, self.net_y)


def calculate_free_body(
    mass: float,
    applied_force: float = 0.0,
    applied_angle: float = 0.0,
    mu: float = 0.0,
    g: float = GRAVITY,
) -> FreeBodyResult:
    """Solve the pushed-block scenario; applied_angle in degrees."""
    alpha = math.radians(applied_angle)
    w = mass * g
    fx = applied_force * math.cos(alpha)
    fy = applied_force * math.sin(alpha)
    normal = max(0.0, w - fy)
    friction = min(mu * normal, abs(fx))
    # Friction points against the horizontal push.
    signed_friction = -friction if fx > 0 else friction if fx < 0 else 0.0
    net_x = fx + signed_friction
    net_y = normal + fy - w
    return FreeBodyResult(
        weight=w,
        normal_force=normal,
        applied_x=fx,
        applied_y=fy,
        friction_force=friction,
        net_x=net_x,
        net_y=net_y,
        acceleration_x=net_x / mass,
        acceleration_y=net_y / mass,
    )


def free_body_results(
    mass: float,
    applied_force: float = 0.0,
    applied_angle: float = 0.0,
    mu: float = 0.0,
    g: float = GRAVITY,
) -> list[CalculationResult]:
    """What-if rows for the pushed block; horizontal acceleration is primary."""
    r = calculate_free_body(mass, applied_force, applied_angle, mu, g)
    rows = [
        create_result(r.acceleration_x, "m/s²", "Acceleration", "Horizontal acceleration", is_primary=True),
        create_result(r.weight, "N", "Weight"),
        create_result(r.normal_force, "N", "Normal Force"),
    ]
    if applied_force:
        rows.append(create_result(applied_force, "N", "Applied Force"))
    rows.append(create_result(r.friction_force, "N", "Friction"))
    rows.append(create_result(r.net_magnitude, "N", "Net Force"))
    return rows
