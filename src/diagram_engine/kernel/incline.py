# MIT License (see LICENSE)
"""
Block on an inclined plane.

    W      = m·g
    W_par  = W·sinθ        (down the slope)
    W_perp = W·cosθ        (into the slope)
    N      = W·cosθ
    f_max  = μ·N
    f      = min(f_max, W·sinθ)

Friction is capped at the driving component: a block that does not slide has
exactly as much static friction as it needs and no more.

Preconditions (not checked): mass > 0, g > 0.
"""
from __future__ import annotations
import math
from dataclasses import dataclass

from ..constants import GRAVITY
from ..types import CalculationResult
from .results import create_result


@dataclass(frozen=True)
class InclinedPlaneResult:
    """Forces (N) and acceleration (m/s²) for a block on a slope."""
    weight: float
    weight_parallel: float
    weight_perpendicular: float
    normal_force: float
    max_static_friction: float
    friction_force: float
    net_force: float
    acceleration: float
    is_sliding: bool


def weight_components(mass: float, angle: float, g: float = GRAVITY) -> tuple[float, float]:
    """Weight split into (parallel, perpendicular) magnitudes for a slope angle in degrees."""
    theta = math.radians(angle)
    w = mass * g
    return w * math.sin(theta), w * math.cos(theta)


def critical_angle(mu: float) -> float:
    """Slope angle (degrees) at which a block starts to slide: tanθ = μ."""
    return math.degrees(math.atan(mu))


def calculate_inclined_plane(
    mass: float,
    angle: float,
    mu: float = 0.0,
    g: float = GRAVITY,
) -> InclinedPlaneResult:
    """
    Solve the incline for a block of `mass` kg on a slope of `angle` degrees.

    Args:
        mass: Block mass (kg), > 0.
        angle: Slope angle in degrees.
        mu: Friction coefficient.
        g: Gravitational acceleration (m/s²).
    """
    w = mass * g
    w_par, w_perp = weight_components(mass, angle, g)
    normal = w_perp
    f_max = mu * normal
    friction = min(f_max, w_par)
    is_sliding = w_par > f_max
    net = w_par - friction
    return InclinedPlaneResult(
        weight=w,
        weight_parallel=w_par,
        weight_perpendicular=w_perp,
        normal_force=normal,
        max_static_friction=f_max,
        friction_force=friction,
        net_force=net,
        acceleration=net / mass,
        is_sliding=is_sliding,
    )


def inclined_plane_results(
    mass: float,
    angle: float,
    mu: float = 0.0,
    g: float = GRAVITY,
) -> list[CalculationResult]:
    """What-if rows for the incline; acceleration is the primary quantity."""
    r = calculate_inclined_plane(mass, angle, mu, g)
    return [
        create_result(r.acceleration, "m/s²", "Acceleration", "Acceleration down the incline", is_primary=True),
        create_result(r.weight, "N", "Weight", "Total weight force (mg)"),
        create_result(r.weight_parallel, "N", "W parallel", "Weight component parallel to incline (mg·sin θ)"),
        create_result(r.weight_perpendicular, "N", "W perpendicular", "Weight component perpendicular to incline (mg·cos θ)"),
        create_result(r.normal_force, "N", "Normal Force", "Normal force from surface"),
        create_result(r.friction_force, "N", "Friction", "Kinetic friction" if r.is_sliding else "Static friction"),
    ]
