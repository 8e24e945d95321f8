# MIT License (see LICENSE)
"""
Uniform circular motion.

    a_c = v² / r
    F_c = m·v² / r
    ω   = v / r
    T   = 2π / ω

Precondition (not checked): r != 0.
"""
from __future__ import annotations
import math
from dataclasses import dataclass

from ..types import CalculationResult
from .results import create_result


@dataclass(frozen=True)
class CircularMotionResult:
    """
    Attributes:
        centripetal_acceleration: m/s².
        centripetal_force: N.
        angular_velocity: rad/s.
        period: s, or None when the object is at rest.
        frequency: Hz, or None when the object is at rest.
    """
    centripetal_acceleration: float
    centripetal_force: float
    angular_velocity: float
    period: float | None
    frequency: float | None


def calculate_circular_motion(mass: float, speed: float, radius: float) -> CircularMotionResult:
    """Circular motion of `mass` kg at `speed` m/s on a circle of `radius` m."""
    a_c = speed * speed / radius
    omega = speed / radius
    if omega == 0.0:
        period = None
        frequency = None
    else:
        period = 2.0 * math.pi / abs(omega)
        frequency = 1.0 / period
    return CircularMotionResult(
        centripetal_acceleration=a_c,
        centripetal_force=mass * a_c,
        angular_velocity=omega,
        period=period,
        frequency=frequency,
    )


def circular_motion_results(mass: float, speed: float, radius: float) -> list[CalculationResult]:
    """What-if rows for circular motion; centripetal force is primary."""
    r = calculate_circular_motion(mass, speed, radius)
    rows = [
        create_result(r.centripetal_force, "N", "Centripetal Force", "Force toward center", is_primary=True),
        create_result(r.centripetal_acceleration, "m/s²", "Centripetal Acceleration"),
    ]
    # Period and frequency are undefined for an object at rest.
    if r.period is not None:
        rows.append(create_result(r.period, "s", "Period", "Time for one revolution"))
        rows.append(create_result(r.frequency, "Hz", "Frequency"))
    rows.append(create_result(r.angular_velocity, "rad/s", "Angular Velocity"))
    return rows
