# MIT License (see LICENSE)
"""
Projectile motion in diagram space.

Positions are returned in diagram coordinates (y grows downward), so the
height gained above the launch point is subtracted from y0:

    x(t) = x0 + v0·cosθ·t
    y(t) = y0 − (v0·sinθ·t − ½·g·t²)

Closed forms for a launch and landing at the same height:

    time of flight  T = 2·v0·sinθ / g
    max height      H = (v0·sinθ)² / (2g)   at t = v0·sinθ / g

Preconditions (not checked): g > 0.
"""
from __future__ import annotations
import math
from dataclasses import dataclass

import numpy as np

from ..constants import GRAVITY, TRAJECTORY_POINTS, GROUND_EPS
from ..types import CalculationResult
from .results import create_result


@dataclass(frozen=True)
class ProjectileResult:
    """
    Closed-form projectile quantities.

    Attributes:
        v0x, v0y: Launch velocity components (m/s), v0y upward positive.
        peak_time: Time to reach the apex (s).
        max_height: Apex height above the launch point (m).
        peak_altitude: Apex height above the ground (m).
        time_of_flight: Time until the projectile reaches the ground (s).
        range: Horizontal distance covered in time_of_flight (m).
    """
    v0x: float
    v0y: float
    peak_time: float
    max_height: float
    peak_altitude: float
    time_of_flight: float
    range: float


@dataclass(frozen=True)
class Trajectory:
    """Sampled path: times (N,) and diagram-space points (N, 2)."""
    times: np.ndarray
    points: np.ndarray

    def __len__(self) -> int:
        return len(self.times)

    @property
    def apex(self) -> np.ndarray:
        """Highest sampled point (smallest diagram y)."""
        return self.points[int(np.argmin(self.points[:, 1]))]


def launch_components(v0: float, angle: float) -> tuple[float, float]:
    """Horizontal and vertical launch velocity for speed v0 at angle degrees."""
    theta = math.radians(angle)
    return v0 * math.cos(theta), v0 * math.sin(theta)


def time_of_flight(v0: float, angle: float, g: float = GRAVITY) -> float:
    """Time to return to launch height: 2·v0·sinθ / g."""
    _, v0y = launch_components(v0, angle)
    return 2.0 * v0y / g


def peak_time(v0: float, angle: float, g: float = GRAVITY) -> float:
    """Time of the apex: v0·sinθ / g."""
    _, v0y = launch_components(v0, angle)
    return v0y / g


def max_height(v0: float, angle: float, g: float = GRAVITY) -> float:
    """Apex height above the launch point: (v0·sinθ)² / (2g)."""
    _, v0y = launch_components(v0, angle)
    return v0y * v0y / (2.0 * g)


def projectile_position(
    v0: float,
    angle: float,
    t: float,
    g: float = GRAVITY,
    origin: tuple[float, float] = (0.0, 0.0),
    scale: float = 1.0,
) -> np.ndarray:
    """
    Diagram-space position at time t.

    Args:
        v0: Launch speed (m/s).
        angle: Launch angle in degrees above +x.
        t: Time since launch (s).
        g: Gravitational acceleration (m/s²).
        origin: Launch point (x0, y0) in diagram units.
        scale: Diagram units per meter.
    """
    v0x, v0y = launch_components(v0, angle)
    x = origin[0] + v0x * t * scale
    y = origin[1] - (v0y * t - 0.5 * g * t * t) * scale
    return np.array([x, y], dtype=np.float64)


def projectile_velocity(v0: float, angle: float, t: float, g: float = GRAVITY) -> np.ndarray:
    """Physical velocity (vx, vy) at time t, vy upward positive."""
    v0x, v0y = launch_components(v0, angle)
    return np.array([v0x, v0y - g * t], dtype=np.float64)


def sample_trajectory(
    v0: float,
    angle: float,
    g: float = GRAVITY,
    origin: tuple[float, float] = (0.0, 0.0),
    ground_level: float | None = None,
    num_points: int = TRAJECTORY_POINTS,
    scale: float = 1.0,
) -> Trajectory:
    """
    Sample the path between launch and time of flight.

    num_points intervals give num_points + 1 samples. Samples whose y lies past
    ground_level (diagram y greater than it) are dropped; ground_level
    defaults to the launch height.
    """
    t_flight = time_of_flight(v0, angle, g)
    times = np.linspace(0.0, t_flight, num_points + 1)
    v0x, v0y = launch_components(v0, angle)
    xs = origin[0] + v0x * times * scale
    ys = origin[1] - (v0y * times - 0.5 * g * times * times) * scale

    ground = origin[1] if ground_level is None else ground_level
    keep = ys <= ground + GROUND_EPS * max(1.0, abs(scale))
    points = np.column_stack([xs[keep], ys[keep]])
    return Trajectory(times=times[keep], points=points)


def calculate_projectile(
    v0: float,
    angle: float,
    initial_height: float = 0.0,
    g: float = GRAVITY,
) -> ProjectileResult:
    """
    Projectile quantities for a launch from initial_height above the ground.

    With initial_height = 0 the time of flight is exactly 2·v0·sinθ / g; above
    the ground it solves h + v0y·t − ½gt² = 0 for the positive root.
    """
    v0x, v0y = launch_components(v0, angle)
    t_peak = v0y / g
    h_max = v0y * v0y / (2.0 * g)
    if initial_height == 0.0:
        t_flight = 2.0 * v0y / g
    else:
        t_flight = (v0y + math.sqrt(v0y * v0y + 2.0 * g * initial_height)) / g
    return ProjectileResult(
        v0x=v0x,
        v0y=v0y,
        peak_time=t_peak,
        max_height=h_max,
        peak_altitude=initial_height + h_max,
        time_of_flight=t_flight,
        range=v0x * t_flight,
    )


def projectile_results(
    v0: float,
    angle: float,
    initial_height: float = 0.0,
    g: float = GRAVITY,
) -> list[CalculationResult]:
    """What-if rows for a projectile; range is the primary quantity."""
    r = calculate_projectile(v0, angle, initial_height, g)
    return [
        create_result(r.range, "m", "Range", "Horizontal distance traveled", is_primary=True),
        create_result(r.max_height, "m", "Max Height", "Maximum height above the launch point"),
        create_result(r.time_of_flight, "s", "Time of Flight"),
        create_result(r.v0x, "m/s", "v₀ₓ", "Initial horizontal velocity"),
        create_result(r.v0y, "m/s", "v₀ᵧ", "Initial vertical velocity"),
    ]
