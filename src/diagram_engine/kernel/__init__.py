# MIT License (see LICENSE)
"""
Closed-form physics for the textbook scenarios.

Every function here is pure: explicit scalar parameters in, a frozen result
record (or a list of CalculationResult rows) out. Nothing is validated; the
documented preconditions (positive masses, non-zero radius, g > 0) are the
caller's responsibility.

Typical usage:
    from diagram_engine.kernel import calculate_atwood, collision_results

    calculate_atwood(5.0, 3.0).tension      # 36.75
    collision_results(2.0, 3.0, 5.0, -2.0, e=0.0)
"""
from .projectile import (
    ProjectileResult,
    Trajectory,
    calculate_projectile,
    max_height,
    peak_time,
    projectile_position,
    projectile_results,
    projectile_velocity,
    sample_trajectory,
    time_of_flight,
)
from .incline import (
    InclinedPlaneResult,
    calculate_inclined_plane,
    critical_angle,
    inclined_plane_results,
    weight_components,
)
from .pulley import AtwoodResult, atwood_results, calculate_atwood
from .circular import CircularMotionResult, calculate_circular_motion, circular_motion_results
from .collision import (
    CollisionResult,
    RESTITUTION_BY_TYPE,
    calculate_collision,
    collision_results,
    final_velocities,
    restitution_for,
)
from .free_body import FreeBodyResult, calculate_free_body, free_body_results
from .invariants import kinetic_energy, linear_momentum
from .results import create_result

__all__ = [
    # Projectile
    "ProjectileResult",
    "Trajectory",
    "calculate_projectile",
    "max_height",
    "peak_time",
    "projectile_position",
    "projectile_results",
    "projectile_velocity",
    "sample_trajectory",
    "time_of_flight",
    # Incline
    "InclinedPlaneResult",
    "calculate_inclined_plane",
    "critical_angle",
    "inclined_plane_results",
    "weight_components",
    # Pulley
    "AtwoodResult",
    "atwood_results",
    "calculate_atwood",
    # Circular
    "CircularMotionResult",
    "calculate_circular_motion",
    "circular_motion_results",
    # Collision
    "CollisionResult",
    "RESTITUTION_BY_TYPE",
    "calculate_collision",
    "collision_results",
    "final_velocities",
    "restitution_for",
    # Free body
    "FreeBodyResult",
    "calculate_free_body",
    "free_body_results",
    # Invariants
    "kinetic_energy",
    "linear_momentum",
    # Results
    "create_result",
]
