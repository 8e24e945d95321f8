# MIT License (see LICENSE)
"""
Physical and presentation constants shared by the engine.

Physics values use SI units. Timing values are in seconds and are only
metadata handed to the rendering layer.
"""
from __future__ import annotations

# Standard gravitational acceleration used by the textbook scenarios.
# The tutoring content rounds g to 9.8 m/s², so the kernel does too.
GRAVITY: float = 9.8

# Number of intervals used when sampling a projectile trajectory.
# An even count puts one sample exactly at the apex.
TRAJECTORY_POINTS: int = 50

# Fallback object size (diagram units) when a payload gives no dimensions.
DEFAULT_OBJECT_SIZE: float = 50.0

# Radius of the circle used to spread forces that share an anchor point.
ORIGIN_SPREAD_RADIUS: float = 5.0

# Choreography defaults: element draw time, gap between elements in a batch,
# and the pause after the object before the first force appears.
BASE_DURATION: float = 0.4
STAGGER: float = 0.25
LEAD_IN: float = 0.2

# Restitution implied by a collision type tag when the payload gives none.
DEFAULT_INELASTIC_RESTITUTION: float = 0.5

# Tolerance for "past ground level" checks in diagram space.
GROUND_EPS: float = 1e-9
