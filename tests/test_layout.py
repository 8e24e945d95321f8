import math

import numpy as np
import pytest

from diagram_engine.layout import (
    BALL,
    BLOCK,
    POINT,
    ORIGIN_RULE_BY_FORCE_TYPE,
    anchor_for,
    classify,
    decompose_force,
    force_origin,
    force_origins,
    layout_shape,
    origin_rule,
    resultant,
)
from diagram_engine.types import KNOWN_FORCE_TYPES, KNOWN_OBJECT_TYPES, Force, PhysicsObject
from diagram_engine.util import direction

BLOCK_40x20 = PhysicsObject(type="block", width=40.0, height=20.0)
BALL_R15 = PhysicsObject(type="sphere", radius=15.0)
PARTICLE = PhysicsObject(type="particle")


def test_shape_classification_table():
    """sphere -> ball, particle -> point, anything else -> block."""
    assert classify("sphere") == BALL
    assert classify("particle") == POINT
    assert classify("block") == BLOCK
    assert classify("boat") == BLOCK
    assert classify("spaceship") == BLOCK
    assert classify(None) == BLOCK


def test_layout_shape_defaults():
    """Missing dimensions fall back to the default size 50."""
    assert layout_shape(PhysicsObject(type="crate")).half_extents == (25.0, 25.0)
    assert layout_shape(PhysicsObject(type="sphere")).radius == 25.0
    assert layout_shape(PhysicsObject(type="car", width=80.0)).half_extents == (40.0, 40.0)


def test_override_is_used_verbatim():
    """An explicit origin is added to the center without validation."""
    p = force_origin("weight", -90.0, BLOCK_40x20, origin_override=(300.0, -7.0), center=(10.0, 10.0))
    assert np.allclose(p, [310.0, 3.0])


def test_weight_acts_at_center():
    p = force_origin("weight", -90.0, BLOCK_40x20, center=(100.0, 50.0))
    assert np.allclose(p, [100.0, 50.0])


def test_normal_force_on_flat_surface_starts_at_bottom_face():
    """Diagram y grows downward: the contact point is half the height below the center."""
    p = force_origin("normal", 90.0, BLOCK_40x20)
    assert np.allclose(p, [0.0, 10.0])


def test_normal_force_rotates_with_incline():
    """
    On a 30° slope the contact point lies half the block height from the
    center, in the into-slope direction (30° - 90°).
    """
    p = force_origin("normal", 120.0, BLOCK_40x20, surface_angle=30.0)
    expected = 10.0 * direction(-60.0)
    print("anchor", p, "expected", expected)
    assert np.allclose(p, expected)


def test_friction_anchor_leads_in_force_direction():
    """Friction sits on the contact face, shifted half a half-width toward its direction."""
    left = force_origin("friction", 180.0, BLOCK_40x20)
    right = force_origin("friction", 0.0, BLOCK_40x20)
    assert np.allclose(left, [-10.0, 10.0])
    assert np.allclose(right, [10.0, 10.0])


def test_edge_rule_on_ball_and_block():
    """Tension starts on the boundary in the direction it pulls."""
    assert np.allclose(force_origin("tension", 0.0, BALL_R15), [15.0, 0.0])
    assert np.allclose(force_origin("tension", 90.0, BALL_R15), [0.0, -15.0])
    # 45° ray leaves a 40x20 box through the top face (t = 10 / sin45)
    assert np.allclose(force_origin("applied", 45.0, BLOCK_40x20), [10.0, -10.0])


def test_particle_collapses_to_center():
    for force_type in ("normal", "friction", "tension", "weight"):
        assert np.allclose(force_origin(force_type, 30.0, PARTICLE, center=(5.0, 5.0)), [5.0, 5.0])


def test_unknown_force_type_uses_center_rule():
    assert origin_rule("warp_field") == "center"
    assert np.allclose(force_origin("warp_field", 10.0, BLOCK_40x20), [0.0, 0.0])


def test_anchor_is_pure():
    """Identical inputs give identical anchors regardless of intervening calls."""
    a = force_origin("normal", 120.0, BLOCK_40x20, surface_angle=30.0, center=(1.0, 2.0))
    force_origin("tension", 10.0, BALL_R15)
    force_origin("friction", 200.0, BLOCK_40x20, surface_angle=12.0)
    b = force_origin("normal", 120.0, BLOCK_40x20, surface_angle=30.0, center=(1.0, 2.0))
    assert np.array_equal(a, b)


def test_coincident_origins_are_spread():
    """Two center-anchored forces are moved apart on a radius-5 circle; overrides stay put."""
    forces = [
        Force("W", "weight", 49.0, -90.0),
        Force("D", "drag", 5.0, 180.0),
        Force("F", "applied", 10.0, 0.0, origin=(0.0, 0.0)),
    ]
    origins = force_origins(forces, BLOCK_40x20, center=(50.0, 50.0))
    assert not np.allclose(origins["W"], origins["D"])
    for name in ("W", "D"):
        assert abs(np.linalg.norm(origins[name] - [50.0, 50.0]) - 5.0) < 1e-9
    assert np.allclose(origins["F"], [50.0, 50.0])


@pytest.mark.parametrize("theta", [10.0, 30.0, 45.0, 60.0])
def test_weight_decomposition_on_incline(theta):
    """
    Weight W at -90° on a slope θ splits into W sinθ down the slope
    (θ + 180°) and W cosθ into the slope (θ - 90°); the parts sum back to W.
    """
    w = Force("weight", "weight", 49.0, -90.0, symbol="W")
    par, perp = decompose_force(w, theta)
    print(par.magnitude, perp.magnitude)
    assert par.name == "weight_parallel" and perp.name == "weight_perp"
    assert par.type == "component" and perp.type == "component"
    assert abs(par.magnitude - 49.0 * math.sin(math.radians(theta))) < 1e-9
    assert abs(perp.magnitude - 49.0 * math.cos(math.radians(theta))) < 1e-9
    assert abs(par.angle - (theta + 180.0)) < 1e-12
    assert abs(perp.angle - (theta - 90.0)) < 1e-12

    total = par.magnitude * direction(par.angle) + perp.magnitude * direction(perp.angle)
    assert np.allclose(total, 49.0 * direction(-90.0))


def test_resultant_of_balanced_forces():
    forces = [Force("W", "weight", 49.0, -90.0), Force("N", "normal", 49.0, 90.0)]
    net = resultant(forces)
    assert net.type == "net"
    assert net.magnitude < 1e-9
    assert net.angle == 0.0


def test_resultant_skips_derived_forces():
    forces = [
        Force("F", "applied", 3.0, 0.0),
        Force("G", "applied", 4.0, 90.0),
        Force("old_net", "net", 100.0, 45.0),
    ]
    net = resultant(forces)
    assert abs(net.magnitude - 5.0) < 1e-12
    assert abs(net.angle - math.degrees(math.atan2(4.0, 3.0))) < 1e-9


def test_every_known_type_has_a_layout():
    """Known force types all have an explicit rule; known objects all classify."""
    assert all(t in ORIGIN_RULE_BY_FORCE_TYPE for t in KNOWN_FORCE_TYPES)
    shapes = {t: classify(t) for t in KNOWN_OBJECT_TYPES}
    assert shapes["sphere"] == BALL
    assert shapes["particle"] == POINT
    assert all(s == BLOCK for t, s in shapes.items() if t not in ("sphere", "particle"))


def test_anchor_for_uses_force_record():
    f = Force("T", "tension", 10.0, 0.0)
    assert np.allclose(anchor_for(f, BALL_R15, center=(1.0, 1.0)), [16.0, 1.0])
    pinned = Force("T", "tension", 10.0, 0.0, origin=(0.0, -3.0))
    assert np.allclose(anchor_for(pinned, BALL_R15, center=(1.0, 1.0)), [1.0, -2.0])
