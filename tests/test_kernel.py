import math

import numpy as np
import pytest

from diagram_engine.kernel import (
    calculate_atwood,
    atwood_results,
    calculate_collision,
    final_velocities,
    restitution_for,
    calculate_projectile,
    projectile_position,
    projectile_velocity,
    sample_trajectory,
    time_of_flight,
    max_height,
    calculate_inclined_plane,
    critical_angle,
    calculate_circular_motion,
    circular_motion_results,
    calculate_free_body,
    inclined_plane_results,
    projectile_results,
    collision_results,
    free_body_results,
    kinetic_energy,
    linear_momentum,
)
from diagram_engine.kernel.results import create_result, primary


def test_atwood_reference_values():
    """
    Atwood machine, m1=5 kg, m2=3 kg, g=9.8:
      a = |m1-m2| g / (m1+m2) = 2*9.8/8  = 2.45 m/s²
      T = 2 m1 m2 g / (m1+m2) = 30*9.8/8 = 36.75 N
    """
    r = calculate_atwood(5.0, 3.0, g=9.8)
    print("a", r.acceleration, "T", r.tension)
    assert abs(r.acceleration - 2.45) < 1e-6
    assert abs(r.tension - 36.75) < 1e-6
    assert r.descending == 1


def test_atwood_balanced_masses():
    """Equal masses: no acceleration, tension equals each weight."""
    r = calculate_atwood(4.0, 4.0)
    assert r.acceleration == 0.0
    assert abs(r.tension - 4.0 * 9.8) < 1e-9
    assert r.descending == 0


@pytest.mark.parametrize("m1,m2,v1,v2", [
    (1.0, 2.0, 3.0, -1.0),
    (2.0, 3.0, 5.0, -2.0),
    (0.5, 10.0, 4.0, 0.0),
])
def test_elastic_collision_conserves_momentum_and_energy(m1, m2, v1, v2):
    """
    e = 1: both momentum and kinetic energy are conserved (1e-9 relative).
    Closed form check:
      v1' = (m1-m2)/(m1+m2)*v1 + 2 m2/(m1+m2)*v2
    """
    r = calculate_collision(m1, m2, v1, v2, e=1.0)
    v1p = (m1 - m2) / (m1 + m2) * v1 + (2 * m2) / (m1 + m2) * v2
    print("v1'", r.v1_final, "exp", v1p)

    assert abs(r.v1_final - v1p) < 1e-9
    assert abs(r.momentum_final - r.momentum_initial) <= 1e-9 * max(1.0, abs(r.momentum_initial))
    assert abs(r.kinetic_energy_final - r.kinetic_energy_initial) <= 1e-9 * r.kinetic_energy_initial


@pytest.mark.parametrize("e", [0.0, 0.25, 0.5, 0.9])
def test_inelastic_collision_loses_energy(e):
    """e < 1: momentum conserved, KE after <= KE before."""
    r = calculate_collision(2.0, 3.0, 5.0, -2.0, e=e)
    print("e", e, "KE", r.kinetic_energy_initial, "->", r.kinetic_energy_final)
    assert abs(r.momentum_final - r.momentum_initial) < 1e-9
    assert r.kinetic_energy_final <= r.kinetic_energy_initial + 1e-12
    assert r.energy_loss >= -1e-12


def test_perfectly_inelastic_common_velocity():
    """e = 0: both bodies leave with (m1 v1 + m2 v2)/(m1+m2) = (10-6)/5 = 0.8 m/s."""
    v1p, v2p = final_velocities(2.0, 3.0, 5.0, -2.0, e=0.0)
    assert abs(v1p - 0.8) < 1e-12
    assert abs(v2p - 0.8) < 1e-12


def test_restitution_by_collision_type():
    assert restitution_for("elastic") == 1.0
    assert restitution_for("perfectly_inelastic") == 0.0
    assert restitution_for("inelastic") == 0.5
    assert restitution_for("inelastic", 0.3) == 0.3
    assert restitution_for("something_else") == 1.0


def test_projectile_returns_to_launch_height():
    """
    y(T) = y0 at T = 2 v0 sinθ / g, and the apex height equals
    (v0 sinθ)² / (2g) at t = v0 sinθ / g.
    """
    v0, angle, g = 20.0, 45.0, 9.8
    origin = (10.0, 300.0)
    T = time_of_flight(v0, angle, g)
    land = projectile_position(v0, angle, T, g, origin)
    print("landing", land, "T", T)
    assert abs(land[1] - origin[1]) < 1e-9

    v0y = v0 * math.sin(math.radians(angle))
    apex = projectile_position(v0, angle, v0y / g, g, origin)
    H = max_height(v0, angle, g)
    assert abs(H - v0y * v0y / (2 * g)) < 1e-12
    assert abs((origin[1] - apex[1]) - H) < 1e-9


def test_calculate_projectile_level_and_raised_launch():
    """
    Level ground: range = v0² sin2θ / g. From a height h the flight is longer
    and the apex altitude is h + H.
    """
    v0, g = 20.0, 9.8
    level = calculate_projectile(v0, 45.0, 0.0, g)
    assert abs(level.range - v0 * v0 / g) < 1e-9
    assert abs(level.time_of_flight - time_of_flight(v0, 45.0, g)) < 1e-12

    raised = calculate_projectile(v0, 45.0, 10.0, g)
    assert raised.time_of_flight > level.time_of_flight
    assert abs(raised.peak_altitude - (10.0 + level.max_height)) < 1e-12
    # h + v0y T - g T²/2 = 0 at landing
    T = raised.time_of_flight
    assert abs(10.0 + raised.v0y * T - 0.5 * g * T * T) < 1e-9


def test_sample_trajectory_stays_above_ground():
    """All kept samples have y <= ground; the first one is the launch point."""
    traj = sample_trajectory(15.0, 60.0, origin=(0.0, 200.0), num_points=40)
    print("samples", len(traj))
    assert len(traj) == 41
    assert np.allclose(traj.points[0], [0.0, 200.0])
    assert np.all(traj.points[:, 1] <= 200.0 + 1e-9)
    assert traj.apex[1] < 200.0


def test_sample_trajectory_drops_points_below_raised_ground():
    """A ground above the launch height cuts off the early and late samples."""
    traj = sample_trajectory(15.0, 60.0, origin=(0.0, 200.0), ground_level=195.0, num_points=40)
    assert 0 < len(traj) < 41
    assert np.all(traj.points[:, 1] <= 195.0 + 1e-9)


def test_inclined_plane_components_and_static_friction():
    """
    m=5, θ=30°, μ=0.6: W_par = 24.5, W_perp = N = 42.435, f_max = 25.46 > W_par,
    so the block holds with friction exactly W_par and zero acceleration.
    """
    r = calculate_inclined_plane(5.0, 30.0, mu=0.6)
    w = 5.0 * 9.8
    assert abs(r.weight_parallel - w * 0.5) < 1e-9
    assert abs(r.weight_perpendicular - w * math.cos(math.radians(30))) < 1e-9
    assert abs(r.normal_force - r.weight_perpendicular) < 1e-12
    assert not r.is_sliding
    assert abs(r.friction_force - r.weight_parallel) < 1e-12
    assert abs(r.acceleration) < 1e-12


def test_inclined_plane_sliding_acceleration():
    """μ=0.1 at 30°: a = g (sinθ - μ cosθ)."""
    r = calculate_inclined_plane(2.0, 30.0, mu=0.1)
    expected = 9.8 * (math.sin(math.radians(30)) - 0.1 * math.cos(math.radians(30)))
    assert r.is_sliding
    assert abs(r.acceleration - expected) < 1e-9


def test_critical_angle():
    """tanθc = μ."""
    assert abs(math.tan(math.radians(critical_angle(0.3))) - 0.3) < 1e-12


def test_circular_motion_quantities():
    """v=4, r=2, m=3: a_c = 8, F_c = 24, ω = 2, T = π."""
    r = calculate_circular_motion(3.0, 4.0, 2.0)
    assert abs(r.centripetal_acceleration - 8.0) < 1e-12
    assert abs(r.centripetal_force - 24.0) < 1e-12
    assert abs(r.angular_velocity - 2.0) < 1e-12
    assert abs(r.period - math.pi) < 1e-12


def test_circular_motion_at_rest_has_no_period():
    """Period is undefined at zero speed: reported as None, never inf."""
    r = calculate_circular_motion(1.0, 0.0, 2.0)
    assert r.period is None and r.frequency is None
    labels = [row.label for row in circular_motion_results(1.0, 0.0, 2.0)]
    assert "Period" not in labels


def test_free_body_push_with_friction():
    """
    m=5, F=20 N horizontal, μ=0.2: N = 49, f = 9.8, a = (20 - 9.8)/5 = 2.04.
    """
    r = calculate_free_body(5.0, 20.0, 0.0, 0.2)
    assert abs(r.normal_force - 49.0) < 1e-9
    assert abs(r.friction_force - 9.8) < 1e-9
    assert abs(r.acceleration_x - 2.04) < 1e-9
    assert abs(r.net_y) < 1e-9


def test_free_body_weak_push_does_not_move():
    """Static friction matches a push weaker than μN."""
    r = calculate_free_body(5.0, 5.0, 0.0, 0.5)
    assert abs(r.friction_force - 5.0) < 1e-12
    assert abs(r.acceleration_x) < 1e-12


def test_invariants_vector_velocities():
    """2-D velocities: P = Σ m v as a vector, T = Σ ½ m |v|²."""
    p = linear_momentum([1.0, 2.0], [[1.0, 0.0], [0.0, 3.0]])
    assert np.allclose(p, [1.0, 6.0])
    assert abs(kinetic_energy([1.0, 2.0], [[1.0, 0.0], [0.0, 3.0]]) - (0.5 + 9.0)) < 1e-12


@pytest.mark.parametrize("rows", [
    atwood_results(5.0, 3.0),
    inclined_plane_results(5.0, 30.0, 0.3),
    projectile_results(20.0, 45.0),
    circular_motion_results(2.0, 5.0, 2.0),
    collision_results(2.0, 3.0, 5.0, -2.0),
    free_body_results(5.0, 20.0, 0.0, 0.2),
])
def test_result_lists_have_one_primary_and_finite_values(rows):
    assert sum(1 for r in rows if r.is_primary) == 1
    assert all(math.isfinite(r.value) for r in rows)


def test_create_result_formatting():
    r = create_result(36.75, "N", "Tension")
    assert r.formatted == "36.75 N"
    assert r.description == "Tension"
    assert create_result(0.3, "", "μ").formatted == "0.30"
    assert primary(atwood_results(5.0, 3.0)).label == "Acceleration"


def test_projectile_velocity_at_apex_is_horizontal():
    """vy = v0 sinθ - g t vanishes at the apex; vx stays v0 cosθ."""
    v = projectile_velocity(20.0, 30.0, 10.0 / 9.8)
    assert abs(v[0] - 20.0 * math.cos(math.radians(30))) < 1e-12
    assert abs(v[1]) < 1e-9


def test_perfectly_inelastic_energy_strictly_drops_unless_equal_velocities():
    """e = 0: KE after < KE before, with equality only when v1 = v2."""
    r = calculate_collision(2.0, 3.0, 5.0, -2.0, e=0.0)
    assert r.kinetic_energy_final < r.kinetic_energy_initial
    same = calculate_collision(2.0, 3.0, 4.0, 4.0, e=0.0)
    assert abs(same.kinetic_energy_final - same.kinetic_energy_initial) < 1e-12


def test_sampled_apex_matches_closed_form():
    """An even number of intervals puts a sample exactly at the apex: H = v0² sin²θ / 2g."""
    v0, angle = 25.0, 50.0
    traj = sample_trajectory(v0, angle, origin=(0.0, 0.0), num_points=50)
    H = (v0 * math.sin(math.radians(angle))) ** 2 / (2 * 9.8)
    print("sampled", -traj.apex[1], "closed form", H)
    assert abs(-traj.apex[1] - H) < 1e-9
