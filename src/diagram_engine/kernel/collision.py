# MIT License (see LICENSE)
"""
Head-on (1-D) collision of two bodies with a coefficient of restitution e.

    v1' = ((m1 − e·m2)·v1 + (1 + e)·m2·v2) / (m1 + m2)
    v2' = ((m2 − e·m1)·v2 + (1 + e)·m1·v1) / (m1 + m2)

e = 1 is elastic (kinetic energy conserved), e = 0 perfectly inelastic (both
bodies leave with the common velocity (m1·v1 + m2·v2)/(m1 + m2)). Momentum is
conserved for every e.

Preconditions (not checked): m1 + m2 > 0, 0 ≤ e ≤ 1.
"""
from __future__ import annotations
from dataclasses import dataclass

from ..constants import DEFAULT_INELASTIC_RESTITUTION
from ..types import CalculationResult
from .invariants import kinetic_energy, linear_momentum
from .results import create_result

# Restitution implied by a collision type tag. "inelastic" has no single
# value; callers pass one or get DEFAULT_INELASTIC_RESTITUTION.
RESTITUTION_BY_TYPE: dict[str, float] = {
    "elastic": 1.0,
    "inelastic": DEFAULT_INELASTIC_RESTITUTION,
    "perfectly_inelastic": 0.0,
}


@dataclass(frozen=True)
class CollisionResult:
    """Velocities (m/s), momenta (kg·m/s) and energies (J) around the impact."""
    v1_final: float
    v2_final: float
    momentum_initial: float
    momentum_final: float
    kinetic_energy_initial: float
    kinetic_energy_final: float

    @property
    def energy_loss(self) -> float:
        return self.kinetic_energy_initial - self.kinetic_energy_final


def restitution_for(collision_type: str, restitution: float | None = None) -> float:
    """
    Restitution to use for a collision type tag.

    An explicit restitution wins. Unknown tags are treated as elastic.
    """
    if restitution is not None:
        return float(restitution)
    return RESTITUTION_BY_TYPE.get(collision_type, 1.0)


def final_velocities(m1: float, m2: float, v1: float, v2: float, e: float = 1.0) -> tuple[float, float]:
    """Post-collision velocities of both bodies."""
    total = m1 + m2
    v1p = ((m1 - e * m2) * v1 + (1.0 + e) * m2 * v2) / total
    v2p = ((m2 - e * m1) * v2 + (1.0 + e) * m1 * v1) / total
    return v1p, v2p


def calculate_collision(m1: float, m2: float, v1: float, v2: float, e: float = 1.0) -> CollisionResult:
    """Solve a head-on collision and report the conserved quantities."""
    v1p, v2p = final_velocities(m1, m2, v1, v2, e)
    masses = (m1, m2)
    return CollisionResult(
        v1_final=v1p,
        v2_final=v2p,
        momentum_initial=linear_momentum(masses, (v1, v2)),
        momentum_final=linear_momentum(masses, (v1p, v2p)),
        kinetic_energy_initial=kinetic_energy(masses, (v1, v2)),
        kinetic_energy_final=kinetic_energy(masses, (v1p, v2p)),
    )


def collision_results(m1: float, m2: float, v1: float, v2: float, e: float = 1.0) -> list[CalculationResult]:
    """What-if rows for a collision; v1' is primary."""
    r = calculate_collision(m1, m2, v1, v2, e)
    return [
        create_result(r.v1_final, "m/s", "v₁ final", "Final velocity of object 1", is_primary=True),
        create_result(r.v2_final, "m/s", "v₂ final", "Final velocity of object 2"),
        create_result(r.momentum_initial, "kg·m/s", "p initial"),
        create_result(r.momentum_final, "kg·m/s", "p final"),
        create_result(r.kinetic_energy_initial, "J", "KE initial"),
        create_result(r.kinetic_energy_final, "J", "KE final"),
        create_result(r.energy_loss, "J", "Energy Loss"),
    ]
