# MIT License (see LICENSE)
"""
Conserved quantities for systems of point masses.

Used by the collision scenario to report momentum and energy before and
after impact, and by tests to check conservation. Velocities may be scalars
(1-D) or vectors; the sums are taken over the leading axis.
"""
from __future__ import annotations
from typing import Sequence

import numpy as np


def kinetic_energy(masses: Sequence[float], velocities: Sequence) -> float:
    """
    Total translational kinetic energy.

    T = Σ ½·m·|v|²

    Args:
        masses: Masses in kg.
        velocities: Matching velocities, scalars or vectors in m/s.

    Returns:
        Total kinetic energy in joules.
    """
    m = np.asarray(masses, dtype=np.float64)
    v = np.asarray(velocities, dtype=np.float64)
    v_sq = v * v if v.ndim == 1 else np.sum(v * v, axis=1)
    return float(0.5 * np.sum(m * v_sq))


def linear_momentum(masses: Sequence[float], velocities: Sequence) -> float | np.ndarray:
    """
    Total linear momentum.

    P = Σ m·v

    Returns:
        A float for 1-D velocities, a vector for 2-D ones (kg·m/s).
    """
    m = np.asarray(masses, dtype=np.float64)
    v = np.asarray(velocities, dtype=np.float64)
    if v.ndim == 1:
        return float(np.sum(m * v))
    return np.sum(m[:, None] * v, axis=0)
