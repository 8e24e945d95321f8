# MIT License (see LICENSE)
"""
Ideal Atwood machine: two hanging masses over a massless, frictionless pulley.

    a = |m1 − m2|·g / (m1 + m2)
    T = 2·m1·m2·g / (m1 + m2)

Precondition (not checked): m1 + m2 > 0. Callers guard against zero or
negative masses before calling.
"""
from __future__ import annotations
from dataclasses import dataclass

from ..constants import GRAVITY
from ..types import CalculationResult
from .results import create_result


@dataclass(frozen=True)
class AtwoodResult:
    """
    Attributes:
        acceleration: Magnitude of each mass's acceleration (m/s²).
        tension: Rope tension (N).
        descending: 1 if m1 goes down, 2 if m2 goes down, 0 if balanced.
    """
    acceleration: float
    tension: float
    descending: int


def calculate_atwood(m1: float, m2: float, g: float = GRAVITY) -> AtwoodResult:
    """Acceleration and tension for masses m1 and m2 (kg)."""
    total = m1 + m2
    a = abs(m1 - m2) * g / total
    t = 2.0 * m1 * m2 * g / total
    if m1 > m2:
        descending = 1
    elif m2 > m1:
        descending = 2
    else:
        descending = 0
    return AtwoodResult(acceleration=a, tension=t, descending=descending)


def atwood_results(m1: float, m2: float, g: float = GRAVITY) -> list[CalculationResult]:
    """What-if rows for an Atwood machine; acceleration is primary."""
    r = calculate_atwood(m1, m2, g)
    return [
        create_result(r.acceleration, "m/s²", "Acceleration", "Acceleration of each mass", is_primary=True),
        create_result(r.tension, "N", "Tension", "Tension in the rope"),
        create_result(m1 * g, "N", "W₁", "Weight of mass 1"),
        create_result(m2 * g, "N", "W₂", "Weight of mass 2"),
    ]
