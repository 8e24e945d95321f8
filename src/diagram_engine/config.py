# MIT License (see LICENSE)
"""
Engine configuration.

Defaults live on a frozen dataclass; a host can override them in code or
through DIAGRAM_ENGINE_* environment variables:

    DIAGRAM_ENGINE_GRAVITY            float, m/s²
    DIAGRAM_ENGINE_TRAJECTORY_POINTS  int
    DIAGRAM_ENGINE_BASE_DURATION      float, seconds
    DIAGRAM_ENGINE_STAGGER            float, seconds
    DIAGRAM_ENGINE_REDUCED_MOTION     "1" to force reduced motion
"""
from __future__ import annotations
import os
from dataclasses import dataclass, replace
from typing import Mapping

from .constants import (
    GRAVITY,
    TRAJECTORY_POINTS,
    BASE_DURATION,
    STAGGER,
    LEAD_IN,
    DEFAULT_OBJECT_SIZE,
)

ENV_PREFIX = "DIAGRAM_ENGINE_"


@dataclass(frozen=True)
class EngineConfig:
    """
    Tunables shared by every diagram built with this config.

    Attributes:
        gravity: Gravitational acceleration for the kernel (m/s²).
        trajectory_points: Sampling intervals for projectile paths.
        base_duration: Draw duration of one revealed element (s).
        stagger: Delay between consecutive elements of a reveal batch (s).
        lead_in: Delay of the first force after the object (s).
        default_object_size: Object size when the payload gives none.
        reduced_motion: Host-level accessibility override.
    """
    gravity: float = GRAVITY
    trajectory_points: int = TRAJECTORY_POINTS
    base_duration: float = BASE_DURATION
    stagger: float = STAGGER
    lead_in: float = LEAD_IN
    default_object_size: float = DEFAULT_OBJECT_SIZE
    reduced_motion: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "EngineConfig":
        """Build a config from DIAGRAM_ENGINE_* variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        config = cls()
        overrides = {}
        if f"{ENV_PREFIX}GRAVITY" in env:
            overrides["gravity"] = float(env[f"{ENV_PREFIX}GRAVITY"])
        if f"{ENV_PREFIX}TRAJECTORY_POINTS" in env:
            overrides["trajectory_points"] = int(env[f"{ENV_PREFIX}TRAJECTORY_POINTS"])
        if f"{ENV_PREFIX}BASE_DURATION" in env:
            overrides["base_duration"] = float(env[f"{ENV_PREFIX}BASE_DURATION"])
        if f"{ENV_PREFIX}STAGGER" in env:
            overrides["stagger"] = float(env[f"{ENV_PREFIX}STAGGER"])
        if f"{ENV_PREFIX}REDUCED_MOTION" in env:
            overrides["reduced_motion"] = env[f"{ENV_PREFIX}REDUCED_MOTION"] == "1"
        return replace(config, **overrides)
