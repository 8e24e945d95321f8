# MIT License (see LICENSE)
"""
Utility functions for vector math and numeric formatting.

Points and vectors are numpy arrays of shape (2,). Diagram space follows the
SVG convention: +x to the right, +y downward. Force angles are given in
degrees in the usual mathematical sense (0 = +x, counterclockwise positive),
so converting an angle to a diagram-space direction flips the y component.
"""
from __future__ import annotations
import math

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Lets callers pass tuples or lists for points and offsets.
    """
    return np.array(x, dtype=np.float64)


def direction(angle_deg: float) -> np.ndarray:
    """
    Diagram-space unit vector for a mathematical angle in degrees.

    The y component is negated because diagram y grows downward.
    """
    rad = math.radians(angle_deg)
    return np.array([math.cos(rad), -math.sin(rad)], dtype=np.float64)


def rotate(v: np.ndarray, angle_deg: float) -> np.ndarray:
    """
    Rotate a diagram-space vector counterclockwise (as seen on screen).

    Because diagram y points down, an on-screen counterclockwise rotation is
    a clockwise rotation of the raw coordinates.
    """
    rad = math.radians(angle_deg)
    c, s = math.cos(rad), math.sin(rad)
    return np.array([v[0] * c + v[1] * s, -v[0] * s + v[1] * c], dtype=np.float64)


def format_number(value: float, decimals: int = 2) -> str:
    """Fixed-point formatting used for every displayed quantity."""
    return f"{value:.{decimals}f}"
