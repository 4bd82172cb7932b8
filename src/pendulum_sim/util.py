# MIT License (see LICENSE)
"""
Small scalar helpers shared by the parameter store and the engine.
"""
from __future__ import annotations
import math


def clamp_min(value: float, minimum: float) -> float:
    """
    Return value raised to minimum if it is lower.

    NaN compares false against everything, so it is replaced by minimum too.
    """
    value = float(value)
    return value if value >= minimum else float(minimum)


def deg_to_rad(degrees: float) -> float:
    return degrees * math.pi / 180.0


def rad_to_deg(radians: float) -> float:
    return radians * 180.0 / math.pi


def all_finite(*values: float) -> bool:
    """True when none of the values is NaN or infinite."""
    return all(math.isfinite(v) for v in values)
