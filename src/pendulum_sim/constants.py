# MIT License (see LICENSE)
"""
Constants used throughout the simulation.

Defaults and safe minimums describe the user-facing parameters (length in
centimetres, angles in degrees). Floors are applied again inside every
integration step, in physics units (metres, m/s²).
"""
from __future__ import annotations

# Default parameter values, restored by ParameterStore.reset().
DEFAULT_LENGTH: float = 100.0
DEFAULT_MASS: float = 1.0
DEFAULT_STARTING_ANGLE: float = 45.0
DEFAULT_GRAVITY: float = 9.81
DEFAULT_DAMPING: float = 0.0
DEFAULT_TIME_INTERVAL: float = 0.01
DEFAULT_SIMULATION_SPEED: float = 30.0

# Minimum safe values. Anything lower is raised to these on write.
MIN_LENGTH: float = 1.0
MIN_MASS: float = 0.1
MIN_GRAVITY: float = 0.01
MIN_DAMPING: float = 0.0
# Bounds the fixed-step loop: each iteration consumes at least this much time.
MIN_TIME_INTERVAL: float = 0.001
MIN_SIMULATION_SPEED: float = 0.1

# Per-step floor on the physical length (metres) so g/L stays finite.
MIN_EFFECTIVE_LENGTH: float = 1e-3

# Conversion factors from the input length unit to metres.
LENGTH_UNITS: dict[str, float] = {
    "cm": 0.01,
    "m": 1.0,
    "mm": 0.001,
}
DEFAULT_LENGTH_UNIT: str = "cm"
