# MIT License (see LICENSE)
"""
Utilities for calculating physical invariants of the pendulum.

Used for verifying simulation correctness. Without damping the total
mechanical energy should stay constant (within integration error); with
damping it can only decrease, since dE/dt = -b·m·L²·ω².

All functions accept scalars or numpy arrays, so a whole recorded
trajectory can be evaluated at once.
"""
from __future__ import annotations
import numpy as np


def kinetic_energy(angular_velocity, length: float, mass: float = 1.0):
    """
    T = ½·m·L²·ω²

    Args:
        angular_velocity: ω in rad/s (scalar or array).
        length: L in metres.
        mass: Bob mass in kg.
    """
    w = np.asarray(angular_velocity, dtype=np.float64)
    return 0.5 * mass * length * length * w * w


def potential_energy(angle, length: float, gravity: float, mass: float = 1.0):
    """
    V = m·g·L·(1 - cos θ), zero with the bob hanging straight down.
    """
    th = np.asarray(angle, dtype=np.float64)
    return mass * gravity * length * (1.0 - np.cos(th))


def mechanical_energy(
    angle,
    angular_velocity,
    length: float,
    gravity: float,
    mass: float = 1.0,
):
    """
    Total mechanical energy E = T + V in Joules.

    Returns a float for scalar input, an array for array input.
    """
    e = kinetic_energy(angular_velocity, length, mass) + potential_energy(angle, length, gravity, mass)
    return float(e) if np.ndim(e) == 0 else e


def energy_drift(energies) -> float:
    """
    Largest relative deviation of a sequence of energies from its first value.

    Returns the absolute deviation when the first energy is zero.
    """
    e = np.asarray(energies, dtype=np.float64)
    if e.size == 0:
        return 0.0
    e0 = e[0]
    dev = np.max(np.abs(e - e0))
    if e0 == 0.0:
        return float(dev)
    return float(dev / abs(e0))
