# MIT License (see LICENSE)
"""
Core pendulum physics.

This subpackage provides:
    - Integrators: semi-implicit Euler (undamped), RK4 (damped), and the
      damping-based dispatch between them.
    - Invariants: kinetic, potential and total mechanical energy.

Typical usage:
    from pendulum_sim.core import integrate_step, mechanical_energy

    angle, omega = integrate_step(0.5, 0.0, 9.81, 1.0, 0.0, 0.01)
    e = mechanical_energy(angle, omega, length=1.0, gravity=9.81)
"""
from .integrators import (
    pendulum_acceleration,
    integrator_for,
    semi_implicit_euler_step,
    rk4_stages,
    rk4_step,
    integrate_step,
    SEMI_IMPLICIT_EULER,
    RK4,
)
from .invariants import (
    kinetic_energy,
    potential_energy,
    mechanical_energy,
    energy_drift,
)

__all__ = [
    # Integrators
    "pendulum_acceleration",
    "integrator_for",
    "semi_implicit_euler_step",
    "rk4_stages",
    "rk4_step",
    "integrate_step",
    "SEMI_IMPLICIT_EULER",
    "RK4",
    # Invariants
    "kinetic_energy",
    "potential_energy",
    "mechanical_energy",
    "energy_drift",
]
