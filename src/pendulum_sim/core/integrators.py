# MIT License (see LICENSE)
"""
Numerical integrators for the single pendulum.

Both integrators solve the damped pendulum equation:
    dθ/dt = ω
    dω/dt = -(g/L)·sin θ - b·ω

Available integrators:
- semi_implicit_euler_step: Symplectic Euler, used when b == 0. Velocity is
  updated first and the new velocity moves the angle, which keeps energy
  bounded over long runs.
- rk4_step: Fixed-step 4th-order Runge-Kutta, used when b != 0. Plain Euler
  visibly drifts once energy is being removed by damping.

All functions are pure: they take the state as floats and return the new
(angle, angular_velocity) pair. The caller owns the state.

Reference:
    Semi-implicit Euler: https://en.wikipedia.org/wiki/Semi-implicit_Euler_method
    Runge-Kutta methods: https://en.wikipedia.org/wiki/Runge-Kutta_methods
"""
from __future__ import annotations
import math
from typing import NamedTuple

SEMI_IMPLICIT_EULER = "semi_implicit_euler"
RK4 = "rk4"


class RK4Stages(NamedTuple):
    """Slopes (dθ/dt, dω/dt) of the four RK4 stages."""
    k1: tuple[float, float]
    k2: tuple[float, float]
    k3: tuple[float, float]
    k4: tuple[float, float]


def pendulum_acceleration(
    theta: float,
    omega: float,
    gravity: float,
    length: float,
    damping: float = 0.0,
) -> float:
    """
    Angular acceleration α = -(g/L)·sin θ - b·ω.

    Args:
        theta: Angle in radians.
        omega: Angular velocity in rad/s.
        gravity: g in m/s².
        length: L in metres (must be > 0).
        damping: Linear damping coefficient b.
    """
    return (-gravity / length) * math.sin(theta) - damping * omega


def integrator_for(damping: float) -> str:
    """Name of the scheme used for a given damping coefficient."""
    return SEMI_IMPLICIT_EULER if damping == 0 else RK4


def semi_implicit_euler_step(
    angle: float,
    velocity: float,
    gravity: float,
    length: float,
    dt: float,
) -> tuple[float, float]:
    """
    Advance an undamped pendulum by dt using semi-implicit Euler.

        ω(t+dt) = ω(t) + α(θ(t))·dt
        θ(t+dt) = θ(t) + ω(t+dt)·dt

    Returns:
        Tuple (angle, velocity) after the step.
    """
    velocity = velocity + (-gravity / length) * math.sin(angle) * dt
    angle = angle + velocity * dt
    return angle, velocity


def rk4_stages(
    angle: float,
    velocity: float,
    gravity: float,
    length: float,
    damping: float,
    dt: float,
) -> RK4Stages:
    """
    Evaluate the four RK4 slope pairs for the pendulum at (angle, velocity).

    Each stage evaluates the derivatives at the midpoint (k2, k3) or endpoint
    (k4) estimate built from the previous stage's slope.
    """
    def f(th: float, w: float) -> tuple[float, float]:
        return w, pendulum_acceleration(th, w, gravity, length, damping)

    k1 = f(angle, velocity)
    k2 = f(angle + 0.5 * dt * k1[0], velocity + 0.5 * dt * k1[1])
    k3 = f(angle + 0.5 * dt * k2[0], velocity + 0.5 * dt * k2[1])
    k4 = f(angle + dt * k3[0], velocity + dt * k3[1])
    return RK4Stages(k1, k2, k3, k4)


def rk4_step(
    angle: float,
    velocity: float,
    gravity: float,
    length: float,
    damping: float,
    dt: float,
) -> tuple[float, float]:
    """
    Advance the pendulum by dt using classical 4th-order Runge-Kutta.

    The stages are combined with weights (1, 2, 2, 1)/6, giving O(dt⁵)
    local error.

    Returns:
        Tuple (angle, velocity) after the step.
    """
    k1, k2, k3, k4 = rk4_stages(angle, velocity, gravity, length, damping, dt)
    angle = angle + (dt / 6.0) * (k1[0] + 2 * k2[0] + 2 * k3[0] + k4[0])
    velocity = velocity + (dt / 6.0) * (k1[1] + 2 * k2[1] + 2 * k3[1] + k4[1])
    return angle, velocity


def integrate_step(
    angle: float,
    velocity: float,
    gravity: float,
    length: float,
    damping: float,
    dt: float,
) -> tuple[float, float]:
    """
    Advance the pendulum by one step, picking the scheme from damping.

    No floors are applied here; gravity and length must already be positive.
    """
    if integrator_for(damping) == SEMI_IMPLICIT_EULER:
        return semi_implicit_euler_step(angle, velocity, gravity, length, dt)
    return rk4_step(angle, velocity, gravity, length, damping, dt)
