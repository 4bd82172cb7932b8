# MIT License (see LICENSE)
"""
Human-readable breakdown of a single integration step.

explain_step() shows how one fixed step turns the current state into the
next one, with the numbers substituted into each equation. It uses the
same integrator functions as the engine, so the printed result is exactly
what the engine would compute for that step.

Example:
    for i, s in enumerate(explain_step(engine.state, store.params), 1):
        print(f"Step {i}: {s.description}")
        print("   ", s.equation)
        print("   ", s.calculation)
"""
from __future__ import annotations
from dataclasses import dataclass

from .constants import DEFAULT_LENGTH_UNIT, MIN_GRAVITY
from .core.integrators import (
    SEMI_IMPLICIT_EULER,
    integrate_step,
    integrator_for,
    pendulum_acceleration,
    rk4_stages,
    rk4_step,
    semi_implicit_euler_step,
)
from .engine import physical_length
from .types import KinematicState, PendulumParameters
from .util import clamp_min


@dataclass(frozen=True)
class CalculationStep:
    description: str
    equation: str
    calculation: str
    result: str


def _f(x: float) -> str:
    return f"{x:.4f}"


def explain_step(
    state: KinematicState,
    params: PendulumParameters,
    length_unit: str = DEFAULT_LENGTH_UNIT,
) -> list[CalculationStep]:
    """
    Describe one fixed integration step starting from state.

    Args:
        state: State before the step.
        params: Validated parameters.
        length_unit: Unit of params.length.

    Returns:
        Ordered list of CalculationStep. The last entry carries the new
        angle and angular velocity.
    """
    theta, omega = state.angle, state.angular_velocity
    dt = params.time_interval
    speed = params.simulation_speed
    h = dt * speed
    g = clamp_min(params.gravity, MIN_GRAVITY)
    L = physical_length(params, length_unit)
    b = params.damping

    steps = [
        CalculationStep(
            description="Current state of the pendulum",
            equation="θ(t), ω(t)",
            calculation=f"θ(t) = {_f(theta)} rad, ω(t) = {_f(omega)} rad/s",
            result="Angle and angular velocity before the step",
        ),
        CalculationStep(
            description="Effective time step",
            equation="Δt = timeInterval × simulationSpeed",
            calculation=f"Δt = {_f(dt)} × {speed:.1f} = {_f(h)} s",
            result="Simulated time covered by one fixed step",
        ),
    ]

    if integrator_for(b) == SEMI_IMPLICIT_EULER:
        alpha = pendulum_acceleration(theta, omega, g, L)
        new_theta, new_omega = semi_implicit_euler_step(theta, omega, g, L, h)
        steps += [
            CalculationStep(
                description="Angular acceleration (no damping)",
                equation="α = -(g/L) × sin(θ)",
                calculation=f"α = -({g:.2f}/{L:.2f}) × sin({_f(theta)}) = {_f(alpha)} rad/s²",
                result="Acceleration due to gravity alone",
            ),
            CalculationStep(
                description="Update angular velocity",
                equation="ω(t+Δt) = ω(t) + α × Δt",
                calculation=f"ω(t+Δt) = {_f(omega)} + {_f(alpha)} × {_f(h)} = {_f(new_omega)} rad/s",
                result="Velocity is updated first (semi-implicit Euler)",
            ),
            CalculationStep(
                description="Update angle",
                equation="θ(t+Δt) = θ(t) + ω(t+Δt) × Δt",
                calculation=f"θ(t+Δt) = {_f(theta)} + {_f(new_omega)} × {_f(h)} = {_f(new_theta)} rad",
                result="The angle moves with the updated velocity",
            ),
        ]
    else:
        alpha = pendulum_acceleration(theta, omega, g, L, b)
        k1, k2, k3, k4 = rk4_stages(theta, omega, g, L, b, h)
        new_theta, new_omega = rk4_step(theta, omega, g, L, b, h)
        slopes = ", ".join(
            f"k{i} = ({_f(k[0])}, {_f(k[1])})" for i, k in enumerate((k1, k2, k3, k4), 1)
        )
        steps += [
            CalculationStep(
                description="Angular acceleration with damping",
                equation="α = -(g/L) × sin(θ) - b × ω",
                calculation=(
                    f"α = -({g:.2f}/{L:.2f}) × sin({_f(theta)}) - {b:.3f} × {_f(omega)}"
                    f" = {_f(alpha)} rad/s²"
                ),
                result="Gravity and damping both contribute",
            ),
            CalculationStep(
                description="RK4 stage slopes (dθ/dt, dω/dt)",
                equation="k₁..k₄ at start, two midpoints and the end of the step",
                calculation=slopes,
                result="Four slope evaluations per step",
            ),
            CalculationStep(
                description="Weighted combination",
                equation="x(t+Δt) = x(t) + (Δt/6) × (k₁ + 2k₂ + 2k₃ + k₄)",
                calculation=f"θ(t+Δt) = {_f(theta)} → {_f(new_theta)} rad",
                result=f"ω(t+Δt) = {_f(omega)} → {_f(new_omega)} rad/s",
            ),
        ]

    return steps


def next_state(
    state: KinematicState,
    params: PendulumParameters,
    length_unit: str = DEFAULT_LENGTH_UNIT,
) -> KinematicState:
    """The state explain_step() describes, without the text."""
    theta, omega = integrate_step(
        state.angle,
        state.angular_velocity,
        clamp_min(params.gravity, MIN_GRAVITY),
        physical_length(params, length_unit),
        params.damping,
        params.time_interval * params.simulation_speed,
    )
    return KinematicState(theta, omega)
