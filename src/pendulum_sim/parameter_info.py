# MIT License (see LICENSE)
"""
Descriptive catalog of the pendulum parameters.

One ParameterInfo per PendulumParameters field: the text a settings panel
or tooltip shows, the slider range and step, and the value the
comparison view contrasts with the default.

Example:
    info = parameter_info("gravity")
    print(info.title, info.equation)
    ParameterComparison(PendulumParameters(), "gravity")  # uses info.comparison_value
"""
from __future__ import annotations
from dataclasses import dataclass

from .constants import (
    DEFAULT_DAMPING,
    DEFAULT_GRAVITY,
    DEFAULT_LENGTH,
    DEFAULT_MASS,
    DEFAULT_SIMULATION_SPEED,
    DEFAULT_STARTING_ANGLE,
    DEFAULT_TIME_INTERVAL,
    MIN_DAMPING,
    MIN_GRAVITY,
    MIN_LENGTH,
    MIN_MASS,
    MIN_SIMULATION_SPEED,
    MIN_TIME_INTERVAL,
)
from .types import PendulumParameters


@dataclass(frozen=True)
class ParameterInfo:
    """
    Presentation metadata for one parameter.

    Attributes:
        name: PendulumParameters field name.
        title: Short display name.
        description: What the parameter does to the motion.
        equation: Relation that shows its role.
        unit: Unit of the stored value.
        hint: One-line tooltip for the settings slider.
        default_value: Value after ParameterStore.reset().
        comparison_value: Value shown against the default in a comparison.
        slider_min, slider_max, slider_step: Settings slider range.
    """
    name: str
    title: str
    description: str
    equation: str
    unit: str
    hint: str
    default_value: float
    comparison_value: float
    slider_min: float
    slider_max: float
    slider_step: float

    def contains(self, value: float) -> bool:
        """True if value lies within the slider range."""
        return self.slider_min <= value <= self.slider_max


PARAMETER_INFO: dict[str, ParameterInfo] = {
    "length": ParameterInfo(
        name="length",
        title="Pendulum Length",
        description=(
            "The length of the pendulum affects the period of oscillation. "
            "A longer pendulum swings more slowly than a shorter one."
        ),
        equation="T = 2π√(L/g)",
        unit="cm",
        hint="Length of the pendulum string (centimeters)",
        default_value=DEFAULT_LENGTH,
        comparison_value=50.0,
        slider_min=MIN_LENGTH,
        slider_max=200.0,
        slider_step=1.0,
    ),
    "mass": ParameterInfo(
        name="mass",
        title="Pendulum Mass",
        description=(
            "In an ideal pendulum, mass doesn't affect the period of oscillation. "
            "It only changes the visual size of the pendulum bob."
        ),
        equation="Mass doesn't affect period: T = 2π√(L/g)",
        unit="kg",
        hint="Mass of the pendulum bob (kg)",
        default_value=DEFAULT_MASS,
        comparison_value=2.0,
        slider_min=MIN_MASS,
        slider_max=10.0,
        slider_step=0.01,
    ),
    "starting_angle": ParameterInfo(
        name="starting_angle",
        title="Starting Angle",
        description=(
            "The initial angle from which the pendulum is released. "
            "Larger angles result in more nonlinear behavior."
        ),
        equation="For small angles: θ(t) ≈ θ₀cos(ωt)",
        unit="deg",
        hint="Initial angle of the pendulum (degrees)",
        default_value=DEFAULT_STARTING_ANGLE,
        comparison_value=90.0,
        slider_min=-180.0,
        slider_max=180.0,
        slider_step=1.0,
    ),
    "gravity": ParameterInfo(
        name="gravity",
        title="Gravity",
        description=(
            "The gravitational acceleration affects the pendulum's period. "
            "Higher gravity results in faster oscillations."
        ),
        equation="T = 2π√(L/g)",
        unit="m/s²",
        hint="Acceleration due to gravity (m/s²)",
        default_value=DEFAULT_GRAVITY,
        comparison_value=5.0,
        slider_min=MIN_GRAVITY,
        slider_max=20.0,
        slider_step=0.01,
    ),
    "damping": ParameterInfo(
        name="damping",
        title="Damping",
        description=(
            "Damping represents air resistance or friction. "
            "Higher damping causes the pendulum to slow down faster."
        ),
        equation="d²θ/dt² + b·dθ/dt + (g/L)·sin(θ) = 0",
        unit="1/s",
        hint="Damping factor (air resistance)",
        default_value=DEFAULT_DAMPING,
        comparison_value=0.5,
        slider_min=MIN_DAMPING,
        slider_max=2.0,
        slider_step=0.01,
    ),
    "time_interval": ParameterInfo(
        name="time_interval",
        title="Time Interval",
        description=(
            "The time step used in the physics simulation. "
            "Smaller values give more accurate results but may be slower."
        ),
        equation="Numerical integration: θₙ₊₁ = θₙ + Δt·ω",
        unit="s",
        hint="Time step for simulation (seconds)",
        default_value=DEFAULT_TIME_INTERVAL,
        comparison_value=0.1,
        slider_min=MIN_TIME_INTERVAL,
        slider_max=1.0,
        slider_step=0.001,
    ),
    "simulation_speed": ParameterInfo(
        name="simulation_speed",
        title="Simulation Speed",
        description=(
            "Controls how fast the simulation runs. "
            "Higher values make the pendulum move faster."
        ),
        equation="Effective Δt = timeInterval × simulationSpeed",
        unit="×",
        hint="Speed multiplier for simulation integration",
        default_value=DEFAULT_SIMULATION_SPEED,
        comparison_value=40.0,
        slider_min=MIN_SIMULATION_SPEED,
        slider_max=50.0,
        slider_step=0.1,
    ),
}


def parameter_info(name: str) -> ParameterInfo:
    """
    Catalog entry for a PendulumParameters field.

    Raises:
        ValueError: If name is not a PendulumParameters field.
    """
    if name not in PendulumParameters.field_names():
        raise ValueError(f"Unknown pendulum parameter: '{name}'")
    return PARAMETER_INFO[name]
