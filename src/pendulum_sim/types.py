# MIT License (see LICENSE)
"""
Core type definitions for the pendulum simulation.

Defines the two data structures the engine works with:
- PendulumParameters: immutable configuration, written only by ParameterStore.
- KinematicState: the simulated angle and angular velocity, owned by the engine.

The equation of motion is the single damped pendulum:
  dθ/dt = ω
  dω/dt = -(g/L)·sin θ - b·ω
"""
from __future__ import annotations
from dataclasses import dataclass, fields, replace as _dc_replace

from .constants import (
    DEFAULT_LENGTH,
    DEFAULT_MASS,
    DEFAULT_STARTING_ANGLE,
    DEFAULT_GRAVITY,
    DEFAULT_DAMPING,
    DEFAULT_TIME_INTERVAL,
    DEFAULT_SIMULATION_SPEED,
)
from .util import deg_to_rad, rad_to_deg


# =============================================================================
# Parameters
# =============================================================================

@dataclass(frozen=True)
class PendulumParameters:
    """
    Physical and simulation configuration of the pendulum.

    Attributes:
        length: String length in the engine's input unit (centimetres by default).
        mass: Bob mass in kg. Only affects drawing and energy, not the motion.
        starting_angle: Initial angle in degrees from the vertical.
        gravity: Gravitational acceleration in m/s².
        damping: Linear damping coefficient b (1/s).
        time_interval: Fixed integration step in seconds of wall-clock time.
        simulation_speed: Multiplier applied to every fixed step.

    Note:
        Instances are not validated on construction. Go through
        ParameterStore (or validate_parameters) to get clamped values.
    """
    length: float = DEFAULT_LENGTH
    mass: float = DEFAULT_MASS
    starting_angle: float = DEFAULT_STARTING_ANGLE
    gravity: float = DEFAULT_GRAVITY
    damping: float = DEFAULT_DAMPING
    time_interval: float = DEFAULT_TIME_INTERVAL
    simulation_speed: float = DEFAULT_SIMULATION_SPEED

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @property
    def starting_angle_rad(self) -> float:
        """Starting angle converted to radians."""
        return deg_to_rad(self.starting_angle)

    @property
    def effective_step(self) -> float:
        """Simulated time advanced by one fixed step: time_interval × simulation_speed."""
        return self.time_interval * self.simulation_speed

    def replace(self, **changes: float) -> "PendulumParameters":
        """Return a copy with the given fields replaced (no validation)."""
        return _dc_replace(self, **changes)


# =============================================================================
# Kinematic state
# =============================================================================

@dataclass
class KinematicState:
    """
    Simulated state of the bob.

    Attributes:
        angle: Angle from the vertical in radians (positive = counterclockwise
               as seen by the renderer, bob at x = sin θ).
        angular_velocity: dθ/dt in rad/s.
    """
    angle: float = 0.0
    angular_velocity: float = 0.0

    @classmethod
    def from_parameters(cls, params: PendulumParameters) -> "KinematicState":
        """Initial state: at rest at the starting angle."""
        return cls(angle=params.starting_angle_rad, angular_velocity=0.0)

    def copy(self) -> "KinematicState":
        return KinematicState(self.angle, self.angular_velocity)

    @property
    def angle_degrees(self) -> float:
        return rad_to_deg(self.angle)

    @property
    def angular_velocity_degrees(self) -> float:
        return rad_to_deg(self.angular_velocity)
