# MIT License (see LICENSE)
"""
The pendulum integration engine.

IntegrationEngine advances the pendulum's angle and angular velocity by
wall-clock-driven fixed steps. It manages:
- The Paused/Running state machine (play, pause, toggle, reset).
- The fixed-timestep accumulator that decouples simulated time from the
  host's frame rate.
- Per-step scheme dispatch (semi-implicit Euler or RK4, chosen by damping).
- Recovery from numeric faults: a bad step is skipped, not raised.

Structure:
    - Host creates a ParameterStore and an IntegrationEngine on it.
    - Host calls engine.play().
    - Every frame: engine.advance(frame_delta), then read engine.state.
"""
from __future__ import annotations
import enum
import logging
import math
from dataclasses import dataclass, field

from .constants import (
    DEFAULT_LENGTH_UNIT,
    LENGTH_UNITS,
    MIN_EFFECTIVE_LENGTH,
    MIN_GRAVITY,
)
from .core.integrators import integrate_step, integrator_for
from .core.invariants import mechanical_energy
from .params import ParameterStore
from .profiler import Profiler
from .types import KinematicState, PendulumParameters
from .util import all_finite, clamp_min

logger = logging.getLogger(__name__)


def physical_length(params: PendulumParameters, length_unit: str = DEFAULT_LENGTH_UNIT) -> float:
    """
    Pendulum length in metres, floored at MIN_EFFECTIVE_LENGTH.

    Raises:
        ValueError: If length_unit is not a known unit.
    """
    try:
        scale = LENGTH_UNITS[length_unit]
    except KeyError:
        raise ValueError(
            f"Unknown length unit: {length_unit!r} (expected one of {sorted(LENGTH_UNITS)})"
        ) from None
    return clamp_min(params.length * scale, MIN_EFFECTIVE_LENGTH)


class EngineState(enum.Enum):
    PAUSED = "paused"
    RUNNING = "running"


@dataclass(eq=False)
class IntegrationEngine:
    """
    Fixed-step pendulum integrator driven by frame deltas.

    Attributes:
        store: Source of parameters. Read once at the start of every advance().
        length_unit: Unit of params.length ("cm", "m" or "mm"). Default: "cm".
        profiler: Optional Profiler; each advance() is timed as "advance".

    Note:
        The engine never caps frame_delta. A host that was suspended for a
        long time should cap the delta itself (see FrameClock), otherwise
        advance() performs one step per time_interval of the gap.
    """
    store: ParameterStore
    length_unit: str = DEFAULT_LENGTH_UNIT
    profiler: Profiler | None = None

    # Internal state
    _state: KinematicState = field(init=False, repr=False)
    _mode: EngineState = field(init=False, default=EngineState.PAUSED)
    _accumulator: float = field(init=False, default=0.0)
    _steps_taken: int = field(init=False, default=0)
    _skipped_steps: int = field(init=False, default=0)
    _simulated_time: float = field(init=False, default=0.0)

    def __post_init__(self) -> None:
        """Validate configuration and start paused at the starting angle."""
        if not isinstance(self.store, ParameterStore):
            raise TypeError(f"IntegrationEngine needs a ParameterStore, got {type(self.store).__name__}")
        # Raises ValueError on an unknown unit.
        physical_length(self.store.params, self.length_unit)
        self._state = self.store.initial_state()
        self.store.add_reset_listener(self._on_store_reset)

    # -------------------------------------------------------------------------
    # State machine
    # -------------------------------------------------------------------------

    @property
    def mode(self) -> EngineState:
        return self._mode

    @property
    def is_running(self) -> bool:
        return self._mode is EngineState.RUNNING

    def play(self) -> None:
        if self._mode is not EngineState.RUNNING:
            logger.debug("Engine running.")
        self._mode = EngineState.RUNNING

    def pause(self) -> None:
        """Stop integrating. The accumulator is left untouched."""
        if self._mode is not EngineState.PAUSED:
            logger.debug("Engine paused.")
        self._mode = EngineState.PAUSED

    def toggle(self) -> EngineState:
        """Flip between running and paused; returns the new mode."""
        if self.is_running:
            self.pause()
        else:
            self.play()
        return self._mode

    def reset(self) -> None:
        """
        Pause, zero the accumulator and counters, and put the bob back at rest
        at the store's starting angle. Idempotent.
        """
        self._mode = EngineState.PAUSED
        self._accumulator = 0.0
        self._steps_taken = 0
        self._skipped_steps = 0
        self._simulated_time = 0.0
        self._state = self.store.initial_state()

    def _on_store_reset(self, params: PendulumParameters) -> None:
        self.reset()

    def close(self) -> None:
        """
        Detach from the store's reset notifications.

        The store only holds the engine weakly, so this is needed only to
        stop a still-referenced engine from following store resets.
        """
        self.store.remove_reset_listener(self._on_store_reset)

    def __enter__(self) -> IntegrationEngine:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # -------------------------------------------------------------------------
    # Read-only views
    # -------------------------------------------------------------------------

    @property
    def state(self) -> KinematicState:
        """Copy of the current kinematic state."""
        return self._state.copy()

    @property
    def accumulator(self) -> float:
        """Unconsumed wall-clock time in seconds, always in [0, time_interval)."""
        return self._accumulator

    @property
    def steps_taken(self) -> int:
        """Fixed steps consumed since the last reset, skipped ones included."""
        return self._steps_taken

    @property
    def skipped_steps(self) -> int:
        """Steps dropped because of a numeric fault since the last reset."""
        return self._skipped_steps

    @property
    def simulated_time(self) -> float:
        """Simulated seconds consumed since the last reset."""
        return self._simulated_time

    @property
    def integrator(self) -> str:
        """Name of the scheme the next step will use."""
        return integrator_for(self.store.params.damping)

    def effective_length(self, params: PendulumParameters | None = None) -> float:
        """Length in metres, floored so g/L stays finite."""
        return physical_length(params or self.store.params, self.length_unit)

    def energy(self) -> float:
        """Mechanical energy of the current state in Joules."""
        params = self.store.params
        return mechanical_energy(
            self._state.angle,
            self._state.angular_velocity,
            self.effective_length(params),
            clamp_min(params.gravity, MIN_GRAVITY),
            params.mass,
        )

    # -------------------------------------------------------------------------
    # Integration
    # -------------------------------------------------------------------------

    def _step(self, params: PendulumParameters, length: float, dt: float) -> None:
        """
        Perform one fixed integration step of size dt (already scaled by speed).

        On a numeric fault the previous state is kept and the step is counted
        as skipped.
        """
        gravity = clamp_min(params.gravity, MIN_GRAVITY)
        s = self._state
        try:
            angle, velocity = integrate_step(
                s.angle, s.angular_velocity, gravity, length, params.damping, dt
            )
        except (ArithmeticError, ValueError) as exc:
            self._skipped_steps += 1
            logger.debug("Skipping pendulum step after numeric error: %s", exc)
            return

        if not all_finite(angle, velocity):
            self._skipped_steps += 1
            logger.debug(
                "Skipping pendulum step with non-finite result (angle=%r, velocity=%r).",
                angle, velocity,
            )
            return

        s.angle = angle
        s.angular_velocity = velocity

    def _consume(self, frame_delta: float) -> int:
        params = self.store.params
        interval = params.time_interval
        dt = interval * params.simulation_speed
        length = self.effective_length(params)

        self._accumulator += frame_delta
        steps = 0
        while self._accumulator >= interval:
            self._step(params, length, dt)
            self._accumulator -= interval
            self._simulated_time += dt
            steps += 1

        self._steps_taken += steps
        return steps

    def advance(self, frame_delta: float) -> int:
        """
        Feed elapsed wall-clock time into the engine.

        While running, frame_delta is added to the accumulator and consumed in
        fixed time_interval chunks; each chunk integrates the pendulum by
        time_interval × simulation_speed. While paused nothing happens.

        Args:
            frame_delta: Seconds since the previous frame.

        Returns:
            Number of fixed steps performed (0 when paused).

        Raises:
            ValueError: If frame_delta is negative, NaN or infinite.
        """
        frame_delta = float(frame_delta)
        if not math.isfinite(frame_delta) or frame_delta < 0.0:
            raise ValueError(f"frame_delta must be a finite, non-negative number, got {frame_delta}")

        if self._mode is EngineState.PAUSED:
            return 0

        prof = self.profiler
        if prof:
            with prof.section("advance"):
                return self._consume(frame_delta)
        return self._consume(frame_delta)
