# MIT License (see LICENSE)
"""
Validated storage for pendulum parameters.

ParameterStore is the only writer of PendulumParameters. Every write is
merged into the current values and then passed through one validator per
bounded field; values below the safe minimum are raised to it. Nothing is
ever rejected, so slider input can be forwarded as-is.

Example:
    store = ParameterStore()
    store.set(length=-5)         # -> length == 1.0
    store.set({"damping": 0.5})
    store.reset()                # defaults, listeners notified
"""
from __future__ import annotations
import inspect
import logging
import weakref
from typing import Callable, Mapping

from .constants import (
    MIN_LENGTH,
    MIN_MASS,
    MIN_GRAVITY,
    MIN_DAMPING,
    MIN_TIME_INTERVAL,
    MIN_SIMULATION_SPEED,
)
from .types import PendulumParameters, KinematicState
from .util import clamp_min

logger = logging.getLogger(__name__)


# =============================================================================
# Per-field validators
# =============================================================================

def validate_length(value: float) -> float:
    return clamp_min(value, MIN_LENGTH)


def validate_mass(value: float) -> float:
    return clamp_min(value, MIN_MASS)


def validate_gravity(value: float) -> float:
    return clamp_min(value, MIN_GRAVITY)


def validate_damping(value: float) -> float:
    return clamp_min(value, MIN_DAMPING)


def validate_time_interval(value: float) -> float:
    return clamp_min(value, MIN_TIME_INTERVAL)


def validate_simulation_speed(value: float) -> float:
    return clamp_min(value, MIN_SIMULATION_SPEED)


# starting_angle is unbounded.
FIELD_VALIDATORS: dict[str, Callable[[float], float]] = {
    "length": validate_length,
    "mass": validate_mass,
    "gravity": validate_gravity,
    "damping": validate_damping,
    "time_interval": validate_time_interval,
    "simulation_speed": validate_simulation_speed,
}


def validate_parameters(params: PendulumParameters) -> PendulumParameters:
    """Return params with every bounded field clamped to its minimum."""
    return params.replace(**{
        name: validator(getattr(params, name))
        for name, validator in FIELD_VALIDATORS.items()
    })


# =============================================================================
# Store
# =============================================================================

ResetListener = Callable[[PendulumParameters], None]


class ParameterStore:
    """
    Holds the current validated PendulumParameters.

    Reset listeners are called after reset() with the fresh defaults. The
    integration engine registers one so a store reset also stops play and
    zeroes its accumulator. Engines are only referenced weakly; dropping
    an engine is enough to detach it.
    """

    def __init__(self, params: PendulumParameters | None = None) -> None:
        self._params = validate_parameters(params or PendulumParameters())
        self._reset_listeners: list[Callable[[], ResetListener | None]] = []

    @property
    def params(self) -> PendulumParameters:
        return self._params

    def set(
        self,
        changes: Mapping[str, float] | None = None,
        **kwargs: float,
    ) -> PendulumParameters:
        """
        Merge changes into the current parameters and validate.

        Accepts a mapping, keyword arguments, or both (keywords win).

        Returns:
            The new, fully validated parameters.

        Raises:
            TypeError: If a field name is not a PendulumParameters field.
        """
        update = dict(changes or {})
        update.update(kwargs)
        unknown = set(update) - set(PendulumParameters.field_names())
        if unknown:
            raise TypeError(f"Unknown pendulum parameter(s): {sorted(unknown)}")

        merged = self._params.replace(**{k: float(v) for k, v in update.items()})
        self._params = validate_parameters(merged)
        return self._params

    def reset(self) -> PendulumParameters:
        """Restore defaults and notify reset listeners."""
        self._params = validate_parameters(PendulumParameters())
        logger.info("Pendulum parameters reset to defaults.")
        for listener in self.reset_listeners:
            listener(self._params)
        return self._params

    def initial_state(self) -> KinematicState:
        """Kinematic state at rest at the current starting angle."""
        return KinematicState.from_parameters(self._params)

    @property
    def reset_listeners(self) -> list[ResetListener]:
        """Listeners that are still alive, in registration order."""
        alive = (ref() for ref in self._reset_listeners)
        return [listener for listener in alive if listener is not None]

    def add_reset_listener(self, listener: ResetListener) -> None:
        """
        Register listener to be called after reset().

        Bound methods are held weakly, so an object that is otherwise
        discarded (an engine the host dropped) leaves the list on its own.
        Plain functions and other callables are held strongly.
        """
        if listener in self.reset_listeners:
            return
        if inspect.ismethod(listener):
            ref = weakref.WeakMethod(listener, self._drop_listener_ref)
        else:
            ref = _StrongRef(listener)
        self._reset_listeners.append(ref)

    def remove_reset_listener(self, listener: ResetListener) -> None:
        self._reset_listeners = [
            ref for ref in self._reset_listeners if ref() != listener
        ]

    def _drop_listener_ref(self, ref: weakref.WeakMethod) -> None:
        self._reset_listeners = [r for r in self._reset_listeners if r is not ref]


class _StrongRef:
    """Same call shape as a weak reference, but keeps its target alive."""

    __slots__ = ("_target",)

    def __init__(self, target: ResetListener) -> None:
        self._target = target

    def __call__(self) -> ResetListener:
        return self._target
