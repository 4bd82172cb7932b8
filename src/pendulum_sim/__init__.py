# MIT License (see LICENSE)
"""
pendulum_sim - A fixed-timestep simple pendulum simulator.

This package advances a single (optionally damped) pendulum through time,
decoupled from the host's frame rate, and keeps its parameters within safe
bounds while they are tuned live.

Main entry points:
    - ParameterStore: Validated, clamped pendulum parameters.
    - IntegrationEngine: Paused/Running engine with a fixed-step accumulator.
    - PendulumParameters, KinematicState: Configuration and simulated state.
    - FrameClock: Turns animation timestamps into frame deltas.

Submodules:
    - core: Integrators and energy invariants.
    - trace: Step-by-step breakdown of one integration step.
    - comparison: Two engines differing in one parameter.
    - parameter_info: Titles, equations, slider ranges and comparison values.
    - renderer: Optional output adapters.

Example:
    from pendulum_sim import ParameterStore, IntegrationEngine

    store = ParameterStore()
    engine = IntegrationEngine(store)
    engine.play()
    engine.advance(1 / 60)
    print(engine.state.angle)
"""
from .types import PendulumParameters, KinematicState
from .params import ParameterStore, validate_parameters
from .engine import IntegrationEngine, EngineState, physical_length
from .clock import FrameClock
from .parameter_info import ParameterInfo, PARAMETER_INFO, parameter_info

__all__ = [
    # Data
    "PendulumParameters",
    "KinematicState",
    # Parameters
    "ParameterStore",
    "validate_parameters",
    # Engine
    "IntegrationEngine",
    "EngineState",
    "physical_length",
    "FrameClock",
    # Catalog
    "ParameterInfo",
    "PARAMETER_INFO",
    "parameter_info",
]
