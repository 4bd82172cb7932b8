# MIT License (see LICENSE)
import pytest
from pendulum_sim.engine import IntegrationEngine
from pendulum_sim.params import ParameterStore
from pendulum_sim.trace import explain_step, next_state
from pendulum_sim.types import PendulumParameters, KinematicState


def _one_engine_step(store):
    engine = IntegrationEngine(store)
    engine.play()
    # Exactly one fixed step
    assert engine.advance(store.params.time_interval) == 1
    return engine.state


def test_next_state_matches_engine_undamped():
    store = ParameterStore()
    assert next_state(store.initial_state(), store.params) == _one_engine_step(store)


def test_next_state_matches_engine_damped():
    store = ParameterStore()
    store.set(damping=0.7)
    assert next_state(store.initial_state(), store.params) == _one_engine_step(store)


def test_undamped_trace():
    store = ParameterStore()
    state = store.initial_state()
    steps = explain_step(state, store.params)
    new = next_state(state, store.params)

    assert len(steps) == 5
    assert steps[0].description == "Current state of the pendulum"
    assert "0.7854" in steps[0].calculation
    assert "Δt = 0.0100 × 30.0 = 0.3000 s" == steps[1].calculation
    assert "(no damping)" in steps[2].description
    assert f"{new.angular_velocity:.4f} rad/s" in steps[3].calculation
    assert f"{new.angle:.4f} rad" in steps[4].calculation


def test_damped_trace():
    store = ParameterStore()
    store.set(damping=0.25)
    state = KinematicState(angle=0.4, angular_velocity=-1.0)
    steps = explain_step(state, store.params)
    new = next_state(state, store.params)

    assert len(steps) == 5
    assert "b × ω" in steps[2].equation
    assert "k1 = (" in steps[3].calculation and "k4 = (" in steps[3].calculation
    assert steps[4].calculation.endswith(f"{new.angle:.4f} rad")
    assert steps[4].result.endswith(f"{new.angular_velocity:.4f} rad/s")


def test_trace_applies_gravity_floor():
    # Unvalidated parameters still get the per-step floor
    raw = PendulumParameters(gravity=0.0)
    floored = PendulumParameters(gravity=0.01)
    s = KinematicState(angle=0.5)
    assert next_state(s, raw) == next_state(s, floored)
    assert "0.01" in explain_step(s, raw)[2].calculation


def test_trace_length_unit():
    p = PendulumParameters(length=2)
    s = KinematicState(angle=0.5)
    assert next_state(s, p, "m") == next_state(s, p.replace(length=200), "cm")
