# MIT License (see LICENSE)
import pytest
from pendulum_sim.clock import FrameClock
from pendulum_sim.engine import IntegrationEngine
from pendulum_sim.params import ParameterStore


def test_first_tick_is_zero():
    clock = FrameClock()
    assert clock.tick(5000.0) == 0.0
    assert clock.last_timestamp == 5000.0


def test_tick_returns_seconds():
    clock = FrameClock()
    clock.tick(1000.0)
    assert clock.tick(1016.0) == pytest.approx(0.016)
    assert clock.tick(1050.0) == pytest.approx(0.034)


def test_backwards_timestamp_is_zero():
    clock = FrameClock()
    clock.tick(2000.0)
    assert clock.tick(1500.0) == 0.0
    assert clock.tick(1510.0) == pytest.approx(0.010)


def test_cap():
    clock = FrameClock(max_frame_delta=0.1)
    clock.tick(0.0)
    # Tab was in the background for a minute
    assert clock.tick(60_000.0) == 0.1


def test_invalid_cap():
    with pytest.raises(ValueError):
        FrameClock(max_frame_delta=0.0)


def test_reset_forgets_last_timestamp():
    clock = FrameClock()
    clock.tick(100.0)
    clock.reset()
    assert clock.last_timestamp is None
    assert clock.tick(900.0) == 0.0


def test_paused_wall_time_is_not_replayed():
    engine = IntegrationEngine(ParameterStore())
    clock = FrameClock()

    # Paused for 10 s of frames
    for t in range(0, 10_001, 16):
        assert clock.drive(engine, float(t)) == 0
    assert engine.accumulator == 0.0

    engine.play()
    steps = clock.drive(engine, 10_000.0 + 25.0)
    assert steps == 2
    assert engine.steps_taken == 2
