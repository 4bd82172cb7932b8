# MIT License (see LICENSE)
import pytest
from pendulum_sim.comparison import ParameterComparison
from pendulum_sim.types import PendulumParameters


def test_only_the_chosen_field_differs():
    base = PendulumParameters(damping=0.0)
    cmp = ParameterComparison(base, "damping", 0.5)
    b, v = cmp.baseline.store.params, cmp.variant.store.params
    assert v.damping == 0.5
    assert b.damping == 0.0
    assert b.replace(damping=0.5) == v


def test_variant_value_is_validated():
    cmp = ParameterComparison(PendulumParameters(), "gravity", -3.0)
    assert cmp.variant.store.params.gravity == 0.01


def test_unknown_field():
    with pytest.raises(ValueError):
        ParameterComparison(PendulumParameters(), "color", 1.0)


def test_frame_delta_is_capped():
    cmp = ParameterComparison(PendulumParameters(), "mass", 2.0, max_frame_delta=0.1)
    cmp.play()
    assert cmp.advance(5.0) == (10, 10)


def test_uncapped():
    cmp = ParameterComparison(PendulumParameters(), "mass", 2.0, max_frame_delta=None)
    cmp.play()
    steps, _ = cmp.advance(0.255)
    assert steps == 25


def test_mass_has_no_effect_on_motion():
    cmp = ParameterComparison(PendulumParameters(), "mass", 5.0)
    cmp.play()
    for _ in range(20):
        cmp.advance(1 / 60)
    baseline, variant = cmp.states
    assert baseline == variant


def test_damping_variant_loses_energy():
    cmp = ParameterComparison(PendulumParameters(simulation_speed=1), "damping", 0.8)
    cmp.play()
    for _ in range(120):
        cmp.advance(1 / 60)
    assert cmp.variant.energy() < cmp.baseline.energy()


def test_set_value_restarts_both():
    cmp = ParameterComparison(PendulumParameters(), "length", 50)
    cmp.play()
    cmp.advance(0.1)
    cmp.set_value(200)
    assert cmp.variant.store.params.length == 200
    for e in cmp.engines:
        assert not e.is_running
        assert e.accumulator == 0.0
        assert e.state.angular_velocity == 0.0


def test_pause_and_reset():
    cmp = ParameterComparison(PendulumParameters(), "starting_angle", 10)
    cmp.play()
    cmp.advance(0.05)
    cmp.pause()
    assert cmp.advance(0.05) == (0, 0)
    cmp.reset()
    baseline, variant = cmp.states
    assert baseline.angle_degrees == pytest.approx(45)
    assert variant.angle_degrees == pytest.approx(10)


@pytest.mark.parametrize("field, expected", [
    ("length", 50.0),
    ("gravity", 5.0),
    ("damping", 0.5),
    ("simulation_speed", 40.0),
])
def test_default_value_comes_from_catalog(field, expected):
    cmp = ParameterComparison(PendulumParameters(), field)
    assert getattr(cmp.variant.store.params, field) == expected
    assert cmp.info.comparison_value == expected


@pytest.mark.parametrize("cap", [0.0, -0.1, float("nan")])
def test_frame_delta_cap_must_be_positive(cap):
    with pytest.raises(ValueError):
        ParameterComparison(PendulumParameters(), "mass", 2.0, max_frame_delta=cap)
