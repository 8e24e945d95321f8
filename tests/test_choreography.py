import pytest

from diagram_engine.config import EngineConfig
from diagram_engine.steps import (
    AnimationChoreographer,
    StepSequencer,
    definitions_from_ids,
    reveal_batch,
)


def test_delays_strictly_increase():
    """Non-object elements get lead_in + i * stagger."""
    c = AnimationChoreographer(base_duration=0.4, stagger=0.15, lead_in=0.2)
    timings = c.schedule(["W", "N", "f", "F"])
    delays = [t.delay for t in timings]
    print(delays)
    assert all(b > a for a, b in zip(delays, delays[1:]))
    assert delays[0] == pytest.approx(0.2)
    assert delays[3] == pytest.approx(0.2 + 3 * 0.15)
    assert all(t.duration == 0.4 for t in timings)


def test_object_element_has_zero_delay():
    c = AnimationChoreographer(lead_in=0.3, stagger=0.1)
    timings = c.schedule(["object", "W", "N"])
    assert timings[0].element_id == "object"
    assert timings[0].delay == 0.0
    assert timings[1].delay == pytest.approx(0.3)
    assert timings[2].delay == pytest.approx(0.4)


@pytest.mark.parametrize("batch", [[], ["object"], ["W", "N", "f"], ["setup", "m1", "m2", "T1"]])
@pytest.mark.parametrize("base_duration", [0.0, 0.5, 3.0])
def test_reduced_motion_zeroes_everything(batch, base_duration):
    c = AnimationChoreographer()
    timings = c.schedule(batch, reduced_motion=True, base_duration=base_duration)
    assert [t.element_id for t in timings] == batch
    assert all(t.delay == 0.0 and t.duration == 0.0 for t in timings)


def test_per_call_duration_override():
    c = AnimationChoreographer(base_duration=0.4)
    assert c.schedule(["W"], base_duration=1.5)[0].duration == 1.5


@pytest.mark.parametrize("kwargs", [{"stagger": 0.0}, {"stagger": -0.1}, {"base_duration": -1.0}, {"lead_in": -0.5}])
def test_invalid_parameters_rejected(kwargs):
    with pytest.raises(ValueError):
        AnimationChoreographer(**kwargs)


def test_from_config():
    c = AnimationChoreographer.from_config(EngineConfig(base_duration=1.0, stagger=0.25, lead_in=0.0))
    assert (c.base_duration, c.stagger, c.lead_in) == (1.0, 0.25, 0.0)


def test_transition_schedules_newly_revealed_forces():
    """A jump over several steps reveals every force in between, staggered in step order."""
    defs = definitions_from_ids(
        ["object", "weight", "normal", "net_force"],
        {"weight": ["W"], "normal": ["N"]},
    )
    seq = StepSequencer(defs, initial_step=3)
    assert reveal_batch(seq, 0) == ["W", "N", "net_force"]

    c = AnimationChoreographer(stagger=0.1, lead_in=0.0)
    timings = c.schedule_transition(seq, 0)
    assert [t.element_id for t in timings] == ["W", "N", "net_force"]
    assert [t.delay for t in timings] == pytest.approx([0.0, 0.1, 0.2])
    assert c.schedule_transition(seq, 3) == []


def test_zero_lead_in_keeps_forces_after_object():
    """With lead_in = 0 the first force after the object starts one stagger later."""
    c = AnimationChoreographer.from_config(EngineConfig(lead_in=0.0))
    timings = c.schedule(["object", "W", "N"])
    delays = [t.delay for t in timings]
    print(delays)
    assert all(b > a for a, b in zip(delays, delays[1:]))
    assert delays == pytest.approx([0.0, c.stagger, 2 * c.stagger])
    # without a leading object the batch still starts at lead_in
    assert c.schedule(["W", "N"])[0].delay == 0.0
