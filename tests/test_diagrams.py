import io
import json

import numpy as np
import pytest

from diagram_engine import Diagram, DiagramFailure, EngineConfig, build_diagrams
from diagram_engine.io import diagram_from_json, frame_to_json
from diagram_engine.kernel.results import primary
from diagram_engine.renderer import (
    FALLBACK_MESSAGE,
    BufferedRenderer,
    DebugRenderer,
    NullRenderer,
    render_page,
)

FBD = {
    "type": "fbd",
    "title": "Pushed crate",
    "data": {
        "object": {"type": "block", "width": 40, "height": 20, "mass": 5},
        "forces": [
            {"name": "F", "type": "applied", "magnitude": 20, "angle": 0, "symbol": "F"},
            {"name": "W", "type": "weight", "magnitude": 49, "angle": -90, "symbol": "W"},
            {"name": "f", "type": "friction", "magnitude": 9.8, "angle": 180, "symbol": "f"},
            {"name": "N", "type": "normal", "magnitude": 49, "angle": 90, "symbol": "N"},
        ],
        "showNetForce": True,
        "frictionCoefficient": 0.2,
    },
}

INCLINE = {
    "type": "inclined_plane",
    "data": {
        "angle": 30,
        "object": {"type": "block", "width": 40, "height": 20, "mass": 5},
        "forces": [
            {"name": "W", "type": "weight", "magnitude": 49, "angle": -90},
            {"name": "N", "type": "normal", "magnitude": 42.44, "angle": 120},
            {"name": "f", "type": "friction", "magnitude": 14.7, "angle": 30},
        ],
        "frictionCoefficient": 0.3,
        "showDecomposition": True,
    },
}

PROJECTILE = {
    "type": "projectile",
    "data": {
        "initialVelocity": {"magnitude": 20, "angle": 45},
        "initial": {"x": 0, "y": 300},
        "timeIntervals": [0.5, 1],
        "showVelocityVectors": True,
    },
}

PULLEY = {
    "type": "pulley",
    "data": {
        "pulleys": [{"position": {"x": 200, "y": 50}, "radius": 20}],
        "masses": [
            {"object": {"mass": 5}, "attachedTo": 0, "side": "left"},
            {"object": {"mass": 3}, "attachedTo": 0, "side": "right"},
        ],
        "tensions": [
            {"name": "T1", "type": "tension", "magnitude": 36.75, "angle": 90},
            {"name": "T2", "type": "tension", "magnitude": 36.75, "angle": 45},
        ],
        "showAcceleration": True,
    },
}

COLLISION = {
    "type": "collision",
    "data": {
        "objects": [
            {"object": {"type": "sphere", "radius": 10, "mass": 2}, "velocity": {"before": 5}},
            {"object": {"type": "sphere", "radius": 12, "mass": 3}, "velocity": {"before": -2}},
        ],
        "collisionType": "perfectly_inelastic",
        "showMomentum": True,
    },
}

CIRCULAR = {
    "type": "circular",
    "data": {
        "radius": 2,
        "mass": 3,
        "speed": 4,
        "forces": [{"name": "Fc", "type": "centripetal", "magnitude": 24, "angle": 180}],
    },
}

BROKEN = {"type": "pulley", "data": {"pulleys": [{"radius": 20}], "masses": [{"object": {}, "attachedTo": 4}]}}


def test_free_body_walkthrough():
    """Step 0 shows only the object; each step reveals the next force in canonical order."""
    d = Diagram.from_json(FBD)
    assert d.plan.definitions[0].id == "object"
    first = d.frame()
    assert first.step_ids == ("object", "weight", "normal", "friction", "applied", "net_force")
    assert first.visible_forces == ()
    assert [(t.element_id, t.delay) for t in first.timings] == [("object", 0.0)]

    d.next()
    f1 = d.frame()
    assert f1.visible_forces == ("W",)
    assert f1.highlighted_forces == ("W",)
    assert [t.element_id for t in f1.timings] == ["W"]

    d.go_to(5)
    f5 = d.frame()
    print([(t.element_id, t.delay) for t in f5.timings])
    assert f5.visible_forces == ("W", "N", "f", "F", "net_force")
    assert [t.element_id for t in f5.timings] == ["N", "f", "F", "net_force"]
    delays = [t.delay for t in f5.timings]
    assert all(b > a for a, b in zip(delays, delays[1:]))
    assert f5.forces[-1].type == "net"
    assert np.allclose(f5.anchors["net_force"], [0.0, 0.0])

    d.prev()
    assert d.frame().timings == ()


def test_free_body_results():
    rows = Diagram.from_json(FBD).plan.results
    assert primary(list(rows)).label == "Acceleration"
    assert abs(primary(list(rows)).value - 2.04) < 1e-9


def test_incline_components_step():
    d = Diagram.from_json(INCLINE)
    assert d.state.sequencer.step_ids == ["object", "weight", "normal", "friction", "components"]
    d.go_to(4)
    frame = d.frame()
    assert frame.highlighted_forces == ("W_parallel", "W_perp")
    assert np.allclose(frame.anchors["W_parallel"], frame.anchors["W"])
    par = next(f for f in frame.forces if f.name == "W_parallel")
    assert abs(par.magnitude - 24.5) < 1e-9


def test_projectile_plan():
    d = Diagram.from_json(PROJECTILE)
    frame = d.frame()
    assert frame.step_ids == ("launch", "trajectory", "velocity", "max_height")
    assert set(frame.points) == {"launch", "apex", "t=0.5", "t=1"}
    assert frame.trajectory.shape == (EngineConfig().trajectory_points + 1, 2)
    # apex height above launch is v0y² / 2g
    assert abs((300.0 - frame.points["apex"][1]) - 200.0 / (2 * 9.8)) < 1e-9


def test_pulley_is_atwood_machine():
    d = Diagram.from_json(PULLEY)
    assert d.frame().step_ids == ("setup", "masses", "tensions", "acceleration")
    acc = primary(list(d.plan.results))
    assert abs(acc.value - 2.45) < 1e-9
    assert np.allclose(d.plan.anchors["T1"], [200.0, 30.0])
    d.go_to(2)
    assert d.frame().highlighted_forces == ("T1", "T2")


def test_collision_plan_and_results():
    d = Diagram.from_json(COLLISION)
    assert d.frame().step_ids == ("setup", "before", "collision", "after", "momentum")
    labels = {r.label: r.value for r in d.plan.results}
    print(labels)
    assert all(np.isfinite(v) for v in labels.values())


def test_circular_force_on_named_step():
    d = Diagram.from_json(CIRCULAR)
    assert d.frame().step_ids == ("setup", "velocity", "centripetal")
    d.go_to(2)
    assert d.frame().highlighted_forces == ("Fc",)


def test_visible_step_sets_initial_cursor():
    d = Diagram.from_json({**FBD, "visibleStep": 3})
    assert d.state.current_step == 3
    assert d.frame().visible_forces == ("W", "N", "f")


def test_override_drives_diagram():
    requests = []
    d = Diagram(diagram_from_json(FBD), step_override=2, on_step_request=requests.append)
    assert d.frame().current_step == 2
    d.next()
    assert requests == [3]
    assert d.frame().current_step == 2
    d.update(3)
    assert d.frame().current_step_id == "friction"


def test_reduced_motion_from_config():
    d = Diagram.from_json(FBD, EngineConfig(reduced_motion=True))
    d.go_to(5)
    assert all(t.delay == 0.0 and t.duration == 0.0 for t in d.frame().timings)


def test_build_diagrams_isolates_failures():
    built = build_diagrams([FBD, BROKEN, COLLISION])
    assert isinstance(built[0], Diagram)
    assert isinstance(built[1], DiagramFailure)
    assert isinstance(built[2], Diagram)
    assert built[1].index == 1
    assert built[1].diagram_type == "pulley"


def test_render_page_buffered():
    renderer = BufferedRenderer()
    render_page(renderer, [FBD, BROKEN, PULLEY])
    assert len(renderer.frames) == 3
    assert renderer.frames[0]["type"] == "fbd"
    assert renderer.frames[0]["step_id"] == "object"
    assert renderer.frames[1]["fallback"] == FALLBACK_MESSAGE
    assert renderer.frames[2]["type"] == "pulley"
    renderer.clear()
    assert renderer.frames == []


def test_debug_renderer_output():
    out = io.StringIO()
    renderer = DebugRenderer(output=out)
    d = Diagram.from_json(FBD, step_override=2)
    renderer.render_diagram(d)
    render_page(renderer, [BROKEN])
    text = out.getvalue()
    print(text)
    assert "=== fbd Pushed crate step 3/6 [normal] ===" in text
    assert "from (0.00, 10.00)" in text
    assert "unavailable" in text


def test_null_renderer_returns_frame():
    frame = NullRenderer().render_diagram(Diagram.from_json(PULLEY))
    assert frame.diagram_type == "pulley"


def test_frame_serializes_to_json():
    d = Diagram.from_json(FBD)
    d.go_to(2)
    payload = frame_to_json(d.frame())
    text = json.dumps(payload)
    assert payload["currentStep"] == 2
    assert payload["visibleForces"] == ["W", "N"]
    assert payload["anchors"]["N"] == pytest.approx([0.0, 10.0])
    assert "timings" in json.loads(text)


def test_pulley_tensions_anchor_on_their_own_pulley():
    """Tension i starts on the rim of the pulley that mass i hangs from."""
    payload = {
        "type": "pulley",
        "data": {
            "pulleys": [
                {"position": {"x": 100, "y": 50}, "radius": 10},
                {"position": {"x": 300, "y": 50}, "radius": 20},
            ],
            "masses": [
                {"object": {"mass": 5}, "attachedTo": 0},
                {"object": {"mass": 3}, "attachedTo": 1},
            ],
            "tensions": [
                {"name": "T1", "type": "tension", "magnitude": 49, "angle": 90},
                {"name": "T2", "type": "tension", "magnitude": 29.4, "angle": 90},
            ],
        },
    }
    anchors = Diagram.from_json(payload).plan.anchors
    print(anchors)
    assert np.allclose(anchors["T1"], [100.0, 40.0])
    assert np.allclose(anchors["T2"], [300.0, 30.0])
