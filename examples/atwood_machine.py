# examples/atwood_machine.py
from diagram_engine import Diagram
from diagram_engine.kernel import calculate_atwood
from diagram_engine.renderer import DebugRenderer

payload = {
    "type": "pulley",
    "title": "Atwood machine",
    "data": {
        "pulleys": [{"position": {"x": 200, "y": 50}, "radius": 20}],
        "masses": [
            {"object": {"type": "block", "mass": 5, "label": "m1"}, "attachedTo": 0, "side": "left"},
            {"object": {"type": "block", "mass": 3, "label": "m2"}, "attachedTo": 0, "side": "right"},
        ],
        "tensions": [
            {"name": "T1", "type": "tension", "magnitude": 36.75, "angle": 90, "symbol": "T", "subscript": "1"},
            {"name": "T2", "type": "tension", "magnitude": 36.75, "angle": 90, "symbol": "T", "subscript": "2"},
        ],
        "showAcceleration": True,
    },
}

r = calculate_atwood(5.0, 3.0)
print("a:", r.acceleration, "T:", r.tension)

diagram = Diagram.from_json(payload)
renderer = DebugRenderer()
renderer.render_diagram(diagram)
while diagram.state.current_step < diagram.state.total_steps - 1:
    diagram.next()
    renderer.render_diagram(diagram)
