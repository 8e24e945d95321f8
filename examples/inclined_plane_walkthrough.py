# examples/inclined_plane_walkthrough.py
import json

from diagram_engine import Diagram
from diagram_engine.io import frame_to_json
from diagram_engine.what_if import explore

payload = {
    "type": "inclined_plane",
    "data": {
        "angle": 30,
        "object": {"type": "block", "width": 40, "height": 20, "mass": 5},
        "forces": [
            {"name": "W", "type": "weight", "magnitude": 49, "angle": -90, "symbol": "W"},
            {"name": "N", "type": "normal", "magnitude": 42.44, "angle": 120, "symbol": "N"},
            {"name": "f", "type": "friction", "magnitude": 14.7, "angle": 30, "symbol": "f", "subscript": "s"},
        ],
        "frictionCoefficient": 0.3,
        "showDecomposition": True,
        "showNetForce": True,
    },
}

diagram = Diagram.from_json(payload)
for step in range(diagram.state.total_steps):
    diagram.go_to(step)
    frame = diagram.frame(reduced_motion=False)
    print(json.dumps(frame_to_json(frame), ensure_ascii=False))

# slider: steeper slope, no friction
for row in explore("inclined_plane", angle=45, friction=0.0):
    print(f"{row.label:>16}: {row.formatted}")
