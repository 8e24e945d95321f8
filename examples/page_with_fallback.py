# examples/page_with_fallback.py
import logging

from diagram_engine import EngineConfig
from diagram_engine.renderer import BufferedRenderer, render_page

logging.basicConfig(level=logging.DEBUG)

page = [
    {
        "type": "fbd",
        "data": {
            "object": {"type": "block", "width": 50, "height": 30, "mass": 5},
            "forces": [
                {"name": "W", "type": "weight", "magnitude": 49, "angle": -90},
                {"name": "N", "type": "normal", "magnitude": 49, "angle": 90},
                {"name": "F", "type": "applied", "magnitude": 20, "angle": 0},
            ],
            "showNetForce": True,
        },
        "visibleStep": 3,
    },
    # attachedTo points at a pulley that does not exist
    {
        "type": "pulley",
        "data": {
            "pulleys": [{"position": [200, 50], "radius": 20}],
            "masses": [{"object": {"mass": 2}, "attachedTo": 2}],
        },
    },
    {
        "type": "collision",
        "data": {
            "objects": [
                {"object": {"type": "sphere", "radius": 10, "mass": 2}, "velocity": {"before": 5}},
                {"object": {"type": "sphere", "radius": 12, "mass": 3}, "velocity": {"before": -2}},
            ],
            "collisionType": "inelastic",
            "restitution": 0.5,
            "showMomentum": True,
        },
    },
]

renderer = BufferedRenderer()
render_page(renderer, page, EngineConfig.from_env())
for entry in renderer.frames:
    print(entry)
