# MIT License (see LICENSE)
"""
Input/Output utilities for diagram payloads.

This subpackage provides:
    - Parsing: validated DiagramSpecs from JSON-compatible dicts or files.
    - Serialization: what-if results and diagram frames for a web front end.

Typical usage:
    from diagram_engine.io import diagram_from_json, load_diagram

    spec = diagram_from_json({"type": "fbd", "data": {...}})
    spec = load_diagram("atwood.json")
"""
from .json_io import (
    PAYLOAD_PARSERS,
    diagram_from_json,
    force_from_json,
    frame_to_json,
    load_diagram,
    load_diagram_raw,
    load_page_raw,
    object_from_json,
    result_to_json,
    results_to_json,
)

__all__ = [
    # Loading
    "PAYLOAD_PARSERS",
    "diagram_from_json",
    "force_from_json",
    "object_from_json",
    "load_diagram",
    "load_diagram_raw",
    "load_page_raw",
    # Serialization
    "frame_to_json",
    "result_to_json",
    "results_to_json",
]
