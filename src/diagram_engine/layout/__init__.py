# MIT License (see LICENSE)
"""
Force layout: where arrows start and how forces decompose.

Typical usage:
    from diagram_engine.layout import force_origin, decompose_force

    anchor = force_origin("normal", 90.0, block, surface_angle=30.0)
    parallel, perp = decompose_force(weight, surface_angle=30.0)
"""
from .shapes import (
    BALL,
    BLOCK,
    POINT,
    BOUNDARY_FUNCTIONS,
    SHAPE_CLASS_BY_OBJECT_TYPE,
    LayoutShape,
    boundary_offset,
    classify,
    layout_shape,
)
from .forces import (
    ORIGIN_RULE_BY_FORCE_TYPE,
    ORIGIN_RULES,
    anchor_for,
    decompose_force,
    force_origin,
    force_origins,
    is_decomposable,
    origin_rule,
    resultant,
)

__all__ = [
    # Shapes
    "BALL",
    "BLOCK",
    "POINT",
    "BOUNDARY_FUNCTIONS",
    "SHAPE_CLASS_BY_OBJECT_TYPE",
    "LayoutShape",
    "boundary_offset",
    "classify",
    "layout_shape",
    # Forces
    "ORIGIN_RULE_BY_FORCE_TYPE",
    "ORIGIN_RULES",
    "anchor_for",
    "decompose_force",
    "force_origin",
    "force_origins",
    "is_decomposable",
    "origin_rule",
    "resultant",
]
