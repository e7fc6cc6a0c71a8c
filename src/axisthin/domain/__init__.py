"""Domain models for axisthin.

This module contains the geometric types and the transform tree model
consumed by the thinning core. All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Free of rendering or UI concerns
- Index-linked rather than reference-linked (no ownership cycles)

Key classes:
- Point, Circle: basic geometry
- Line, Quadratic, Cubic: curve variants (Curve is their union)
- CircleNode, Edge, TransformTree: the transform tree
"""

from axisthin.domain.curve import Cubic, Curve, Line, Quadratic, curve_from_points, same_degree
from axisthin.domain.geometry import Circle, Point
from axisthin.domain.tree import CircleNode, Edge, TransformTree

Loop = list[Curve]
Forest = list[TransformTree]

__all__: list[str] = [
    # Geometry
    "Point",
    "Circle",
    # Curves
    "Line",
    "Quadratic",
    "Cubic",
    "Curve",
    "curve_from_points",
    "same_degree",
    # Tree
    "CircleNode",
    "Edge",
    "TransformTree",
    # Aliases
    "Loop",
    "Forest",
]
