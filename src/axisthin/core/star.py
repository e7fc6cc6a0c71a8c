"""Star transform builder for demo outlines.

A star transform has a single root circle and one edge per boundary curve,
each ending in a zero-radius leaf at the curve's end point. Every edge carries
an explicit axis curve collapsed onto the root center, so thinning does not
depend on the radii. Thinning shrinks the loop towards the root center,
which is exact for regular polygons and a usable stand-in for any loop
that is star-shaped about the chosen center. It is not a medial axis
transform; real transforms come from an external library.
"""

import math
from collections.abc import Sequence

from axisthin.domain import Circle, Curve, Point, TransformTree, curve_from_points
from axisthin.exceptions import EmptyLoopError


def _distance_to_segment(p: Point, a: Point, b: Point) -> float:
    dx = b.x - a.x
    dy = b.y - a.y
    length_sq = dx * dx + dy * dy
    if length_sq == 0.0:
        return p.distance_to(a)
    t = ((p.x - a.x) * dx + (p.y - a.y) * dy) / length_sq
    t = min(1.0, max(0.0, t))
    return math.hypot(p.x - (a.x + t * dx), p.y - (a.y + t * dy))


def loop_centroid(loop: Sequence[Curve]) -> Point:
    """Mean of the on-curve start points of a loop."""
    n = len(loop)
    return Point(
        sum(curve.start.x for curve in loop) / n,
        sum(curve.start.y for curve in loop) / n,
    )


def build_star_transform(
    loop: Sequence[Curve],
    center: Point | None = None,
    radius: float | None = None,
    loop_index: int = 0,
) -> TransformTree:
    """Build a star transform tree for one loop.

    Args:
        loop: Closed loop of curves
        center: Root circle center (default: centroid of on-curve points)
        radius: Root circle radius (default: distance from the center to
            the nearest chord of the loop)
        loop_index: Position of the loop, used in error messages

    Returns:
        Tree with the root at index 0 and one leaf per curve

    Raises:
        EmptyLoopError: If the loop has no curves
    """
    if not loop:
        raise EmptyLoopError(loop_index)

    if center is None:
        center = loop_centroid(loop)
    if radius is None:
        radius = min(_distance_to_segment(center, c.start, c.end) for c in loop)

    tree = TransformTree()
    root = tree.add_node(Circle(center, radius))
    for curve in loop:
        leaf = tree.add_node(Circle(curve.end, 0.0))
        tree.connect(root, leaf, curve, axis=curve_from_points([center] * len(curve.points)))
    return tree


def build_star_forest(loops: Sequence[Sequence[Curve]]) -> list[TransformTree]:
    """Build one star transform per loop."""
    return [build_star_transform(loop, loop_index=i) for i, loop in enumerate(loops)]
