"""Fraction interpolation of boundary curves towards the axis.

Every curve-bearing edge has two limiting curves of the same degree:

- the boundary curve (fraction 0), stored on the edge
- the axis curve (fraction 1), stored on the edge or derived from the
  circle centers of its two nodes

A thinned curve is obtained by moving each control point along the straight
line from its boundary position to its axis position. The map is linear in
the fraction, so the result is continuous and monotonic as the fraction
changes, and the curve degree never changes.
"""

from axisthin.domain import Cubic, Curve, Edge, Line, Point, Quadratic, TransformTree
from axisthin.exceptions import CurveDegreeError


def _axis_anchor(tree: TransformTree, node_index: int) -> Point:
    """Axis position of a node.

    A zero-radius circle marks an endpoint of the axis; it is anchored at
    its parent's center when the parent circle is not degenerate. The
    anchor depends only on the node, so every edge touching it agrees.
    """
    node = tree.node(node_index)
    circle = tree.circle(node_index)
    if circle.is_degenerate() and node.parent is not None:
        parent = tree.circle(node.parent)
        if not parent.is_degenerate():
            return parent.center
    return circle.center


def axis_curve(tree: TransformTree, source: int, edge: Edge) -> Curve:
    """Get the fraction-1 curve of an edge.

    Without an explicit axis curve the result is the straight segment
    between the anchors of both nodes, elevated to the boundary curve's
    degree with evenly spaced control points.

    Args:
        tree: Tree containing the edge
        source: Index of the edge's source node
        edge: Curve-bearing edge

    Returns:
        Axis curve with the same degree as ``edge.curve``

    Raises:
        ValueError: If the edge carries no curve
    """
    if edge.curve is None:
        raise ValueError(f"Edge from node {source} carries no curve")

    if edge.axis is not None:
        return edge.axis

    start = _axis_anchor(tree, source)
    end = _axis_anchor(tree, edge.target)

    match edge.curve:
        case Line():
            return Line(start, end)
        case Quadratic():
            return Quadratic(start, start.lerp(end, 0.5), end)
        case Cubic():
            return Cubic(start, start.lerp(end, 1.0 / 3.0), start.lerp(end, 2.0 / 3.0), end)

    raise CurveDegreeError(len(edge.curve.points))


def interpolate_curve(boundary: Curve, axis: Curve, fraction: float) -> Curve:
    """Interpolate each control point between two curves of equal degree.

    Args:
        boundary: Curve returned at fraction 0
        axis: Curve returned at fraction 1
        fraction: Thinning fraction in [0, 1]

    Returns:
        Curve of the same variant as ``boundary``

    Raises:
        CurveDegreeError: If the two curves differ in degree
    """
    f = fraction
    match boundary, axis:
        case Line(a0, a1), Line(b0, b1):
            return Line(a0.lerp(b0, f), a1.lerp(b1, f))
        case Quadratic(a0, a1, a2), Quadratic(b0, b1, b2):
            return Quadratic(a0.lerp(b0, f), a1.lerp(b1, f), a2.lerp(b2, f))
        case Cubic(a0, a1, a2, a3), Cubic(b0, b1, b2, b3):
            return Cubic(a0.lerp(b0, f), a1.lerp(b1, f), a2.lerp(b2, f), a3.lerp(b3, f))

    raise CurveDegreeError(
        len(axis.points),
        details=f"cannot interpolate {type(boundary).__name__} towards {type(axis).__name__}",
    )


def thin_edge(tree: TransformTree, source: int, edge: Edge, fraction: float) -> Curve | None:
    """Thinned curve of a single edge.

    Returns:
        The interpolated curve, or None for edges without a curve record
    """
    if edge.curve is None:
        return None
    return interpolate_curve(edge.curve, axis_curve(tree, source, edge), fraction)
