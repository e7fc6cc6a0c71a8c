"""Parametric path builders for demo and test outlines.

The strings produced here are accepted by the outline parser, so they can be
fed straight into a transform builder.
"""

import math
from collections.abc import Sequence

from axisthin.core.serializer import format_number
from axisthin.domain import Cubic, Curve, Line, Quadratic

Coord = Sequence[float]


def _xy(p: Coord) -> str:
    return f"{format_number(p[0])} {format_number(p[1])}"


def polygon_vertices(n: int, center: Coord = (0.0, 0.0), radius: float = 1.0) -> list[tuple[float, float]]:
    """Vertices of a regular polygon, the first one straight above the center.

    Vertex i lies at (cx + r*sin(2*pi*i/n), cy + r*cos(2*pi*i/n)).

    Raises:
        ValueError: If n < 3 or the radius is not positive
    """
    if n < 3:
        raise ValueError(f"A polygon needs at least 3 vertices, got {n}")
    if not radius > 0:
        raise ValueError(f"Polygon radius must be positive, got {radius}")

    cx, cy = center
    vertices = []
    for i in range(n):
        theta = i * 2 * math.pi / n
        vertices.append((cx + radius * math.sin(theta), cy + radius * math.cos(theta)))
    return vertices


def polygon_path_str(n: int, center: Coord = (0.0, 0.0), radius: float = 1.0) -> str:
    """Closed path string of a regular polygon with ``n`` vertices."""
    vertices = polygon_vertices(n, center, radius)
    commands = [f"M{_xy(vertices[0])}"]
    commands.extend(f"L{_xy(v)}" for v in vertices[1:])
    commands.append("z")
    return " ".join(commands)


def line_path_str(ps: Sequence[Coord]) -> str:
    """Path string of a single line."""
    p0, p1 = ps
    return f"M{_xy(p0)} L{_xy(p1)}"


def quad_path_str(ps: Sequence[Coord]) -> str:
    """Path string of a single quadratic bezier curve."""
    p0, p1, p2 = ps
    return f"M{_xy(p0)} Q{_xy(p1)} {_xy(p2)}"


def cubic_path_str(ps: Sequence[Coord]) -> str:
    """Path string of a single cubic bezier curve."""
    p0, p1, p2, p3 = ps
    return f"M{_xy(p0)} C{_xy(p1)} {_xy(p2)} {_xy(p3)}"


def curve_path_str(curve: Curve) -> str:
    """Path string of a single curve of any degree."""
    points = [p.to_tuple() for p in curve.points]
    match curve:
        case Line():
            return line_path_str(points)
        case Quadratic():
            return quad_path_str(points)
        case Cubic():
            return cubic_path_str(points)
    raise TypeError(f"Not a curve: {curve!r}")
