"""Path string serialization.

Loops of curves are written as SVG path data: one move command per loop,
one drawing command per curve and a closing command. Coordinates use the
shortest representation that round-trips to the same float, so endpoints
shared by consecutive curves are written identically.
"""

from collections.abc import Sequence

from axisthin.domain import Cubic, Curve, Line, Point, Quadratic


def format_number(value: float) -> str:
    """Format a coordinate for path data.

    Integral values drop the fractional part and negative zero becomes "0".

    Examples:
        >>> format_number(3.0)
        '3'
        >>> format_number(-0.0)
        '0'
        >>> format_number(0.1)
        '0.1'
    """
    value = float(value)
    if value == 0.0:
        return "0"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _coords(*points: Point) -> str:
    return " ".join(f"{format_number(p.x)} {format_number(p.y)}" for p in points)


def curve_command(curve: Curve) -> str:
    """Drawing command continuing a path with ``curve``.

    The start point is implied by the current point of the path.
    """
    match curve:
        case Line(_, p1):
            return f"L{_coords(p1)}"
        case Quadratic(_, p1, p2):
            return f"Q{_coords(p1, p2)}"
        case Cubic(_, p1, p2, p3):
            return f"C{_coords(p1, p2, p3)}"
    raise TypeError(f"Not a curve: {curve!r}")


def serialize_loop(loop: Sequence[Curve]) -> str:
    """Serialize one closed loop.

    Returns:
        Sub-path string, or "" for an empty loop
    """
    if not loop:
        return ""
    commands = [f"M{_coords(loop[0].start)}"]
    commands.extend(curve_command(curve) for curve in loop)
    commands.append("Z")
    return " ".join(commands)


def serialize_loops(loops: Sequence[Sequence[Curve]]) -> str:
    """Serialize loops into a single path string, preserving order.

    Args:
        loops: Loops, each an ordered list of curves

    Returns:
        Path string ("" if there is nothing to draw)
    """
    return " ".join(s for s in (serialize_loop(loop) for loop in loops) if s)


def check_continuity(loop: Sequence[Curve], tolerance: float = 0.0) -> list[int]:
    """Find curves that do not start where the previous curve ends.

    Args:
        loop: Ordered curves of one loop
        tolerance: Largest accepted gap

    Returns:
        Indices of curves preceded by a gap
    """
    return [
        i
        for i in range(1, len(loop))
        if loop[i].start.distance_to(loop[i - 1].end) > tolerance
    ]
