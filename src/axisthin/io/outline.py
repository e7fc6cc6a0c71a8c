"""Outline parsing: path strings to loops of curves.

Path strings are parsed with fontTools' SVG path parser into a RecordingPen;
the recording is then converted to loops of domain curves.
"""

from typing import Any

from fontTools.pens.basePen import decomposeQuadraticSegment, decomposeSuperBezierSegment
from fontTools.pens.recordingPen import RecordingPen
from fontTools.svgLib.path import parse_path

from axisthin.domain import Cubic, Line, Loop, Point, Quadratic
from axisthin.exceptions import OutlineError, OutlineParseError


def parse_path_str(path_str: str) -> list[Loop]:
    """Parse a path description string into loops.

    Arcs are approximated by cubic curves and relative or shorthand
    commands are resolved to absolute curves.

    Args:
        path_str: SVG path data

    Returns:
        One loop per sub-path, in order

    Raises:
        OutlineParseError: If the path data is malformed
    """
    pen = RecordingPen()
    try:
        parse_path(path_str, pen)
    except (ValueError, IndexError) as e:
        raise OutlineParseError(path_str, str(e) or type(e).__name__) from e
    return recording_to_loops(pen.value)


def _point(xy: Any) -> Point:
    if xy is None:
        raise OutlineError("Quadratic contours without on-curve points are not supported")
    return Point(float(xy[0]), float(xy[1]))


def recording_to_loops(recording: list[tuple[str, tuple[Any, ...]]]) -> list[Loop]:
    """Convert a RecordingPen recording to loops of curves.

    The RecordingPen records drawing commands like:
    - ('moveTo', ((x, y),))
    - ('lineTo', ((x, y),))
    - ('qCurveTo', ((x1, y1), ..., (x, y)))  # One or more off-curve points
    - ('curveTo', ((x1, y1), (x2, y2), (x, y)))
    - ('closePath', ()) or ('endPath', ())

    A closePath whose current point differs from the start adds the implied
    closing line.

    Args:
        recording: List of drawing commands from RecordingPen

    Returns:
        List of loops
    """
    loops: list[Loop] = []
    current: Loop = []
    start: Point | None = None
    pos: Point | None = None

    for command, args in recording:
        if command == "moveTo":
            if current:
                loops.append(current)
                current = []
            start = pos = _point(args[0])
            continue

        if pos is None:
            raise OutlineError(f"'{command}' before any moveTo")

        if command == "lineTo":
            end = _point(args[0])
            current.append(Line(pos, end))
            pos = end

        elif command == "qCurveTo":
            if len(args) == 2:
                segments = [args]
            else:
                segments = decomposeQuadraticSegment(args)
            for control, on_curve in segments:
                end = _point(on_curve)
                current.append(Quadratic(pos, _point(control), end))
                pos = end

        elif command == "curveTo":
            if len(args) == 3:
                segments = [args]
            else:
                segments = decomposeSuperBezierSegment(args)
            for c1, c2, on_curve in segments:
                end = _point(on_curve)
                current.append(Cubic(pos, _point(c1), _point(c2), end))
                pos = end

        elif command == "closePath":
            if start is not None and pos != start:
                current.append(Line(pos, start))
                pos = start
            if current:
                loops.append(current)
                current = []

        elif command == "endPath":
            if current:
                loops.append(current)
                current = []

    if current:
        loops.append(current)

    return loops


def loops_bounding_box(loops: list[Loop]) -> tuple[float, float, float, float] | None:
    """Bounding box of all control points.

    Returns:
        (min_x, min_y, max_x, max_y), or None if there are no curves
    """
    points = [p for loop in loops for curve in loop for p in curve.points]
    if not points:
        return None
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return (min(xs), min(ys), max(xs), max(ys))
