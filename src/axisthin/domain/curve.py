"""Curve segment variants.

A curve is one of three frozen types, distinguished by class rather than by
the length of a point list:

- Line: 2 control points
- Quadratic: 3 control points
- Cubic: 4 control points
"""

from collections.abc import Sequence
from dataclasses import dataclass

from axisthin.domain.geometry import Point
from axisthin.exceptions import CurveDegreeError


@dataclass(frozen=True, slots=True)
class Line:
    """Straight segment from p0 to p1."""

    p0: Point
    p1: Point

    @property
    def points(self) -> tuple[Point, ...]:
        return (self.p0, self.p1)

    @property
    def start(self) -> Point:
        return self.p0

    @property
    def end(self) -> Point:
        return self.p1


@dataclass(frozen=True, slots=True)
class Quadratic:
    """Quadratic Bezier segment with control point p1."""

    p0: Point
    p1: Point
    p2: Point

    @property
    def points(self) -> tuple[Point, ...]:
        return (self.p0, self.p1, self.p2)

    @property
    def start(self) -> Point:
        return self.p0

    @property
    def end(self) -> Point:
        return self.p2


@dataclass(frozen=True, slots=True)
class Cubic:
    """Cubic Bezier segment with control points p1 and p2."""

    p0: Point
    p1: Point
    p2: Point
    p3: Point

    @property
    def points(self) -> tuple[Point, ...]:
        return (self.p0, self.p1, self.p2, self.p3)

    @property
    def start(self) -> Point:
        return self.p0

    @property
    def end(self) -> Point:
        return self.p3


Curve = Line | Quadratic | Cubic


def curve_from_points(points: Sequence[Point | tuple[float, float]]) -> Curve:
    """Build the curve variant matching the number of control points.

    Args:
        points: 2, 3 or 4 points, as Point or (x, y) tuples

    Returns:
        Line, Quadratic or Cubic

    Raises:
        CurveDegreeError: If the point count is not 2, 3 or 4
    """
    ps = [p if isinstance(p, Point) else Point(float(p[0]), float(p[1])) for p in points]

    match ps:
        case [p0, p1]:
            return Line(p0, p1)
        case [p0, p1, p2]:
            return Quadratic(p0, p1, p2)
        case [p0, p1, p2, p3]:
            return Cubic(p0, p1, p2, p3)
        case _:
            raise CurveDegreeError(len(ps))


def same_degree(a: Curve, b: Curve) -> bool:
    """Check whether two curves are the same variant."""
    return type(a) is type(b)
