"""Basic geometric types: points and circles."""

import math
from dataclasses import dataclass

from axisthin.exceptions import InvalidRadiusError


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def lerp(self, other: "Point", t: float) -> "Point":
        """Linearly interpolate towards another point.

        Written as ``(1 - t) * a + t * b`` so that ``t == 0`` returns this
        point and ``t == 1`` returns ``other`` bit for bit.

        Args:
            other: Point reached at t = 1
            t: Interpolation parameter

        Returns:
            Interpolated point
        """
        s = 1.0 - t
        return Point(s * self.x + t * other.x, s * self.y + t * other.y)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def is_finite(self) -> bool:
        """Check that both coordinates are finite."""
        return math.isfinite(self.x) and math.isfinite(self.y)


@dataclass(frozen=True, slots=True)
class Circle:
    """A maximal inscribed circle of a transform.

    Attributes:
        center: Circle center, lying on the axis
        radius: Circle radius (>= 0)
    """

    center: Point
    radius: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.radius) or self.radius < 0:
            raise InvalidRadiusError(self.radius)

    def is_degenerate(self) -> bool:
        """Check if the circle has collapsed to a point."""
        return self.radius == 0.0

    def scaled(self, factor: float) -> "Circle":
        """Return a copy with the radius multiplied by ``factor``."""
        return Circle(self.center, self.radius * factor)
