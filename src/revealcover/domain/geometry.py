"""Core geometric types for covering representation.

This module defines the value types produced by the covering generators:
- Point: A 2D point in canvas space
- Polygon: A closed loop of points
- Canvas: The rectangle being covered

Canvas space has its origin at the top-left corner, with x increasing to the
right and y increasing downwards.
"""

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from revealcover.exceptions import InvalidCanvasError


@dataclass(frozen=True, slots=True)
class Point:
    """A point in canvas space.

    Immutable and hashable. Equality is component-wise.

    Attributes:
        x: X coordinate, increasing to the right
        y: Y coordinate, increasing downwards
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary."""
        return cls(x=float(data["x"]), y=float(data["y"]))


@dataclass(frozen=True, slots=True, init=False)
class Polygon:
    """A closed polygon.

    The segment from the last point back to the first is implied and not
    stored. Self-intersection is not checked here; the generators never
    produce it.

    Attributes:
        points: Ordered vertices of the polygon
    """

    points: tuple[Point, ...]

    def __init__(self, points: Iterable[Point]) -> None:
        pts = tuple(points)
        if not pts:
            raise ValueError("Polygon requires at least one point")
        object.__setattr__(self, "points", pts)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def signed_area(self) -> float:
        """Calculate signed area using the shoelace formula.

        With y pointing down, a positive area means the vertices run
        clockwise on screen.

        Returns:
            Signed area, 0.0 for fewer than three points
        """
        n = len(self.points)
        if n < 3:
            return 0.0

        area = 0.0
        for i in range(n):
            j = (i + 1) % n
            area += self.points[i].x * self.points[j].y
            area -= self.points[j].x * self.points[i].y

        return area / 2.0

    def area(self) -> float:
        """Absolute area of the polygon."""
        return abs(self.signed_area())

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate bounding box.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return (min(xs), min(ys), max(xs), max(ys))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the ``{"pnts": [...]}`` shape consumed by renderers."""
        return {"pnts": [p.to_dict() for p in self.points]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Polygon":
        """Deserialize from dictionary."""
        return cls(Point.from_dict(p) for p in data["pnts"])


@dataclass(frozen=True, slots=True)
class Canvas:
    """The rectangle ``[0, width] x [0, height]`` to be covered.

    Raises:
        InvalidCanvasError: If either dimension is not a positive finite number
    """

    width: float
    height: float

    def __post_init__(self) -> None:
        if not _is_positive_finite(self.width) or not _is_positive_finite(self.height):
            raise InvalidCanvasError(self.width, self.height)

    @property
    def area(self) -> float:
        return self.width * self.height

    def corners(self) -> tuple[Point, Point, Point, Point]:
        """Canvas corners in the order (0,0), (w,0), (0,h), (w,h)."""
        w, h = self.width, self.height
        return (Point(0.0, 0.0), Point(w, 0.0), Point(0.0, h), Point(w, h))

    def contains(self, point: Point) -> bool:
        """Check if point lies in the closed canvas rectangle."""
        return 0.0 <= point.x <= self.width and 0.0 <= point.y <= self.height


def _is_positive_finite(value: float) -> bool:
    try:
        return math.isfinite(value) and value > 0
    except TypeError:
        return False
