"""Integer points, rectangles and circle helpers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point with integer coordinates."""

    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle; right and bottom edges are exclusive."""

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    def contains(self, point: Point) -> bool:
        """Return True if the point lies inside the rectangle."""
        return self.left <= point.x < self.right and self.top <= point.y < self.bottom


def is_in_circle(x: int, y: int, cx: int, cy: int, radius: int) -> bool:
    """Return True if (x, y) lies strictly inside the circle."""
    dx = float(x - cx)
    dy = float(y - cy)
    return dx * dx + dy * dy < radius * radius


def circumcenter(p1: Point, p2: Point, p3: Point) -> Point:
    """Centre of the circle through three points, truncated to integers.

    For collinear points the first point is returned.
    """
    a = float(p2.x - p1.x)
    b = float(p2.y - p1.y)
    c = float(p3.x - p1.x)
    d = float(p3.y - p1.y)
    e = a * (p1.x + p2.x) + b * (p1.y + p2.y)
    f = c * (p1.x + p3.x) + d * (p1.y + p3.y)
    g = 2.0 * (a * (p3.y - p2.y) - b * (p3.x - p2.x))
    if g == 0:
        return p1
    return Point(int((d * e - b * f) / g), int((a * f - c * e) / g))