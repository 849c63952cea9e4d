"""Points and edges on the plane."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field
from numbers import Real

from geomkit.common import Intersection, Position


@dataclass(frozen=True, order=True)
class Point:
    """A point (or vector) with lexicographic ordering by (x, y)."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, other):
        """Dot product with a point, or scaling by a number."""
        if isinstance(other, Point):
            return self.x * other.x + self.y * other.y
        if isinstance(other, Real):
            return Point(other * self.x, other * self.y)
        return NotImplemented

    def __rmul__(self, value):
        if isinstance(value, Real):
            return Point(value * self.x, value * self.y)
        return NotImplemented

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        raise IndexError(f"point coordinate index out of range: {index}")

    @staticmethod
    def is_equal(left: Point, right: Point, precision: float) -> bool:
        """Whether two points coincide within a relative precision."""
        return (
            abs(left.x - right.x) <= precision * max(abs(left.x), abs(right.x))
            and abs(left.y - right.y) <= precision * max(abs(left.y), abs(right.y))
        )

    def classify(self, p0: Point, p1: Point, precision: float) -> Position:
        """Position of this point relative to the directed line p0 -> p1."""
        a = p1 - p0
        b = self - p0
        sa = a.x * b.y - b.x * a.y

        if sa > precision:
            return Position.LEFT
        if sa < -precision:
            return Position.RIGHT
        if a.x * b.x < 0 or a.y * b.y < 0:
            return Position.BEHIND
        if a.length() < b.length():
            return Position.BEYOND
        if Point.is_equal(p0, self, precision):
            return Position.ORIGIN
        if Point.is_equal(p1, self, precision):
            return Position.DESTINATION
        return Position.BETWEEN

    def classify_edge(self, edge: Edge, precision: float) -> Position:
        """Position of this point relative to the line through an edge."""
        return self.classify(edge.origin, edge.destination, precision)

    def polar_angle(self, precision: float) -> float:
        """Polar angle in degrees in [0, 360), or -1 for the origin."""
        if abs(self.x) < precision and abs(self.y) < precision:
            return -1.0
        if abs(self.x) < precision:
            return 90.0 if self.y > 0 else 270.0

        theta = math.degrees(math.atan(self.y / self.x))
        if self.x > 0:
            return theta if self.y > 0 else 360.0 + theta
        return 180.0 + theta

    def length(self) -> float:
        """Distance from the coordinate origin."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def distance(self, edge: Edge, precision: float) -> float:
        """Signed distance from this point to the line through an edge."""
        rotated = Edge(edge.origin, edge.destination).flip().rotate()
        normal = rotated.destination - rotated.origin
        normal = (1.0 / normal.length()) * normal
        normal_edge = Edge(self, self + normal)
        _, t = normal_edge.intersect(edge, precision)
        return 0.0 if t is None else t


@dataclass
class Edge:
    """A directed segment from origin to destination."""

    origin: Point = field(default_factory=lambda: Point(0.0, 0.0))
    destination: Point = field(default_factory=lambda: Point(1.0, 0.0))

    def rotate(self) -> Edge:
        """Rotate the edge 90 degrees clockwise about its midpoint."""
        middle = 0.5 * (self.origin + self.destination)
        direction = self.destination - self.origin
        normal = Point(direction.y, -direction.x)
        self.origin = middle - 0.5 * normal
        self.destination = middle + 0.5 * normal
        return self

    def flip(self) -> Edge:
        """Reverse the direction of the edge."""
        self.origin, self.destination = self.destination, self.origin
        return self

    def value(self, t: float) -> Point:
        """Point at parameter t on the line through the edge."""
        return self.origin + t * (self.destination - self.origin)

    def intersect(self, edge: Edge, precision: float) -> tuple[Intersection, float | None]:
        """Intersect the lines through two edges.

        Returns the kind of intersection and, for skew lines, the parameter
        on this edge of the intersection point.
        """
        direction = self.destination - self.origin
        other_direction = edge.destination - edge.origin
        other_normal = Point(other_direction.y, -other_direction.x)

        denominator = other_normal * direction
        if abs(denominator) < precision:
            position = self.origin.classify_edge(edge, precision)
            if position in (Position.LEFT, Position.RIGHT):
                return Intersection.PARALLEL, None
            return Intersection.COLLINEAR, None

        numerator = other_normal * (self.origin - edge.origin)
        return Intersection.SKEW, -numerator / denominator

    def cross(self, edge: Edge, precision: float) -> tuple[Intersection, float | None]:
        """Intersect two segments.

        Returns the kind of intersection and the parameter on this edge of
        the crossing point when it was computed.
        """
        kind, s = edge.intersect(self, precision)
        if kind in (Intersection.COLLINEAR, Intersection.PARALLEL):
            return kind, None
        if s < 0 or s > 1:
            return Intersection.SKEW_NO_CROSS, None

        _, t = self.intersect(edge, precision)
        if t is not None and 0 <= t <= 1:
            return Intersection.SKEW_CROSS, t
        return Intersection.SKEW_NO_CROSS, t

    def is_vertical(self, precision: float) -> bool:
        """Whether the edge is vertical within a relative precision."""
        ox, dx = self.origin.x, self.destination.x
        return abs(ox - dx) <= precision * max(abs(ox), abs(dx))

    def slope(self, precision: float) -> float:
        """Slope of the edge, or the largest float for a vertical edge."""
        if self.is_vertical(precision):
            return sys.float_info.max
        return (self.destination.y - self.origin.y) / (
            self.destination.x - self.origin.x
        )

    def y(self, x: float, precision: float) -> float:
        """Y coordinate on the line through the edge at a given x."""
        return self.slope(precision) * (x - self.origin.x) + self.origin.y