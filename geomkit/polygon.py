"""A polygon with a movable current vertex."""

from __future__ import annotations

from collections.abc import Iterable

from geomkit.common import Rotation
from geomkit.primitives import Edge, Point


class Polygon:
    """A polygon whose vertices are stored in clockwise order.

    The polygon keeps a current vertex. Positions are indices into
    ``vertices``; ``current`` is ``None`` only when the polygon is empty.
    """

    def __init__(self, vertices: Iterable[Point] = (), position: int | None = 0) -> None:
        self.vertices: list[Point] = list(vertices)
        if not self.vertices:
            self.current: int | None = None
        else:
            self.current = self._checked(0 if position is None else position)

    def __len__(self) -> int:
        return len(self.vertices)

    def __repr__(self) -> str:
        return f"Polygon({self.vertices!r}, {self.current!r})"

    def _checked(self, position: int) -> int:
        size = len(self.vertices)
        if not -size <= position < size:
            raise IndexError(f"vertex position out of range: {position}")
        return position % size

    def copy(self) -> Polygon:
        """Return an independent polygon with the same vertices and current vertex."""
        return Polygon(self.vertices, self.current)

    def current_point(self) -> Point:
        """The current vertex."""
        if self.current is None:
            raise IndexError("polygon is empty")
        return self.vertices[self.current]

    def edge(self) -> Edge:
        """The edge from the current vertex to its clockwise neighbour."""
        if self.current is None:
            raise IndexError("polygon is empty")
        return Edge(self.vertices[self.current], self.vertices[self.clockwise()])

    def clockwise(self) -> int | None:
        """Position of the clockwise neighbour of the current vertex."""
        if not self.vertices:
            return None
        if self.current is None:
            return 0
        return (self.current + 1) % len(self.vertices)

    def counter_clockwise(self) -> int | None:
        """Position of the counter-clockwise neighbour of the current vertex."""
        if not self.vertices:
            return None
        if self.current is None:
            return len(self.vertices) - 1
        return (self.current - 1) % len(self.vertices)

    def neighbor(self, rotation: Rotation) -> int | None:
        """Position of the neighbour of the current vertex in a direction."""
        if rotation is Rotation.CLOCKWISE:
            return self.clockwise()
        if rotation is Rotation.COUNTER_CLOCKWISE:
            return self.counter_clockwise()
        raise ValueError(f"unknown rotation: {rotation!r}")

    def advance(self, rotation: Rotation) -> int | None:
        """Move the current vertex to its neighbour and return its position."""
        self.current = self.neighbor(rotation)
        return self.current

    def insert(self, point: Point) -> int:
        """Insert a vertex after the current one and make it current."""
        index = 0 if self.current is None else self.current + 1
        self.vertices.insert(index, point)
        self.current = index
        return index

    def remove(self, position: int) -> None:
        """Remove a vertex; its counter-clockwise neighbour becomes current."""
        position = self._checked(position)
        del self.vertices[position]
        if not self.vertices:
            self.current = None
        else:
            self.current = (position - 1) % len(self.vertices)

    def split(self, position: int) -> Polygon:
        """Cut the polygon between the current vertex and ``position``.

        The vertices strictly between them (clockwise) move to the returned
        polygon, which holds the current vertex, those vertices and the
        vertex at ``position``, with the latter as its current vertex. In
        this polygon the current vertex is kept and ``position`` becomes its
        clockwise neighbour.
        """
        if self.current is None:
            raise IndexError("polygon is empty")
        position = self._checked(position)
        start = self.current
        other = [self.vertices[start]]

        if start == position:
            return Polygon(other, len(other) - 1)

        size = len(self.vertices)
        removed: list[int] = []
        index = (start + 1) % size
        while index != position:
            removed.append(index)
            index = (index + 1) % size

        other.extend(self.vertices[i] for i in removed)
        other.append(self.vertices[position])

        dropped = set(removed)
        self.vertices = [p for i, p in enumerate(self.vertices) if i not in dropped]
        self.current = start - sum(1 for i in removed if i < start)

        return Polygon(other, len(other) - 1)