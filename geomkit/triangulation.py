"""Triangulation of y-monotone polygons."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(eq=False)
class Vertex:
    """A polygon vertex carrying an identifier.

    Vertices compare equal when their identifiers match and are ordered
    from top to bottom, then from left to right.
    """

    x: float = 0.0
    y: float = 0.0
    id: int = -1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __lt__(self, other: Vertex) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        if self.y != other.y:
            return self.y > other.y
        return self.x < other.x


def cross_product(a: Vertex, b: Vertex, c: Vertex) -> float:
    """Cross product of b - a and c - a."""
    return (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)


def is_polygon_edge(polygon: Sequence[Vertex], id1: int, id2: int) -> bool:
    """Whether the vertices with the given identifiers are adjacent in the polygon."""
    if not polygon:
        return False
    following = list(polygon[1:]) + [polygon[0]]
    return any(
        (a.id == id1 and b.id == id2) or (a.id == id2 and b.id == id1)
        for a, b in zip(polygon, following)
    )


def _chains(polygon: list[Vertex]) -> tuple[list[Vertex], list[Vertex]]:
    size = len(polygon)
    top = max(range(size), key=lambda i: polygon[i].y)
    bottom = min(range(size), key=lambda i: polygon[i].y)

    left: list[Vertex] = []
    index = top
    stop = (bottom + 1) % size
    while True:
        left.append(polygon[index])
        index = (index + 1) % size
        if index == stop:
            break

    right: list[Vertex] = []
    index = top
    while index != bottom:
        right.append(polygon[index])
        index = (index - 1) % size
    right.append(polygon[bottom])

    return left, right


def triangulate_monotone_polygon(polygon: Iterable[Vertex]) -> list[tuple[int, int]]:
    """Diagonals of a monotone polygon as pairs of vertex identifiers."""
    polygon = list(polygon)
    diagonals: list[tuple[int, int]] = []
    if len(polygon) < 3:
        return diagonals

    left, right = _chains(polygon)
    left_ids = {vertex.id for vertex in left}
    merged = list(heapq.merge(left, right, key=lambda vertex: -vertex.y))

    stack = [merged[0], merged[1]]
    for current in merged[2:]:
        top = stack[-1]
        current_in_left = current.id in left_ids
        top_in_left = top.id in left_ids

        if current_in_left != top_in_left:
            while stack:
                following = stack.pop()
                if not is_polygon_edge(polygon, current.id, following.id):
                    diagonals.append((current.id, following.id))
        else:
            while stack:
                following = stack[-1]
                cross = cross_product(top, following, current)
                if (current_in_left and cross > 0) or (not current_in_left and cross < 0):
                    if not is_polygon_edge(polygon, current.id, following.id):
                        diagonals.append((current.id, following.id))
                    stack.pop()
                else:
                    break
        stack.append(current)

    last = merged[-1]
    stack.pop()
    diagonals.extend((last.id, vertex.id) for vertex in reversed(stack[1:]))

    return diagonals