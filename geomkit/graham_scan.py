"""Convex hull of a set of points."""

from __future__ import annotations

from collections.abc import Iterable

from geomkit.primitives import Point


def cross_product(a: Point, b: Point, c: Point) -> float:
    """Cross product of b - a and c - a."""
    return (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)


def graham_scan(points: Iterable[Point]) -> list[Point]:
    """Convex hull in counter-clockwise order, starting at the lowest-left point.

    Collinear points on the boundary are dropped.
    """
    ordered = sorted(points)
    if len(ordered) <= 1:
        return ordered

    hull: list[Point] = []
    for point in ordered:
        while len(hull) >= 2 and cross_product(hull[-2], hull[-1], point) <= 0:
            hull.pop()
        hull.append(point)

    lower_size = len(hull)
    for point in reversed(ordered[:-1]):
        while len(hull) > lower_size and cross_product(hull[-2], hull[-1], point) <= 0:
            hull.pop()
        hull.append(point)

    hull.pop()
    return hull