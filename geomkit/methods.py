"""JSON-facing entry points for the geometric algorithms."""

from __future__ import annotations

from typing import Any

from geomkit.graham_scan import graham_scan
from geomkit.primitives import Point
from geomkit.triangulation import Vertex, is_polygon_edge, triangulate_monotone_polygon


class MethodError(ValueError):
    """Invalid input for an algorithm method; ``code`` tells which check failed."""

    def __init__(self, message: str, code: int) -> None:
        super().__init__(message)
        self.message = message
        self.code = code


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _coordinates(items: list[Any]) -> list[tuple[float, float]]:
    coords = []
    for item in items:
        if not isinstance(item, dict) or not _is_number(item.get("x")):
            raise MethodError("Each point must have 'x' numeric field", 2)
        if not _is_number(item.get("y")):
            raise MethodError("Each point must have 'y' numeric field", 2)
        coords.append((float(item["x"]), float(item["y"])))
    return coords


def _array(data: Any, key: str) -> list[Any]:
    if not isinstance(data, dict) or not isinstance(data.get(key), list):
        raise MethodError(f"Input must contain '{key}' array", 1)
    return data[key]


def graham_scan_method(data: Any) -> dict[str, Any]:
    """Compute the convex hull of ``data["points"]``.

    Returns a dictionary with ``convex_hull``, ``hull_size`` and
    ``original_size``; raises MethodError on malformed input.
    """
    points = [Point(x, y) for x, y in _coordinates(_array(data, "points"))]
    hull = graham_scan(points)
    return {
        "convex_hull": [{"x": point.x, "y": point.y} for point in hull],
        "hull_size": len(hull),
        "original_size": len(points),
    }


def monotone_polygon_triangulation_method(data: Any) -> dict[str, Any]:
    """Triangulate the monotone polygon ``data["polygon"]``.

    Returns a dictionary with ``diagonals``, ``diagonals_count`` and
    ``vertices_count``; raises MethodError on malformed input.
    """
    coords = _coordinates(_array(data, "polygon"))
    polygon = [Vertex(x, y, index) for index, (x, y) in enumerate(coords)]
    if len(polygon) < 3:
        raise MethodError("Polygon must have at least 3 points", 3)

    diagonals = [
        {"from": start, "to": end}
        for start, end in triangulate_monotone_polygon(polygon)
        if not is_polygon_edge(polygon, start, end)
    ]
    return {
        "diagonals": diagonals,
        "diagonals_count": len(diagonals),
        "vertices_count": len(polygon),
    }