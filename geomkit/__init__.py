"""Planar geometry: points, edges, polygons, convex hulls, monotone triangulation and a JSON HTTP server."""

__version__ = "0.1.0"

__all__ = [
    "common",
    "primitives",
    "orientation",
    "polygon",
    "graham_scan",
    "triangulation",
    "methods",
    "server",
]