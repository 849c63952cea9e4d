# geomkit

Planar computational geometry in plain Python, with no third-party
dependencies:

- `geomkit.primitives`: the `Point` and `Edge` types, with classification,
  intersection, slope and distance helpers
- `geomkit.orientation`: `orientation` of three points
- `geomkit.polygon`: a circular `Polygon` with a movable current vertex,
  supporting insert, remove and split
- `geomkit.graham_scan`: the `graham_scan` convex hull
- `geomkit.triangulation`: `triangulate_monotone_polygon`, which returns the
  diagonals of a y-monotone polygon
- `geomkit.methods`: JSON request handlers for the algorithms
- `geomkit.server`: a small HTTP server for those handlers
- `geomkit.common`: the `Position`, `Intersection` and `Rotation` enumerations

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Points and edges

`Point` is an immutable dataclass with fields `x` and `y`. Points are ordered
lexicographically by `(x, y)`. `p + q` and `p - q` give points. `p * q` gives
the dot product. `k * p` and `p * k` scale a point by a number. `p[0]` and
`p[1]` give the coordinates.

```python
from geomkit.primitives import Point, Edge
from geomkit.common import Intersection

p = Point(1.0, 1.0)
p.length()                                   # 1.4142...
p.polar_angle(1e-9)                          # 45.0 (degrees; -1 for the origin)
p.classify(Point(0, 0), Point(2, 2), 1e-9)   # Position.BETWEEN

e1 = Edge(Point(1.0, 1.0), Point(3.0, 2.0))
e2 = Edge(Point(1.0, 2.0), Point(3.0, 1.0))
kind, t = e1.cross(e2, 1e-9)                 # (Intersection.SKEW_CROSS, 0.5)
e1.value(t)                                  # Point(x=2.0, y=1.5)
```

`Edge` is a mutable dataclass from `origin` to `destination`. It defaults to
the edge from (0, 0) to (1, 0). `flip()` reverses the edge in place.
`rotate()` turns it 90 degrees clockwise about its midpoint. Both return the
edge.

`intersect` and `cross` return a pair: the `Intersection` kind and a
parameter on the edge. The parameter is `None` when it was not computed.
`intersect` works on the lines through the two edges. `cross` works on the
segments themselves.

`slope` returns `sys.float_info.max` for a vertical edge. `Point.distance`
gives the signed distance from a point to the line through an edge.

## Orientation

```python
from geomkit.orientation import orientation

orientation(Point(0, 0), Point(1, 0), Point(0, 1), 1e-9)   # 1
```

The function returns `1` for a counter-clockwise turn, `-1` for a clockwise
turn and `0` for collinear points.

## Polygons

`Polygon` stores its vertices in a list, in clockwise order, and tracks the
index of a current vertex in `current`. `current` is `None` only when the
polygon is empty.

The neighbour methods `clockwise()`, `counter_clockwise()` and
`neighbor(rotation)` return indices. `advance(rotation)` moves the current
vertex to its neighbour.

- `insert(point)` adds a vertex after the current one and makes it current.
- `remove(index)` deletes a vertex and makes its counter-clockwise neighbour
  current.
- `split(index)` cuts the polygon between the current vertex and `index`, and
  returns the cut-off part.
- `edge()` returns the `Edge` from the current vertex to its clockwise
  neighbour.
- `copy()` returns an independent copy.

```python
from geomkit.polygon import Polygon
from geomkit.common import Rotation

poly = Polygon([Point(1, 2), Point(3, 4)])
poly.insert(Point(5, 6))
poly.current_point()            # Point(x=5, y=6)
poly.advance(Rotation.CLOCKWISE)
```

## Convex hull

```python
from geomkit.graham_scan import graham_scan

graham_scan([Point(0, 0), Point(1, 1), Point(2, 0), Point(1, -1), Point(1, 0)])
# [Point(0, 0), Point(1, -1), Point(2, 0), Point(1, 1)]
```

The hull comes back in counter-clockwise order, starting from the smallest
point in `(x, y)` order. Interior points are dropped, and so are points that
lie on the boundary between two hull vertices.

## Monotone polygon triangulation

```python
from geomkit.triangulation import Vertex, triangulate_monotone_polygon

square = [Vertex(0, 2, 0), Vertex(2, 0, 1), Vertex(0, -2, 2), Vertex(-2, 0, 3)]
triangulate_monotone_polygon(square)   # list of (from_id, to_id) pairs
```

Give the vertices of the polygon in traversal order, each with its own `id`.
`is_polygon_edge(polygon, id1, id2)` tells whether two vertices are adjacent.

## JSON handlers

The handlers take a decoded JSON request and return a decoded response. On
bad input they raise `MethodError`, whose `code` tells which check failed:

- `1`: the array is missing.
- `2`: a point lacks a numeric `x` or `y`.
- `3`: the polygon has fewer than 3 points.

```python
from geomkit.methods import graham_scan_method, monotone_polygon_triangulation_method

graham_scan_method({"points": [{"x": 0, "y": 0}, {"x": 1, "y": 1}, {"x": 2, "y": 0}]})
# {"convex_hull": [...], "hull_size": 3, "original_size": 3}
```

`monotone_polygon_triangulation_method({"polygon": [...]})` returns
`diagonals`, `diagonals_count` and `vertices_count`. Each diagonal has the
form `{"from": i, "to": j}`, where `i` and `j` are positions in the input
array. Polygon edges are left out of the list.

## HTTP server

```
geomkit-server [PORT]
```

The server listens on `0.0.0.0`, on port 8080 unless a port is given. Its
endpoints are:

- `POST /GrahamScan`: the body goes to `graham_scan_method`.
- `POST /MonotonePolygonTriangulation`: the body goes to
  `monotone_polygon_triangulation_method`.
- `GET /stop`: shuts the server down.

Invalid JSON and rejected input are answered with status 400 and a JSON body
holding an `error` message. Unknown paths get 404.

To build a server without starting it, call `geomkit.server.create_server(host, port)`.