import math
import sys

import pytest

from geomkit.common import Intersection, Position
from geomkit.primitives import Edge, Point

EPS = sys.float_info.epsilon * 1e3
TIGHT = sys.float_info.epsilon


def test_default_point_is_origin():
    point = Point()
    assert point.x == pytest.approx(0.0)
    assert point.y == pytest.approx(0.0)
    assert point[0] == pytest.approx(0.0)
    assert point[1] == pytest.approx(0.0)


def test_point_coordinates_and_indexing():
    point = Point(1.0, 2.0)
    assert point.x == pytest.approx(1.0)
    assert point.y == pytest.approx(2.0)
    assert point[0] == pytest.approx(1.0)
    assert point[1] == pytest.approx(2.0)


def test_point_index_out_of_range():
    with pytest.raises(IndexError):
        Point(1.0, 2.0)[2]


def test_point_addition():
    result = Point(1.0, 2.0) + Point(3.0, 4.0)
    assert result.x == pytest.approx(4.0)
    assert result.y == pytest.approx(6.0)


def test_point_subtraction():
    result = Point(1.0, 2.0) - Point(3.0, 5.0)
    assert result.x == pytest.approx(-2.0)
    assert result.y == pytest.approx(-3.0)


def test_point_dot_product():
    assert Point(1.0, 2.0) * Point(3.0, 5.0) == pytest.approx(13.0)


def test_point_is_equal():
    assert Point.is_equal(Point(1.0, 2.0), Point(1.0, 2.0), EPS)
    assert not Point.is_equal(Point(1.0, 2.0), Point(1.5, 2.0), EPS)


def test_point_ordering():
    p1 = Point(1.0, 2.0)
    p2 = Point(2.0, 2.0)
    assert p1 < p2
    assert p2 > p1
    assert sorted([p2, p1]) == [p1, p2]


def test_point_classify_between():
    p0 = Point(3.0, 3.0)
    p1 = Point(1.0, 1.0)
    p2 = Point(5.0, 5.0)
    assert p0.classify(p1, p2, EPS) is Position.BETWEEN
    assert p0.classify_edge(Edge(p1, p2), EPS) is Position.BETWEEN


def test_point_polar_angle_and_length():
    point = Point(1.0, 1.0)
    assert point.polar_angle(EPS) == pytest.approx(45.0)
    assert point.length() == pytest.approx(math.sqrt(2.0))


@pytest.mark.parametrize(
    "point, expected",
    [
        (Point(0.0, 0.0), -1.0),
        (Point(0.0, 2.0), 90.0),
        (Point(0.0, -2.0), 270.0),
        (Point(-1.0, 0.0), 180.0),
        (Point(1.0, -1.0), 315.0),
    ],
)
def test_point_polar_angle_special_cases(point, expected):
    assert point.polar_angle(EPS) == pytest.approx(expected)


def test_point_distance_to_edge():
    p = Point(2.0, 3.0)
    edge = Edge(Point(1.0, 1.0), Point(3.0, 1.0))
    assert p.distance(edge, EPS) == pytest.approx(-2.0)


def test_point_distance_leaves_edge_unchanged():
    edge = Edge(Point(1.0, 1.0), Point(3.0, 1.0))
    Point(2.0, 3.0).distance(edge, EPS)
    assert edge == Edge(Point(1.0, 1.0), Point(3.0, 1.0))


def test_scalar_times_point():
    result = 4.0 * Point(2.0, 3.0)
    assert result.x == pytest.approx(8.0)
    assert result.y == pytest.approx(12.0)


def test_point_times_scalar():
    result = Point(2.0, 3.0) * 4.0
    assert result.x == pytest.approx(8.0)
    assert result.y == pytest.approx(12.0)


def test_default_edge():
    edge = Edge()
    assert edge.origin == Point(0.0, 0.0)
    assert edge.destination == Point(1.0, 0.0)


def test_edge_from_points():
    edge = Edge(Point(1.0, 2.0), Point(3.0, 4.0))
    assert edge.origin.x == pytest.approx(1.0)
    assert edge.origin.y == pytest.approx(2.0)
    assert edge.destination.x == pytest.approx(3.0)
    assert edge.destination.y == pytest.approx(4.0)


def test_edge_rotate():
    edge = Edge(Point(1.0, 1.0), Point(3.0, 3.0))
    returned = edge.rotate()
    assert returned is edge
    assert edge.origin.x == pytest.approx(1.0)
    assert edge.origin.y == pytest.approx(3.0)
    assert edge.destination.x == pytest.approx(3.0)
    assert edge.destination.y == pytest.approx(1.0)


def test_edge_flip():
    edge = Edge(Point(1.0, 2.0), Point(3.0, 4.0))
    returned = edge.flip()
    assert returned is edge
    assert edge.origin == Point(3.0, 4.0)
    assert edge.destination == Point(1.0, 2.0)


def test_edge_double_flip_round_trip():
    edge = Edge(Point(1.0, 2.0), Point(3.0, 4.0))
    edge.flip().flip()
    assert edge == Edge(Point(1.0, 2.0), Point(3.0, 4.0))


def test_edge_value():
    edge = Edge(Point(1.0, 1.0), Point(3.0, 2.0))
    result = edge.value(0.5)
    assert result.x == pytest.approx(2.0)
    assert result.y == pytest.approx(1.5)


def test_edge_intersect_and_cross():
    e1 = Edge(Point(1.0, 1.0), Point(3.0, 2.0))
    e2 = Edge(Point(1.0, 2.0), Point(3.0, 1.0))
    kind, t = e1.intersect(e2, TIGHT)
    assert kind is Intersection.SKEW
    assert e1.value(t) == Point(2.0, 1.5)
    cross_kind, _ = e1.cross(e2, TIGHT)
    assert cross_kind is Intersection.SKEW_CROSS


def test_edge_cross_misses_short_segment():
    e1 = Edge(Point(0.0, 0.0), Point(1.0, 0.0))
    e2 = Edge(Point(5.0, -1.0), Point(5.0, 1.0))
    kind, _ = e1.cross(e2, TIGHT)
    assert kind is Intersection.SKEW_NO_CROSS


def test_edge_cross_parallel():
    e1 = Edge(Point(0.0, 0.0), Point(1.0, 0.0))
    e2 = Edge(Point(0.0, 1.0), Point(1.0, 1.0))
    kind, t = e1.cross(e2, TIGHT)
    assert kind is Intersection.PARALLEL
    assert t is None


def test_edge_is_vertical():
    assert Edge(Point(1.0, 1.0), Point(1.0, 2.0)).is_vertical(TIGHT)
    assert not Edge(Point(1.0, 1.0), Point(2.0, 2.0)).is_vertical(TIGHT)


def test_edge_slope():
    assert Edge(Point(1.0, 1.0), Point(2.0, 2.0)).slope(TIGHT) == pytest.approx(1.0)


def test_vertical_edge_slope_is_float_max():
    assert Edge(Point(1.0, 1.0), Point(1.0, 2.0)).slope(TIGHT) == sys.float_info.max


def test_edge_y():
    edge = Edge(Point(1.0, 1.0), Point(2.0, 2.0))
    assert edge.y(1.5, TIGHT) == pytest.approx(1.5)