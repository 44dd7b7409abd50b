import itertools
import math

import numpy
import pytest
import shapely.geometry

from mbcircle import extremal, hull
from mbcircle.errors import MinimumBoundingCircleError


def as_set(pts):
    return {tuple(float(c) for c in p) for p in pts}


@pytest.fixture
def square():
    return numpy.array([[0., 0.], [1., 0.], [1., 1.], [0., 1.]])


@pytest.fixture
def hexagon():
    return numpy.array([[math.cos(k * math.pi / 3), math.sin(k * math.pi / 3)]
                        for k in range(6)])


def test_lowest_point_first_occurrence():
    pts = numpy.array([[3., 1.], [2., 0.], [5., 0.], [1., 2.]])
    assert tuple(extremal.lowest_point(pts)) == (2., 0.)


def test_point_with_min_angle_with_x():
    pts = numpy.array([[0., 0.], [1., 2.], [4., 1.], [-1., 1.]])
    Q = extremal.point_with_min_angle_with_x(pts, pts[0])
    assert tuple(Q) == (4., 1.)


def test_point_with_min_angle_with_x_excludes_origin():
    pts = numpy.array([[0., 0.], [0., 1.]])
    Q = extremal.point_with_min_angle_with_x(pts, pts[0])
    assert tuple(Q) == (0., 1.)


def test_point_with_min_angle_with_x_ties_keep_first():
    pts = numpy.array([[0., 0.], [-2., 0.], [3., 0.]])
    Q = extremal.point_with_min_angle_with_x(pts, pts[0])
    assert tuple(Q) == (-2., 0.)


def test_point_with_min_angle_with_segment():
    pts = numpy.array([[0., 0.], [2., 0.], [1., 1.], [1., 5.]])
    R = extremal.point_with_min_angle_with_segment(pts, pts[0], pts[1])
    assert tuple(R) == (1., 5.)


def test_point_with_min_angle_with_segment_ties_keep_first(square):
    R = extremal.point_with_min_angle_with_segment(
        square, square[0], square[2])
    assert tuple(R) == (1., 0.)


def test_extremal_points_trivial():
    assert extremal.extremal_points(numpy.empty((0, 2))) == []
    res = extremal.extremal_points(numpy.array([[1., 2.], [3., 4.]]))
    assert as_set(res) == {(1., 2.), (3., 4.)}


def test_extremal_points_square_diagonal(square):
    res = extremal.extremal_points(square)
    assert len(res) == 2
    assert as_set(res) in ({(0., 0.), (1., 1.)}, {(1., 0.), (0., 1.)})


def test_extremal_points_right_triangle():
    pts = numpy.array([[0., 0.], [4., 0.], [0., 3.]])
    res = extremal.extremal_points(pts)
    assert as_set(res) == {(4., 0.), (0., 3.)}


def test_extremal_points_acute_triangle():
    pts = numpy.array([[0., 0.], [4., 0.], [1., 3.]])
    res = extremal.extremal_points(pts)
    assert len(res) == 3
    assert as_set(res) == as_set(pts)


def test_extremal_points_obtuse_triangle():
    pts = numpy.array([[0., 0.], [10., 0.], [5., 1.]])
    res = extremal.extremal_points(pts)
    assert as_set(res) == {(0., 0.), (10., 0.)}


def test_extremal_points_hexagon(hexagon):
    res = extremal.extremal_points(hexagon)
    assert 2 <= len(res) <= 3
    for p in res:
        assert abs(math.hypot(*p) - 1) < 10**-9


def test_extremal_points_moves_baseline():
    # The lowest point is not extremal: the search must drop it.
    geom = shapely.geometry.MultiPoint(
        [(0, 0), (-10, 5), (10, 5), (0, 10)])
    res = extremal.extremal_points(hull.hull_points(geom))
    assert as_set(res) == {(-10., 5.), (10., 5.)}


def test_extremal_points_iteration_bound(monkeypatch, square):
    # Angle at R never obtuse, angle at P always: P moves forever.
    answers = itertools.cycle([False, True])
    monkeypatch.setattr(extremal.angle, "is_obtuse",
                        lambda *args: next(answers))
    with pytest.raises(MinimumBoundingCircleError):
        extremal.extremal_points(square)
