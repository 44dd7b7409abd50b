# Copyright (C) 2018 DataStorm
#
# This file is part of mbcircle.
#
# mbcircle is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# mbcircle is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# A copy of the GNU General Public License is available in the LICENSE
# file or at <http://www.gnu.org/licenses/>.
'''
Minimum bounding circle of a geometry.

The minimum bounding circle is the smallest circle enclosing all the points
of a geometry. It is determined by at most three of the points, called the
extremal points:

    * none for an empty geometry, which has no circle;
    * one for a single point, which is its own circle of radius 0;
    * two, which are the ends of a diameter;
    * three, forming an acute triangle whose circumcircle is the circle.

:class:`MinimumBoundingCircle` computes the extremal points once, on the
first query, and derives the centre, the radius and the output geometries
from them.
'''
import collections
import logging
import math

import shapely.geometry

from . import angle
from . import extremal
from . import hull
from . import triangle
from .envelope import BoundingCircle
from .errors import MinimumBoundingCircleError

logger = logging.getLogger(__name__)

# Number of segments per quarter circle when rendering a circle as a polygon.
QUAD_SEGS = 16

# Computed state of a MinimumBoundingCircle. Extremal points are (x, y)
# tuples, centre is None for an empty geometry.
Result = collections.namedtuple("Result", "extremal centre radius")


def _xy(pt):
    return (float(pt[0]), float(pt[1]))


def compute_centre(extremal_pts):
    """
    Centre of the circle determined by 0 to 3 extremal points.

    Returns:
        (x, y) tuple, or None when there is no point.
    """
    k = len(extremal_pts)
    if k == 0:
        return None
    if k == 1:
        return _xy(extremal_pts[0])
    if k == 2:
        p0, p1 = extremal_pts
        return ((p0[0] + p1[0]) / 2.0, (p0[1] + p1[1]) / 2.0)
    if k == 3:
        return triangle.circumcentre(*extremal_pts)
    raise MinimumBoundingCircleError(
        "Logic failure in minimum bounding circle algorithm: {} extremal "
        "points.".format(k)
    )


class MinimumBoundingCircle():
    """
    Smallest circle enclosing the points of a geometry.

    The input is never modified. All results are computed together on the
    first query and then reused, so repeated queries return identical values.

    Note:
        The circle is not inflated: input points lie on or inside it up to
        floating point rounding.

    Args:
        data: shapely geometry, or sequence of (x, y) coordinates.
        tolerance (float, optional): band around right angles used by the
            obtuse angle test. Defaults to `angle.OBTUSE_TOLERANCE`.
        quad_segs (int, optional): resolution of :meth:`circle`. Defaults to
            `QUAD_SEGS`.

    Attributes:
        input: the input as a shapely geometry.
    """

    def __init__(self, data, tolerance=angle.OBTUSE_TOLERANCE,
                 quad_segs=QUAD_SEGS):
        self.input = hull.as_geometry(data)
        self.tolerance = tolerance
        self.quad_segs = quad_segs
        self._result = None

    def __repr__(self):
        return "MinimumBoundingCircle(centre={}, radius={})".format(
            self.centre, self.radius)

    def _compute(self):
        # The result is published in a single assignment: a concurrent first
        # query may compute it twice but never sees it half built.
        if self._result is not None:
            return self._result
        pts = hull.hull_points(self.input)
        extremal_pts = [_xy(p) for p in
                        extremal.extremal_points(pts, self.tolerance)]
        centre = compute_centre(extremal_pts)
        radius = 0.
        if centre is not None:
            radius = math.hypot(centre[0] - extremal_pts[0][0],
                                centre[1] - extremal_pts[0][1])
        logger.debug("Computed circle on %d hull points: %d extremal "
                     "points, centre=%s, radius=%s",
                     len(pts), len(extremal_pts), centre, radius)
        self._result = Result(tuple(extremal_pts), centre, radius)
        return self._result

    @property
    def centre(self):
        """(x, y) centre of the circle, or None for an empty input."""
        return self._compute().centre

    @property
    def radius(self):
        """Radius of the circle; 0 for a single point or an empty input."""
        return self._compute().radius

    @property
    def extremal_points(self):
        """List of the 0 to 3 (x, y) points determining the circle."""
        return list(self._compute().extremal)

    def circle(self):
        """
        The circle as a geometry.

        Returns:
            An empty Polygon for an empty input, the centre Point when the
            radius is 0, and otherwise a Polygon approximating the disc.
        """
        res = self._compute()
        if res.centre is None:
            return shapely.geometry.Polygon()
        centre = shapely.geometry.Point(res.centre)
        if res.radius == 0.:
            return centre
        return centre.buffer(res.radius, quad_segs=self.quad_segs)

    def farthest_points(self):
        """
        Segment between the first and the last extremal points.

        Note:
            With 3 extremal points, these two are not necessarily the
            farthest apart.
        """
        res = self._compute()
        if len(res.extremal) == 0:
            return shapely.geometry.LineString()
        if len(res.extremal) == 1:
            return shapely.geometry.Point(res.centre)
        return shapely.geometry.LineString(
            [res.extremal[0], res.extremal[-1]])

    def diameter(self):
        """
        Segment between the first two extremal points.

        Note:
            With 3 extremal points, this is a chord of the circle and not a
            diameter through the centre.
        """
        res = self._compute()
        if len(res.extremal) == 0:
            return shapely.geometry.LineString()
        if len(res.extremal) == 1:
            return shapely.geometry.Point(res.centre)
        # TODO: with 3 extremal points, return the chord through the centre
        # from extremal[0], of length 2 * radius.
        return shapely.geometry.LineString(
            [res.extremal[0], res.extremal[1]])

    def to_tuple(self):
        """(x, y, r) of the circle, NaNs for an empty input."""
        res = self._compute()
        if res.centre is None:
            return (math.nan, math.nan, math.nan)
        return (res.centre[0], res.centre[1], res.radius)

    def bounding_circle(self, buf=0.):
        """The circle as a :class:`BoundingCircle`, enlarged by `buf`."""
        return BoundingCircle(*self.to_tuple(), buf=buf)
