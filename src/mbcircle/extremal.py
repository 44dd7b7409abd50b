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
Search for the points determining a minimum bounding circle.

The minimum bounding circle of a convex polygon passes through either two of
its vertices, which are then the ends of a diameter, or three of them, which
form an acute triangle. The search starts from a baseline PQ along the bottom
of the polygon and looks for the vertex R seeing PQ under the smallest angle:
every other vertex lies in the circle through P, Q and R on R's side of PQ.
The shape of the triangle PQR then either settles the circle, or tells which
end of the baseline to move to R.

Each move lengthens the baseline, so a baseline never comes back and the
search stops after at most as many moves as there are vertices.

Selections break ties by keeping the first candidate in point order:
`numpy.argmin` returns the first minimum.
'''
import logging

import numpy

from . import angle
from .errors import MinimumBoundingCircleError

logger = logging.getLogger(__name__)


def _others(pts, *excluded):
    """Mask of the rows of `pts` equal to none of `excluded`."""
    mask = numpy.ones(len(pts), dtype=bool)
    for pt in excluded:
        mask &= ~(pts == pt).all(axis=1)
    return mask


def lowest_point(pts):
    """Row of `pts` with the smallest y ordinate."""
    return pts[numpy.argmin(pts[:, 1])]


def point_with_min_angle_with_x(pts, P):
    """
    Row Q of `pts`, other than `P`, such that PQ is closest to horizontal.
    """
    sines = numpy.where(_others(pts, P),
                        angle.sine_with_x_axis(P, pts), numpy.inf)
    return pts[numpy.argmin(sines)]


def point_with_min_angle_with_segment(pts, P, Q):
    """
    Row R of `pts`, other than `P` and `Q`, minimizing the angle PRQ.
    """
    angles = numpy.where(_others(pts, P, Q),
                         angle.angle_between(P, pts, Q), numpy.inf)
    return pts[numpy.argmin(angles)]


def extremal_points(pts, tolerance=angle.OBTUSE_TOLERANCE):
    """
    Finds the 2 or 3 points of a convex polygon pinning its bounding circle.

    Args:
        pts ((n, 2)-array): distinct vertices of a convex polygon.
        tolerance (float): band around right angles, see
            :func:`mbcircle.angle.is_obtuse`.

    Returns:
        list of 1d-arrays: [P, Q] when the circle has diameter PQ, or
            [P, Q, R] when it is the circumcircle of PQR. Polygons with at
            most 2 vertices are returned as they are.

    Raises:
        MinimumBoundingCircleError: if the search fails to terminate.
    """
    pts = numpy.asarray(pts, dtype=float)
    n = len(pts)
    if n <= 2:
        return list(pts)

    P = lowest_point(pts)
    Q = point_with_min_angle_with_x(pts, P)
    for i in range(n):
        R = point_with_min_angle_with_segment(pts, P, Q)
        logger.debug("Iteration %d: P=%s Q=%s R=%s", i, P, Q, R)

        # PRQ obtuse: P and Q are the ends of a diameter.
        if angle.is_obtuse(P, R, Q, tolerance):
            return [P, Q]
        # RPQ obtuse: P lies inside the circle of diameter RQ.
        if angle.is_obtuse(R, P, Q, tolerance):
            P = R
            continue
        # RQP obtuse: Q lies inside the circle of diameter PR.
        if angle.is_obtuse(R, Q, P, tolerance):
            Q = R
            continue
        return [P, Q, R]

    raise MinimumBoundingCircleError(
        "Logic failure in minimum bounding circle algorithm: no solution "
        "after {} iterations.".format(n)
    )
