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
"""
Angle measures on 2d points.

Points are anything numpy can turn into an array whose last axis holds the
(x, y) coordinates. Functions taking a `tail` or `pts` argument broadcast
over its leading axis, so a whole point set is measured in one call.
"""
import numpy


# Relative band around a right angle, on the cosine, inside of which an angle
# is considered obtuse.
OBTUSE_TOLERANCE = 1e-12


def _as_xy(pts):
    return numpy.asarray(pts, dtype=float)


def angle(p0, p1):
    """Angle of the vector p0 -> p1 with the positive x axis, in (-pi, pi]."""
    p0 = _as_xy(p0)
    p1 = _as_xy(p1)
    return numpy.arctan2(p1[..., 1] - p0[..., 1], p1[..., 0] - p0[..., 0])


def diff(ang1, ang2):
    """Smallest unoriented difference between two angles, in [0, pi]."""
    delta = numpy.abs(ang1 - ang2)
    return numpy.where(delta > numpy.pi, 2 * numpy.pi - delta, delta)


def angle_between(tip1, tail, tip2):
    """
    Unoriented angle at `tail` between the rays to `tip1` and `tip2`.

    Args:
        tip1: end point of the first ray.
        tail: vertex of the angle, a point or an array of points.
        tip2: end point of the second ray.

    Returns:
        float or 1d-array: angle(s) in radians, in [0, pi].
    """
    return diff(angle(tail, tip1), angle(tail, tip2))


def sine_with_x_axis(origin, pts):
    """
    Absolute sine of the angle each segment origin -> pt makes with the x axis.

    The sine is cheaper than the angle and orders segments the same way on
    [0, pi/2]. Rows of `pts` equal to `origin` give NaN.
    """
    delta = _as_xy(pts) - _as_xy(origin)
    dx = delta[..., 0]
    dy = numpy.abs(delta[..., 1])
    with numpy.errstate(invalid="ignore", divide="ignore"):
        return dy / numpy.sqrt(dx * dx + dy * dy)


def is_obtuse(p0, p1, p2, tolerance=OBTUSE_TOLERANCE):
    """
    Tests whether the angle p0-p1-p2, with vertex p1, is obtuse.

    Right angles are reported as obtuse: the cosine of the angle is compared
    against `tolerance` rather than against zero, so a right angle computed
    with rounding noise falls on the obtuse side. Unlike the strict `dot < 0`
    test, this makes a right angle opposite a segment yield that segment as
    a diameter.
    """
    p0 = _as_xy(p0)
    p1 = _as_xy(p1)
    p2 = _as_xy(p2)
    v0 = p0 - p1
    v2 = p2 - p1
    dot = v0[0] * v2[0] + v0[1] * v2[1]
    scale = numpy.hypot(*v0) * numpy.hypot(*v2)
    return bool(dot <= tolerance * scale)
