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
"""Triangle measures."""


def _det(m00, m01, m10, m11):
    return m00 * m11 - m01 * m10


def circumcentre(a, b, c):
    """
    Centre of the circle passing through the three vertices of a triangle.

    Coordinates are taken relative to `c` before applying the determinant
    formula (Wikipedia: Circumscribed circle), which keeps the products small
    for triangles far from the origin.

    Raises:
        ValueError: if the three points are collinear.
    """
    cx, cy = float(c[0]), float(c[1])
    ax, ay = float(a[0]) - cx, float(a[1]) - cy
    bx, by = float(b[0]) - cx, float(b[1]) - cy

    denom = 2 * _det(ax, ay, bx, by)
    if denom == 0.0:
        raise ValueError("Collinear points {}, {}, {} have no circumcentre."
                         .format(tuple(a), tuple(b), tuple(c)))
    numx = _det(ay, ax * ax + ay * ay, by, bx * bx + by * by)
    numy = _det(ax, ax * ax + ay * ay, bx, bx * bx + by * by)
    return (cx - numx / denom, cy + numy / denom)
