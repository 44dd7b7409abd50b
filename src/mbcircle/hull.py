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
Reduction of a geometry to its convex hull vertices.

The minimum bounding circle of a point set only depends on the vertices of
its convex hull. Computing the hull with shapely also drops duplicate
points, so the search works on distinct points only.
"""
import numpy
import shapely
import shapely.geometry
from shapely.geometry.base import BaseGeometry


def as_geometry(data):
    """
    Returns `data` as a shapely geometry.

    Shapely geometries are returned untouched. Anything else is read as a
    sequence of (x, y) coordinates and wrapped in a MultiPoint.
    """
    if isinstance(data, BaseGeometry):
        return data
    coords = numpy.asarray(data, dtype=float)
    if coords.size == 0:
        return shapely.geometry.MultiPoint()
    if coords.ndim != 2 or coords.shape[1] != 2:
        raise ValueError(
            "Coordinates must be a sequence of (x, y) pairs, got an array "
            "of shape {}.".format(coords.shape)
        )
    return shapely.geometry.MultiPoint(coords)


def hull_points(geom):
    """
    Vertices of the convex hull of `geom`, in ring order, without repeats.

    Returns:
        (n, 2)-array: 0 rows for an empty geometry, 1 row when the geometry
            reduces to a single point, 2 rows when its points are collinear,
            and the open hull ring otherwise.
    """
    if geom.is_empty:
        return numpy.empty((0, 2))
    if shapely.get_num_coordinates(geom) == 1:
        return shapely.get_coordinates(geom)[:1]

    pts = shapely.get_coordinates(geom.convex_hull)
    # Hull rings are closed; a hull of equal points is a single point.
    if len(pts) > 1 and (pts[0] == pts[-1]).all():
        pts = pts[:-1]
    return pts
