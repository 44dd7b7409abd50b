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
Bounding circle values.

A :class:`BoundingCircle` is the plain (x, y, r) form of a minimum bounding
circle. It is cheap to store, pickle and compare, and offers the usual
bounds used when circles serve as envelopes: containment, intersection and
lower and upper bounds on distances between the enclosed geometries.
'''
import array

import numpy
import shapely.geometry


class BoundingCircle():
    '''Circle given by its centre (x, y) and radius r.'''
    __slots__ = ('x', 'y', 'r')

    def __init__(self, *args, buf=0.):
        # Overloading
        # 1st case: geometry or coordinate sequence.
        if len(args) == 1:
            from .circle import MinimumBoundingCircle
            self.x, self.y, self.r = MinimumBoundingCircle(args[0]).to_tuple()
        # 2nd case: triple (x, y) for the center and r for the radius.
        elif len(args) == 3:
            self.x, self.y, self.r = (float(a) for a in args)
        else:
            raise TypeError(
                "BoundingCircle expects a geometry or x, y and r, got {} "
                "arguments.".format(len(args))
            )
        self.r += buf

    def __repr__(self):
        return "BoundingCircle(x={}, y={}, r={})".format(
            self.x, self.y, self.r)

    def __eq__(self, other):
        if not isinstance(other, BoundingCircle):
            return NotImplemented
        return (self.x, self.y, self.r) == (other.x, other.y, other.r)

    def __getstate__(self):
        return (self.x, self.y, self.r)

    def __setstate__(self, state):
        self.x, self.y, self.r = state

    @property
    def is_empty(self):
        """Boolean: Is this the circle of an empty geometry?"""
        return bool(numpy.isnan(self.r))

    def _center_dist_sq(self, point):
        return (self.x - point[0])**2 + (self.y - point[1])**2

    def center(self):
        return [self.x, self.y]

    def contains(self, point, tolerance=1e-9):
        """
        Returns True if `point` lies in the circle, up to `tolerance`.
        """
        if self.is_empty:
            return False
        return (numpy.sqrt(self._center_dist_sq(point))
                <= self.r + tolerance)

    def intersects(self, other):
        return self._center_dist_sq((other.x, other.y)) <= (self.r + other.r)**2

    def mindist(self, to_other):
        """
        Lower bound on the distance between geometries enclosed in `self`
        and in `to_other`. NaN if either circle is empty.
        """
        if self.is_empty or to_other.is_empty:
            return numpy.nan
        return max(0., numpy.sqrt(self._center_dist_sq(to_other.center()))
                   - self.r - to_other.r)

    def maxdist(self, to_other):
        """
        Upper bound on the distance between geometries enclosed in `self`
        and in `to_other`.
        """
        return (numpy.sqrt(self._center_dist_sq(to_other.center()))
                + self.r + to_other.r)

    def to_array(self):
        return array.array('d', (self.x, self.y, self.r))

    def to_geometry(self, quad_segs=16):
        """Polygon approximating the disc, a Point if the radius is 0."""
        if self.is_empty:
            return shapely.geometry.Polygon()
        centre = shapely.geometry.Point(self.x, self.y)
        if self.r == 0.:
            return centre
        return centre.buffer(self.r, quad_segs=quad_segs)
