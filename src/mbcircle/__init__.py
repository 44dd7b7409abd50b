"""
Minimum bounding circles of planar geometries.

The minimum bounding circle of a geometry is the smallest circle containing
all of its points. It is pinned down by one, two or three of the points,
the extremal points, which are searched among the vertices of the convex
hull by a bounded refinement of angles.

Geometries are shapely geometries, or plain sequences of (x, y) coordinates.

    >>> from mbcircle import MinimumBoundingCircle
    >>> mbc = MinimumBoundingCircle([(0, 0), (4, 0), (0, 3)])
    >>> mbc.centre, mbc.radius
    ((2.0, 1.5), 2.5)
"""
from .circle import MinimumBoundingCircle  # noqa: F401
from .envelope import BoundingCircle  # noqa: F401
from .errors import MinimumBoundingCircleError  # noqa: F401
from .bulk import bounding_circles  # noqa: F401

__version__ = "0.1.0"
