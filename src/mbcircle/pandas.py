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
Module wrapping pandas DataFrames.
"""
import numpy
import pandas

from . import bulk


def bounding_circle_frame(data, n_jobs=1, **kwargs):
    """
    Minimum bounding circles of the geometries of a DataFrame or Series.

    The DataFrame must have a column named 'geometry' consisting of Shapely's
    geometries or the like.

    Parameters
    ----------
    data: pandas DataFrame or Series
    n_jobs: int (default 1)
        Number of processes.
    kwargs:
        keyword arguments passed to :func:`mbcircle.bulk.bounding_circles`.

    Returns
    -------
    pandas DataFrame
        Same index as `data`, with columns centre_x, centre_y and radius.
        Empty geometries give NaNs.
    """
    if isinstance(data, pandas.DataFrame):
        geoms = data['geometry']
    elif isinstance(data, pandas.Series):
        geoms = data
    else:
        raise ValueError("Unrecognized type for data frame.")

    circles = bulk.bounding_circles(list(geoms.values), n_jobs=n_jobs,
                                    **kwargs)
    values = numpy.array([c.to_array() for c in circles],
                         dtype=float).reshape(-1, 3)
    return pandas.DataFrame(values, index=geoms.index,
                            columns=['centre_x', 'centre_y', 'radius'])
