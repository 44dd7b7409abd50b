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
Minimum bounding circles of many geometries at once.
"""
import functools
import inspect
import multiprocessing

import toolz

from .circle import MinimumBoundingCircle


def pmap(fnc, n_jobs=1, chunk_size=10000):
    """
    Turns a function of one object into a function of an iterable of them.

    The first argument of the returned function is the iterable; further
    positional and keyword arguments are passed through to `fnc`. With
    `n_jobs` greater than 1, the iterable is cut in chunks of `chunk_size`
    mapped over a process pool, so `fnc` must be picklable.
    """
    @functools.wraps(fnc)
    def wrapper(iterable, *args,
                n_jobs=n_jobs, chunk_size=chunk_size, **kwargs):
        if n_jobs < 1:
            raise ValueError("n_jobs must be positive, got {}".format(n_jobs))
        if chunk_size < 1:
            raise ValueError(
                "chunk_size must be positive, got {}".format(chunk_size))
        # Vectorize
        params = [
            name for name, param in inspect.signature(fnc).parameters.items()
            if param.kind in (param.POSITIONAL_ONLY,
                              param.POSITIONAL_OR_KEYWORD)
        ]
        if len(args) > len(params) - 1:
            raise TypeError(
                "{}() takes {} extra positional arguments but {} were given"
                .format(fnc.__name__, len(params) - 1, len(args)))
        kwgs = dict(zip(params[1:], args))
        kwgs.update(kwargs)
        task = toolz.compose(
            list, toolz.curry(map)(toolz.partial(fnc, **kwgs)))
        # Parallelize
        if n_jobs == 1:
            return task(iterable)
        chunks = list(toolz.partition_all(chunk_size, iterable))
        with multiprocessing.Pool(n_jobs) as pool:
            res = pool.map(task, chunks)
        return [y for x in res for y in x]
    return wrapper


def bounding_circle(geom, buf=0., **kwargs):
    """:class:`BoundingCircle` of a single geometry or coordinate sequence."""
    return MinimumBoundingCircle(geom, **kwargs).bounding_circle(buf=buf)


bounding_circles = pmap(bounding_circle)
bounding_circles.__doc__ = """
Minimum bounding circles of an iterable of geometries.

Args:
    geoms (iterable): shapely geometries or coordinate sequences.
    buf (float, optional): enlargement of every radius. Defaults to 0.
    n_jobs (int, optional): number of processes. Defaults to 1.
    chunk_size (int, optional): geometries per task when n_jobs > 1.
    **kwargs: passed to :class:`MinimumBoundingCircle`.

Returns:
    list of BoundingCircle, in the order of `geoms`.
"""
