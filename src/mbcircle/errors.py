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
"""Exceptions raised by mbcircle."""


class MinimumBoundingCircleError(RuntimeError):
    """
    Logic failure in the minimum bounding circle algorithm.

    Raised when the angle refinement does not terminate within its iteration
    bound, or when the extremal points do not number 0 to 3. Either case is a
    bug (or a hull that is not convex), never a problem with the user's data.
    """
