## infinite 3D lines for analytic3d

## Copyright (c) analytic3d contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""infinite 3D lines for **analytic3d**

A ``Line3`` is a point and a non-zero direction, and stands for the
set ``{point + t * direction}`` for every scalar ``t``.  Lines can be
made from a point and a direction, or from two distinct points: ::

   l1 = Line3(Point3(0,0,0), Vector3(1,0,0))
   l2 = Line3(Point3(0,0,1), Point3(0,1,1))   # through two points
   l1.is_skew_to(l2)       # True
   l1.distance_to(l2)      # 1.0

Unlike the line segments of a drawing package, these lines are
unbounded, so every pair of non-parallel lines has exactly one pair of
mutually closest points.  Two lines intersect when those points
coincide to within ``epsilon``; parallel lines never intersect, even
when they are coincident (coincidence is equality, see ``__eq__``).

"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

import numpy as np

from analytic3d.errors import require
from analytic3d.point import Point3
from analytic3d.precision import Axis, Precision, epsilon, family, leading_axis, register
from analytic3d.vector import Vector3

logger = logging.getLogger(__name__)


@register("line")
class Line3:
    """Double precision infinite line through ``point`` along
    ``direction``.

    ``Line3(point, direction)`` takes a ``Vector3`` direction;
    ``Line3(point1, point2)`` takes a second ``Point3`` and uses
    ``point2 - point1`` as the direction.  Either way the direction
    must not be the zero vector.
    """

    __slots__ = ("point", "direction")
    precision = Precision.DOUBLE

    def __init__(self, point: Point3, direction):
        point_type = family("point", self.precision)
        vector_type = family("vector", self.precision)
        self.point = point_type.of(point)
        if isinstance(direction, Point3):
            direction = point_type.of(direction) - self.point
        self.direction = vector_type.of(direction)
        require(not self.direction.is_zero_vector(),
                "line direction must not be the zero vector")

    @classmethod
    def from_points(cls, point1: Point3, point2: Point3) -> "Line3":
        """Line through two distinct points, directed from ``point1``
        towards ``point2``."""
        if not isinstance(point2, Point3):
            point2 = family("point", cls.precision).of(point2)
        return cls(point1, point2)

    def point_at(self, t) -> Point3:
        """The point ``point + t * direction``."""
        return self.point + self.direction * t

    def point_of_intersection(self, other: "Line3") -> Optional[Point3]:
        """Return the point where the two lines meet, or ``None`` if
        they are parallel (coincident included) or skew."""
        if self.is_parallel_to(other):
            return None
        p1, p2 = self._closest_points_with(other)
        return p1 if p1 == p2 else None

    def angle_between(self, other: "Line3"):
        """Acute angle between two intersecting lines in radians, in
        ``[0, pi/2]``.  Lines that do not intersect give zero."""
        dtype = self.precision.dtype
        if not self.is_intersecting_with(other):
            return dtype(0)
        magnitudes = self.direction.magnitude() * other.direction.magnitude()
        require(magnitudes > epsilon, "angle undefined for near-zero directions")
        ratio = abs(self.direction.dot(other.direction)) / magnitudes
        return dtype(np.arccos(np.clip(ratio, 0, 1)))

    def distance_to(self, target):
        """Distance from this line to a ``Point3`` or another ``Line3``.

        For a line the distance is measured between the two mutually
        closest points, so it is zero for intersecting or coincident
        lines.
        """
        dtype = self.precision.dtype
        if isinstance(target, Point3):
            direction_mag = self.direction.magnitude()
            require(direction_mag > epsilon, "line direction has near-zero magnitude")
            offset = target - self.point
            return dtype(self.direction.cross(offset).magnitude() / direction_mag)
        if isinstance(target, Line3):
            p1, p2 = self._closest_points_with(target)
            return dtype((p2 - p1).magnitude())
        raise TypeError(f"cannot measure distance from a line to {type(target).__name__}")

    def is_point_on_line(self, point: Point3) -> bool:
        return self.direction.is_parallel_to(point - self.point)

    def is_parallel_to(self, other: "Line3") -> bool:
        return self.direction.is_parallel_to(other.direction)

    def is_orthogonal_to(self, other: "Line3") -> bool:
        """Orthogonal directions *and* a common point; orthogonal skew
        lines are not orthogonal in this sense."""
        return (self.direction.is_orthogonal_to(other.direction)
                and self.is_intersecting_with(other))

    def is_skew_to(self, other: "Line3") -> bool:
        return not self.is_parallel_to(other) and not self.is_intersecting_with(other)

    def is_intersecting_with(self, other: "Line3") -> bool:
        return self.point_of_intersection(other) is not None

    def __eq__(self, other):
        if not isinstance(other, Line3):
            return NotImplemented
        return (self.is_point_on_line(other.point)
                and self.direction.is_parallel_to(other.direction))

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(point={self.point!r}, direction={self.direction!r})"

    def _closest_points_with(self, other: "Line3") -> Tuple[Point3, Point3]:
        """Return the pair of mutually closest points, the first on this
        line and the second on ``other``.

        With ``c = d1 x d2`` and ``v = p2 - p1``, the part of ``v`` along
        ``c`` is the gap between the lines; once it is removed the lines
        meet and ``t1 d1 - t2 d2 = v`` is solved in the coordinate pair
        left over after eliminating the leading axis of ``c``.
        """
        d1 = self.direction
        d2 = other.direction
        c = d1.cross(d2)
        v = other.point - self.point

        axis = leading_axis(c)
        if axis is None:
            # parallel; only reachable when callers skip is_parallel_to()
            d2_mag2 = d2.magnitude_squared()
            require(d2_mag2 > epsilon, "line direction has near-zero magnitude")
            logger.debug("closest points requested for parallel lines %r and %r", self, other)
            t1 = 0
            t2 = -v.dot(d2) / d2_mag2
        else:
            v = v - c * (v.dot(c) / c.magnitude_squared())
            if axis is Axis.X:
                t1 = (d2.z * v.y - d2.y * v.z) / c.x
                t2 = (d1.z * v.y - d1.y * v.z) / c.x
            elif axis is Axis.Y:
                t1 = (d2.z * v.x - d2.x * v.z) / -c.y
                t2 = (d1.z * v.x - d1.x * v.z) / -c.y
            else:
                t1 = (d2.y * v.x - d2.x * v.y) / c.z
                t2 = (d1.y * v.x - d1.x * v.y) / c.z

        point_type = family("point", self.precision)
        p1 = self.point + d1 * t1
        p2 = point_type.of(other.point + d2 * t2)
        return p1, p2


@register("line")
class Line3f(Line3):
    """Single precision ``Line3``."""

    __slots__ = ()
    precision = Precision.SINGLE


Line3d = Line3


@register("line")
class Line3ld(Line3):
    """Extended precision ``Line3``."""

    __slots__ = ()
    precision = Precision.EXTENDED


__all__ = ["Line3", "Line3f", "Line3d", "Line3ld"]
