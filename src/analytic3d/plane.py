## planes for analytic3d

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

"""planes for **analytic3d**

A ``Plane3`` is a point in the plane and a non-zero normal vector,
otherwise known as the point-normal form.  The normal need not be of
unit length.  Planes can be built five ways: ::

   Plane3(point, normal)
   Plane3.from_vectors(point, vector1, vector2)   # normal = v1 x v2
   Plane3.from_points(p1, p2, p3)                 # three non-collinear points
   Plane3.from_lines(line1, line2)                # intersecting or parallel lines
   Plane3.from_coefficients(a, b, c, d)           # ax + by + cz + d = 0

``relative_distance_to()`` is signed: its sign tells on which side of
the plane a point lies, with the positive side in the direction of the
normal.  It is scaled by the magnitude of the normal; use
``distance_to()`` for the euclidean distance.

Equality does not depend on the representation: planes with
anti-parallel normals through the same points are equal.

"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from analytic3d.errors import require
from analytic3d.line import Line3
from analytic3d.point import Point3
from analytic3d.precision import Axis, Precision, epsilon, family, is_zero, leading_axis, register
from analytic3d.vector import Vector3


@register("plane")
class Plane3:
    """Double precision plane through ``point`` with normal ``normal``."""

    __slots__ = ("point", "normal")
    precision = Precision.DOUBLE

    def __init__(self, point: Point3, normal: Vector3):
        self.point = family("point", self.precision).of(point)
        self.normal = family("vector", self.precision).of(normal)
        require(not self.normal.is_zero_vector(),
                "plane normal must not be the zero vector")

    @classmethod
    def from_vectors(cls, point: Point3, vector1: Vector3, vector2: Vector3) -> "Plane3":
        """Plane through ``point`` spanned by two non-parallel vectors."""
        vector_type = family("vector", cls.precision)
        v1 = vector_type.of(vector1)
        v2 = vector_type.of(vector2)
        return cls(point, v1.cross(v2))

    @classmethod
    def from_points(cls, point1: Point3, point2: Point3, point3: Point3) -> "Plane3":
        """Plane through three non-collinear points.  The normal follows
        the right-hand rule from ``point1 -> point2`` to ``point1 -> point3``."""
        point_type = family("point", cls.precision)
        p1 = point_type.of(point1)
        p2 = point_type.of(point2)
        p3 = point_type.of(point3)
        return cls(p1, (p2 - p1).cross(p3 - p1))

    @classmethod
    def from_lines(cls, line1: Line3, line2: Line3) -> "Plane3":
        """Plane containing two lines, which must either intersect or be
        parallel and distinct.  Skew lines do not lie in a common plane."""
        crossed = line1.direction.cross(line2.direction)
        if crossed.is_zero_vector():
            normal = line1.direction.cross(line2.point - line1.point)
            require(not normal.is_zero_vector(),
                    "coincident lines do not determine a plane")
        else:
            require(line1.is_intersecting_with(line2),
                    "skew lines cannot form a plane")
            normal = crossed
        return cls(line1.point, normal)

    @classmethod
    def from_coefficients(cls, a, b, c, d) -> "Plane3":
        """Plane ``ax + by + cz + d = 0``.

        The stored point lies on the first coordinate axis, in x, y, z
        order, whose coefficient is not zero.
        """
        dtype = cls.precision.dtype
        normal = family("vector", cls.precision)(a, b, c)
        axis = leading_axis(normal)
        require(axis is not None, "plane coefficients give a zero normal vector")
        coords = [dtype(0), dtype(0), dtype(0)]
        coords[axis.value] = -dtype(d) / normal[axis.value]
        return cls(family("point", cls.precision).of(coords), normal)

    def coefficients(self) -> Tuple:
        """Return ``(a, b, c, d)`` such that the plane is
        ``ax + by + cz + d = 0``."""
        n = self.normal
        return (n.x, n.y, n.z, -n.dot(self.point.to_vector()))

    def point_of_intersection(self, line: Line3) -> Optional[Point3]:
        """Point where ``line`` crosses the plane, or ``None``.

        **NOTE:** the line is treated as parallel whenever
        ``normal . direction`` is below ``epsilon``, using the *signed*
        dot product.  A line whose direction points against the normal
        therefore reports no intersection; reverse the line (or the
        plane) to intersect it.
        """
        dotp = self.normal.dot(line.direction)
        if dotp < epsilon:
            return None
        t = -self.relative_distance_to(line.point) / dotp
        return family("point", self.precision).of(line.point + line.direction * t)

    def line_of_intersection(self, other: "Plane3") -> Optional[Line3]:
        """Line shared by two planes, or ``None`` if they are parallel.

        The direction is ``n1 x n2``.  A point on the line is found by
        setting the coordinate of the leading axis of that direction to
        zero and solving ``n1 . p = h1``, ``n2 . p = h2`` for the other
        two.
        """
        n1 = self.normal
        n2 = other.normal
        direction = n1.cross(n2)
        if direction.is_zero_vector():
            return None

        h1 = n1.dot(self.point.to_vector())
        h2 = n2.dot(other.point.to_vector())
        dtype = self.precision.dtype
        x = y = z = dtype(0)

        axis = leading_axis(direction)
        require(axis is not None, "planes are parallel to within epsilon")
        if axis is Axis.X:
            y = (n2.z * h1 - n1.z * h2) / direction.x
            z = (n2.y * h1 - n1.y * h2) / -direction.x
        elif axis is Axis.Y:
            x = (n2.z * h1 - n1.z * h2) / -direction.y
            z = (n2.x * h1 - n1.x * h2) / direction.y
        else:
            x = (n2.y * h1 - n1.y * h2) / direction.z
            y = (n2.x * h1 - n1.x * h2) / -direction.z

        point = family("point", self.precision)(x, y, z)
        return family("line", self.precision)(point, direction)

    def angle_between(self, target):
        """Angle in radians between the plane and a ``Line3`` or
        another ``Plane3``, in ``[0, pi/2]``; zero when parallel."""
        dtype = self.precision.dtype
        if isinstance(target, Line3):
            if self.is_parallel_to(target):
                return dtype(0)
            magnitudes = self.normal.magnitude() * target.direction.magnitude()
            require(magnitudes > epsilon, "angle undefined for near-zero vectors")
            ratio = abs(self.normal.dot(target.direction)) / magnitudes
            return dtype(np.arcsin(np.clip(ratio, 0, 1)))
        if isinstance(target, Plane3):
            if self.is_parallel_to(target):
                return dtype(0)
            magnitudes = self.normal.magnitude() * target.normal.magnitude()
            require(magnitudes > epsilon, "angle undefined for near-zero vectors")
            ratio = abs(self.normal.dot(target.normal)) / magnitudes
            return dtype(np.arccos(np.clip(ratio, 0, 1)))
        raise TypeError(f"cannot measure angle between a plane and {type(target).__name__}")

    def relative_distance_to(self, point: Point3):
        """Signed, normal-scaled distance ``normal . (point - self.point)``."""
        return self.normal.dot(point - self.point)

    def distance_to(self, target):
        """Distance from the plane to a ``Point3``, ``Line3`` or
        ``Plane3``.  Lines and planes that are not parallel to this
        plane cross it, so their distance is zero."""
        dtype = self.precision.dtype
        if isinstance(target, Point3):
            normal_mag = self.normal.magnitude()
            require(normal_mag > epsilon, "plane normal has near-zero magnitude")
            return dtype(abs(self.relative_distance_to(target)) / normal_mag)
        if isinstance(target, (Line3, Plane3)):
            if self.is_parallel_to(target):
                return self.distance_to(target.point)
            return dtype(0)
        raise TypeError(f"cannot measure distance from a plane to {type(target).__name__}")

    def is_point_in_plane(self, point: Point3) -> bool:
        return is_zero(self.relative_distance_to(point))

    def is_line_in_plane(self, line: Line3) -> bool:
        return (self.is_point_in_plane(line.point)
                and self.is_point_in_plane(line.point + line.direction))

    def is_parallel_to(self, target) -> bool:
        if isinstance(target, Line3):
            return self.normal.is_orthogonal_to(target.direction)
        if isinstance(target, Plane3):
            return self.normal.is_parallel_to(target.normal)
        raise TypeError(f"cannot compare a plane with {type(target).__name__}")

    def is_orthogonal_to(self, target) -> bool:
        if isinstance(target, Line3):
            return self.normal.is_parallel_to(target.direction)
        if isinstance(target, Plane3):
            return self.normal.is_orthogonal_to(target.normal)
        raise TypeError(f"cannot compare a plane with {type(target).__name__}")

    def __eq__(self, other):
        if not isinstance(other, Plane3):
            return NotImplemented
        return (self.is_point_in_plane(other.point)
                and self.normal.is_parallel_to(other.normal))

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(point={self.point!r}, normal={self.normal!r})"


@register("plane")
class Plane3f(Plane3):
    """Single precision ``Plane3``."""

    __slots__ = ()
    precision = Precision.SINGLE


Plane3d = Plane3


@register("plane")
class Plane3ld(Plane3):
    """Extended precision ``Plane3``."""

    __slots__ = ()
    precision = Precision.EXTENDED


__all__ = ["Plane3", "Plane3f", "Plane3d", "Plane3ld"]
