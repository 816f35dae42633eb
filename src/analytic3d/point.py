## affine points for analytic3d

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

"""affine points for **analytic3d**

A ``Point3`` is an absolute position.  The difference of two points
is a ``Vector3`` and a point plus a vector is a point: ::

   a = Point3(1, 2, 3)
   b = Point3(4, 6, 3)
   b - a                   # Vector3(3.0, 4.0, 0.0)
   a + Vector3(0, 0, 1)    # Point3(1.0, 2.0, 4.0)

"""

from __future__ import annotations

from analytic3d.precision import Precision, family, register
from analytic3d.triple import Triple
from analytic3d.vector import Vector3


@register("point")
class Point3(Triple):
    """Double precision 3D point."""

    __slots__ = ()
    precision = Precision.DOUBLE

    def to_vector(self) -> Vector3:
        """The position vector of this point, relative to the origin."""
        return family("vector", self.precision)(self.x, self.y, self.z)

    def __eq__(self, other):
        if not isinstance(other, Point3):
            return NotImplemented
        return self._same_components(other)

    __hash__ = None

    def __add__(self, vector):
        if not isinstance(vector, Vector3):
            return NotImplemented
        return type(self)(self.x + vector.x, self.y + vector.y, self.z + vector.z)

    def __sub__(self, other):
        if not isinstance(other, Point3):
            return NotImplemented
        return family("vector", self.precision)(self.x - other.x,
                                                self.y - other.y,
                                                self.z - other.z)


@register("point")
class Point3f(Point3):
    """Single precision ``Point3``."""

    __slots__ = ()
    precision = Precision.SINGLE


Point3d = Point3


@register("point")
class Point3ld(Point3):
    """Extended precision ``Point3``."""

    __slots__ = ()
    precision = Precision.EXTENDED


__all__ = ["Point3", "Point3f", "Point3d", "Point3ld"]
