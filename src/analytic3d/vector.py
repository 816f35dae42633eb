## free vector algebra for analytic3d

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

"""free vector algebra for **analytic3d**

A ``Vector3`` is a direction and magnitude that is not tied to a
location: ::

   a = Vector3(1, 0, 0)
   b = Vector3(0, 1, 0)
   a.cross(b)            # Vector3(0.0, 0.0, 1.0)
   a.angle_between(b)    # pi/2

Vectors support ``+``, ``-``, unary ``+``/``-``, scalar ``*`` and
``/``, and the in-place forms ``+=``, ``-=``, ``*=`` and ``/=``.  The
in-place operators mutate the receiver, so the caller must own it
exclusively for the duration of the call; every other operation
returns a new vector.

Equality is tolerance based: two vectors are equal when every
component differs by less than ``epsilon``.

"""

from __future__ import annotations

from numbers import Real

import numpy as np

from analytic3d.errors import require
from analytic3d.precision import Precision, epsilon, family, is_zero, register
from analytic3d.triple import Triple


@register("vector")
class Vector3(Triple):
    """Double precision 3D vector."""

    __slots__ = ()
    precision = Precision.DOUBLE

    def magnitude(self):
        return np.sqrt(self.magnitude_squared())

    def magnitude_squared(self):
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalized(self) -> "Vector3":
        """Return a unit-length copy of this vector."""
        mag = self.magnitude()
        require(mag > epsilon, "cannot normalize near-zero vector %r", self)
        return type(self)(self.x / mag, self.y / mag, self.z / mag)

    def dot(self, other: "Vector3"):
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return type(self)(self.y * other.z - self.z * other.y,
                          self.z * other.x - self.x * other.z,
                          self.x * other.y - self.y * other.x)

    def angle_between(self, other: "Vector3"):
        """Angle between two vectors in radians, in ``[0, pi]``."""
        magnitudes = self.magnitude() * other.magnitude()
        require(magnitudes > epsilon,
                "angle undefined for near-zero vectors %r and %r", self, other)
        return self.precision.dtype(np.arccos(np.clip(self.dot(other) / magnitudes, -1, 1)))

    def project_onto(self, other: "Vector3") -> "Vector3":
        """Vector projection of this vector onto ``other``."""
        other_mag2 = other.magnitude_squared()
        require(other_mag2 > epsilon, "cannot project onto near-zero vector %r", other)
        return type(self).of(other) * (self.dot(other) / other_mag2)

    def to_point(self):
        """The point this vector reaches from the origin."""
        return family("point", self.precision)(self.x, self.y, self.z)

    def is_zero_vector(self) -> bool:
        return self.magnitude_squared() < epsilon

    def is_parallel_to(self, other: "Vector3") -> bool:
        return self.cross(other).is_zero_vector()

    def is_orthogonal_to(self, other: "Vector3") -> bool:
        return is_zero(self.dot(other))

    def __eq__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return self._same_components(other)

    __hash__ = None

    def __pos__(self) -> "Vector3":
        return type(self)(self.x, self.y, self.z)

    def __neg__(self) -> "Vector3":
        return type(self)(-self.x, -self.y, -self.z)

    def __add__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return type(self)(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return type(self)(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return type(self)(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return type(self)(self.x / scalar, self.y / scalar, self.z / scalar)

    ## in-place operators; these mutate the receiver

    def __iadd__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        dtype = self.precision.dtype
        self.x = dtype(self.x + other.x)
        self.y = dtype(self.y + other.y)
        self.z = dtype(self.z + other.z)
        return self

    def __isub__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        dtype = self.precision.dtype
        self.x = dtype(self.x - other.x)
        self.y = dtype(self.y - other.y)
        self.z = dtype(self.z - other.z)
        return self

    def __imul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        dtype = self.precision.dtype
        self.x = dtype(self.x * scalar)
        self.y = dtype(self.y * scalar)
        self.z = dtype(self.z * scalar)
        return self

    def __itruediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        dtype = self.precision.dtype
        self.x = dtype(self.x / scalar)
        self.y = dtype(self.y / scalar)
        self.z = dtype(self.z / scalar)
        return self


@register("vector")
class Vector3f(Vector3):
    """Single precision ``Vector3``."""

    __slots__ = ()
    precision = Precision.SINGLE


Vector3d = Vector3


@register("vector")
class Vector3ld(Vector3):
    """Extended precision ``Vector3``."""

    __slots__ = ()
    precision = Precision.EXTENDED


__all__ = ["Vector3", "Vector3f", "Vector3d", "Vector3ld"]
