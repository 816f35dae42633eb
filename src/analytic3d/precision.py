## scalar precision, tolerance and unit helpers for analytic3d

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

"""scalar precision, tolerance and unit helpers for **analytic3d**

constants
=========

``epsilon`` is the single tolerance used by every "near zero" and
equality test in the package.  Redefine it at your peril.

precisions
==========

Every geometric class in **analytic3d** is bound to one of three
scalar precisions, backed by numpy scalar types: ::

   Precision.SINGLE    # numpy.float32,    class suffix "f"
   Precision.DOUBLE    # numpy.float64,    class suffix "d"
   Precision.EXTENDED  # numpy.longdouble, class suffix "ld"

The classes of one precision form a *family* (``Vector3f``,
``Point3f``, ``Line3f``, ``Plane3f``).  Operations look up their
siblings through ``family()`` so that a single-precision line always
yields single-precision points.

"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Optional, Tuple

import numpy as np

## constants
epsilon = 1e-5
pi = np.pi


class Precision(Enum):
    """Scalar precisions available to the geometric classes."""

    SINGLE = ("f", np.float32)
    DOUBLE = ("d", np.float64)
    EXTENDED = ("ld", np.longdouble)

    @property
    def suffix(self) -> str:
        return self.value[0]

    @property
    def dtype(self) -> type:
        return self.value[1]

    @property
    def epsilon(self):
        """``epsilon`` expressed in this precision."""
        return self.dtype(epsilon)

    @classmethod
    def from_suffix(cls, suffix: str) -> "Precision":
        for member in cls:
            if member.suffix == suffix:
                return member
        raise ValueError(f"unknown precision suffix: {suffix!r}")


## operations on scalars
## ---------------------

def is_zero(value) -> bool:
    """is ``value`` zero to within epsilon"""
    return abs(value) < epsilon


def close(a, b) -> bool:
    """are two scalars the same within epsilon"""
    return is_zero(a - b)


def rad_to_deg(rad):
    """convert radians to degrees, keeping the scalar type of ``rad``"""
    return rad * (180 / pi)


def deg_to_rad(deg):
    """convert degrees to radians, keeping the scalar type of ``deg``"""
    return deg * (pi / 180)


## axis tags for 2x2 case analysis
## -------------------------------

class Axis(Enum):
    """Coordinate axis selected for solving a 2x2 system.

    The tagged axis is the one whose cross-product (or normal)
    component is eliminated; the remaining two coordinates form the
    system that gets solved.
    """

    X = 0
    Y = 1
    Z = 2


def leading_axis(vector) -> Optional[Axis]:
    """Return the first axis, in x, y, z priority, whose component of
    ``vector`` is not zero to within epsilon, or ``None`` if all three
    are."""
    for axis, component in zip(Axis, (vector.x, vector.y, vector.z)):
        if not is_zero(component):
            return axis
    return None


## precision families
## ------------------

_FAMILIES: Dict[Tuple[str, Precision], type] = {}


def register(kind: str) -> Callable[[type], type]:
    """Class decorator recording ``cls`` as the ``kind`` member of the
    family given by ``cls.precision``."""

    def decorator(cls: type) -> type:
        _FAMILIES[(kind, cls.precision)] = cls
        return cls

    return decorator


def family(kind: str, precision: Precision) -> type:
    """Return the class of ``kind`` ("vector", "point", "line" or
    "plane") registered for ``precision``."""
    try:
        return _FAMILIES[(kind, precision)]
    except KeyError:
        raise LookupError(f"no {kind} class registered for {precision.name}") from None


__all__ = [
    "Axis",
    "Precision",
    "close",
    "deg_to_rad",
    "epsilon",
    "family",
    "is_zero",
    "leading_axis",
    "pi",
    "rad_to_deg",
    "register",
]
