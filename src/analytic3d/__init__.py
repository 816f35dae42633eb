# -*- coding: utf-8 -*-
"""3D analytic geometry primitives: vectors, points, lines and planes."""

from importlib.metadata import PackageNotFoundError, version

from analytic3d.errors import GeometryError, InvalidGeometryError, require
from analytic3d.precision import (
    Axis,
    Precision,
    close,
    deg_to_rad,
    epsilon,
    family,
    is_zero,
    leading_axis,
    rad_to_deg,
)
from analytic3d.vector import Vector3, Vector3d, Vector3f, Vector3ld
from analytic3d.point import Point3, Point3d, Point3f, Point3ld
from analytic3d.line import Line3, Line3d, Line3f, Line3ld
from analytic3d.plane import Plane3, Plane3d, Plane3f, Plane3ld

try:
    __version__ = version("analytic3d")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

__all__ = [
    "Axis",
    "GeometryError",
    "InvalidGeometryError",
    "Line3",
    "Line3d",
    "Line3f",
    "Line3ld",
    "Plane3",
    "Plane3d",
    "Plane3f",
    "Plane3ld",
    "Point3",
    "Point3d",
    "Point3f",
    "Point3ld",
    "Precision",
    "Vector3",
    "Vector3d",
    "Vector3f",
    "Vector3ld",
    "close",
    "deg_to_rad",
    "epsilon",
    "family",
    "is_zero",
    "leading_axis",
    "rad_to_deg",
    "require",
    "__version__",
]
