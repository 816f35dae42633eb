import logging
import math

import numpy as np
import pytest

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
from analytic3d import Line3f, Plane3ld, Point3, Vector3, Vector3f
## unit tests for analytic3d precision.py and errors.py


class TestScalars:
    """tolerance and unit helpers"""

    def test_epsilon(self):
        assert epsilon == 1e-5
        assert is_zero(0.0)
        assert is_zero(9e-6)
        assert is_zero(-9e-6)
        assert not is_zero(2e-5)
        assert close(1.0, 1.0 + 5e-6)
        assert not close(1.0, 1.001)

    def test_angles(self):
        assert math.isclose(rad_to_deg(math.pi), 180.0)
        assert math.isclose(deg_to_rad(90.0), math.pi / 2)
        assert math.isclose(rad_to_deg(deg_to_rad(37.5)), 37.5)

    def test_angles_keep_scalar_type(self):
        assert isinstance(rad_to_deg(np.float32(1.0)), np.float32)


class TestPrecision:

    def test_members(self):
        assert Precision.SINGLE.dtype is np.float32
        assert Precision.DOUBLE.dtype is np.float64
        assert Precision.EXTENDED.dtype is np.longdouble
        assert [p.suffix for p in Precision] == ["f", "d", "ld"]

    def test_epsilon_per_precision(self):
        eps = Precision.SINGLE.epsilon
        assert isinstance(eps, np.float32)
        assert math.isclose(float(eps), 1e-5, rel_tol=1e-6)

    def test_from_suffix(self):
        assert Precision.from_suffix("ld") is Precision.EXTENDED
        assert Precision.from_suffix("d") is Precision.DOUBLE
        with pytest.raises(ValueError):
            Precision.from_suffix("q")

    def test_family(self):
        assert family("vector", Precision.SINGLE) is Vector3f
        assert family("vector", Precision.DOUBLE) is Vector3
        assert family("point", Precision.DOUBLE) is Point3
        assert family("line", Precision.SINGLE) is Line3f
        assert family("plane", Precision.EXTENDED) is Plane3ld
        with pytest.raises(LookupError):
            family("triangle", Precision.DOUBLE)


class TestLeadingAxis:

    def test_priority(self):
        assert leading_axis(Vector3(1, 1, 1)) is Axis.X
        assert leading_axis(Vector3(0, -2, 1)) is Axis.Y
        assert leading_axis(Vector3(0, 0, 3)) is Axis.Z

    def test_near_zero_components_are_skipped(self):
        assert leading_axis(Vector3(1e-7, 1e-6, 2)) is Axis.Z

    def test_zero_vector(self):
        assert leading_axis(Vector3(0, 0, 0)) is None
        assert leading_axis(Vector3(1e-6, -1e-6, 0)) is None


class TestRequire:

    def test_passes(self):
        require(True, "never raised")

    def test_raises(self):
        with pytest.raises(InvalidGeometryError, match="bad direction 3"):
            require(False, "bad direction %d", 3)

    def test_error_hierarchy(self):
        assert issubclass(InvalidGeometryError, GeometryError)
        assert issubclass(GeometryError, ValueError)

    def test_failure_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="analytic3d.errors"):
            with pytest.raises(InvalidGeometryError):
                require(1 > 2, "one is not greater than two")
        assert "one is not greater than two" in caplog.text
