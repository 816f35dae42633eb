import pytest

from analytic3d import Point3, Point3d, Point3f, Point3ld, Vector3, Vector3f, Vector3ld
## unit tests for analytic3d point.py


class TestPoint:

    def test_create(self):
        p = Point3(7, 4, 3)
        assert (p.x, p.y, p.z) == (7.0, 4.0, 3.0)
        assert Point3() == Point3(0, 0, 0)
        assert Point3.of([1, 2, 3]) == Point3(1, 2, 3)

    def test_tolerant_equality(self):
        assert Point3(1, 2, 3) == Point3(1, 2, 3 + 9e-6)
        assert Point3(1, 2, 3) != Point3(1, 2, 3.0001)

    def test_round_trip_through_vector(self):
        for p in (Point3(0, 0, 0), Point3(-1.5, 2.25, 1e4), Point3f(3, 2, 1)):
            assert p.to_vector().to_point() == p
        assert type(Point3f(3, 2, 1).to_vector()) is Vector3f

    def test_translate(self):
        p = Point3(1, 2, 3) + Vector3(0, 0, 1)
        assert isinstance(p, Point3)
        assert p == Point3(1, 2, 4)

    def test_displacement(self):
        v = Point3(4, 6, 3) - Point3(1, 2, 3)
        assert isinstance(v, Vector3)
        assert v == Vector3(3, 4, 0)
        assert (Point3(1, 2, 3) - Point3(1, 2, 3)).is_zero_vector()

    def test_displacement_then_translate(self):
        a = Point3(-2, 5, 1)
        b = Point3(3, 3, 3)
        assert a + (b - a) == b

    def test_bad_operands(self):
        with pytest.raises(TypeError):
            Point3(1, 2, 3) + Point3(1, 1, 1)
        with pytest.raises(TypeError):
            Point3(1, 2, 3) - Vector3(1, 1, 1)
        with pytest.raises(TypeError):
            Point3(1, 2, 3) * 2


class TestPointPrecision:

    def test_aliases(self):
        assert Point3d is Point3
        assert issubclass(Point3f, Point3)

    def test_family(self):
        assert type(Point3f(1, 2, 3) + Vector3(1, 1, 1)) is Point3f
        assert type(Point3f(1, 2, 3) - Point3f(0, 0, 0)) is Vector3f
        assert type(Point3ld(1, 2, 3) - Point3ld(0, 0, 0)) is Vector3ld
