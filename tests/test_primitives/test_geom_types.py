import math

import pytest

from curveapprox.geom_types import Angle, Point2D, Vector2D, WorldSpace


class TestAngle:
    def test_degrees_round_trip(self):
        angle = Angle.from_degrees(180)
        assert angle.radians == pytest.approx(math.pi)
        assert angle.degrees == pytest.approx(180.0)

    def test_named_constants(self):
        assert Angle.zero() == Angle(0.0)
        assert Angle.frac_pi_2().radians == math.pi / 2
        assert Angle.pi().radians == math.pi
        assert Angle.two_pi().radians == 2 * math.pi

    def test_arithmetic(self):
        assert -Angle(1.0) == Angle(-1.0)
        assert Angle(1.0) / 2 == Angle(0.5)
        assert Angle(1.0) * 2 == Angle(2.0)
        assert 2 * Angle(1.0) == Angle(2.0)
        assert Angle(1.0) + Angle(0.5) == Angle(1.5)
        assert Angle(1.0) - Angle(0.5) == Angle(0.5)

    def test_magnitude_is_unsigned(self):
        assert Angle(-2.5).magnitude == 2.5
        assert Angle(2.5).magnitude == 2.5

    def test_division_by_zero(self):
        with pytest.raises(ZeroDivisionError):
            Angle(1.0) / 0


class TestPoint2D:
    def test_equality_is_exact(self):
        assert Point2D(3.0, 4.0) == Point2D(3.0, 4.0)
        assert Point2D(3.0, 4.0) != Point2D(3.0, 4.0 + 1e-12)

    def test_points_are_immutable_and_hashable(self):
        point = Point2D(1.0, 2.0)
        with pytest.raises(AttributeError):
            point.x = 5.0
        assert len({Point2D(1.0, 2.0), Point2D(1.0, 2.0)}) == 1

    def test_difference_and_offset(self):
        a = Point2D(1.0, 1.0)
        b = Point2D(4.0, 5.0)
        v = b - a
        assert v == Vector2D(3.0, 4.0)
        assert v.length() == 5.0
        assert a + v == b
        assert b - v == a

    def test_distance(self):
        assert Point2D(3.0, 4.0).distance_to(Point2D.zero()) == 5.0

    def test_space_parameter_is_transparent_at_runtime(self):
        point = Point2D[WorldSpace](1.0, 2.0)
        assert point == Point2D(1.0, 2.0)
        assert point.to_tuple() == (1.0, 2.0)


class TestVector2D:
    def test_from_angle_and_length(self):
        v = Vector2D.from_angle_and_length(Angle.frac_pi_2(), 2.0)
        assert v.x == pytest.approx(0.0, abs=1e-12)
        assert v.y == pytest.approx(2.0)

    def test_arithmetic(self):
        v = Vector2D(1.0, 2.0)
        assert v + v == Vector2D(2.0, 4.0)
        assert v - v == Vector2D(0.0, 0.0)
        assert -v == Vector2D(-1.0, -2.0)
        assert v * 3 == Vector2D(3.0, 6.0)
        assert 3 * v == Vector2D(3.0, 6.0)
        assert v / 2 == Vector2D(0.5, 1.0)

    def test_cross_sign(self):
        assert Vector2D(1.0, 0.0).cross(Vector2D(0.0, 1.0)) == 1.0
        assert Vector2D(0.0, 1.0).cross(Vector2D(1.0, 0.0)) == -1.0


def test_point_difference_depends_on_operand():
    point = Point2D(4.0, 5.0)
    assert isinstance(point - Point2D(1.0, 1.0), Vector2D)
    assert isinstance(point - Vector2D(1.0, 1.0), Point2D)
