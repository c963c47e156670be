"""Tests for the immutable Point value type."""

import dataclasses
import math

import numpy as np
import numpy.testing as npt
import pytest

from raymarch2d import Point


class TestArithmetic:
    def test_add_sub(self):
        assert Point(1, 2) + Point(3, 4) == Point(4, 6)
        assert Point(1, 2) - Point(3, 4) == Point(-2, -2)

    def test_scale(self):
        assert Point(1, -2).scale(3) == Point(3, -6)
        assert 2 * Point(1, 1) == Point(2, 2)

    def test_is_zero(self):
        assert Point().is_zero()
        assert not Point(0, 1e-12).is_zero()

    def test_immutable(self):
        p = Point(1, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.x = 5

    def test_length(self):
        assert Point(3, 4).length() == 5.0


class TestNormalize:
    def test_unit_length(self):
        npt.assert_allclose(Point(3, 4).normalized().length(), 1.0)

    def test_zero_raises(self):
        with pytest.raises(ValueError):
            Point(0, 0).normalized()


class TestMeasurements:
    def test_distance(self):
        assert Point(0, 0).distance(Point(3, 4)) == 5.0

    def test_angle_to_radians(self):
        npt.assert_allclose(Point(0, 0).angle_to(Point(0, 1)), math.pi / 2)

    def test_angle_to_degrees(self):
        npt.assert_allclose(Point(1, 1).angle_to_deg(Point(0, 0)), -135.0)


class TestPointAtAngle:
    def test_zero_degrees(self):
        assert Point(300, 150).point_at_angle(0.0, 1000) == Point(1300, 150)

    def test_ninety_degrees(self):
        p = Point(0, 0).point_at_angle(90.0, 2.0)
        npt.assert_allclose([p.x, p.y], [0.0, 2.0], atol=1e-12)

    def test_round_trip_angle(self):
        origin = Point(5, -3)
        p = origin.point_at_angle(37.0, 10.0)
        npt.assert_allclose(origin.angle_to_deg(p), 37.0)
        npt.assert_allclose(origin.distance(p), 10.0)


class TestExtend:
    def test_steps_toward_target(self):
        assert Point(0, 0).extend(Point(10, 0), 3) == Point(3, 0)

    def test_negative_length_steps_back(self):
        assert Point(0, 0).extend(Point(10, 0), -2) == Point(-2, 0)

    def test_diagonal(self):
        p = Point(1, 1).extend(Point(4, 5), 5)
        npt.assert_allclose([p.x, p.y], [4.0, 5.0])

    def test_degenerate_direction_is_noop(self):
        p = Point(2, 2)
        assert p.extend(Point(2, 2), 7.0) == p


class TestArrayBridge:
    def test_as_array(self):
        npt.assert_array_equal(Point(1.5, -2).as_array(), np.array([1.5, -2.0]))

    def test_from_array(self):
        p = Point.from_array(np.array([4.0, 5.0]))
        assert p == Point(4.0, 5.0)
        assert isinstance(p.x, float)
