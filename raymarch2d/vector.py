"""Immutable 2D point with the handful of operations the marcher needs."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from .primitives import _F, polar_offset


@dataclass(frozen=True)
class Point:
    """A location in the plane; every operation returns a new point.

    Angles are measured with ``atan2(dy, dx)`` in canvas coordinates, so
    positive angles turn clockwise on a y-down display.
    """

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Point:
        return Point(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Point:
        return Point(self.x / scalar, self.y / scalar)

    def scale(self, scalar: float) -> Point:
        return self * scalar

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def is_zero(self) -> bool:
        return self.x == 0.0 and self.y == 0.0

    def normalized(self) -> Point:
        length = self.length()
        if length == 0.0:
            raise ValueError("Cannot normalize zero-length vector")
        return self / length

    def distance(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def angle_to(self, other: Point) -> float:
        """Angle in radians from this point to *other*."""
        return math.atan2(other.y - self.y, other.x - self.x)

    def angle_to_deg(self, other: Point) -> float:
        """Angle in degrees from this point to *other*."""
        return math.degrees(self.angle_to(other))

    def point_at_angle(self, angle_deg: float, length: float) -> Point:
        """Point at polar offset ``(length, angle_deg)`` from this one."""
        return Point.from_array(polar_offset(self.as_array(), angle_deg, length))

    def extend(self, toward: Point, length: float) -> Point:
        """Step *length* along the direction from this point to *toward*.

        A degenerate direction (``toward == self``) has no defined heading,
        so the step is a no-op and this point is returned.
        """
        delta = toward - self
        if delta.is_zero():
            return self
        return self + delta.normalized() * length

    def as_array(self) -> _F:
        return np.array([self.x, self.y], dtype=float)

    @classmethod
    def from_array(cls, a: _F) -> Point:
        return cls(float(a[0]), float(a[1]))
