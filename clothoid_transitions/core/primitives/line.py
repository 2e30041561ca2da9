# ==============================================================================
# Clothoid Transitions - Euler Spiral Transition Curves
# Copyright (c) 2025 Michael Yoder / Desert Springs Civil Engineering PLLC
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
#
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
# You should have received a copy of the GNU General Public License along with this program. If not, see <https://www.gnu.org/licenses/>.
#
# Primary Author: Michael Yoder
# Company: Desert Springs Civil Engineering PLLC
# ==============================================================================

"""
Straight Line Primitive
=======================

Lines are kept in implicit normal form A·x + B·y = P where (A, B) is the
unit normal pointing to the left of the line direction. Signed distances
are positive on the left side.
"""

from dataclasses import dataclass
from typing import Optional

from ..constants import PARALLEL_EPSILON
from ..exceptions import GeometryError
from .vector import NOT_A_POINT, Point, UnitVector, Vector


@dataclass(frozen=True)
class Line:
    """Directed straight line in normal form.

    Attributes:
        a: X component of the unit normal
        b: Y component of the unit normal
        p: Signed distance of the line from the origin

    Example:
        >>> line = Line.through_points(Point(0, 0), Point(10, 0))
        >>> line.distance_to(Point(5, 2))
        2.0
    """
    a: float
    b: float
    p: float

    @classmethod
    def through_points(cls, start: Point, end: Point) -> "Line":
        """Line from start towards end.

        Raises:
            GeometryError: If the points coincide
        """
        v = end - start
        if v.length == 0.0:
            raise GeometryError("The points are too close, or coincide.")

        normal = v.normal()
        return cls(normal.x, normal.y, normal.x * start.x + normal.y * start.y)

    @classmethod
    def from_coordinates(cls, x1: float, y1: float, x2: float, y2: float) -> "Line":
        """Line through (x1, y1) towards (x2, y2)."""
        return cls.through_points(Point(x1, y1), Point(x2, y2))

    @classmethod
    def from_point_direction(cls, point: Point, direction: UnitVector) -> "Line":
        """Line through point running along direction."""
        a = -direction.y
        b = direction.x
        return cls(a, b, a * point.x + b * point.y)

    @property
    def direction(self) -> UnitVector:
        """Unit direction of the line."""
        return UnitVector(self.b, -self.a)

    @property
    def normal(self) -> UnitVector:
        """Unit normal pointing to the positive side."""
        return UnitVector(self.a, self.b)

    @property
    def reversed(self) -> "Line":
        """Same line running the opposite way."""
        return Line(-self.a, -self.b, -self.p)

    def distance_to(self, point: Point) -> float:
        """Signed distance, positive to the left of the direction."""
        return self.a * point.x + self.b * point.y - self.p

    def abs_distance_to(self, point: Point) -> float:
        """Unsigned distance to point."""
        return abs(self.distance_to(point))

    def translate(self, vector: Vector) -> "Line":
        """Line moved by a vector."""
        return Line(self.a, self.b, self.p + self.a * vector.x + self.b * vector.y)

    def shift(self, offset: float) -> "Line":
        """Line moved along its normal by offset."""
        return Line(self.a, self.b, self.p + offset)

    def intersect(self, other: "Line") -> Optional[Point]:
        """Intersection point with another line.

        Both lines are moved next to the origin before solving so that
        coordinates far from the origin do not lose precision.

        Args:
            other: Line to intersect with

        Returns:
            Intersection point, or None if the lines are parallel
        """
        shift = Vector(self.a * self.p, self.b * self.p) + Vector(1.0, 1.0)
        l1 = self.translate(-shift)
        l2 = other.translate(-shift)

        divider = l1.a * l2.b - l1.b * l2.a

        if abs(divider) <= PARALLEL_EPSILON:
            return None

        return Point(
            -(l1.b * l2.p - l1.p * l2.b) / divider + shift.x,
            (l1.a * l2.p - l2.a * l1.p) / divider + shift.y
        )

    def projection(self, point: Point) -> Point:
        """Foot of the perpendicular from point onto the line."""
        perpendicular = Line.from_point_direction(point, self.normal)
        foot = self.intersect(perpendicular)
        return NOT_A_POINT if foot is None else foot

    def __repr__(self) -> str:
        return f"Line({self.a:.6f}x + {self.b:.6f}y = {self.p:.3f})"


__all__ = ["Line"]
