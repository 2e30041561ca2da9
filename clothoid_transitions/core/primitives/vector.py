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
2D Vector Primitives
====================

Immutable vector, unit direction and point types used by the clothoid
engine. Vectors are free; points are affine positions. A point minus a
point is a vector, a point plus a vector is a point.
"""

import math
from dataclasses import dataclass
from typing import Union

from ..constants import UNIT_VECTOR_TOLERANCE, UNIT_VECTOR_VALIDITY_TOLERANCE
from ..exceptions import GeometryError


def sign(value: float) -> int:
    """Sign of value as -1, 0 or 1."""
    return (value > 0) - (value < 0)


@dataclass(frozen=True)
class Vector:
    """Free 2D vector.

    Attributes:
        x: X component (Easting)
        y: Y component (Northing)

    Example:
        >>> v = Vector(3.0, 4.0)
        >>> v.length
        5.0
    """
    x: float
    y: float

    def __add__(self, other: "Vector") -> "Vector":
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector") -> "Vector":
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector":
        return Vector(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> "Vector":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Vector":
        return Vector(self.x / scalar, self.y / scalar)

    def __neg__(self) -> "Vector":
        return self.reversed

    @classmethod
    def zero(cls) -> "Vector":
        """Zero vector."""
        return cls(0.0, 0.0)

    @property
    def reversed(self) -> "Vector":
        """Vector pointing the opposite way."""
        return Vector(-self.x, -self.y)

    @property
    def length(self) -> float:
        """Vector magnitude (length)."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    @property
    def norm(self) -> float:
        """Magnitude computed without intermediate overflow or underflow."""
        x = abs(self.x)
        y = abs(self.y)

        if x == 0.0:
            return y
        if y == 0.0:
            return x
        if x > y:
            return x * math.sqrt(1.0 + (y / x) * (y / x))
        return y * math.sqrt(1.0 + (x / y) * (x / y))

    @property
    def sqr_norm(self) -> float:
        """Squared magnitude, scaled the same way as norm."""
        x = abs(self.x)
        y = abs(self.y)

        if x == 0.0:
            return y * y
        if y == 0.0:
            return x * x
        if x > y:
            return x * x * (1.0 + (y / x) * (y / x))
        return y * y * (1.0 + (x / y) * (x / y))

    def normalized(self) -> "UnitVector":
        """Return the unit vector in the same direction.

        Raises:
            GeometryError: If the vector has zero length
        """
        length = self.length
        if length == 0.0:
            raise GeometryError("Zero-length vector has no direction")
        return UnitVector(self.x / length, self.y / length)

    def normal(self) -> "UnitVector":
        """Unit normal rotated 90° counter-clockwise from this vector."""
        return Vector(-self.y, self.x).normalized()

    def dot(self, other: Union["Vector", "UnitVector"]) -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: Union["Vector", "UnitVector"]) -> float:
        """Signed area of the parallelogram spanned by self and other.

        Positive when other lies counter-clockwise from self.
        """
        return self.x * other.y - self.y * other.x

    def rotate(self, angle: "UnitVector") -> "Vector":
        """Rotate by the angle a unit direction represents."""
        return Vector(
            self.x * angle.x - self.y * angle.y,
            self.x * angle.y + self.y * angle.x
        )

    def to_tuple(self) -> tuple:
        """Convert to (x, y) tuple."""
        return (self.x, self.y)

    @staticmethod
    def are_sequentially_anticlockwise(v1: "Vector", v2: "Vector", v3: "Vector") -> bool:
        """Check whether v1, v2, v3 follow each other counter-clockwise.

        Each consecutive pair votes by the sign of its cross product; the
        sequence is anticlockwise when most of the three turns are.
        """
        v1_v2 = 1 if v1.cross(v2) > 0 else -1
        v2_v3 = 1 if v2.cross(v3) > 0 else -1
        v3_v1 = 1 if v3.cross(v1) > 0 else -1

        return v1_v2 + v2_v3 + v3_v1 > 0


@dataclass(frozen=True)
class UnitVector:
    """Unit-length direction; also used to represent a rotation angle.

    Attributes:
        x: Cosine of the angle
        y: Sine of the angle

    Raises:
        ValueError: If x² + y² differs from 1 by more than 1e-5
    """
    x: float
    y: float

    def __post_init__(self):
        if not abs(self.x * self.x + self.y * self.y - 1.0) <= UNIT_VECTOR_TOLERANCE:
            raise ValueError(f"Not a unit vector: ({self.x}, {self.y})")

    def __neg__(self) -> "UnitVector":
        return UnitVector(-self.x, -self.y)

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vector:
        return self.__mul__(scalar)

    def __add__(self, other: "UnitVector") -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "UnitVector") -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    @property
    def is_valid(self) -> bool:
        """True if the components are unit length to 1e-15."""
        return abs(1.0 - (self.x * self.x + self.y * self.y)) < UNIT_VECTOR_VALIDITY_TOLERANCE

    def to_vector(self) -> Vector:
        """Same direction as a free Vector."""
        return Vector(self.x, self.y)

    def to_tuple(self) -> tuple:
        """Convert to (x, y) tuple."""
        return (self.x, self.y)

    def normal(self) -> "UnitVector":
        """Direction rotated 90° counter-clockwise."""
        return Vector(-self.y, self.x).normalized()

    def dot(self, other: Union[Vector, "UnitVector"]) -> float:
        """Dot product (cosine of the angle between two unit directions)."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: Union[Vector, "UnitVector"]) -> float:
        """Signed cross product (sine of the angle between two unit directions)."""
        return self.x * other.y - self.y * other.x

    def rotate(self, angle: Union[float, "UnitVector"]) -> "UnitVector":
        """Rotate by an angle in radians or by a unit direction."""
        if not isinstance(angle, UnitVector):
            angle = UnitVector.from_angle(angle)
        return UnitVector(
            self.x * angle.x - self.y * angle.y,
            self.x * angle.y + self.y * angle.x
        )

    def to_angle(self) -> float:
        """Angle in radians in range -pi..pi."""
        return math.atan2(self.y, self.x)

    def to_2pi_angle(self) -> float:
        """Angle in radians in range 0..2*pi."""
        a = math.atan2(self.y, self.x)
        return a if a >= 0 else a + 2 * math.pi

    @classmethod
    def from_angle(cls, radians: float) -> "UnitVector":
        """Unit direction at the given angle from the positive X axis."""
        return cls(math.cos(radians), math.sin(radians))

    @classmethod
    def from_degrees(cls, degrees: float) -> "UnitVector":
        """Unit direction at the given angle in degrees."""
        return cls.from_angle(math.radians(degrees))

    @classmethod
    def angle_between(
        cls,
        start: Union[Vector, "UnitVector"],
        end: Union[Vector, "UnitVector"]
    ) -> "UnitVector":
        """Unit direction representing the signed angle from start to end.

        Args:
            start: Reference vector
            end: Target vector

        Returns:
            UnitVector whose rotation maps the direction of start onto end
        """
        start_length = math.hypot(start.x, start.y)
        end_length = math.hypot(end.x, end.y)
        cos = (start.x * end.x + start.y * end.y) / (start_length * end_length)

        # Can overshoot 1 by ~1e-15
        cos = max(-1.0, min(1.0, cos))
        if cos == 1.0:
            return cls(1.0, 0.0)

        cross = start.x * end.y - start.y * end.x
        sin = math.sqrt(1.0 - cos * cos) * sign(cross)
        return cls(cos, sin)

    def __repr__(self) -> str:
        return f"UnitVector({self.x:.6f}, {self.y:.6f})"


@dataclass(frozen=True)
class Point:
    """Affine 2D point.

    Attributes:
        x: X coordinate (Easting)
        y: Y coordinate (Northing)
    """
    x: float
    y: float

    def __add__(self, vector: Union[Vector, UnitVector]) -> "Point":
        return Point(self.x + vector.x, self.y + vector.y)

    def __sub__(self, other):
        """Point - Point gives the Vector between them; Point - Vector moves back."""
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        return Point(self.x - other.x, self.y - other.y)

    @property
    def is_nap(self) -> bool:
        """True for the not-a-point sentinel (any NaN coordinate)."""
        return math.isnan(self.x) or math.isnan(self.y)

    def to_vector(self) -> Vector:
        """Position vector from the origin."""
        return Vector(self.x, self.y)

    def to_tuple(self) -> tuple:
        """Convert to (x, y) tuple."""
        return (self.x, self.y)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def move(self, shift: Vector) -> "Point":
        """Translate by a vector."""
        return Point(self.x + shift.x, self.y + shift.y)

    def rotate(self, angle: UnitVector) -> "Point":
        """Rotate around (0, 0)."""
        return Point(
            self.x * angle.x - self.y * angle.y,
            self.x * angle.y + self.y * angle.x
        )

    def rotate_about(self, angle: Union[float, UnitVector], center: "Point") -> "Point":
        """Rotate around center by an angle in radians or a unit direction."""
        if not isinstance(angle, UnitVector):
            angle = UnitVector.from_angle(angle)
        v = center.to_vector()
        return self.move(-v).rotate(angle).move(v)

    def __repr__(self) -> str:
        return f"Point({self.x:.3f}, {self.y:.3f})"


ZERO = Point(0.0, 0.0)

# Sentinel for an absent point
NOT_A_POINT = Point(math.nan, math.nan)


__all__ = ["Vector", "UnitVector", "Point", "ZERO", "NOT_A_POINT", "sign"]
