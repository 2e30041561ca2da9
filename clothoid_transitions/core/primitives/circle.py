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
Circle Primitive
================

Circles carry a signed radius: positive radius is traversed
counter-clockwise, negative radius clockwise. Tangent directions and
signed distances follow the traversal direction.
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from ..exceptions import GeometryError
from .line import Line
from .vector import Point, UnitVector, Vector


@dataclass(frozen=True)
class Circle:
    """Oriented circle.

    Attributes:
        center: Circle center
        radius: Signed radius (positive = counter-clockwise)

    Raises:
        GeometryError: If radius is zero or not finite
    """
    center: Point
    radius: float

    def __post_init__(self):
        if self.radius == 0 or not math.isfinite(self.radius):
            raise GeometryError(f"Circle radius must be finite and non-zero, got {self.radius}")

    @classmethod
    def from_coordinates(cls, center_x: float, center_y: float, radius: float) -> "Circle":
        """Circle centered at (center_x, center_y)."""
        return cls(Point(center_x, center_y), radius)

    @property
    def length(self) -> float:
        """Circumference."""
        return 2 * math.pi * abs(self.radius)

    def get_tangent(self, point: Point) -> UnitVector:
        """Travel direction at a point on the circle."""
        radial = point - self.center
        return radial.normal() if self.radius > 0 else -radial.normal()

    def get_tangent_line(self, radius_direction: UnitVector) -> Line:
        """Tangent line at the circle point in radius_direction from the center."""
        direction = radius_direction.normal() if self.radius > 0 else -radius_direction.normal()
        return Line.from_point_direction(
            self.center + radius_direction * abs(self.radius),
            direction
        )

    def distance_to(self, point: Point) -> float:
        """Signed distance from the circle, positive on the inner side for CCW circles."""
        return (abs(self.radius) - self.center.distance_to(point)) * math.copysign(1.0, self.radius)

    def intersect(self, line: Line) -> Optional[Tuple[Point, Point]]:
        """Intersection points with a line.

        Solved with the line moved into a frame centered on the circle.

        Args:
            line: Line to intersect

        Returns:
            Pair of points (equal when the line is tangent), or None if
            the line misses the circle
        """
        r = abs(self.radius)
        if line.abs_distance_to(self.center) > r:
            return None

        shift = self.center.to_vector()
        local = line.translate(-shift)

        foot = Vector(local.a * local.p, local.b * local.p)
        half_chord = math.sqrt(max(0.0, r * r - local.p * local.p))
        along = local.direction * half_chord

        first = self.center + (foot + along)
        second = self.center + (foot - along)
        return first, second

    def __repr__(self) -> str:
        return f"Circle({self.center!r}, r={self.radius:.3f})"


__all__ = ["Circle"]
