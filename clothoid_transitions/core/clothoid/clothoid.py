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
Clothoid Segment
================

A clothoid (Euler spiral) segment placed in world coordinates: the spiral
frame is rotated by origin_direction and moved to origin, and the segment
covers arc lengths start_length..end_length of that spiral. The lengths
need not be ordered; length is end_length - start_length and a negative
value means the segment runs towards the inflection point.
"""

import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..constants import INTERSECTION_MAX_ITERATIONS, INTERSECTION_TOLERANCE
from ..exceptions import NumericalMethodError
from ..logging_config import get_logger
from ..primitives import Line, Point, UnitVector
from . import spiral

logger = get_logger(__name__)


@dataclass(frozen=True)
class Clothoid:
    """Placed clothoid segment.

    Attributes:
        curvature_rate: Equals 1/sqrt(2*R*L) at each point of the spiral.
            Negative means the radius is negative (clockwise) in the
            positive length direction. NaN only for a zero-length segment.
        origin: World position of the inflection point
        origin_direction: World tangent direction at the inflection point
        start_length: Signed arc length where the segment starts
        end_length: Signed arc length where the segment ends
    """
    curvature_rate: float
    origin: Point
    origin_direction: UnitVector
    start_length: float
    end_length: float

    def get_point(self, length: float) -> Point:
        """World position at arc length."""
        return spiral.local_point(self.curvature_rate, length).rotate(self.origin_direction) + self.origin.to_vector()

    def get_tangent(self, length: float) -> UnitVector:
        """World travel direction at arc length."""
        return spiral.local_tangent(self.curvature_rate, length).rotate(self.origin_direction)

    def get_normal(self, length: float) -> UnitVector:
        """World left normal at arc length."""
        return spiral.local_normal(self.curvature_rate, length).rotate(self.origin_direction)

    def get_radius(self, length: float) -> float:
        """Osculating radius at arc length."""
        return spiral.radius_at(self.curvature_rate, length)

    def get_length(self, radius: float) -> float:
        """Arc length at which this spiral reaches radius."""
        return spiral.length_at_radius(self.curvature_rate, radius)

    @property
    def length(self) -> float:
        """Signed segment length."""
        return self.end_length - self.start_length

    @property
    def start_point(self) -> Point:
        return self.get_point(self.start_length)

    @property
    def end_point(self) -> Point:
        return self.get_point(self.end_length)

    @property
    def start_tangent(self) -> UnitVector:
        return self.get_tangent(self.start_length)

    @property
    def end_tangent(self) -> UnitVector:
        return self.get_tangent(self.end_length)

    @property
    def start_radius(self) -> float:
        return self.get_radius(self.start_length)

    @property
    def end_radius(self) -> float:
        return self.get_radius(self.end_length)

    def intersect(self, line: Line) -> Optional[Point]:
        """Crossing point of the segment with a line.

        Brackets the sign change of the signed line distance over the
        segment's length range and narrows it by chord (false position)
        steps.

        Args:
            line: Line to intersect

        Returns:
            Intersection point, or None if the segment stays on one side

        Raises:
            NumericalMethodError: If a trial length brackets neither side
        """
        left_length = min(self.start_length, self.end_length)
        right_length = max(self.start_length, self.end_length)

        left_point = self.get_point(left_length)
        right_point = self.get_point(right_length)
        left_d = line.distance_to(left_point)
        right_d = line.distance_to(right_point)

        if left_d * right_d > 0:
            return None

        if left_d == 0:
            return left_point
        if right_d == 0:
            return right_point

        previous_length = math.nan
        middle_point = left_point

        for _ in range(INTERSECTION_MAX_ITERATIONS):
            middle_length = left_length + (right_length - left_length) * abs(left_d) / (abs(left_d) + abs(right_d))
            middle_point = self.get_point(middle_length)
            middle_d = line.distance_to(middle_point)

            if abs(middle_d) <= INTERSECTION_TOLERANCE or abs(middle_length - previous_length) < INTERSECTION_TOLERANCE:
                return middle_point

            if middle_d * right_d < 0:
                left_length, left_d = middle_length, middle_d
            elif middle_d * left_d < 0:
                right_length, right_d = middle_length, middle_d
            else:
                raise NumericalMethodError(
                    f"Intersection bracket lost at length {middle_length!r}"
                )

            previous_length = middle_length

        logger.warning("Clothoid/line intersection stopped after %d iterations", INTERSECTION_MAX_ITERATIONS)
        return middle_point

    def sample_points(self, step: float, include_end: bool = True) -> np.ndarray:
        """World positions along the segment at a fixed length step.

        Sampling starts at the smaller of the two lengths and always
        yields at least that point.

        Args:
            step: Arc length between samples, must be positive
            include_end: Append the far end of the segment

        Returns:
            (n, 2) array of x, y coordinates
        """
        if step <= 0:
            raise ValueError(f"Sampling step must be positive, got {step}")

        low = min(self.start_length, self.end_length)
        high = max(self.start_length, self.end_length)

        lengths = np.arange(low, high, step)
        if lengths.size == 0:
            lengths = np.array([low])
        if include_end:
            lengths = np.append(lengths, high)

        local = spiral.local_points(self.curvature_rate, lengths)
        d = self.origin_direction

        world = np.empty_like(local)
        world[:, 0] = local[:, 0] * d.x - local[:, 1] * d.y + self.origin.x
        world[:, 1] = local[:, 0] * d.y + local[:, 1] * d.x + self.origin.y
        return world

    def __repr__(self) -> str:
        return (
            f"Clothoid(rate={self.curvature_rate:.6g}, origin={self.origin!r}, "
            f"lengths={self.start_length:.3f}..{self.end_length:.3f})"
        )


__all__ = ["Clothoid"]
