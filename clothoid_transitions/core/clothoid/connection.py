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
Clothoid Connection Module
==========================

Builds clothoid transitions between alignment elements:

- connect_line_circle: tangent line to circular arc (either direction)
- connect_circles: circular arc to circular arc
- fit_connected_circle: circle tangent to a clothoid through a point
- calc_target_distance / calc_target_distance_between_circles: offsets a
  transition of given length produces, without solving

Connections report expected geometric impossibility through
ConnectionStatus rather than exceptions.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..constants import (
    CIRCLE_SEARCH_WINDOWS,
    DEFAULT_TOLERANCE,
    FIT_BOUND_OFFSET,
    FIT_LINE_TOLERANCE,
    FIT_TOLERANCE,
)
from ..equation import solve_bisection, solve_brent
from ..logging_config import get_logger
from ..primitives import Circle, Line, Point, UnitVector, sign
from . import spiral
from .clothoid import Clothoid

logger = get_logger(__name__)

SQRT_PI = math.sqrt(math.pi)


class ConnectionStatus(Enum):
    """Outcome of a connection attempt."""
    OK = "OK"
    INTERSECTING = "INTERSECTING"   # Elements overlap, no external transition
    TOO_LONG = "TOO_LONG"           # Transition would turn more than pi


@dataclass(frozen=True)
class ConnectionResult:
    """Tagged connection result; clothoid is set only for OK."""
    status: ConnectionStatus
    clothoid: Optional[Clothoid] = None

    @property
    def ok(self) -> bool:
        return self.status is ConnectionStatus.OK

    @classmethod
    def success(cls, clothoid: Clothoid) -> "ConnectionResult":
        return cls(ConnectionStatus.OK, clothoid)

    @classmethod
    def intersecting(cls) -> "ConnectionResult":
        return cls(ConnectionStatus.INTERSECTING)

    @classmethod
    def too_long(cls) -> "ConnectionResult":
        return cls(ConnectionStatus.TOO_LONG)


@dataclass(frozen=True)
class CircleFit:
    """Circle tangent to a clothoid and the arc length where it touches."""
    circle: Circle
    length: float


def _calc_origin(rate: float, end_length: float, end_circle: Circle, origin_direction: UnitVector) -> Point:
    """Back-solve the spiral origin from the circle it must reach at end_length."""
    radius_v = (-spiral.local_normal(rate, end_length)).rotate(origin_direction) * end_circle.radius
    start_to_end = spiral.local_point(rate, end_length).to_vector().rotate(origin_direction)

    return end_circle.center + radius_v - start_to_end


def _calc_length(radius: float, h: float, tolerance: float) -> Optional[float]:
    """Transition length from a line to a circle whose center lies h from it.

    Both arguments are positive. None when the required turn exceeds pi.
    """
    def func(length: float) -> float:
        rate = spiral.curvature_rate_for(length, radius)
        angle = spiral.tangent_angle(rate, length)
        return h - (spiral.local_point(rate, length).y + radius * math.cos(angle))

    return solve_brent(func, 0, 2 * math.pi * radius, tolerance)


def _calc_length_at_small_circle(big_r: float, small_r: float, d: float, tolerance: float) -> Optional[float]:
    """Spiral length at the small circle for circles with centers d apart.

    Radii are normalized so that small_r is positive.
    """
    if small_r <= 0 or d <= 0:
        return None

    def func(small_length: float) -> float:
        rate = spiral.curvature_rate_for(small_length, small_r)
        big_length = spiral.length_at_radius(rate, big_r)

        big_center = spiral.curvature_center(rate, big_length, big_r)
        small_center = spiral.curvature_center(rate, small_length, small_r)
        return d - big_center.distance_to(small_center)

    # The distance function repeats with each revolution at the small circle
    revolution = 2 * math.pi * small_r
    for i in range(CIRCLE_SEARCH_WINDOWS):
        result = solve_brent(func, i * revolution, (i + 1) * revolution, tolerance)
        if result is not None:
            logger.debug("Small circle length %.9g found in window %d", result, i)
            return result

    return None


def connect_line_circle(
    line: Line,
    circle: Circle,
    starts_at_line: bool,
    tolerance: float = DEFAULT_TOLERANCE
) -> ConnectionResult:
    """Connect a line and a circle with a clothoid.

    Args:
        line: Tangent line; its direction is the travel direction
        circle: Target circle; the sign of its radius gives the turn
        starts_at_line: True for line -> circle, False for circle -> line
        tolerance: Offset below which the circle already touches the line

    Returns:
        ConnectionResult; INTERSECTING if the circle crosses the line or
        lies on the wrong side, TOO_LONG if the transition would turn
        more than pi
    """
    h = line.distance_to(circle.center)
    offset = h - circle.radius

    if abs(offset) > tolerance:
        if offset * circle.radius < 0:
            logger.debug("Line and circle intersect (offset %.6g)", offset)
            return ConnectionResult.intersecting()

        length = _calc_length(abs(circle.radius), abs(h), tolerance)

        if length is None:
            logger.debug("Line to circle transition is too long (radius %.6g)", circle.radius)
            return ConnectionResult.too_long()
    else:
        length = 0.0

    logger.debug("Line/circle transition length %.9g", length)

    length_at_circle = length if starts_at_line else -length
    rate = spiral.curvature_rate_for(length_at_circle, circle.radius)

    origin_direction = line.direction
    # Keep the origin on the line so its tangent matches the line exactly
    origin = line.projection(_calc_origin(rate, length_at_circle, circle, origin_direction))

    if starts_at_line:
        clothoid = Clothoid(rate, origin, origin_direction, 0.0, length_at_circle)
    else:
        clothoid = Clothoid(rate, origin, origin_direction, length_at_circle, 0.0)

    return ConnectionResult.success(clothoid)


def connect_circles(
    start_circle: Circle,
    end_circle: Circle,
    tolerance: float = DEFAULT_TOLERANCE
) -> ConnectionResult:
    """Connect two circles with a clothoid running from start to end.

    Args:
        start_circle: Circle the transition leaves
        end_circle: Circle the transition joins
        tolerance: Offset below which the circles already touch

    Returns:
        ConnectionResult; INTERSECTING if the circles overlap in a way no
        transition can bridge, TOO_LONG if no solution exists within the
        searched revolutions
    """
    d = (start_circle.center - end_circle.center).length
    offset = abs(end_circle.radius - start_circle.radius) - d

    if abs(offset) > tolerance:
        if offset * sign(end_circle.radius * start_circle.radius) < 0:
            logger.debug("Circles intersect (offset %.6g)", offset)
            return ConnectionResult.intersecting()

        # Equal radii behave like a bigger start circle
        length_direction = 1 if abs(start_circle.radius) >= abs(end_circle.radius) else -1

        big_circle = start_circle if length_direction > 0 else end_circle
        small_circle = end_circle if length_direction > 0 else start_circle

        reversing = sign(small_circle.radius)

        small_length = _calc_length_at_small_circle(
            big_circle.radius * reversing,
            small_circle.radius * reversing,
            d,
            tolerance
        )

        if small_length is None:
            logger.debug("Circle to circle transition is too long")
            return ConnectionResult.too_long()

        rate = spiral.curvature_rate_for(small_length, small_circle.radius) * length_direction
    else:
        rate = spiral.curvature_rate_for(0.0, end_circle.radius)

    end_length = spiral.length_at_radius(rate, end_circle.radius)
    start_length = spiral.length_at_radius(rate, start_circle.radius)

    local_centers = (
        spiral.curvature_center(rate, end_length, end_circle.radius)
        - spiral.curvature_center(rate, start_length, start_circle.radius)
    )
    world_centers = end_circle.center - start_circle.center

    origin_direction = UnitVector.angle_between(local_centers, world_centers)
    origin = _calc_origin(rate, end_length, end_circle, origin_direction)
    logger.debug("Circle/circle transition lengths %.9g..%.9g", start_length, end_length)

    return ConnectionResult.success(Clothoid(rate, origin, origin_direction, start_length, end_length))


def fit_connected_circle(clothoid: Clothoid, point: Point) -> Optional[CircleFit]:
    """Find the circle through point that touches the clothoid.

    Bisection is used because the objective changes the sign of its
    second derivative, which defeats Brent's interpolation.

    Args:
        clothoid: Clothoid the circle must be tangent to
        point: Point the circle passes through

    Returns:
        CircleFit with the circle and the touching arc length, or None
        if the point cannot be reached from this spiral
    """
    rate = clothoid.curvature_rate
    if math.isnan(rate):
        return None

    x_axis = Line.from_point_direction(clothoid.origin, clothoid.origin_direction)
    vx = x_axis.projection(point) - clothoid.origin
    y = x_axis.distance_to(point)
    if abs(y) <= FIT_LINE_TOLERANCE * max(1.0, abs(point.x), abs(point.y)):
        y = 0.0
    local = Point(vx.length * sign(vx.dot(x_axis.direction)), y)

    if (local.x * local.y) * rate <= 0.0:
        return None

    def func(length: float) -> float:
        return abs(spiral.radius_at(rate, length)) - (spiral.curvature_center(rate, length) - local).length

    side = sign(rate * local.y)
    # The spiral turns by pi at this length
    bound = SQRT_PI / abs(rate) * side
    lower = FIT_BOUND_OFFSET * side

    length = solve_bisection(func, lower, bound - lower, FIT_TOLERANCE)

    # Collapsing onto the origin means no finite circle fits
    if length is None or length == lower:
        logger.debug("No circle fits through %s", point)
        return None

    r = spiral.radius_at(rate, length)
    center = clothoid.get_point(length) + clothoid.get_normal(length) * r

    return CircleFit(Circle(center, r), length)


def calc_target_distance(radius: float, length: float) -> float:
    """Offset of a circle center from the line for a transition of given length.

    Args:
        radius: Signed circle radius
        length: Transition length

    Returns:
        Signed distance from the line to the circle center
    """
    rate = spiral.curvature_rate_for(length, radius)
    y = spiral.local_point(rate, length).y
    normal = spiral.local_normal(rate, length)
    return y + normal.y * radius


def calc_target_distance_between_circles(radius1: float, radius2: float, length: float) -> float:
    """Center distance of two circles joined by a transition of given length.

    Returns:
        Distance between the circle centers, or NaN for equal radii
    """
    if radius1 == radius2:
        return math.nan

    if length == 0.0:
        return abs(radius1 - radius2)

    l1 = (length * radius2) / (radius1 - radius2)
    l2 = (length * radius1) / (radius1 - radius2)

    rate = spiral.curvature_rate_for(l1, radius1)

    center1 = spiral.curvature_center(rate, l1, radius1)
    center2 = spiral.curvature_center(rate, l2, radius2)

    return (center2 - center1).length


__all__ = [
    "ConnectionStatus",
    "ConnectionResult",
    "CircleFit",
    "connect_line_circle",
    "connect_circles",
    "fit_connected_circle",
    "calc_target_distance",
    "calc_target_distance_between_circles",
]
