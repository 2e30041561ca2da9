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
Clothoid Package
================

Euler spiral transitions between lines and circular arcs.

This package provides:
- Fresnel integrals in the clothoid convention
- Closed-form spiral geometry in the spiral's own frame
- Placed clothoid segments (Clothoid)
- Line-to-circle and circle-to-circle transition solving
- Circle fitting against an existing spiral

Example:
    >>> from clothoid_transitions.core.clothoid import connect_line_circle
    >>> from clothoid_transitions.core.primitives import Circle, Line, Point
    >>> line = Line.through_points(Point(0, 0), Point(10, 0))
    >>> result = connect_line_circle(line, Circle(Point(10, 12), 10), True)
    >>> result.ok
    True
"""

# Fresnel integrals
from .fresnel import fresnel_c, fresnel_s

# Placed segment
from .clothoid import Clothoid

# Transition solving
from .connection import (
    CircleFit,
    ConnectionResult,
    ConnectionStatus,
    calc_target_distance,
    calc_target_distance_between_circles,
    connect_circles,
    connect_line_circle,
    fit_connected_circle,
)

__all__ = [
    # Classes
    "Clothoid",
    "CircleFit",
    "ConnectionResult",
    "ConnectionStatus",
    # Fresnel integrals
    "fresnel_c",
    "fresnel_s",
    # Connection functions
    "connect_line_circle",
    "connect_circles",
    "fit_connected_circle",
    "calc_target_distance",
    "calc_target_distance_between_circles",
]
