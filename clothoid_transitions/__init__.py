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
Clothoid Transitions
====================

Clothoid (Euler spiral) transition curves for horizontal alignment
design: connects tangent lines and circular arcs with spirals whose
curvature varies linearly with arc length.

Example:
    >>> from clothoid_transitions import Circle, Point, connect_circles
    >>> result = connect_circles(Circle(Point(10, 10), 10), Circle(Point(13, 15), 4))
    >>> result.status
    <ConnectionStatus.OK: 'OK'>
"""

from .core.exceptions import GeometryError, NumericalMethodError
from .core.logging_config import get_logger, log_level, setup_logging
from .core.primitives import NOT_A_POINT, ZERO, Circle, Line, Point, UnitVector, Vector
from .core.equation import solve_bisection, solve_brent, solve_newton, solve_simply
from .core.clothoid import (
    CircleFit,
    Clothoid,
    ConnectionResult,
    ConnectionStatus,
    calc_target_distance,
    calc_target_distance_between_circles,
    connect_circles,
    connect_line_circle,
    fit_connected_circle,
)

__version__ = "1.0.0"
__author__ = "Michael Yoder"

__all__ = [
    # Errors
    "GeometryError",
    "NumericalMethodError",
    # Logging
    "get_logger",
    "log_level",
    "setup_logging",
    # Primitives
    "Vector",
    "UnitVector",
    "Point",
    "Line",
    "Circle",
    "ZERO",
    "NOT_A_POINT",
    # Solvers
    "solve_simply",
    "solve_bisection",
    "solve_newton",
    "solve_brent",
    # Clothoid
    "Clothoid",
    "CircleFit",
    "ConnectionResult",
    "ConnectionStatus",
    "connect_line_circle",
    "connect_circles",
    "fit_connected_circle",
    "calc_target_distance",
    "calc_target_distance_between_circles",
]
