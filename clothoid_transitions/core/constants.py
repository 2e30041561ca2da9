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
Numerical Constants
===================

Default tolerances and iteration limits used by the primitive kernel,
the root finders and the clothoid engine.

Tolerances are absolute values in drawing units (meters) unless noted.
Callers override them through function arguments.
"""

# Default tolerance for connection tangency shortcuts and Brent's method
DEFAULT_TOLERANCE = 1e-12

# Allowed deviation of x² + y² from 1 when building a UnitVector
UNIT_VECTOR_TOLERANCE = 1e-5

# Tighter check used by UnitVector.is_valid
UNIT_VECTOR_VALIDITY_TOLERANCE = 1e-15

# Lines whose unit normals cross below this value are parallel
PARALLEL_EPSILON = 1e-12

# Iteration caps
BRENT_MAX_ITERATIONS = 50
BISECTION_MAX_ITERATIONS = 64
NEWTON_MAX_ITERATIONS = 64
INTERSECTION_MAX_ITERATIONS = 200

# Initial secant offset for the Newton/secant solver
NEWTON_START_DELTA = 1e-6

# Clothoid/line intersection convergence (distance and length)
INTERSECTION_TOLERANCE = 1e-12

# Circle fitting: function accuracy and offset from the interval ends
FIT_TOLERANCE = 1e-12
FIT_BOUND_OFFSET = 1e-12

# Relative offset below which a point lies on the clothoid's origin tangent
FIT_LINE_TOLERANCE = 1e-12

# One-revolution windows searched when connecting two circles
CIRCLE_SEARCH_WINDOWS = 4

__all__ = [
    "DEFAULT_TOLERANCE",
    "UNIT_VECTOR_TOLERANCE",
    "UNIT_VECTOR_VALIDITY_TOLERANCE",
    "PARALLEL_EPSILON",
    "BRENT_MAX_ITERATIONS",
    "BISECTION_MAX_ITERATIONS",
    "NEWTON_MAX_ITERATIONS",
    "INTERSECTION_MAX_ITERATIONS",
    "NEWTON_START_DELTA",
    "INTERSECTION_TOLERANCE",
    "FIT_TOLERANCE",
    "FIT_BOUND_OFFSET",
    "FIT_LINE_TOLERANCE",
    "CIRCLE_SEARCH_WINDOWS",
]
