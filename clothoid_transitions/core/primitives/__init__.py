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
Planar Primitives Package
=========================

Immutable 2D geometry types consumed by the clothoid engine:

- Vector, UnitVector, Point: vector algebra and rotations
- Line: directed line in normal form
- Circle: circle with signed (oriented) radius
"""

from .vector import NOT_A_POINT, ZERO, Point, UnitVector, Vector, sign
from .line import Line
from .circle import Circle

__all__ = [
    "Vector",
    "UnitVector",
    "Point",
    "Line",
    "Circle",
    "ZERO",
    "NOT_A_POINT",
    "sign",
]
