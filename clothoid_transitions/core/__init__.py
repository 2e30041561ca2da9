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
Clothoid Transitions Core
=========================

Pure geometry and numerics, with no I/O:

- primitives: Vector, UnitVector, Point, Line, Circle
- equation: scalar root finders
- clothoid: spiral geometry and transition solving
- logging_config: package logger setup
"""

from .exceptions import GeometryError, NumericalMethodError
from .logging_config import get_logger, log_level, setup_logging

__all__ = [
    "GeometryError",
    "NumericalMethodError",
    "get_logger",
    "log_level",
    "setup_logging",
]
