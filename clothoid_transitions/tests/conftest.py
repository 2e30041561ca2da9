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
Pytest Configuration and Fixtures
==================================

Shared fixtures for the clothoid transitions test suite.
"""

import pytest

from clothoid_transitions.core.primitives import Circle, Line, Point


# =============================================================================
# Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, no external deps)")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "slow: Slow running tests")


# =============================================================================
# Geometry Fixtures
# =============================================================================

# Far from the origin to exercise precision in world coordinates
X0 = 1000000.0
Y0 = -1000000.0


@pytest.fixture
def far_line() -> Line:
    """Gently rising line placed a million units from the origin."""
    return Line.through_points(
        Point(-1000 + X0, -190 + Y0),
        Point(1000 + X0, 130 + Y0)
    )


@pytest.fixture
def far_circles() -> list:
    """Circles on either side of far_line (clockwise right, counter-clockwise left).

    Returns:
        List of Circle
    """
    return [
        Circle(Point(100 + X0, -90 + Y0), -60),
        Circle(Point(100 + X0, 80 + Y0), 90),
    ]


@pytest.fixture
def nested_circles() -> tuple:
    """Big circle containing a small one, both counter-clockwise, far from the origin.

    Returns:
        (big, small) tuple of Circle
    """
    return (
        Circle(Point(10 + X0, 10 + Y0), 10),
        Circle(Point(13 + X0, 15 + Y0), 4),
    )


__all__ = [
    "X0",
    "Y0",
    "far_line",
    "far_circles",
    "nested_circles",
]
