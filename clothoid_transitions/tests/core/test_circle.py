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
Tests for Circle
================
"""

import math

import pytest

from clothoid_transitions.core.exceptions import GeometryError
from clothoid_transitions.core.primitives import Circle, Line, Point, UnitVector, Vector


def same_direction(u1, u2, tolerance=1e-8) -> bool:
    """True when two unit directions agree within an angular tolerance."""
    return abs(u1.cross(u2)) < tolerance and u1.dot(u2) > 0


class TestCircleConstruction:
    """Tests for Circle validation."""

    @pytest.mark.unit
    @pytest.mark.parametrize("radius", [0.0, math.inf, -math.inf, math.nan])
    def test_invalid_radius(self, radius):
        """Test degenerate radii are rejected."""
        with pytest.raises(GeometryError):
            Circle(Point(0, 0), radius)

    @pytest.mark.unit
    def test_from_coordinates_and_length(self):
        """Test coordinate construction and circumference."""
        circle = Circle.from_coordinates(1, 2, -3)
        assert circle.center == Point(1, 2)
        assert circle.length == pytest.approx(6 * math.pi)


class TestCircleTangent:
    """Tests for tangents of oriented circles."""

    @pytest.mark.unit
    def test_counter_clockwise_tangent(self):
        """Test tangent of a positive circle turns left."""
        circle = Circle(Point(0, 0), 10)
        t = circle.get_tangent(Point(10, 0))
        assert (t.x, t.y) == pytest.approx((0.0, 1.0))

    @pytest.mark.unit
    def test_clockwise_tangent(self):
        """Test tangent flips for a negative radius."""
        circle = Circle(Point(0, 0), -10)
        t = circle.get_tangent(Point(10, 0))
        assert (t.x, t.y) == pytest.approx((0.0, -1.0))

    @pytest.mark.unit
    def test_tangent_independent_of_position(self):
        """Test equal circles far apart give the same tangent."""
        u = Vector(1, -0.5).normalized()
        c1 = Circle(Point(10, 20), 50)
        c2 = Circle(Point(10 + 100000000, 20 - 10000000), 50)

        assert same_direction(
            c1.get_tangent(c1.center + u * c1.radius),
            c2.get_tangent(c2.center + u * c2.radius)
        )

    @pytest.mark.unit
    @pytest.mark.parametrize("radius", [10.0, -10.0])
    @pytest.mark.parametrize("direction", [
        UnitVector(1.0, 0.0), UnitVector(0.0, 1.0), UnitVector(-1.0, 0.0), UnitVector(0.0, -1.0),
    ])
    def test_tangent_line(self, radius, direction):
        """Test tangent line keeps the center at the signed radius."""
        circle = Circle(Point(10, 20), radius)
        line = circle.get_tangent_line(direction)
        assert line.distance_to(circle.center) == pytest.approx(radius, abs=1e-12)


class TestCircleDistance:
    """Tests for signed distance to a circle."""

    @pytest.mark.unit
    def test_signed_distance(self):
        """Test inside is positive for counter-clockwise circles."""
        circle = Circle(Point(0, 0), 10)
        assert circle.distance_to(Point(0, 0)) == pytest.approx(10.0)
        assert circle.distance_to(Point(20, 0)) == pytest.approx(-10.0)

    @pytest.mark.unit
    def test_signed_distance_clockwise(self):
        """Test sign flips for clockwise circles."""
        circle = Circle(Point(0, 0), -10)
        assert circle.distance_to(Point(0, 0)) == pytest.approx(-10.0)


class TestCircleIntersect:
    """Tests for circle/line intersection."""

    @pytest.mark.unit
    def test_through_center(self):
        """Test line through the center hits both ends of a diameter."""
        circle = Circle(Point(10, 20), 10)
        line = Line.through_points(Point(0, 20), Point(20, 20))

        first, second = circle.intersect(line)

        found = sorted([first.to_tuple(), second.to_tuple()])
        assert found[0] == pytest.approx((0.0, 20.0))
        assert found[1] == pytest.approx((20.0, 20.0))

    @pytest.mark.unit
    def test_tangent_line(self):
        """Test a touching line gives two equal points."""
        circle = Circle(Point(10, 20), 10)
        line = Line.through_points(Point(0, 30), Point(20, 30))

        first, second = circle.intersect(line)

        assert first.to_tuple() == pytest.approx((10.0, 30.0))
        assert second.to_tuple() == pytest.approx((10.0, 30.0))

    @pytest.mark.unit
    @pytest.mark.parametrize("end", [Point(20, 100), Point(20, 110)])
    def test_miss(self, end):
        """Test lines that pass the circle."""
        circle = Circle(Point(10, 20), 10)
        line = Line.through_points(Point(0, 100), end)
        assert circle.intersect(line) is None

    @pytest.mark.unit
    def test_oblique(self):
        """Test both points lie on the circle and the line."""
        circle = Circle(Point(10, 20), 10)
        line = Line.through_points(Point(0, 25), Point(20, 23))

        for pt in circle.intersect(line):
            assert pt.distance_to(circle.center) == pytest.approx(10.0, abs=1e-12)
            assert line.distance_to(pt) == pytest.approx(0.0, abs=1e-12)
