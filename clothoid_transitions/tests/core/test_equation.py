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
Tests for Scalar Equation Solvers
=================================
"""

import math

import pytest

from clothoid_transitions.core.equation import (
    solve_bisection,
    solve_brent,
    solve_newton,
    solve_simply,
)

EPS = 1e-12


def linear(x):
    return x - 1


def parabola(x):
    return x * x - 1


class CountingFunc:
    """Callable wrapper counting evaluations."""

    def __init__(self, func):
        self.func = func
        self.calls = 0

    def __call__(self, x):
        self.calls += 1
        return self.func(x)


class TestSolveBisection:
    """Tests for solve_bisection."""

    @pytest.mark.unit
    def test_half_circle(self):
        """Test root of a lower half circle shifted up."""
        def func(x):
            return -math.sqrt(1.5 * 1.5 - (x - 1) * (x - 1)) + 1

        root = solve_bisection(func, 0.5, 2.3, EPS)

        assert root == pytest.approx(1 + math.sqrt(1.25), abs=1e-9)

    @pytest.mark.unit
    @pytest.mark.parametrize("bound1,bound2", [(0, 2), (1, 2), (2, 0)])
    def test_linear(self, bound1, bound2):
        """Test linear root in either bound order and at a bound."""
        assert solve_bisection(linear, bound1, bound2, EPS) == pytest.approx(1.0, abs=EPS)

    @pytest.mark.unit
    @pytest.mark.parametrize("bound1,bound2,expected", [
        (0, 10, 1.0),
        (-10, 0, -1.0),
        (-10, -1, -1.0),
    ])
    def test_parabola(self, bound1, bound2, expected):
        """Test parabola roots inside and at bracket ends."""
        assert solve_bisection(parabola, bound1, bound2, EPS) == pytest.approx(expected, abs=1e-9)

    @pytest.mark.unit
    @pytest.mark.parametrize("func,bound1,bound2", [
        (linear, 3, 4),
        (parabola, -10, 10),
    ])
    def test_no_sign_change(self, func, bound1, bound2):
        """Test same-sign bounds give no root."""
        assert solve_bisection(func, bound1, bound2, EPS) is None

    @pytest.mark.unit
    def test_nan_at_bound_raises(self):
        """Test undefined function value at a bound."""
        with pytest.raises(ValueError):
            solve_bisection(lambda x: math.nan if x == 0 else x, 0, 1, EPS)

    @pytest.mark.unit
    def test_nan_inside_raises(self):
        """Test undefined function value at a midpoint."""
        def func(x):
            return math.nan if 0.4 < x < 0.6 else x - 0.9

        with pytest.raises(ValueError):
            solve_bisection(func, 0, 1, EPS)

    @pytest.mark.unit
    def test_iteration_cap_returns_midpoint(self):
        """Test the last midpoint is returned once the halving limit is hit."""
        root = solve_bisection(lambda x: x - 1 / 3, 0, 1, EPS, max_iterations=3)

        # Midpoints 0.5, 0.25, 0.375
        assert root == 0.375

    @pytest.mark.unit
    def test_step_function_stops_when_value_repeats(self):
        """Test a discontinuous function ends at the first repeated value."""
        def step(x):
            return -1.0 if x < 0.3 else 1.0

        # Midpoints 0.5, 0.25, 0.375, then 0.3125 repeats +1
        assert solve_bisection(step, 0, 1, EPS) == 0.3125


class TestSolveNewton:
    """Tests for solve_newton."""

    @pytest.mark.unit
    @pytest.mark.parametrize("start,other", [(10, 0), (0, 10)])
    def test_linear(self, start, other):
        """Test linear root from either side."""
        assert solve_newton(linear, start, other, EPS) == pytest.approx(1.0, abs=EPS)

    @pytest.mark.unit
    @pytest.mark.parametrize("start,other,expected", [
        (0, 10, 1.0),
        (10, 0, 1.0),
        (-10, 0, -1.0),
        (-10, -1, -1.0),
    ])
    def test_parabola(self, start, other, expected):
        """Test convergence on a curved function, including a flat start."""
        assert solve_newton(parabola, start, other, EPS) == pytest.approx(expected, abs=1e-9)

    @pytest.mark.unit
    @pytest.mark.parametrize("func,start,other", [
        (linear, -10, 0),
        (parabola, -10, 10),
    ])
    def test_no_sign_change(self, func, start, other):
        """Test same-sign bounds give no root."""
        assert solve_newton(func, start, other, EPS) is None

    @pytest.mark.unit
    @pytest.mark.parametrize("accuracy", [0.0, -1.0])
    def test_non_positive_accuracy_raises(self, accuracy):
        """Test accuracy must be positive."""
        with pytest.raises(ValueError):
            solve_newton(linear, 0, 2, accuracy)

    @pytest.mark.unit
    def test_nan_at_bound_raises(self):
        """Test undefined function value at a bound."""
        with pytest.raises(ValueError):
            solve_newton(lambda x: math.nan if x == 2 else x - 1, 0, 2, EPS)

    @pytest.mark.unit
    def test_iteration_cap_returns_estimate(self):
        """Test three secant steps leave an unconverged estimate inside the bracket."""
        def cubic(x):
            return x ** 3 - 2

        root = solve_newton(cubic, 2, 0, EPS, max_iterations=3)

        assert 2 ** (1 / 3) < root < 2
        assert abs(cubic(root)) > 1e-6

    @pytest.mark.unit
    def test_flat_start_returns_start(self):
        """Test a secant with no slope stops at the current point."""
        def flat_then_rising(x):
            return -1.0 if x < 1 else x - 2

        assert solve_newton(flat_then_rising, 0, 10, EPS) == 0.0

    @pytest.mark.unit
    def test_steep_function_backs_off_and_converges(self):
        """Test the secant offset is pulled back when it steps over the root."""
        def steep(x):
            return 1e8 * (x - 1)

        root = solve_newton(steep, 1 - 5e-7, 2, 1e-6)

        assert root == pytest.approx(1.0, abs=1e-12)
        assert abs(steep(root)) <= 1e-6


class TestSolveBrent:
    """Tests for solve_brent."""

    @pytest.mark.unit
    def test_linear(self):
        """Test linear root."""
        assert solve_brent(linear, 0, 2, EPS) == pytest.approx(1.0, abs=1e-9)

    @pytest.mark.unit
    @pytest.mark.parametrize("left,right,expected", [
        (0, 10, 1.0),
        (10, 0, 1.0),
        (-10, 0, -1.0),
    ])
    def test_parabola(self, left, right, expected):
        """Test parabola roots with either bracket order."""
        assert solve_brent(parabola, left, right, EPS) == pytest.approx(expected, abs=1e-9)

    @pytest.mark.unit
    def test_root_at_bound(self):
        """Test a root sitting on a bracket end."""
        assert solve_brent(linear, 1, 2, EPS) == pytest.approx(1.0, abs=1e-9)

    @pytest.mark.unit
    def test_target(self):
        """Test solving func(x) = target."""
        assert solve_brent(lambda x: x * x, 0, 10, EPS, target=4.0) == pytest.approx(2.0, abs=1e-9)

    @pytest.mark.unit
    def test_no_sign_change(self):
        """Test same-sign bracket gives no root."""
        assert solve_brent(parabola, -10, 10, EPS) is None

    @pytest.mark.unit
    @pytest.mark.parametrize("tolerance", [0.0, -1e-9])
    def test_non_positive_tolerance_raises(self, tolerance):
        """Test tolerance must be positive."""
        with pytest.raises(ValueError):
            solve_brent(linear, 0, 2, tolerance)

    @pytest.mark.unit
    def test_nan_at_bound_raises(self):
        """Test undefined function value at a bound."""
        with pytest.raises(ValueError):
            solve_brent(lambda x: math.nan if x == 0 else x, 0, 1, EPS)

    @pytest.mark.unit
    @pytest.mark.parametrize("func,left,right", [
        (math.cos, 0.0, 3.0),
        (lambda x: x ** 3 - 2 * x - 5, 2.0, 3.0),
        (lambda x: math.exp(x) - 10, -5.0, 5.0),
        (lambda x: x ** 3 - x - 1, 1.0, 2.0),
    ])
    def test_converges_within_iteration_cap(self, func, left, right):
        """Test opposite-signed brackets converge within 50 evaluations."""
        counted = CountingFunc(func)

        root = solve_brent(counted, left, right, EPS)

        assert root is not None
        assert abs(func(root)) < 1e-9
        # Two bound evaluations plus at most one per iteration
        assert counted.calls <= 52

    @pytest.mark.unit
    def test_iteration_cap_returns_estimate(self):
        """Test a tiny cap still returns a point inside the bracket."""
        root = solve_brent(math.cos, 0.0, 3.0, EPS, max_iterations=2)
        assert 0.0 <= root <= 3.0


class TestSolveSimply:
    """Tests for the pattern search."""

    @pytest.mark.unit
    def test_linear(self):
        """Test exact root on the step grid."""
        assert solve_simply(lambda x: x - 3, 0.0, 1.0, 1e-9) == pytest.approx(3.0)

    @pytest.mark.unit
    def test_parabola(self):
        """Test minimum of |x^2 - 2| is found near sqrt(2)."""
        assert solve_simply(lambda x: x * x - 2, 0.0, 1.0, 1e-10) == pytest.approx(math.sqrt(2), abs=1e-8)

    @pytest.mark.unit
    def test_negative_direction(self):
        """Test search moves towards smaller arguments."""
        assert solve_simply(lambda x: x + 2.5, 0.0, 1.0, 1e-9) == pytest.approx(-2.5)
