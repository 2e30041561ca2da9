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
Scalar Equation Solvers
=======================

Root finders for f(x) = 0 on a real interval:

- solve_bisection: interval halving
- solve_newton: secant steps with chord back-off
- solve_brent: Brent's method (inverse quadratic / secant / bisection)
- solve_simply: derivative-free pattern search on |f|

Solvers hold no state between calls. A bracket whose ends have the same
sign has no root and yields None; an undefined (NaN) function value at a
bound is a caller error and raises ValueError.
"""

import math
from typing import Callable, Optional

from .constants import (
    BISECTION_MAX_ITERATIONS,
    BRENT_MAX_ITERATIONS,
    NEWTON_MAX_ITERATIONS,
    NEWTON_START_DELTA,
)
from .exceptions import NumericalMethodError
from .logging_config import get_logger

logger = get_logger(__name__)

Func = Callable[[float], float]


def _check_defined(*values: float) -> None:
    if any(math.isnan(v) for v in values):
        raise ValueError("Function must be defined (must not be NaN) at range bounds")


def solve_simply(
    func: Func,
    start: float,
    start_step: float,
    argument_accuracy: float
) -> float:
    """Minimize |func| by trying both sides of the current argument.

    The step is halved whenever neither neighbour improves |func|.

    Args:
        func: Function of one argument
        start: Initial argument
        start_step: Initial trial step
        argument_accuracy: Stop once the step is this small

    Returns:
        Argument with the smallest |func| found
    """
    step = start_step
    arg = start
    value = abs(func(arg))

    while step > argument_accuracy:
        new_value = abs(func(arg + step))
        if new_value < value:
            arg += step
            value = new_value
            continue

        new_value = abs(func(arg - step))
        if new_value < value:
            arg -= step
            value = new_value
        else:
            step /= 2

    return arg


def solve_bisection(
    func: Func,
    bound1: float,
    bound2: float,
    accuracy: float,
    max_iterations: int = BISECTION_MAX_ITERATIONS
) -> Optional[float]:
    """Find a root of func between two bounds by interval halving.

    Args:
        func: Function of one argument
        bound1: One end of the search interval
        bound2: Other end of the search interval (either order)
        accuracy: Accept a midpoint once |func(mid)| <= accuracy
        max_iterations: Halving limit

    Returns:
        Root estimate, or None if func has the same sign at both bounds

    Raises:
        ValueError: If func is NaN at a bound or inside the interval
        NumericalMethodError: If the bracket collapses without converging
    """
    left = min(bound1, bound2)
    right = max(bound1, bound2)

    left_value = func(left)
    right_value = func(right)
    _check_defined(left_value, right_value)

    if left_value * right_value > 0:
        return None

    if left_value == 0:
        return left
    if right_value == 0:
        return right

    previous_value = None
    middle = (left + right) / 2

    for _ in range(max_iterations):
        middle = (left + right) / 2
        middle_value = func(middle)

        if math.isnan(middle_value):
            raise ValueError(f"Function must be defined at all range (is NaN at {middle})")

        if abs(middle_value) <= accuracy:
            return middle

        # Function precision exhausted
        if previous_value is not None and middle_value == previous_value:
            return middle

        previous_value = middle_value

        if left_value * middle_value <= 0:
            right, right_value = middle, middle_value
        elif right_value * middle_value <= 0:
            left, left_value = middle, middle_value

        if left == right:
            raise NumericalMethodError("Bisection bracket collapsed without finding a root")

    logger.warning("Bisection stopped after %d iterations at %r", max_iterations, middle)
    return middle


def solve_newton(
    func: Func,
    start: float,
    other_bound: float,
    accuracy: float,
    max_iterations: int = NEWTON_MAX_ITERATIONS
) -> Optional[float]:
    """Find a root by secant steps starting from one bound.

    The secant slope is sampled with a small offset towards other_bound.
    When the offset sample lands past a sign change the offset is
    pulled back to half the chord root until both samples share a sign,
    which keeps steps from overshooting on sharply curved functions.

    Args:
        func: Function of one argument
        start: Bound the search starts from
        other_bound: Opposite bound of the bracket
        accuracy: Accept x once |func(x)| <= accuracy
        max_iterations: Secant step limit

    Returns:
        Root estimate, or None if func has the same sign at both bounds

    Raises:
        ValueError: If accuracy is not positive or func is NaN at a bound
    """
    if accuracy <= 0:
        raise ValueError("accuracy must be greater than zero")

    start_value = func(start)
    other_value = func(other_bound)
    _check_defined(start_value, other_value)

    if start_value * other_value > 0:
        return None

    if abs(start_value) <= accuracy:
        return start
    if abs(other_value) <= accuracy:
        return other_bound

    delta = NEWTON_START_DELTA * math.copysign(1.0, other_bound - start)

    x = start
    value = start_value

    for _ in range(max_iterations):
        if abs(value) <= accuracy:
            return x

        offset_value = func(x + delta)

        while offset_value * value < 0:
            if delta == 0:
                return x

            chord_zero = -(x * offset_value - value * (x + delta)) / (value - offset_value)
            delta = (chord_zero - x) / 2
            offset_value = func(x + delta)

        # Flat secant: no further progress possible
        if offset_value == value:
            return x

        x = -(x * offset_value - value * (x + delta)) / (value - offset_value)
        value = func(x)
        _check_defined(value)

    logger.warning("Newton solver stopped after %d iterations at %r", max_iterations, x)
    return x


def solve_brent(
    func: Func,
    left: float,
    right: float,
    tolerance: float,
    target: float = 0.0,
    max_iterations: int = BRENT_MAX_ITERATIONS
) -> Optional[float]:
    """Solve func(x) = target with Brent's method.

    Notation follows chapter 4 of Brent, "Algorithms for Minimization
    without Derivatives": b is the current best estimate, a the previous
    one and c the opposite end of the bracket.

    Args:
        func: Function of one argument
        left: One end of the bracket
        right: Other end of the bracket
        tolerance: Argument tolerance, must be positive
        target: Value to solve for
        max_iterations: Iteration limit; the current best is returned
            when it is reached

    Returns:
        Root estimate, or None if func - target does not change sign

    Raises:
        ValueError: If tolerance is not positive or func is NaN at a bound
    """
    if tolerance <= 0.0:
        raise ValueError(f"Tolerance must be positive. Received {tolerance}.")

    def f(x: float) -> float:
        return func(x) - target

    a, b = left, right
    fa, fb = f(a), f(b)
    _check_defined(fa, fb)

    if fa * fb > 0.0:
        return None

    c = fc = d = e = 0.0
    bracket_changed = True
    iterations = 0

    while True:
        # Bracket init: c is the opposite end of the bracket from b
        if bracket_changed:
            c, fc = a, fa
            d = e = b - a

        # Keep the smaller |f| as the current best b
        if abs(fc) < abs(fb):
            a, b, c = b, c, b
            fa, fb, fc = fb, fc, fb

        iterations += 1

        tol = 2.0 * tolerance * abs(b) + tolerance
        m = 0.5 * (c - b)
        if abs(m) <= tol or fb == 0.0:
            return b

        # Step selection
        if abs(e) < tol or abs(fa) <= abs(fb):
            d = e = m
        else:
            s = fb / fa
            if a == c:
                # Secant
                p = 2.0 * m * s
                q = 1.0 - s
            else:
                # Inverse quadratic interpolation
                q = fa / fc
                r = fb / fc
                p = s * (2.0 * m * q * (q - r) - (b - a) * (r - 1.0))
                q = (q - 1.0) * (r - 1.0) * (s - 1.0)

            if p > 0.0:
                q = -q
            else:
                p = -p

            s = e
            e = d
            if 2.0 * p < 3.0 * m * q - abs(tol * q) and p < abs(0.5 * s * q):
                d = p / q
            else:
                d = e = m

        # Evaluation
        a, fa = b, fb
        if abs(d) > tol:
            b += d
        elif m > 0.0:
            b += tol
        else:
            b -= tol

        if iterations == max_iterations:
            logger.debug("Brent stopped after %d iterations at %r", iterations, b)
            return b

        fb = f(b)

        # Rebracket when b moved to the same side as c
        bracket_changed = (fb > 0.0 and fc > 0.0) or (fb <= 0.0 and fc <= 0.0)


__all__ = [
    "Func",
    "solve_simply",
    "solve_bisection",
    "solve_newton",
    "solve_brent",
]
