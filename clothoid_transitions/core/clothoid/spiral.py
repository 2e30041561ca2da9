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
Euler Spiral Local Geometry
===========================

Closed-form geometry of a clothoid in its own frame: origin at the
inflection point (curvature 0), tangent along +X at the origin. Arc
length ℓ is signed and measured from the origin.

With curvature rate k:

    position:   (C(ℓ|k|) / |k|,  S(ℓ|k|) / k)
    turn angle: k·|k|·ℓ²
    radius:     r = sign(k) / (2·ℓ·k²)

A zero-length spiral may carry an undefined (NaN) curvature rate, so every
function returns the exact origin values at ℓ = 0 without touching k.
"""

import math
from typing import Optional

import numpy as np

from ..primitives import Point, UnitVector, sign
from . import fresnel


def curvature_rate_for(length: float, radius: float) -> float:
    """Curvature rate of the spiral that reaches radius at length.

    Args:
        length: Signed arc length from the inflection point
        radius: Signed radius reached at that length

    Returns:
        Signed curvature rate, or NaN if length or radius is zero

    Raises:
        ValueError: If length * radius is NaN
    """
    if math.isnan(length * radius):
        raise ValueError("length and radius must be defined to derive a curvature rate")

    product = 2 * abs(radius) * abs(length)
    if product == 0:
        return math.nan

    return 1 / math.sqrt(product) * sign(radius * length)


def radius_at(rate: float, length: float) -> float:
    """Osculating radius at length (infinite at the inflection point)."""
    denominator = 2 * length * rate * rate
    if denominator == 0:
        return math.copysign(math.inf, length) * sign(rate)
    return 1 / denominator * sign(rate)


def length_at_radius(rate: float, radius: float) -> float:
    """Arc length at which the spiral reaches radius; 0 for an undefined rate."""
    if math.isnan(rate):
        return 0.0
    return 1 / (2 * rate * rate * radius) * sign(rate)


def tangent_angle(rate: float, length: float) -> float:
    """Signed turn of the tangent from the origin direction."""
    if length == 0:
        return 0.0
    # abs() stands in for a sign factor
    return (rate * length) * (abs(rate) * length)


def local_point(rate: float, length: float) -> Point:
    """Position at length in the spiral frame."""
    if length == 0:
        return Point(0.0, 0.0)

    k = abs(rate)
    c, s = fresnel.evaluate(length * k)
    return Point(c / k, s / rate)


def local_points(rate: float, lengths: np.ndarray) -> np.ndarray:
    """Positions at many lengths as an (n, 2) array."""
    lengths = np.asarray(lengths, dtype=float)
    result = np.zeros((lengths.size, 2))

    nonzero = lengths != 0
    if np.any(nonzero):
        k = abs(rate)
        c, s = fresnel.evaluate(lengths[nonzero] * k)
        result[nonzero, 0] = c / k
        result[nonzero, 1] = s / rate

    return result


def local_tangent(rate: float, length: float) -> UnitVector:
    """Unit tangent at length in the spiral frame.

    The sine is taken by magnitude with the sign of the rate, so the
    tangent stays in the half plane of the spiral's handedness.
    """
    if length == 0:
        return UnitVector(1.0, 0.0)

    angle = tangent_angle(rate, length)
    return UnitVector(math.cos(angle), abs(math.sin(angle)) * sign(rate))


def local_normal(rate: float, length: float) -> UnitVector:
    """Unit normal (tangent turned 90° counter-clockwise) at length."""
    return local_tangent(rate, length).normal()


def curvature_center(rate: float, length: float, radius: Optional[float] = None) -> Point:
    """Center of the circle of the given radius tangent to the spiral at length.

    Args:
        rate: Curvature rate
        length: Signed arc length
        radius: Signed circle radius; defaults to the osculating radius

    Raises:
        ValueError: If radius is omitted and rate is NaN
    """
    if radius is None:
        if math.isnan(rate):
            raise ValueError("curvature rate can not be NaN")
        radius = radius_at(rate, length)

    return local_point(rate, length) + local_normal(rate, length) * radius


__all__ = [
    "curvature_rate_for",
    "radius_at",
    "length_at_radius",
    "tangent_angle",
    "local_point",
    "local_points",
    "local_tangent",
    "local_normal",
    "curvature_center",
]
