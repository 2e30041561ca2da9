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
Fresnel Integrals
=================

Clothoid coordinates use the unnormalized Fresnel integrals

    C(x) = ∫₀ˣ cos(t²) dt,    S(x) = ∫₀ˣ sin(t²) dt

scipy.special.fresnel evaluates the normalized pair with argument πt²/2;
substituting t = u·√(π/2) gives

    C(x) = √(π/2) · C_norm(x·√(2/π))

and the same for S. Both functions are odd and approach √(π/8) as
x → +∞.
"""

import math
from typing import Tuple, Union

import numpy as np
from scipy import special

ArrayLike = Union[float, np.ndarray]

_ARGUMENT_SCALE = math.sqrt(2.0 / math.pi)
_VALUE_SCALE = math.sqrt(math.pi / 2.0)


def evaluate(x: ArrayLike) -> Tuple[ArrayLike, ArrayLike]:
    """Evaluate C(x) and S(x) together.

    Args:
        x: Scalar or numpy array argument

    Returns:
        (C, S) with the same shape as x; plain floats for scalar input
    """
    s, c = special.fresnel(np.asarray(x, dtype=float) * _ARGUMENT_SCALE)
    c = c * _VALUE_SCALE
    s = s * _VALUE_SCALE

    if np.ndim(c) == 0:
        return float(c), float(s)
    return c, s


def fresnel_c(x: ArrayLike) -> ArrayLike:
    """Fresnel cosine integral C(x) = ∫₀ˣ cos(t²) dt."""
    return evaluate(x)[0]


def fresnel_s(x: ArrayLike) -> ArrayLike:
    """Fresnel sine integral S(x) = ∫₀ˣ sin(t²) dt."""
    return evaluate(x)[1]


__all__ = ["evaluate", "fresnel_c", "fresnel_s"]
