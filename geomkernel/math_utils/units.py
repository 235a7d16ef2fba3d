################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geomkernel
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################
"""Numeric tolerances and finiteness checks."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


class Tolerance:
    """Default tolerances used by comparisons and inversion checks."""

    # Component-wise tolerance for approximate equality
    APPROX_EPS: float = 1.0e-6
    # Scale magnitude at or below which a decomposed transform is singular
    INVERT_EPS: float = 1.0e-6
    # Determinant magnitude at or below which a matrix is singular
    SINGULAR_EPS: float = 1.0e-12
    # Smallest norm accepted when normalizing a rotation
    NORM_EPS: float = 1.0e-12


def assert_finite(x: NDArray[np.float64], name: str) -> None:
    """Raise ValueError when the array contains non-finite values."""
    if not np.all(np.isfinite(x)):
        raise ValueError(f"{name} must be finite")


def is_approx_zero(x: float, eps: float = Tolerance.APPROX_EPS) -> bool:
    """Return True when a scalar lies within eps of zero."""
    return bool(abs(x) <= eps)
