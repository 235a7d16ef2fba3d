################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geomkernel
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################
"""Half-lines with an origin point and a direction vector."""

from __future__ import annotations

from dataclasses import dataclass

from geomkernel.geometry_types.point import Point
from geomkernel.geometry_types.vector import Vector
from geomkernel.math_utils.units import Tolerance


@dataclass(frozen=True)
class Ray:
    """A ray starting at ``origin`` and pointing along ``direction``."""

    origin: Point
    direction: Vector

    def __post_init__(self) -> None:
        """Validate the origin and direction types."""
        if not isinstance(self.origin, Point):
            raise ValueError("origin must be a point")
        if not isinstance(self.direction, Vector):
            raise ValueError("direction must be a vector")
        if self.origin.DIM != self.direction.DIM:
            raise ValueError("origin and direction must have the same dimension")

    @property
    def dim(self) -> int:
        """Return the dimension of the ambient space."""
        return self.origin.DIM

    def almost_equal(self, other: "Ray", eps: float = Tolerance.APPROX_EPS) -> bool:
        """Check approximate equality of origin and direction."""
        return self.origin.almost_equal(
            other.origin, eps
        ) and self.direction.almost_equal(other.direction, eps)

    def __str__(self) -> str:
        return f"Ray(origin({self.origin}), direction({self.direction}))"
