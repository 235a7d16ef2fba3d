################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geomkernel
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################
"""Tests for rays."""

from __future__ import annotations

import pytest

from geomkernel.geometry_types.point import Point2
from geomkernel.geometry_types.point import Point3
from geomkernel.geometry_types.ray import Ray
from geomkernel.geometry_types.vector import Vector2
from geomkernel.geometry_types.vector import Vector3


def test_construction() -> None:
    """Checks a ray keeps its origin and direction."""
    ray: Ray = Ray(Point3.from_xyz(1.0, 2.0, 3.0), Vector3.unit_x())
    assert ray.dim == 3
    assert ray.origin == Point3.from_xyz(1.0, 2.0, 3.0)
    assert ray.direction == Vector3.unit_x()


def test_rejects_swapped_roles() -> None:
    """Checks the origin must be a point and the direction a vector."""
    with pytest.raises(ValueError):
        Ray(Vector3.unit_x(), Vector3.unit_y())  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        Ray(Point3.origin(), Point3.origin())  # type: ignore[arg-type]


def test_rejects_mixed_dimensions() -> None:
    """Checks origin and direction must share a dimension."""
    with pytest.raises(ValueError):
        Ray(Point2.origin(), Vector3.unit_x())


def test_equality() -> None:
    """Checks exact and approximate ray equality."""
    a: Ray = Ray(Point2.from_xy(0.0, 0.0), Vector2.from_xy(1.0, 0.0))
    b: Ray = Ray(Point2.from_xy(0.0, 0.0), Vector2.from_xy(1.0, 0.0))
    c: Ray = Ray(Point2.from_xy(0.0, 1e-9), Vector2.from_xy(1.0, 0.0))
    assert a == b
    assert a != c
    assert a.almost_equal(c)
    assert str(a) == "Ray(origin([0.0, 0.0]), direction([1.0, 0.0]))"
