################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geomkernel
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################
"""Coordinate points for positional data.

Points describe locations in space rather than a magnitude and a direction.
They share their storage layout with the vector types but support a
different set of operations: two points can only be subtracted, which yields
the displacement between them, and a point moves by adding a vector.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Any
from typing import ClassVar
from typing import TypeVar

import numpy as np

from geomkernel.geometry_types.components import Components
from geomkernel.geometry_types.vector import Vector
from geomkernel.geometry_types.vector import Vector2
from geomkernel.geometry_types.vector import Vector3
from geomkernel.geometry_types.vector import vector_type


if TYPE_CHECKING:
    from geomkernel.geometry_types.ray import Ray
    from geomkernel.rotation.rotation import Rotation


PointT = TypeVar("PointT", bound="Point")


class Point(Components):
    """A coordinate in N-dimensional space."""

    @classmethod
    def origin(cls: type[PointT]) -> PointT:
        """Return the zero coordinate."""
        return cls(np.zeros(cls.DIM, dtype=float))

    @classmethod
    def from_vector(cls: type[PointT], vec: Vector) -> PointT:
        """Reinterpret a vector as a point.

        The point shares the vector's read-only storage, no copy is made.
        """
        if vec.DIM != cls.DIM:
            raise ValueError(f"{cls.__name__} requires a {cls.DIM}D vector")
        return cls(vec.data)

    @classmethod
    def from_homogeneous(cls: type[PointT], vec: Vector) -> PointT:
        """Create a point from homogeneous coordinates.

        Divides by the trailing component and drops it.
        """
        if vec.DIM != cls.DIM + 1:
            raise ValueError(f"{cls.__name__} requires a {cls.DIM + 1}D vector")
        return cls(vec.data[:-1] / vec.data[-1])

    def to_vector(self) -> Vector:
        """Reinterpret the point as its displacement from the origin.

        The vector shares the point's read-only storage, no copy is made.
        """
        return vector_type(self.DIM)(self.data)

    def to_homogeneous(self) -> Vector:
        """Return homogeneous coordinates with a trailing 1."""
        return self.to_vector().extend(1)

    def translate(self: PointT, offset: Vector) -> PointT:
        """Apply a displacement vector to the point."""
        return self + offset

    def scale(self: PointT, factor: Vector) -> PointT:
        """Scale the distance from the origin per axis.

        This is not a scale about an arbitrary center; translate the center
        to the origin first if that is what is wanted.
        """
        return self * factor

    def distance_squared(self: PointT, other: PointT) -> float:
        """Return the squared distance to another point.

        Cheaper than ``distance`` when only comparisons are needed.
        """
        return (other - self).magnitude_squared()

    def distance(self: PointT, other: PointT) -> float:
        """Return the distance to another point."""
        return float(np.sqrt(other.distance_squared(self)))

    def direction(self: PointT, other: PointT) -> Vector:
        """Return the unit vector pointing towards another point.

        Coincident points have no direction and produce NaN components.
        """
        return (other - self).normalized()

    def ray_to(self: PointT, other: PointT) -> "Ray":
        """Return a normalized ray from this point towards another point."""
        from geomkernel.geometry_types.ray import Ray

        return Ray(self, self.direction(other))

    def rotate(self: PointT, rotation: "Rotation") -> PointT:
        """Rotate the point about the origin."""
        return rotation.rotate_point(self)

    def __add__(self: PointT, other: Any) -> PointT:
        if not isinstance(other, Vector) or other.DIM != self.DIM:
            return NotImplemented
        return type(self)(self.data + other.data)

    def __sub__(self, other: Any) -> Vector:
        if type(other) is not type(self):
            return NotImplemented
        return vector_type(self.DIM)(self.data - other.data)

    def __mul__(self: PointT, other: Any) -> PointT:
        if not isinstance(other, Vector) or other.DIM != self.DIM:
            return NotImplemented
        return type(self)(self.data * other.data)


class Point2(Point):
    """A two-dimensional coordinate."""

    DIM: ClassVar[int] = 2

    @staticmethod
    def from_xy(x: float, y: float) -> "Point2":
        """Create a point from coordinates."""
        return Point2(np.array([x, y]))

    def to_vector(self) -> Vector2:
        """Reinterpret the point as a 2D vector."""
        return Vector2(self.data)


class Point3(Point):
    """A three-dimensional coordinate."""

    DIM: ClassVar[int] = 3

    @staticmethod
    def from_xyz(x: float, y: float, z: float) -> "Point3":
        """Create a point from coordinates."""
        return Point3(np.array([x, y, z]))

    def to_vector(self) -> Vector3:
        """Reinterpret the point as a 3D vector."""
        return Vector3(self.data)


_POINT_TYPES: dict[int, type[Point]] = {
    Point2.DIM: Point2,
    Point3.DIM: Point3,
}


def point_type(dim: int) -> type[Point]:
    """Return the point class for a dimension."""
    try:
        return _POINT_TYPES[dim]
    except KeyError:
        raise ValueError(f"no point type with {dim} coordinates") from None
