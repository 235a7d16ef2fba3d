################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geomkernel
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################
"""Displacement vectors in two, three and four dimensions."""

from __future__ import annotations

import logging
import numbers
from typing import Any
from typing import ClassVar
from typing import TypeVar

import numpy as np
from numpy.typing import NDArray

from geomkernel.geometry_types.components import Components


_LOG: logging.Logger = logging.getLogger(__name__)

VectorT = TypeVar("VectorT", bound="Vector")


class Vector(Components):
    """A displacement with a magnitude and a direction."""

    @classmethod
    def zero(cls: type[VectorT]) -> VectorT:
        """Return the zero displacement."""
        return cls(np.zeros(cls.DIM, dtype=float))

    def magnitude_squared(self) -> float:
        """Return the squared Euclidean length."""
        return float(np.dot(self.data, self.data))

    def magnitude(self) -> float:
        """Return the Euclidean length."""
        return float(np.sqrt(self.magnitude_squared()))

    def normalized(self: VectorT) -> VectorT:
        """Return the unit vector in the same direction.

        Normalizing a zero-length vector divides zero by zero and yields NaN
        components. The result is returned as-is so callers can detect it.
        """
        mag: float = self.magnitude()
        if mag == 0.0:
            _LOG.debug("Normalizing zero-length vector %s", self)
        data: NDArray[np.float64]
        with np.errstate(divide="ignore", invalid="ignore"):
            data = self.data / mag
        return type(self)(data)

    def dot(self, other: "Vector") -> float:
        """Return the dot product with a vector of the same dimension."""
        self._require_same(other)
        return float(np.dot(self.data, other.data))

    def mul_elementwise(self: VectorT, other: VectorT) -> VectorT:
        """Return the component-wise product."""
        self._require_same(other)
        return type(self)(self.data * other.data)

    def extend(self, w: float) -> "Vector":
        """Append a trailing component, producing an (N+1)-vector."""
        return vector_type(self.DIM + 1)(np.append(self.data, w))

    def truncate(self) -> "Vector":
        """Drop the trailing component, producing an (N-1)-vector."""
        return vector_type(self.DIM - 1)(self.data[:-1])

    def _require_same(self, other: Any) -> None:
        if type(other) is not type(self):
            raise ValueError(
                f"expected {type(self).__name__}, got {type(other).__name__}"
            )

    def __add__(self: VectorT, other: Any) -> VectorT:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self.data + other.data)

    def __sub__(self: VectorT, other: Any) -> VectorT:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self.data - other.data)

    def __neg__(self: VectorT) -> VectorT:
        return type(self)(-self.data)

    def __mul__(self: VectorT, other: Any) -> VectorT:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return type(self)(self.data * other)

    def __rmul__(self: VectorT, other: Any) -> VectorT:
        return self.__mul__(other)

    def __truediv__(self: VectorT, other: Any) -> VectorT:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return type(self)(self.data / other)


class Vector2(Vector):
    """Two-dimensional displacement."""

    DIM: ClassVar[int] = 2

    @staticmethod
    def from_xy(x: float, y: float) -> "Vector2":
        """Create a vector from components."""
        return Vector2(np.array([x, y]))

    def perp_dot(self, other: "Vector2") -> float:
        """Return the z component of the 2D cross product."""
        self._require_same(other)
        return float(self.data[0] * other.data[1] - self.data[1] * other.data[0])


class Vector3(Vector):
    """Three-dimensional displacement."""

    DIM: ClassVar[int] = 3

    @staticmethod
    def from_xyz(x: float, y: float, z: float) -> "Vector3":
        """Create a vector from components."""
        return Vector3(np.array([x, y, z]))

    @staticmethod
    def unit_x() -> "Vector3":
        """Return the x axis."""
        return Vector3.from_xyz(1.0, 0.0, 0.0)

    @staticmethod
    def unit_y() -> "Vector3":
        """Return the y axis."""
        return Vector3.from_xyz(0.0, 1.0, 0.0)

    @staticmethod
    def unit_z() -> "Vector3":
        """Return the z axis."""
        return Vector3.from_xyz(0.0, 0.0, 1.0)

    def cross(self, other: "Vector3") -> "Vector3":
        """Return the cross product."""
        self._require_same(other)
        return Vector3(np.cross(self.data, other.data))


class Vector4(Vector):
    """Four-dimensional vector, mostly used for homogeneous coordinates."""

    DIM: ClassVar[int] = 4

    @staticmethod
    def from_xyzw(x: float, y: float, z: float, w: float) -> "Vector4":
        """Create a vector from components."""
        return Vector4(np.array([x, y, z, w]))


_VECTOR_TYPES: dict[int, type[Vector]] = {
    Vector2.DIM: Vector2,
    Vector3.DIM: Vector3,
    Vector4.DIM: Vector4,
}


def vector_type(dim: int) -> type[Vector]:
    """Return the vector class for a dimension."""
    try:
        return _VECTOR_TYPES[dim]
    except KeyError:
        raise ValueError(f"no vector type with {dim} components") from None
