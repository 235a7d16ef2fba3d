################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geomkernel
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################
"""Rotations stored as orthonormal matrices."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from typing import ClassVar
from typing import TypeVar

import numpy as np
from numpy.typing import NDArray

from geomkernel.geometry_types.point import Point
from geomkernel.geometry_types.vector import Vector
from geomkernel.geometry_types.vector import Vector3
from geomkernel.math_utils.linalg import SO3
from geomkernel.math_utils.units import Tolerance
from geomkernel.math_utils.units import assert_finite
from geomkernel.math_utils.validation import as_float_matrix

from .quat import Quaternion
from .rotation import require_dim
from .rotation import require_same_rotation


# Orthonormality tolerance above which 3x3 inputs are projected onto SO(3)
ORTHONORMAL_ATOL: float = 1e-9

MatrixRotationT = TypeVar("MatrixRotationT", bound="MatrixRotation")
VectorT = TypeVar("VectorT", bound=Vector)
PointT = TypeVar("PointT", bound=Point)


@dataclass(frozen=True, eq=False)
class MatrixRotation:
    """Rotation about the origin stored as an NxN orthonormal matrix."""

    mat: NDArray[np.float64]

    DIM: ClassVar[int] = 0

    def __post_init__(self) -> None:
        """Validate the matrix shape and freeze storage."""
        mat: NDArray[np.float64] = as_float_matrix(
            self.mat, (self.DIM, self.DIM), type(self).__name__
        )
        assert_finite(mat, "mat")
        object.__setattr__(self, "mat", mat)

    @classmethod
    def identity(cls: type[MatrixRotationT]) -> MatrixRotationT:
        """Return the identity rotation."""
        return cls(np.eye(cls.DIM, dtype=float))

    def as_matrix(self) -> NDArray[np.float64]:
        """Return a copy of the rotation matrix."""
        return np.array(self.mat, dtype=float)

    def rotate_vector(self, vec: VectorT) -> VectorT:
        """Rotate a vector."""
        require_dim(vec, self.DIM, "vec")
        return type(vec)(self.mat @ vec.data)

    def rotate_point(self, point: PointT) -> PointT:
        """Rotate a point about the origin."""
        require_dim(point, self.DIM, "point")
        return type(point)(self.mat @ point.data)

    def concat(self: MatrixRotationT, other: MatrixRotationT) -> MatrixRotationT:
        """Return the rotation applying ``other`` first, then this one."""
        require_same_rotation(self, other)
        return type(self)(self.mat @ other.mat)

    def invert(self: MatrixRotationT) -> MatrixRotationT:
        """Return the inverse rotation, the transpose of an orthonormal matrix."""
        return type(self)(self.mat.T)

    def almost_equal(self, other: Any, eps: float = Tolerance.APPROX_EPS) -> bool:
        """Check element-wise equality within eps."""
        if type(other) is not type(self):
            return False
        return bool(np.allclose(self.mat, other.mat, rtol=0.0, atol=eps))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatrixRotation):
            return NotImplemented
        return type(other) is type(self) and bool(np.array_equal(self.mat, other.mat))

    def __hash__(self) -> int:
        return hash((type(self), tuple(self.mat.ravel().tolist())))

    def __str__(self) -> str:
        return str(self.mat.tolist())


class Rotation2(MatrixRotation):
    """Rotation of the plane about the origin."""

    DIM: ClassVar[int] = 2

    @staticmethod
    def from_angle(theta: float) -> "Rotation2":
        """Create a counterclockwise rotation by ``theta`` radians."""
        c: float = float(np.cos(theta))
        s: float = float(np.sin(theta))
        return Rotation2(np.array([[c, -s], [s, c]], dtype=float))

    def angle(self) -> float:
        """Return the rotation angle in radians, in (-pi, pi]."""
        return float(np.arctan2(self.mat[1, 0], self.mat[0, 0]))


class RotationMatrix3(MatrixRotation):
    """Rotation of 3D space stored as a 3x3 matrix.

    Inputs that are not already orthonormal with a positive determinant are
    projected onto the nearest rotation.
    """

    DIM: ClassVar[int] = 3

    def __post_init__(self) -> None:
        """Validate the matrix and project it onto SO(3) when needed."""
        super().__post_init__()
        mat: NDArray[np.float64] = self.mat
        orthonormal: bool = bool(
            np.allclose(mat.T @ mat, np.eye(3), atol=ORTHONORMAL_ATOL)
        )
        if not orthonormal or np.linalg.det(mat) < 0.0:
            object.__setattr__(
                self, "mat", as_float_matrix(SO3.project_to_so3(mat), (3, 3), "mat")
            )

    @staticmethod
    def from_axis_angle(axis: Vector3, angle: float) -> "RotationMatrix3":
        """Create a rotation of ``angle`` radians about ``axis``."""
        unit: Vector3 = axis.normalized()
        assert_finite(unit.data, "axis")
        return RotationMatrix3(SO3.exp(unit.data * angle))

    @staticmethod
    def from_quaternion(q: Quaternion) -> "RotationMatrix3":
        """Create a rotation matrix from a quaternion."""
        return RotationMatrix3(q.as_matrix())

    def to_quaternion(self) -> Quaternion:
        """Return the equivalent unit quaternion."""
        return Quaternion.from_matrix(self.mat)
