################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geomkernel
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################
"""Quaternion rotations using the wxyz convention."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from typing import ClassVar

import numpy as np
from numpy.typing import NDArray

from geomkernel.geometry_types.point import Point3
from geomkernel.geometry_types.vector import Vector3
from geomkernel.math_utils.linalg import SO3
from geomkernel.math_utils.units import Tolerance
from geomkernel.math_utils.units import assert_finite
from geomkernel.math_utils.validation import freeze

from .rotation import require_dim
from .rotation import require_same_rotation


@dataclass(frozen=True, eq=False)
class Quaternion:
    """Quaternion stored in wxyz order."""

    wxyz: NDArray[np.float64]

    DIM: ClassVar[int] = 3

    def __post_init__(self) -> None:
        """Validate quaternion inputs and freeze storage."""
        wxyz: NDArray[np.float64] = np.asarray(self.wxyz, dtype=float)
        if wxyz.shape != (4,):
            raise ValueError("wxyz must be shape (4,)")
        assert_finite(wxyz, "wxyz")
        object.__setattr__(self, "wxyz", freeze(wxyz))

    @classmethod
    def identity(cls) -> "Quaternion":
        """Return the identity quaternion."""
        return Quaternion.from_wxyz(1.0, 0.0, 0.0, 0.0)

    @staticmethod
    def from_wxyz(w: float, x: float, y: float, z: float) -> "Quaternion":
        """Create a quaternion from components."""
        return Quaternion(np.array([w, x, y, z], dtype=float))

    @staticmethod
    def from_axis_angle(axis: Vector3, angle: float) -> "Quaternion":
        """Create a rotation of ``angle`` radians about ``axis``."""
        unit: Vector3 = axis.normalized()
        assert_finite(unit.data, "axis")
        half: float = 0.5 * angle
        xyz: NDArray[np.float64] = unit.data * np.sin(half)
        return Quaternion.from_wxyz(
            float(np.cos(half)), float(xyz[0]), float(xyz[1]), float(xyz[2])
        )

    @staticmethod
    def from_rotvec(w: Vector3 | NDArray[np.float64]) -> "Quaternion":
        """Create a quaternion from a rotation vector."""
        vec: NDArray[np.float64] = np.asarray(
            w.data if isinstance(w, Vector3) else w, dtype=float
        )
        R: NDArray[np.float64] = SO3.exp(vec)
        return Quaternion.from_matrix(R)

    @staticmethod
    def from_matrix(R: NDArray[np.float64]) -> "Quaternion":
        """Create a quaternion from a rotation matrix."""
        mat: NDArray[np.float64] = np.asarray(R, dtype=float)
        if mat.shape != (3, 3):
            raise ValueError("R must be shape (3, 3)")
        assert_finite(mat, "R")
        trace: float = float(np.trace(mat))
        if trace > 0.0:
            s: float = float(np.sqrt(trace + 1.0) * 2.0)
            w: float = 0.25 * s
            x: float = float((mat[2, 1] - mat[1, 2]) / s)
            y: float = float((mat[0, 2] - mat[2, 0]) / s)
            z: float = float((mat[1, 0] - mat[0, 1]) / s)
        else:
            diag: NDArray[np.float64] = np.diag(mat)
            idx: int = int(np.argmax(diag))
            if idx == 0:
                s = float(np.sqrt(1.0 + mat[0, 0] - mat[1, 1] - mat[2, 2]) * 2.0)
                w = float((mat[2, 1] - mat[1, 2]) / s)
                x = 0.25 * s
                y = float((mat[0, 1] + mat[1, 0]) / s)
                z = float((mat[0, 2] + mat[2, 0]) / s)
            elif idx == 1:
                s = float(np.sqrt(1.0 + mat[1, 1] - mat[0, 0] - mat[2, 2]) * 2.0)
                w = float((mat[0, 2] - mat[2, 0]) / s)
                x = float((mat[0, 1] + mat[1, 0]) / s)
                y = 0.25 * s
                z = float((mat[1, 2] + mat[2, 1]) / s)
            else:
                s = float(np.sqrt(1.0 + mat[2, 2] - mat[0, 0] - mat[1, 1]) * 2.0)
                w = float((mat[1, 0] - mat[0, 1]) / s)
                x = float((mat[0, 2] + mat[2, 0]) / s)
                y = float((mat[1, 2] + mat[2, 1]) / s)
                z = 0.25 * s
        return Quaternion.from_wxyz(w, x, y, z).normalized()

    def as_matrix(self) -> NDArray[np.float64]:
        """Return the rotation matrix representation."""
        q: NDArray[np.float64] = self.normalized().wxyz
        w: float = float(q[0])
        x: float = float(q[1])
        y: float = float(q[2])
        z: float = float(q[3])
        return np.array(
            [
                [
                    1.0 - 2.0 * (y * y + z * z),
                    2.0 * (x * y - z * w),
                    2.0 * (x * z + y * w),
                ],
                [
                    2.0 * (x * y + z * w),
                    1.0 - 2.0 * (x * x + z * z),
                    2.0 * (y * z - x * w),
                ],
                [
                    2.0 * (x * z - y * w),
                    2.0 * (y * z + x * w),
                    1.0 - 2.0 * (x * x + y * y),
                ],
            ],
            dtype=float,
        )

    def magnitude(self) -> float:
        """Return the quaternion norm."""
        return float(np.linalg.norm(self.wxyz))

    def normalized(self) -> "Quaternion":
        """Return a normalized quaternion."""
        norm: float = self.magnitude()
        if norm < Tolerance.NORM_EPS:
            raise ValueError("Quaternion norm is too small")
        if norm == 1.0:
            return self
        return Quaternion(self.wxyz / norm)

    def conjugate(self) -> "Quaternion":
        """Return the conjugate quaternion."""
        q: NDArray[np.float64] = self.wxyz
        return Quaternion.from_wxyz(
            float(q[0]), float(-q[1]), float(-q[2]), float(-q[3])
        )

    def invert(self) -> "Quaternion":
        """Return the inverse rotation."""
        return self.normalized().conjugate()

    def concat(self, other: "Quaternion") -> "Quaternion":
        """Return the rotation applying ``other`` first, then this one."""
        require_same_rotation(self, other)
        return self * other

    def rotate_vector(self, vec: Vector3) -> Vector3:
        """Rotate a 3-vector by this quaternion."""
        require_dim(vec, 3, "vec")
        return type(vec)(self.as_matrix() @ vec.data)

    def rotate_point(self, point: Point3) -> Point3:
        """Rotate a point about the origin."""
        require_dim(point, 3, "point")
        return type(point)(self.as_matrix() @ point.data)

    def to_wxyz(self) -> NDArray[np.float64]:
        """Return a copy of the quaternion components."""
        return np.array(self.wxyz, dtype=float)

    def almost_equal(self, other: Any, eps: float = Tolerance.APPROX_EPS) -> bool:
        """Check approximate equality, accounting for sign ambiguity."""
        if not isinstance(other, Quaternion):
            return False
        q1: NDArray[np.float64] = self.wxyz
        q2: NDArray[np.float64] = other.wxyz
        if np.allclose(q1, q2, rtol=0.0, atol=eps):
            return True
        return bool(np.allclose(q1, -q2, rtol=0.0, atol=eps))

    def __mul__(self, other: "Quaternion") -> "Quaternion":
        """Multiply two quaternions using the Hamilton product."""
        if not isinstance(other, Quaternion):
            return NotImplemented
        q1: NDArray[np.float64] = self.wxyz
        q2: NDArray[np.float64] = other.wxyz
        w1: float = float(q1[0])
        x1: float = float(q1[1])
        y1: float = float(q1[2])
        z1: float = float(q1[3])
        w2: float = float(q2[0])
        x2: float = float(q2[1])
        y2: float = float(q2[2])
        z2: float = float(q2[3])
        w: float = w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2
        x: float = w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2
        y: float = w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2
        z: float = w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2
        return Quaternion.from_wxyz(w, x, y, z)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return bool(np.array_equal(self.wxyz, other.wxyz))

    def __hash__(self) -> int:
        return hash(tuple(self.wxyz.tolist()))

    def __str__(self) -> str:
        w, x, y, z = self.wxyz.tolist()
        return f"{w} + {x}i + {y}j + {z}k"
