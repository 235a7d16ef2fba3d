################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of geomkernel
#
#  SPDX-License-Identifier: Apache-2.0
#
################################################################################
"""Similarity transforms stored as scale, rotation and displacement."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from geomkernel.geometry_types.point import Point
from geomkernel.geometry_types.vector import Vector
from geomkernel.geometry_types.vector import vector_type
from geomkernel.math_utils.linalg import Linalg
from geomkernel.math_utils.units import Tolerance
from geomkernel.math_utils.units import is_approx_zero
from geomkernel.math_utils.validation import as_scalar
from geomkernel.rotation.quat import Quaternion
from geomkernel.rotation.rotation import Rotation
from geomkernel.rotation.rotation import require_dim

from .affine_matrix import AffineMatrix3
from .transform import Transform


_LOG: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Decomposed(Transform):
    """A transform made of a uniform scale, a rotation and a displacement.

    Represents ``p -> rot(scale * p) + disp``. Only uniform scale is
    representable, so every value is a similarity transform. Works in any
    dimension for which a rotation type exists (``Rotation2`` in the plane,
    ``Quaternion`` or ``RotationMatrix3`` in space).
    """

    scale: float
    rot: Rotation
    disp: Vector

    def __post_init__(self) -> None:
        """Validate component types and dimensions."""
        object.__setattr__(self, "scale", as_scalar(self.scale, "scale"))
        if not isinstance(self.disp, Vector):
            raise ValueError("disp must be a vector")
        if not isinstance(self.rot, Rotation):
            raise ValueError("rot must implement the rotation capability")
        require_dim(self.disp, self.rot.DIM, "disp")

    @classmethod
    def identity(cls, rotation_type: type = Quaternion) -> "Decomposed":
        """Return the identity: unit scale, no rotation, no displacement."""
        rot: Rotation = rotation_type.identity()
        return cls(1.0, rot, vector_type(rot.DIM).zero())

    @property
    def dim(self) -> int:
        """Return the dimension of the space the transform acts on."""
        return self.disp.DIM

    def transform_vector(self, vec: Vector) -> Vector:
        """Scale then rotate a vector; the displacement is ignored."""
        return self.rot.rotate_vector(vec * self.scale)

    def transform_point(self, point: Point) -> Point:
        """Scale, rotate, then displace a point."""
        scaled: Point = type(point).from_vector(point.to_vector() * self.scale)
        return self.rot.rotate_point(scaled) + self.disp

    def concat(self, other: "Decomposed") -> "Decomposed":
        """Return the transform applying ``other`` first, then this one.

        The other displacement lives in this transform's frame, so it is
        scaled and rotated by ``self`` before this displacement is added.
        """
        if not isinstance(other, Decomposed):
            raise TypeError(f"cannot concatenate Decomposed with {type(other)}")
        return Decomposed(
            self.scale * other.scale,
            self.rot.concat(other.rot),
            self.transform_as_point(other.disp),
        )

    def invert(self, eps: Optional[float] = None) -> Optional["Decomposed"]:
        """Return the closed-form inverse, or None when the scale is ~0.

        ``eps`` defaults to ``Tolerance.INVERT_EPS``.
        """
        tol: float = Tolerance.INVERT_EPS if eps is None else eps
        if is_approx_zero(self.scale, tol):
            _LOG.debug("Decomposed transform is not invertible, scale=%s", self.scale)
            return None
        s: float = 1.0 / self.scale
        r: Rotation = self.rot.invert()
        d: Vector = r.rotate_vector(self.disp) * -s
        return Decomposed(s, r, d)

    def as_homogeneous(self) -> NDArray[np.float64]:
        """Return the (N+1)x(N+1) homogeneous matrix of the transform."""
        n: int = self.dim
        mat: NDArray[np.float64] = Linalg.extend_linear(
            self.rot.as_matrix() * self.scale
        )
        mat[:n, n] = self.disp.data
        return mat

    def as_matrix4(self) -> NDArray[np.float64]:
        """Return the 4x4 homogeneous matrix of a 3D transform."""
        if self.dim != 3:
            raise ValueError("as_matrix4 requires a 3D transform")
        return self.as_homogeneous()

    def to_affine(self) -> AffineMatrix3:
        """Convert a 3D transform to matrix form."""
        return AffineMatrix3(self.as_matrix4())

    def almost_equal(self, other: Any, eps: float = Tolerance.APPROX_EPS) -> bool:
        """Check approximate equality of every component."""
        if not isinstance(other, Decomposed):
            return False
        return (
            abs(self.scale - other.scale) <= eps
            and self.rot.almost_equal(other.rot, eps)
            and self.disp.almost_equal(other.disp, eps)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Decomposed):
            return NotImplemented
        return (
            self.scale == other.scale
            and self.rot == other.rot
            and self.disp == other.disp
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"(scale({self.scale}), rot({self.rot}), disp({self.disp}))"
